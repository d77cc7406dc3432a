"""
Post pages.

These routes list, create, show and edit posts.  Every handler is a
one‑shot translation of the request into a ``PostService`` call
followed by either a rendered view or a redirect back to the list.

An unknown id is never an error: the show and edit pages render a
"not found" placeholder, and an update of an unknown post is a no‑op
redirect.
"""

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from posts_board.app.api.deps import get_post_service
from posts_board.app.core.templating import render
from posts_board.app.schemas.post import PostCreate, PostUpdate
from posts_board.app.services.post_service import PostService


router = APIRouter()

LIST_PATH = "/posts"


def _redirect_to_list() -> RedirectResponse:
    return RedirectResponse(url=LIST_PATH, status_code=status.HTTP_302_FOUND)


@router.get("", response_class=HTMLResponse, name="list_posts")
async def list_posts(
    request: Request,
    service: PostService = Depends(get_post_service),
):
    """Render every post in creation order."""
    posts = await service.list_posts()
    return render(request, "index.html", {"posts": posts})


@router.get("/new", response_class=HTMLResponse, name="new_post")
async def new_post(request: Request):
    """Render an empty creation form."""
    return render(request, "new.html")


@router.post("", name="create_post")
async def create_post(
    username: str = Form(""),
    content: str = Form(""),
    service: PostService = Depends(get_post_service),
) -> RedirectResponse:
    """Create a post from the submitted form and go back to the list.

    Missing fields are stored as empty strings.
    """
    await service.create_post(PostCreate(username=username, content=content))
    return _redirect_to_list()


@router.get("/{post_id}", response_class=HTMLResponse, name="show_post")
async def show_post(
    request: Request,
    post_id: str,
    service: PostService = Depends(get_post_service),
):
    """Render a single post, or a placeholder with 404 if it does not exist."""
    post = await service.get_post(post_id)
    status_code = status.HTTP_200_OK if post is not None else status.HTTP_404_NOT_FOUND
    return render(request, "show.html", {"post": post, "post_id": post_id}, status_code=status_code)


@router.get("/{post_id}/edit", response_class=HTMLResponse, name="edit_post")
async def edit_post(
    request: Request,
    post_id: str,
    service: PostService = Depends(get_post_service),
):
    """Render the edit form pre‑filled with the post's current content."""
    post = await service.get_post(post_id)
    status_code = status.HTTP_200_OK if post is not None else status.HTTP_404_NOT_FOUND
    return render(request, "edit.html", {"post": post, "post_id": post_id}, status_code=status_code)


@router.patch("/{post_id}", name="update_post")
async def update_post(
    post_id: str,
    content: str = Form(""),
    service: PostService = Depends(get_post_service),
) -> RedirectResponse:
    """Replace a post's content and go back to the list.

    Updating an unknown post changes nothing; the client is still
    redirected to the list.
    """
    await service.update_post(post_id, PostUpdate(content=content))
    return _redirect_to_list()
