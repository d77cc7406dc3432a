"""Request dependencies shared by endpoint modules."""

from fastapi import Request

from posts_board.app.core.store import PostStore
from posts_board.app.services.post_service import PostService


def get_post_store(request: Request) -> PostStore:
    """Return the store owned by the running application."""
    return request.app.state.post_store


def get_post_service(request: Request) -> PostService:
    return PostService(get_post_store(request))
