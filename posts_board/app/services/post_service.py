"""
Business logic for posts.

``PostService`` sits between the route handlers and the in‑memory
``PostStore``.  It never raises for unknown ids: lookups return
``None`` and updates report ``False`` so the handlers can decide how
to present the not‑found case.
"""

import logging
from typing import List, Optional

from ..core.store import PostStore
from ..schemas.post import Post, PostCreate, PostUpdate


logger = logging.getLogger(__name__)


class PostService:
    """Service for listing, creating, viewing and editing posts."""

    def __init__(self, store: PostStore) -> None:
        self.store = store

    async def list_posts(self) -> List[Post]:
        """Return all posts in the order they were created."""
        return self.store.list_all()

    async def get_post(self, post_id: str) -> Optional[Post]:
        """Retrieve a single post by its id, or ``None``."""
        post = self.store.find_by_id(post_id)
        if post is None:
            logger.warning("Post %s not found", post_id)
        return post

    async def create_post(self, data: PostCreate) -> Post:
        """Store a new post and return it with its generated id."""
        post = self.store.create(data.username, data.content)
        logger.info("Created post %s by '%s'", post.id, post.username)
        return post

    async def update_post(self, post_id: str, data: PostUpdate) -> bool:
        """Replace the content of a post.

        Returns ``True`` when the post existed and was updated.  An
        unknown id is logged and otherwise ignored.
        """
        updated = self.store.update_content(post_id, data.content)
        if updated:
            logger.info("Updated post %s: %r", post_id, data.content)
        else:
            logger.warning("Cannot update post %s: not found", post_id)
        return updated
