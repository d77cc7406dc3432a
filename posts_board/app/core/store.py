"""
In‑memory post store.

``PostStore`` is the single owner of every post held by the process.
Posts live in a plain list so insertion order doubles as display
order; nothing is persisted and the store is empty (or freshly
seeded) after every restart.

All operations take the same lock, so a reader never sees a half
applied mutation.  Records handed out are copies: handlers may read
them for the duration of a request but changes only happen through
``update_content``.
"""

import threading
import uuid
from typing import Iterable, List, Optional, Tuple

from ..schemas.post import Post


SAMPLE_POSTS: Tuple[Tuple[str, str], ...] = (
    ("college", "i love coding !"),
    ("sonam", "hard work is important to achieve success !"),
    ("sumit", "i got selected for my first internship !"),
)


class PostStore:
    """Ordered, lock‑protected collection of posts."""

    def __init__(self, initial: Iterable[Tuple[str, str]] = ()) -> None:
        self._posts: List[Post] = []
        self._lock = threading.Lock()
        for username, content in initial:
            self.create(username, content)

    def __len__(self) -> int:
        with self._lock:
            return len(self._posts)

    def list_all(self) -> List[Post]:
        """Return every post in insertion order."""
        with self._lock:
            return [post.model_copy() for post in self._posts]

    def find_by_id(self, post_id: str) -> Optional[Post]:
        """Return the post with ``post_id`` or ``None`` if there is none."""
        with self._lock:
            post = self._find(post_id)
            return post.model_copy() if post is not None else None

    def create(self, username: str, content: str) -> Post:
        """Append a new post with a freshly generated id and return it."""
        with self._lock:
            post_id = self._new_id()
            post = Post(id=post_id, username=username, content=content)
            self._posts.append(post)
            return post.model_copy()

    def update_content(self, post_id: str, content: str) -> bool:
        """Overwrite the content of an existing post.

        Returns ``False`` and leaves the store untouched when no post
        has ``post_id``.
        """
        with self._lock:
            post = self._find(post_id)
            if post is None:
                return False
            post.content = content
            return True

    def _find(self, post_id: str) -> Optional[Post]:
        for post in self._posts:
            if post.id == post_id:
                return post
        return None

    def _new_id(self) -> str:
        # uuid4 collisions are not expected, but ids must stay unique.
        while True:
            post_id = str(uuid.uuid4())
            if self._find(post_id) is None:
                return post_id
