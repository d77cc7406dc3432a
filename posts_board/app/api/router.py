"""
Top‑level router.

Aggregates the domain routers under their prefixes.  When new pages
are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import posts

router = APIRouter()

router.include_router(posts.router, prefix="/posts", tags=["posts"])
