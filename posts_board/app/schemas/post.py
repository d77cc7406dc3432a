"""
Pydantic models for posts.

A post is a short piece of text signed with a free‑form username.
``PostCreate`` and ``PostUpdate`` describe the form payloads accepted
by the create and update routes; both default missing fields to empty
strings instead of rejecting the request.
"""

from pydantic import BaseModel, Field


class Post(BaseModel):
    """A stored post."""

    id: str = Field(..., description="Opaque identifier assigned at creation")
    username: str = Field(..., examples=["alice"])
    content: str = Field(..., examples=["hello"])


class PostCreate(BaseModel):
    """Schema for creating a post."""

    username: str = ""
    content: str = ""


class PostUpdate(BaseModel):
    """Schema for updating a post.  Only the content is editable."""

    content: str = ""
