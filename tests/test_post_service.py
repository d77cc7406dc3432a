"""Tests for PostService."""

import asyncio
import logging

from posts_board.app.core.store import PostStore
from posts_board.app.schemas.post import PostCreate, PostUpdate
from posts_board.app.services.post_service import PostService


def test_create_and_get():
    service = PostService(PostStore())
    post = asyncio.run(service.create_post(PostCreate(username="alice", content="hello")))
    assert asyncio.run(service.get_post(post.id)) == post
    assert asyncio.run(service.list_posts()) == [post]


def test_create_defaults_missing_fields():
    service = PostService(PostStore())
    post = asyncio.run(service.create_post(PostCreate()))
    assert (post.username, post.content) == ("", "")


def test_update_post():
    service = PostService(PostStore())
    post = asyncio.run(service.create_post(PostCreate(username="alice", content="hello")))
    assert asyncio.run(service.update_post(post.id, PostUpdate(content="updated"))) is True
    assert asyncio.run(service.get_post(post.id)).content == "updated"


def test_unknown_ids_are_logged(caplog):
    service = PostService(PostStore())
    with caplog.at_level(logging.WARNING):
        assert asyncio.run(service.get_post("missing")) is None
        assert asyncio.run(service.update_post("missing", PostUpdate(content="x"))) is False
    assert "missing" in caplog.text
    assert asyncio.run(service.list_posts()) == []
