"""Tests for MethodOverrideMiddleware on a bare Starlette app."""

import pytest
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from posts_board.app.core.method_override import MethodOverrideMiddleware


async def echo(request: Request):
    form = await request.form()
    return JSONResponse({"method": request.method, "form": dict(form)})


@pytest.fixture
def client():
    app = Starlette(routes=[Route("/echo", echo, methods=["GET", "POST", "PATCH", "PUT", "DELETE"])])
    app.add_middleware(MethodOverrideMiddleware, field="_method")
    return TestClient(app)


def test_plain_post_untouched(client):
    resp = client.post("/echo", data={"a": "1"})
    assert resp.json() == {"method": "POST", "form": {"a": "1"}}


def test_query_parameter_override(client):
    resp = client.post("/echo?_method=PATCH", data={"content": "x"})
    assert resp.json()["method"] == "PATCH"
    assert resp.json()["form"] == {"content": "x"}


def test_form_field_override_keeps_body(client):
    resp = client.post("/echo", data={"_method": "delete", "content": "x"})
    body = resp.json()
    assert body["method"] == "DELETE"
    assert body["form"]["content"] == "x"


def test_disallowed_method_ignored(client):
    resp = client.post("/echo?_method=GET")
    assert resp.json()["method"] == "POST"


def test_only_post_is_overridden(client):
    resp = client.get("/echo?_method=PATCH")
    assert resp.json()["method"] == "GET"


def test_json_body_not_inspected(client):
    resp = client.post("/echo", json={"_method": "PATCH"})
    assert resp.json()["method"] == "POST"
