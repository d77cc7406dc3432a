"""
HTTP method override for plain HTML forms.

Browsers can only submit forms with GET or POST.  A form that wants to
PATCH a post instead POSTs and names the real verb in a ``_method``
query parameter or form field.  ``MethodOverrideMiddleware`` rewrites
the request method before it reaches the router, so routes are
declared with their real verbs and know nothing about the convention.

Only POST requests are considered, and only PATCH, PUT and DELETE are
accepted as replacements.

When the verb is not in the query string, a urlencoded body is read
whole into memory to look for the field and then replayed to the app.
No size limit is applied; the forms served here are a few short fields.
"""

import logging
from typing import List, Optional
from urllib.parse import parse_qs

from starlette.datastructures import Headers, QueryParams
from starlette.types import ASGIApp, Message, Receive, Scope, Send


logger = logging.getLogger(__name__)

ALLOWED_METHODS = frozenset({"PATCH", "PUT", "DELETE"})
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class MethodOverrideMiddleware:
    """ASGI middleware translating ``POST ...?_method=PATCH`` into ``PATCH``."""

    def __init__(self, app: ASGIApp, field: str = "_method") -> None:
        self.app = app
        self.field = field

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] != "POST":
            await self.app(scope, receive, send)
            return

        override = self._normalize(QueryParams(scope.get("query_string", b"")).get(self.field))

        if override is None and self._is_form(scope):
            body = await self._read_body(receive)
            fields = parse_qs(body.decode("latin-1"), keep_blank_values=True)
            values = fields.get(self.field)
            if values:
                override = self._normalize(values[0])
            receive = self._replay(body, receive)

        if override is not None:
            logger.debug("Overriding %s %s with %s", scope["method"], scope["path"], override)
            scope = dict(scope, method=override)

        await self.app(scope, receive, send)

    @staticmethod
    def _normalize(value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        method = value.strip().upper()
        return method if method in ALLOWED_METHODS else None

    @staticmethod
    def _is_form(scope: Scope) -> bool:
        content_type = Headers(scope=scope).get("content-type", "")
        return content_type.split(";")[0].strip().lower() == FORM_CONTENT_TYPE

    @staticmethod
    async def _read_body(receive: Receive) -> bytes:
        chunks: List[bytes] = []
        more_body = True
        while more_body:
            message = await receive()
            if message["type"] != "http.request":
                break
            chunks.append(message.get("body", b""))
            more_body = message.get("more_body", False)
        return b"".join(chunks)

    @staticmethod
    def _replay(body: bytes, upstream: Receive) -> Receive:
        sent = False

        async def receive() -> Message:
            nonlocal sent
            if sent:
                return await upstream()
            sent = True
            return {"type": "http.request", "body": body, "more_body": False}

        return receive
