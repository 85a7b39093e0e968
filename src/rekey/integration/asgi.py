"""ASGI middleware for Starlette, FastAPI and other ASGI applications.

Usage:
    from rekey.integration.asgi import ASGIMiddleware

    app = ASGIMiddleware(app, config_dict={"oldKey": "user_id", "newKey": "userId"})
"""

from __future__ import annotations

import logging
from typing import Any

from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from rekey.config.models import RekeyConfig
from rekey.core import rewrite_body, should_rewrite
from rekey.exceptions import BodyReadError
from rekey.integration import resolve_config
from rekey.logging.error_logger import log_body_processing_error

logger = logging.getLogger(__name__)


async def read_body(receive: Receive) -> bytes:
    """Collect ``http.request`` messages until ``more_body`` is false.

    Raises:
        BodyReadError: If the client disconnects before the body is complete
    """
    chunks: list[bytes] = []
    more_body = True
    while more_body:
        message = await receive()
        if message["type"] == "http.disconnect":
            raise BodyReadError(
                "Client disconnected while sending body",
                bytes_received=sum(len(c) for c in chunks),
            )
        chunks.append(message.get("body", b""))
        more_body = message.get("more_body", False)
    return b"".join(chunks)


def replay_receive(body: bytes, receive: Receive) -> Receive:
    """Return a ``receive`` that yields ``body`` once, then defers to ``receive``."""
    sent = False

    async def _receive() -> Message:
        nonlocal sent
        if not sent:
            sent = True
            return {"type": "http.request", "body": body, "more_body": False}
        return await receive()

    return _receive


def with_body_length(scope: Scope, length: int) -> Scope:
    """Copy ``scope`` with ``content-length`` set and ``transfer-encoding`` removed."""
    scope = dict(scope)
    scope["headers"] = list(scope.get("headers", []))
    headers = MutableHeaders(scope=scope)
    headers["content-length"] = str(length)
    del headers["transfer-encoding"]
    return scope


class ASGIMiddleware:
    """Rename a top-level key in JSON request bodies before they reach ``app``."""

    def __init__(
        self,
        app: ASGIApp,
        config: RekeyConfig | None = None,
        config_dict: dict[str, Any] | None = None,
        config_file: str | None = None,
    ):
        self.app = app
        self.config = resolve_config(config, config_dict, config_file)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = Headers(scope=scope)
        if not should_rewrite(
            headers.get("content-type"),
            headers.get("content-encoding"),
            self.config.rename,
        ):
            await self.app(scope, receive, send)
            return

        try:
            original = await read_body(receive)
        except BodyReadError as e:
            log_body_processing_error(
                headers.get("content-type", ""),
                e,
                level=logging.DEBUG,
                middleware=self.config.name,
                path=scope.get("path"),
            )
            await self.app(scope, receive, send)
            return

        result = rewrite_body(original, self.config.rename)
        if result.modified:
            logger.debug(
                f"[{self.config.name}] Renamed {self.config.rename.source_key!r} "
                f"in {scope.get('method')} {scope.get('path')}"
            )

        await self.app(
            with_body_length(scope, len(result.body)),
            replay_receive(result.body, receive),
            send,
        )


class ASGIMiddlewareFactory:
    """Wrap several ASGI applications with one shared configuration."""

    def __init__(
        self,
        config: RekeyConfig | None = None,
        config_dict: dict[str, Any] | None = None,
        config_file: str | None = None,
    ):
        self.config = resolve_config(config, config_dict, config_file)

    def wrap(self, app: ASGIApp) -> ASGIMiddleware:
        return ASGIMiddleware(app, config=self.config)
