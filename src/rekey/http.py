"""Request types consumed by :class:`~rekey.middleware.BodyKeyRenamer`."""

from __future__ import annotations

import io
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import IO, Any, Protocol

from starlette.datastructures import MutableHeaders


class RequestProtocol(Protocol):
    """Minimal request interface needed by the middleware.

    ``body`` is a readable, closable binary stream (or None when the request
    has no body). ``content_length`` is -1 when unknown.
    """

    body: IO[bytes] | None
    headers: MutableHeaders
    content_length: int
    transfer_encoding: list[str]


# Next stage: called with the response sink and the request, result ignored.
Handler = Callable[[Any, RequestProtocol], object]


@dataclass
class HTTPRequest:
    """A plain in-process HTTP request."""

    method: str = "POST"
    path: str = "/"
    headers: MutableHeaders = field(default_factory=MutableHeaders)
    body: IO[bytes] | None = None
    content_length: int = -1
    transfer_encoding: list[str] = field(default_factory=list)

    @classmethod
    def build(
        cls,
        body: bytes | None = None,
        headers: Mapping[str, str] | None = None,
        method: str = "POST",
        path: str = "/",
        chunked: bool = False,
    ) -> HTTPRequest:
        """Create a request over an in-memory body.

        With ``chunked=True`` the request is marked as using chunked transfer
        encoding and its length is unknown, as a server would present it.
        """
        request = cls(method=method, path=path, headers=MutableHeaders(headers or {}))
        if body is not None:
            request.body = io.BytesIO(body)
            if chunked:
                request.transfer_encoding = ["chunked"]
            else:
                request.content_length = len(body)
        return request

    def read_body(self) -> bytes:
        """Read the remaining body (used by downstream handlers)."""
        if self.body is None:
            return b""
        return self.body.read()
