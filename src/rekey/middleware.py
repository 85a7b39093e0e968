"""Request stage that renames a top-level key in JSON request bodies."""

from __future__ import annotations

import io
import logging
from typing import Any

from rekey.config.models import DEFAULT_NAME, RenameConfig
from rekey.core import rewrite_body, should_rewrite
from rekey.exceptions import BodyReadError
from rekey.http import Handler, RequestProtocol
from rekey.logging.error_logger import log_body_processing_error

logger = logging.getLogger(__name__)


class BodyKeyRenamer:
    """Rename ``old_key`` to ``new_key`` in JSON object bodies, then delegate.

    Every call ends in exactly one call to ``next_handler``. Body problems
    (unreadable stream, invalid JSON, non-object document, failed re-encoding)
    never propagate: the request is forwarded with its original body.

    The configuration is shared read-only by all requests going through the
    instance.
    """

    def __init__(
        self,
        next_handler: Handler,
        config: RenameConfig | None = None,
        name: str = DEFAULT_NAME,
    ):
        self.next = next_handler
        self.config = config or RenameConfig()
        self.name = name

    def __call__(self, response: Any, request: RequestProtocol | None) -> None:
        self.serve_http(response, request)

    def serve_http(self, response: Any, request: RequestProtocol | None) -> None:
        if request is None or request.body is None:
            self.next(response, request)
            return

        if not should_rewrite(
            request.headers.get("content-type"),
            request.headers.get("content-encoding"),
            self.config,
        ):
            self.next(response, request)
            return

        try:
            original = self._read_body(request)
        except BodyReadError as e:
            log_body_processing_error(
                request.headers.get("content-type", ""),
                e,
                level=logging.DEBUG,
                middleware=self.name,
            )
            self.next(response, request)
            return

        result = rewrite_body(original, self.config)
        if result.modified:
            logger.debug(
                f"[{self.name}] Renamed {self.config.source_key!r} to "
                f"{self.config.target_key!r} ({len(original)} -> {len(result.body)} bytes)"
            )
        set_body(request, result.body)
        self.next(response, request)

    def _read_body(self, request: RequestProtocol) -> bytes:
        """Drain the body stream, then close it.

        Raises:
            BodyReadError: If the stream fails before reaching EOF
        """
        stream = request.body
        try:
            data = stream.read()
        except Exception as e:
            raise BodyReadError(f"Failed to read request body: {e}", cause=e) from e

        try:
            stream.close()
        except Exception as e:
            # The body is already in memory; a failed close must not block delegation.
            logger.debug(f"[{self.name}] Failed to close request body: {e!r}")
        return data


def set_body(request: RequestProtocol, body: bytes) -> None:
    """Install ``body`` on the request and make the length metadata agree with it."""
    request.body = io.BytesIO(body)
    request.content_length = len(body)
    if request.content_length >= 0:
        request.headers["content-length"] = str(request.content_length)
        request.transfer_encoding = []


def new(
    next_handler: Handler,
    config: RenameConfig | None = None,
    name: str = DEFAULT_NAME,
) -> BodyKeyRenamer:
    """Create a :class:`BodyKeyRenamer` around ``next_handler``."""
    return BodyKeyRenamer(next_handler, config, name)
