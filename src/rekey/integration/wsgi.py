"""WSGI middleware, usable with Flask or any other WSGI application."""

from __future__ import annotations

import io
import logging
from collections.abc import Callable, Iterable
from typing import Any

from rekey.config.models import RekeyConfig
from rekey.core import rewrite_body, should_rewrite
from rekey.exceptions import BodyReadError
from rekey.integration import resolve_config
from rekey.logging.error_logger import log_body_processing_error

logger = logging.getLogger(__name__)

WSGIApp = Callable[[dict[str, Any], Callable[..., Any]], Iterable[bytes]]


def read_input(environ: dict[str, Any]) -> bytes:
    """Drain ``wsgi.input``.

    Reads exactly ``CONTENT_LENGTH`` bytes when the length is declared. Without
    a length the stream is read to EOF only if the server marks it as
    terminated (``wsgi.input_terminated``); reading further could block on
    the client connection. The stream belongs to the server and is not
    closed.

    Raises:
        BodyReadError: If the length is unusable or the stream fails or ends early
    """
    stream = environ["wsgi.input"]
    length = (environ.get("CONTENT_LENGTH") or "").strip()

    if not length:
        if not environ.get("wsgi.input_terminated"):
            raise BodyReadError("Request body length is unknown")
        return _read(stream)

    try:
        expected = int(length)
    except ValueError as e:
        raise BodyReadError(f"Invalid Content-Length: {length!r}", cause=e) from e
    if expected < 0:
        raise BodyReadError(f"Invalid Content-Length: {length!r}")

    data = _read(stream, expected) if expected > 0 else b""
    if len(data) < expected:
        raise BodyReadError(
            "Request body shorter than declared Content-Length",
            expected=expected,
            received=len(data),
        )
    return data


def _read(stream: Any, *args: int) -> bytes:
    try:
        return stream.read(*args)
    except Exception as e:
        raise BodyReadError(f"Failed to read request body: {e}", cause=e) from e


class WSGIMiddleware:
    """Rename a top-level key in JSON request bodies before they reach ``app``."""

    def __init__(
        self,
        app: WSGIApp,
        config: RekeyConfig | None = None,
        config_dict: dict[str, Any] | None = None,
        config_file: str | None = None,
    ):
        self.app = app
        self.config = resolve_config(config, config_dict, config_file)

    def __call__(
        self, environ: dict[str, Any], start_response: Callable[..., Any]
    ) -> Iterable[bytes]:
        if environ.get("wsgi.input") is None or not should_rewrite(
            environ.get("CONTENT_TYPE"),
            environ.get("HTTP_CONTENT_ENCODING"),
            self.config.rename,
        ):
            return self.app(environ, start_response)

        try:
            original = read_input(environ)
        except BodyReadError as e:
            log_body_processing_error(
                environ.get("CONTENT_TYPE", ""),
                e,
                level=logging.DEBUG,
                middleware=self.config.name,
                path=environ.get("PATH_INFO"),
            )
            return self.app(environ, start_response)

        result = rewrite_body(original, self.config.rename)
        if result.modified:
            logger.debug(
                f"[{self.config.name}] Renamed {self.config.rename.source_key!r} "
                f"in {environ.get('REQUEST_METHOD')} {environ.get('PATH_INFO')}"
            )

        environ["wsgi.input"] = io.BytesIO(result.body)
        environ["CONTENT_LENGTH"] = str(len(result.body))
        environ.pop("HTTP_TRANSFER_ENCODING", None)
        return self.app(environ, start_response)


def create_flask_app(app: Any, **kwargs: Any) -> Any:
    """Install :class:`WSGIMiddleware` on a Flask application.

    Keyword arguments are passed to :class:`WSGIMiddleware`.

    Returns:
        The same Flask application, for chaining
    """
    app.wsgi_app = WSGIMiddleware(app.wsgi_app, **kwargs)
    return app
