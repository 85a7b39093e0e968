"""Structured error logging.

Each helper attaches a ``structured_data`` dict to the emitted record so that
:class:`~rekey.logging.formatters.JSONFormatter` (or any handler inspecting
the record) gets the error code, category and request context as fields
rather than as text.
"""

from __future__ import annotations

import logging
from typing import Any

from rekey.exceptions import RekeyError

logger = logging.getLogger("rekey.errors")


def log_error(
    error: BaseException,
    level: int = logging.ERROR,
    log: logging.Logger | None = None,
    **context: Any,
) -> None:
    """Log an exception with its structured context.

    Args:
        error: The exception to log
        level: Logging level
        log: Logger to use (defaults to ``rekey.errors``)
        **context: Additional fields merged into ``structured_data``
    """
    target = log or logger

    if isinstance(error, RekeyError):
        data = error.to_dict()
        data.update(context)
        message = str(error)
    else:
        data = {"error_type": type(error).__name__, "message": str(error)}
        data.update(context)
        message = f"{type(error).__name__}: {error}"

    target.log(level, message, extra={"structured_data": data})


def log_body_processing_error(
    content_type: str,
    error: BaseException,
    body_size: int | None = None,
    level: int = logging.ERROR,
    log: logging.Logger | None = None,
    **context: Any,
) -> None:
    """Log a failure to read, decode or re-encode a request body."""
    target = log or logger

    data: dict[str, Any] = {
        "content_type": content_type,
        "body_size": body_size,
        "exception": type(error).__name__,
    }
    if isinstance(error, RekeyError):
        data["error_code"] = error.code
        data["error_category"] = error.category
    data.update(context)

    size = f", {body_size} bytes" if body_size is not None else ""
    target.log(
        level,
        f"Body processing failed ({content_type}{size}): "
        f"{type(error).__name__}: {error}",
        extra={"structured_data": data},
    )
