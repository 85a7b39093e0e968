"""Exception hierarchy for rekey.

Every error carries a stable error code and a category so that log records
and configuration tooling can report failures uniformly:

- ``REKEY-0xxx``: general errors
- ``CONFIG-1xxx``: configuration loading and validation
- ``BODY-3xxx``: request body reading, decoding and re-encoding

Body processing errors never escape the middleware. They are raised by the
low-level helpers and recovered by the request stage, which then forwards the
original body unchanged.
"""

from __future__ import annotations

from typing import Any


class RekeyError(Exception):
    """Base class for all rekey errors."""

    code = "REKEY-0000"
    category = "general"

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ):
        self.message = message
        self.context = dict(context or {})
        self.cause = cause
        super().__init__(self._format())

    def _format(self) -> str:
        text = f"[{self.code}] {self.message}"
        if self.context:
            details = ", ".join(f"{k}={v}" for k, v in self.context.items())
            text = f"{text} ({details})"
        return text

    def to_dict(self) -> dict[str, Any]:
        """Serialize the error for structured logging."""
        return {
            "error_code": self.code,
            "error_category": self.category,
            "error_type": type(self).__name__,
            "message": self.message,
            "context": dict(self.context),
            "cause": str(self.cause) if self.cause is not None else None,
        }


# ============================================================================
# Configuration errors
# ============================================================================


class ConfigurationError(RekeyError):
    """Invalid or unusable configuration."""

    code = "CONFIG-1000"
    category = "configuration"


class ConfigFileNotFoundError(ConfigurationError):
    code = "CONFIG-1001"

    def __init__(self, path: str, cause: BaseException | None = None):
        self.path = path
        super().__init__(
            f"Configuration file not found: {path}",
            context={"path": path},
            cause=cause,
        )


class ConfigValidationError(ConfigurationError):
    code = "CONFIG-1002"

    def __init__(self, message: str, errors: list[str] | None = None):
        self.errors = list(errors or [])
        context = {"errors": "; ".join(self.errors)} if self.errors else None
        super().__init__(message, context=context)


class EnvironmentVariableError(ConfigurationError):
    code = "CONFIG-1003"

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"Required environment variable not set: {variable}")


# ============================================================================
# Body processing errors
# ============================================================================


class BodyProcessingError(RekeyError):
    """Base class for errors raised while handling a request body."""

    code = "BODY-3000"
    category = "body_processing"

    def __init__(
        self,
        message: str,
        body_snippet: bytes | str | None = None,
        cause: BaseException | None = None,
        **context: Any,
    ):
        if body_snippet is not None:
            if isinstance(body_snippet, bytes):
                body_snippet = body_snippet[:64].decode("utf-8", errors="replace")
            context["body_snippet"] = body_snippet[:64]
        super().__init__(message, context=context, cause=cause)


class BodyReadError(BodyProcessingError):
    """The body stream could not be read to completion."""

    code = "BODY-3001"


class InvalidJSONError(BodyProcessingError):
    """The body is not a valid JSON document."""

    code = "BODY-3002"


class StructuralMismatchError(BodyProcessingError):
    """The body is valid JSON but its top level is not an object."""

    code = "BODY-3003"

    def __init__(self, found_type: str, **kwargs: Any):
        self.found_type = found_type
        super().__init__(
            f"Top-level JSON value is {found_type}, expected object",
            found_type=found_type,
            **kwargs,
        )


class JSONEncodeError(BodyProcessingError):
    """The rewritten document could not be serialized."""

    code = "BODY-3004"


DecodeError = InvalidJSONError
EncodeError = JSONEncodeError
