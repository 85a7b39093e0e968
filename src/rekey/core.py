"""Eligibility checks and the body rewrite decision tree.

These functions are shared by every request stage (the generic
:class:`~rekey.middleware.BodyKeyRenamer` and the ASGI and WSGI adapters).
They never raise for body problems: every failure resolves to forwarding the
original bytes, reported through :class:`Outcome`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from rekey.bodyprocessors.json import (
    JSON_CONTENT_TYPE,
    decode_object,
    encode_document,
    rename_key,
)
from rekey.config.models import RenameConfig
from rekey.exceptions import (
    InvalidJSONError,
    JSONEncodeError,
    StructuralMismatchError,
)
from rekey.logging.error_logger import log_body_processing_error

logger = logging.getLogger(__name__)

IDENTITY_ENCODING = "identity"


class Outcome(Enum):
    """How a body was handled."""

    EMPTY = "empty"
    INVALID_JSON = "invalid_json"
    NOT_OBJECT = "not_object"
    KEY_ABSENT = "key_absent"
    RENAMED = "renamed"
    ENCODE_FAILED = "encode_failed"


@dataclass(frozen=True)
class RewriteResult:
    body: bytes
    outcome: Outcome

    @property
    def modified(self) -> bool:
        return self.outcome is Outcome.RENAMED


def is_json_content_type(content_type: str | None) -> bool:
    return JSON_CONTENT_TYPE in (content_type or "").lower()


def is_identity_encoding(content_encoding: str | None) -> bool:
    """True when the body is not content-encoded (header absent, empty or identity)."""
    if not content_encoding:
        return True
    return content_encoding.lower() == IDENTITY_ENCODING


def should_rewrite(
    content_type: str | None,
    content_encoding: str | None,
    config: RenameConfig,
) -> bool:
    """Apply the header and configuration checks, in order.

    Returns False as soon as one check fails; the body must then be left
    unread.
    """
    if not is_json_content_type(content_type):
        logger.debug(f"Skipping body: content type {content_type!r} is not JSON")
        return False
    if not is_identity_encoding(content_encoding):
        logger.debug(f"Skipping body: content encoding {content_encoding!r}")
        return False
    if not config.enabled:
        logger.debug("Skipping body: rename keys are empty or equal")
        return False
    return True


def rewrite_body(body: bytes, config: RenameConfig) -> RewriteResult:
    """Rename ``config.source_key`` to ``config.target_key`` in a JSON body.

    The original bytes are returned verbatim unless the key was actually
    renamed and the result re-encoded successfully.
    """
    if not body.strip():
        return RewriteResult(body, Outcome.EMPTY)

    try:
        document = decode_object(body)
    except InvalidJSONError as e:
        log_body_processing_error(
            JSON_CONTENT_TYPE, e, body_size=len(body), level=logging.DEBUG
        )
        return RewriteResult(body, Outcome.INVALID_JSON)
    except StructuralMismatchError as e:
        logger.debug(f"Skipping body: top-level JSON value is {e.found_type}")
        return RewriteResult(body, Outcome.NOT_OBJECT)

    if not rename_key(document, config.source_key, config.target_key):
        return RewriteResult(body, Outcome.KEY_ABSENT)

    try:
        new_body = encode_document(document)
    except JSONEncodeError as e:
        log_body_processing_error(
            JSON_CONTENT_TYPE, e, body_size=len(body), level=logging.WARNING
        )
        return RewriteResult(body, Outcome.ENCODE_FAILED)

    return RewriteResult(new_body, Outcome.RENAMED)
