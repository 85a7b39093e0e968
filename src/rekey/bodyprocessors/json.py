"""JSON body primitives: decode a document, rename a top-level key, re-encode.

Decoding is strict: ``NaN``, ``Infinity`` and ``-Infinity`` literals are
rejected, and the body must be UTF-8 without a byte order mark. Encoding is
compact UTF-8 and refuses non-finite floats, so a rewritten body is always a
standard JSON document.
"""

from __future__ import annotations

import json
from typing import Any

from rekey.exceptions import InvalidJSONError, JSONEncodeError, StructuralMismatchError

JSON_CONTENT_TYPE = "application/json"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def json_type_name(value: Any) -> str:
    """Name of the JSON type of a decoded value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def decode_document(body: bytes) -> Any:
    """Parse ``body`` as any JSON value.

    Raises:
        InvalidJSONError: If the bytes are not a valid JSON document
    """
    try:
        return json.loads(body.decode("utf-8"), parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise InvalidJSONError(
            f"Invalid JSON body: {e}", body_snippet=body, cause=e
        ) from e


def decode_object(body: bytes) -> dict[str, Any]:
    """Parse ``body`` and require a top-level object.

    Raises:
        InvalidJSONError: If the bytes are not valid JSON
        StructuralMismatchError: If the top-level value is not an object
    """
    document = decode_document(body)
    if not isinstance(document, dict):
        raise StructuralMismatchError(json_type_name(document), body_snippet=body)
    return document


def rename_key(document: dict[str, Any], old_key: str, new_key: str) -> bool:
    """Move ``document[old_key]`` to ``document[new_key]`` in place.

    An existing value under ``new_key`` is overwritten. The lookup is an exact,
    case-sensitive match on the top level only.

    Returns:
        True if the document was modified
    """
    if old_key not in document:
        return False
    document[new_key] = document.pop(old_key)
    return True


def encode_document(document: Any) -> bytes:
    """Serialize ``document`` as compact UTF-8 JSON.

    Raises:
        JSONEncodeError: If the value cannot be represented as standard JSON
    """
    try:
        text = json.dumps(
            document, ensure_ascii=False, allow_nan=False, separators=(",", ":")
        )
        return text.encode("utf-8")
    except (TypeError, ValueError, RecursionError, UnicodeEncodeError) as e:
        raise JSONEncodeError(f"Failed to encode JSON body: {e}", cause=e) from e
