"""Body processors for request bodies.

Only JSON bodies are handled; other content types are passed through by the
middleware without being read.
"""

from rekey.bodyprocessors.json import (
    JSON_CONTENT_TYPE,
    decode_document,
    decode_object,
    encode_document,
    rename_key,
)

__all__ = [
    "JSON_CONTENT_TYPE",
    "decode_document",
    "decode_object",
    "encode_document",
    "rename_key",
]
