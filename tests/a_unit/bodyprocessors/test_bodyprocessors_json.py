"""Tests for JSON body primitives."""

from __future__ import annotations

import json

import pytest

from rekey.bodyprocessors.json import (
    decode_document,
    decode_object,
    encode_document,
    json_type_name,
    rename_key,
)
from rekey.exceptions import InvalidJSONError, JSONEncodeError, StructuralMismatchError


def test_decode_document_any_value():
    assert decode_document(b"[1, 2]") == [1, 2]
    assert decode_document(b'"text"') == "text"
    assert decode_document(b"null") is None


@pytest.mark.parametrize(
    "encoding", ["utf-16", "utf-16-le", "utf-32", "utf-32-be", "utf-8-sig"]
)
def test_decode_document_requires_plain_utf8(encoding):
    """Test only BOM-less UTF-8 is accepted."""
    body = '{"a": 1}'.encode(encoding)

    with pytest.raises(InvalidJSONError):
        decode_document(body)


@pytest.mark.parametrize(
    "body", [b"{", b"NaN", b"[-Infinity]", b"\xc3\x28", b"", b'{"a": 1} trailing']
)
def test_decode_document_invalid(body):
    with pytest.raises(InvalidJSONError) as exc_info:
        decode_document(body)

    assert exc_info.value.code == "BODY-3002"
    assert exc_info.value.cause is not None


def test_decode_document_snippet_truncated():
    body = b'{"a": "' + b"x" * 500
    with pytest.raises(InvalidJSONError) as exc_info:
        decode_document(body)

    assert len(exc_info.value.context["body_snippet"]) == 64


@pytest.mark.parametrize(
    ("body", "found"),
    [(b"[]", "array"), (b"1.5", "number"), (b"false", "boolean"), (b"null", "null")],
)
def test_decode_object_rejects_non_objects(body, found):
    with pytest.raises(StructuralMismatchError) as exc_info:
        decode_object(body)

    assert exc_info.value.found_type == found


def test_rename_key_moves_value():
    document = {"old": {"nested": [1]}, "other": True}

    assert rename_key(document, "old", "new") is True
    assert document == {"new": {"nested": [1]}, "other": True}


def test_rename_key_absent():
    document = {"other": 1}

    assert rename_key(document, "old", "new") is False
    assert document == {"other": 1}


def test_rename_key_null_value_counts_as_present():
    document = {"old": None}

    assert rename_key(document, "old", "new") is True
    assert document == {"new": None}


def test_encode_document_compact():
    assert encode_document({"a": [1, 2], "b": "ü"}) == '{"a":[1,2],"b":"ü"}'.encode()


def test_encode_document_rejects_nan():
    with pytest.raises(JSONEncodeError):
        encode_document({"a": float("nan")})


def test_encode_document_rejects_unserializable():
    with pytest.raises(JSONEncodeError) as exc_info:
        encode_document({"a": object()})

    assert isinstance(exc_info.value.cause, TypeError)


def test_encode_decode_preserves_document():
    document = {"int": 1, "float": 0.1, "list": [None, True], "obj": {"k": "v"}}
    assert json.loads(encode_document(document)) == document


def test_json_type_name():
    assert json_type_name({}) == "object"
    assert json_type_name("s") == "string"
    assert json_type_name(True) == "boolean"
