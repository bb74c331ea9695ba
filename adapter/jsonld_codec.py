"""
Infrastructure: JSON-LD encoding of the API documentation.

Absent values are left out of the payload, never written as ``null`` or as an
empty list, and decoding maps missing keys back to ``None``.
"""
from __future__ import annotations

import json
from typing import Any, Dict

from apidoc.errors import DocumentDecodeError
from apidoc.model import (
    ClassShape,
    Document,
    MemberAssertion,
    OperationShape,
    PropertyRef,
    PropertyShape,
)


def _put(payload: Dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        payload[key] = value


def encode_property(shape: PropertyShape) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"@type": shape.type, "title": shape.title}
    _put(payload, "description", shape.description)
    payload["required"] = shape.required
    payload["readable"] = shape.readable
    payload["writable"] = shape.writable
    payload["property"] = {"@id": shape.property.id, "range": shape.property.range}
    return payload


def encode_operation(shape: OperationShape) -> Dict[str, Any]:
    return {"@type": shape.type, "title": shape.title, "method": shape.method}


def encode_class(shape: ClassShape) -> Dict[str, Any]:
    payload: Dict[str, Any] = {"@id": shape.id, "@type": shape.type, "title": shape.title}
    _put(payload, "description", shape.description)
    if shape.supported_properties is not None:
        payload["supportedProperty"] = [encode_property(p) for p in shape.supported_properties]
    if shape.member_assertion is not None:
        payload["memberAssertion"] = {
            "property": shape.member_assertion.property,
            "object": shape.member_assertion.object,
        }
    if shape.supported_operations is not None:
        payload["supportedOperation"] = [encode_operation(o) for o in shape.supported_operations]
    return payload


def encode_document(document: Document) -> Dict[str, Any]:
    """Return the JSON-LD object for ``document`` with the wire key order."""
    return {
        "@context": dict(document.context),
        "@id": document.id,
        "@type": document.type,
        "supportedClass": [encode_class(c) for c in document.supported_classes],
    }


def _require(payload: Dict[str, Any], key: str, where: str) -> Any:
    try:
        return payload[key]
    except (KeyError, TypeError):
        raise DocumentDecodeError(f"Missing {key!r} in {where}") from None


def _decode_property(payload: Dict[str, Any]) -> PropertyShape:
    ref = _require(payload, "property", "supportedProperty")
    return PropertyShape(
        title=_require(payload, "title", "supportedProperty"),
        description=payload.get("description"),
        required=bool(payload.get("required", False)),
        readable=bool(payload.get("readable", True)),
        writable=bool(payload.get("writable", True)),
        property=PropertyRef(
            id=_require(ref, "@id", "property"),
            range=_require(ref, "range", "property"),
        ),
    )


def _decode_operation(payload: Dict[str, Any]) -> OperationShape:
    return OperationShape(
        title=_require(payload, "title", "supportedOperation"),
        method=_require(payload, "method", "supportedOperation"),
    )


def _decode_class(payload: Dict[str, Any]) -> ClassShape:
    if not isinstance(payload, dict):
        raise DocumentDecodeError(f"supportedClass entries must be objects, got {payload!r}")
    props = payload.get("supportedProperty")
    assertion = payload.get("memberAssertion")
    ops = payload.get("supportedOperation")
    return ClassShape(
        id=_require(payload, "@id", "supportedClass"),
        type=_require(payload, "@type", "supportedClass"),
        title=_require(payload, "title", "supportedClass"),
        description=payload.get("description"),
        supported_properties=None if props is None else tuple(_decode_property(p) for p in props),
        member_assertion=None
        if assertion is None
        else MemberAssertion(
            object=_require(assertion, "object", "memberAssertion"),
            property=_require(assertion, "property", "memberAssertion"),
        ),
        supported_operations=None if ops is None else tuple(_decode_operation(o) for o in ops),
    )


def decode_document(payload: Dict[str, Any]) -> Document:
    """Rebuild a :class:`Document` from its JSON-LD object."""
    if not isinstance(payload, dict):
        raise DocumentDecodeError("API documentation must be a JSON object")
    doc_type = payload.get("@type")
    if doc_type != Document.type:
        raise DocumentDecodeError(f"Expected @type {Document.type!r}, got {doc_type!r}")
    context = _require(payload, "@context", "ApiDocumentation")
    if not isinstance(context, dict):
        raise DocumentDecodeError("@context must be an object")
    classes = payload.get("supportedClass") or []
    if not isinstance(classes, list):
        raise DocumentDecodeError("supportedClass must be an array")
    return Document(
        id=_require(payload, "@id", "ApiDocumentation"),
        context=dict(context),
        supported_classes=tuple(
            _decode_class(c) for c in classes
        ),
    )


def dumps(document: Document, *, indent: int | None = 2) -> str:
    return json.dumps(encode_document(document), indent=indent, ensure_ascii=False)


def loads(text: str) -> Document:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentDecodeError(f"Invalid JSON: {e}") from e
    return decode_document(payload)


__all__ = [
    "encode_property",
    "encode_operation",
    "encode_class",
    "encode_document",
    "decode_document",
    "dumps",
    "loads",
]
