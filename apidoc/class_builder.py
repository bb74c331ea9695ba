"""
Domain: derivation of supported classes, properties and collections from
type descriptors.
"""
from typing import Optional, Tuple

from .errors import ConfigurationError
from .model import (
    CLASS,
    COLLECTION,
    ClassShape,
    MemberAssertion,
    PropertyRef,
    PropertyShape,
    TypeDescriptor,
)
from .operations import OperationIndex
from .utils import default_collection_identity, property_identity


def _require_documentable(descriptor: TypeDescriptor) -> None:
    if not descriptor.id or not descriptor.title:
        raise ConfigurationError(
            f"{descriptor.name} cannot be added to API documentation because it "
            "has no supported class identity or title."
        )


def derive_properties(descriptor: TypeDescriptor) -> Optional[Tuple[PropertyShape, ...]]:
    """Return the supported properties of ``descriptor`` in declaration order.

    ``None`` when the type documents no property.
    """
    if not descriptor.properties:
        return None
    _require_documentable(descriptor)

    shapes = []
    for decl in descriptor.properties:
        if not decl.name or not decl.title:
            raise ConfigurationError(
                f"Property of {descriptor.name} needs both a name and a title"
            )
        shapes.append(
            PropertyShape(
                title=decl.title,
                description=decl.description,
                required=decl.required,
                readable=decl.readable,
                writable=decl.writable,
                property=PropertyRef(
                    id=property_identity(descriptor.id, decl.name),
                    range=decl.range,
                ),
            )
        )
    return tuple(shapes)


def derive_class(descriptor: TypeDescriptor, operations: OperationIndex) -> ClassShape:
    """Build the supported class for ``descriptor``."""
    _require_documentable(descriptor)
    return ClassShape(
        id=descriptor.id,
        type=CLASS,
        title=descriptor.title,
        description=descriptor.description,
        supported_properties=derive_properties(descriptor),
        supported_operations=operations.lookup(descriptor.name),
    )


def derive_collection(
    member_id: str, descriptor: TypeDescriptor, operations: OperationIndex
) -> Optional[ClassShape]:
    """Build the "collection of ``descriptor``" class, if the type declares one."""
    collection = descriptor.collection
    if collection is None:
        return None
    if not collection.title:
        raise ConfigurationError(f"Collection of {descriptor.name} has no title")

    return ClassShape(
        id=collection.id or default_collection_identity(member_id),
        type=COLLECTION,
        title=collection.title,
        description=collection.description,
        member_assertion=MemberAssertion(
            object=member_id, property=collection.member_predicate
        ),
        supported_operations=operations.lookup(descriptor.collection_key),
    )


__all__ = ["derive_properties", "derive_class", "derive_collection"]
