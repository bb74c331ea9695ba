"""Domain entities: inbound type declarations and the Hydra document shapes."""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

CLASS = "Class"
COLLECTION = "Collection"


@dataclass(frozen=True)
class CollectionOf:
    """Subject key for operations declared against the collection of a type."""

    name: str


SubjectKey = Union[str, CollectionOf]


@dataclass(frozen=True)
class PropertyDecl:
    """Documented property declared by a host type."""

    name: str
    title: str
    range: str = "xsd:string"
    description: Optional[str] = None
    required: bool = False
    readable: bool = True
    writable: bool = True


@dataclass(frozen=True)
class CollectionDecl:
    """Opt-in collection documentation for a type."""

    title: str
    id: Optional[str] = None
    description: Optional[str] = None
    member_predicate: str = "rdf:type"


@dataclass(frozen=True)
class TypeDescriptor:
    """Everything the host knows about one documented type.

    ``name`` is the subject key used to attach operation declarations, ``id``
    the class identity base used for the class and its property identities.
    """

    name: str
    id: Optional[str]
    title: Optional[str]
    description: Optional[str] = None
    properties: Tuple[PropertyDecl, ...] = ()
    collection: Optional[CollectionDecl] = None

    @property
    def collection_key(self) -> CollectionOf:
        return CollectionOf(self.name)


@dataclass(frozen=True)
class OperationDecl:
    """HTTP operation declared against a subject key."""

    subject: SubjectKey
    method: str
    title: str


@dataclass(frozen=True)
class PropertyRef:
    id: str
    range: str


@dataclass(frozen=True)
class PropertyShape:
    title: str
    property: PropertyRef
    description: Optional[str] = None
    required: bool = False
    readable: bool = True
    writable: bool = True

    type = "SupportedProperty"


@dataclass(frozen=True)
class OperationShape:
    title: str
    method: str

    type = "Operation"


@dataclass(frozen=True)
class MemberAssertion:
    object: str
    property: str = "rdf:type"


@dataclass(frozen=True)
class ClassShape:
    """Supported class (or collection) in the documentation graph.

    Optional members are ``None`` when absent; an empty tuple is never used so
    that absence survives encoding as a missing key.
    """

    id: str
    type: str
    title: str
    description: Optional[str] = None
    supported_properties: Optional[Tuple[PropertyShape, ...]] = None
    member_assertion: Optional[MemberAssertion] = None
    supported_operations: Optional[Tuple[OperationShape, ...]] = None

    @property
    def is_collection(self) -> bool:
        return self.type == COLLECTION


@dataclass(frozen=True)
class Document:
    """Immutable Hydra ``ApiDocumentation`` produced by a build session."""

    id: str
    context: Dict[str, str] = field(hash=False)
    supported_classes: Tuple[ClassShape, ...] = ()

    type = "ApiDocumentation"

    def get_class(self, class_id: str) -> Optional[ClassShape]:
        """Return the first supported class with identity ``class_id``."""
        for shape in self.supported_classes:
            if shape.id == class_id:
                return shape
        return None


__all__ = [
    "CLASS",
    "COLLECTION",
    "CollectionOf",
    "SubjectKey",
    "PropertyDecl",
    "CollectionDecl",
    "TypeDescriptor",
    "OperationDecl",
    "PropertyRef",
    "PropertyShape",
    "OperationShape",
    "MemberAssertion",
    "ClassShape",
    "Document",
]
