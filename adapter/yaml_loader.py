"""Infrastructure helpers to load documented type declarations from YAML files."""

from apidoc.errors import ConfigurationError
from apidoc.model import CollectionDecl, CollectionOf, OperationDecl, PropertyDecl, TypeDescriptor
import logging
import yaml
from typing import Any, Iterable, List, Optional, Tuple
from pathlib import Path

logger = logging.getLogger(__name__)

# Short type names accepted for a property range
RANGE_ALIASES = {
    "string": "xsd:string",
    "str": "xsd:string",
    "integer": "xsd:integer",
    "int": "xsd:integer",
    "float": "xsd:float",
    "double": "xsd:double",
    "decimal": "xsd:decimal",
    "boolean": "xsd:boolean",
    "bool": "xsd:boolean",
    "date": "xsd:date",
    "datetime": "xsd:dateTime",
    "time": "xsd:time",
    "uri": "xsd:anyURI",
}

_TRUE_WORDS = {"sí", "si", "yes", "y", "true", "1", "on"}
_FALSE_WORDS = {"no", "n", "false", "0", "off"}


def _as_bool(value: Any, default: bool) -> bool:
    """Return the boolean meaning of ``value`` or ``default`` when unset."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ConfigurationError(f"Cannot read {value!r} as a boolean")


def _parse_range(value: Any) -> str:
    """Return the range URI for ``value``; CURIEs and URIs are kept verbatim."""
    if value is None:
        return "xsd:string"
    text = str(value).strip()
    if ":" in text:
        return text
    try:
        return RANGE_ALIASES[text.lower()]
    except KeyError:
        raise ConfigurationError(f"Unknown property range {text!r}") from None


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_property(col: Any) -> PropertyDecl:
    if isinstance(col, str):
        return PropertyDecl(name=col, title=col)
    if not isinstance(col, dict):
        raise ConfigurationError(f"Invalid property declaration: {col!r}")
    name = _optional_text(col.get('name'))
    if name is None:
        raise ConfigurationError(f"Property declaration without a name: {col!r}")
    return PropertyDecl(
        name=name,
        title=_optional_text(col.get('title')) or name,
        range=_parse_range(col.get('range') or col.get('type')),
        description=_optional_text(col.get('description')),
        required=_as_bool(col.get('required'), False),
        readable=_as_bool(col.get('readable'), True),
        writable=_as_bool(col.get('writable'), True),
    )


def parse_operation(data: Any, subject: Any = None) -> OperationDecl:
    """
    Return an ``OperationDecl`` from a mapping with ``method`` and ``title``.
    Top-level entries name their ``subject`` and set ``collection: true`` to
    target the collection of that type.
    """
    if not isinstance(data, dict):
        raise ConfigurationError(f"Invalid operation declaration: {data!r}")
    if subject is None:
        name = _optional_text(data.get('subject'))
        if name is None:
            raise ConfigurationError(f"Operation declaration without a subject: {data!r}")
        subject = CollectionOf(name) if _as_bool(data.get('collection'), False) else name
    method = _optional_text(data.get('method'))
    if method is None:
        raise ConfigurationError(f"Operation declaration without a method: {data!r}")
    return OperationDecl(
        subject=subject,
        method=method.upper(),
        title=_optional_text(data.get('title')) or method.upper(),
    )


def parse_type(data: Any, *, source: Optional[str] = None) -> Tuple[TypeDescriptor, List[OperationDecl]]:
    """
    Return the type descriptor declared by ``data`` and its inline operations.

    Supports both ``{name: Stock, id: ..., ...}`` and a single-key mapping
    ``{Stock: {id: ..., ...}}``.
    """
    if not isinstance(data, dict):
        raise ConfigurationError(f"Type declaration must be a mapping ({source or 'inline'})")

    if len(data) == 1 and isinstance(next(iter(data.values())), dict):
        name, type_def = next(iter(data.items()))
    else:
        type_def = data
        name = data.get('name') or (Path(source).stem if source else None)
    name = _optional_text(name)
    if name is None:
        raise ConfigurationError(f"Type declaration without a name ({source or 'inline'})")

    properties = tuple(_parse_property(col) for col in type_def.get('properties') or [])

    operations: List[OperationDecl] = [
        parse_operation(op, subject=name) for op in type_def.get('operations') or []
    ]

    collection = None
    collection_def = type_def.get('collection')
    if collection_def is not None:
        if not isinstance(collection_def, dict):
            raise ConfigurationError(f"Collection of {name} must be a mapping")
        collection = CollectionDecl(
            id=_optional_text(collection_def.get('id')),
            title=_optional_text(collection_def.get('title')) or f"{name} collection",
            description=_optional_text(collection_def.get('description')),
            member_predicate=_optional_text(collection_def.get('member_predicate')) or "rdf:type",
        )
        operations.extend(
            parse_operation(op, subject=CollectionOf(name))
            for op in collection_def.get('operations') or []
        )

    metadata_keys = set(type_def.keys()) - {
        'name',
        'id',
        'title',
        'description',
        'properties',
        'operations',
        'collection',
    }
    if metadata_keys:
        logger.debug(f"Ignoring keys {sorted(metadata_keys)} in declaration of {name}")

    descriptor = TypeDescriptor(
        name=name,
        id=_optional_text(type_def.get('id')),
        title=_optional_text(type_def.get('title')),
        description=_optional_text(type_def.get('description')),
        properties=properties,
        collection=collection,
    )
    return descriptor, operations


def load_type(yaml_path: str | Path) -> Tuple[TypeDescriptor, List[OperationDecl]]:
    """Load one type declaration file."""
    with open(yaml_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
    return parse_type(data, source=str(yaml_path))


def load_types_dir(
    schema_dir: str | Path, *, exclude: Iterable[str | Path] = ()
) -> Tuple[List[TypeDescriptor], List[OperationDecl]]:
    """
    Load every ``*.yaml`` file of ``schema_dir`` in name order.
    Files listed in ``exclude`` are not read; files that cannot be parsed are
    logged and skipped.
    """
    excluded = {Path(p).resolve() for p in exclude}
    descriptors: List[TypeDescriptor] = []
    operations: List[OperationDecl] = []
    for yaml_file in sorted(Path(schema_dir).glob("*.yaml")):
        if yaml_file.resolve() in excluded:
            continue
        try:
            descriptor, type_ops = load_type(yaml_file)
        except (yaml.YAMLError, ConfigurationError) as e:
            logger.warning(f"Skipping declaration file {yaml_file}: {e}")
            continue
        descriptors.append(descriptor)
        operations.extend(type_ops)
    return descriptors, operations


__all__ = [
    "RANGE_ALIASES",
    "parse_operation",
    "parse_type",
    "load_type",
    "load_types_dir",
]
