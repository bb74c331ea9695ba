"""Infrastructure: loader for the documentation manifest YAML."""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict
import logging

import yaml

from .yaml_loader import load_type, load_types_dir, parse_operation, parse_type
from apidoc.errors import ConfigurationError
from apidoc.model import OperationDecl, TypeDescriptor
from apidoc.service import ApiDocumentation, ON_DUPLICATE_POLICIES

logger = logging.getLogger(__name__)


@dataclass
class Manifest:
    """Structured representation of a documentation manifest."""

    id: str
    types: list[TypeDescriptor]
    operations: list[OperationDecl] = field(default_factory=list)
    on_duplicate: str = "error"
    metadata: Dict[str, Any] = field(default_factory=dict)

    def build_documentation(self, *, on_duplicate: str | None = None) -> ApiDocumentation:
        """Register every declared type, in manifest order."""
        doc = ApiDocumentation(
            self.id,
            operations=self.operations,
            on_duplicate=on_duplicate or self.on_duplicate,
        )
        for descriptor in self.types:
            doc.register(descriptor)
        return doc


__all__ = ["Manifest", "load_manifest"]


def load_manifest(path: str | Path) -> Manifest:
    """Load a documentation manifest from ``path``.

    Types are read from ``schema_dir`` first, then from the ``types`` list
    (inline mappings or ``schema:`` references relative to the manifest).
    Inline operations keep the type order; top-level ``operations`` follow.
    """
    path = Path(path)
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ConfigurationError(f"Manifest {path} must be a mapping")

    info = data.get("documentation") or {}
    doc_id = info.get("id")
    if not doc_id:
        raise ConfigurationError(f"Manifest {path} has no documentation id")
    on_duplicate = info.get("on_duplicate", "error")
    if on_duplicate not in ON_DUPLICATE_POLICIES:
        raise ConfigurationError(f"Unknown duplicate policy {on_duplicate!r} in {path}")

    types: list[TypeDescriptor] = []
    operations: list[OperationDecl] = []

    schema_dir = data.get("schema_dir")
    if schema_dir:
        dir_types, dir_ops = load_types_dir(path.parent / schema_dir, exclude=[path])
        types.extend(dir_types)
        operations.extend(dir_ops)

    for entry in data.get("types") or []:
        if isinstance(entry, dict) and "schema" in entry:
            schema_path = path.parent / entry["schema"]
            if not schema_path.exists():
                raise FileNotFoundError(f"Type declaration not found: {schema_path}")
            descriptor, type_ops = load_type(schema_path)
        else:
            descriptor, type_ops = parse_type(entry)
        types.append(descriptor)
        operations.extend(type_ops)

    operations.extend(parse_operation(op) for op in data.get("operations") or [])

    logger.info(f"Loaded {len(types)} types and {len(operations)} operations from {path}")
    return Manifest(
        id=str(doc_id),
        types=types,
        operations=operations,
        on_duplicate=on_duplicate,
        metadata={k: v for k, v in info.items() if k not in {"id", "on_duplicate"}},
    )
