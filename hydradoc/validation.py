"""High level structural validation of generated API documentation."""
from __future__ import annotations

from typing import Tuple

from rdflib import Graph

from adapter.hydra_shapes import build_hydra_shapes
from adapter.rdf_export import to_graph
from adapter.shacl_runner import validate_shacl
from apidoc.model import Document


def validate_document(document: Document) -> Tuple[bool, str]:
    """Check ``document`` against the Hydra shapes.

    Returns a tuple ``(ok, report)``.
    """
    graph: Graph = to_graph(document)
    return validate_shacl(graph, build_hydra_shapes())

__all__ = ["validate_document"]
