"""
Infrastructure: SHACL validation with pyshacl.
"""
import logging
from typing import Optional, Tuple, Union

from pyshacl import validate
from rdflib import Graph

logger = logging.getLogger(__name__)

GraphSource = Union[Graph, str]


def validate_shacl(
    data_graph: GraphSource,
    shacl_graph: Optional[GraphSource] = None,
    *,
    inference: Optional[str] = None,
) -> Tuple[bool, str]:
    """
    Validate ``data_graph`` with pyshacl and return ``(valid, report)``.
    Both graphs may be rdflib graphs, file paths or Turtle text. Failures of
    the validator itself are reported, not raised.
    """
    try:
        conforms, _report_graph, report_text = validate(
            data_graph=data_graph,
            shacl_graph=shacl_graph,
            data_graph_format="turtle" if isinstance(data_graph, str) else None,
            shacl_graph_format="turtle" if isinstance(shacl_graph, str) else None,
            inference=inference,
            debug=False,
        )
        return bool(conforms), report_text
    except Exception as e:
        logger.warning(f"SHACL validation failed to run: {e}")
        return False, f"SHACL validation error: {e}"


__all__ = ["validate_shacl"]
