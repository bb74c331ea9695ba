"""Domain: the fixed JSON-LD ``@context`` of the API documentation."""
from typing import Dict

from .utils import HYDRA_NS, RDF_NS, RDFS_NS, XSD_NS

_PREFIXES = (
    ("hydra", HYDRA_NS),
    ("rdf", RDF_NS),
    ("rdfs", RDFS_NS),
    ("xsd", XSD_NS),
)

# Term aliases in emission order
_TERMS = (
    ("ApiDocumentation", "hydra:ApiDocumentation"),
    ("Class", "hydra:Class"),
    ("Collection", "hydra:Collection"),
    ("description", "hydra:description"),
    ("memberAssertion", "hydra:memberAssertion"),
    ("object", "hydra:object"),
    ("Operation", "hydra:Operation"),
    ("property", "hydra:property"),
    ("range", "rdfs:range"),
    ("readable", "hydra:readable"),
    ("required", "hydra:required"),
    ("supportedClass", "hydra:supportedClass"),
    ("supportedOperation", "hydra:supportedOperation"),
    ("supportedProperty", "hydra:supportedProperty"),
    ("SupportedProperty", "hydra:SupportedProperty"),
    ("title", "hydra:title"),
    ("writable", "hydra:writable"),
)


def build_context() -> Dict[str, str]:
    """Return a new copy of the vocabulary term map used as ``@context``."""
    return dict(_PREFIXES + _TERMS)


__all__ = ["build_context"]
