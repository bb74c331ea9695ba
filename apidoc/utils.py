"""Utility helpers shared by the documentation builders."""
from urllib.parse import quote
from rdflib import Namespace

HYDRA_NS = "https://www.w3.org/ns/hydra/core#"
RDF_NS = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
RDFS_NS = "http://www.w3.org/2000/01/rdf-schema#"
XSD_NS = "http://www.w3.org/2001/XMLSchema#"

# Hydra core vocabulary, with the scheme used in the emitted @context
HYDRA = Namespace(HYDRA_NS)


def property_identity(class_id: str, name: str) -> str:
    """Return ``<class_id>/<name>`` with ``name`` made safe for a URI path."""
    return f"{class_id.rstrip('/')}/{quote(str(name).strip(), safe='')}"


def default_collection_identity(class_id: str) -> str:
    return f"{class_id}Collection"


__all__ = [
    "HYDRA",
    "HYDRA_NS",
    "RDF_NS",
    "RDFS_NS",
    "XSD_NS",
    "property_identity",
    "default_collection_identity",
]
