"""
Infrastructure: conversion of the API documentation to an rdflib graph.
"""
import json

from rdflib import Graph, RDF, RDFS, XSD

from apidoc.model import Document
from apidoc.utils import HYDRA

from .jsonld_codec import dumps, encode_document

JSONLD_FORMATS = {"json-ld", "jsonld"}

# Terms the wire @context leaves out but the graph must keep
GRAPH_TERMS = {"method": "hydra:method"}


def to_graph(document: Document) -> Graph:
    """Parse the JSON-LD encoding of ``document`` into a new graph.

    The wire ``@context`` is extended with :data:`GRAPH_TERMS` so that
    operation methods reach the graph.
    """
    payload = encode_document(document)
    payload["@context"] = {**payload["@context"], **GRAPH_TERMS}

    g = Graph()
    g.bind("hydra", HYDRA)
    g.bind("rdf", RDF)
    g.bind("rdfs", RDFS)
    g.bind("xsd", XSD)
    g.parse(data=json.dumps(payload), format="json-ld")
    return g


def serialize(document: Document, fmt: str = "json-ld") -> str:
    """
    Return ``document`` serialized as ``fmt``.
    JSON-LD keeps the compact wire shape; other formats go through rdflib.
    """
    if fmt.lower() in JSONLD_FORMATS:
        return dumps(document)
    return to_graph(document).serialize(format=fmt)


__all__ = ["JSONLD_FORMATS", "GRAPH_TERMS", "to_graph", "serialize"]
