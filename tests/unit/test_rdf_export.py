from rdflib import Literal, RDF, URIRef

from adapter.jsonld_codec import encode_document
from adapter.rdf_export import serialize, to_graph
from apidoc.service import ApiDocumentation
from apidoc.utils import HYDRA

DOC_ID = "https://api.example.com/doc"


def _stock_doc(stock, stock_operations):
    return ApiDocumentation(DOC_ID, operations=stock_operations).register(stock).build()


def test_to_graph_types_and_titles(stock, stock_operations):
    g = to_graph(_stock_doc(stock, stock_operations))
    doc_uri = URIRef(DOC_ID)
    stock_uri = URIRef("doc:Stock")
    collection_uri = URIRef("doc:StockCollection")

    assert (doc_uri, RDF.type, HYDRA.ApiDocumentation) in g
    assert (doc_uri, HYDRA.supportedClass, stock_uri) in g
    assert (doc_uri, HYDRA.supportedClass, collection_uri) in g
    assert (stock_uri, RDF.type, HYDRA.Class) in g
    assert (collection_uri, RDF.type, HYDRA.Collection) in g
    assert (stock_uri, HYDRA["title"], Literal("Stock")) in g


def test_to_graph_supported_properties(stock, stock_operations):
    g = to_graph(_stock_doc(stock, stock_operations))
    props = list(g.objects(URIRef("doc:Stock"), HYDRA.supportedProperty))
    assert len(props) == 2
    refs = {g.value(p, HYDRA.property) for p in props}
    assert refs == {URIRef("doc:Stock/symbol"), URIRef("doc:Stock/currentPrice")}


def test_serialize_json_ld_keeps_wire_shape(stock, stock_operations):
    text = serialize(_stock_doc(stock, stock_operations), "json-ld")
    assert text.lstrip().startswith('{\n  "@context"')


def test_serialize_turtle(stock, stock_operations):
    text = serialize(_stock_doc(stock, stock_operations), "turtle")
    assert "hydra:" in text
    assert "Stocks" in text


def test_to_graph_keeps_operation_methods(stock, stock_operations):
    g = to_graph(_stock_doc(stock, stock_operations))
    ops = list(g.objects(URIRef("doc:Stock"), HYDRA.supportedOperation))
    assert [g.value(op, HYDRA.method) for op in ops] == [Literal("PUT")]
    coll_ops = list(g.objects(URIRef("doc:StockCollection"), HYDRA.supportedOperation))
    assert [g.value(op, HYDRA.method) for op in coll_ops] == [Literal("GET")]


def test_serialize_turtle_includes_methods(stock, stock_operations):
    text = serialize(_stock_doc(stock, stock_operations), "turtle")
    assert "PUT" in text
    assert "GET" in text


def test_graph_terms_do_not_change_wire_context(stock, stock_operations):
    doc = _stock_doc(stock, stock_operations)
    to_graph(doc)
    assert "method" not in doc.context
    assert "method" not in encode_document(doc)["@context"]
