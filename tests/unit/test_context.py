from apidoc.context import build_context


def test_context_prefixes():
    ctx = build_context()
    assert ctx["hydra"] == "https://www.w3.org/ns/hydra/core#"
    assert ctx["rdf"] == "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
    assert ctx["rdfs"] == "http://www.w3.org/2000/01/rdf-schema#"
    assert ctx["xsd"] == "http://www.w3.org/2001/XMLSchema#"


def test_context_term_order():
    assert list(build_context()) == [
        "hydra",
        "rdf",
        "rdfs",
        "xsd",
        "ApiDocumentation",
        "Class",
        "Collection",
        "description",
        "memberAssertion",
        "object",
        "Operation",
        "property",
        "range",
        "readable",
        "required",
        "supportedClass",
        "supportedOperation",
        "supportedProperty",
        "SupportedProperty",
        "title",
        "writable",
    ]


def test_context_aliases():
    ctx = build_context()
    assert ctx["range"] == "rdfs:range"
    assert ctx["SupportedProperty"] == "hydra:SupportedProperty"
    assert ctx["supportedProperty"] == "hydra:supportedProperty"


def test_context_is_a_fresh_copy():
    first = build_context()
    first["title"] = "changed"
    assert build_context()["title"] == "hydra:title"
    assert build_context() == build_context()
