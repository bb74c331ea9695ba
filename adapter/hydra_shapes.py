"""
Infrastructure: SHACL shapes describing a well-formed Hydra API documentation.
"""
from apidoc.utils import HYDRA_NS, XSD_NS

_PREFIXES = f"""@prefix sh: <http://www.w3.org/ns/shacl#> .
@prefix xsd: <{XSD_NS}> .
@prefix hydra: <{HYDRA_NS}> .
@prefix hd: <urn:hydradoc:shapes#> .

"""


def _property(path: str, *, min_count: int = 1, max_count: int | None = 1, extra: str = "") -> str:
    lines = [f"        sh:path {path} ;", f"        sh:minCount {min_count} ;"]
    if max_count is not None:
        lines.append(f"        sh:maxCount {max_count} ;")
    if extra:
        lines.append(f"        {extra} ;")
    body = "\n".join(lines)
    return f"    sh:property [\n{body}\n    ] ;"


def _node_shape(name: str, target: str, props: list[str]) -> str:
    props_str = "\n".join(props)
    return f"hd:{name} a sh:NodeShape ;\n    sh:targetClass {target} ;\n{props_str}\n.\n"


def build_hydra_shapes() -> str:
    """Return the shapes graph (Turtle) used to check generated documentation."""
    literal = "sh:nodeKind sh:Literal"
    boolean = "sh:datatype xsd:boolean"
    shapes = [
        _node_shape(
            "ApiDocumentationShape",
            "hydra:ApiDocumentation",
            [_property("hydra:supportedClass", min_count=0, max_count=None, extra="sh:nodeKind sh:IRI")],
        ),
        _node_shape(
            "ClassShape",
            "hydra:Class",
            [
                _property("hydra:title", extra=literal),
                _property("hydra:description", min_count=0, extra=literal),
                _property("hydra:memberAssertion", min_count=0, max_count=0),
            ],
        ),
        _node_shape(
            "CollectionShape",
            "hydra:Collection",
            [
                _property("hydra:title", extra=literal),
                _property("hydra:description", min_count=0, extra=literal),
                _property("hydra:memberAssertion"),
                _property("hydra:supportedProperty", min_count=0, max_count=0),
            ],
        ),
        _node_shape(
            "SupportedPropertyShape",
            "hydra:SupportedProperty",
            [
                _property("hydra:title", extra=literal),
                _property("hydra:required", extra=boolean),
                _property("hydra:readable", extra=boolean),
                _property("hydra:writable", extra=boolean),
                _property("hydra:property", extra="sh:nodeKind sh:IRI"),
            ],
        ),
        _node_shape(
            "OperationShape",
            "hydra:Operation",
            [
                _property("hydra:title", extra=literal),
                _property("hydra:method", extra=f"{literal} ; sh:minLength 1"),
            ],
        ),
    ]
    return _PREFIXES + "\n".join(shapes)


__all__ = ["build_hydra_shapes"]
