import pytest

from apidoc.model import (
    CollectionDecl,
    CollectionOf,
    OperationDecl,
    PropertyDecl,
    TypeDescriptor,
)


@pytest.fixture
def stock():
    return TypeDescriptor(
        name="Stock",
        id="doc:Stock",
        title="Stock",
        description="A listed company share",
        properties=(
            PropertyDecl(
                name="symbol",
                title="Symbol",
                range="xsd:string",
                required=True,
                readable=True,
                writable=False,
            ),
            PropertyDecl(
                name="currentPrice",
                title="Current price",
                range="xsd:decimal",
                required=True,
                readable=True,
                writable=True,
            ),
        ),
        collection=CollectionDecl(
            id="doc:StockCollection",
            title="Stocks",
            description="Stock listing",
        ),
    )


@pytest.fixture
def stock_operations():
    return [
        OperationDecl(subject="Stock", method="PUT", title="Update stock"),
        OperationDecl(subject=CollectionOf("Stock"), method="GET", title="List stocks"),
    ]
