from pathlib import Path
import pytest

from adapter.manifest_loader import load_manifest
from adapter.yaml_loader import load_type

SCHEMA_DIR = Path(__file__).resolve().parents[2] / "schema_yaml"
MANIFEST = "api_manifest.yaml"


def iter_schema_files():
    for path in sorted(SCHEMA_DIR.glob("*.yaml")):
        if path.name == MANIFEST:
            continue
        yield path


@pytest.mark.parametrize("yaml_file", list(iter_schema_files()), ids=lambda p: p.name)
def test_schema_files_parse(yaml_file: Path) -> None:
    """Ensure all type declarations can be loaded with :func:`load_type`."""
    descriptor, _ = load_type(yaml_file)
    assert descriptor.id, f"No identity in {yaml_file.name}"
    assert descriptor.title, f"No title in {yaml_file.name}"
    for prop in descriptor.properties:
        assert prop.name, f"Property with empty name in {yaml_file.name}"


def test_sample_manifest_builds():
    doc = load_manifest(SCHEMA_DIR / MANIFEST).build_documentation().build()
    assert [c.id for c in doc.supported_classes] == [
        "doc:Stock",
        "doc:StockCollection",
        "doc:Portfolio",
        "doc:Trade",
    ]
    portfolio = doc.get_class("doc:Portfolio")
    assert portfolio.supported_operations[0].method == "GET"
    assert portfolio.supported_properties[1].property.range == "doc:StockCollection"
