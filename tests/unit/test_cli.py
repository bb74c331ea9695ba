import json

import pytest

from hydradoc import cli

MANIFEST = """
documentation:
  id: https://api.example.com/doc
types:
  - name: Stock
    id: doc:Stock
    title: Stock
    properties:
      - name: symbol
        title: Symbol
        required: true
        writable: false
    operations:
      - method: PUT
        title: Update stock
    collection:
      title: Stocks
      operations:
        - method: GET
          title: List stocks
"""


def _write_manifest(tmp_path, text=MANIFEST):
    manifest = tmp_path / "manifest.yaml"
    manifest.write_text(text)
    return manifest


def test_main_writes_json_ld(tmp_path, capsys):
    out_file = tmp_path / "doc.jsonld"
    cli.main(["--manifest", str(_write_manifest(tmp_path)), "--output", str(out_file)])

    payload = json.loads(out_file.read_text())
    assert payload["@type"] == "ApiDocumentation"
    assert [c["@id"] for c in payload["supportedClass"]] == ["doc:Stock", "doc:StockCollection"]
    assert "Wrote" in capsys.readouterr().out


def test_main_validates_before_writing(tmp_path, monkeypatch):
    calls = []

    def fake_validate(document):
        calls.append(document)
        return False, "Violation"

    monkeypatch.setattr(cli, "validate_document", fake_validate)
    out_file = tmp_path / "doc.ttl"
    with pytest.raises(SystemExit) as exc:
        cli.main([
            "--manifest",
            str(_write_manifest(tmp_path)),
            "--output",
            str(out_file),
            "--format",
            "turtle",
            "--validate",
        ])
    assert exc.value.code == 1
    assert len(calls) == 1
    assert not out_file.exists()


def test_main_turtle_output(tmp_path):
    out_file = tmp_path / "doc.ttl"
    cli.main([
        "--manifest",
        str(_write_manifest(tmp_path)),
        "--output",
        str(out_file),
        "--format",
        "turtle",
    ])
    assert "Stocks" in out_file.read_text()


def test_main_rejects_duplicates(tmp_path):
    text = MANIFEST + """
  - name: Again
    id: doc:Stock
    title: Again
"""
    out_file = tmp_path / "doc.jsonld"
    with pytest.raises(SystemExit) as exc:
        cli.main(["--manifest", str(_write_manifest(tmp_path, text)), "--output", str(out_file)])
    assert "doc:Stock" in str(exc.value.code)
    assert not out_file.exists()


def test_main_on_duplicate_override(tmp_path):
    text = MANIFEST + """
  - name: Again
    id: doc:Stock
    title: Again
"""
    out_file = tmp_path / "doc.jsonld"
    with pytest.warns(UserWarning):
        cli.main([
            "--manifest",
            str(_write_manifest(tmp_path, text)),
            "--output",
            str(out_file),
            "--on-duplicate",
            "warn",
        ])
    payload = json.loads(out_file.read_text())
    assert [c["@id"] for c in payload["supportedClass"]].count("doc:Stock") == 2
