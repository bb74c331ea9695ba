"""Command-line interface to generate Hydra API documentation."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from adapter.manifest_loader import load_manifest
from adapter.rdf_export import serialize
from apidoc.errors import HydraDocError
from apidoc.service import ON_DUPLICATE_POLICIES
from hydradoc.validation import validate_document

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate Hydra API documentation")
    parser.add_argument("--manifest", required=True, help="YAML documentation manifest")
    parser.add_argument("--output", required=True, help="Output file")
    parser.add_argument(
        "--format",
        default="json-ld",
        help="Output format: json-ld (default) or any rdflib format such as turtle",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Check the generated documentation against the Hydra shapes",
    )
    parser.add_argument(
        "--on-duplicate",
        choices=ON_DUPLICATE_POLICIES,
        default=None,
        help="Override the manifest policy for repeated class identities",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        manifest = load_manifest(args.manifest)
        document = manifest.build_documentation(on_duplicate=args.on_duplicate).build()
    except HydraDocError as e:
        raise SystemExit(f"Invalid documentation manifest {args.manifest}: {e}")

    if args.validate:
        ok, report = validate_document(document)
        logger.info(report)
        if not ok:
            raise SystemExit(1)

    Path(args.output).write_text(serialize(document, args.format), encoding="utf-8")
    print(f"Wrote {args.output}")


if __name__ == "__main__":  # pragma: no cover - manual entrypoint
    main(sys.argv[1:])
