#!/usr/bin/env python3
"""
Export the OpenAPI document of the menu API to a JSON file.

The document is generated from the route declarations, without starting a
server or touching the configured database (an in-memory SQLite engine is
used).

Usage:
    python scripts/export_openapi.py --output openapi.json
    python scripts/export_openapi.py --output openapi.json --check

Exit codes:
    0 = Written, or --check found the file up to date
    1 = --check found the file missing or stale
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict

# Allow running from a checkout without installing the package
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from menu_api.app_factory import create_app  # noqa: E402


def build_openapi() -> Dict[str, Any]:
    app = create_app(database_url="sqlite://")
    return app.openapi()


def render(spec: Dict[str, Any]) -> str:
    return json.dumps(spec, indent=2, sort_keys=True, ensure_ascii=False) + "\n"


def main() -> int:
    parser = argparse.ArgumentParser(description="Export the menu API OpenAPI document")
    parser.add_argument("--output", "-o", default="openapi.json", help="Output file path (default: openapi.json)")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Do not write; exit 1 if the output file differs from the generated document",
    )
    args = parser.parse_args()

    output = Path(args.output)
    content = render(build_openapi())

    if args.check:
        if not output.exists():
            print(f"[STALE] {output} does not exist", file=sys.stderr)
            return 1
        if output.read_text(encoding="utf-8") != content:
            print(f"[STALE] {output} is out of date, re-run without --check", file=sys.stderr)
            return 1
        print(f"[OK] {output} is up to date")
        return 0

    output.write_text(content, encoding="utf-8")
    print(f"Wrote OpenAPI document -> {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
