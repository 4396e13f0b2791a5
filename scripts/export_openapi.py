#!/usr/bin/env python3
"""
Export the Chat Gateway OpenAPI specification.

Usage:
    python scripts/export_openapi.py [--output-dir docs]

Outputs:
    - <output-dir>/openapi.json
    - <output-dir>/openapi.yaml
"""

import argparse
import json
from pathlib import Path

import yaml

from chat_gateway.main import app


def export_openapi_spec(output_dir: Path) -> dict:
    """Write the FastAPI-generated spec as JSON and YAML and return it."""
    openapi_spec = app.openapi()
    output_dir.mkdir(parents=True, exist_ok=True)

    json_path = output_dir / "openapi.json"
    with open(json_path, "w") as f:
        json.dump(openapi_spec, f, indent=2)
    print(f"Exported OpenAPI spec to {json_path}")

    yaml_path = output_dir / "openapi.yaml"
    with open(yaml_path, "w") as f:
        yaml.dump(openapi_spec, f, default_flow_style=False, sort_keys=False)
    print(f"Exported OpenAPI spec to {yaml_path}")

    info = openapi_spec.get("info", {})
    print(f"   Title: {info.get('title', 'N/A')}")
    print(f"   Version: {info.get('version', 'N/A')}")
    print(f"   Paths: {', '.join(openapi_spec.get('paths', {}))}")
    return openapi_spec


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Export the OpenAPI specification")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path(__file__).parent.parent / "docs",
        help="Directory to write openapi.json and openapi.yaml into",
    )
    args = parser.parse_args()
    export_openapi_spec(args.output_dir)
