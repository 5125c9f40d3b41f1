"""
Utility script to generate and write the OpenAPI schema for the FastAPI app.

Usage:
    python -m todo_app.generate_openapi [output_dir]

Notes:
- The script ensures the 'auth' and 'todos' tags are present in the tags metadata.
- Default output file is interfaces/openapi.json under the todo_backend container root.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from .main import create_app, openapi_tags
from .settings import Settings
from .storage import InMemoryKeyValueStore

logger = logging.getLogger(__name__)


def _ensure_tags(schema: Dict[str, Any]) -> None:
    """
    Ensure the OpenAPI schema contains the expected tags metadata. This does
    not override existing tag definitions unless missing.
    """
    existing_tags: List[Dict[str, Any]] = schema.get("tags", []) or []
    existing_names = {t.get("name") for t in existing_tags if isinstance(t, dict)}
    for tag in openapi_tags:
        if tag.get("name") not in existing_names:
            existing_tags.append(tag)
    if existing_tags:
        schema["tags"] = existing_tags


def _default_interfaces_dir() -> str:
    # <container_root>/interfaces, container_root being todo_backend/
    src_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(os.path.dirname(src_dir), "interfaces")


# PUBLIC_INTERFACE
def generate_openapi(output_dir: Optional[str] = None) -> str:
    """Generate the OpenAPI schema file and return the written file path."""
    # A throwaway in-memory app: generating docs must not touch real storage.
    app = create_app(settings=Settings(), storage=InMemoryKeyValueStore())
    schema = app.openapi()
    _ensure_tags(schema)

    interfaces_dir = output_dir or _default_interfaces_dir()
    os.makedirs(interfaces_dir, exist_ok=True)
    out_path = os.path.join(interfaces_dir, "openapi.json")

    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(schema, f, indent=2, ensure_ascii=False)
    logger.info("Wrote OpenAPI schema to: %s", out_path)
    return out_path


def main(argv: Optional[List[str]] = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = generate_openapi(args[0] if args else None)
    print(f"Wrote OpenAPI schema to: {path}")


if __name__ == "__main__":
    main()
