"""Utility script to inspect or re-seed the document store."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from workshop_api.core.errors import StoreError
from workshop_api.core.settings import settings
from workshop_api.db.store import DocumentStore


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Inspect or reset the workshop document store")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Replace the document with the seed dataset.",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Print the document as JSON after any reset.",
    )
    parser.add_argument(
        "--path",
        type=Path,
        default=None,
        help="Override the document path (defaults to DATA_PATH)",
    )
    args = parser.parse_args(argv)

    store = DocumentStore(args.path or settings.data_path)
    try:
        if args.reset:
            store.reset()
            print(f"[store] reset {store.path} to seed data")
        else:
            store.open()
        if args.show:
            print(json.dumps(store.snapshot(), indent=2))
    except StoreError as exc:
        print(f"[store] ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
