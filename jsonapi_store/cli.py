"""Sync JSON:API documents into one graph store and print a summary.

Usage:
    python -m jsonapi_store page1.json page2.json
    curl -s https://api.example.com/articles | python -m jsonapi_store -
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import Any

from jsonapi_store.config.settings import LOOKUP_KEY_STYLES, StoreConfig
from jsonapi_store.storage.graph_store import GraphStore, MalformedDocumentError, build_graph_store

LOG = logging.getLogger("cli")


def _load(path: str) -> Any:
    if path == "-":
        return json.load(sys.stdin)
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def summarize(store: GraphStore) -> dict[str, dict[str, int]]:
    """Node and placeholder counts per type."""
    summary = {}
    for type_name in sorted(store.types()):
        models = store.find_all(type_name)
        summary[type_name] = {
            "count": len(models),
            "placeholders": sum(1 for m in models if m.is_placeholder),
        }
    return summary


def _serialize_primary(data) -> Any:
    if data is None:
        return None
    if isinstance(data, list):
        return [model.serialize()["data"] for model in data]
    return data.serialize()["data"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="jsonapi-store", description=__doc__.splitlines()[0])
    parser.add_argument("files", nargs="+", help="JSON:API documents to sync ('-' reads stdin)")
    parser.add_argument("--lookup-key", choices=LOOKUP_KEY_STYLES, default=None, help="Type name to class key style")
    parser.add_argument("--log-level", default=None, help="Logging level (default from JSONAPI_STORE_LOG_LEVEL)")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides = {}
    if args.lookup_key:
        overrides["lookup_key"] = args.lookup_key
    if args.log_level:
        overrides["log_level"] = args.log_level
    try:
        config = replace(StoreConfig.from_env(), **overrides)
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    store = build_graph_store(config)
    primary = None
    for path in args.files:
        try:
            payload = _load(path)
            result = store.sync(payload)
        except (OSError, ValueError, MalformedDocumentError) as e:
            LOG.error("Cannot sync %s: %s", path, e)
            return 2
        if isinstance(result, dict) and "errors" in result:
            print(json.dumps(result, indent=2))
            return 1
        primary = result
        LOG.info("Synced %s", path)

    print(json.dumps({"types": summarize(store), "data": _serialize_primary(primary)}, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
