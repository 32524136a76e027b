#!/usr/bin/env python3
"""
Fetch one catalog category and print the rendered display region.

Examples:
  python scripts/fetch_catalog.py fetch-weapons
  python scripts/fetch_catalog.py fetch-agents --source local
  python scripts/fetch_catalog.py --list
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from src.catalog.display import DisplayRegion
from src.catalog.pipeline import FetchPipeline
from src.catalog.registry import all_bindings, bind_triggers, binding_for_trigger
from src.integrations.clients import build_client
from src.integrations.contracts.catalog import UnknownTrigger
from src.utils.config_loader import load_catalog_config

PROJECT_ROOT = Path(__file__).parent.parent


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def print_bindings() -> None:
    for b in all_bindings():
        print(f"{b.trigger_id:<22} {b.endpoint:<20} .{b.template.css_class}")


async def run(trigger_id: str, cfg) -> int:
    binding_for_trigger(trigger_id)
    region = DisplayRegion()
    handlers = {}
    bind_triggers(handlers.__setitem__, FetchPipeline(build_client(cfg, root=PROJECT_ROOT)), region)
    outcome = await handlers[trigger_id]()
    print(region.to_html())
    return 0 if outcome.ok else 1


def main() -> int:
    parser = argparse.ArgumentParser(description="Fetch a CS2 item catalog and print it as HTML cards")
    parser.add_argument("trigger_id", nargs="?", default=None, help="Trigger id, e.g. fetch-weapons")
    parser.add_argument("--list", action="store_true", help="List trigger ids and their endpoints")
    parser.add_argument("--config", type=Path, default=None, help="Path to catalog_config.yml")
    parser.add_argument("--source", choices=["remote", "local"], default=None, help="Override api.source")
    parser.add_argument("--language", default=None, help="Override api.language (e.g. en, de, fr)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args()

    if args.list:
        print_bindings()
        return 0
    if args.trigger_id is None:
        parser.error("Provide a trigger id, or use --list to see them.")

    setup_logging(args.verbose)
    cfg = load_catalog_config(args.config)
    if args.source:
        cfg.api.source = args.source
    if args.language:
        cfg.api.language = args.language

    try:
        return asyncio.run(run(args.trigger_id, cfg))
    except UnknownTrigger as e:
        print(f"Unknown trigger: {e.trigger_id}. Use --list to see valid ids.", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
