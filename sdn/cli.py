"""CLI entry point replaying engine event logs through the SDN observer."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from .control.session import SdnPlugin
from .errors import SdnError
from .logging_utils import setup_logging
from .metadata.local import LocalStatQuery, MappingQuery
from .replay import ReplayEngine, jsonable, read_events
from .settings import build_metadata_query, build_sink, load_config


def _load_sizes(path: Path) -> MappingQuery:
    sizes = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(sizes, dict):
        raise ValueError("sizes file must contain a JSON object")
    for key, value in sizes.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"size for '{key}' must be an integer")
    return MappingQuery({str(key): value for key, value in sizes.items()})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Replay transfer events through the SDN observer")
    parser.add_argument("events", type=Path, help="JSON lines file with recorded events")
    parser.add_argument("--config", help="Path to YAML configuration", default=None)
    parser.add_argument("--sizes", type=Path, default=None, help="JSON object mapping source to size")
    parser.add_argument("--root", type=Path, default=None, help="Resolve relative sources against this directory")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
        logger = setup_logging(
            "sdn.replay",
            level=config.logging.level_number,
            log_file=config.logging.file,
            stream=sys.stderr,
        )
        if args.sizes is not None:
            query = _load_sizes(args.sizes)
        elif args.root is not None:
            query = LocalStatQuery(root=args.root)
        else:
            query = build_metadata_query(config)
        sink = build_sink(config, logger=logger)
    except (OSError, ValueError) as exc:
        print(f"Replay aborted: {exc}", file=sys.stderr)
        return 1

    plugin = SdnPlugin(lambda _context: query, sink, logger=logger)
    engine = ReplayEngine()
    try:
        plugin.copy_enter_hook(engine, context=str(args.events))
        results = engine.emit(read_events(args.events))
    except (OSError, ValueError, SdnError) as exc:
        print(f"Replay aborted: {exc}", file=sys.stderr)
        return 1
    finally:
        engine.finish()
        plugin.close()

    print(json.dumps([jsonable(result) for result in results], indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
