# symbol_graph/main.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
CLI entry point for the symbol indexer.

Usage:
    python -m symbol_graph path/to/src --export symbols.json
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .config import IndexerConfig
from .errors import SymbolGraphError
from .graph import SymbolGraph
from .layout import LayoutResult, layout
from .models import KIND_IMPORT, Symbol
from .navigator import Navigator
from .scanner import SymbolIndexer
from .sources import FileSystemSource, FixtureSource

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="symbol_graph",
        description="Index source symbols and their relationships",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Scan a directory and export the symbol graph
    python -m symbol_graph src --export symbols.json

    # Use the tree-sitter parsers and a left-to-right layout
    python -m symbol_graph src --parser tree_sitter --direction LR --layout layout.json

    # Show the code path around one symbol
    python -m symbol_graph src --focus SymbolIndexer

    # Explore the built-in demo graph
    python -m symbol_graph --fixture --focus Symbol
        """,
    )
    parser.add_argument("path", nargs="?", type=Path, help="Directory to scan")
    parser.add_argument("--config", type=Path, help="Path to indexer configuration YAML file")
    parser.add_argument(
        "--parser", choices=["line", "tree_sitter"], help="Symbol extractor to use"
    )
    parser.add_argument("--direction", choices=["TB", "LR"], help="Layout direction")
    parser.add_argument("--export", type=Path, help="Write {symbols, relationships} JSON here")
    parser.add_argument("--layout", type=Path, help="Write the computed layout JSON here")
    parser.add_argument("--focus", help="Symbol id or name to show the neighbourhood of")
    parser.add_argument(
        "--fixture", action="store_true", help="Use the built-in demo symbols instead of a scan"
    )
    parser.add_argument("--from-export", type=Path, help="Load a previous export instead of scanning")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose (debug) logging"
    )
    return parser


def load_config(args: argparse.Namespace) -> IndexerConfig:
    """YAML file (if given) or environment, then command-line overrides."""
    if args.config is not None:
        config = IndexerConfig.from_yaml(args.config)
    else:
        config = IndexerConfig.from_env()

    updates: dict = {}
    if args.path is not None:
        updates["root"] = args.path
    if args.parser is not None:
        updates["parser"] = args.parser
    if args.direction is not None:
        updates["layout"] = config.layout.model_copy(update={"direction": args.direction})
    return config.model_copy(update=updates) if updates else config


def find_symbol(graph: SymbolGraph, name_or_id: str) -> Optional[Symbol]:
    """Exact id first, then the first declaration (non-import) with that name."""
    symbol = graph.get(name_or_id)
    if symbol is not None:
        return symbol
    matches = [s for s in graph.symbols if s.name == name_or_id]
    declarations = [s for s in matches if s.kind != KIND_IMPORT]
    if declarations:
        return declarations[0]
    return matches[0] if matches else None


def print_focus(graph: SymbolGraph, name_or_id: str) -> bool:
    symbol = find_symbol(graph, name_or_id)
    if symbol is None:
        logger.error(f"No symbol named {name_or_id}")
        return False
    navigator = Navigator(graph)
    neighbours = navigator.focus(symbol.id)
    print(f"Code path of {symbol.name} ({symbol.kind}, {symbol.file}:{symbol.line}):")
    for neighbour in neighbours:
        if neighbour.id == symbol.id:
            continue
        kinds = sorted(
            {r.kind for r in graph.outgoing(symbol.id) if r.target == neighbour.id}
            | {r.kind for r in graph.incoming(symbol.id) if r.source == neighbour.id}
        )
        print(f"  {neighbour.kind:<10} {neighbour.name:<30} [{', '.join(kinds)}] {neighbour.file}:{neighbour.line}")
    return True


def write_json(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(data, f, indent=2)


def run(args: argparse.Namespace, config: IndexerConfig) -> int:
    if args.from_export is not None:
        graph = SymbolGraph.load(args.from_export)
        geometry: LayoutResult = layout(graph.symbols, graph.relationships, config.layout)
        print(f"Loaded {args.from_export}")
    else:
        if args.fixture:
            source = FixtureSource()
        elif config.root is not None:
            source = FileSystemSource(config.root, config)
        else:
            logger.error("No directory given (pass PATH, set SYMBOL_GRAPH_ROOT, or use --fixture)")
            return 1
        snapshot = asyncio.run(SymbolIndexer(config).scan(source))
        graph, geometry = snapshot.graph, snapshot.layout
        print(snapshot.report.summary())
        for warning in snapshot.report.warnings:
            print(f"  warning: {warning}")

    stats = graph.stats()
    print(f"{stats['symbols']} symbols, {stats['relationships']} relationships")
    for kind, count in sorted(stats["symbol_kinds"].items()):
        print(f"  {kind:<10} {count}")

    if args.focus and not print_focus(graph, args.focus):
        return 1
    if args.export is not None:
        graph.save(args.export)
        print(f"Export written to {args.export}")
    if args.layout is not None:
        write_json(args.layout, geometry.to_dict())
        print(f"Layout written to {args.layout}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the symbol_graph CLI.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.config is not None and not args.config.exists():
        logger.error(f"Config file not found: {args.config}")
        return 1
    try:
        config = load_config(args)
    except yaml.YAMLError as e:
        logger.error(f"Invalid YAML in config file: {e}")
        return 1
    except (ValidationError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    try:
        return run(args, config)
    except SymbolGraphError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
