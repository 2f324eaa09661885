# symbol_graph/__init__.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Source symbol indexer.

Extracts named program entities from source files, resolves the
relationships between them, and computes a layered graph layout plus a
navigable one-hop "code path" view.

Usage:
    python -m symbol_graph path/to/src --export symbols.json

Components:
    - extract: per-file symbol extraction (line rules or tree-sitter)
    - resolve: name-based relationship resolution
    - SymbolGraph: edge list with derived referencedBy and JSON export
    - layout: layered (Sugiyama-style) layout
    - Navigator: focus/back navigation over the graph
    - SymbolIndexer: generation-counted scan, build then swap
"""

from .config import IndexerConfig, LayoutConfig
from .errors import ExportFormatError, ReadError, SymbolGraphError
from .graph import SymbolGraph, resolve
from .layout import LayoutResult, layout
from .models import Location, Relationship, Symbol
from .navigator import NavigationState, Navigator, filter_symbols, selected_neighborhood
from .parsers import ParserRegistry, extract
from .scanner import IndexSnapshot, ScanReport, SymbolIndexer
from .sources import FileSystemSource, FixtureSource, SourceResult, SymbolSource

__all__ = [
    # Config
    "IndexerConfig",
    "LayoutConfig",
    # Errors
    "SymbolGraphError",
    "ReadError",
    "ExportFormatError",
    # Models
    "Symbol",
    "Location",
    "Relationship",
    # Pipeline
    "ParserRegistry",
    "extract",
    "resolve",
    "SymbolGraph",
    "layout",
    "LayoutResult",
    # Navigation
    "Navigator",
    "NavigationState",
    "selected_neighborhood",
    "filter_symbols",
    # Scanning
    "SymbolSource",
    "FileSystemSource",
    "FixtureSource",
    "SourceResult",
    "SymbolIndexer",
    "IndexSnapshot",
    "ScanReport",
]
