# symbol_graph/graph/__init__.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""Relationship resolution and the resolved symbol graph."""

from .resolver import SymbolResolver, resolve
from .symbol_graph import SymbolGraph
from .symbol_table import SymbolTable

__all__ = ["SymbolResolver", "resolve", "SymbolGraph", "SymbolTable"]
