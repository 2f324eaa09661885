# symbol_graph/parsers/__init__.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""Symbol extraction: line-anchored regex rules and tree-sitter parsers."""

from .base import BaseParser, SymbolCollector, make_symbol_id
from .line_parser import PythonLineParser, TypeScriptLineParser
from .python_parser import PythonParser
from .registry import ParserRegistry, extract, language_for_path
from .typescript_parser import TypeScriptParser

__all__ = [
    "BaseParser",
    "SymbolCollector",
    "make_symbol_id",
    "PythonLineParser",
    "TypeScriptLineParser",
    "PythonParser",
    "TypeScriptParser",
    "ParserRegistry",
    "extract",
    "language_for_path",
]
