# symbol_graph/parsers/registry.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""Parser registry: maps file extensions to language parsers."""

import logging
import os
from typing import Optional

from symbol_graph.config import IndexerConfig
from symbol_graph.models import Symbol

from .base import BaseParser
from .line_parser import PythonLineParser, TypeScriptLineParser
from .python_parser import PythonParser
from .typescript_parser import TypeScriptParser

logger = logging.getLogger(__name__)


EXTENSION_LANGUAGES = {
    ".py": "python",
    ".pyi": "python",
    ".ts": "typescript",
    ".tsx": "tsx",
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
}


def language_for_path(file_path: str) -> Optional[str]:
    """Language name for a file path, or None if the extension is unknown."""
    suffix = os.path.splitext(file_path)[1].lower()
    return EXTENSION_LANGUAGES.get(suffix)


class ParserRegistry:
    """Registry for the language parsers of one scan.

    In "line" mode every language uses the regex line parser. In
    "tree_sitter" mode Python, TypeScript and TSX use their grammars and
    JavaScript keeps the line parser.
    """

    def __init__(self, mode: str = "line", extensions: Optional[list[str]] = None):
        self.mode = mode
        self.extensions = (
            {ext.lower() for ext in extensions} if extensions is not None else set(EXTENSION_LANGUAGES)
        )
        self._parsers: dict[str, BaseParser] = {}
        self._load_parsers()

    @classmethod
    def from_config(cls, config: IndexerConfig) -> "ParserRegistry":
        return cls(mode=config.parser, extensions=config.extensions)

    def _load_parsers(self) -> None:
        ts_line = TypeScriptLineParser()
        self._parsers["javascript"] = ts_line
        if self.mode == "tree_sitter":
            self._parsers["python"] = PythonParser()
            self._parsers["typescript"] = TypeScriptParser()
            self._parsers["tsx"] = TypeScriptParser(tsx=True)
        else:
            self._parsers["python"] = PythonLineParser()
            self._parsers["typescript"] = ts_line
            self._parsers["tsx"] = ts_line

    def get_parser(self, language: str) -> Optional[BaseParser]:
        """Get parser for a language name (case-insensitive)."""
        return self._parsers.get(language.lower())

    def parser_for_path(self, file_path: str) -> Optional[BaseParser]:
        """Parser for a file, or None if the file is not a recognized kind."""
        suffix = os.path.splitext(file_path)[1].lower()
        if suffix not in self.extensions:
            return None
        language = language_for_path(file_path)
        if language is None:
            return None
        return self._parsers.get(language)

    def is_supported(self, file_path: str) -> bool:
        return self.parser_for_path(file_path) is not None

    def extract(self, file_text: str, file_path: str) -> list[Symbol]:
        """Extract symbols from one file.

        Unsupported files yield no symbols. A parser failure on odd content is
        logged and yields no symbols rather than aborting the scan.
        """
        parser = self.parser_for_path(file_path)
        if parser is None:
            return []
        try:
            return parser.extract(file_text, file_path)
        except Exception as e:
            logger.warning(f"Failed to extract symbols from {file_path}: {e}")
            return []

    def list_available_languages(self) -> list[str]:
        return sorted(self._parsers.keys())

    def __repr__(self) -> str:
        langs = ", ".join(self.list_available_languages())
        return f"ParserRegistry({self.mode}: {langs})"


_default_registry: Optional[ParserRegistry] = None


def extract(
    file_text: str, file_path: str, config: Optional[IndexerConfig] = None
) -> list[Symbol]:
    """Extract symbols from one file using the configured parser mode.

    Without a config the shared line-mode registry is used.
    """
    global _default_registry
    if config is not None:
        return ParserRegistry.from_config(config).extract(file_text, file_path)
    if _default_registry is None:
        _default_registry = ParserRegistry()
    return _default_registry.extract(file_text, file_path)
