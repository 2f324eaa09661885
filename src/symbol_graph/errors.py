# symbol_graph/errors.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Error types for symbol indexing.

Only I/O problems are errors. Unsupported files, ambiguous names and cyclic
reference graphs are normal input and are handled without raising.
"""


class SymbolGraphError(Exception):
    """Base class for symbol_graph errors."""


class ReadError(SymbolGraphError):
    """A file or directory could not be read.

    Scoped to a single path: the scan skips it and reports it as a warning.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read {path}: {reason}")


class ExportFormatError(SymbolGraphError):
    """An export document is not a valid {symbols, relationships} file."""
