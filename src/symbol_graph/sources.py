# symbol_graph/sources.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Symbol sources: where a scan's symbols come from.

FileSystemSource walks a directory tree and extracts every recognized file
concurrently. FixtureSource serves a fixed symbol list (the built-in demo
set by default) and needs no file system at all.
"""

import asyncio
import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from symbol_graph.config import IndexerConfig
from symbol_graph.errors import ReadError
from symbol_graph.models import (
    KIND_CLASS,
    KIND_FUNCTION,
    KIND_INTERFACE,
    Location,
    Symbol,
)
from symbol_graph.parsers import ParserRegistry, make_symbol_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryEntry:
    """One entry of a non-recursive directory listing."""

    name: str
    path: str
    is_directory: bool


@dataclass
class SourceResult:
    """Symbols gathered by a source plus the per-path read failures."""

    symbols: list[Symbol] = field(default_factory=list)
    files_indexed: int = 0
    errors: list[ReadError] = field(default_factory=list)


class SymbolSource(ABC):
    """Capability interface for anything that can produce a scan's symbols."""

    @abstractmethod
    async def collect(self) -> SourceResult:
        """Gather all symbols. Read failures are reported, never raised."""

    def describe(self) -> str:
        return self.__class__.__name__


class FileSystemSource(SymbolSource):
    """Scans a directory tree on disk.

    Directories are listed one level at a time and files are read in worker
    threads, at most ``max_concurrency`` at once. Symbol locations use paths
    relative to the root, with forward slashes.
    """

    def __init__(
        self,
        root: Path,
        config: Optional[IndexerConfig] = None,
        registry: Optional[ParserRegistry] = None,
    ):
        self.root = Path(root)
        self.config = config or IndexerConfig()
        self.registry = registry or ParserRegistry.from_config(self.config)
        self._semaphore: Optional[asyncio.Semaphore] = None

    def describe(self) -> str:
        return str(self.root)

    async def list_directory(self, path: Path) -> list[DirectoryEntry]:
        """Entries of one directory, sorted by name.

        Raises:
            ReadError: If the directory cannot be listed.
        """

        def _scan() -> list[DirectoryEntry]:
            with os.scandir(path) as it:
                return [
                    DirectoryEntry(
                        name=entry.name,
                        path=entry.path,
                        is_directory=entry.is_dir(follow_symlinks=False),
                    )
                    for entry in it
                ]

        try:
            entries = await asyncio.to_thread(_scan)
        except OSError as e:
            raise ReadError(str(path), e.strerror or str(e)) from e
        return sorted(entries, key=lambda entry: entry.name)

    async def read_file(self, path: Path) -> str:
        """Read a UTF-8 text file, dropping a leading byte order mark.

        Raises:
            ReadError: If the file cannot be opened or is not valid UTF-8.
        """
        if self._semaphore is None:
            self._semaphore = asyncio.Semaphore(self.config.max_concurrency)
        async with self._semaphore:
            try:
                return await asyncio.to_thread(Path(path).read_text, encoding="utf-8-sig")
            except OSError as e:
                raise ReadError(str(path), e.strerror or str(e)) from e
            except UnicodeDecodeError as e:
                raise ReadError(str(path), f"not valid UTF-8 ({e.reason})") from e

    async def discover(self) -> tuple[list[Path], list[ReadError]]:
        """Recognized files under the root in sorted depth-first order.

        Unlistable directories become errors; ignored directories and
        unsupported files are skipped silently.
        """
        files: list[Path] = []
        errors: list[ReadError] = []
        ignored = set(self.config.ignore_dirs)

        async def walk(directory: Path) -> None:
            try:
                entries = await self.list_directory(directory)
            except ReadError as e:
                logger.warning(str(e))
                errors.append(e)
                return
            for entry in entries:
                if entry.is_directory:
                    if entry.name not in ignored:
                        await walk(Path(entry.path))
                elif self.registry.is_supported(entry.name):
                    files.append(Path(entry.path))

        await walk(self.root)
        return files, errors

    def relative_path(self, path: Path) -> str:
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return path.as_posix()

    async def extract_file(self, path: Path) -> list[Symbol]:
        """Read and extract one file."""
        text = await self.read_file(path)
        symbols = self.registry.extract(text, self.relative_path(path))
        logger.debug(f"{self.relative_path(path)}: {len(symbols)} symbols")
        return symbols

    async def collect(self) -> SourceResult:
        self._semaphore = asyncio.Semaphore(self.config.max_concurrency)
        files, errors = await self.discover()
        logger.info(f"Found {len(files)} source files under {self.root}")

        results = await asyncio.gather(
            *(self.extract_file(path) for path in files), return_exceptions=True
        )

        result = SourceResult(errors=errors)
        for path, outcome in zip(files, results):
            if isinstance(outcome, ReadError):
                logger.warning(f"Skipping {outcome.path}: {outcome.reason}")
                result.errors.append(outcome)
            elif isinstance(outcome, BaseException):
                raise outcome
            else:
                result.symbols.extend(outcome)
                result.files_indexed += 1
        return result


def demo_symbols() -> list[Symbol]:
    """Small built-in sample graph for running without a file system."""

    def make(name, kind, signature, file, line, end_line, references=(), calls=()):
        return Symbol(
            id=make_symbol_id(file, line, kind, name),
            name=name,
            kind=kind,
            location=Location(file=file, line=line, column=0, end_line=end_line, end_column=1),
            signature=signature,
            references=list(references),
            calls=list(calls),
        )

    return [
        make(
            "parseCodeWithTreeSitter", KIND_FUNCTION,
            "async function parseCodeWithTreeSitter(code: string, filePath: string)",
            "tree-sitter-parser.ts", 50, 60,
            references=["TreeSitterParser", "Symbol"], calls=["TreeSitterParser"],
        ),
        make(
            "TreeSitterParser", KIND_CLASS, "class TreeSitterParser",
            "tree-sitter-parser.ts", 10, 45,
        ),
        make(
            "Symbol", KIND_INTERFACE, "interface Symbol",
            "tree-sitter-parser.ts", 5, 8,
        ),
        make(
            "SymbolMindMap", KIND_FUNCTION, "function SymbolMindMap(props: SymbolMindMapProps)",
            "SymbolMindMap.tsx", 20, 100,
            references=["Symbol"],
        ),
    ]


class FixtureSource(SymbolSource):
    """Serves a fixed symbol list; the demo set unless symbols are injected."""

    def __init__(self, symbols: Optional[Iterable[Symbol]] = None, delay: float = 0):
        self.symbols = list(symbols) if symbols is not None else demo_symbols()
        self.delay = delay

    def describe(self) -> str:
        return "fixture"

    async def collect(self) -> SourceResult:
        if self.delay:
            await asyncio.sleep(self.delay)
        return SourceResult(
            symbols=list(self.symbols),
            files_indexed=len({s.file for s in self.symbols}),
        )
