# symbol_graph/scanner.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Symbol indexer: scan, resolve, lay out, then swap.

Each scan gets a generation number. A new result set is built in isolation
and becomes the live snapshot only if no newer scan was started meanwhile,
so a stale or cancelled scan can never leak into the exposed state.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional

from symbol_graph.config import IndexerConfig
from symbol_graph.errors import ReadError
from symbol_graph.graph import SymbolGraph
from symbol_graph.layout import LayoutResult, layout
from symbol_graph.sources import SymbolSource

logger = logging.getLogger(__name__)


@dataclass
class ScanReport:
    """Outcome counts of one completed scan."""

    generation: int
    files_indexed: int
    errors: list[ReadError] = field(default_factory=list)
    symbol_count: int = 0
    relationship_count: int = 0

    @property
    def files_total(self) -> int:
        return self.files_indexed + len(self.errors)

    @property
    def warnings(self) -> list[str]:
        return [str(error) for error in self.errors]

    def summary(self) -> str:
        return f"{self.files_indexed} files indexed, {len(self.errors)} errors"


@dataclass
class IndexSnapshot:
    """Everything one scan produced; replaced wholesale by the next scan."""

    generation: int
    graph: SymbolGraph
    layout: LayoutResult
    report: ScanReport


class SymbolIndexer:
    """Owns the live snapshot and the generation counter."""

    def __init__(self, config: Optional[IndexerConfig] = None):
        self.config = config or IndexerConfig()
        self._generation = 0
        self._snapshot: Optional[IndexSnapshot] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def generation(self) -> int:
        """Generation of the most recently started scan."""
        return self._generation

    @property
    def snapshot(self) -> Optional[IndexSnapshot]:
        """The newest completed scan, or None before the first one finishes."""
        return self._snapshot

    async def scan(self, source: SymbolSource) -> Optional[IndexSnapshot]:
        """Run one full scan.

        Returns:
            The new snapshot, or None if a newer scan started while this one
            was collecting (its results are discarded).
        """
        self._generation += 1
        generation = self._generation
        logger.info(f"Scan {generation} started: {source.describe()}")

        result = await source.collect()
        if generation != self._generation:
            logger.debug(
                f"Discarding scan {generation}: generation {self._generation} is newer"
            )
            return None

        graph = SymbolGraph.build(result.symbols)
        logger.info(
            f"Pass 1 complete: {result.files_indexed} files, {len(graph.symbols)} symbols"
        )
        logger.info(f"Pass 2 complete: {len(graph.relationships)} relationships")
        geometry = layout(graph.symbols, graph.relationships, self.config.layout)

        report = ScanReport(
            generation=generation,
            files_indexed=result.files_indexed,
            errors=list(result.errors),
            symbol_count=len(graph.symbols),
            relationship_count=len(graph.relationships),
        )
        snapshot = IndexSnapshot(
            generation=generation, graph=graph, layout=geometry, report=report
        )
        self._snapshot = snapshot
        logger.info(f"Scan {generation} complete: {report.summary()}")
        return snapshot

    def start_scan(self, source: SymbolSource) -> asyncio.Task:
        """Start a scan in the background, cancelling any scan still running."""
        if self._task is not None and not self._task.done():
            logger.debug("Cancelling in-flight scan")
            self._task.cancel()
        self._task = asyncio.create_task(self.scan(source), name="symbol_scan")
        return self._task

    async def wait(self) -> Optional[IndexSnapshot]:
        """Wait for the latest background scan and return the live snapshot."""
        if self._task is not None:
            try:
                await self._task
            except asyncio.CancelledError:
                logger.debug("Background scan was cancelled")
        return self._snapshot
