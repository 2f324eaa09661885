# symbol_graph/config.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Configuration models for symbol indexing.

Settings come from a YAML file (IndexerConfig.from_yaml) or from environment
variables, optionally loaded from a .env file (IndexerConfig.from_env).
"""

import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


DEFAULT_EXTENSIONS = [".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs", ".py", ".pyi"]
DEFAULT_IGNORE_DIRS = [".git", "node_modules", "__pycache__", ".venv", "venv", "dist", "build"]


class LayoutConfig(BaseModel):
    """Geometry constants for the layered layout.

    Attributes:
        direction: "TB" (ranks top to bottom) or "LR" (ranks left to right).
        node_width: Width of every node box.
        node_height: Height of every node box.
        node_sep: Gap between neighbouring nodes in the same rank.
        rank_sep: Gap between consecutive ranks.
        ordering_passes: Maximum barycenter sweeps (down + up) per layout.
    """

    direction: Literal["TB", "LR"] = "TB"
    node_width: float = 200
    node_height: float = 100
    node_sep: float = 100
    rank_sep: float = 150
    ordering_passes: int = Field(default=8, ge=0)


class IndexerConfig(BaseModel):
    """Configuration for a symbol scan.

    Example YAML:
        root: packages/app/src
        parser: tree_sitter
        max_concurrency: 32
        ignore_dirs: [.git, node_modules]
        layout:
          direction: LR
    """

    root: Optional[Path] = None
    parser: Literal["line", "tree_sitter"] = "line"
    extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    ignore_dirs: list[str] = Field(default_factory=lambda: list(DEFAULT_IGNORE_DIRS))
    max_concurrency: int = Field(default=16, ge=1)
    layout: LayoutConfig = Field(default_factory=LayoutConfig)

    @classmethod
    def from_yaml(cls, config_path: Path) -> "IndexerConfig":
        """Load configuration from a YAML file.

        An empty file yields the defaults.
        """
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "IndexerConfig":
        """Build configuration from SYMBOL_GRAPH_* environment variables."""
        if dotenv_path is not None:
            load_dotenv(dotenv_path)
        else:
            load_dotenv()

        data: dict = {}
        root = os.getenv("SYMBOL_GRAPH_ROOT")
        if root:
            data["root"] = Path(root)
        parser = os.getenv("SYMBOL_GRAPH_PARSER")
        if parser:
            data["parser"] = parser
        max_concurrency = os.getenv("SYMBOL_GRAPH_MAX_CONCURRENCY")
        if max_concurrency:
            data["max_concurrency"] = int(max_concurrency)
        direction = os.getenv("SYMBOL_GRAPH_DIRECTION")
        if direction:
            data["layout"] = LayoutConfig(direction=direction.upper())
        return cls(**data)

    def is_supported(self, path: str) -> bool:
        """Whether a file path has one of the configured extensions."""
        suffix = os.path.splitext(path)[1].lower()
        return suffix in {ext.lower() for ext in self.extensions}
