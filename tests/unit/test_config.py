# tests/unit/test_config.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""Tests for IndexerConfig loading from YAML and the environment."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from symbol_graph.config import IndexerConfig, LayoutConfig


class TestDefaults:
    """Tests for default values."""

    def test_layout_defaults(self):
        """Layout constants default to 200x100 boxes, 100 node and 150 rank gaps."""
        cfg = LayoutConfig()

        assert cfg.direction == "TB"
        assert (cfg.node_width, cfg.node_height, cfg.node_sep, cfg.rank_sep) == (200, 100, 100, 150)

    def test_indexer_defaults(self):
        """Line parser, all recognized extensions, common ignore dirs."""
        cfg = IndexerConfig()

        assert cfg.parser == "line"
        assert cfg.root is None
        assert ".tsx" in cfg.extensions and ".py" in cfg.extensions
        assert "node_modules" in cfg.ignore_dirs

    def test_is_supported_ignores_case(self):
        """Extension checks are case-insensitive."""
        cfg = IndexerConfig()

        assert cfg.is_supported("src/App.TSX")
        assert not cfg.is_supported("notes.md")

    @pytest.mark.parametrize(
        "kwargs",
        [{"parser": "regex"}, {"max_concurrency": 0}, {"layout": {"direction": "RL"}}],
    )
    def test_invalid_values(self, kwargs):
        """Out-of-range values are rejected."""
        with pytest.raises(ValidationError):
            IndexerConfig(**kwargs)


class TestFromYaml:
    """Tests for YAML loading."""

    def test_full_file(self, tmp_path):
        """Nested layout settings are parsed."""
        path = tmp_path / "indexer.yaml"
        path.write_text(
            "root: src\n"
            "parser: tree_sitter\n"
            "max_concurrency: 4\n"
            "layout:\n"
            "  direction: LR\n"
            "  rank_sep: 80\n"
        )
        cfg = IndexerConfig.from_yaml(path)

        assert cfg.root == Path("src")
        assert cfg.parser == "tree_sitter"
        assert cfg.max_concurrency == 4
        assert cfg.layout.direction == "LR"
        assert cfg.layout.rank_sep == 80
        assert cfg.layout.node_width == 200

    def test_empty_file(self, tmp_path):
        """An empty file gives the defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert IndexerConfig.from_yaml(path) == IndexerConfig()


class TestFromEnv:
    """Tests for environment loading."""

    def test_environment_variables(self, clean_env, tmp_path):
        """SYMBOL_GRAPH_* variables override defaults."""
        clean_env.setenv("SYMBOL_GRAPH_ROOT", "/srv/app")
        clean_env.setenv("SYMBOL_GRAPH_PARSER", "tree_sitter")
        clean_env.setenv("SYMBOL_GRAPH_MAX_CONCURRENCY", "8")
        clean_env.setenv("SYMBOL_GRAPH_DIRECTION", "lr")

        cfg = IndexerConfig.from_env(str(tmp_path / "absent.env"))

        assert cfg.root == Path("/srv/app")
        assert cfg.parser == "tree_sitter"
        assert cfg.max_concurrency == 8
        assert cfg.layout.direction == "LR"

    def test_dotenv_file(self, clean_env, tmp_path):
        """Values in a .env file are picked up."""
        dotenv = tmp_path / ".env"
        dotenv.write_text("SYMBOL_GRAPH_PARSER=tree_sitter\nSYMBOL_GRAPH_MAX_CONCURRENCY=2\n")

        cfg = IndexerConfig.from_env(str(dotenv))

        assert cfg.parser == "tree_sitter"
        assert cfg.max_concurrency == 2

    def test_no_variables(self, clean_env, tmp_path):
        """Without variables the defaults apply."""
        assert IndexerConfig.from_env(str(tmp_path / "absent.env")) == IndexerConfig()
