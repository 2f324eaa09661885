# tests/conftest.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Pytest configuration for symbol_graph tests.

Ensures the src directory is importable and provides small symbol fixtures
shared by the graph, layout and navigator suites.
"""

import sys
from pathlib import Path

import pytest

# Add src directory to path for local packages
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


def make_symbol(name, kind="function", file="a.ts", line=1, references=(), **kwargs):
    """Build a Symbol with an id in the extractor's format."""
    from symbol_graph.models import Location, Symbol

    return Symbol(
        id=f"{file}:{line}:{kind}:{name}",
        name=name,
        kind=kind,
        location=Location(file=file, line=line, column=0, end_line=line, end_column=0),
        signature=kwargs.pop("signature", None),
        references=list(references),
        **kwargs,
    )


@pytest.fixture
def symbol_factory():
    """Factory for hand-built symbols."""
    return make_symbol


@pytest.fixture
def sample_symbols():
    """A small graph: two callers of one helper, a class and an import."""
    return [
        make_symbol("helper", line=1),
        make_symbol("main", line=5, references=["helper", "Config"]),
        make_symbol("other", line=9, references=["helper"]),
        make_symbol("Config", kind="class", file="b.ts", line=2),
        make_symbol("./b", kind="import", file="a.ts", line=0, references=["Config"]),
    ]


ENV_VARS = (
    "SYMBOL_GRAPH_ROOT",
    "SYMBOL_GRAPH_PARSER",
    "SYMBOL_GRAPH_MAX_CONCURRENCY",
    "SYMBOL_GRAPH_DIRECTION",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Unset SYMBOL_GRAPH_* variables and restore them after the test.

    Values loaded from a .env file during the test are removed again too.
    """
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
