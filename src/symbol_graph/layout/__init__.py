# symbol_graph/layout/__init__.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""Layered graph layout: ranking, crossing reduction, positioning, routing."""

from .engine import LayeredLayout, layout
from .models import LayoutEdge, LayoutNode, LayoutResult

__all__ = ["LayeredLayout", "layout", "LayoutEdge", "LayoutNode", "LayoutResult"]
