# symbol_graph/parsers/python_parser.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Python parser using tree-sitter.

Extracts classes, functions, methods, class attributes, module variables and
imports with their full source spans. Call targets inside function bodies are
recorded so the resolver can emit ``calls`` edges.
"""

from typing import Optional

import tree_sitter_python
from tree_sitter import Language, Parser

from symbol_graph.models import (
    KIND_CLASS,
    KIND_FUNCTION,
    KIND_IMPORT,
    KIND_METHOD,
    KIND_PROPERTY,
    KIND_VARIABLE,
)

from .base import BaseParser, SymbolCollector, TreeSitterMixin, unique
from .keywords import PYTHON_BUILTINS, PYTHON_KEYWORDS


class PythonParser(TreeSitterMixin, BaseParser):
    """Parser for Python code with symbol extraction."""

    language = "python"

    def __init__(self):
        self.ts_language = Language(tree_sitter_python.language())
        self.parser = Parser(self.ts_language)

    def _collect(self, content: str, collector: SymbolCollector) -> None:
        tree = self.parser.parse(content.encode("utf-8"))
        self._visit(tree.root_node, collector, parent_class=None)
        self._character_columns(content, collector)

    def _visit(self, node, collector: SymbolCollector, parent_class: Optional[str]) -> None:
        """Recursively extract symbols from AST nodes."""
        for child in node.children:
            if child.type == "decorated_definition":
                definition = child.child_by_field_name("definition")
                if definition is not None:
                    self._visit_definition(definition, collector, parent_class)
            elif child.type in ("class_definition", "function_definition"):
                self._visit_definition(child, collector, parent_class)
            elif child.type == "import_statement":
                self._visit_import(child, collector)
            elif child.type == "import_from_statement":
                self._visit_from_import(child, collector)
            elif child.type == "expression_statement":
                self._visit_assignment(child, collector, parent_class)
            elif child.type in ("block", "if_statement", "try_statement", "else_clause",
                                "elif_clause", "except_clause", "finally_clause", "with_statement"):
                self._visit(child, collector, parent_class)

    def _visit_definition(
        self, node, collector: SymbolCollector, parent_class: Optional[str]
    ) -> None:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return
        name = self._text(name_node)

        if node.type == "class_definition":
            bases = self._superclasses(node)
            collector.add(
                name, KIND_CLASS, **self._span(node),
                signature=self._class_signature(node),
                references=[b for b in bases if b != name],
                extends=bases,
                parent=parent_class,
            )
            body = node.child_by_field_name("body")
            if body is not None:
                self._visit(body, collector, parent_class=name)
            return

        calls = [c for c in self._raw_calls(node) if c != name]
        type_refs = [t for t in self._annotation_names(node) if t != name]
        collector.add(
            name, KIND_METHOD if parent_class else KIND_FUNCTION, **self._span(node),
            signature=self._function_signature(node),
            references=unique(calls + type_refs),
            parent=parent_class,
            calls=calls,
        )

    def _superclasses(self, node) -> list[str]:
        """Base class names from ``class Name(Base, pkg.Mixin, metaclass=M)``."""
        superclasses = node.child_by_field_name("superclasses")
        if superclasses is None:
            return []
        bases = []
        for child in superclasses.children:
            if child.type == "identifier":
                bases.append(self._text(child))
            elif child.type == "attribute":
                attr = child.child_by_field_name("attribute")
                if attr is not None:
                    bases.append(self._text(attr))
            elif child.type == "subscript":
                value = child.child_by_field_name("value")
                if value is not None and value.type == "identifier":
                    bases.append(self._text(value))
        return unique(bases)

    def _class_signature(self, node) -> str:
        """Extract class signature (class Name(bases))."""
        text = self._text(node)
        colon_idx = text.find(":")
        if colon_idx > 0:
            return text[:colon_idx].strip()
        return text.split("\n")[0].strip()

    def _function_signature(self, node) -> str:
        """Extract function signature (def name(params) -> return)."""
        sig = "async def " if self._text(node).startswith("async") else "def "
        name_node = node.child_by_field_name("name")
        params_node = node.child_by_field_name("parameters")
        return_node = node.child_by_field_name("return_type")
        if name_node is not None:
            sig += self._text(name_node)
        if params_node is not None:
            sig += self._text(params_node)
        if return_node is not None:
            sig += " -> " + self._text(return_node)
        return sig

    def _raw_calls(self, node) -> list[str]:
        """Call targets in the function body, reduced to their last segment.

        ``self.store.fetch()`` is recorded as ``fetch``; resolution is by name.
        """
        body = node.child_by_field_name("body")
        if body is None:
            return []
        calls = []
        for child in self._walk_tree(body):
            if child.type != "call":
                continue
            func_node = child.child_by_field_name("function")
            if func_node is None:
                continue
            if func_node.type == "identifier":
                target = self._text(func_node)
            elif func_node.type == "attribute":
                attr = func_node.child_by_field_name("attribute")
                if attr is None:
                    continue
                target = self._text(attr)
            else:
                continue
            if target not in PYTHON_BUILTINS and target not in PYTHON_KEYWORDS:
                calls.append(target)
        return unique(calls)

    def _annotation_names(self, node) -> list[str]:
        """Identifiers used in parameter and return annotations."""
        names = []
        targets = []
        params = node.child_by_field_name("parameters")
        if params is not None:
            targets.extend(
                child for child in self._walk_tree(params) if child.type == "type"
            )
        return_node = node.child_by_field_name("return_type")
        if return_node is not None:
            targets.append(return_node)
        for target in targets:
            for child in self._walk_tree(target):
                if child.type == "identifier":
                    text = self._text(child)
                    if text not in PYTHON_KEYWORDS and text not in PYTHON_BUILTINS:
                        names.append(text)
        return unique(names)

    def _visit_import(self, node, collector: SymbolCollector) -> None:
        """``import a.b, c as d`` -> one import symbol per module."""
        for child in node.children:
            if child.type == "dotted_name":
                module = self._text(child)
                bound = module.split(".")[0]
            elif child.type == "aliased_import":
                name_node = child.child_by_field_name("name")
                alias_node = child.child_by_field_name("alias")
                if name_node is None:
                    continue
                module = self._text(name_node)
                bound = self._text(alias_node) if alias_node is not None else module.split(".")[0]
            else:
                continue
            collector.add(
                module, KIND_IMPORT, **self._span(node),
                signature=self._text(node).strip(),
                references=[bound],
            )

    def _visit_from_import(self, node, collector: SymbolCollector) -> None:
        """``from a import b, c as d`` -> one import symbol named ``a``."""
        module_node = node.child_by_field_name("module_name")
        if module_node is None:
            return
        bindings = []
        for child in node.children:
            if child == module_node:
                continue
            if child.type == "dotted_name":
                bindings.append(self._text(child).split(".")[-1])
            elif child.type == "aliased_import":
                name_node = child.child_by_field_name("name")
                alias_node = child.child_by_field_name("alias")
                if alias_node is not None:
                    bindings.append(self._text(alias_node))
                elif name_node is not None:
                    bindings.append(self._text(name_node))
        collector.add(
            self._text(module_node), KIND_IMPORT, **self._span(node),
            signature=" ".join(self._text(node).split()),
            references=bindings,
        )

    def _visit_assignment(
        self, node, collector: SymbolCollector, parent_class: Optional[str]
    ) -> None:
        """Module variables and class attributes: ``NAME = ...`` / ``name: T = ...``."""
        expr = node.children[0] if node.children else None
        if expr is None or expr.type != "assignment":
            return
        left = expr.child_by_field_name("left")
        if left is None or left.type != "identifier":
            return
        name = self._text(left)
        refs = []
        for field_name in ("type", "right"):
            part = expr.child_by_field_name(field_name)
            if part is None:
                continue
            for child in self._walk_tree(part):
                if child.type == "identifier":
                    text = self._text(child)
                    if text != name and text not in PYTHON_KEYWORDS and text not in PYTHON_BUILTINS:
                        refs.append(text)
        collector.add(
            name, KIND_PROPERTY if parent_class else KIND_VARIABLE, **self._span(node),
            signature=self._text(node).split("\n")[0].strip(),
            references=refs,
            parent=parent_class,
        )
