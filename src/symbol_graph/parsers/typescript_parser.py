# symbol_graph/parsers/typescript_parser.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
TypeScript parser using tree-sitter.

Handles TypeScript (.ts) and, with ``tsx=True``, TSX (.tsx) files. Extracts
classes with their heritage clauses, interfaces, type aliases, functions,
arrow functions bound to variables, methods, fields, module variables,
imports and export lists.
"""

import os
from typing import Optional

import tree_sitter_typescript
from tree_sitter import Language, Parser

from symbol_graph.models import (
    KIND_CLASS,
    KIND_EXPORT,
    KIND_FUNCTION,
    KIND_IMPORT,
    KIND_INTERFACE,
    KIND_METHOD,
    KIND_PROPERTY,
    KIND_TYPE_ALIAS,
    KIND_VARIABLE,
)

from .base import BaseParser, SymbolCollector, TreeSitterMixin, unique
from .keywords import TS_BUILTINS, TS_KEYWORDS


CLASS_NODES = ("class_declaration", "abstract_class_declaration")
FUNCTION_NODES = ("function_declaration", "generator_function_declaration")
FUNCTION_VALUES = ("arrow_function", "function_expression", "function", "generator_function")
METHOD_NODES = ("method_definition", "method_signature", "abstract_method_signature")
CONTAINER_NODES = (
    "statement_block",
    "if_statement",
    "else_clause",
    "try_statement",
    "catch_clause",
    "finally_clause",
    "ambient_declaration",
    "internal_module",
    "module",
)


class TypeScriptParser(TreeSitterMixin, BaseParser):
    """Parser for TypeScript/TSX code with symbol extraction."""

    def __init__(self, tsx: bool = False):
        self.tsx = tsx
        self.language = "tsx" if tsx else "typescript"
        if tsx:
            self.ts_language = Language(tree_sitter_typescript.language_tsx())
        else:
            self.ts_language = Language(tree_sitter_typescript.language_typescript())
        self.parser = Parser(self.ts_language)

    def _collect(self, content: str, collector: SymbolCollector) -> None:
        tree = self.parser.parse(content.encode("utf-8"))
        self._visit(tree.root_node, collector)
        self._character_columns(content, collector)

    def _visit(self, node, collector: SymbolCollector) -> None:
        for child in node.children:
            self._visit_node(child, collector, anchor=child)

    def _visit_node(self, node, collector: SymbolCollector, anchor) -> None:
        """Dispatch one statement-level node."""
        if node.type == "export_statement":
            self._visit_export(node, collector)
        elif node.type in CLASS_NODES:
            self._visit_class(node, collector, anchor)
        elif node.type in FUNCTION_NODES:
            self._visit_function(node, collector, anchor)
        elif node.type in ("lexical_declaration", "variable_declaration"):
            self._visit_variables(node, collector, anchor)
        elif node.type == "interface_declaration":
            self._visit_interface(node, collector, anchor)
        elif node.type == "type_alias_declaration":
            self._visit_type_alias(node, collector, anchor)
        elif node.type == "import_statement":
            self._visit_import(node, collector)
        elif node.type in CONTAINER_NODES:
            self._visit(node, collector)

    # -- declarations -------------------------------------------------------

    def _visit_class(self, node, collector: SymbolCollector, anchor) -> None:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return
        name = self._text(name_node)
        extends: list[str] = []
        implements: list[str] = []
        for child in node.children:
            if child.type != "class_heritage":
                continue
            for clause in child.children:
                if clause.type == "extends_clause":
                    extends.extend(self._heritage_names(clause))
                elif clause.type == "implements_clause":
                    implements.extend(self._heritage_names(clause))

        collector.add(
            name, KIND_CLASS, **self._span(anchor),
            signature=self._first_line(anchor),
            references=extends + implements,
            extends=extends,
            implements=implements,
        )

        body = node.child_by_field_name("body")
        if body is None:
            return
        for member in body.children:
            if member.type in METHOD_NODES:
                self._visit_method(member, collector, parent=name)
            elif member.type in ("public_field_definition", "property_definition"):
                self._visit_field(member, collector, parent=name)

    def _visit_method(self, node, collector: SymbolCollector, parent: str) -> None:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return
        name = self._text(name_node)
        calls = [c for c in self._raw_calls(node) if c != name]
        collector.add(
            name, KIND_METHOD, **self._span(node),
            signature=self._first_line(node),
            references=unique(calls + self._type_names(node)),
            parent=parent,
            calls=calls,
        )

    def _visit_field(self, node, collector: SymbolCollector, parent: str) -> None:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return
        name = self._text(name_node)
        value = node.child_by_field_name("value")
        calls = []
        refs = self._type_names(node.child_by_field_name("type"))
        if value is not None:
            if value.type in FUNCTION_VALUES:
                calls = [c for c in self._raw_calls(value) if c != name]
            refs = refs + self._identifiers(value)
        collector.add(
            name, KIND_PROPERTY, **self._span(node),
            signature=self._first_line(node),
            references=[r for r in unique(calls + refs) if r != name],
            parent=parent,
            calls=calls,
        )

    def _visit_function(self, node, collector: SymbolCollector, anchor) -> None:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return
        name = self._text(name_node)
        calls = [c for c in self._raw_calls(node) if c != name]
        collector.add(
            name, KIND_FUNCTION, **self._span(anchor),
            signature=self._first_line(anchor),
            references=[r for r in unique(calls + self._type_names(node)) if r != name],
            calls=calls,
        )

    def _visit_variables(self, node, collector: SymbolCollector, anchor) -> None:
        """``const foo = () => {}`` is a function; other top-level bindings are variables."""
        top_level = anchor.parent is not None and anchor.parent.type == "program"
        for declarator in node.children:
            if declarator.type != "variable_declarator":
                continue
            name_node = declarator.child_by_field_name("name")
            value = declarator.child_by_field_name("value")
            if name_node is None or name_node.type != "identifier":
                continue
            name = self._text(name_node)
            if value is not None and value.type in FUNCTION_VALUES:
                calls = [c for c in self._raw_calls(value) if c != name]
                collector.add(
                    name, KIND_FUNCTION, **self._span(anchor),
                    signature=self._first_line(anchor),
                    references=[r for r in unique(calls + self._type_names(value)) if r != name],
                    calls=calls,
                )
            elif top_level:
                refs = self._type_names(declarator.child_by_field_name("type"))
                if value is not None:
                    refs = refs + self._identifiers(value)
                collector.add(
                    name, KIND_VARIABLE, **self._span(anchor),
                    signature=self._first_line(anchor),
                    references=[r for r in unique(refs) if r != name],
                )

    def _visit_interface(self, node, collector: SymbolCollector, anchor) -> None:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return
        name = self._text(name_node)
        extends: list[str] = []
        for child in node.children:
            if child.type in ("extends_type_clause", "extends_clause"):
                extends.extend(self._heritage_names(child))
        body_refs = self._type_names(node.child_by_field_name("body"))
        collector.add(
            name, KIND_INTERFACE, **self._span(anchor),
            signature=self._first_line(anchor),
            references=[r for r in unique(extends + body_refs) if r != name],
            extends=extends,
        )

    def _visit_type_alias(self, node, collector: SymbolCollector, anchor) -> None:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return
        name = self._text(name_node)
        refs = self._type_names(node.child_by_field_name("value"))
        collector.add(
            name, KIND_TYPE_ALIAS, **self._span(anchor),
            signature=self._first_line(anchor),
            references=[r for r in refs if r != name],
        )

    # -- imports / exports --------------------------------------------------

    def _visit_import(self, node, collector: SymbolCollector) -> None:
        """Handles default, named, namespace, type-only and side-effect imports."""
        source_node = node.child_by_field_name("source")
        if source_node is None:
            return
        module = self._text(source_node).strip("'\"")
        bindings: list[str] = []
        for child in node.children:
            if child.type != "import_clause":
                continue
            for part in child.children:
                if part.type == "identifier":
                    bindings.append(self._text(part))
                elif part.type == "named_imports":
                    for spec in part.children:
                        if spec.type != "import_specifier":
                            continue
                        alias = spec.child_by_field_name("alias")
                        name = spec.child_by_field_name("name")
                        target = alias if alias is not None else name
                        if target is not None:
                            bindings.append(self._text(target))
                elif part.type == "namespace_import":
                    for identifier in part.children:
                        if identifier.type == "identifier":
                            bindings.append(self._text(identifier))
                            break
        collector.add(
            module, KIND_IMPORT, **self._span(node),
            signature=" ".join(self._text(node).split()),
            references=bindings,
        )

    def _visit_export(self, node, collector: SymbolCollector) -> None:
        declaration = node.child_by_field_name("declaration")
        if declaration is not None:
            self._visit_node(declaration, collector, anchor=node)
            return

        source_node = node.child_by_field_name("source")
        module = self._text(source_node).strip("'\"") if source_node is not None else None
        signature = " ".join(self._text(node).split())

        for child in node.children:
            if child.type == "export_clause":
                names = []
                for spec in child.children:
                    if spec.type == "export_specifier":
                        name = spec.child_by_field_name("name")
                        if name is not None:
                            names.append(self._text(name))
                collector.add(
                    module or self._module_name(collector), KIND_EXPORT, **self._span(node),
                    signature=signature, references=names,
                )
                return
            if child.type == "*" and module:
                collector.add(module, KIND_EXPORT, **self._span(node), signature=signature)
                return

        value = node.child_by_field_name("value")
        if value is not None and value.type == "identifier":
            collector.add(
                "default", KIND_EXPORT, **self._span(node),
                signature=signature, references=[self._text(value)],
            )

    def _module_name(self, collector: SymbolCollector) -> str:
        return os.path.splitext(os.path.basename(collector.file_path))[0]

    # -- name helpers -------------------------------------------------------

    def _type_name(self, node) -> Optional[str]:
        if node.type in ("identifier", "type_identifier"):
            return self._text(node)
        if node.type == "member_expression":
            prop = node.child_by_field_name("property")
            return self._text(prop) if prop is not None else None
        if node.type == "nested_type_identifier":
            name = node.child_by_field_name("name")
            return self._text(name) if name is not None else None
        if node.type == "generic_type":
            name = node.child_by_field_name("name")
            return self._type_name(name) if name is not None else None
        return None

    def _heritage_names(self, clause) -> list[str]:
        """Names in an extends/implements clause, without type arguments."""
        names = []
        for child in clause.children:
            name = self._type_name(child)
            if name:
                names.append(name)
        return unique(names)

    def _type_names(self, node) -> list[str]:
        """Type identifiers mentioned in parameters, return type or a type expression."""
        if node is None:
            return []
        targets = []
        if node.type in FUNCTION_NODES + FUNCTION_VALUES + METHOD_NODES:
            for field_name in ("parameters", "return_type"):
                part = node.child_by_field_name(field_name)
                if part is not None:
                    targets.append(part)
        else:
            targets.append(node)
        names = []
        for target in targets:
            for child in self._walk_tree(target):
                if child.type == "type_identifier":
                    names.append(self._text(child))
        return unique(names)

    def _identifiers(self, node) -> list[str]:
        names = []
        for child in self._walk_tree(node):
            if child.type in ("identifier", "type_identifier"):
                text = self._text(child)
                if text not in TS_KEYWORDS and text not in TS_BUILTINS:
                    names.append(text)
        return unique(names)

    def _raw_calls(self, node) -> list[str]:
        """Call and ``new`` targets in a function body, reduced to the last segment."""
        body = node.child_by_field_name("body")
        if body is None:
            return []
        calls = []
        for child in self._walk_tree(body):
            if child.type == "call_expression":
                target = child.child_by_field_name("function")
            elif child.type == "new_expression":
                target = child.child_by_field_name("constructor")
            else:
                continue
            if target is None:
                continue
            if target.type == "identifier":
                name = self._text(target)
            elif target.type == "member_expression":
                obj = target.child_by_field_name("object")
                prop = target.child_by_field_name("property")
                if prop is None or (obj is not None and self._text(obj) in TS_BUILTINS):
                    continue
                name = self._text(prop)
            else:
                continue
            if name not in TS_BUILTINS and name not in TS_KEYWORDS:
                calls.append(name)
        return unique(calls)
