# symbol_graph/parsers/line_parser.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Single-line-anchored symbol extraction.

Each line is matched against an ordered list of declaration patterns. A
declaration spanning several lines is recognized from its opening line only;
its end position defaults to the declaration line. The exceptions are an
import statement whose name list wraps, which is joined up to its closing
line so that the module specifier is found, and a class header that wraps
before its body opens, which stays pending until its base list or opening
brace is seen.

String literals and comments are blanked (replaced by spaces, so columns are
preserved) before patterns run and before identifiers are collected.
"""

import os
import re
from dataclasses import dataclass, replace
from typing import Optional

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
    Symbol,
)

from .base import BaseParser, SymbolCollector, last_segment, scan_identifiers, unique
from .keywords import PYTHON_BUILTINS, PYTHON_KEYWORDS, TS_BUILTINS, TS_KEYWORDS


# Lines a wrapped import or class header may span before it is abandoned
MAX_CONTINUATION_LINES = 50


class LineCleaner:
    """Blanks string literals and comments, carrying open delimiters across lines."""

    def __init__(
        self,
        line_comment: str,
        quotes: tuple[str, ...],
        multiline: tuple[str, ...],
        block_comment: Optional[tuple[str, str]] = None,
        string_prefixes: str = "",
    ):
        self.line_comment = line_comment
        # Longest delimiters first so ''' wins over '
        self.quotes = tuple(sorted(quotes, key=len, reverse=True))
        self.multiline = multiline
        self.block_comment = block_comment
        self.string_prefixes = string_prefixes

    def clean(self, line: str, state: Optional[str]) -> tuple[str, Optional[str]]:
        """Blank literals in one line.

        Args:
            line: Raw source line.
            state: Closing delimiter still open from the previous line, if any.

        Returns:
            (cleaned line of the same length, delimiter left open or None)
        """
        out: list[str] = []
        i = 0
        n = len(line)
        closing = state
        while i < n:
            if closing is not None:
                if line[i] == "\\" and closing != "*/":
                    width = min(2, n - i)
                    out.append(" " * width)
                    i += width
                elif line.startswith(closing, i):
                    out.append(" " * len(closing))
                    i += len(closing)
                    closing = None
                else:
                    out.append(" ")
                    i += 1
                continue

            if line.startswith(self.line_comment, i):
                out.append(" " * (n - i))
                break
            if self.block_comment and line.startswith(self.block_comment[0], i):
                out.append(" " * len(self.block_comment[0]))
                i += len(self.block_comment[0])
                closing = self.block_comment[1]
                continue

            quote = next((q for q in self.quotes if line.startswith(q, i)), None)
            if quote is not None:
                self._blank_prefix(out)
                out.append(" " * len(quote))
                i += len(quote)
                closing = quote
                continue

            out.append(line[i])
            i += 1

        # Only multi-line delimiters survive the end of a line
        if closing is not None and closing not in self.multiline:
            closing = None
        return "".join(out), closing

    def _blank_prefix(self, out: list[str]) -> None:
        """Blank a string prefix such as f or rb sitting right before a quote."""
        if not self.string_prefixes:
            return
        end = len(out)
        start = end
        while start > 0 and out[start - 1] in self.string_prefixes:
            start -= 1
        if 0 < end - start <= 2:
            before = out[start - 1] if start > 0 else " "
            if not (before.isalnum() or before == "_"):
                for k in range(start, end):
                    out[k] = " "


def _split_names(text: str) -> list[str]:
    """Split a comma list, dropping generic arguments and keyword arguments."""
    depth = 0
    flat = []
    for ch in text:
        if ch in "<[(":
            depth += 1
        elif ch in ">])":
            depth = max(0, depth - 1)
        elif depth == 0:
            flat.append(ch)
    names = []
    for part in "".join(flat).split(","):
        part = part.strip()
        if not part or "=" in part or part.startswith("*"):
            continue
        match = re.match(r"[A-Za-z_$][\w$.]*", part)
        if match:
            names.append(last_segment(match.group(0)))
    return names


@dataclass
class _OpenClass:
    name: str
    level: int  # Indentation (Python) or brace depth (TypeScript) of the header
    body_level: Optional[int] = None
    header: Optional[Symbol] = None  # Set while the header still wraps
    balance: int = 0  # Unclosed parentheses of a wrapped Python header


def _finish_header(open_class: _OpenClass, lineno: int, end_column: int) -> None:
    header = open_class.header
    header.location = replace(header.location, end_line=lineno, end_column=end_column)
    open_class.header = None


# -- TypeScript / JavaScript ------------------------------------------------

_TS_IDENT = r"[A-Za-z_$][\w$]*"

TS_FUNCTION_RE = re.compile(
    rf"\b(?:export\s+)?(?:default\s+)?(?:async\s+)?function\b\s*\*?\s*(?P<name>{_TS_IDENT})"
    r"\s*(?:<[^>]*>)?\s*\("
)
TS_ARROW_RE = re.compile(
    rf"\b(?:export\s+)?(?:const|let|var)\s+(?P<name>{_TS_IDENT})\s*(?::[^=]+)?="
    rf"\s*(?:async\s+)?(?:function\b|(?:<[^>]*>\s*)?\([^)]*\)\s*(?::[^=]*?)?=>|\(\s*$|{_TS_IDENT}\s*=>)"
)
TS_CLASS_RE = re.compile(
    rf"\b(?:export\s+)?(?:default\s+)?(?:abstract\s+)?class\s+(?P<name>{_TS_IDENT})(?:\s*<[^>]*>)?"
    rf"(?:\s+extends\s+(?P<extends>{_TS_IDENT}(?:\.{_TS_IDENT})*)(?:\s*<[^>]*>)?)?"
    rf"(?:\s+implements\s+(?P<implements>[\w$.<>,\s]+?))?\s*(?:\{{|$)"
)
TS_EXTENDS_RE = re.compile(rf"\bextends\s+(?P<name>{_TS_IDENT}(?:\.{_TS_IDENT})*)")
TS_IMPLEMENTS_RE = re.compile(r"\bimplements\s+(?P<names>[\w$.<>,\s]+)")
TS_INTERFACE_RE = re.compile(
    rf"\b(?:export\s+)?(?:default\s+)?(?:declare\s+)?interface\s+(?P<name>{_TS_IDENT})(?:\s*<[^>]*>)?"
    r"(?:\s+extends\s+(?P<extends>[\w$.<>,\s]+?))?\s*(?:\{|$)"
)
TS_TYPE_ALIAS_RE = re.compile(
    rf"\b(?:export\s+)?(?:declare\s+)?type\s+(?P<name>{_TS_IDENT})(?:\s*<[^>]*>)?\s*=(?!=)"
)
TS_VARIABLE_RE = re.compile(
    rf"^(?:export\s+)?(?:const|let|var)\s+(?P<name>{_TS_IDENT})\s*(?::[^=]+)?=(?!=)"
)
TS_METHOD_RE = re.compile(
    r"^\s*(?:(?:public|private|protected|static|async|readonly|abstract|override|get|set)\s+)*"
    rf"(?P<name>#?{_TS_IDENT})\s*\??\s*(?:<[^>]*>)?\s*\("
)
TS_PROPERTY_RE = re.compile(
    r"^\s*(?:(?:public|private|protected|static|readonly|declare|abstract|override)\s+)*"
    rf"(?P<name>#?{_TS_IDENT})\s*[?!]?\s*(?::[^=;]+)?(?:=[^;]*)?;?\s*$"
)
TS_IMPORT_FROM_RE = re.compile(
    r"^\s*import\s+(?:type\s+)?(?P<clause>.+?)\s+from\s+(?P<q>['\"])(?P<module>[^'\"]+)(?P=q)"
)
TS_IMPORT_BARE_RE = re.compile(r"^\s*import\s+(?P<q>['\"])(?P<module>[^'\"]+)(?P=q)")
TS_EXPORT_LIST_RE = re.compile(
    r"^\s*export\s+(?:type\s+)?\{(?P<names>[^}]*)\}"
    r"(?:\s*from\s+(?P<q>['\"])(?P<module>[^'\"]+)(?P=q))?"
)
TS_EXPORT_STAR_RE = re.compile(
    rf"^\s*export\s+\*\s*(?:as\s+(?P<alias>{_TS_IDENT})\s+)?from\s+(?P<q>['\"])(?P<module>[^'\"]+)(?P=q)"
)
TS_EXPORT_DEFAULT_RE = re.compile(rf"^\s*export\s+default\s+(?P<name>{_TS_IDENT})\s*;?\s*$")

_TS_NOT_MEMBERS = TS_KEYWORDS | frozenset({"if", "for", "while", "switch", "catch", "return"})


def ts_import_bindings(clause: str) -> list[str]:
    """Locally bound names of an import clause.

    ``Foo, { Bar, Baz as Qux, type T } `` -> ["Foo", "Bar", "Qux", "T"]
    ``* as ns`` -> ["ns"]
    """
    names: list[str] = []
    named: list[str] = []
    braces = re.search(r"\{([^}]*)\}", clause)
    if braces:
        for part in braces.group(1).split(","):
            part = re.sub(r"^\s*type\s+", "", part).strip()
            if not part:
                continue
            pieces = re.split(r"\s+as\s+", part)
            named.append(pieces[-1].strip())
        clause = clause[: braces.start()] + clause[braces.end() :]

    namespace = re.search(rf"\*\s*as\s+({_TS_IDENT})", clause)
    if namespace:
        clause = clause[: namespace.start()] + clause[namespace.end() :]

    for part in clause.split(","):
        part = part.strip()
        if re.fullmatch(_TS_IDENT, part) and part != "type":
            names.append(part)
    names.extend(named)
    if namespace:
        names.append(namespace.group(1))
    return [n for n in names if re.fullmatch(_TS_IDENT, n)]


class TypeScriptLineParser(BaseParser):
    """Line rules for TypeScript and JavaScript."""

    language = "typescript"

    def __init__(self):
        self.cleaner = LineCleaner(
            line_comment="//",
            quotes=("'", '"', "`"),
            multiline=("`", "*/"),
            block_comment=("/*", "*/"),
        )
        self._skip = TS_KEYWORDS | TS_BUILTINS

    def _collect(self, content: str, collector: SymbolCollector) -> None:
        lines = content.splitlines()
        state: Optional[str] = None
        depth = 0
        classes: list[_OpenClass] = []
        pending: Optional[tuple[int, int, list[str]]] = None

        for index, raw in enumerate(lines):
            lineno = index + 1
            was_open = state is not None
            clean, state = self.cleaner.clean(raw, state)
            depth_before = depth
            depth += clean.count("{") - clean.count("}")

            if pending is not None:
                start_line, column, parts = pending
                parts.append(raw.strip())
                joined = " ".join(parts)
                if self._match_import(
                    joined, start_line, column, collector, end_line=lineno, end_column=len(raw)
                ):
                    pending = None
                elif lineno - start_line >= MAX_CONTINUATION_LINES:
                    pending = None
                self._close_classes(classes, depth)
                continue

            if was_open and not clean.strip():
                continue

            stripped = clean.lstrip()
            if stripped.startswith("import") and re.match(r"import\b", stripped):
                column = len(clean) - len(stripped)
                if not self._match_import(raw, lineno, column, collector):
                    # A name list left open on this line continues below
                    if "{" in clean and "}" not in clean:
                        pending = (lineno, column, [raw.strip()])
                self._close_classes(classes, depth)
                continue

            if classes and classes[-1].header is not None:
                if self._continue_header(classes[-1], raw, clean, lineno, depth_before):
                    self._close_classes(classes, depth)
                    continue
                classes.pop()

            member_of = None
            if classes and classes[-1].body_level == depth_before:
                member_of = classes[-1].name

            opened = self._match_declarations(
                raw, clean, lineno, collector, member_of
            )
            if opened is not None:
                if "{" in clean:
                    classes.append(_OpenClass(opened.name, depth_before, depth_before + 1))
                else:
                    # Body brace on a later line
                    classes.append(_OpenClass(opened.name, depth_before, header=opened))
            self._close_classes(classes, depth)

    def _close_classes(self, classes: list[_OpenClass], depth: int) -> None:
        while classes and classes[-1].header is None and depth < classes[-1].body_level:
            classes.pop()

    def _continue_header(
        self, opening: _OpenClass, raw: str, clean: str, lineno: int, depth_before: int
    ) -> bool:
        """Fold a wrapped heritage line into its class; False abandons the header."""
        header = opening.header
        if ";" in clean or lineno - header.line >= MAX_CONTINUATION_LINES:
            return False
        head = clean.split("{")[0]
        extends = TS_EXTENDS_RE.search(head)
        if extends:
            header.extends = unique(header.extends + [last_segment(extends.group("name"))])
        implements = TS_IMPLEMENTS_RE.search(head)
        if implements:
            header.implements = unique(header.implements + _split_names(implements.group("names")))
        elif header.implements and not extends:
            header.implements = unique(header.implements + _split_names(head))
        header.references = unique(header.references + self._refs(head, header.name))
        if "{" in clean:
            opening.body_level = depth_before + 1
            _finish_header(opening, lineno, len(raw))
        return True

    def _refs(self, clean: str, own_name: str) -> list[str]:
        return scan_identifiers(clean, self._skip, exclude=(own_name,))

    def _match_declarations(
        self,
        raw: str,
        clean: str,
        lineno: int,
        collector: SymbolCollector,
        member_of: Optional[str],
    ) -> Optional[Symbol]:
        """Apply declaration rules to one line; returns the class symbol if one opened."""
        signature = raw.strip()
        end_column = len(raw)
        opened_class = None
        matched_function = False

        for match in TS_FUNCTION_RE.finditer(clean):
            name = match.group("name")
            matched_function = True
            collector.add(
                name, KIND_FUNCTION, lineno, match.start(), lineno, end_column,
                signature=signature, references=self._refs(clean, name),
            )

        arrow = TS_ARROW_RE.search(clean)
        if arrow:
            name = arrow.group("name")
            matched_function = True
            collector.add(
                name, KIND_FUNCTION, lineno, arrow.start(), lineno, end_column,
                signature=signature, references=self._refs(clean, name),
            )

        cls = TS_CLASS_RE.search(clean)
        if cls:
            name = cls.group("name")
            extends = [last_segment(cls.group("extends"))] if cls.group("extends") else []
            implements = _split_names(cls.group("implements") or "")
            opened_class = collector.add(
                name, KIND_CLASS, lineno, cls.start(), lineno, end_column,
                signature=signature, references=self._refs(clean, name),
                extends=extends, implements=implements,
            )

        interface = TS_INTERFACE_RE.search(clean)
        if interface:
            name = interface.group("name")
            collector.add(
                name, KIND_INTERFACE, lineno, interface.start(), lineno, end_column,
                signature=signature, references=self._refs(clean, name),
                extends=_split_names(interface.group("extends") or ""),
            )

        alias = TS_TYPE_ALIAS_RE.search(clean)
        if alias:
            name = alias.group("name")
            collector.add(
                name, KIND_TYPE_ALIAS, lineno, alias.start(), lineno, end_column,
                signature=signature, references=self._refs(clean, name),
            )

        if not matched_function and not member_of:
            variable = TS_VARIABLE_RE.match(clean)
            if variable:
                name = variable.group("name")
                collector.add(
                    name, KIND_VARIABLE, lineno, 0, lineno, end_column,
                    signature=signature, references=self._refs(clean, name),
                )

        if member_of and not (matched_function or cls or interface or alias):
            self._match_member(clean, signature, lineno, end_column, member_of, collector)

        if clean.lstrip().startswith("export"):
            self._match_export(raw, clean, lineno, end_column, collector)

        return opened_class

    def _match_member(
        self,
        clean: str,
        signature: str,
        lineno: int,
        end_column: int,
        parent: str,
        collector: SymbolCollector,
    ) -> None:
        column = len(clean) - len(clean.lstrip())
        method = TS_METHOD_RE.match(clean)
        if method and method.group("name").lstrip("#") not in _TS_NOT_MEMBERS - {"constructor", "get", "set"}:
            name = method.group("name")
            collector.add(
                name, KIND_METHOD, lineno, column, lineno, end_column,
                signature=signature, references=self._refs(clean, name), parent=parent,
            )
            return
        prop = TS_PROPERTY_RE.match(clean)
        if prop and prop.group("name").lstrip("#") not in _TS_NOT_MEMBERS:
            # Wrapped parameter lists look like fields; they end with a comma
            if (":" not in clean and "=" not in clean) or clean.rstrip().endswith(","):
                return
            name = prop.group("name")
            collector.add(
                name, KIND_PROPERTY, lineno, column, lineno, end_column,
                signature=signature, references=self._refs(clean, name), parent=parent,
            )

    def _match_import(
        self,
        text: str,
        lineno: int,
        column: int,
        collector: SymbolCollector,
        end_line: Optional[int] = None,
        end_column: Optional[int] = None,
    ) -> bool:
        """Match an import statement; returns True if a symbol was emitted."""
        match = TS_IMPORT_FROM_RE.match(text)
        if match:
            bindings = ts_import_bindings(match.group("clause"))
        else:
            match = TS_IMPORT_BARE_RE.match(text)
            bindings = []
        if not match:
            return False
        collector.add(
            match.group("module"), KIND_IMPORT, lineno, column,
            end_line if end_line is not None else lineno,
            end_column if end_column is not None else len(text),
            signature=" ".join(text.split()), references=bindings,
        )
        return True

    def _match_export(
        self,
        raw: str,
        clean: str,
        lineno: int,
        end_column: int,
        collector: SymbolCollector,
    ) -> None:
        column = len(clean) - len(clean.lstrip())
        signature = raw.strip()
        module_name = os.path.splitext(os.path.basename(collector.file_path))[0]

        listing = TS_EXPORT_LIST_RE.match(raw)
        if listing:
            names = []
            for part in listing.group("names").split(","):
                part = re.sub(r"^\s*type\s+", "", part).strip()
                if part:
                    names.append(re.split(r"\s+as\s+", part)[0].strip())
            collector.add(
                listing.group("module") or module_name, KIND_EXPORT, lineno, column,
                lineno, end_column, signature=signature, references=names,
            )
            return

        star = TS_EXPORT_STAR_RE.match(raw)
        if star:
            collector.add(
                star.group("module"), KIND_EXPORT, lineno, column, lineno, end_column,
                signature=signature,
            )
            return

        default = TS_EXPORT_DEFAULT_RE.match(clean)
        if default and default.group("name") not in TS_KEYWORDS:
            collector.add(
                "default", KIND_EXPORT, lineno, column, lineno, end_column,
                signature=signature, references=[default.group("name")],
            )


# -- Python -----------------------------------------------------------------

PY_DEF_RE = re.compile(r"^(?P<indent>\s*)(?:async\s+)?def\s+(?P<name>[A-Za-z_]\w*)\s*\(")
PY_CLASS_RE = re.compile(
    r"^(?P<indent>\s*)class\s+(?P<name>[A-Za-z_]\w*)\s*(?:\[[^\]]*\])?\s*(?:\((?P<bases>[^)]*)\)?)?\s*:?"
)
PY_IMPORT_RE = re.compile(r"^\s*import\s+(?P<modules>.+)$")
PY_FROM_IMPORT_RE = re.compile(r"^\s*from\s+(?P<module>\.*[\w.]*)\s+import\s+(?P<names>.+)$")
PY_VARIABLE_RE = re.compile(r"^(?P<name>[A-Za-z_]\w*)\s*(?::[^=]+)?=(?!=)")
PY_ATTRIBUTE_RE = re.compile(
    r"^\s+(?P<name>[A-Za-z_]\w*)\s*(?:(?::[^=]*)?=(?!=)|:\s*[\w\[\], .|]+$)"
)


def py_import_bindings(names: str) -> list[str]:
    """``a, b as c, *`` -> ["a", "c"]"""
    bindings = []
    for part in names.replace("(", " ").replace(")", " ").split(","):
        part = part.strip()
        if not part or part == "*":
            continue
        pieces = re.split(r"\s+as\s+", part)
        name = pieces[-1].strip()
        if re.fullmatch(r"[A-Za-z_]\w*", name):
            bindings.append(name)
    return bindings


class PythonLineParser(BaseParser):
    """Line rules for Python."""

    language = "python"

    def __init__(self):
        self.cleaner = LineCleaner(
            line_comment="#",
            quotes=('"""', "'''", '"', "'"),
            multiline=('"""', "'''"),
            string_prefixes="rRbBuUfF",
        )
        self._skip = PYTHON_KEYWORDS | PYTHON_BUILTINS

    def _collect(self, content: str, collector: SymbolCollector) -> None:
        lines = content.splitlines()
        state: Optional[str] = None
        classes: list[_OpenClass] = []
        pending: Optional[tuple[int, int, str, list[str]]] = None

        for index, raw in enumerate(lines):
            lineno = index + 1
            was_open = state is not None
            clean, state = self.cleaner.clean(raw, state)

            if pending is not None:
                start_line, column, module, parts = pending
                parts.append(clean)
                if ")" in clean or lineno - start_line >= MAX_CONTINUATION_LINES:
                    signature = " ".join(" ".join(lines[start_line - 1 : lineno]).split())
                    collector.add(
                        module, KIND_IMPORT, start_line, column, lineno, len(raw),
                        signature=signature, references=py_import_bindings(" ".join(parts)),
                    )
                    pending = None
                continue

            if classes and classes[-1].header is not None:
                self._continue_header(classes[-1], raw, clean, lineno)
                continue

            # Lines that begin inside a docstring are not code
            if was_open:
                continue
            stripped = clean.strip()
            if not stripped:
                continue

            indent = len(clean) - len(clean.lstrip())
            while classes and indent <= classes[-1].level:
                classes.pop()
            if classes and classes[-1].body_level is None and indent > classes[-1].level:
                classes[-1].body_level = indent
            member_of = None
            if classes and classes[-1].body_level == indent:
                member_of = classes[-1].name

            pending = self._match_line(raw, clean, lineno, indent, member_of, classes, collector)

    def _refs(self, clean: str, own_name: str) -> list[str]:
        return scan_identifiers(clean, self._skip, exclude=(own_name,))

    def _continue_header(self, opening: _OpenClass, raw: str, clean: str, lineno: int) -> None:
        """Fold one line of a wrapped base list into its class symbol."""
        header = opening.header
        opening.balance += clean.count("(") - clean.count(")")
        bases = clean[: clean.rfind(")")] if opening.balance <= 0 else clean
        header.extends = unique(header.extends + _split_names(bases))
        header.references = unique(header.references + self._refs(clean, header.name))
        if opening.balance <= 0 or lineno - header.line >= MAX_CONTINUATION_LINES:
            _finish_header(opening, lineno, len(raw))

    def _match_line(
        self,
        raw: str,
        clean: str,
        lineno: int,
        indent: int,
        member_of: Optional[str],
        classes: list[_OpenClass],
        collector: SymbolCollector,
    ) -> Optional[tuple[int, int, str, list[str]]]:
        """Apply Python rules to one line; returns a pending multi-line import."""
        signature = raw.strip()
        end_column = len(raw)

        definition = PY_DEF_RE.match(clean)
        if definition:
            name = definition.group("name")
            kind = KIND_METHOD if member_of else KIND_FUNCTION
            collector.add(
                name, kind, lineno, indent, lineno, end_column,
                signature=signature, references=self._refs(clean, name), parent=member_of,
            )
            return None

        cls = PY_CLASS_RE.match(clean)
        if cls:
            name = cls.group("name")
            bases = _split_names(cls.group("bases") or "")
            symbol = collector.add(
                name, KIND_CLASS, lineno, indent, lineno, end_column,
                signature=signature, references=self._refs(clean, name),
                extends=bases, parent=member_of,
            )
            opening = _OpenClass(name, indent)
            balance = clean.count("(") - clean.count(")")
            if balance > 0:
                opening.header = symbol
                opening.balance = balance
            classes.append(opening)
            return None

        from_import = PY_FROM_IMPORT_RE.match(clean)
        if from_import:
            module = from_import.group("module")
            names = from_import.group("names")
            if "(" in names and ")" not in names:
                return (lineno, indent, module, [names])
            collector.add(
                module, KIND_IMPORT, lineno, indent, lineno, end_column,
                signature=signature, references=py_import_bindings(names),
            )
            return None

        plain_import = PY_IMPORT_RE.match(clean)
        if plain_import:
            for part in plain_import.group("modules").split(","):
                pieces = re.split(r"\s+as\s+", part.strip())
                module = pieces[0].strip()
                if not re.fullmatch(r"[A-Za-z_][\w.]*", module):
                    continue
                # "import a.b" binds "a"; "import a.b as c" binds "c"
                bound = pieces[1].strip() if len(pieces) > 1 else module.split(".")[0]
                collector.add(
                    module, KIND_IMPORT, lineno, indent, lineno, end_column,
                    signature=signature, references=[bound],
                )
            return None

        if indent == 0:
            variable = PY_VARIABLE_RE.match(clean)
            if variable and variable.group("name") not in PYTHON_KEYWORDS:
                name = variable.group("name")
                collector.add(
                    name, KIND_VARIABLE, lineno, 0, lineno, end_column,
                    signature=signature, references=self._refs(clean, name),
                )
        elif member_of:
            attribute = PY_ATTRIBUTE_RE.match(clean)
            if attribute and attribute.group("name") not in PYTHON_KEYWORDS:
                name = attribute.group("name")
                collector.add(
                    name, KIND_PROPERTY, lineno, indent, lineno, end_column,
                    signature=signature, references=self._refs(clean, name),
                    parent=member_of,
                )
        return None
