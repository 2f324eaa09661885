# symbol_graph/models.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""
Data models for the symbol index.

A Symbol is one named program entity found by a parser. Its ``references``
hold raw, unresolved names; ``referenced_by`` is never authored by a parser,
it is derived from the resolved relationship list by SymbolGraph.
"""

from dataclasses import dataclass, field
from typing import Optional


# Symbol kinds
KIND_FUNCTION = "function"
KIND_METHOD = "method"
KIND_CLASS = "class"
KIND_INTERFACE = "interface"
KIND_TYPE_ALIAS = "type-alias"
KIND_VARIABLE = "variable"
KIND_PROPERTY = "property"
KIND_IMPORT = "import"
KIND_EXPORT = "export"

SYMBOL_KINDS = (
    KIND_FUNCTION,
    KIND_METHOD,
    KIND_CLASS,
    KIND_INTERFACE,
    KIND_TYPE_ALIAS,
    KIND_VARIABLE,
    KIND_PROPERTY,
    KIND_IMPORT,
    KIND_EXPORT,
)

# Relationship kinds
REL_IMPORTS = "imports"
REL_CALLS = "calls"
REL_EXTENDS = "extends"
REL_IMPLEMENTS = "implements"
REL_REFERENCES = "references"
REL_CONTAINS = "contains"

RELATIONSHIP_KINDS = (
    REL_IMPORTS,
    REL_CALLS,
    REL_EXTENDS,
    REL_IMPLEMENTS,
    REL_REFERENCES,
    REL_CONTAINS,
)


@dataclass(frozen=True)
class Location:
    """Source span of a symbol. Lines are 1-indexed; columns are 0-indexed characters."""

    file: str
    line: int
    column: int
    end_line: int
    end_column: int

    def to_dict(self) -> dict:
        return {
            "file": self.file,
            "line": self.line,
            "column": self.column,
            "endLine": self.end_line,
            "endColumn": self.end_column,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Location":
        line = int(data["line"])
        return cls(
            file=data["file"],
            line=line,
            column=int(data.get("column", 0)),
            end_line=int(data.get("endLine", line)),
            end_column=int(data.get("endColumn", 0)),
        )


@dataclass
class Symbol:
    """A named program entity extracted from one file.

    ``id`` is derived from path, line, kind and name at extraction time and
    must not change afterwards. ``extends``/``implements``/``calls`` are
    subsets of ``references`` for which the parser knew the syntactic
    relation; the resolver uses them to pick an edge kind.
    """

    id: str
    name: str
    kind: str
    location: Location
    signature: Optional[str] = None
    references: list[str] = field(default_factory=list)
    parent: Optional[str] = None  # For methods/properties: owning class name
    extends: list[str] = field(default_factory=list)
    implements: list[str] = field(default_factory=list)
    calls: list[str] = field(default_factory=list)

    @property
    def file(self) -> str:
        return self.location.file

    @property
    def line(self) -> int:
        return self.location.line

    def to_dict(self, referenced_by: Optional[list[str]] = None) -> dict:
        """Serialize with the field names used by the export format."""
        return {
            "id": self.id,
            "name": self.name,
            "kind": self.kind,
            "signature": self.signature,
            "location": self.location.to_dict(),
            "references": list(self.references),
            "referencedBy": list(referenced_by or []),
            "parent": self.parent,
            "extends": list(self.extends),
            "implements": list(self.implements),
            "calls": list(self.calls),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Symbol":
        # referencedBy is derived state and is ignored here
        return cls(
            id=data["id"],
            name=data["name"],
            kind=data["kind"],
            location=Location.from_dict(data["location"]),
            signature=data.get("signature"),
            references=list(data.get("references") or []),
            parent=data.get("parent"),
            extends=list(data.get("extends") or []),
            implements=list(data.get("implements") or []),
            calls=list(data.get("calls") or []),
        )


@dataclass(frozen=True)
class Relationship:
    """Directed, typed edge between two symbol ids."""

    source: str
    target: str
    kind: str

    def to_dict(self) -> dict:
        return {"from": self.source, "to": self.target, "kind": self.kind}

    @classmethod
    def from_dict(cls, data: dict) -> "Relationship":
        return cls(source=data["from"], target=data["to"], kind=data["kind"])
