# symbol_graph/parsers/keywords.py
# AI-Mind (C) 2025 by Martin Bukowski is licensed under CC BY-NC-SA 4.0
"""Reserved words and builtins that are never recorded as references."""

import keyword


PYTHON_KEYWORDS = frozenset(keyword.kwlist) | frozenset(keyword.softkwlist) | frozenset(
    {"self", "cls"}
)

# Common builtins that aren't useful for call graphs
PYTHON_BUILTINS = frozenset(
    {
        "print",
        "len",
        "str",
        "int",
        "float",
        "bool",
        "list",
        "dict",
        "set",
        "tuple",
        "range",
        "enumerate",
        "zip",
        "map",
        "filter",
        "sorted",
        "reversed",
        "type",
        "isinstance",
        "hasattr",
        "getattr",
        "setattr",
        "super",
    }
)

TS_KEYWORDS = frozenset(
    {
        "abstract", "any", "as", "async", "await", "boolean", "break", "case",
        "catch", "class", "const", "constructor", "continue", "debugger",
        "declare", "default", "delete", "do", "else", "enum", "export",
        "extends", "false", "finally", "for", "from", "function", "get", "if",
        "implements", "import", "in", "infer", "instanceof", "interface",
        "keyof", "let", "module", "namespace", "never", "new", "null",
        "number", "object", "of", "override", "private", "protected",
        "public", "readonly", "return", "satisfies", "set", "static",
        "string", "super", "switch", "symbol", "this", "throw", "true", "try",
        "type", "typeof", "undefined", "unknown", "var", "void", "while",
        "with", "yield",
    }
)

# Common JS/TS builtins to skip
TS_BUILTINS = frozenset(
    {
        "console",
        "parseInt",
        "parseFloat",
        "String",
        "Number",
        "Boolean",
        "Array",
        "Object",
        "JSON",
        "Math",
        "Date",
        "Promise",
        "setTimeout",
        "setInterval",
        "clearTimeout",
        "clearInterval",
        "fetch",
        "require",
    }
)
