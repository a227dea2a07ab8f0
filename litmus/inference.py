"""Primitive type inference for markup attribute literals.

Rules are tried top to bottom and the first match wins:

    boolean    "true" / "false" in any case       -> bool, lowercased
    enum-like  dotted and starting uppercase      -> <Prefix>, verbatim
    integer    signed decimal within int range    -> int, trimmed
    string     anything else                      -> string, quoted

The enum rule is a naming heuristic: the enclosing type is whatever precedes
the first dot. No declared types are consulted.
"""

from __future__ import annotations

import re

from litmus.models import UNKNOWN_ENUM_TYPE, InferredValue, ValueKind

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Range of a C# `int`; wider values would not compile as int literals.
_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1

_ESCAPES = {"\\": "\\\\", '"': '\\"', "\r": "\\r", "\n": "\\n", "\t": "\\t"}
_IDENTIFIER_RE = re.compile(r"[^\W\d]\w*")

# Declared type per kind; enum-like values carry their own.
TYPE_KEYWORDS: dict[ValueKind, str] = {
    ValueKind.BOOLEAN: "bool",
    ValueKind.INTEGER: "int",
    ValueKind.STRING: "string",
    ValueKind.UNKNOWN: "var",
}


def enum_type_name(raw: str) -> str:
    """Enclosing type of a dotted literal such as ``Color.Red``.

    Returns the unknown-type placeholder when the text before the first dot
    is not an identifier.
    """
    prefix, sep, _ = raw.partition(".")
    if sep and _IDENTIFIER_RE.fullmatch(prefix):
        return prefix
    return UNKNOWN_ENUM_TYPE


def quote(raw: str) -> str:
    """Render *raw* as a single-line double-quoted string literal."""
    escaped = "".join(_ESCAPES.get(ch, ch) for ch in raw)
    return f'"{escaped}"'


def int_literal(raw: str) -> str | None:
    """Normalized text of *raw* if it parses as a C# ``int``, else None.

    Surrounding whitespace is allowed; values outside the 32-bit range are
    rejected.
    """
    text = raw.strip()
    if not _INTEGER_RE.fullmatch(text):
        return None
    if not _INT_MIN <= int(text) <= _INT_MAX:
        return None
    return text


def infer(raw: str) -> InferredValue:
    """Classify one raw attribute value. Never fails; defaults to string."""
    if raw.lower() in ("true", "false"):
        return InferredValue(ValueKind.BOOLEAN, raw.lower(), TYPE_KEYWORDS[ValueKind.BOOLEAN])
    if "." in raw and raw[0].isupper():
        return InferredValue(ValueKind.ENUM_LIKE, raw, enum_type_name(raw))
    literal = int_literal(raw)
    if literal is not None:
        return InferredValue(ValueKind.INTEGER, literal, TYPE_KEYWORDS[ValueKind.INTEGER])
    return InferredValue(ValueKind.STRING, quote(raw), TYPE_KEYWORDS[ValueKind.STRING])


def to_pascal_case(key: str) -> str:
    """``data-id`` -> ``DataId``, ``aria_label`` -> ``AriaLabel``."""
    if not key:
        return key
    parts = [p for p in re.split(r"[-_]", key) if p]
    return "".join(p[0].upper() + p[1:] for p in parts)
