"""Class member extraction for component code-behind files.

Locates the first ``class`` declaration in a C# source text and lists its
property declarations in source order. Only public properties are kept;
bindable parameters (any attribute whose name contains "Parameter") are
flagged rather than dropped, since the composer filters per scenario.

Limitations: only the first class declaration is read (nested classes count,
in document order), and the parameter check is a case-sensitive substring
match on the attribute name rather than a resolved type.
"""

from __future__ import annotations

from typing import Optional, Sequence

from litmus.lexer import Token, tokenize
from litmus.models import (
    CLASS_NOT_FOUND,
    ClassNotFound,
    MemberDescriptor,
    SourceClass,
    Visibility,
)

PARAMETER_MARKER = "Parameter"

_MODIFIERS = frozenset({
    "public", "private", "protected", "internal", "file",
    "static", "readonly", "const", "volatile", "virtual", "override",
    "abstract", "sealed", "new", "extern", "unsafe", "async", "partial",
    "required", "fixed", "ref",
})

# Declarations that open a nested type or a non-property member.
_NON_PROPERTY_KEYWORDS = frozenset({
    "class", "struct", "interface", "enum", "record", "delegate", "event",
})

_OPENERS = ("(", "[", "{")
_CLOSERS = (")", "]", "}")


def _skip_group(tokens: Sequence[Token], start: int) -> int:
    """Index just past the bracket that closes ``tokens[start]``."""
    depth = 0
    for i in range(start, len(tokens)):
        tok = tokens[i]
        if tok.is_op(*_OPENERS):
            depth += 1
        elif tok.is_op(*_CLOSERS):
            depth -= 1
            if depth == 0:
                return i + 1
    return len(tokens)


def _join(tokens: Sequence[Token]) -> str:
    """Render tokens back to compact source text (``Dictionary<string, int>``)."""
    out = ""
    prev: Optional[Token] = None
    for tok in tokens:
        if prev is not None:
            words = ("ident", "number")
            if (prev.kind in words and tok.kind in words) or prev.text == ",":
                out += " "
        out += tok.text
        prev = tok
    return out


def _find_class(tokens: Sequence[Token]) -> Optional[int]:
    """Index of the first ``class`` keyword that declares a class."""
    for i, tok in enumerate(tokens):
        if tok.kind != "ident" or tok.text != "class":
            continue
        prev = tokens[i - 1] if i else None
        if prev is not None:
            # `where T : class` constraints and `record class` declarations
            if prev.is_op(":", ",") or (prev.kind == "ident" and prev.text == "record"):
                continue
        nxt = tokens[i + 1] if i + 1 < len(tokens) else None
        if nxt is not None and nxt.kind == "ident":
            return i
    return None


def _find_body(tokens: Sequence[Token], start: int) -> Optional[int]:
    """Index of the ``{`` opening the class body, None for ``class X;``."""
    i = start
    while i < len(tokens):
        tok = tokens[i]
        if tok.is_op("{"):
            return i
        if tok.is_op(";"):
            return None
        if tok.is_op("(", "["):
            i = _skip_group(tokens, i)
            continue
        i += 1
    return None


def _member_end(tokens: Sequence[Token], start: int) -> int:
    """Index just past the member declaration starting at *start*.

    A member ends at a top-level ``;``, or after its body block unless the
    block is followed by an initializer (``{ get; set; } = value;``). Braces
    that follow ``=`` or ``=>`` belong to an expression, not a body.
    """
    depth = 0
    in_expression = False
    i = start
    while i < len(tokens):
        tok = tokens[i]
        if tok.is_op("{") and depth == 0 and not in_expression:
            i = _skip_group(tokens, i)
            if i < len(tokens) and tokens[i].is_op("="):
                in_expression = True
                continue
            return i
        if tok.is_op(*_OPENERS):
            depth += 1
        elif tok.is_op(*_CLOSERS):
            if depth == 0:
                # closing brace of the class body
                return i
            depth -= 1
        elif depth == 0:
            if tok.is_op(";"):
                return i + 1
            if tok.is_op("=", "=>"):
                in_expression = True
        i += 1
    return len(tokens)


def _split_members(tokens: Sequence[Token], body: int) -> list[Sequence[Token]]:
    """Split the class body opened at *body* into member token runs."""
    runs = []
    i = body + 1
    while i < len(tokens):
        tok = tokens[i]
        if tok.is_op("}"):
            break
        if tok.is_op(";"):
            i += 1
            continue
        end = _member_end(tokens, i)
        if end == i:
            # stray closer; step over it
            end = i + 1
        runs.append(tokens[i:end])
        i = end
    return runs


def _attribute_names(inner: Sequence[Token]) -> list[str]:
    """Names of the attributes inside one ``[...]`` list."""
    names = []
    segment: list[Token] = []
    depth = 0
    for tok in list(inner) + [Token("op", ",", -1)]:
        if tok.is_op(*_OPENERS):
            depth += 1
        elif tok.is_op(*_CLOSERS):
            depth -= 1
        if depth == 0 and tok.is_op(","):
            # drop a `property:` / `field:` target specifier
            if len(segment) > 1 and segment[1].is_op(":"):
                segment = segment[2:]
            name_tokens = []
            for part in segment:
                if part.is_op("("):
                    break
                name_tokens.append(part)
            if name_tokens:
                names.append(_join(name_tokens))
            segment = []
        else:
            segment.append(tok)
    return names


def _visibility(modifiers: Sequence[str]) -> Visibility:
    mods = set(modifiers)
    if "public" in mods:
        return Visibility.PUBLIC
    if "protected" in mods and "internal" in mods:
        return Visibility.PROTECTED_INTERNAL
    if "protected" in mods and "private" in mods:
        return Visibility.PRIVATE_PROTECTED
    if "protected" in mods:
        return Visibility.PROTECTED
    if "internal" in mods:
        return Visibility.INTERNAL
    return Visibility.PRIVATE


def _read_property(run: Sequence[Token], order: int) -> Optional[MemberDescriptor]:
    """Build a descriptor if *run* declares a property, else None."""
    i = 0
    attributes: list[str] = []
    while i < len(run) and run[i].is_op("["):
        end = _skip_group(run, i)
        attributes.extend(_attribute_names(run[i + 1:end - 1]))
        i = end

    modifiers: list[str] = []
    while i < len(run) and run[i].kind == "ident" and run[i].text in _MODIFIERS:
        modifiers.append(run[i].text)
        i += 1

    head: list[Token] = []
    while i < len(run):
        tok = run[i]
        if not head and tok.kind == "ident" and tok.text in _NON_PROPERTY_KEYWORDS:
            return None
        if tok.is_op("("):
            if head:
                # method, constructor or operator
                return None
            # tuple-typed property
            end = _skip_group(run, i)
            head.extend(run[i:end])
            i = end
            continue
        if tok.is_op("=", ";"):
            return None
        if tok.is_op("{", "=>"):
            break
        head.append(tok)
        i += 1
    else:
        return None

    if len(head) < 2 or head[-1].kind != "ident":
        return None
    if any(t.kind == "ident" and t.text in ("this", "operator") for t in head):
        return None

    return MemberDescriptor(
        name=head[-1].text,
        visibility=_visibility(modifiers),
        is_bindable_parameter=any(PARAMETER_MARKER in name for name in attributes),
        order=order,
        type_name=_join(head[:-1]),
    )


def read_properties(text: str) -> SourceClass | ClassNotFound:
    """Parse *text* and return every property of its first class.

    Unlike :func:`parse_members`, non-public properties are kept.
    """
    tokens = list(tokenize(text))
    at = _find_class(tokens)
    if at is None:
        return CLASS_NOT_FOUND
    name = tokens[at + 1].text

    body = _find_body(tokens, at + 2)
    if body is None:
        return SourceClass(name=name)

    members = []
    for run in _split_members(tokens, body):
        prop = _read_property(run, order=len(members))
        if prop is not None:
            members.append(prop)
    return SourceClass(name=name, members=tuple(members))


def parse_members(text: str) -> SourceClass | ClassNotFound:
    """Parse a class definition into its public property descriptors.

    Args:
        text: C# source containing the component class.

    Returns:
        SourceClass with public properties in declaration order, or the
        ClassNotFound sentinel when no class is declared.
    """
    parsed = read_properties(text)
    if isinstance(parsed, ClassNotFound):
        return parsed
    public = tuple(m for m in parsed.members if m.is_public)
    return SourceClass(name=parsed.name, members=public)


def detect_class_name(text: str) -> Optional[str]:
    """Identifier of the first class declared in *text*, if any."""
    tokens = list(tokenize(text))
    at = _find_class(tokens)
    if at is None:
        return None
    return tokens[at + 1].text
