"""Razor markup scanning for ref-bound elements.

Walks the template tag by tag and keeps the ones that capture their rendered
instance, e.g. ``<Label @ref=@TitleRef text="Hi" disabled="true" />``.
Attribute values may be double-quoted, single-quoted or bare; a bare
``@( ... )`` expression is read up to its balancing parenthesis. Comments and
``@code`` / ``@functions`` blocks are skipped so C# comparisons inside them
are never taken for tags.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from litmus.inference import infer
from litmus.lexer import find_block_end
from litmus.models import AttributeAssignment, MarkupElement, RefValue

REF_ATTRIBUTE = "@ref"

_TAG_NAME_RE = re.compile(r"[^\W\d][\w.:-]*")
_ATTR_NAME_RE = re.compile(r"""[^\s=>/"']+""")
_BARE_VALUE_RE = re.compile(r"(?:[^\s>/]|/(?!>))+")
_REF_VALUE_RE = re.compile(r"@(\w+)")
_CODE_BLOCK_RE = re.compile(r"@(?:code|functions)\s*\{")


class _Scanner:
    """Cursor over a markup text that yields ref-bound elements."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def elements(self) -> Iterator[MarkupElement]:
        text = self.text
        while self.pos < len(text):
            if text.startswith("<!--", self.pos):
                self._skip_past("-->")
            elif text.startswith("@*", self.pos):
                self._skip_past("*@")
            elif text.startswith("@", self.pos):
                block = _CODE_BLOCK_RE.match(text, self.pos)
                if block:
                    self.pos = find_block_end(text, block.end() - 1)
                else:
                    self.pos += 1
            elif text.startswith("<", self.pos) and _TAG_NAME_RE.match(text, self.pos + 1):
                element = self._tag()
                if element is not None:
                    yield element
            else:
                self.pos += 1

    # -- helpers ------------------------------------------------------------

    def _skip_past(self, terminator: str) -> None:
        end = self.text.find(terminator, self.pos + 2)
        self.pos = len(self.text) if end == -1 else end + len(terminator)

    def _skip_space(self) -> None:
        text = self.text
        while self.pos < len(text) and text[self.pos].isspace():
            self.pos += 1

    def _tag(self) -> Optional[MarkupElement]:
        """Parse the tag opening at the cursor; None if it binds no @ref."""
        text = self.text
        start = self.pos
        name = _TAG_NAME_RE.match(text, start + 1)
        self.pos = name.end()

        pairs: list[tuple[str, Optional[str]]] = []
        while True:
            self._skip_space()
            if self.pos >= len(text):
                break
            if text[self.pos] == ">":
                self.pos += 1
                break
            if text.startswith("/>", self.pos):
                self.pos += 2
                break
            attr = _ATTR_NAME_RE.match(text, self.pos)
            if not attr:
                # stray '/', '=' or quote
                self.pos += 1
                continue
            self.pos = attr.end()
            self._skip_space()
            value = None
            if text.startswith("=", self.pos):
                self.pos += 1
                self._skip_space()
                value = self._value()
            pairs.append((attr.group(), value))

        return _build_element(name.group(), pairs, line=text.count("\n", 0, start) + 1)

    def _value(self) -> str:
        text = self.text
        if self.pos >= len(text):
            return ""
        quote = text[self.pos]
        if quote in "\"'":
            end = text.find(quote, self.pos + 1)
            if end == -1:
                value, self.pos = text[self.pos + 1:], len(text)
            else:
                value, self.pos = text[self.pos + 1:end], end + 1
            return value
        if text.startswith("@(", self.pos):
            end = find_block_end(text, self.pos + 1)
            value, self.pos = text[self.pos:end], end
            return value
        bare = _BARE_VALUE_RE.match(text, self.pos)
        if not bare:
            return ""
        self.pos = bare.end()
        return bare.group()


def _build_element(
    tag: str, pairs: list[tuple[str, Optional[str]]], line: int
) -> Optional[MarkupElement]:
    ref_name = None
    for name, value in pairs:
        if name == REF_ATTRIBUTE and value is not None:
            match = _REF_VALUE_RE.fullmatch(value.strip())
            if match:
                ref_name = match.group(1)
                break
    if ref_name is None:
        return None

    attributes = []
    for name, value in pairs:
        if value is None:
            continue
        key = name.lstrip("@")
        if not key or key.lower() == "ref":
            continue
        attributes.append(AttributeAssignment(key=key, raw_value=value.lstrip("@")))
    return MarkupElement(tag=tag, ref_name=ref_name, attributes=tuple(attributes), line=line)


def scan(text: str) -> list[MarkupElement]:
    """List every ref-bound element in *text*, in document order."""
    return list(_Scanner(text).elements())


def harvest(text: str) -> list[RefValue]:
    """Scan *text* and infer a typed value for every ref-bound attribute."""
    return [
        RefValue(ref_name=element.ref_name, key=attr.key, value=infer(attr.raw_value))
        for element in scan(text)
        for attr in element.attributes
    ]
