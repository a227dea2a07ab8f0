"""Minimal C# tokenizer.

Produces identifier, number, string, char and operator tokens with their
offsets. Whitespace, comments and preprocessor lines are dropped. Unterminated
comments and literals run to the end of the text instead of raising, so a
half-written class still yields whatever members precede the damage.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

_OPERATORS = (
    "??=", "<<=",
    "=>", "==", "!=", "<=", ">=", "+=", "-=", "*=", "/=", "%=", "&=", "|=", "^=",
    "&&", "||", "??", "?.", "::", "++", "--", "->",
)

_TOKEN_RE = re.compile(
    r"""
    (?P<space>\s+)
    | (?P<comment>//[^\n]* | /\*(?s:.*?)(?:\*/|\Z))
    | (?P<directive>\#[^\n]*)
    | (?P<string>
          \$*(?P<quotes>"{3,})(?s:.*?)(?:(?P=quotes)|\Z)      # raw
        | (?:\$@|@\$|@)"(?:[^"]|"")*(?:"|\Z)                 # verbatim
        | \$?"(?:[^"\\\n]|\\.)*(?:"|$)                        # regular / interpolated
      )
    | (?P<char>'(?:[^'\\\n]|\\.)+')
    | (?P<ident>@?[^\W\d]\w*)
    | (?P<number>\d\w*(?:\.\d\w*)?)
    | (?P<op>""" + "|".join(re.escape(op) for op in _OPERATORS) + r""")
    | (?P<other>(?s:.))
    """,
    re.VERBOSE | re.MULTILINE,
)

_SKIPPED = frozenset({"space", "comment", "directive"})


@dataclass(frozen=True)
class Token:
    """A single lexical token and its offset in the source text."""

    kind: str
    text: str
    pos: int

    @property
    def end(self) -> int:
        return self.pos + len(self.text)

    def is_op(self, *texts: str) -> bool:
        return self.kind in ("op", "other") and self.text in texts


def tokenize(text: str, start: int = 0) -> Iterator[Token]:
    """Yield the significant tokens of *text* from offset *start* onward."""
    for match in _TOKEN_RE.finditer(text, start):
        kind = match.lastgroup
        if kind in _SKIPPED:
            continue
        if kind == "other":
            # Lone operator characters are reported as ops.
            kind = "op"
        yield Token(kind=kind, text=match.group(), pos=match.start())


_CLOSING = {"{": "}", "(": ")", "[": "]"}


def find_block_end(text: str, open_pos: int) -> int:
    """Offset just past the bracket that closes the one at *open_pos*.

    Works for ``{``, ``(`` and ``[``. Brackets inside strings and comments
    are ignored. Returns ``len(text)`` when the block is never closed.
    """
    opener = text[open_pos]
    closer = _CLOSING[opener]
    depth = 0
    for tok in tokenize(text, open_pos):
        if tok.is_op(opener):
            depth += 1
        elif tok.is_op(closer):
            depth -= 1
            if depth == 0:
                return tok.end
    return len(text)
