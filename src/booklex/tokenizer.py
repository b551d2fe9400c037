"""
Split text into offset-tagged word and separator tokens.

Every byte of the input belongs to exactly one token, so the text can be
rebuilt by joining the token texts in order.  Offsets are UTF-8 byte
offsets into the source.

Usage:
    from booklex.tokenizer import tokenize

    for tok in tokenize("It's a well-known fact."):
        print(tok.start, tok.end, repr(tok.text), tok.is_word)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator

from booklex.lexicon import APOSTROPHES

if TYPE_CHECKING:
    from booklex.lexicon import Lexicon

_WORD_CHAR = rf"(?:[^\W_]|[{APOSTROPHES}])"

# Dotted initialisms ("U.S.A.") or runs of word characters joined by single
# hyphens ("well-known"; a double dash is punctuation).
_WORD_RE = re.compile(
    rf"(?:[A-Z]\.){{2,}}"
    rf"|{_WORD_CHAR}+(?:-{_WORD_CHAR}+)*"
)


@dataclass(frozen=True, slots=True)
class Token:
    """A half-open ``[start, end)`` byte span of the source text."""

    start: int
    end: int
    text: str
    is_word: bool

    def __len__(self) -> int:
        return self.end - self.start


class TokenStream:
    """Lazy token sequence over a text; iterating again re-scans it."""

    def __init__(self, text: str | bytes):
        if isinstance(text, bytes):
            text = text.decode("utf-8")
        self.text = text

    def __iter__(self) -> Iterator[Token]:
        text = self.text
        offset = 0
        pos = 0
        for m in _WORD_RE.finditer(text):
            if m.start() > pos:
                gap = text[pos:m.start()]
                size = len(gap.encode("utf-8"))
                yield Token(offset, offset + size, gap, False)
                offset += size
            word = m.group()
            size = len(word.encode("utf-8"))
            yield Token(offset, offset + size, word, True)
            offset += size
            pos = m.end()
        if pos < len(text):
            rest = text[pos:]
            yield Token(offset, offset + len(rest.encode("utf-8")), rest, False)

    def words(self) -> Iterator[Token]:
        return (t for t in self if t.is_word)


def tokenize(text: str | bytes) -> TokenStream:
    """Tokenize UTF-8 text (bytes are decoded strictly)."""
    return TokenStream(text)


def split_compounds(lexicon: Lexicon, tokens: Iterable[Token]) -> Iterator[Token]:
    """Split hyphenated words the lexicon does not know into their parts.

    ``well-known`` stays whole if listed; ``cat-like`` becomes ``cat``,
    ``-`` (a separator) and ``like``.
    """
    for tok in tokens:
        if not tok.is_word or "-" not in tok.text or tok.text in lexicon:
            yield tok
            continue
        offset = tok.start
        for i, part in enumerate(tok.text.split("-")):
            if i:
                yield Token(offset, offset + 1, "-", False)
                offset += 1
            size = len(part.encode("utf-8"))
            yield Token(offset, offset + size, part, True)
            offset += size
