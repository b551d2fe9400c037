"""
Re-render text with category markers around selected words.

Highlighting only inserts markers: stripping them gives back the original
text byte for byte.

Usage:
    from booklex.highlight import highlight, strip_markers, BRACKETS

    marked = highlight(text, classify(lex, tokenize(text)), {Category.UNKNOWN})
    assert strip_markers(marked, BRACKETS) == text
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable

from booklex.classifier import Category, ClassifiedToken


@dataclass(frozen=True, slots=True)
class MarkerStyle:
    """How a highlighted word is wrapped.

    ``openers`` maps a category to its opening marker (missing categories
    use ``default_open``, formatted with the category code).
    """

    name: str
    default_open: str
    close: str
    pattern: re.Pattern  # matches one marked word, group 1 is the word
    openers: dict[Category, str] = field(default_factory=dict)

    def open(self, category: Category) -> str:
        marker = self.openers.get(category, self.default_open)
        return marker.format(code=category.code)

    def wrap(self, category: Category, text: str) -> str:
        return f"{self.open(category)}{text}{self.close}"


BRACKETS = MarkerStyle(
    name="brackets",
    default_open="⟦{code}:",
    close="⟧",
    pattern=re.compile(r"⟦[a-z]:(.*?)⟧", re.DOTALL),
)

ANSI = MarkerStyle(
    name="ansi",
    default_open="\x1b[1m",
    close="\x1b[0m",
    pattern=re.compile(r"\x1b\[[0-9;]*m(.*?)\x1b\[0m", re.DOTALL),
    openers={
        Category.DICTIONARY: "\x1b[32m",  # green
        Category.ORDINAL: "\x1b[34m",  # blue
        Category.ROMAN: "\x1b[34;1m",
        Category.NUMBER: "\x1b[36m",  # cyan
        Category.ACRONYM: "\x1b[35m",  # magenta
        Category.FOREIGN: "\x1b[33m",  # yellow
        Category.PROPER: "\x1b[33;1m",
        Category.LETTER: "\x1b[2m",  # dim
        Category.UNKNOWN: "\x1b[4m",  # underline
    },
)

STYLES: dict[str, MarkerStyle] = {s.name: s for s in (BRACKETS, ANSI)}


def get_style(name: str) -> MarkerStyle:
    try:
        return STYLES[name]
    except KeyError:
        raise ValueError(
            f"unknown marker style `{name}` (choose from {', '.join(STYLES)})"
        ) from None


def highlight(
    text: str | bytes,
    classified: Iterable[ClassifiedToken],
    categories: Iterable[Category],
    style: MarkerStyle = BRACKETS,
) -> str | bytes:
    """Wrap words whose category is selected; copy everything else.

    Token offsets are UTF-8 byte offsets into ``text``.  Bytes not covered by
    any token are copied through too.  Returns the same type as ``text``.
    """
    data = text.encode("utf-8") if isinstance(text, str) else text
    selected = frozenset(categories)
    out: list[str] = []
    pos = 0
    for ct in classified:
        tok = ct.token
        if tok.start < pos:
            continue  # overlapping span; already copied
        if tok.start > pos:
            out.append(data[pos:tok.start].decode("utf-8"))
        chunk = data[tok.start:tok.end].decode("utf-8")
        if ct.category is not None and ct.category in selected:
            out.append(style.wrap(ct.category, chunk))
        else:
            out.append(chunk)
        pos = tok.end
    out.append(data[pos:].decode("utf-8"))
    result = "".join(out)
    return result if isinstance(text, str) else result.encode("utf-8")


def strip_markers(text: str, style: MarkerStyle = BRACKETS) -> str:
    """Remove highlight markers, leaving the words they wrapped."""
    return style.pattern.sub(r"\1", text)
