"""
English contractions, split into the words they stand for.

Words are expected with apostrophes already folded to ``'`` (see
``booklex.lexicon.normalize``).  A possessive ``'s`` expands to the bare
word plus an empty part.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ContractionKind(Enum):
    FULL = "full"  # the whole word, any case
    PREFIX = "prefix"
    SUFFIX = "suffix"


@dataclass(frozen=True, slots=True)
class Contraction:
    """One contraction pattern; ``expansion`` replaces the matched text."""

    kind: ContractionKind
    text: str
    expansion: tuple[str, ...]

    def matches(self, word: str) -> bool:
        if self.kind is ContractionKind.FULL:
            return word.lower() == self.text.lower()
        if self.kind is ContractionKind.PREFIX:
            return word.startswith(self.text)
        return word.endswith(self.text)

    def expand(self, word: str) -> list[str]:
        if self.kind is ContractionKind.FULL:
            return list(self.expansion)
        if self.kind is ContractionKind.PREFIX:
            return [word[len(self.text):], *self.expansion]
        return [word[: -len(self.text)], *self.expansion]


def _full(text: str, *expansion: str) -> Contraction:
    return Contraction(ContractionKind.FULL, text, expansion)


def _suffix(text: str, *expansion: str) -> Contraction:
    return Contraction(ContractionKind.SUFFIX, text, expansion)


def _prefix(text: str, *expansion: str) -> Contraction:
    return Contraction(ContractionKind.PREFIX, text, expansion)


# Checked in order; the first match wins.
CONTRACTIONS: tuple[Contraction, ...] = (
    _full("ain't", "am", "not"),
    _full("can't", "can", "not"),
    _full("shan't", "shall", "not"),
    _full("won't", "will", "not"),
    _suffix("n't", "not"),
    _suffix("'ve", "have"),
    _suffix("'ll", "will"),
    _full("i'm", "i", "am"),
    _suffix("'re", "are"),
    _full("he's", "he", "is"),
    _full("it's", "it", "is"),
    _full("she's", "she", "is"),
    _full("that's", "that", "is"),
    _full("there's", "there", "is"),
    _full("what's", "what", "is"),
    _full("who's", "who", "is"),
    _full("'tis", "it", "is"),
    _full("'twas", "it", "was"),
    _full("'twill", "it", "will"),
    _full("m'dear", "my", "dear"),
    _full("m'lady", "my", "lady"),
    _full("m'lord", "my", "lord"),
    _suffix("'d", "would"),
    _suffix("'s", ""),  # possessive
    _suffix("'", ""),  # plural possessive
    _prefix("'", ""),  # stray opening quote
)


def split_one(word: str) -> list[str] | None:
    """Expand the first contraction matching ``word``, or None."""
    for con in CONTRACTIONS:
        if con.matches(word):
            return con.expand(word)
    return None


def split(word: str) -> list[str]:
    """Fully expand a word into its parts (may include empty strings).

    ``couldn't've`` -> ``["could", "not", "have"]``.
    """
    pending = [word]
    parts: list[str] = []
    while pending:
        current = pending.pop()
        expanded = split_one(current) if current else None
        if expanded is None:
            parts.append(current)
        else:
            pending.extend(reversed(expanded))
    return parts
