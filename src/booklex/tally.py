"""
Count classified words, case-insensitively.

Tallies from separately classified chunks of a text can be merged in any
order with the same result, so large texts can be split up.

Usage:
    from booklex.tally import WordTally

    tally = WordTally()
    tally.update(classify(lex, tokenize(text)))
    print(tally.summary())
    for entry in tally.entries({Category.UNKNOWN}):
        print(entry.count, entry.word)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from booklex.classifier import Category, ClassifiedToken
from booklex.lexicon import normalize


@dataclass(slots=True)
class TallyEntry:
    """One distinct word: its preferred spelling, category and count."""

    word: str
    category: Category
    count: int = 0

    def _rank(self) -> tuple[int, str, str]:
        # prefer the spelling with the fewest capitals ("the" over "The")
        return (sum(c.isupper() for c in self.word), self.word, self.category.code)

    def __str__(self) -> str:
        return f"{self.count:5d} {self.category.code} {self.word}"


class WordTally:
    """Word counts keyed by normalized (lowercase) spelling."""

    def __init__(self):
        self._words: dict[str, TallyEntry] = {}

    def add(self, word: str, category: Category, count: int = 1) -> None:
        if not word:
            return
        key = normalize(word)
        candidate = TallyEntry(word, category, count)
        current = self._words.get(key)
        if current is None:
            self._words[key] = candidate
            return
        if candidate._rank() < current._rank():
            current.word = candidate.word
            current.category = candidate.category
        current.count += count

    def update(self, classified: Iterable[ClassifiedToken]) -> None:
        """Count the words of a classified token stream."""
        for ct in classified:
            if ct.category is not None:
                self.add(ct.text, ct.category)

    def merge(self, other: WordTally) -> WordTally:
        """A new tally with the counts of both."""
        merged = WordTally()
        for tally in (self, other):
            for entry in tally._words.values():
                merged.add(entry.word, entry.category, entry.count)
        return merged

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return normalize(word) in self._words

    def get(self, word: str) -> TallyEntry | None:
        return self._words.get(normalize(word))

    @property
    def total(self) -> int:
        return sum(e.count for e in self._words.values())

    def count_category(self, category: Category) -> int:
        """Number of distinct words in a category."""
        return sum(1 for e in self._words.values() if e.category is category)

    def entries(self, categories: Iterable[Category] | None = None) -> list[TallyEntry]:
        """Entries (optionally of some categories), most frequent first."""
        selected = None if categories is None else frozenset(categories)
        found = [
            e for e in self._words.values()
            if selected is None or e.category in selected
        ]
        return sorted(found, key=lambda e: (-e.count, e.word))

    def summary(self) -> str:
        lines = []
        for category in Category:
            lines.append(
                f"{self.count_category(category):5d} {category.code} {category.label}"
            )
        return "\n".join(lines)
