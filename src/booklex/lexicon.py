"""
Parse lexicon records and build an immutable surface-form index.

Usage:
    from booklex.lexicon import Lexicon, load_builtin

    lex = load_builtin()
    print(f"{lex.num_entries} lexemes, {lex.num_forms} word forms")

    for match in lex.lookup("went"):
        print(match.entry.lemma, match.slot)     # go FormSlot.PAST

    lex = Lexicon.from_files("extra/names.csv", builtin=True)
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator

from booklex.words import FormSlot, LexemeEntry, MalformedEntry, WordClass, parse_record

logger = logging.getLogger(__name__)

BUILTIN_RESOURCE = "english.csv"

# Unicode has several apostrophes; the index uses the ASCII one.
APOSTROPHES = "'ʼ’＇"
_APOSTROPHE_FOLD = str.maketrans({c: "'" for c in APOSTROPHES})


def fold_apostrophes(word: str) -> str:
    return word.translate(_APOSTROPHE_FOLD)


def normalize(word: str) -> str:
    """Index key for a word: lowercase with apostrophes folded to ``'``."""
    return fold_apostrophes(word).lower()


@dataclass(frozen=True, slots=True)
class FormMatch:
    """One reading of a surface form: the lexeme and the slot it fills."""

    entry: LexemeEntry
    slot: FormSlot

    @property
    def lemma(self) -> str:
        return self.entry.lemma

    @property
    def word_class(self) -> WordClass:
        return self.entry.word_class

    def __repr__(self) -> str:
        return f"FormMatch({self.entry.lemma}:{self.entry.class_code} {self.slot.value})"


class Lexicon:
    """
    Immutable lexicon of English lexemes.

    Two indexes:
    - form_index:  normalized surface form -> tuple[FormMatch, ...]
    - lemma_index: normalized lemma        -> tuple[LexemeEntry, ...]

    A surface form maps to several matches when it is ambiguous, e.g.
    "saw" is both a noun and the past of "see".  Match order follows the
    order entries were loaded.
    """

    def __init__(self, entries: Iterable[LexemeEntry] = ()):
        self._entries: tuple[LexemeEntry, ...] = tuple(entries)
        forms: dict[str, dict[FormMatch, None]] = {}
        lemmas: dict[str, dict[LexemeEntry, None]] = {}
        for entry in self._entries:
            lemmas.setdefault(normalize(entry.lemma), {})[entry] = None
            for slot, surface in entry.surface_forms():
                forms.setdefault(normalize(surface), {})[FormMatch(entry, slot)] = None
        self.form_index = MappingProxyType(
            {form: tuple(matches) for form, matches in forms.items()}
        )
        self.lemma_index = MappingProxyType(
            {lemma: tuple(found) for lemma, found in lemmas.items()}
        )

    # ── Loading ──────────────────────────────────────────────────────────

    @classmethod
    def from_text(cls, text: str | bytes, source: str = "<text>") -> Lexicon:
        return cls(parse_records(text, source))

    @classmethod
    def from_file(cls, path: str | Path) -> Lexicon:
        """Load one lexicon file."""
        return cls.from_files(path)

    @classmethod
    def from_files(cls, *paths: str | Path, builtin: bool = False) -> Lexicon:
        """Load and merge lexicon files, optionally after the bundled one."""
        entries: list[LexemeEntry] = []
        if builtin:
            entries.extend(parse_records(_read_builtin(), BUILTIN_RESOURCE))
        for path in paths:
            path = Path(path)
            entries.extend(parse_records(path.read_bytes(), str(path)))
        return cls(entries)

    # ── Lookup ───────────────────────────────────────────────────────────

    def lookup(self, word: str) -> tuple[FormMatch, ...]:
        """All readings of a surface form (case-insensitive)."""
        return self.form_index.get(normalize(word), ())

    def contains(self, word: str) -> bool:
        return normalize(word) in self.form_index

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def entry(self, word: str) -> LexemeEntry | None:
        """The first lexeme a surface form belongs to, if any."""
        matches = self.lookup(word)
        return matches[0].entry if matches else None

    def entries_for(self, word: str) -> list[LexemeEntry]:
        """Distinct lexemes a surface form belongs to, in load order."""
        return list(dict.fromkeys(m.entry for m in self.lookup(word)))

    def lemma_entries(self, lemma: str) -> tuple[LexemeEntry, ...]:
        return self.lemma_index.get(normalize(lemma), ())

    def entries_of_class(self, word_class: WordClass) -> list[LexemeEntry]:
        return [e for e in self._entries if e.word_class is word_class]

    # ── Iteration / stats ────────────────────────────────────────────────

    def __iter__(self) -> Iterator[LexemeEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def all_forms(self) -> Iterator[str]:
        """Iterate over all unique (normalized) surface forms."""
        yield from self.form_index.keys()

    @property
    def num_entries(self) -> int:
        return len(self._entries)

    @property
    def num_forms(self) -> int:
        return len(self.form_index)

    def summary(self) -> str:
        lines = [
            f"Lexemes:        {self.num_entries}",
            f"Unique lemmas:  {len(self.lemma_index)}",
            f"Unique forms:   {self.num_forms}",
            "",
            "Class breakdown:",
        ]
        class_counts = Counter(e.word_class for e in self._entries)
        for word_class, count in class_counts.most_common():
            lines.append(f"  {word_class.name.title():14s} {count:6d}")
        return "\n".join(lines)


# ── Record parsing ───────────────────────────────────────────────────────────

def parse_records(text: str | bytes, source: str = "<text>") -> Iterator[LexemeEntry]:
    """Parse lexicon records, one per line.

    Blank lines and ``#`` comments are skipped.  The first malformed record
    aborts with MalformedEntry carrying its line number.
    """
    if isinstance(text, bytes):
        text = text.decode("utf-8")
    count = 0
    for line_number, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        try:
            entry = parse_record(line)
        except MalformedEntry as e:
            logger.error("%s: bad record on line %d: %s", source, line_number, e.reason)
            raise e.at_line(line_number) from None
        count += 1
        yield entry
    logger.debug("%s: parsed %d records", source, count)


def load_lexicon(data: str | bytes, source: str = "<text>") -> Lexicon:
    """Build a Lexicon from lexicon text (raises MalformedEntry)."""
    lex = Lexicon.from_text(data, source)
    logger.info("%s: %d lexemes, %d forms", source, lex.num_entries, lex.num_forms)
    return lex


def _read_builtin() -> bytes:
    return (resources.files("booklex") / "data" / BUILTIN_RESOURCE).read_bytes()


def load_builtin() -> Lexicon:
    """Load the bundled English lexicon."""
    return load_lexicon(_read_builtin(), BUILTIN_RESOURCE)
