"""
Classify word tokens into categories with an ordered rule list.

Rules are tried in order and the first match wins, which settles overlaps:
"MCM" is a well-formed roman numeral and an all-caps acronym, and Roman
comes first.  Every word gets exactly one category; Unknown is the
fallback.

Usage:
    from booklex.classifier import classify, Category
    from booklex.tokenizer import tokenize

    for ct in classify(lexicon, tokenize(text)):
        if ct.category is Category.UNKNOWN:
            print(ct.text)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Iterator

from booklex import contractions
from booklex.lexicon import APOSTROPHES, Lexicon, fold_apostrophes, normalize
from booklex.tokenizer import Token
from booklex.words import LexemeEntry


class Category(Enum):
    DICTIONARY = "d"
    ORDINAL = "o"
    ROMAN = "r"
    NUMBER = "n"
    ACRONYM = "a"
    FOREIGN = "f"
    PROPER = "p"
    LETTER = "l"  # single letter or symbol
    UNKNOWN = "u"

    @property
    def code(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.name.title()

    @classmethod
    def from_code(cls, code: str) -> Category:
        try:
            return cls(code)
        except ValueError:
            raise ValueError(f"unknown category code `{code}`") from None

    @classmethod
    def parse_codes(cls, codes: str) -> frozenset[Category]:
        """``"dup"`` -> {DICTIONARY, UNKNOWN, PROPER}; ``"A"`` means all."""
        if "A" in codes:
            return frozenset(cls)
        return frozenset(cls.from_code(c) for c in codes)


@dataclass(frozen=True, slots=True)
class WordContext:
    """What a rule may know besides the word itself."""

    lexicon: Lexicon
    sentence_initial: bool = False


@dataclass(frozen=True, slots=True)
class Rule:
    category: Category
    test: Callable[[str, WordContext], bool]

    def __call__(self, word: str, ctx: WordContext) -> bool:
        return self.test(word, ctx)


@dataclass(frozen=True, slots=True)
class ClassifiedToken:
    """A token with its category (None for separators) and lexeme, if any."""

    token: Token
    category: Category | None
    entry: LexemeEntry | None = None

    @property
    def text(self) -> str:
        return self.token.text

    @property
    def is_word(self) -> bool:
        return self.token.is_word


# ── Dictionary ──────────────────────────────────────────────────────────────

def dictionary_entry(lexicon: Lexicon, word: str) -> LexemeEntry | None:
    """The lexeme for a word, expanding contractions the lexicon lacks.

    A contraction is a hit only if every part is ("can't" -> can + not).
    """
    entry = lexicon.entry(word)
    if entry is not None:
        return entry
    key = normalize(word)
    if "'" not in key:
        return None
    found = None
    for part in contractions.split(key):
        if not part:
            continue
        part_entry = lexicon.entry(part)
        if part_entry is None:
            return None
        found = found or part_entry
    return found


def is_dictionary(word: str, ctx: WordContext) -> bool:
    return dictionary_entry(ctx.lexicon, word) is not None


# ── Ordinals ────────────────────────────────────────────────────────────────

_ORDINAL_DIGITS_RE = re.compile(r"^(\d+)(st|nd|rd|th|ST|ND|RD|TH)$")

_ORDINAL_UNITS = {
    "first", "second", "third", "fourth", "fifth", "sixth", "seventh",
    "eighth", "ninth",
}
_ORDINAL_WORDS = _ORDINAL_UNITS | {
    "zeroth", "tenth", "eleventh", "twelfth", "thirteenth", "fourteenth",
    "fifteenth", "sixteenth", "seventeenth", "eighteenth", "nineteenth",
    "twentieth", "thirtieth", "fortieth", "fiftieth", "sixtieth",
    "seventieth", "eightieth", "ninetieth", "hundredth", "thousandth",
    "millionth", "billionth",
}
_TENS = {
    "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty",
    "ninety",
}


def ordinal_suffix(n: int) -> str:
    """The English ordinal suffix for a number: 1st, 12th, 22nd, 103rd."""
    if n % 100 in (11, 12, 13):
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def is_ordinal(word: str, ctx: WordContext) -> bool:
    m = _ORDINAL_DIGITS_RE.match(word)
    if m:
        return m.group(2).lower() == ordinal_suffix(int(m.group(1)))
    lower = word.lower()
    if lower in _ORDINAL_WORDS:
        return True
    tens, _, unit = lower.partition("-")
    return tens in _TENS and unit in _ORDINAL_UNITS


# ── Roman numerals ──────────────────────────────────────────────────────────

_ROMAN_RE = re.compile(
    r"^M{0,3}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})$"
)


def is_roman(word: str, ctx: WordContext) -> bool:
    """Well-formed roman numeral, all uppercase or all lowercase."""
    if not word or not (word.isupper() or word.islower()):
        return False
    return _ROMAN_RE.match(word.upper()) is not None


# ── Surface shape rules ─────────────────────────────────────────────────────

def is_number(word: str, ctx: WordContext) -> bool:
    return any(c.isdigit() for c in word)


def is_acronym(word: str, ctx: WordContext) -> bool:
    letters = [c for c in word if c != "."]
    return (
        len(letters) >= 2
        and all(c.isalpha() and c.isupper() for c in letters)
    )


def is_foreign(word: str, ctx: WordContext) -> bool:
    """Any letter outside ASCII (accents, other scripts)."""
    return any(
        c.isalpha() and not c.isascii() and c not in APOSTROPHES for c in word
    )


def is_proper(word: str, ctx: WordContext) -> bool:
    if ctx.sentence_initial or not word[:1].isupper():
        return False
    return any(c.islower() for c in word[1:])


def is_letter_or_symbol(word: str, ctx: WordContext) -> bool:
    return len(word) == 1 or not any(c.isalnum() for c in word)


RULES: tuple[Rule, ...] = (
    Rule(Category.DICTIONARY, is_dictionary),
    Rule(Category.ORDINAL, is_ordinal),
    Rule(Category.ROMAN, is_roman),
    Rule(Category.NUMBER, is_number),
    Rule(Category.ACRONYM, is_acronym),
    Rule(Category.FOREIGN, is_foreign),
    Rule(Category.PROPER, is_proper),
    Rule(Category.LETTER, is_letter_or_symbol),
)


# ── Classification ──────────────────────────────────────────────────────────

def _cascade(word: str, ctx: WordContext) -> tuple[Category, LexemeEntry | None]:
    for rule in RULES:
        if rule(word, ctx):
            if rule.category is Category.DICTIONARY:
                return rule.category, dictionary_entry(ctx.lexicon, word)
            return rule.category, None
    return Category.UNKNOWN, None


def classify_word(
    lexicon: Lexicon, word: str, sentence_initial: bool = False,
) -> tuple[Category, LexemeEntry | None]:
    """Category of one word, plus its lexeme for Dictionary hits.

    A word with apostrophes that is not in the lexicon is classified by the
    parts of its contraction split, so "'Zorblax'" is Proper and "'MCM'" is
    Roman.  It is Unknown if any part is; otherwise it takes the category of
    its last part.
    """
    ctx = WordContext(lexicon, sentence_initial)
    result = _cascade(word, ctx)
    if result[0] is Category.DICTIONARY or not any(c in APOSTROPHES for c in word):
        return result
    folded = fold_apostrophes(word)
    parts = [p for p in contractions.split(folded) if p]
    if not parts or parts == [folded]:
        return result
    for part in parts:
        result = _cascade(part, ctx)
        if result[0] is Category.UNKNOWN:
            break
    return result


_SENTENCE_END = frozenset(".!?…")


def ends_sentence(separator: str) -> bool:
    return any(c in _SENTENCE_END for c in separator)


def classify(lexicon: Lexicon, tokens: Iterable[Token]) -> Iterator[ClassifiedToken]:
    """Classify a token stream; separators pass through with no category.

    A word is sentence-initial when it is the first word, or the separator
    before it holds sentence-ending punctuation.
    """
    sentence_initial = True
    for tok in tokens:
        if not tok.is_word:
            if ends_sentence(tok.text):
                sentence_initial = True
            yield ClassifiedToken(tok, None)
            continue
        category, entry = classify_word(lexicon, tok.text, sentence_initial)
        sentence_initial = False
        yield ClassifiedToken(tok, category, entry)
