"""
Word classes, attributes, form slots and lexeme entries.

A lexicon record looks like:

    lemma[:class[.attr...]][,form,...]

e.g. ``go:V,goes,going,went,gone`` or ``scissors:N.p``.  Records are parsed
into immutable LexemeEntry objects by ``parse_record``; irregular forms are
resolved and regular forms generated by ``booklex.inflection``.

Usage:
    from booklex.words import parse_record, FormSlot

    entry = parse_record("alumnus:N,-ni")
    entry.forms[FormSlot.PLURAL]    # "alumni"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping


class LexiconError(Exception):
    """Base class for lexicon loading errors."""


class MalformedEntry(LexiconError, ValueError):
    """A lexicon record that cannot be parsed.

    ``line_number`` is 1-based and None when the record was parsed on its own.
    """

    def __init__(self, line: str, reason: str, line_number: int | None = None):
        self.line = line
        self.reason = reason
        self.line_number = line_number
        where = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{where}{reason}: `{line}`")

    def at_line(self, line_number: int) -> MalformedEntry:
        return MalformedEntry(self.line, self.reason, line_number)


class WordClass(Enum):
    ADJECTIVE = "A"
    ADVERB = "Av"
    CONJUNCTION = "C"
    DETERMINER = "D"
    INTERJECTION = "I"
    NOUN = "N"
    PREPOSITION = "P"
    PRONOUN = "Pn"
    VERB = "V"

    @property
    def code(self) -> str:
        return self.value

    @property
    def slots(self) -> tuple[FormSlot, ...]:
        """Inflection slots, in the positional order of irregular forms."""
        return _CLASS_SLOTS.get(self, ())


class Attribute(Enum):
    SINGULARE_TANTUM = "singulare-tantum"  # "dust", "information"
    PLURALE_TANTUM = "plurale-tantum"  # "pants", "scissors"
    PROPER = "proper"
    COUNTABLE = "countable"
    UNCOUNTABLE = "uncountable"
    GROUP = "group"
    DEVERBAL = "deverbal"
    CONJUNCTIVE = "conjunctive"  # "however", "therefore"
    AUXILIARY = "auxiliary"  # "can", "must"
    INTRANSITIVE = "intransitive"
    TRANSITIVE = "transitive"
    ALTERNATE_Z = "alternate-z"  # "realize" is also spelled "realise"


class FormSlot(Enum):
    BASE = "base"
    COMPARATIVE = "comparative"
    SUPERLATIVE = "superlative"
    PLURAL = "plural"
    PRESENT_THIRD_SINGULAR = "present-3sg"
    PRESENT_PARTICIPLE = "present-participle"
    PAST = "past"
    PAST_PARTICIPLE = "past-participle"


_CLASS_SLOTS: dict[WordClass, tuple[FormSlot, ...]] = {
    WordClass.ADJECTIVE: (FormSlot.COMPARATIVE, FormSlot.SUPERLATIVE),
    WordClass.NOUN: (FormSlot.PLURAL,),
    WordClass.PRONOUN: (FormSlot.PLURAL,),
    WordClass.VERB: (
        FormSlot.PRESENT_THIRD_SINGULAR,
        FormSlot.PRESENT_PARTICIPLE,
        FormSlot.PAST,
        FormSlot.PAST_PARTICIPLE,
    ),
}

# Attribute codes allowed per word class.  "c" means countable on nouns
# and conjunctive on adverbs.
_CLASS_ATTRIBUTES: dict[WordClass, dict[str, Attribute]] = {
    WordClass.NOUN: {
        "s": Attribute.SINGULARE_TANTUM,
        "p": Attribute.PLURALE_TANTUM,
        "n": Attribute.PROPER,
        "c": Attribute.COUNTABLE,
        "u": Attribute.UNCOUNTABLE,
        "g": Attribute.GROUP,
        "d": Attribute.DEVERBAL,
        "z": Attribute.ALTERNATE_Z,
    },
    WordClass.PRONOUN: {
        "s": Attribute.SINGULARE_TANTUM,
        "p": Attribute.PLURALE_TANTUM,
    },
    WordClass.VERB: {
        "a": Attribute.AUXILIARY,
        "i": Attribute.INTRANSITIVE,
        "t": Attribute.TRANSITIVE,
        "z": Attribute.ALTERNATE_Z,
    },
    WordClass.PREPOSITION: {
        "i": Attribute.INTRANSITIVE,
        "t": Attribute.TRANSITIVE,
    },
    WordClass.ADJECTIVE: {
        "d": Attribute.DEVERBAL,
        "z": Attribute.ALTERNATE_Z,
    },
    WordClass.ADVERB: {
        "c": Attribute.CONJUNCTIVE,
        "z": Attribute.ALTERNATE_Z,
    },
}

_CODES_BY_CLASS: dict[WordClass, dict[Attribute, str]] = {
    wc: {attr: code for code, attr in codes.items()}
    for wc, codes in _CLASS_ATTRIBUTES.items()
}


def parse_word_class(code: str) -> WordClass:
    """Look up a word class by its grammar code (``N``, ``Av``, ...)."""
    try:
        return WordClass(code)
    except ValueError:
        raise ValueError(f"unknown word class `{code}`") from None


def parse_attributes(word_class: WordClass, groups: list[str]) -> frozenset[Attribute]:
    """Parse attribute codes for a word class.

    Each group may hold one or more single-letter codes, so ``N.s.n`` and
    ``N.sn`` are equivalent.
    """
    allowed = _CLASS_ATTRIBUTES.get(word_class, {})
    attrs = set()
    for group in groups:
        if not group:
            raise ValueError("empty attribute")
        for code in group:
            attr = allowed.get(code)
            if attr is None:
                raise ValueError(
                    f"attribute `{code}` not valid for class {word_class.code}"
                )
            attrs.add(attr)
    return frozenset(attrs)


def attribute_code(word_class: WordClass, attr: Attribute) -> str:
    return _CODES_BY_CLASS[word_class][attr]


@dataclass(frozen=True, slots=True, eq=False)
class LexemeEntry:
    """A lemma with its word class, attributes and resolved forms.

    Entries compare by identity: two records with the same lemma are still
    distinct lexemes (homographs).
    """

    lemma: str
    word_class: WordClass
    attributes: frozenset[Attribute] = frozenset()
    forms: Mapping[FormSlot, str] = field(default_factory=dict)
    irregular: tuple[str, ...] = ()  # raw form fields as written in the record

    def __post_init__(self) -> None:
        object.__setattr__(self, "forms", MappingProxyType(dict(self.forms)))

    def has(self, attr: Attribute) -> bool:
        return attr in self.attributes

    def form(self, slot: FormSlot) -> str | None:
        return self.forms.get(slot)

    def surface_forms(self) -> Iterator[tuple[FormSlot, str]]:
        """Every (slot, form) pair, lemma variants included."""
        from booklex.inflection import spelling_variants

        for variant in spelling_variants(self):
            yield from variant.items()

    @property
    def class_code(self) -> str:
        """``class[.attrs]`` as written in a record."""
        codes = "".join(
            sorted(attribute_code(self.word_class, a) for a in self.attributes)
        )
        return f"{self.word_class.code}.{codes}" if codes else self.word_class.code

    def record(self) -> str:
        """Serialize back into a lexicon record."""
        from booklex.inflection import encode_form

        fields = [f"{self.lemma}:{self.class_code}"]
        slots = self.word_class.slots
        if self.irregular:
            for slot in slots[: len(self.irregular)]:
                form = self.forms.get(slot)
                fields.append("" if form is None else encode_form(self.lemma, form))
        return ",".join(fields)

    def __repr__(self) -> str:
        return f"LexemeEntry({self.lemma}:{self.class_code})"


def parse_record(line: str) -> LexemeEntry:
    """Parse a single lexicon record into a LexemeEntry.

    Raises MalformedEntry (without a line number) on any error.
    """
    from booklex.inflection import build_forms

    fields = line.split(",")
    head, raw_forms = fields[0], fields[1:]
    lemma, sep, class_part = head.partition(":")
    if not lemma:
        raise MalformedEntry(line, "empty lemma")

    try:
        if sep:
            class_code, *attr_groups = class_part.split(".")
            word_class = parse_word_class(class_code)
            attributes = parse_attributes(word_class, attr_groups)
        else:
            word_class, attributes = WordClass.NOUN, frozenset()
        forms = build_forms(lemma, word_class, attributes, raw_forms)
    except ValueError as e:
        raise MalformedEntry(line, str(e)) from None

    return LexemeEntry(
        lemma=lemma,
        word_class=word_class,
        attributes=attributes,
        forms=forms,
        irregular=tuple(raw_forms),
    )
