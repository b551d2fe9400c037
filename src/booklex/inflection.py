"""
Inflection engine: irregular form resolution and regular form generation.

Irregular forms in a record are written in one of three ways:

    bare       used verbatim              go:V,goes,going,went,gone
    _          copy of the lemma          put:V,puts,putting,_,_
    -Xrest     abbreviation: the lemma    alumnus:N,-ni   -> alumni
               is cut before the last
               occurrence of X, and
               "Xrest" is appended

When a record has no forms at all, regular forms are generated from
prioritized suffix rule tables (first matching rule wins).  The rules are
best-effort English heuristics; the lexicon lists the exceptions.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

from booklex.words import Attribute, FormSlot, LexemeEntry, WordClass

DITTO = "_"
ABBREVIATION = "-"

_VOWELS = frozenset("aeiouy")


# ── Irregular forms ─────────────────────────────────────────────────────────

def decode_form(lemma: str, token: str) -> str:
    """Resolve one raw irregular form token against its lemma."""
    if token == DITTO:
        return lemma
    if token.startswith(ABBREVIATION):
        suffix = token[1:]
        if not suffix:
            raise ValueError("empty abbreviation")
        anchor = suffix[0]
        base, found, _ending = lemma.rpartition(anchor)
        if not found:
            raise ValueError(f"abbreviation anchor `{anchor}` not in lemma")
        return base + suffix
    return token


def encode_form(lemma: str, form: str) -> str:
    """Abbreviate a form relative to its lemma (inverse of decode_form).

    Picks the longest shared prefix (at least three characters) whose next
    lemma character does not occur again later in the lemma.
    """
    if form == lemma:
        return DITTO
    pos = None
    for i in range(3, len(lemma)):
        if lemma[:i] != form[:i] or len(form) <= i:
            continue
        anchor = lemma[i]
        if form[i] == anchor and anchor not in lemma[i + 1:]:
            pos = i
    if pos is not None:
        return ABBREVIATION + form[pos:]
    return form


# ── Suffix rule tables ──────────────────────────────────────────────────────

@dataclass(slots=True)
class _SuffixRule:
    """Replace the end of a word matched by ``pattern`` with ``replace``."""

    pattern: re.Pattern
    replace: str

    def apply(self, word: str) -> str | None:
        result, n = self.pattern.subn(self.replace, word, count=1)
        return result if n else None


def _rules(*pairs: tuple[str, str]) -> list[_SuffixRule]:
    return [_SuffixRule(re.compile(p), r) for p, r in pairs]


def _apply_rules(rules: list[_SuffixRule], word: str) -> str:
    for rule in rules:
        result = rule.apply(word)
        if result is not None:
            return result
    return word


_NOUN_PLURAL_RULES = _rules(
    (r"(?<=.)sis$", "ses"),  # analysis -> analyses
    (r"(?<![aeiouy])y$", "ies"),  # city -> cities
    (r"(s|sh|ch|x|z)$", r"\1es"),  # box -> boxes
    (r"ife$", "ives"),  # knife -> knives
    (r"([lr])f$", r"\1ves"),  # wolf -> wolves
    (r"([eo]a)f$", r"\1ves"),  # leaf -> leaves
    (r"$", "s"),
)

_VERB_PRESENT_RULES = _rules(
    (r"(?<![aeiouy])y$", "ies"),
    (r"(sh|ch|x)$", r"\1es"),
    (r"$", "s"),
)


def ends_in_y(word: str) -> bool:
    """True for a final ``y`` not preceded by a vowel."""
    return word.endswith("y") and not word.endswith(
        ("ay", "ey", "iy", "oy", "uy", "yy")
    )


def ends_in_e(word: str) -> bool:
    """True for a final (silent) ``e`` not preceded by a vowel."""
    return word.endswith("e") and not word.endswith(
        ("ae", "ee", "ie", "oe", "ye")
    )


def count_syllables(word: str) -> int:
    """Count vowel groups (roughly syllables), ignoring a silent final e."""
    if ends_in_e(word):
        word = word.rstrip("e")
    syllables = 0
    prev = " "
    for c in word:
        if c in _VOWELS and prev not in _VOWELS:
            syllables += 1
        prev = c
    return syllables


def doubled_consonant(word: str) -> str | None:
    """Return the final consonant if it doubles before a suffix.

    Doubling happens after a single short vowel: the last three letters are
    consonant, vowel, consonant (``qu`` counts as a consonant).
    """
    a = b = c = " "
    for ch in word:
        if c == "q" and ch == "u":
            continue
        a, b, c = b, c, ch
    if c in ("w", "x"):
        return None
    if b + c in ("ed", "en", "er", "on"):
        return None
    if a not in _VOWELS and b in _VOWELS and c not in _VOWELS:
        return c
    return None


def noun_plural(lemma: str) -> str:
    return _apply_rules(_NOUN_PLURAL_RULES, lemma)


def verb_present(lemma: str) -> str:
    if lemma.endswith(("s", "z")):
        end = doubled_consonant(lemma) or ""
        return f"{lemma}{end}es"
    return _apply_rules(_VERB_PRESENT_RULES, lemma)


def verb_present_participle(lemma: str) -> str:
    end = doubled_consonant(lemma)
    if end:
        return f"{lemma}{end}ing"
    if ends_in_e(lemma):
        return f"{lemma[:-1]}ing"
    return f"{lemma}ing"


def verb_past(lemma: str) -> str:
    end = doubled_consonant(lemma)
    if end:
        return f"{lemma}{end}ed"
    if lemma.endswith("e"):
        return f"{lemma}d"
    if ends_in_y(lemma):
        return f"{lemma[:-1]}ied"
    return f"{lemma}ed"


def _adjective_suffix(lemma: str, suffix: str) -> str:
    if lemma.endswith("e"):
        return f"{lemma}{suffix[1:]}"
    if ends_in_y(lemma):
        return f"{lemma[:-1]}i{suffix}"
    end = doubled_consonant(lemma) or ""
    return f"{lemma}{end}{suffix}"


def adjective_comparative(lemma: str) -> str:
    return _adjective_suffix(lemma, "er")


def adjective_superlative(lemma: str) -> str:
    return _adjective_suffix(lemma, "est")


# ── Form building ───────────────────────────────────────────────────────────

# Nouns with these attributes get no generated plural.
_NO_PLURAL = frozenset({
    Attribute.SINGULARE_TANTUM,
    Attribute.PLURALE_TANTUM,
    Attribute.UNCOUNTABLE,
    Attribute.GROUP,
})


def regular_forms(
    lemma: str, word_class: WordClass, attributes: frozenset[Attribute],
) -> dict[FormSlot, str]:
    """Generate the regular inflected forms allowed by class and attributes."""
    forms: dict[FormSlot, str] = {}
    if Attribute.PROPER in attributes:
        return forms
    if word_class is WordClass.ADJECTIVE:
        # long adjectives use "more" / "most"
        if count_syllables(lemma) < 4:
            forms[FormSlot.COMPARATIVE] = adjective_comparative(lemma)
            forms[FormSlot.SUPERLATIVE] = adjective_superlative(lemma)
    elif word_class in (WordClass.NOUN, WordClass.PRONOUN):
        if not attributes & _NO_PLURAL:
            forms[FormSlot.PLURAL] = noun_plural(lemma)
    elif word_class is WordClass.VERB:
        forms[FormSlot.PRESENT_THIRD_SINGULAR] = verb_present(lemma)
        if Attribute.AUXILIARY not in attributes:
            forms[FormSlot.PRESENT_PARTICIPLE] = verb_present_participle(lemma)
            forms[FormSlot.PAST] = verb_past(lemma)
    return forms


def build_forms(
    lemma: str,
    word_class: WordClass,
    attributes: frozenset[Attribute],
    raw_forms: list[str],
) -> dict[FormSlot, str]:
    """Resolve all forms of a lexeme: lemma, then irregular or regular forms.

    Raises ValueError for forms the class or attributes do not allow.
    """
    plurale = Attribute.PLURALE_TANTUM in attributes
    forms: dict[FormSlot, str] = {}
    if plurale:
        forms[FormSlot.PLURAL] = lemma
    else:
        forms[FormSlot.BASE] = lemma

    if not raw_forms:
        forms.update(regular_forms(lemma, word_class, attributes))
        return forms

    slots = word_class.slots
    if not slots:
        raise ValueError(f"class {word_class.code} takes no forms")
    if len(raw_forms) > len(slots):
        raise ValueError(
            f"too many forms for class {word_class.code} "
            f"({len(raw_forms)} > {len(slots)})"
        )
    for slot, raw in zip(slots, raw_forms):
        if not raw:
            continue
        if slot is FormSlot.PLURAL and (
            plurale or Attribute.SINGULARE_TANTUM in attributes
        ):
            raise ValueError("plural form given for a tantum noun")
        forms[slot] = decode_form(lemma, raw)
    return forms


# ── Spelling variants ───────────────────────────────────────────────────────

_LIGATURES = str.maketrans({"æ": "ae", "œ": "oe", "Æ": "AE", "Œ": "OE"})
_LIGATURES_E = str.maketrans({"æ": "e", "œ": "e", "Æ": "E", "Œ": "E"})


def fold_ascii(text: str) -> str:
    """Strip diacritics and expand ligatures (``façade`` -> ``facade``)."""
    text = unicodedata.normalize("NFKD", text.translate(_LIGATURES))
    return "".join(c for c in text if not unicodedata.combining(c))


def _fold_ligature_e(text: str) -> str:
    return fold_ascii(text.translate(_LIGATURES_E))


def spelling_variants(entry: LexemeEntry) -> list[dict[FormSlot, str]]:
    """All spellings of an entry's forms, the canonical spelling first.

    ``anæsthetize:V.z`` yields anæsthetize, anaesthetize, anesthetize and
    the same three with ``z`` -> ``s``.
    """
    canonical = dict(entry.forms)
    variants = [canonical]
    for fold in (fold_ascii, _fold_ligature_e):
        folded = {slot: fold(form) for slot, form in canonical.items()}
        if folded not in variants:
            variants.append(folded)
    if entry.has(Attribute.ALTERNATE_Z):
        for variant in list(variants):
            alt = {slot: form.replace("z", "s") for slot, form in variant.items()}
            if alt not in variants:
                variants.append(alt)
    return variants
