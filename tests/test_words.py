"""Tests for lexicon records and entries (words.py)."""

import pytest

from booklex.words import (
    Attribute, FormSlot, LexiconError, MalformedEntry, WordClass,
    parse_attributes, parse_record, parse_word_class,
)


# ── Word classes / attributes ─────────────────────────────────────────────────

def test_parse_word_class_all_codes():
    codes = ["A", "Av", "C", "D", "I", "N", "P", "Pn", "V"]
    assert [parse_word_class(c).code for c in codes] == codes


def test_parse_word_class_unknown():
    with pytest.raises(ValueError, match="unknown word class"):
        parse_word_class("X")


def test_verb_slot_order():
    assert WordClass.VERB.slots == (
        FormSlot.PRESENT_THIRD_SINGULAR,
        FormSlot.PRESENT_PARTICIPLE,
        FormSlot.PAST,
        FormSlot.PAST_PARTICIPLE,
    )


def test_slotless_classes():
    for wc in (WordClass.ADVERB, WordClass.CONJUNCTION, WordClass.DETERMINER,
               WordClass.INTERJECTION, WordClass.PREPOSITION):
        assert wc.slots == ()


def test_attribute_c_depends_on_class():
    assert parse_attributes(WordClass.NOUN, ["c"]) == {Attribute.COUNTABLE}
    assert parse_attributes(WordClass.ADVERB, ["c"]) == {Attribute.CONJUNCTIVE}


def test_attribute_groups_combine():
    assert parse_attributes(WordClass.NOUN, ["sn"]) == parse_attributes(
        WordClass.NOUN, ["s", "n"]
    )


def test_attribute_not_allowed_for_class():
    with pytest.raises(ValueError, match="not valid for class V"):
        parse_attributes(WordClass.VERB, ["s"])


# ── parse_record ──────────────────────────────────────────────────────────────

def test_parse_irregular_verb():
    entry = parse_record("go:V,goes,going,went,gone")
    assert entry.lemma == "go"
    assert entry.word_class is WordClass.VERB
    assert entry.forms == {
        FormSlot.BASE: "go",
        FormSlot.PRESENT_THIRD_SINGULAR: "goes",
        FormSlot.PRESENT_PARTICIPLE: "going",
        FormSlot.PAST: "went",
        FormSlot.PAST_PARTICIPLE: "gone",
    }


def test_parse_without_class_is_noun():
    entry = parse_record("dog")
    assert entry.word_class is WordClass.NOUN
    assert entry.attributes == frozenset()
    assert entry.form(FormSlot.PLURAL) == "dogs"


def test_parse_abbreviated_plural():
    entry = parse_record("alumnus:N,-ni")
    assert entry.form(FormSlot.PLURAL) == "alumni"


def test_parse_ditto():
    entry = parse_record("put:V,puts,putting,_,_")
    assert entry.form(FormSlot.PAST) == "put"
    assert entry.form(FormSlot.PAST_PARTICIPLE) == "put"


def test_empty_field_leaves_slot_out():
    entry = parse_record("are:V.a,,,were")
    assert entry.form(FormSlot.PAST) == "were"
    assert entry.form(FormSlot.PRESENT_THIRD_SINGULAR) is None
    assert entry.form(FormSlot.PRESENT_PARTICIPLE) is None


def test_three_verb_forms_no_past_participle():
    entry = parse_record("walk:V,walks,walking,walked")
    assert FormSlot.PAST_PARTICIPLE not in entry.forms


def test_singulare_tantum_has_no_plural():
    entry = parse_record("information:N.s")
    assert entry.has(Attribute.SINGULARE_TANTUM)
    assert FormSlot.PLURAL not in entry.forms
    assert entry.form(FormSlot.BASE) == "information"


def test_plurale_tantum_plural_is_lemma():
    entry = parse_record("scissors:N.p")
    assert entry.form(FormSlot.PLURAL) == "scissors"
    assert FormSlot.BASE not in entry.forms


def test_forms_are_read_only():
    entry = parse_record("dog:N")
    with pytest.raises(TypeError):
        entry.forms[FormSlot.PLURAL] = "doggies"


def test_entries_compare_by_identity():
    assert parse_record("dog:N") != parse_record("dog:N")


def test_class_code_sorted():
    assert parse_record("realize:V.zt").class_code == "V.tz"
    assert parse_record("dog:N").class_code == "N"


def test_repr():
    assert repr(parse_record("scissors:N.p")) == "LexemeEntry(scissors:N.p)"


# ── record() ──────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("line", [
    "go:V,goes,going,went,gone",
    "alumnus:N,-ni",
    "put:V,puts,putting,_,_",
    "are:V.a,,,were",
    "walk:V",
    "information:N.s",
])
def test_record_reproduces_line(line):
    assert parse_record(line).record() == line


def test_record_abbreviates_forms():
    assert parse_record("begin:V,begins,beginning,began,begun").record() == (
        "begin:V,-ns,-nning,began,begun"
    )


# ── Malformed records ─────────────────────────────────────────────────────────

@pytest.mark.parametrize("line, reason", [
    (":N", "empty lemma"),
    ("dog:X", "unknown word class"),
    ("dog:", "unknown word class ``"),
    ("dog:.s", "unknown word class ``"),
    ("dog:N.q", "not valid for class N"),
    ("dog:N.", "empty attribute"),
    ("go:V.s", "not valid for class V"),
    ("dog:N,dogs,doggies", "too many forms"),
    ("the:D,thes", "takes no forms"),
    ("information:N.s,informations", "tantum"),
    ("pants:N.p,pantses", "tantum"),
    ("alumnus:N,-xi", "anchor"),
    ("alumnus:N,-", "empty abbreviation"),
])
def test_malformed(line, reason):
    with pytest.raises(MalformedEntry, match=reason) as exc_info:
        parse_record(line)
    assert exc_info.value.line == line
    assert exc_info.value.line_number is None


def test_malformed_entry_hierarchy():
    err = MalformedEntry("dog:X", "unknown word class `X`")
    assert isinstance(err, LexiconError)
    assert isinstance(err, ValueError)


def test_malformed_entry_at_line():
    err = MalformedEntry("dog:X", "bad class").at_line(7)
    assert err.line_number == 7
    assert "line 7" in str(err)
    assert "dog:X" in str(err)
