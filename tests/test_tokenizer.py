"""Tests for the tokenizer (tokenizer.py)."""

from booklex.tokenizer import Token, TokenStream, split_compounds, tokenize


def _words(text):
    return [t.text for t in tokenize(text).words()]


# ── Reconstruction / offsets ──────────────────────────────────────────────────

def test_tokens_rebuild_text():
    text = "It's a well-known fact -- isn't it?\n\n  “Yes,” said Ann."
    assert "".join(t.text for t in tokenize(text)) == text


def test_offsets_are_contiguous_bytes():
    text = "Café au lait, s’il vous plaît."
    tokens = list(tokenize(text))
    data = text.encode("utf-8")
    pos = 0
    for tok in tokens:
        assert tok.start == pos
        assert data[tok.start:tok.end].decode("utf-8") == tok.text
        pos = tok.end
    assert pos == len(data)


def test_multibyte_offsets():
    first, sep, second = list(tokenize("café au"))[:3]
    assert first == Token(0, 5, "café", True)
    assert sep == Token(5, 6, " ", False)
    assert second.start == 6
    assert len(first) == 5


def test_empty_text():
    assert list(tokenize("")) == []


def test_only_separators():
    assert list(tokenize(" ... ")) == [Token(0, 5, " ... ", False)]


def test_bytes_input():
    assert _words("naïve café".encode("utf-8")) == ["naïve", "café"]


def test_stream_is_restartable():
    stream = tokenize("one two three")
    assert isinstance(stream, TokenStream)
    assert list(stream) == list(stream)


# ── Word shapes ───────────────────────────────────────────────────────────────

def test_words_and_separators():
    tokens = list(tokenize("Hello, world!"))
    assert [(t.text, t.is_word) for t in tokens] == [
        ("Hello", True), (", ", False), ("world", True), ("!", False),
    ]


def test_apostrophes_inside_words():
    assert _words("It's don’t rock ʼn’ roll") == ["It's", "don’t", "rock", "ʼn’", "roll"]


def test_single_hyphen_joins():
    assert _words("a well-known mother-in-law") == ["a", "well-known", "mother-in-law"]


def test_double_hyphen_separates():
    assert _words("yes--no") == ["yes", "no"]


def test_trailing_hyphen_not_in_word():
    assert _words("pre- and post-war") == ["pre", "and", "post-war"]


def test_dotted_initialism():
    assert _words("in the U.S.A. today") == ["in", "the", "U.S.A.", "today"]


def test_underscore_separates():
    assert _words("snake_case") == ["snake", "case"]


def test_digits_are_word_characters():
    assert _words("the 3rd of 1984") == ["the", "3rd", "of", "1984"]


# ── split_compounds ───────────────────────────────────────────────────────────

def test_known_compound_kept(lexicon):
    tokens = list(split_compounds(lexicon, tokenize("a well-known book")))
    assert [t.text for t in tokens if t.is_word] == ["a", "well-known", "book"]


def test_unknown_compound_split(lexicon):
    text = "a cat-like dog"
    tokens = list(split_compounds(lexicon, tokenize(text)))
    assert [(t.text, t.is_word) for t in tokens] == [
        ("a", True), (" ", False),
        ("cat", True), ("-", False), ("like", True),
        (" ", False), ("dog", True),
    ]
    data = text.encode("utf-8")
    for tok in tokens:
        assert data[tok.start:tok.end].decode("utf-8") == tok.text


def test_split_compound_multibyte_offsets(lexicon):
    tokens = list(split_compounds(lexicon, tokenize("café-noir")))
    assert tokens == [
        Token(0, 5, "café", True),
        Token(5, 6, "-", False),
        Token(6, 10, "noir", True),
    ]
