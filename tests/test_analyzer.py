"""Tests for the Analyzer facade and TOML config (analyzer.py)."""

import logging

import pytest

from booklex.analyzer import Analyzer, _expand_paths
from booklex.classifier import Category
from booklex.highlight import ANSI, BRACKETS
from booklex.lexicon import Lexicon


@pytest.fixture
def analyzer(lexicon) -> Analyzer:
    return Analyzer(lexicon)


def _write_config(tmp_path, body: str):
    lex_dir = tmp_path / "lex"
    lex_dir.mkdir()
    (lex_dir / "animals.csv").write_text("dog:N\ncat:N\n", encoding="utf-8")
    (lex_dir / "verbs.csv").write_text("go:V,goes,going,went,gone\n", encoding="utf-8")
    config = tmp_path / "booklex.toml"
    config.write_text(body, encoding="utf-8")
    return config


# ── Pipeline ──────────────────────────────────────────────────────────────────

def test_analyze_covers_every_token(analyzer):
    text = "The dog, a cat-like blorft."
    classified = analyzer.analyze(text)
    assert "".join(ct.text for ct in classified) == text
    words = [(ct.text, ct.category) for ct in classified if ct.is_word]
    assert ("cat", Category.DICTIONARY) in words
    assert ("like", Category.UNKNOWN) in words


def test_highlight_default_unknown(analyzer):
    assert analyzer.highlight("The dog blorfed.") == "The dog ⟦u:blorfed⟧."


def test_highlight_with_codes(analyzer):
    assert analyzer.highlight("The dog met Smith.", "p") == "The dog met ⟦p:Smith⟧."


def test_highlight_with_style(analyzer):
    assert analyzer.highlight("a blorft", style=ANSI) == "a \x1b[4mblorft\x1b[0m"


def test_tally(analyzer):
    tally = analyzer.tally("The dog saw the other dog.")
    assert tally.get("dog").count == 2
    assert tally.get("other").category is Category.UNKNOWN


def test_lookup(analyzer):
    assert [m.lemma for m in analyzer.lookup("went")] == ["go"]


def test_summary(analyzer):
    s = analyzer.summary()
    assert s.startswith("Analyzer (style: brackets, highlight: u)")
    assert "Lexemes:" in s


# ── Construction ──────────────────────────────────────────────────────────────

def test_from_files_without_builtin(tmp_path):
    path = tmp_path / "x.csv"
    path.write_text("blorft:N\n", encoding="utf-8")
    analyzer = Analyzer.from_files(path, builtin=False)
    assert analyzer.lexicon.num_entries == 1
    assert analyzer.style is BRACKETS
    assert analyzer.categories == {Category.UNKNOWN}


def test_from_files_builtin_default():
    analyzer = Analyzer.from_files()
    assert "went" in analyzer.lexicon


def test_from_config(tmp_path):
    config = _write_config(tmp_path, """
[lexicon]
builtin = false
paths = ["lex/*.csv"]

[highlight]
style = "ansi"
categories = "up"
""")
    analyzer = Analyzer.from_config(config)
    assert [e.lemma for e in analyzer.lexicon] == ["dog", "cat", "go"]
    assert analyzer.style is ANSI
    assert analyzer.categories == {Category.UNKNOWN, Category.PROPER}


def test_from_config_defaults(tmp_path):
    config = _write_config(tmp_path, "[lexicon]\npaths = [\"lex/verbs.csv\"]\n")
    analyzer = Analyzer.from_config(config)
    assert "went" in analyzer.lexicon
    assert "the" in analyzer.lexicon  # builtin on by default
    assert analyzer.style is BRACKETS
    assert analyzer.categories == {Category.UNKNOWN}


def test_from_config_logging_level(tmp_path):
    config = _write_config(tmp_path, "[lexicon]\nbuiltin = false\n\n[logging]\nlevel = \"debug\"\n")
    pkg_logger = logging.getLogger("booklex")
    try:
        Analyzer.from_config(config)
        assert pkg_logger.level == logging.DEBUG
    finally:
        pkg_logger.setLevel(logging.NOTSET)


def test_from_config_missing(tmp_path):
    with pytest.raises(FileNotFoundError, match="Config not found"):
        Analyzer.from_config(tmp_path / "booklex.toml")


def test_from_config_bad_style(tmp_path):
    config = _write_config(tmp_path, "[lexicon]\nbuiltin = false\n[highlight]\nstyle = \"html\"\n")
    with pytest.raises(ValueError, match="unknown marker style"):
        Analyzer.from_config(config)


# ── Path helpers ──────────────────────────────────────────────────────────────

def test_expand_paths_globs(tmp_path):
    for name in ("b.csv", "a.csv", "c.txt"):
        (tmp_path / name).write_text("", encoding="utf-8")
    found = _expand_paths([tmp_path / "*.csv", tmp_path / "c.txt"])
    assert [p.name for p in found] == ["a.csv", "b.csv", "c.txt"]


def test_analyzer_shares_lexicon(lexicon):
    a, b = Analyzer(lexicon), Analyzer(lexicon, categories={Category.PROPER})
    assert a.lexicon is b.lexicon
    assert isinstance(a.lexicon, Lexicon)
