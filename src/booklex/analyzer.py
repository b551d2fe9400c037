"""
Text analysis facade with TOML-based configuration.

Builds the lexicon once and runs the tokenize -> classify -> highlight /
tally pipeline over any number of texts.

Usage:
    from booklex.analyzer import Analyzer

    analyzer = Analyzer.from_config()            # loads booklex.toml
    for ct in analyzer.analyze("The 3rd of MCM"):
        print(ct.text, ct.category)

    # Or build manually:
    analyzer = Analyzer.from_files("extra/names.csv")
    print(analyzer.highlight(text, "up"))
"""

from __future__ import annotations

import glob
import logging
import tomllib
from pathlib import Path
from typing import Iterable

from booklex.classifier import Category, ClassifiedToken, classify
from booklex.highlight import BRACKETS, MarkerStyle, get_style, highlight
from booklex.lexicon import FormMatch, Lexicon
from booklex.tally import WordTally
from booklex.tokenizer import split_compounds, tokenize

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "booklex.toml"
DEFAULT_CATEGORIES = frozenset({Category.UNKNOWN})


class Analyzer:
    """Classifies and highlights text against one shared, read-only lexicon."""

    def __init__(
        self,
        lexicon: Lexicon,
        style: MarkerStyle = BRACKETS,
        categories: Iterable[Category] = DEFAULT_CATEGORIES,
    ):
        self.lexicon = lexicon
        self.style = style
        self.categories = frozenset(categories)

    # ── Construction helpers ─────────────────────────────────────────────

    @classmethod
    def from_files(cls, *paths: str | Path, builtin: bool = True, **kwargs) -> Analyzer:
        """Build from lexicon files (globs allowed), plus the bundled lexicon."""
        resolved = _expand_paths(paths)
        lexicon = Lexicon.from_files(*resolved, builtin=builtin)
        logger.info(
            "Loaded %d lexemes (%d forms) from %d file(s)%s",
            lexicon.num_entries, lexicon.num_forms, len(resolved),
            " + builtin" if builtin else "",
        )
        return cls(lexicon, **kwargs)

    @classmethod
    def from_config(cls, config_path: str | Path = DEFAULT_CONFIG) -> Analyzer:
        """Build an Analyzer from a TOML config file.

        Paths in the config are resolved relative to the config file's
        directory.  Glob patterns in paths are expanded.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        with config_path.open("rb") as f:
            cfg = tomllib.load(f)

        base_dir = config_path.parent

        level = cfg.get("logging", {}).get("level")
        if level:
            logging.getLogger("booklex").setLevel(level.upper())

        lex_cfg = cfg.get("lexicon", {})
        paths = _resolve_config_paths(lex_cfg.get("paths", []), base_dir)
        builtin = lex_cfg.get("builtin", True)

        hl_cfg = cfg.get("highlight", {})
        style = get_style(hl_cfg.get("style", BRACKETS.name))
        codes = hl_cfg.get("categories")
        categories = Category.parse_codes(codes) if codes else DEFAULT_CATEGORIES

        return cls.from_files(*paths, builtin=builtin, style=style, categories=categories)

    # ── Pipeline ─────────────────────────────────────────────────────────

    def analyze(self, text: str | bytes) -> list[ClassifiedToken]:
        """Classify every token of a text (separators included)."""
        tokens = split_compounds(self.lexicon, tokenize(text))
        return list(classify(self.lexicon, tokens))

    def highlight(
        self,
        text: str | bytes,
        categories: str | Iterable[Category] | None = None,
        style: MarkerStyle | None = None,
    ) -> str | bytes:
        """Mark words of the given categories (codes like ``"up"`` allowed)."""
        if categories is None:
            categories = self.categories
        elif isinstance(categories, str):
            categories = Category.parse_codes(categories)
        return highlight(text, self.analyze(text), categories, style or self.style)

    def tally(self, text: str | bytes) -> WordTally:
        tally = WordTally()
        tally.update(self.analyze(text))
        return tally

    def lookup(self, word: str) -> tuple[FormMatch, ...]:
        return self.lexicon.lookup(word)

    # ── Introspection ────────────────────────────────────────────────────

    def summary(self) -> str:
        codes = "".join(sorted(c.code for c in self.categories))
        lines = [f"Analyzer (style: {self.style.name}, highlight: {codes})"]
        for sub_line in self.lexicon.summary().split("\n"):
            lines.append(f"  {sub_line}")
        return "\n".join(lines)


# ── Path helpers ─────────────────────────────────────────────────────────

def _expand_paths(paths: Iterable[str | Path]) -> list[Path]:
    """Expand globs and return a list of Paths."""
    result = []
    for p in paths:
        p_str = str(p)
        if "*" in p_str or "?" in p_str:
            result.extend(Path(m) for m in sorted(glob.glob(p_str)))
        else:
            result.append(Path(p))
    return result


def _resolve_config_paths(raw_paths: list[str], base_dir: Path) -> list[Path]:
    """Resolve config paths relative to base_dir, expanding globs."""
    return _expand_paths(
        base_dir / p if not Path(p).is_absolute() else Path(p) for p in raw_paths
    )
