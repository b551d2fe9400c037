#!/usr/bin/env python3
"""
English word-kind toolkit CLI.

Uses the bundled lexicon, plus booklex.toml if one is found, or override
with flags:

    booklex hl < book.txt                      # mark unknown words
    booklex hl -c up --style ansi book.txt     # unknown + proper nouns
    booklex kind < book.txt                    # words per category
    booklex kind -u -p < book.txt              # list unknown and proper words
    booklex lex went                           # look a word up
    booklex --lexicon extra.csv lex --forms
"""

import argparse
import logging
import sys
from pathlib import Path

from booklex.classifier import Category
from booklex.words import LexiconError

logger = logging.getLogger(__name__)


def _find_default_config() -> Path | None:
    """Look for booklex.toml in CWD."""
    candidate = Path("booklex.toml")
    if candidate.exists():
        return candidate
    return None


def _read_text(path: str | None) -> str | None:
    if path:
        return Path(path).read_text(encoding="utf-8")
    if sys.stdin.isatty():
        print("!!! stdin must be redirected (or give a FILE) !!!", file=sys.stderr)
        return None
    return sys.stdin.read()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="booklex",
        description="Classify and highlight the words of English text",
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Path to TOML config file (default: auto-detect booklex.toml)",
    )
    parser.add_argument(
        "--lexicon",
        action="append",
        metavar="FILE",
        help="Extra lexicon file, repeatable (overrides config)",
    )
    parser.add_argument(
        "--no-builtin",
        action="store_true",
        help="Do not load the bundled English lexicon",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    parser.add_argument("--debug", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    hl = sub.add_parser("hl", help="Highlight words of some categories")
    hl.add_argument("file", nargs="?", help="Text file (default: stdin)")
    hl.add_argument(
        "-c", "--categories",
        metavar="CODES",
        help="Category codes to mark, e.g. 'up' (default: config or 'u')",
    )
    hl.add_argument(
        "--style",
        choices=["brackets", "ansi"],
        help="Marker style (default: config or brackets)",
    )

    kind = sub.add_parser("kind", help="Group words by category")
    kind.add_argument("file", nargs="?", help="Text file (default: stdin)")
    for category in Category:
        kind.add_argument(
            f"-{category.code}",
            dest="codes",
            action="append_const",
            const=category.code,
            help=f"list {category.label.lower()} words",
        )
    kind.add_argument(
        "-A", dest="codes", action="append_const", const="A",
        help="list words of all categories",
    )

    lex = sub.add_parser("lex", help="Look words up in the lexicon")
    lex.add_argument("word", nargs="?", help="Word form to look up")
    lex.add_argument("-f", "--forms", action="store_true", help="List all word forms")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    from booklex.logging_config import setup_logging

    setup_logging(logging.INFO if args.verbose else logging.WARNING, debug=args.debug)

    # ── Build analyzer ───────────────────────────────────────────────────

    from booklex.analyzer import Analyzer

    try:
        if args.lexicon or args.no_builtin:
            analyzer = Analyzer.from_files(
                *(args.lexicon or []), builtin=not args.no_builtin,
            )
        else:
            config_path = Path(args.config) if args.config else _find_default_config()
            if config_path is not None:
                analyzer = Analyzer.from_config(config_path)
            else:
                analyzer = Analyzer.from_files()
    except (LexiconError, FileNotFoundError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    logger.info("%s", analyzer.summary())

    # ── Highlight ────────────────────────────────────────────────────────

    if args.command == "hl":
        try:
            categories = Category.parse_codes(args.categories) if args.categories else None
        except ValueError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
        text = _read_text(args.file)
        if text is None:
            return 1
        from booklex.highlight import get_style

        style = get_style(args.style) if args.style else None
        sys.stdout.write(analyzer.highlight(text, categories, style))
        return 0

    # ── Kind ─────────────────────────────────────────────────────────────

    if args.command == "kind":
        text = _read_text(args.file)
        if text is None:
            return 1
        tally = analyzer.tally(text)
        if not args.codes:
            print(tally.summary())
            return 0
        entries = tally.entries(Category.parse_codes("".join(args.codes)))
        for entry in entries:
            print(entry)
        print(f"\ncount: {len(entries)}")
        return 0

    # ── Lex ──────────────────────────────────────────────────────────────

    lexicon = analyzer.lexicon
    if args.forms:
        for form in sorted(lexicon.all_forms()):
            print(form)
    elif args.word:
        entries = lexicon.entries_for(args.word)
        if not entries:
            print(f"`{args.word}` not found")
            return 1
        for entry in entries:
            forms = " ".join(
                f"{form}[{slot.value}]" for slot, form in entry.forms.items()
            )
            print(f"{entry.lemma}:{entry.class_code}  {forms}")
    else:
        for entry in sorted(lexicon, key=lambda e: (e.lemma, e.word_class.code)):
            print(entry.record())
    return 0


if __name__ == "__main__":
    sys.exit(main())
