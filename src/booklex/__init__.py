"""booklex: English lexicon, word classifier and highlighter for book text."""

__version__ = "0.1.0"

from booklex.words import (
    LexemeEntry, WordClass, Attribute, FormSlot, LexiconError, MalformedEntry,
)
from booklex.lexicon import Lexicon, FormMatch, load_lexicon, load_builtin
from booklex.tokenizer import Token, tokenize, split_compounds
from booklex.classifier import Category, ClassifiedToken, classify, classify_word
from booklex.highlight import highlight, strip_markers, BRACKETS, ANSI
from booklex.tally import WordTally
from booklex.analyzer import Analyzer

__all__ = [
    "LexemeEntry", "WordClass", "Attribute", "FormSlot",
    "LexiconError", "MalformedEntry",
    "Lexicon", "FormMatch", "load_lexicon", "load_builtin",
    "Token", "tokenize", "split_compounds",
    "Category", "ClassifiedToken", "classify", "classify_word",
    "highlight", "strip_markers", "BRACKETS", "ANSI",
    "WordTally",
    "Analyzer",
]
