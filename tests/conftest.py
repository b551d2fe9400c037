"""Shared test fixtures."""

import pytest

from booklex.lexicon import Lexicon, load_builtin

# Small self-contained lexicon (no resource I/O needed).
SAMPLE = """\
# sample lexicon
the:D
a:D
of:P.t
and:C
not:Av
i:Pn.s
it:Pn.s
could:V.a,_
can:V.a,_,,could
have:V.a,has,having,had,had
be:V.a,is,being,was,been
go:V,goes,going,went,gone
walk:V
stop:V
see:V,sees,seeing,saw,seen
saw:N
dog:N
cat:N
book:N
well-known:A,,
known:A,,
information:N.s
scissors:N.p
alumnus:N,-ni
café:N
realize:V.tz
london:N.n
big:A
"""


@pytest.fixture
def sample_text() -> str:
    return SAMPLE


@pytest.fixture
def lexicon() -> Lexicon:
    return Lexicon.from_text(SAMPLE, "sample")


@pytest.fixture(scope="session")
def builtin_lexicon() -> Lexicon:
    return load_builtin()
