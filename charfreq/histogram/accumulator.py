"""
Character frequency accumulator.
Reason: keep running counts across arbitrarily split input so the report is only built once.
"""
import re

from .render import render
from .stats import bump, lookup

# ECMAScript \s: Zs spaces, tab/LF/VT/FF/CR, line/paragraph separators and the BOM.
# Python's \s also strips U+001C-U+001F and U+0085 but keeps U+FEFF.
WHITESPACE = re.compile(
    r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)


class CharacterHistogram:
    """Counts every non-whitespace character, uppercased, across ingested chunks."""

    def __init__(self):
        self.counts: dict[str, int] = {}
        self.total = 0

    def ingest(self, chunk: str) -> None:
        # str iteration is per code point, so multi-byte characters count once
        for character in WHITESPACE.sub("", chunk).upper():
            bump(self.counts, character)
            self.total += 1

    def count(self, character: str) -> int:
        return lookup(self.counts, character)

    def report(self) -> str:
        return render(self.counts, self.total)

    def __str__(self) -> str:
        return self.report()
