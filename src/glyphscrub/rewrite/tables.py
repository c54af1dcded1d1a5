"""Character tables for the rewrite pipeline."""

from __future__ import annotations

from typing import Dict, FrozenSet

# Explicit fallback set, stripped even if the Unicode database disagrees on Cf.
ZERO_WIDTH: FrozenSet[str] = frozenset({
    "\u200b",  # ZERO WIDTH SPACE
    "\u200c",  # ZERO WIDTH NON-JOINER
    "\u200d",  # ZERO WIDTH JOINER
    "\ufeff",  # ZERO WIDTH NO-BREAK SPACE / BOM
    "\u2060",  # WORD JOINER
})

# Cyrillic look-alikes -> Latin. Upper and lower case are independent entries.
HOMOGLYPHS: Dict[str, str] = {
    "\u0430": "a",  # CYRILLIC SMALL LETTER A
    "\u0410": "A",
    "\u0435": "e",  # CYRILLIC SMALL LETTER IE
    "\u0415": "E",
    "\u043e": "o",  # CYRILLIC SMALL LETTER O
    "\u041e": "O",
    "\u0440": "p",  # CYRILLIC SMALL LETTER ER
    "\u0420": "P",
    "\u0441": "s",  # CYRILLIC SMALL LETTER ES
    "\u0421": "S",
    "\u0445": "x",  # CYRILLIC SMALL LETTER HA
    "\u0425": "X",
    "\u0456": "i",  # CYRILLIC SMALL LETTER BYELORUSSIAN-UKRAINIAN I
    "\u0406": "I",
}

ZERO_WIDTH_TABLE = {ord(ch): None for ch in ZERO_WIDTH}
HOMOGLYPH_TABLE = {ord(src): dst for src, dst in HOMOGLYPHS.items()}
