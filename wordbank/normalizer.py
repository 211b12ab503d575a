"""
Word normalization for duplicate detection.

Two words are the same entry if they only differ by case or whitespace:
"Hello  World", "helloworld" and " HELLOWORLD " all share one key.
Stored words keep their original form; the key is only used to compare.
"""

import re

_WHITESPACE = re.compile(r"\s+")


def normalize(word: str) -> str:
    """Reduce a word to its comparison key (no whitespace, lower-cased)."""
    return _WHITESPACE.sub("", word.strip()).lower()
