"""Word-level corrector — dictionary lookup with first-letter case carry-over."""

from __future__ import annotations
import re
from collections.abc import Collection, Iterator, Mapping

from .types import Correction

# Word-like runs: letters, digits, underscore, hyphen, straight/curly apostrophe, backtick
WORD_PATTERN = re.compile(r"[\w\-'’`]+")


def match_case(word: str, correction: str) -> str:
    """Carry an uppercase first letter of word over to correction.

    Only position 0 is adjusted; the rest of correction is kept verbatim.
    """
    if word[:1].isupper() and correction:
        return correction[0].upper() + correction[1:]
    return correction


def lookup(
    word: str,
    dictionary: Mapping[str, str],
    ignore_words: Collection[str] = frozenset(),
) -> str | None:
    """Return the cased correction for word, or None when it stays as is."""
    lowered = word.lower()
    if lowered in ignore_words:
        return None
    correction = dictionary.get(lowered)
    if correction is None:
        return None
    return match_case(word, correction)


def iter_corrections(
    text: str,
    dictionary: Mapping[str, str],
    ignore_words: Collection[str] = frozenset(),
) -> Iterator[Correction]:
    """Yield every word of text that the dictionary would replace."""
    for m in WORD_PATTERN.finditer(text):
        replacement = lookup(m.group(), dictionary, ignore_words)
        if replacement is not None and replacement != m.group():
            yield Correction(
                start=m.start(),
                end=m.end(),
                original=m.group(),
                replacement=replacement,
            )


def correct(
    text: str,
    dictionary: Mapping[str, str],
    ignore_words: Collection[str] = frozenset(),
) -> str:
    """Replace misspelled words in text. Everything between words is untouched."""
    def _replace(m: re.Match) -> str:
        replacement = lookup(m.group(), dictionary, ignore_words)
        return m.group() if replacement is None else replacement

    return WORD_PATTERN.sub(_replace, text)
