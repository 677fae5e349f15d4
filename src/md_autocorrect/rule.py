"""Auto-correct common misspellings — the lint rule.

Usage:
    rule = AutoCorrectMisspellings(ignore_words={"teh"})
    fixed = rule.apply(markdown_text)

    for c in rule.find(markdown_text):
        print(c.start, c.original, "->", c.replacement)
"""

from __future__ import annotations
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from functools import partial

from .corrector import correct, iter_corrections
from .dictionary import DEFAULT_DICTIONARY
from .masker import RegionMasker
from .types import Correction, RegionKind

REGION_KINDS: tuple[RegionKind, ...] = (
    RegionKind.YAML,
    RegionKind.CODE,
    RegionKind.INLINE_CODE,
    RegionKind.MATH,
    RegionKind.INLINE_MATH,
    RegionKind.LINK,
    RegionKind.WIKI_LINK,
    RegionKind.TAG,
    RegionKind.IMAGE,
    RegionKind.URL,
)


@dataclass
class AutoCorrectMisspellings:
    """Replace dictionary misspellings in prose, leaving markdown syntax alone."""

    name = "Auto-correct Common Misspellings"
    description = (
        "Uses a dictionary of common misspellings to automatically convert "
        "them to their proper spellings."
    )

    ignore_words: frozenset[str] = frozenset()
    dictionary: Mapping[str, str] = field(default_factory=lambda: DEFAULT_DICTIONARY)
    masker: RegionMasker = field(default_factory=lambda: RegionMasker(REGION_KINDS))

    def __post_init__(self) -> None:
        self.ignore_words = frozenset(w.lower() for w in self.ignore_words)

    @classmethod
    def create(
        cls,
        *,
        ignore_words: Iterable[str] = (),
        dictionary: Mapping[str, str] | None = None,
        region_kinds: Iterable[RegionKind | str] = REGION_KINDS,
    ) -> "AutoCorrectMisspellings":
        """Factory — accepts any iterable of ignore words and region kinds."""
        return cls(
            ignore_words=frozenset(ignore_words),
            dictionary=DEFAULT_DICTIONARY if dictionary is None else dictionary,
            masker=RegionMasker(region_kinds),
        )

    def apply(self, text: str) -> str:
        """Return text with misspellings outside protected regions corrected."""
        return self.masker.process(
            text, partial(correct, dictionary=self.dictionary, ignore_words=self.ignore_words),
        )

    def find(self, text: str) -> list[Correction]:
        """List the corrections apply() would make, offsets into text."""
        masked = self.masker.mask(text)
        return list(iter_corrections(masked.text, self.dictionary, self.ignore_words))
