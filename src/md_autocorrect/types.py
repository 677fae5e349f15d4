"""Core types."""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .vault import PlaceholderVault


class RegionKind(Enum):
    """Protected markdown syntax.  Declaration order is detection priority."""

    YAML = "yaml"                  # front matter at document start
    CODE = "code"                  # fenced code block
    INLINE_CODE = "inline_code"
    MATH = "math"                  # $$ ... $$
    INLINE_MATH = "inline_math"    # $ ... $
    LINK = "link"                  # [text](url), <scheme:...>
    WIKI_LINK = "wiki_link"        # [[page]]
    TAG = "tag"                    # #tag
    IMAGE = "image"                # ![alt](src), ![[embed]]
    URL = "url"                    # bare http(s)://, ftp://, www.

    @property
    def priority(self) -> int:
        return _PRIORITY[self]


_PRIORITY = {kind: i for i, kind in enumerate(RegionKind)}


@dataclass(frozen=True, slots=True)
class Region:
    """A protected span of the original document."""
    kind: RegionKind
    start: int
    end: int
    text: str              # document[start:end]


@dataclass(frozen=True, slots=True)
class Correction:
    """A single word replacement, offsets into the original document."""
    start: int
    end: int
    original: str
    replacement: str


@dataclass(slots=True)
class MaskedText:
    """Result of masking a document."""
    text: str                                        # same length as the input
    regions: list[Region] = field(default_factory=list)
    vault: PlaceholderVault | None = None

    def unmask(self, text: str | None = None) -> str:
        """Restore every protected region in ``text`` (default: the masked text)."""
        if text is None:
            text = self.text
        if self.vault is None:
            return text
        return self.vault.restore(text)
