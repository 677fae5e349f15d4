"""Vault — call-scoped table mapping placeholder identity to original text.

Design goals:
  - Same length: a placeholder is exactly as long as the text it hides,
    so match offsets in the masked text are offsets in the original
  - Unique: each placeholder starts with a private-use code point that
    does not occur anywhere in the document
  - Inert: placeholder characters are not word characters, whitespace or
    markdown punctuation, so no detector or tokenizer reacts to them

Lost placeholders are reported as a structlog warning.  Until the caller
configures structlog (``log.configure_logging``), the warning is printed
to stderr so it never mixes into a document written to stdout.
"""

from __future__ import annotations
import re
import sys
from collections.abc import Iterator

import structlog

# Filler for the body of a placeholder (BMP private use area)
FILLER = "\uE000"

# Identity code points: Supplementary Private Use Area-A and -B
_ID_RANGES = ((0xF0000, 0xFFFFD), (0x100000, 0x10FFFD))

# Character-class body matching any placeholder character; detectors
# exclude it so a match never runs across an earlier region
PLACEHOLDER_CHARS = FILLER + "\U000F0000-\U000FFFFD\U00100000-\U0010FFFD"
_IDENTITY = re.compile("[\U000F0000-\U000FFFFD\U00100000-\U0010FFFD]")


def _logger():
    if structlog.is_configured():
        return structlog.get_logger(__name__)
    return structlog.wrap_logger(structlog.PrintLogger(sys.stderr))


def _identities(exclude: set[str]) -> Iterator[str]:
    for lo, hi in _ID_RANGES:
        for cp in range(lo, hi + 1):
            ch = chr(cp)
            if ch not in exclude:
                yield ch


def is_placeholder_char(ch: str) -> bool:
    cp = ord(ch)
    return ch == FILLER or any(lo <= cp <= hi for lo, hi in _ID_RANGES)


class PlaceholderVault:
    """Placeholder ↔ original snippet store, scoped to one masking call."""

    __slots__ = ("_ids", "_index", "_placeholders", "_originals")

    def __init__(self, document: str = "") -> None:
        self._ids = _identities(set(document))
        self._index: dict[str, int] = {}          # identity char → id
        self._placeholders: list[str] = []     # index = discovery order
        self._originals: list[str] = []        # snippet of the working text

    # ------------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------------

    def add(self, snippet: str) -> str:
        """Store a snippet and return its same-length placeholder."""
        head = next(self._ids, None)
        if head is None:
            raise RuntimeError("placeholder identities exhausted")
        # Keep line breaks so line-anchored detectors see the same lines
        body = "".join(ch if ch in "\r\n" else FILLER for ch in snippet[1:])
        placeholder = head + body
        self._index[head] = len(self._placeholders)
        self._placeholders.append(placeholder)
        self._originals.append(snippet)
        return placeholder

    def restore(self, text: str) -> str:
        """Replace all placeholders in text with their original snippets.

        A snippet may itself contain placeholders of earlier regions (a
        later region enclosing an earlier one); those are expanded in turn.
        """
        restored: set[int] = set()
        result = self._expand(text, restored)
        for idx in set(range(len(self._placeholders))) - restored:
            _logger().warning("placeholder_lost", index=idx, length=len(self._placeholders[idx]))
        return result

    def _expand(self, text: str, restored: set[int]) -> str:
        parts: list[str] = []
        pos = 0
        for m in _IDENTITY.finditer(text):
            idx = self._index.get(m.group())
            if idx is None:
                continue
            placeholder = self._placeholders[idx]
            if not text.startswith(placeholder, m.start()):
                continue
            parts.append(text[pos:m.start()])
            parts.append(self._expand(self._originals[idx], restored))
            restored.add(idx)
            pos = m.start() + len(placeholder)
        parts.append(text[pos:])
        return "".join(parts)

    def lookup(self, placeholder: str) -> str | None:
        """Look up the original snippet for a placeholder."""
        try:
            idx = self._index[placeholder[:1]]
        except KeyError:
            return None
        if self._placeholders[idx] != placeholder:
            return None
        return self._originals[idx]

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        return len(self._placeholders)

    def dump(self) -> dict[int, str]:
        """Return a copy of the id→snippet table (for debugging)."""
        return dict(enumerate(self._originals))
