"""Region detectors — one compiled pattern per protected markdown construct.

Patterns are matched against the *working* text, where earlier-priority
regions have already been replaced by placeholders.  Every pattern must
fail on an unterminated delimiter rather than run to the end of the text.
Open-ended runs (tags, bare URLs) stop at placeholder characters.
"""

from __future__ import annotations
import re

from .types import Region, RegionKind
from .vault import PLACEHOLDER_CHARS

# [text](dest "title"): one level of nested brackets / parens
_LINK_TEXT = r"\[(?:[^\[\]\n]|\[[^\[\]\n]*\])*\]"
_LINK_DEST = r"\((?:[^()\s]|\([^()\s]*\))*(?:\s+(?:\"[^\"\n]*\"|'[^'\n]*'))?[ \t]*\)"
_WIKI = r"\[\[[^\[\]\n]+\]\]"

_PATTERNS: dict[RegionKind, re.Pattern] = {
    # Front matter: only the first block, at the very start (after any BOM)
    RegionKind.YAML: re.compile(
        r"\A\ufeff?---[ \t]*\r?\n"
        r"(?:.*?\r?\n)??"
        r"---[ \t]*(?=\r?\n|\Z)",
        re.DOTALL,
    ),

    # Fenced code: closing fence must repeat the opening fence character
    RegionKind.CODE: re.compile(
        r"^[ \t]{0,3}(?:(?P<bt>`{3,})[^`\n]*|(?P<tl>~{3,})[^\n]*)\n"
        r"(?:.*?\n)??"
        r"[ \t]{0,3}(?:(?P=bt)`*|(?P=tl)~*)[ \t]*(?=\r?\n|\Z)",
        re.MULTILINE | re.DOTALL,
    ),

    # Inline code: backtick runs of equal length, never across a blank line
    RegionKind.INLINE_CODE: re.compile(
        r"(?<!`)(?P<ticks>`+)(?!`)"
        r"(?:(?!\n[ \t]*\r?\n).)+?"
        r"(?<!`)(?P=ticks)(?!`)",
        re.DOTALL,
    ),

    RegionKind.MATH: re.compile(
        r"(?<!\\)\$\$.+?(?<!\\)\$\$",
        re.DOTALL,
    ),

    RegionKind.INLINE_MATH: re.compile(
        r"(?<![\\$])\$(?!\$)[^$\n]+?(?<!\\)\$(?!\$)"
    ),

    RegionKind.LINK: re.compile(
        r"(?<!!)" + _LINK_TEXT + _LINK_DEST
        + r"|<(?:https?|ftp|mailto):[^<>\s]+>"
    ),

    RegionKind.WIKI_LINK: re.compile(r"(?<!!)" + _WIKI),

    # Obsidian tag: '#' at start or after whitespace, so '# Heading' is not one
    RegionKind.TAG: re.compile(
        r"(?<!\S)#[^\s#;.,><?!=+" + PLACEHOLDER_CHARS + r"]+"
    ),

    RegionKind.IMAGE: re.compile(
        r"!" + _LINK_TEXT + _LINK_DEST + r"|!" + _WIKI
    ),

    # Bare URL: trailing sentence punctuation is left outside
    RegionKind.URL: re.compile(
        r"(?:\b(?:https?|ftp)://|\bwww\.)"
        r"[^\s<>()\[\]{}\"'`" + PLACEHOLDER_CHARS + r"]*"
        r"[^\s<>()\[\]{}\"'`.,;:!?" + PLACEHOLDER_CHARS + r"]"
    ),
}


def pattern_for(kind: RegionKind) -> re.Pattern:
    """Return the compiled detector for a region kind."""
    return _PATTERNS[kind]


def scan_kind(text: str, kind: RegionKind) -> list[Region]:
    """Run a single detector over text. Returns non-overlapping matches.

    This does not mask anything: regions of other kinds are not excluded.
    Use ``masker.scan_regions`` for priority-aware detection.
    """
    return [
        Region(kind=kind, start=m.start(), end=m.end(), text=m.group())
        for m in _PATTERNS[kind].finditer(text)
    ]
