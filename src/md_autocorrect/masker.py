"""RegionMasker — the main engine.  Mask protected regions, transform, restore.

Usage:
    from md_autocorrect import RegionKind, RegionMasker

    masker = RegionMasker([RegionKind.CODE, RegionKind.INLINE_CODE])
    out = masker.process("use `teh` here, teh end", lambda s: s.replace("teh", "the"))
    print(out)               # "use `teh` here, the end"

    masked = masker.mask(text)
    masked.regions           # [Region(kind=..., start=..., end=..., text=...)]
    masked.unmask(edited)    # restore into an edited copy of masked.text
"""

from __future__ import annotations
from collections.abc import Callable, Iterable

from .patterns import pattern_for
from .types import MaskedText, Region, RegionKind
from .vault import PlaceholderVault

Transform = Callable[[str], str]


def normalize_kinds(kinds: Iterable[RegionKind | str]) -> tuple[RegionKind, ...]:
    """Convert names to kinds, drop duplicates and force priority order.

    Raises ValueError for an unknown kind name.
    """
    resolved = {k if isinstance(k, RegionKind) else RegionKind(k) for k in kinds}
    return tuple(sorted(resolved, key=lambda k: k.priority))


class RegionMasker:
    """Priority-ordered region masking.

    For each kind in priority order, the detector runs over the working
    text (earlier regions already replaced by placeholders), so a span
    claimed by an earlier kind is opaque to every later one.
    """

    def __init__(self, kinds: Iterable[RegionKind | str] = tuple(RegionKind)) -> None:
        self.kinds = normalize_kinds(kinds)

    def mask(self, text: str) -> MaskedText:
        """Replace every protected region with a same-length placeholder."""
        vault = PlaceholderVault(text)
        regions: list[Region] = []
        working = text

        for kind in self.kinds:
            def _claim(m, kind=kind) -> str:
                # offsets are stable because placeholders keep the length
                regions.append(Region(kind, m.start(), m.end(), text[m.start():m.end()]))
                return vault.add(m.group())

            working = pattern_for(kind).sub(_claim, working)

        return MaskedText(text=working, regions=regions, vault=vault)

    def process(self, text: str, transform: Transform) -> str:
        """Run transform over the unprotected text and restore the regions.

        transform is called exactly once, on the fully masked text.
        """
        masked = self.mask(text)
        return masked.unmask(transform(masked.text))


def process(
    document: str,
    kinds: Iterable[RegionKind | str],
    transform: Transform,
) -> str:
    """Functional form of ``RegionMasker(kinds).process(document, transform)``."""
    return RegionMasker(kinds).process(document, transform)


def scan_regions(
    text: str,
    kinds: Iterable[RegionKind | str] = tuple(RegionKind),
) -> list[Region]:
    """Detect protected regions with priority applied, sorted by start offset.

    Regions enclosing an earlier region are reported alongside it.
    """
    regions = RegionMasker(kinds).mask(text).regions
    return sorted(regions, key=lambda r: (r.start, -r.end))
