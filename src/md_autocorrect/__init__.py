"""md-autocorrect — dictionary spelling fixes for markdown that leave code, math and links alone."""

from .types import RegionKind, Region, MaskedText, Correction
from .vault import PlaceholderVault
from .masker import RegionMasker, process, scan_regions
from .corrector import correct, iter_corrections, match_case
from .dictionary import DEFAULT_DICTIONARY, load_dictionary, merge_dictionaries
from .rule import AutoCorrectMisspellings, REGION_KINDS
from .config import ConfigError, create_rule, load_config, load_from_yaml

__all__ = [
    "RegionKind", "Region", "MaskedText", "Correction",
    "PlaceholderVault",
    "RegionMasker", "process", "scan_regions",
    "correct", "iter_corrections", "match_case",
    "DEFAULT_DICTIONARY", "load_dictionary", "merge_dictionaries",
    "AutoCorrectMisspellings", "REGION_KINDS",
    "ConfigError", "create_rule", "load_config", "load_from_yaml",
]
__version__ = "0.1.0"
