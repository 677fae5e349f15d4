"""YAML/dict config loader for md-autocorrect.

Supports loading from a YAML file or a plain dict (for embedding
in a larger linter config).

Example YAML:

    auto_correct:
      enabled: true
      ignore_words: "teh, recieve"      # or a list
      region_kinds: [yaml, code, inline_code, url]   # default: all
      dictionary: ~/.md-autocorrect/extra.yaml
      corrections:
        colour: color
"""

from __future__ import annotations
import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from .dictionary import DEFAULT_DICTIONARY, load_dictionary, merge_dictionaries
from .masker import normalize_kinds
from .rule import REGION_KINDS, AutoCorrectMisspellings
from .types import RegionKind

# Ignore words are edited as "a, b, c"; any run of commas/whitespace separates
WORD_SPLITTER = re.compile(r"[,\s]+")
WORD_SEPARATOR = ", "


class ConfigError(ValueError):
    """Invalid md-autocorrect configuration."""


class _NoopRule:
    """Pass-through rule when auto-correction is disabled."""
    name = AutoCorrectMisspellings.name
    dictionary: Mapping[str, str] = MappingProxyType({})
    ignore_words: frozenset[str] = frozenset()
    def apply(self, text: str) -> str:
        return text
    def find(self, text: str) -> list:
        return []


def parse_word_list(value: str | Iterable[str] | None) -> list[str]:
    """Parse a word-list option into lowercase words, order kept, no duplicates."""
    if value is None:
        return []
    if isinstance(value, str):
        items = WORD_SPLITTER.split(value)
    elif isinstance(value, Iterable):
        items = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigError(f"word list items must be strings, got {item!r}")
            items.extend(WORD_SPLITTER.split(item))
    else:
        raise ConfigError(f"word list must be a string or list, got {value!r}")
    return list(dict.fromkeys(w.lower() for w in items if w))


def format_word_list(words: Iterable[str]) -> str:
    """Inverse of parse_word_list for display/editing."""
    return WORD_SEPARATOR.join(words)


def load_config(data: dict[str, Any]) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline)."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"config must be a mapping, got {type(data).__name__}")
    # Support nested under "auto_correct" key or flat
    if "auto_correct" in data:
        data = data["auto_correct"] or {}
        if not isinstance(data, dict):
            raise ConfigError(f"auto_correct must be a mapping, got {type(data).__name__}")

    corrections = data.get("corrections") or {}
    if not isinstance(corrections, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in corrections.items()
    ):
        raise ConfigError("corrections must map misspellings to corrections")

    kinds = data.get("region_kinds")
    if kinds is None:
        region_kinds = REGION_KINDS
    else:
        try:
            if isinstance(kinds, str):
                kinds = parse_word_list(kinds)
            region_kinds = normalize_kinds(
                k if isinstance(k, RegionKind) else str(k).lower() for k in kinds
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"unknown region kind: {e}") from e

    dictionary = data.get("dictionary")
    return {
        "enabled": bool(data.get("enabled", True)),
        # camelCase spelling kept for configs exported from the linter UI
        "ignore_words": parse_word_list(data.get("ignore_words", data.get("ignoreWords"))),
        "dictionary": str(dictionary) if dictionary else None,
        "corrections": dict(corrections),
        "region_kinds": region_kinds,
    }


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml
    try:
        with open(Path(path).expanduser(), encoding="utf-8") as f:
            return load_config(yaml.safe_load(f))
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: {e}") from e


def create_rule(config: dict[str, Any]) -> AutoCorrectMisspellings | _NoopRule:
    """Create a fully configured rule from a config dict."""
    cfg = load_config(config)

    if not cfg["enabled"]:
        return _NoopRule()

    maps = [DEFAULT_DICTIONARY]
    if cfg["dictionary"]:
        try:
            maps.append(load_dictionary(cfg["dictionary"]))
        except ValueError as e:
            raise ConfigError(str(e)) from e
    if cfg["corrections"]:
        maps.append(cfg["corrections"])

    dictionary = maps[0] if len(maps) == 1 else merge_dictionaries(*maps)
    return AutoCorrectMisspellings.create(
        ignore_words=cfg["ignore_words"],
        dictionary=dictionary,
        region_kinds=cfg["region_kinds"],
    )
