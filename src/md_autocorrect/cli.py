"""CLI interface for md-autocorrect.

Usage:
    # Fix a document (stdin → stdout)
    cat note.md | md-autocorrect fix

    # Fix files in place
    md-autocorrect --ignore-words "teh, alot" fix --in-place notes/*.md

    # Report without changing anything (exit 1 if something would change)
    md-autocorrect check notes/*.md

    # Show which spans are protected
    md-autocorrect regions note.md

    # Look up a single word
    md-autocorrect lookup recieve

Documents are read and written as UTF-8 bytes, so line endings survive.
"""

from __future__ import annotations
import argparse
import json
import os
import sys
from pathlib import Path

import structlog

from .config import create_rule, load_config, load_from_yaml, parse_word_list
from .corrector import lookup
from .log import configure_logging
from .masker import scan_regions
from .rule import REGION_KINDS, AutoCorrectMisspellings

log = structlog.get_logger(__name__)

DEFAULT_CONFIG = os.environ.get(
    "MD_AUTOCORRECT_CONFIG",
    str(Path.home() / ".md-autocorrect" / "config.yaml"),
)


def _read(path: str | None) -> str:
    if path is None or path == "-":
        return sys.stdin.buffer.read().decode("utf-8")
    return Path(path).read_bytes().decode("utf-8")


def _write_stdout(text: str) -> None:
    sys.stdout.buffer.write(text.encode("utf-8"))
    sys.stdout.flush()


def _build_rule(args: argparse.Namespace) -> AutoCorrectMisspellings:
    if args.config:
        cfg = load_from_yaml(args.config)
    elif Path(DEFAULT_CONFIG).is_file():
        cfg = load_from_yaml(DEFAULT_CONFIG)
    else:
        cfg = load_config({})
    if args.ignore_words:
        cfg["ignore_words"] = cfg["ignore_words"] + parse_word_list(args.ignore_words)
    if args.dictionary:
        cfg["dictionary"] = args.dictionary
    return create_rule(cfg)


def _line_col(text: str, offset: int) -> tuple[int, int]:
    line = text.count("\n", 0, offset) + 1
    col = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, col


def cmd_fix(args: argparse.Namespace) -> int:
    """Correct misspellings in files (in place) or stdin (to stdout)."""
    rule = _build_rule(args)

    if not args.files:
        _write_stdout(rule.apply(_read(None)))
        return 0

    for path in args.files:
        text = _read(path)
        fixed = rule.apply(text)
        if args.in_place:
            if fixed != text:
                Path(path).write_bytes(fixed.encode("utf-8"))
                log.info("fixed", path=path)
        else:
            _write_stdout(fixed)
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Report misspellings as path:line:col without changing anything."""
    rule = _build_rule(args)
    found = 0
    for path in args.files or ["-"]:
        text = _read(path)
        for c in rule.find(text):
            line, col = _line_col(text, c.start)
            sys.stdout.write(f"{path}:{line}:{col}: {c.original} -> {c.replacement}\n")
            found += 1
    return 1 if found else 0


def cmd_regions(args: argparse.Namespace) -> int:
    """Dump the protected regions of a document as JSON."""
    text = _read(args.file)
    output = [
        {"kind": r.kind.value, "start": r.start, "end": r.end, "text": r.text}
        for r in scan_regions(text, REGION_KINDS)
    ]
    json.dump(output, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


def cmd_lookup(args: argparse.Namespace) -> int:
    """Print the correction for a word."""
    rule = _build_rule(args)
    replacement = lookup(args.word, rule.dictionary, rule.ignore_words)
    if replacement is None:
        sys.stderr.write(f"no correction for {args.word!r}\n")
        return 1
    sys.stdout.write(replacement + "\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md-autocorrect",
        description="Auto-correct common misspellings in markdown",
    )
    parser.add_argument("--config", default=None, help="YAML config path")
    parser.add_argument("--ignore-words", default="", help="Comma-separated words to leave alone")
    parser.add_argument("--dictionary", default=None, help="Extra YAML dictionary")
    parser.add_argument("--log-level", default="warning", help="Log level")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("fix", help="Correct files or stdin")
    p.add_argument("files", nargs="*")
    p.add_argument("-i", "--in-place", action="store_true", help="Rewrite files")

    p = sub.add_parser("check", help="Report misspellings (exit 1 if any)")
    p.add_argument("files", nargs="*")

    p = sub.add_parser("regions", help="Dump protected regions as JSON")
    p.add_argument("file", nargs="?", default=None)

    p = sub.add_parser("lookup", help="Look up one word")
    p.add_argument("word")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    cmds = {
        "fix": cmd_fix,
        "check": cmd_check,
        "regions": cmd_regions,
        "lookup": cmd_lookup,
    }
    try:
        configure_logging(args.log_level)
        return cmds[args.command](args)
    except (ValueError, OSError) as e:  # ConfigError, UnicodeDecodeError, bad log level
        sys.stderr.write(f"md-autocorrect: {e}\n")
        return 2


if __name__ == "__main__":
    sys.exit(main())
