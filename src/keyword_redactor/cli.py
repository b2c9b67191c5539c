"""CLI interface for keyword-redactor.

Usage:
    # Mask plain text (stdin → stdout)
    echo 'cvv 123, exp: 04/25' | python -m keyword_redactor.cli redact

    # Report what was masked (stdin: text, stdout: JSON)
    echo 'cvv 123' | python -m keyword_redactor.cli scan

    # Use a custom keyword table instead of the defaults
    echo 'pin 1234' | python -m keyword_redactor.cli --keyword pin:4 redact

    # Show the active keyword table
    python -m keyword_redactor.cli keywords
"""

from __future__ import annotations
import argparse
import json
import os
import sys
from typing import Any

from .logging_utils import configure_logging
from .redactor import Redactor, RedactorConfig
from .registry import KeywordRegistry
from .types import RedactionResult

DEFAULT_LOG_LEVEL = os.environ.get("KEYWORD_REDACTOR_LOG_LEVEL", "WARNING")


def parse_keyword(value: str) -> str | tuple[str, str]:
    """``"cardnumber:16"`` → ``("cardnumber", "16")``; ``"cvv"`` → ``"cvv"``."""
    name, sep, length = value.rpartition(":")
    if not sep:
        return value
    return (name, length)


def result_to_json(result: RedactionResult) -> dict[str, Any]:
    """Serializable scan report.  Never includes the masked values themselves."""
    return {
        "text": result.text,
        "occurrences": result.occurrences,
        "masked": [
            {"keyword": v.keyword, "start": v.start, "length": v.length}
            for v in result.masked
        ],
    }


def _build_redactor(args: argparse.Namespace) -> Redactor:
    registry = (
        KeywordRegistry.from_config([parse_keyword(k) for k in args.keyword])
        if args.keyword else KeywordRegistry.default()
    )
    config = RedactorConfig(keywords=registry)
    if args.allow_list:
        config.allow_list = set(args.allow_list.split(","))
    return Redactor(config)


def cmd_redact(args: argparse.Namespace) -> None:
    """Mask keyword values in plain text on stdin."""
    redactor = _build_redactor(args)
    sys.stdout.write(redactor.redact_text(sys.stdin.read()))


def cmd_scan(args: argparse.Namespace) -> None:
    """Mask stdin and report occurrence/mask counts as JSON."""
    redactor = _build_redactor(args)
    result = redactor.redact(sys.stdin.read())
    json.dump(result_to_json(result), sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")


def cmd_keywords(args: argparse.Namespace) -> None:
    """Dump the active keyword table as JSON."""
    redactor = _build_redactor(args)
    table = [
        {"name": s.name, "expected_length": s.expected_length}
        for s in redactor.keywords
    ]
    json.dump(table, sys.stdout, indent=2)
    sys.stdout.write("\n")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="keyword_redactor",
        description="Mask values that follow sensitive-data keywords",
    )
    parser.add_argument(
        "--keyword", action="append", default=[], metavar="NAME[:LENGTH]",
        help="Keyword to mask after (repeatable; replaces the default table)",
    )
    parser.add_argument("--allow-list", default="", help="Comma-separated values to never mask")
    parser.add_argument("--log-level", default=DEFAULT_LOG_LEVEL, help="Logging level")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("redact", help="Mask plain text (stdin)")
    sub.add_parser("scan", help="Mask plain text and report as JSON (stdin)")
    sub.add_parser("keywords", help="Show the keyword table")

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    cmds = {
        "redact": cmd_redact,
        "scan": cmd_scan,
        "keywords": cmd_keywords,
    }
    cmds[args.command](args)


if __name__ == "__main__":
    main()
