"""
formcheck CLI — Validate rule batches from the command line.
"""

import argparse
import os
import sys
from pathlib import Path
from typing import Optional

import yaml

from formcheck import __version__
from formcheck.core.dispatcher import get_dispatcher
from formcheck.schema.models import Outcome
from formcheck.schema.serialization import outcomes_to_json, parse_rules

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="formcheck",
        description="Validate and sanitize form field rules",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    validate_parser = subparsers.add_parser("validate", help="Validate a batch of rules")
    validate_parser.add_argument(
        "input",
        help="YAML/JSON file with a list of rules, or '-' for stdin",
    )
    validate_parser.add_argument(
        "--lang",
        default=os.environ.get("FORMCHECK_LANG"),
        help="Language for default messages (en, fi, sv). Default: caller messages only, or FORMCHECK_LANG",
    )
    validate_parser.add_argument(
        "-f", "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    validate_parser.add_argument(
        "-o", "--output",
        help="Output file (default: stdout)",
    )
    validate_parser.add_argument(
        "--log-level",
        type=str,
        choices=["silent", "info", "verbose", "debug"],
        default=None,
        help="Log verbosity level (default: info, or FORMCHECK_LOG_LEVEL env var)",
    )
    validate_parser.add_argument(
        "--log-channel",
        type=str,
        default=None,
        help="Comma-separated log channels to show (dispatch,validate,sanitize,messages,system). Default: all",
    )

    subparsers.add_parser("kinds", help="List registered field kinds and failure codes")

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_OK

    if args.command == "validate":
        return run_validate(args)

    if args.command == "kinds":
        return run_kinds()

    return EXIT_OK


def run_validate(args: argparse.Namespace) -> int:
    """Run the validate command."""
    from formcheck.core.logging import configure_logging

    channels = None
    if args.log_channel:
        channels = [ch.strip() for ch in args.log_channel.split(",")]

    configure_logging(level=args.log_level, channels=channels, force=True)

    try:
        text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text(encoding="utf-8")
        rules = parse_rules(text)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"formcheck: cannot read rules: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    outcomes = get_dispatcher().validate(rules, lang=args.lang)

    if args.format == "json":
        output = outcomes_to_json(outcomes)
    else:
        output = format_text(outcomes)

    if args.output:
        Path(args.output).write_text(output + "\n", encoding="utf-8")
    else:
        print(output)

    return EXIT_OK if all(o.ok for o in outcomes) else EXIT_FAILED


def run_kinds() -> int:
    """Run the kinds command."""
    dispatcher = get_dispatcher()
    for kind in dispatcher.kinds():
        print(f"{kind:<16} {dispatcher.codes[kind]}")
    return EXIT_OK


def format_text(outcomes: list[Outcome]) -> str:
    """One line per outcome, then a summary line."""
    lines = []
    for i, outcome in enumerate(outcomes):
        mark = "ok  " if outcome.ok else "FAIL"
        label = outcome.id or outcome.kind or "(no kind)"
        line = f"[{i}] {mark} {label}"
        if outcome.code:
            line += f" ({outcome.code})"
        if outcome.message:
            line += f": {outcome.message}"
        lines.append(line)

    failed = sum(1 for o in outcomes if not o.ok)
    lines.append(f"--- {len(outcomes)} rules, {failed} failed")
    return "\n".join(lines)


if __name__ == "__main__":
    sys.exit(main())
