"""Command-line entrypoint for inspecting Google Trends CSV exports."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

import orjson

from .config import load_config
from .errors import ConfigurationError, SectionReadError
from .logging_utils import configure_logger, log_event
from .parser import SectionedCsvParser, split_lines


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Extract sections from a Google Trends CSV export")
    parser.add_argument("csv", type=Path, help="Path to the CSV export")
    parser.add_argument("--config", type=Path, default=None, help="Optional configuration YAML")
    parser.add_argument("--separator", default=None, help="Field separator pattern (overrides the configuration)")
    parser.add_argument("--json", action="store_true", help="Emit the result as JSON")
    parser.add_argument("--log-level", default=None, help="Python logging level (default: from configuration)")

    commands = parser.add_subparsers(dest="command", required=True)
    top = commands.add_parser("top", help="List the top searches")
    top.add_argument("--max", dest="max_items", type=int, default=10, help="Maximum number of searches (default: 10)")

    section = commands.add_parser("section", help="Print a named section")
    section.add_argument("name", help="Section name, matched at the start of a line")
    section.add_argument("--header", action="store_true", help="Skip the first line of the section")
    section.add_argument("--rows", action="store_true", help="Print the section rows as tab-joined fields")
    section.add_argument("--sep", default=None, help="Field separator for --rows (default: parser separator)")
    return parser


def _emit(payload: Dict[str, Any], as_json: bool, lines: List[str]) -> None:
    if as_json:
        print(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode("utf-8"))
        return
    for line in lines:
        print(line)


def _run_top(parser: SectionedCsvParser, args: argparse.Namespace, logger: logging.Logger) -> int:
    searches = parser.get_top_searches(args.max_items)
    _emit({"top_searches": searches}, args.json, searches)
    log_event(logger, "cli_summary", command="top", items=len(searches))
    return 0


def _run_section(parser: SectionedCsvParser, args: argparse.Namespace, logger: logging.Logger) -> int:
    result = parser.find_section(args.name, args.header)
    if not result.found:
        logger.warning("Section not found: %s", args.name)
        if args.json:
            _emit({"section": args.name, "found": False}, True, [])
        return 1
    payload: Dict[str, Any] = {"section": args.name, "found": True}
    if args.rows:
        rows = parser.get_section_rows(args.name, args.header, args.sep)
        payload["rows"] = rows
        lines = ["\t".join(row) for row in rows]
    else:
        payload["text"] = result.text
        lines = split_lines(result.text)
    _emit(payload, args.json, lines)
    log_event(logger, "cli_summary", command="section", section=args.name, lines=len(lines))
    return 0


def main(argv: List[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    overrides: Dict[str, Any] = {}
    if args.log_level:
        overrides["logging"] = {"level": args.log_level}
    try:
        config = load_config(args.config, overrides=overrides)
        logger = configure_logger(config.logging)
        parser = SectionedCsvParser(args.csv.read_text(encoding="utf-8-sig"), args.separator, config=config)
    except ConfigurationError as exc:
        print(f"configuration error: {exc}", file=sys.stderr)
        return 2
    except (OSError, UnicodeDecodeError) as exc:
        print(f"cannot read {args.csv}: {exc}", file=sys.stderr)
        return 2

    try:
        if args.command == "top":
            return _run_top(parser, args, logger)
        return _run_section(parser, args, logger)
    except SectionReadError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
