#!/usr/bin/env python3
"""yantra — static checker for Yantrabhashi programs.

Usage: python yantra.py <file.yb> [more.yb ...] [--relaxed] [--json] [--emit-statements]
"""

import sys
import os
import argparse
import json
import logging

from .analyzer import Validator, ValidatorOptions

logger = logging.getLogger("yantra")


def _format_error(source: str, filename: str, message: str, line: int) -> str:
    """Format a diagnostic with source context and a caret under the statement."""
    lines = source.splitlines()
    if line < 1 or line > len(lines):
        return f"error: {message}\n --> {filename}:{line}"
    source_line = lines[line - 1]
    width = len(str(line))
    pad = " " * width
    caret_offset = len(source_line) - len(source_line.lstrip())
    caret = " " * caret_offset + "^"
    return (
        f"error: {message}\n"
        f" {pad}--> {filename}:{line}\n"
        f" {pad} |\n"
        f" {line} | {source_line}\n"
        f" {pad} | {caret}"
    )


def _read_source(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        print(f"Error: File '{path}' not found", file=sys.stderr)
        sys.exit(1)


def build_argparser() -> argparse.ArgumentParser:
    argparser = argparse.ArgumentParser(description="Yantrabhashi static checker")
    argparser.add_argument("inputs", nargs="+", help="Input .yb files")
    argparser.add_argument("--relaxed", action="store_true",
                           help="Don't type-check ELAITHE conditions")
    argparser.add_argument("--json", action="store_true",
                           help="Print diagnostics as JSON")
    argparser.add_argument("--emit-statements", action="store_true",
                           help="Print the logical statements and exit")
    argparser.add_argument("-v", "--verbose", action="store_true",
                           help="Enable debug logging")
    return argparser


def main(argv=None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        stream=sys.stderr)

    validator = Validator(ValidatorOptions(check_conditions=not args.relaxed))
    report: dict[str, list[dict]] = {}
    failed = False

    for path in args.inputs:
        source = _read_source(path)
        filename = os.path.basename(path)
        result = validator.analyze(source)
        logger.debug("%s: %d diagnostics", path, len(result.diagnostics))

        if args.emit_statements:
            for stmt in result.statements:
                print(f"{filename}:{stmt.line_num}: {stmt.text}")
            continue

        if result.diagnostics:
            failed = True
        if args.json:
            report[path] = [d.to_dict() for d in result.diagnostics]
            continue

        for diag in result.diagnostics:
            print(_format_error(source, filename, diag.message, diag.line),
                  file=sys.stderr)
        if not result.diagnostics:
            print(f"{path}: OK")

    if args.json:
        print(json.dumps(report, indent=2))
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
