#!/usr/bin/env python3
"""
lexan command-line front end
============================

Scans one or more source files and prints the tokens and diagnostics.

Usage:
    lexan [options] [FILE ...]

Options:
    --json            Output results in JSON format
    --no-diagnostics  Do not print diagnostics
    --strict          Exit with status 1 if any diagnostic was produced
    --encoding ENC    Source file encoding (default: utf-8)
    -v, --verbose     Enable debug logging (also: LEXAN_DEBUG=1)
"""

import argparse
import json
import logging
import os
import sys
from typing import List, Optional, TextIO

from . import __version__
from .lexer import ScanResult, normalize_lines, scan, tokenize_file

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DIAGNOSTICS = 1
EXIT_IO_ERROR = 2


def configure_logging(verbose: bool = False):
    """Attach a stderr handler to the package logger."""
    debug = verbose or bool(os.environ.get("LEXAN_DEBUG"))
    root = logging.getLogger("lexan")
    root.setLevel(logging.DEBUG if debug else logging.INFO)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        root.addHandler(handler)


def render_text(result: ScanResult, show_diagnostics: bool = True) -> str:
    """Render a result as diagnostics, then one token per line."""
    lines = []
    if show_diagnostics:
        lines.extend(result.messages)
    lines.append("Tokens:")
    lines.extend(result.lexemes)
    lines.append("")
    lines.append("Lexical analysis completed.")
    return "\n".join(lines) + "\n"


def render_json(results: List[ScanResult], show_diagnostics: bool = True) -> str:
    payload = []
    for result in results:
        data = result.to_dict()
        if not show_diagnostics:
            data.pop("diagnostics")
        payload.append(data)
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _scan_input(path: str, encoding: str, stdin: TextIO) -> ScanResult:
    if path == "-":
        return scan(normalize_lines(stdin.read()), "<stdin>")
    return tokenize_file(path, encoding)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lexan",
        description="Lexical analyzer for a small C-like language",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    lexan program.c                  # Print tokens and diagnostics
    lexan --json a.c b.c             # JSON output for several files
    cat program.c | lexan            # Read from stdin
    lexan --strict program.c         # Fail on any lexical error
        """
    )

    parser.add_argument('files', nargs='*', default=['-'], metavar='FILE',
                        help="Source files to scan ('-' for stdin)")

    # Output options
    parser.add_argument('--json', action='store_true',
                        help='Output results in JSON format')
    parser.add_argument('--no-diagnostics', action='store_true',
                        help='Do not print diagnostics')
    parser.add_argument('--strict', action='store_true',
                        help='Exit with status 1 if any diagnostic was produced')
    parser.add_argument('--encoding', default='utf-8',
                        help='Source file encoding (default: utf-8)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None,
         stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None,
         stderr: Optional[TextIO] = None) -> int:
    """Main entry point for the lexan command."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    show_diagnostics = not args.no_diagnostics
    results = []
    io_failed = False

    for path in args.files:
        try:
            result = _scan_input(path, args.encoding, stdin)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Failed to read %s", path, exc_info=True)
            stderr.write(f"Error reading the file: {e}\n")
            io_failed = True
            continue

        logger.debug("%s: %d tokens, %d diagnostics",
                     result.filename, len(result.tokens), len(result.diagnostics))
        results.append(result)
        if not args.json:
            stdout.write(render_text(result, show_diagnostics))

    if args.json:
        stdout.write(render_json(results, show_diagnostics) + "\n")

    if io_failed:
        return EXIT_IO_ERROR
    if args.strict and any(result.has_errors() for result in results):
        return EXIT_DIAGNOSTICS
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
