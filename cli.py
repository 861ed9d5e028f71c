#!/usr/bin/env python3
"""
ctxbundle CLI

A tool for bundling source files and their transitively imported local files
into a single minified context file.
"""

import argparse
import logging
import sys
from pathlib import Path

from scanner.builder import build_bundle


__version__ = "1.1.0"

LOG_FORMAT = "[%(levelname)s] %(message)s"
_HANDLER_TAG = "_ctxbundle_handler"


class UsageError(Exception):
    """Raised for malformed command lines."""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting on bad usage."""

    def error(self, message):
        raise UsageError(message)


def parse_args(args=None):
    """Parse command line arguments."""
    parser = _ArgumentParser(
        prog="ctxbundle",
        description="Bundle source files and their local imports into a single context file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ctxbundle src/index.ts -o context.txt             # Bundle from one entry point
  ctxbundle src/a.ts src/b.ts -o ctx.txt -p ./app   # Use ./app/tsconfig.json aliases
  ctxbundle src/index.ts -o ctx.gz --compress       # Gzip the bundled output
        """,
    )

    # Positional arguments
    parser.add_argument(
        "inputs",
        nargs="*",
        help="Entry files to bundle",
    )

    # Output options
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file (required)",
    )

    parser.add_argument(
        "-p", "--project",
        type=str,
        default=None,
        help="Project folder holding tsconfig.json (default: current directory)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log each file as it is processed",
    )

    parser.add_argument(
        "--compress",
        action="store_true",
        help="Gzip the output file after bundling",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parsed = parser.parse_args(args)

    if not parsed.output:
        raise UsageError("Missing output file. Use -o or --output followed by the output file path.")
    if not parsed.inputs:
        raise UsageError("No input files specified.")

    return parsed


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Send log records to stderr; per-file progress only in verbose mode.

    Repeated calls replace the handler installed by a previous call instead of
    stacking a new one.
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(handler, _HANDLER_TAG, True)
    root.addHandler(handler)
    root.setLevel(logging.INFO if verbose else logging.ERROR)
    return root


def main(args=None):
    """Main entry point."""
    try:
        parsed = parse_args(args)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(parsed.verbose)

    project = Path(parsed.project).resolve() if parsed.project else Path.cwd()

    # Build the bundle
    try:
        build_bundle(
            input_files=parsed.inputs,
            output_file=parsed.output,
            project_folder=project,
            compress=parsed.compress,
        )
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if parsed.compress:
        print(f"Context successfully generated and compressed in {parsed.output}", file=sys.stderr)
    else:
        print(f"Context successfully generated in {parsed.output}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
