"""Command-line entry point: transpile a Brainfuck file to Rickroll."""

from __future__ import annotations

import argparse
import logging
import sys

from .api import dump_ir, ir_stats, nesting_depth, read_source, transpile_file
from .errors import SourceReadError, UnbalancedBracketsError
from .render_types import RenderOptions
from . import constants

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_READ_ERROR = 1
EXIT_UNBALANCED = 2
EXIT_WRITE_ERROR = 3


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bfrick", description="Brainfuck to Rickroll-Lang transpiler"
    )
    parser.add_argument("file", help="Name of input Brainfuck file")
    parser.add_argument("-o", "--output", help="Name of output Rickroll file")
    parser.add_argument(
        "--indent",
        type=int,
        default=constants.DEFAULT_INDENT,
        help=f"Number of spaces per indentation level (default: {constants.DEFAULT_INDENT})",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Insert debugging trace statements in Rickroll output",
    )
    parser.add_argument(
        "--ir-only", action="store_true", help="Only print the command list"
    )
    parser.add_argument(
        "--stats", action="store_true", help="Print opcode counts and nesting depth"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.indent < 0:
        parser.error("--indent must be non-negative")
    if not (args.output or args.ir_only or args.stats):
        parser.error("the following arguments are required: -o/--output")

    try:
        if args.ir_only or args.stats:
            source = read_source(args.file)
            if args.ir_only:
                print("═══ IR ═══")
                print(dump_ir(source))
            if args.stats:
                print("═══ Stats ═══")
                for name, count in sorted(ir_stats(source).items()):
                    print(f"  {name:<16} {count:>8}")
                print(f"  {'max depth':<16} {nesting_depth(source):>8}")
        if args.output:
            transpile_file(
                args.file,
                args.output,
                RenderOptions(indent=args.indent, trace=args.trace),
            )
    except SourceReadError as exc:
        print(exc, file=sys.stderr)
        return EXIT_READ_ERROR
    except UnbalancedBracketsError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_UNBALANCED
    except OSError as exc:
        logger.debug("Write failed: %s", exc)
        print(f'Unable to write to file "{args.output}"', file=sys.stderr)
        return EXIT_WRITE_ERROR
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
