"""Command-line host: evaluates a source file or an expression and prints the final result.

    python -m sevenlang program.scm
    python -m sevenlang -e "(+ 1 2)"
"""

import argparse
import logging
import sys

from sevenlang.config import Scoping, get_log_level, get_scoping
from sevenlang.errors import SevenError
from sevenlang.interpreter import Interpreter


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sevenlang", description="Evaluate SevenLang source.")
    parser.add_argument("file", help="source file to evaluate", nargs="?")
    parser.add_argument("-e", "--expr", help="evaluate EXPR instead of a file")
    parser.add_argument(
        "--scoping",
        choices=[s.value for s in Scoping],
        help="how closures bind parameters (default: $SEVENLANG_SCOPING or shared)",
    )
    parser.add_argument("--log-level", help="logging level (default: $SEVENLANG_LOG_LEVEL or WARNING)")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if (args.file is None) == (args.expr is None):
        parser.error("give exactly one of FILE or -e EXPR")

    logging.basicConfig(level=args.log_level.upper() if args.log_level else get_log_level())

    interp = Interpreter(scoping=args.scoping or get_scoping())
    try:
        if args.expr is not None:
            result = interp.eval(args.expr)
        else:
            result = interp.eval_file(args.file)
    except (SevenError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if result is not None:
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
