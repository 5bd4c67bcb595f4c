from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from .api import RunOptions, parse_string, read_source, run_program
from .errors import BFIError
from .instructions import Program

INLINE_FLAG = "-c"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bfi",
        description="Interpreter for the eight-instruction tape language.",
        allow_abbrev=False,
    )
    parser.add_argument("files", nargs="*", help="Source files, each run as its own program")
    parser.add_argument(INLINE_FLAG, "--code", nargs=argparse.REMAINDER, metavar="SRC",
                        help="Run the remaining arguments, joined, as source text")
    parser.add_argument("--encoding", default="utf-8", help="Source file encoding (default utf-8)")
    parser.add_argument("--dump", action="store_true", help="Print decoded instructions instead of running")
    parser.add_argument("--debug", action="store_true", help="Trace decoding and execution on stderr")
    return parser


def _configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr,
                            format="%(levelname)s %(name)s: %(message)s")


def _load(args, options: RunOptions) -> List[Tuple[str, Program]]:
    if args.code is not None:
        return [("<inline>", parse_string("".join(args.code)))]
    return [(path, parse_string(read_source(path, encoding=options.encoding))) for path in args.files]


def main(argv: Optional[List[str]] = None, *, stdin=None, stdout=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.code is None and not args.files:
        parser.print_usage(sys.stderr)
        print("bfi: error: missing source: give one or more files, or -c SRC", file=sys.stderr)
        return 2
    if args.code is not None and args.files:
        parser.print_usage(sys.stderr)
        print(f"bfi: error: {INLINE_FLAG} takes the rest of the command line as source; "
              f"put options and files before it, not both", file=sys.stderr)
        return 2

    _configure_logging(args.debug)
    options = RunOptions(encoding=args.encoding)

    try:
        # Everything is decoded before anything runs.
        programs = _load(args, options)

        if args.dump:
            for name, program in programs:
                print(f"== {name} ({len(program)} instructions)", file=sys.stderr)
                if len(program):
                    print(program.dump(), file=sys.stderr)
            return 0

        for name, program in programs:
            logger.debug("running %s", name)
            run_program(program, stdin=stdin, stdout=stdout)
    except BFIError as e:
        print(e, file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
