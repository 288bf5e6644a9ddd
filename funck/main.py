"""Uses the funck lambda calculus implementation to interpret funck files, or run in command-line mode. Also uses the
error handling context manager. Called from the funck executable script.
"""

import argparse
import sys

from funck.lang.error import ErrorHandler
from funck.lang.session import Session
from funck.lang.shell import Shell


def positive_int(value):
    num = int(value)
    if num <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got '{value}'")
    return num


def main(argv=None):
    """Runs funck interpreter. Called from funck executable script."""
    assert sys.version_info >= (3, 8), "funck cannot be run with python < 3.8"

    parser = argparse.ArgumentParser(prog="funck", description="untyped lambda calculus interpreter")
    parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("--max-steps", type=positive_int, default=None,
                        help="give up on an evaluation after this many reduction steps (default: no limit)")
    parser.add_argument("--trace", action="store_true", help="print every α, β, and δ step while reducing")
    args = parser.parse_args(argv)

    with ErrorHandler(trace=args.trace) as error_handler:
        if args.file is not None:
            Session(error_handler, args.file, cmd_line=False, max_steps=args.max_steps)  # runs and prints each line

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True, max_steps=args.max_steps)).cmdloop()


if __name__ == "__main__":
    main()
