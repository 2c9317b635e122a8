#!/usr/bin/env python3

__author__ = "Gregory Maynard-Hoare"
__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"
__version__ = "1.0.0"

import sys
from argparse import ArgumentParser, ArgumentTypeError
from svm import main
from svm.constants import APP_INTRO, DEFAULT_STACK_SIZE


def stack_size(value):
    size = int(value)

    if size < 0:
        raise ArgumentTypeError("stack size cannot be negative: {}".format(value))

    return size


def parse_args(argv=None):
    parser = ArgumentParser()
    parser.add_argument("filename", help="program binary to execute (big-endian 32-bit words)")
    parser.add_argument(
        "-s", "--stack_size", type=stack_size,
        help="set the operand stack capacity in words (default {})".format(DEFAULT_STACK_SIZE)
    )
    parser.add_argument(
        "-r", "--return_stack_size", type=stack_size,
        help="set the return-address stack capacity in words (default {})".format(DEFAULT_STACK_SIZE)
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", default=False,
        help="enable live debug output on stderr.  Slows execution"
    )
    parser.add_argument("--version", action="version", version=APP_INTRO)
    return parser.parse_args(argv)  # Can call sys.exit(2) if args are incorrect


def cli():
    args = vars(parse_args())
    # It is possible to run a program from other Python code by calling main with a dictionary
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
