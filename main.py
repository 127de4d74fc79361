#!/usr/bin/env python3
"""
tinyforth - a small Forth interpreter

Usage:
1. Interactive REPL:        python main.py
2. Evaluate an expression:  python main.py -e ": square dup * ; 3 square"
"""

import argparse
import logging
import sys

from tinyforth import ForthError, InteractiveForth, __version__


def main():
    parser = argparse.ArgumentParser(
        description='Evaluate Forth words',
        prog='tinyforth',
    )
    parser.add_argument('-e', '--eval', type=str, metavar='TEXT', help='evaluate TEXT, print the stack and exit')
    parser.add_argument('-v', '--verbose', action='store_true', help='log definitions and errors')
    parser.add_argument('--version', action='store_true', help='print version and exit')
    args = parser.parse_args()

    if args.version:
        raise SystemExit('tinyforth {}'.format(__version__))

    if args.verbose:
        logging.basicConfig(format='%(message)s', level=logging.DEBUG, stream=sys.stdout)

    f = InteractiveForth()
    if args.eval is None:
        f.repl()
        return

    try:
        f.eval(args.eval)
    except ForthError as e:
        print(f.format_stack())
        raise SystemExit('Error: {}'.format(e))
    print(f.format_stack())


if __name__ == "__main__":
    main()
