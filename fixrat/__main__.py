# SPDX-FileCopyrightText: 2025 fixrat contributors
# SPDX-License-Identifier: Apache-2.0

"""
Command-line access to fixrat:

  fixrat parse " -3 / 12" 0.75       canonical form of rational literals
  fixrat approx 3.14159265358979     closest rational to a float
  fixrat cmp 1/3 0.333               compare two values (-1, 0 or 1)
"""

import argparse
import logging
import sys
from .core.rational import Rational
from .core.errors import RationalError
from . import __version__

def cmd_parse(args):
    for text in args.text:
        print(Rational.parse(text))

def cmd_approx(args):
    for value in args.value:
        r = Rational.from_number(value)
        print(f"{r} = {r.to_float()!r}")

def cmd_cmp(args):
    a = Rational.to_rational(args.a)
    print(a.cmp(args.b, exact=args.exact))

def main(argv=None):
    parser = argparse.ArgumentParser(prog='fixrat',
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('-v', '--verbose', action='store_true', help="Log debug messages to stderr.")
    parser.add_argument('-V', '--version', action='version', version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest='command', required=True)

    p = subparsers.add_parser('parse', help="Print canonical form of literals.")
    p.add_argument('text', nargs='+')
    p.set_defaults(func=cmd_parse)

    p = subparsers.add_parser('approx', help="Print closest rational to floats.")
    p.add_argument('value', nargs='+', type=float)
    p.set_defaults(func=cmd_approx)

    p = subparsers.add_parser('cmp', help="Compare two values.")
    p.add_argument('a')
    p.add_argument('b')
    p.add_argument('-e', '--exact', action='store_true', help="Never fall back to float comparison.")
    p.set_defaults(func=cmd_cmp)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        args.func(args)
    except RationalError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
