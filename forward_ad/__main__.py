"""
Forward AD vs bumping comparison.

    python -m forward_ad check sin exp tgamma --at 0.7
    python -m forward_ad list

For every named one-argument function, the forward-mode tangent at x is
compared against a central finite difference [f(x+h) - f(x-h)] / (2h).
Exit status is 1 if any function misses the tolerance.
"""

import argparse
import logging
import sys

import numpy as np

from . import config
from .core.seeds import derivative, bump_derivative
from .logging_config import configure_logging, get_logger
from .ops import UNARY_FUNCTIONS

logger = get_logger(__name__)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="python -m forward_ad",
        description='Forward AD vs bumping comparison',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable DEBUG logging')
    sub = parser.add_subparsers(dest='command', required=True)

    check = sub.add_parser('check', help='Compare AD tangents with bumped derivatives',
                           formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    check.add_argument('functions', nargs='+', choices=sorted(UNARY_FUNCTIONS),
                       metavar='FUNC', help='Function name(s), see "list"')
    check.add_argument('--at', type=float, required=True, dest='x',
                       help='Point of evaluation')
    check.add_argument('--step', type=float, default=config.BUMP_STEP,
                       help='Bump size h')
    check.add_argument('--rtol', type=float, default=config.CHECK_RTOL,
                       help='Tolerance on |ad - bump| / max(|ad|, |bump|, 1)')

    sub.add_parser('list', help='List the available function names')
    return parser.parse_args(argv)


def compare(name, x, step):
    """Return (value, ad, bump, err) for one function at x."""
    f = UNARY_FUNCTIONS[name]
    val, ad = derivative(f, x)
    bump = bump_derivative(f, x, step)
    with np.errstate(all="ignore"):
        err = np.abs(ad - bump) / np.max([np.abs(ad), np.abs(bump), 1.0])
    logger.debug("%s(%r): ad=%r bump=%r err=%r", name, x, ad, bump, err)
    return val, ad, bump, err


def run_check(functions, x, step, rtol):
    """Print one line per function; return the number of failures."""
    print(f"x = {x}, h = {step}, rtol = {rtol}")
    n_fail = 0
    for name in functions:
        val, ad, bump, err = compare(name, x, step)
        ok = bool(err <= rtol)
        n_fail += not ok
        print(f"  {name:<10} value={val:<22.15g} ad={ad:<22.15g} "
              f"bump={bump:<22.15g} err={err:.2e}  {'OK' if ok else 'FAIL'}")
    return n_fail


def main(argv=None):
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    if args.command == 'list':
        for name in sorted(UNARY_FUNCTIONS):
            print(name)
        return 0

    n_fail = run_check(args.functions, args.x, args.step, args.rtol)
    if n_fail:
        print(f"{n_fail} function(s) outside tolerance")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
