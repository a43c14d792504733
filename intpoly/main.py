#!/usr/bin/env python

"""
Demo driver for intpoly. Run with --help for options.
"""

import argparse

from intpoly import opts
from intpoly.common import open_maybe_stdout
from intpoly.logging import task, dump_profile
from intpoly.polynomials import (
    Polynomial, new, plus, minus, times, compose, evaluate, differentiate, to_string)

profile_file = opts.Option("profile-file", str, "", metavar="PATH",
    description="Write the time spent in each task to PATH")

def sample_polynomials():
    """The demo polynomials p = 4x^3 + 3x^2 + 2x + 1 and q = 3x^2 + 5."""
    p = plus(plus(plus(new(4, 3), new(3, 2)), new(1, 0)), new(2, 1))
    q = plus(new(3, 2), new(5, 0))
    return p, q

def demo_lines(at=3):
    """The lines printed by the demo, in order."""
    zero = Polynomial.ZERO
    p, q = sample_polynomials()
    with task("demo", at=at):
        return [
            "zero(x) =     {}".format(to_string(zero)),
            "p(x) =        {}".format(to_string(p)),
            "q(x) =        {}".format(to_string(q)),
            "p(x) + q(x) = {}".format(to_string(plus(p, q))),
            "p(x) * q(x) = {}".format(to_string(times(p, q))),
            "p(q(x)) =     {}".format(to_string(compose(p, q))),
            "0 - p(x) =    {}".format(to_string(minus(zero, p))),
            "p({}) =        {}".format(at, evaluate(p, at)),
            "p'(x) =       {}".format(to_string(differentiate(p))),
            "p''(x) =      {}".format(to_string(differentiate(differentiate(p)))),
        ]

def run(argv=None):
    """Entry point for the intpoly executable.

    This procedure reads argv (sys.argv by default) and prints the demo.
    """

    parser = argparse.ArgumentParser(description="Integer polynomial arithmetic demo.")
    parser.add_argument("--at", metavar="N", type=int, default=3, help="Point at which to evaluate p; default=3")
    parser.add_argument("-o", "--output", metavar="FILE", default="-", help="Output file, use '-' for stdout (the default)")

    internal_opts = parser.add_argument_group("Internal parameters")
    opts.setup(internal_opts)

    args = parser.parse_args(argv)
    opts.read(args)

    with open_maybe_stdout(args.output) as out:
        for line in demo_lines(at=args.at):
            out.write(line + "\n")

    if profile_file.value:
        dump_profile(profile_file.value)

if __name__ == "__main__":
    run()
