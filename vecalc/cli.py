"""
═══════════════════════════════════════════════════════════════════════
  VECALC — REAL VECTOR ARITHMETIC
  Command Line — Worked Examples & HTTP Service
═══════════════════════════════════════════════════════════════════════

Runs every vecalc operation on small example vectors and prints the
results. With --serve, starts the HTTP service configured from VECALC_*
environment variables instead.
"""

import argparse
import logging
import sys

from vecalc import (
    DegenerateMonitor,
    VectorConfig,
    angle_between,
    are_equal,
    are_orthogonal,
    are_parallel,
    cross_product,
    dot_product,
    magnitude,
    minus,
    new,
    normalize,
    plus,
    project,
    scalar_project,
    times_scalar,
    try_normalize,
)
from vecalc.config import configure_logging


def header(title: str) -> None:
    """Print a formatted section header."""
    print("\n")
    print("╔" + "═" * 68 + "╗")
    print(f"║  {title:<66}║")
    print("╚" + "═" * 68 + "╝")


def demo_arithmetic():
    header("ARITHMETIC")
    a = new([1, 2, 3])
    b = new([5, 6, -8, 2])
    print(f"  a            = {a.short()}")
    print(f"  b            = {b.short()}")
    print(f"  a + b        = {plus(a, b).short()}")
    print(f"  a - b        = {minus(a, b).short()}")
    print(f"  3 * a        = {times_scalar(a, 3).short()}")
    print(f"  |(2, 5, 7)|  = {magnitude(new([2, 5, 7])):.2f}")
    print(f"  unit (2, 1)  = {normalize(new([2, 1])).short()}")


def demo_products():
    header("PRODUCTS, ANGLES & PROJECTIONS")
    print(f"  (1,2,3)·(4,5,6.5)       = {dot_product(new([1, 2, 3]), new([4, 5, 6.5]))}")
    print(f"  (1,2,3)×(1,5,7)         = {cross_product(new([1, 2, 3]), new([1, 5, 7])).short()}")
    angle = angle_between(new([5, 2, 6]), new([6, 2, -7]))
    print(f"  ∠((5,2,6), (6,2,-7))    = {angle.deg_angle:.4f}° / {angle.rad_angle:.4f} rad")
    v, base = new([2, 4, 3]), new([2, 4, 0])
    print(f"  comp_(2,4,0) (2,4,3)    = {scalar_project(v, base):.2f}")
    print(f"  proj_(2,4,0) (2,4,3)    = {project(v, base).short()}")


def demo_predicates():
    header("PREDICATES")
    print(f"  (3,2,1) ∥ (7.5,5,2.5)   : {are_parallel(new([3, 2, 1]), new([7.5, 5, 2.5]))}")
    print(f"  (3,2,1) ∥ (7.5,5,2)     : {are_parallel(new([3, 2, 1]), new([7.5, 5, 2]))}")
    print(f"  (0,1,0) ⟂ (1,0,1)       : {are_orthogonal(new([0, 1, 0]), new([1, 0, 1]))}")
    near = new([1, 1, 1, 1, 1, 1, 1, 1, 1, 1.01])
    ones = new([1] * 10)
    print(f"  equal within 0.1        : {are_equal(near, ones, 1.0e-1)}")
    print(f"  equal within 1e-10      : {are_equal(near, ones)}")


def demo_degenerate_inputs():
    header("DEGENERATE INPUTS")
    monitor = DegenerateMonitor().attach()
    try:
        zero = new([0, 0])
        print(f"  normalize(0)            = {normalize(zero).short()}  (returned unchanged)")
        result = try_normalize(zero)
        print(f"  try_normalize(0)        : ok={result.ok} kind={result.kind.value}")
        pair = cross_product(new([1, 2]), new([1, 2, 3]))
        print(f"  cross((1,2), (1,2,3))   = {[v.short() for v in pair]}  (operands returned)")
        print(f"  recorded                : {monitor.summary()['kind_counts']}")
    finally:
        monitor.detach()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="vecalc worked examples and HTTP service")
    parser.add_argument("--serve", action="store_true", help="run the HTTP service")
    parser.add_argument("--debug", action="store_true", help="Flask debug mode (with --serve)")
    args = parser.parse_args(argv)

    config = VectorConfig.from_env()
    configure_logging(config)

    if args.serve:
        from vecalc.vector_service import VectorService
        VectorService(config).run(debug=args.debug)
        return 0

    print("╔" + "═" * 68 + "╗")
    print("║  VECALC — FINITE-DIMENSIONAL REAL VECTOR ARITHMETIC              ║")
    print("╚" + "═" * 68 + "╝")
    demo_arithmetic()
    demo_products()
    demo_predicates()
    demo_degenerate_inputs()
    logging.getLogger(__name__).debug("examples complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
