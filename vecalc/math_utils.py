"""
Vector arithmetic and geometry for vecalc.

Provides addition, scaling, magnitude, normalization, dot/cross products,
projections, angles and the zero/equal/parallel/orthogonal predicates.

Every function is pure: operands are never modified and a new Vector or
scalar is returned. Coordinates absent from the shorter operand count as 0.0.

Degenerate inputs (zero vector where a direction is needed, non-3D operands
to the cross product) are logged as warnings and the operand is handed back
unchanged. The try_* variants return an OpResult carrying a named error
instead.
"""

import logging
import math
from typing import List, Union

import numpy as np

from vecalc.results import (
    Angle,
    DimensionMismatchError,
    OpResult,
    VectorError,
    ZeroVectorError,
)
from vecalc.vector import Number, Vector, new

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 1.0e-10
SIGNED_SUM = "signed_sum"
MAX_ABS = "max_abs"
EQUALITY_MODES = (SIGNED_SUM, MAX_ABS)


def _report(error: VectorError) -> None:
    """Log a degenerate-input case for anyone listening on the vecalc logger."""
    logger.warning(
        error.message,
        extra={"operation": error.operation, "kind": error.kind_name},
    )


def _aligned(a: Vector, b: Vector):
    """Both coordinate arrays zero-padded to the larger dimension."""
    dimension = max(a.dimension, b.dimension)
    return a.padded(dimension), b.padded(dimension)


# ── Arithmetic ────────────────────────────────────────────────────

def plus(a: Vector, b: Vector) -> Vector:
    """Add two vectors. Missing coordinates in either operand are zero."""
    va, vb = _aligned(a, b)
    return Vector._from_array(va + vb)


def minus(a: Vector, b: Vector) -> Vector:
    """Subtract b from a. Missing coordinates in either operand are zero."""
    return plus(a, times_scalar(b, -1))


def times_scalar(v: Vector, scalar: Number) -> Vector:
    """Multiply every coordinate by a scalar."""
    return Vector._from_array(v.values * float(scalar))


def magnitude(v: Vector) -> float:
    """Compute the L2 norm (magnitude) of a vector."""
    # hypot scales internally, so large finite coordinates do not overflow
    return math.hypot(*v.values)


def dot_product(a: Vector, b: Vector) -> float:
    """
    Dot product of two vectors, pairing coordinates by index.

    The shorter operand is zero-padded, so for operands of different
    dimension only the shared indices contribute.
    """
    shared = min(a.dimension, b.dimension)
    return float(np.dot(a.values[:shared], b.values[:shared]))


# ── Direction ─────────────────────────────────────────────────────

def _normalize(v: Vector, tolerance: float) -> OpResult:
    if is_zero_vector(v, tolerance):
        return OpResult.failure(ZeroVectorError("normalize", "Cannot normalize the zero vector"))
    return OpResult.success("normalize", times_scalar(v, 1.0 / magnitude(v)))


def normalize(v: Vector, tolerance: float = DEFAULT_TOLERANCE) -> Vector:
    """Unit vector in the direction of v. The zero vector is returned unchanged."""
    result = _normalize(v, tolerance)
    if not result.ok:
        _report(result.error)
        return v
    return result.value


def try_normalize(v: Vector, tolerance: float = DEFAULT_TOLERANCE) -> OpResult:
    return _normalize(v, tolerance)


def angle_between(a: Vector, b: Vector, tolerance: float = DEFAULT_TOLERANCE) -> Angle:
    """
    Angle between two vectors in degrees and radians.

    The cosine is clamped to [-1, 1] before acos to absorb rounding drift.
    A zero operand is left unnormalized, which yields a right angle.
    """
    cos = dot_product(normalize(a, tolerance), normalize(b, tolerance))
    # Clamp to [-1, 1] for numerical safety
    cos = max(-1.0, min(1.0, cos))
    rad_angle = math.acos(cos)
    return Angle(deg_angle=rad_angle * 180.0 / math.pi, rad_angle=rad_angle)


def try_angle_between(a: Vector, b: Vector, tolerance: float = DEFAULT_TOLERANCE) -> OpResult:
    for operand in (a, b):
        if is_zero_vector(operand, tolerance):
            return OpResult.failure(
                ZeroVectorError("angle_between", "Cannot measure an angle against the zero vector")
            )
    return OpResult.success("angle_between", angle_between(a, b, tolerance))


# ── Predicates ────────────────────────────────────────────────────

def is_zero_vector(v: Vector, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Check if the vector's magnitude is below tolerance."""
    return magnitude(v) < tolerance


def are_equal(
    a: Vector,
    b: Vector,
    tolerance: float = DEFAULT_TOLERANCE,
    mode: str = SIGNED_SUM,
) -> bool:
    """
    Check if two vectors are the same within tolerance.

    Modes:
        signed_sum: |sum of (a - b)| <= tolerance. Differences of opposite
                    sign cancel, so this is the looser check.
        max_abs:    max |a_i - b_i| <= tolerance.
    """
    diff = minus(a, b).values
    if mode == SIGNED_SUM:
        return abs(float(np.sum(diff))) <= tolerance
    if mode == MAX_ABS:
        return diff.size == 0 or float(np.max(np.abs(diff))) <= tolerance
    raise ValueError(f"Unknown equality mode: {mode!r} (expected one of {EQUALITY_MODES})")


def are_parallel(
    a: Vector,
    b: Vector,
    tolerance: float = DEFAULT_TOLERANCE,
    mode: str = SIGNED_SUM,
) -> bool:
    """
    Check if two vectors are parallel. A zero vector is parallel to anything.

    The ratio is taken at the first coordinate where b is non-zero, which is
    index 0 unless b starts with zeros.
    """
    if is_zero_vector(a, tolerance) or is_zero_vector(b, tolerance):
        return True
    nonzero = np.flatnonzero(b.values)
    if nonzero.size == 0:
        return True
    pivot = int(nonzero[0])
    numerator = a.values[pivot] if pivot < a.dimension else 0.0
    scalar = float(numerator) / float(b.values[pivot])
    return are_equal(times_scalar(b, scalar), a, tolerance, mode)


def are_orthogonal(a: Vector, b: Vector, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Check if two vectors are orthogonal. A zero vector is orthogonal to anything."""
    if is_zero_vector(a, tolerance) or is_zero_vector(b, tolerance):
        return True
    return abs(dot_product(a, b)) < tolerance


# ── Projection ────────────────────────────────────────────────────

def _scalar_project(v: Vector, base: Vector, tolerance: float) -> OpResult:
    if is_zero_vector(base, tolerance):
        return OpResult.failure(
            ZeroVectorError("scalar_project", "Cannot project onto the zero vector")
        )
    return OpResult.success("scalar_project", dot_product(v, base) / magnitude(base))


def scalar_project(
    v: Vector,
    base: Vector,
    tolerance: float = DEFAULT_TOLERANCE,
) -> Union[float, Vector]:
    """
    Length of v's component along base.

    A zero base is logged and returned as-is, so the result is a Vector
    rather than a float in that case.
    """
    result = _scalar_project(v, base, tolerance)
    if not result.ok:
        _report(result.error)
        return base
    return result.value


def try_scalar_project(v: Vector, base: Vector, tolerance: float = DEFAULT_TOLERANCE) -> OpResult:
    return _scalar_project(v, base, tolerance)


def project(v: Vector, base: Vector, tolerance: float = DEFAULT_TOLERANCE) -> Vector:
    """Vector projection of v onto base. A zero base gives a zero projection."""
    unit_base = normalize(base, tolerance)
    return times_scalar(unit_base, dot_product(v, unit_base))


def try_project(v: Vector, base: Vector, tolerance: float = DEFAULT_TOLERANCE) -> OpResult:
    unit = try_normalize(base, tolerance)
    if not unit.ok:
        return OpResult.failure(ZeroVectorError("project", "Cannot project onto the zero vector"))
    return OpResult.success("project", times_scalar(unit.value, dot_product(v, unit.value)))


# ── Cross Product ─────────────────────────────────────────────────

def _cross_product(a: Vector, b: Vector) -> OpResult:
    if a.dimension != 3 or b.dimension != 3:
        return OpResult.failure(
            DimensionMismatchError(
                "cross_product",
                "Both vectors need to be of dimension 3",
                dimensions=(a.dimension, b.dimension),
            )
        )
    x1, y1, z1 = a.values
    x2, y2, z2 = b.values
    return OpResult.success(
        "cross_product",
        new([y1 * z2 - z1 * y2, z1 * x2 - x1 * z2, x1 * y2 - y1 * x2]),
    )


def cross_product(a: Vector, b: Vector) -> Union[Vector, List[Vector]]:
    """
    Cross product of two 3-dimensional vectors.

    Operands of any other dimension are logged and returned as [a, b].
    """
    result = _cross_product(a, b)
    if not result.ok:
        _report(result.error)
        return [a, b]
    return result.value


def try_cross_product(a: Vector, b: Vector) -> OpResult:
    return _cross_product(a, b)
