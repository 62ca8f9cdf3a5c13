"""
vecalc: finite-dimensional real vector arithmetic.

Create vectors with vecalc.new(sequence); every operation returns a new
value and leaves its operands untouched.
"""

from vecalc.vector import Vector, new
from vecalc.results import (
    Angle,
    DegenerateKind,
    DimensionMismatchError,
    OpResult,
    VectorError,
    ZeroVectorError,
)
from vecalc.math_utils import (
    DEFAULT_TOLERANCE,
    MAX_ABS,
    SIGNED_SUM,
    angle_between,
    are_equal,
    are_orthogonal,
    are_parallel,
    cross_product,
    dot_product,
    is_zero_vector,
    magnitude,
    minus,
    normalize,
    plus,
    project,
    scalar_project,
    times_scalar,
    try_angle_between,
    try_cross_product,
    try_normalize,
    try_project,
    try_scalar_project,
)
from vecalc.config import VectorConfig
from vecalc.observability import DegenerateMonitor

__all__ = [
    "Vector",
    "new",
    "Angle",
    "DegenerateKind",
    "DimensionMismatchError",
    "OpResult",
    "VectorError",
    "ZeroVectorError",
    "DEFAULT_TOLERANCE",
    "MAX_ABS",
    "SIGNED_SUM",
    "angle_between",
    "are_equal",
    "are_orthogonal",
    "are_parallel",
    "cross_product",
    "dot_product",
    "is_zero_vector",
    "magnitude",
    "minus",
    "normalize",
    "plus",
    "project",
    "scalar_project",
    "times_scalar",
    "try_angle_between",
    "try_cross_product",
    "try_normalize",
    "try_project",
    "try_scalar_project",
    "VectorConfig",
    "DegenerateMonitor",
]
