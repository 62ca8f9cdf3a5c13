"""
Vector value type for vecalc.

A Vector is an immutable point in real coordinate space. Coordinates are kept
in a contiguous read-only float64 array whose position is the coordinate
index, so the index range [0, dimension) never has holes and dimension is
always the length of that array.
"""

from __future__ import annotations

import numbers
from typing import Dict, Iterable, Iterator, List, Mapping, Union

import numpy as np

Number = Union[int, float]


def _real(value, position) -> float:
    """Accept real numbers only; bools and numeric strings are rejected."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise TypeError(f"Coordinate {position} must be a real number (got {value!r})")
    return value


def _checked(values: Iterable[Number]) -> List[Number]:
    if isinstance(values, (str, bytes)):
        raise TypeError("Vector values must be a sequence of numbers, not a string")
    return [_real(value, i) for i, value in enumerate(values)]


class Vector:
    """
    An immutable real vector.

    Attributes:
        coordinates: Mapping index -> value, dense from 0 to dimension - 1.
        dimension:   Number of coordinates.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[Number] = ()):
        array = np.array(_checked(values), dtype=np.float64)
        array.setflags(write=False)
        object.__setattr__(self, "_values", array)

    # ── Construction ──────────────────────────────────────────────

    @classmethod
    def from_coordinates(cls, coordinates: Mapping[int, Number]) -> "Vector":
        """
        Build a Vector from an index -> value mapping.

        Indices missing below the highest index are filled with 0.0.
        """
        if not coordinates:
            return cls()
        indices = [int(i) for i in coordinates]
        if min(indices) < 0:
            raise ValueError(f"Coordinate indices must be non-negative (got {min(indices)})")
        values = np.zeros(max(indices) + 1, dtype=np.float64)
        for index, value in coordinates.items():
            values[int(index)] = _real(value, index)
        return cls(values)

    @classmethod
    def _from_array(cls, array: np.ndarray) -> "Vector":
        vec = cls.__new__(cls)
        array = np.asarray(array, dtype=np.float64)
        array.setflags(write=False)
        object.__setattr__(vec, "_values", array)
        return vec

    # ── Accessors ─────────────────────────────────────────────────

    @property
    def values(self) -> np.ndarray:
        """Read-only coordinate array."""
        return self._values

    @property
    def coordinates(self) -> Dict[int, float]:
        return {i: float(v) for i, v in enumerate(self._values)}

    @property
    def dimension(self) -> int:
        return int(self._values.shape[0])

    def to_list(self) -> list:
        return [float(v) for v in self._values]

    def padded(self, dimension: int) -> np.ndarray:
        """Coordinates zero-padded up to `dimension` (never truncated)."""
        if dimension <= self.dimension:
            return self._values
        out = np.zeros(dimension, dtype=np.float64)
        out[: self.dimension] = self._values
        return out

    # ── Immutability ──────────────────────────────────────────────

    def __setattr__(self, name, value):
        raise AttributeError("Vector is immutable")

    def __delattr__(self, name):
        raise AttributeError("Vector is immutable")

    # ── Sequence protocol ─────────────────────────────────────────

    def __len__(self) -> int:
        return self.dimension

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self._values)

    def __getitem__(self, index: int) -> float:
        return float(self._values[index])

    # ── Operators ─────────────────────────────────────────────────

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        from vecalc.math_utils import plus
        return plus(self, other)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        from vecalc.math_utils import minus
        return minus(self, other)

    def __neg__(self) -> "Vector":
        return Vector._from_array(-self._values)

    def __mul__(self, scalar: Number) -> "Vector":
        if isinstance(scalar, Vector):
            return NotImplemented
        from vecalc.math_utils import times_scalar
        return times_scalar(self, scalar)

    def __rmul__(self, scalar: Number) -> "Vector":
        return self.__mul__(scalar)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dimension == other.dimension and bool(np.array_equal(self._values, other._values))

    def __hash__(self) -> int:
        return hash(tuple(self._values.tolist()))

    # ── Display ───────────────────────────────────────────────────

    def __repr__(self) -> str:
        return f"Vector(coordinates={self.coordinates}, dimension={self.dimension})"

    def short(self) -> str:
        """Compact label for log output."""
        return f"[{', '.join(f'{v:.3g}' for v in self._values)}]"


def new(sequence: Iterable[Number]) -> Vector:
    """Create a Vector whose coordinate indices are the sequence positions."""
    return Vector(sequence)
