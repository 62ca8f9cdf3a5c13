"""
Result types for vecalc operations.

Degenerate inputs (a zero vector where a direction is needed, operands of the
wrong dimension) are described by a DegenerateKind. The plain operations in
math_utils log these cases and hand back the operand unchanged; the try_*
variants wrap the outcome in an OpResult instead so callers can branch on it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class DegenerateKind(str, Enum):
    """Named degenerate-input cases."""
    ZERO_VECTOR = "zero_vector"
    DIMENSION_MISMATCH = "dimension_mismatch"


class VectorError(Exception):
    """
    Base class for degenerate-input errors.

    Only the subclasses are raised by vecalc; they set `kind`. A bare
    VectorError has no kind and reports itself as "degenerate".
    """

    kind: Optional[DegenerateKind] = None

    def __init__(self, operation: str, message: str):
        super().__init__(message)
        self.operation = operation
        self.message = message

    @property
    def kind_name(self) -> str:
        return self.kind.value if self.kind is not None else "degenerate"


class ZeroVectorError(VectorError):
    """A zero vector was given where a direction is required."""

    kind = DegenerateKind.ZERO_VECTOR


class DimensionMismatchError(VectorError):
    """Operands do not have the dimension the operation requires."""

    kind = DegenerateKind.DIMENSION_MISMATCH

    def __init__(self, operation: str, message: str, dimensions: tuple = ()):
        super().__init__(operation, message)
        self.dimensions = tuple(dimensions)


@dataclass(frozen=True)
class Angle:
    """Angle between two vectors in degrees and radians."""
    deg_angle: float
    rad_angle: float

    def to_dict(self) -> dict:
        return {"deg_angle": self.deg_angle, "rad_angle": self.rad_angle}


@dataclass(frozen=True)
class OpResult:
    """
    Either a successful value or a named degenerate-case error.

    Attributes:
        operation: Name of the operation that produced this result.
        value:     The computed value (None on failure).
        error:     The VectorError describing the degenerate case (None on success).
    """
    operation: str
    value: Any = None
    error: Optional[VectorError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[DegenerateKind]:
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> Any:
        """Return the value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value

    @classmethod
    def success(cls, operation: str, value: Any) -> "OpResult":
        return cls(operation=operation, value=value)

    @classmethod
    def failure(cls, error: VectorError) -> "OpResult":
        return cls(operation=error.operation, error=error)
