"""
Core infrastructure for pylinalg.

Shared abstractions used by the vector3 kernel and the matrix engine.

Key components:
    exceptions: Exception hierarchy (construction-time errors)
    validation: Input validators
    precision: Precision descriptors and dtype resolution
    tolerances: Tolerance tiers per precision
"""

from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    PrecisionError,
)
from pylinalg.core.precision import (
    Precision,
    FP64,
    FP32,
    DEFAULT_PRECISION,
    resolve_precision,
    precision_of,
    machine_epsilon,
)
from pylinalg.core.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "PrecisionError",
    # Precision
    "Precision",
    "FP64",
    "FP32",
    "DEFAULT_PRECISION",
    "resolve_precision",
    "precision_of",
    "machine_epsilon",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]
