"""
Tolerance tiers for numerical validation.

Defines precision expectations for the two supported element types:
- FP64: near machine precision for the closed-form kernels
- FP32: relaxed for single-precision arithmetic

Used by the test suite and by callers checking results such as
test_for_identity() against a threshold.
"""

from dataclasses import dataclass
from typing import Any

from pylinalg.core.precision import FP64, resolve_precision


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FP64_TIER = ToleranceTier(
    rtol=1e-12,
    atol=1e-12,
    name='fp64',
    description='double precision closed-form results',
)

FP32_TIER = ToleranceTier(
    rtol=1e-5,
    atol=1e-5,
    name='fp32',
    description='single precision closed-form results',
)


def select_tolerance(precision: Any = None) -> ToleranceTier:
    """Select the tolerance tier for a precision specification."""
    if resolve_precision(precision) is FP64:
        return FP64_TIER
    return FP32_TIER
