"""
Exception hierarchy for pylinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error.

Scope:
    Exceptions are raised only when a descriptor or vector is *built* from
    bad input (wrong buffer length, non-numeric data, unsupported dtype).
    Arithmetic operations never raise for shape problems; they return False
    and leave their destination untouched.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
"""

from typing import Any


class PyLinalgError(Exception):
    """Base exception for all pylinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Buffer or array dimensions are inconsistent with the declared shape.

    Attributes:
        expected: Expected size or shape, if known
        actual: Actual size or shape, if known
    """

    def __init__(
        self,
        message: str,
        expected: Any = None,
        actual: Any = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class PrecisionError(ValidationError):
    """
    Element dtype is not one of the supported precisions.

    Attributes:
        dtype: The offending dtype, if known
    """

    def __init__(self, message: str, dtype: Any = None):
        super().__init__(message)
        self.dtype = dtype
