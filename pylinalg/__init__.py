"""
pylinalg: small dual-precision linear-algebra kernel.

Fixed-length 3D vector arithmetic and row-major matrix arithmetic with a
closed-form inverse up to 3x3, in float64 and float32.

Submodules:
    vector3: Three dimensional vector kernel
    matrix: Matrix descriptor, storage factories and engine
    core: Exceptions, validation, precision and tolerances
"""

__version__ = "0.1.0"

from pylinalg import vector3
from pylinalg import matrix
from pylinalg.core.precision import FP32, FP64, Precision
from pylinalg.matrix import Matrix

__all__ = [
    "__version__",
    "vector3",
    "matrix",
    "Matrix",
    "Precision",
    "FP64",
    "FP32",
]
