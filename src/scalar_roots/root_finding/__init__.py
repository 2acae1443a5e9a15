"""
Root-finding methods.
"""

from .common import TOL, MAX_ITERS, ZERO_SLOPE
from .bisection import bisection
from .regula_falsi import regula_falsi
from .newton import newton_raphson
from .secant import secant

__all__ = [
    "bisection",
    "regula_falsi",
    "newton_raphson",
    "secant",
    "TOL",
    "MAX_ITERS",
    "ZERO_SLOPE",
]
