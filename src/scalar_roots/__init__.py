"""
`scalar_roots`: classical root-finding methods for scalar real functions.
"""

from scalar_roots.root_finding import (
    bisection,
    regula_falsi,
    newton_raphson,
    secant,
    TOL,
    MAX_ITERS,
)
from scalar_roots.extrema import localmax
from scalar_roots.exceptions import (
    RootFindingError,
    InvalidBracket,
    NonConvergence,
    ZeroDerivative,
    DegenerateSecant,
    NoExtremumFound,
)
from scalar_roots.interface import get_logger, get_root_finder

__all__ = [
    "bisection",
    "regula_falsi",
    "newton_raphson",
    "secant",
    "localmax",
    "get_logger",
    "get_root_finder",
    "RootFindingError",
    "InvalidBracket",
    "NonConvergence",
    "ZeroDerivative",
    "DegenerateSecant",
    "NoExtremumFound",
    "TOL",
    "MAX_ITERS",
]
