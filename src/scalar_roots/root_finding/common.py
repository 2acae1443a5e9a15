"""
Shared constants and argument checks for the root-finding methods.
"""
from typing import Callable, Tuple

from scalar_roots.exceptions import InvalidBracket

# constants

TOL = 1e-6
MAX_ITERS = 1_000_000

# magnitude below which a derivative or secant slope is treated as zero.
ZERO_SLOPE = 1e-12

# types

Function = Callable[[float], float]


# helpers


def check_args(tol: float, max_iters: int):
    """Validate the stopping parameters shared by all root-finders.
    :param tol: the tolerance for finding a root.
    :param max_iters: the maximum number of iterations to run.
    """
    if tol <= 0:
        raise ValueError(f"Tolerance must be positive, got {tol}.")
    if max_iters < 1:
        raise ValueError(
            f"Maximum number of iterations must be positive, got {max_iters}."
        )


def check_bracket(f: Function, a: float, b: float) -> Tuple[float, float]:
    """Evaluate 'f' at the end-points of [a, b] and check that they bracket a root.
    :param f: the function whose root is sought.
    :param a: left end-point of the interval.
    :param b: right end-point of the interval.
    :returns: (f(a), f(b)) -- the function values at the end-points.
    """
    fa = f(a)
    fb = f(b)

    if fa * fb > 0:
        raise InvalidBracket(
            f"f(a) and f(b) must have opposite signs, got f({a}) = {fa} and f({b}) = {fb}."
        )

    return fa, fb
