"""
Secant method for computing roots of non-linear scalar functions.
"""
import logging

from scalar_roots.exceptions import NonConvergence, DegenerateSecant
from .common import TOL, MAX_ITERS, ZERO_SLOPE, Function, check_args

logger = logging.getLogger(__name__)


def secant(
    f: Function,
    x0: float,
    x1: float,
    tol: float = TOL,
    max_iters: int = MAX_ITERS,
) -> float:
    """Find a root of 'f' with the secant method. No derivative is required; the
    slope is approximated from the two most recent iterates.
    :param f: the function whose root is sought.
    :param x0: initial guess for the root.
    :param x1: a second initial guess. The secant method requires two points to initialize.
    :param tol: (optional) tolerance on the distance between successive iterates.
    :param max_iters: (optional) the maximum number of iterations to run.
    :returns: the approximate root.
    """
    check_args(tol, max_iters)

    f0 = f(x0)
    f1 = f(x1)

    for i in range(max_iters):
        if abs(f1 - f0) <= ZERO_SLOPE:
            logger.debug(f"Secant method stalled with f({x0}) == f({x1}).")
            raise DegenerateSecant(
                "Division by zero in Secant method. No solution found."
            )

        xn1 = x0 - f0 * (x1 - x0) / (f1 - f0)

        if abs(xn1 - x1) < tol:
            logger.debug(f"Secant method converged to {xn1} after {i + 1} iterations.")
            return xn1

        # shift the window.
        x0, f0 = x1, f1
        x1 = xn1
        f1 = f(x1)

    logger.debug(f"Secant method exhausted {max_iters} iterations; last iterate {x1}.")
    raise NonConvergence(
        "Secant method did not converge within the maximum number of iterations.",
        max_iters,
    )
