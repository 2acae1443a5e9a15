"""
Newton's method for computing roots of differentiable scalar functions.
"""
import logging

from scalar_roots.exceptions import NonConvergence, ZeroDerivative
from .common import TOL, MAX_ITERS, ZERO_SLOPE, Function, check_args

logger = logging.getLogger(__name__)


def newton_raphson(
    f: Function,
    df: Function,
    x0: float,
    tol: float = TOL,
    max_iters: int = MAX_ITERS,
) -> float:
    """Find a root of 'f' using Newton-Raphson iterations from the starting point 'x0'.
    The method is unguarded; it may diverge or converge to a root other than the
    one nearest 'x0'. Iteration stops when the length of a step falls below 'tol'.
    :param f: the function whose root is sought.
    :param df: the derivative of 'f'.
    :param x0: initial guess for the root.
    :param tol: (optional) tolerance on the step length.
    :param max_iters: (optional) the maximum number of iterations to run.
    :returns: the approximate root.
    """
    check_args(tol, max_iters)
    x = x0

    for i in range(max_iters):
        fx = f(x)
        dfx = df(x)

        if abs(dfx) <= ZERO_SLOPE:
            logger.debug(f"Newton's method hit a zero derivative at x = {x}.")
            raise ZeroDerivative(f"Derivative is zero at x = {x}. No solution found.")

        xn = x - fx / dfx

        if abs(xn - x) < tol:
            logger.debug(f"Newton's method converged to {xn} after {i + 1} iterations.")
            return xn

        x = xn

    logger.debug(f"Newton's method exhausted {max_iters} iterations; last iterate {x}.")
    raise NonConvergence(
        "Newton-Raphson method did not converge within the maximum number of iterations.",
        max_iters,
    )
