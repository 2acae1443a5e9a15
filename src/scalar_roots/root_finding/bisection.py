"""
Bisection method for computing roots of continuous scalar functions.
"""
import logging

from scalar_roots.exceptions import NonConvergence
from .common import TOL, MAX_ITERS, Function, check_args, check_bracket

logger = logging.getLogger(__name__)


def bisection(
    f: Function,
    a: float,
    b: float,
    tol: float = TOL,
    max_iters: int = MAX_ITERS,
) -> float:
    """Find a root of 'f' in the interval [a, b] by repeatedly halving the bracket.
    The search stops as soon as either the residual |f(c)| at the midpoint c or the
    half-width of the current bracket drops below 'tol'.
    :param f: the function whose root is sought.
    :param a: left end-point of the bracket.
    :param b: right end-point of the bracket. f(a) and f(b) must not share a sign.
    :param tol: (optional) tolerance for finding a root.
    :param max_iters: (optional) the maximum number of iterations to run.
    :returns: the approximate root.
    """
    check_args(tol, max_iters)
    fa, fb = check_bracket(f, a, b)

    # an end-point is already a root.
    if fa == 0:
        return a
    if fb == 0:
        return b

    for i in range(max_iters):
        c = 0.5 * (a + b)
        fc = f(c)

        if abs(fc) < tol or (b - a) / 2 < tol:
            logger.debug(f"Bisection converged to {c} after {i + 1} iterations.")
            return c

        # keep the half which still brackets the root.
        if fa * fc < 0:
            b, fb = c, fc
        else:
            a, fa = c, fc

    logger.debug(f"Bisection exhausted {max_iters} iterations on [{a}, {b}].")
    raise NonConvergence(
        "Bisection method did not converge within the maximum number of iterations.",
        max_iters,
    )
