"""
Regula falsi (false position) method for computing roots of scalar functions.
"""
import logging

from scalar_roots.exceptions import NonConvergence
from .common import TOL, MAX_ITERS, Function, check_args, check_bracket

logger = logging.getLogger(__name__)


def regula_falsi(
    f: Function,
    a: float,
    b: float,
    tol: float = TOL,
    max_iters: int = MAX_ITERS,
) -> float:
    """Find a root of 'f' in the interval [a, b] using the false-position method.
    Each iterate is the zero of the line through (a, f(a)) and (b, f(b)). Unlike
    bisection, only the residual |f(c)| is used to stop; the bracket need not shrink
    to zero width, so the method can stall when one end-point stays fixed.
    :param f: the function whose root is sought.
    :param a: left end-point of the bracket.
    :param b: right end-point of the bracket. f(a) and f(b) must not share a sign.
    :param tol: (optional) tolerance for finding a root.
    :param max_iters: (optional) the maximum number of iterations to run.
    :returns: the approximate root.
    """
    check_args(tol, max_iters)
    fa, fb = check_bracket(f, a, b)

    if fa == 0:
        return a
    if fb == 0:
        return b

    for i in range(max_iters):
        c = (a * fb - b * fa) / (fb - fa)
        fc = f(c)

        if abs(fc) < tol:
            logger.debug(f"Regula falsi converged to {c} after {i + 1} iterations.")
            return c

        if fa * fc < 0:
            b, fb = c, fc
        else:
            a, fa = c, fc

    logger.debug(f"Regula falsi exhausted {max_iters} iterations on [{a}, {b}].")
    raise NonConvergence(
        "Regula Falsi method did not converge within the maximum number of iterations.",
        max_iters,
    )
