"""
Locate extrema of scalar functions by root-finding on the derivative.
"""
import logging

from scalar_roots.exceptions import NoExtremumFound
from scalar_roots.root_finding import bisection, TOL, MAX_ITERS
from scalar_roots.root_finding.common import Function

logger = logging.getLogger(__name__)


def localmax(
    f: Function,
    df: Function,
    ddf: Function,
    a: float,
    b: float,
    tol: float = TOL,
    max_iters: int = MAX_ITERS,
) -> float:
    """Find a local maximum of 'f' in [a, b].
    A critical point is found by bisection on 'df' and then confirmed with the
    second-derivative test. Failures of the bisection step are not caught.
    :param f: the function to maximize. It is not evaluated; 'df' and 'ddf' carry all
        the information that is needed.
    :param df: the first derivative of 'f'. df(a) and df(b) must not share a sign.
    :param ddf: the second derivative of 'f'.
    :param a: left end-point of the search interval.
    :param b: right end-point of the search interval.
    :param tol: (optional) tolerance passed to the bisection step.
    :param max_iters: (optional) the maximum number of bisection iterations.
    :returns: the location of the local maximum.
    """
    x = bisection(df, a, b, tol, max_iters)

    if ddf(x) < 0:
        return x

    logger.debug(f"Critical point {x} failed the second-derivative test.")
    raise NoExtremumFound("No local maximum found in the given interval.")
