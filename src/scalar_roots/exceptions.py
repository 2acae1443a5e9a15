"""
Exceptions raised by the root-finding and extremum-finding methods.
"""


class RootFindingError(Exception):

    """Base class for failures of the scalar solvers."""


class InvalidBracket(RootFindingError, ValueError):

    """The end-points of the interval do not bracket a sign change."""


class NonConvergence(RootFindingError):

    """The iteration budget was exhausted before the stopping criterion was met."""

    n_iters: int

    def __init__(self, message: str, n_iters: int):
        """
        :param message: description of the failure.
        :param n_iters: the number of iterations that were run.
        """
        super().__init__(message)
        self.n_iters = n_iters


class ZeroDerivative(RootFindingError, ZeroDivisionError):

    """The derivative vanished at the current iterate of Newton's method."""


class DegenerateSecant(RootFindingError, ZeroDivisionError):

    """The secant through the last two iterates is (numerically) horizontal."""


class NoExtremumFound(RootFindingError):

    """The second-derivative test did not confirm an extremum."""
