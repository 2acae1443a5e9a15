"""
Helpers for configuring loggers and loading root-finders by name.
"""
import logging
from functools import partial
from typing import Dict, Any, Callable, Optional

from scalar_roots.root_finding import (
    bisection,
    regula_falsi,
    newton_raphson,
    secant,
    TOL,
    MAX_ITERS,
)
from scalar_roots.extrema import localmax

# constants

BISECTION = "bisection"
REGULA_FALSI = "regula_falsi"
NEWTON_RAPHSON = "newton_raphson"
SECANT = "secant"
LOCALMAX = "localmax"

SOLVERS: Dict[str, Callable[..., float]] = {
    BISECTION: bisection,
    REGULA_FALSI: regula_falsi,
    NEWTON_RAPHSON: newton_raphson,
    SECANT: secant,
    LOCALMAX: localmax,
}


# ========================
# ==== Logging Helper ====
# ========================


def get_logger(
    name: str,
    verbose: bool = False,
    debug: bool = False,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Construct a logging.Logger instance with an appropriate configuration.
    :param name: name for the Logger instance.
    :param verbose: (optional) whether or not the logger should print verbosely (ie. at the INFO level).
        Defaults to False.
    :param debug: (optional) whether or not the logger should print in debug mode (ie. at the DEBUG level).
        Defaults to False.
    :param log_file: (optional) path to a file where the log should be stored. The log is printed to stderr when 'None'.
    :returns: instance of logging.Logger.
    """

    level = logging.WARNING
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO

    logging.basicConfig(level=level, filename=log_file)
    logger = logging.getLogger(name)
    logger.setLevel(level)
    return logger


# index


def get_root_finder(config: Dict[str, Any]) -> Callable[..., float]:
    """Load a root-finder by name using the passed configuration parameters.
    :param config: configuration object specifying the method, its tolerance ("tol")
        and iteration budget ("max_iters").
    :returns: the solver with 'tol' and 'max_iters' bound.
    """
    name = config.get("name", None)

    if name is None:
        raise ValueError("Root finder must have name!")
    elif name not in SOLVERS:
        raise ValueError(f"Root finder {name} not recognized!")

    return partial(
        SOLVERS[name],
        tol=config.get("tol", TOL),
        max_iters=config.get("max_iters", MAX_ITERS),
    )
