"""
Tests for root-finding with Newton's method.
"""

import math
import unittest

import numpy as np
from parameterized import parameterized_class  # type: ignore

from scalar_roots.exceptions import NonConvergence, ZeroDerivative
from scalar_roots.root_finding.newton import newton_raphson


@parameterized_class([{"tol": 1e-6}, {"tol": 1e-9}])
class TestNewtonsMethod(unittest.TestCase):
    """Test root-finding with Newton's method."""

    tol: float
    rng: np.random.Generator = np.random.default_rng(778)

    tries: int = 10

    def test_cosine(self):
        """Test finding pi / 2 as a root of cos(x)."""

        root = newton_raphson(math.cos, lambda x: -math.sin(x), 1.0, self.tol)

        self.assertTrue(
            abs(root - math.pi / 2) <= self.tol,
            "Newton method approximation is not close enough to pi / 2.",
        )

    def test_linear_newton(self):
        """Test root-finding on simple linear functions."""

        # simplest possible problem: 1-d linear function
        a: float = 2.0
        b: float = -1.0
        root: float = 0.5

        def simple_obj(x):
            return a * x + b

        def simple_grad(x):
            return a

        w_newton = newton_raphson(simple_obj, simple_grad, 0.0, self.tol)

        self.assertTrue(
            abs(simple_obj(w_newton)) <= self.tol,
            "Newton method failed to find root within given tolerance.",
        )
        self.assertTrue(
            np.isclose(w_newton, root),
            "Newton method approximation is not close enough to real root.",
        )

    def test_quadratic_newton(self):
        """Test root-finding on random quadratics started to the right of the larger root."""

        for _ in range(self.tries):
            a = abs(self.rng.standard_normal()) + 0.1
            b = self.rng.standard_normal()
            c = abs(self.rng.standard_normal()) + 0.1

            def quadratic_obj(x):
                return a * x ** 2 + b * x - c

            def quadratic_grad(x):
                return 2 * a * x + b

            plus_root = (-b + math.sqrt(b ** 2 + 4 * a * c)) / (2 * a)

            w_newton = newton_raphson(
                quadratic_obj, quadratic_grad, plus_root + 10.0, self.tol
            )

            self.assertTrue(
                abs(w_newton - plus_root) <= self.tol,
                "Newton method should converge to the 'plus' root from the right.",
            )

    def test_zero_derivative(self):
        """Test that a vanishing derivative raises ZeroDerivative."""

        with self.assertRaises(ZeroDerivative):
            newton_raphson(lambda x: 5.0, lambda x: 0.0, 1.0, self.tol)

        # the derivative of x^2 - 1 vanishes at the starting point.
        with self.assertRaises(ZeroDivisionError):
            newton_raphson(lambda x: x ** 2 - 1, lambda x: 2 * x, 0.0, self.tol)

    def test_non_convergence(self):
        """Test that a diverging iteration exhausts the budget."""

        # Newton's method on cbrt(x) maps x to -2x.
        with self.assertRaises(NonConvergence) as context:
            newton_raphson(
                np.cbrt, lambda x: 1.0 / (3.0 * np.cbrt(x) ** 2), 1.0, self.tol, 20
            )

        self.assertEqual(context.exception.n_iters, 20)

    def test_idempotence(self):
        """Test that repeated calls give identical results."""

        args = (math.cos, lambda x: -math.sin(x), 1.0, self.tol)
        self.assertEqual(newton_raphson(*args), newton_raphson(*args))


if __name__ == "__main__":
    unittest.main()
