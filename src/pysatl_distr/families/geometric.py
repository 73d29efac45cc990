"""
Geometric distribution.

The probability distribution of the number of Bernoulli trials needed to get
one success, supported on ``{1, 2, ...}``.

This distribution is sometimes referred to as the *shifted* geometric
distribution, to distinguish it from the variant counting the failures before
the first success, defined over ``{0, 1, ...}``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import exp, expm1, floor, inf, isnan, log, nan

from scipy.special import xlog1py

from pysatl_distr.distributions.distribution import DiscreteDistribution, Variance
from pysatl_distr.distributions.statistics import std_dev_from_variance
from pysatl_distr.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_distr.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distr.types import FamilyName

_SUPPORT = IntegerLatticeDiscreteSupport(min_k=1)


@parametrization(family=FamilyName.GEOMETRIC, name="success")
@dataclass(frozen=True, slots=True)
class GeometricDistribution(Parametrization, DiscreteDistribution, Variance):
    """
    Geometric distribution.

    Probability mass function:
        P(X = n) = s * (1 - s)^(n - 1) for n ≥ 1

    Parameters
    ----------
    success : float
        Success rate ``s`` of a single trial, ``0 ≤ s ≤ 1``.
    """

    success: float

    @constraint(description="0 <= success <= 1")
    def check_success_in_unit_interval(self) -> bool:
        """Check that the success rate is a probability."""
        return 0.0 <= self.success <= 1.0

    @property
    def support(self) -> IntegerLatticeDiscreteSupport:
        """Support of geometric distribution: ``{1, 2, ...}``."""
        return _SUPPORT

    def probability(self, n: int) -> float:
        if n < 1:
            return 0.0
        s = self.success
        return s * (1.0 - s) ** (n - 1)

    def log_probability(self, n: int) -> float:
        if n < 1 or self.success == 0.0:
            return -inf
        if self.success == 1.0:
            return 0.0 if n == 1 else -inf
        return log(self.success) + float(xlog1py(n - 1, -self.success))

    def _log_survival(self, x: float) -> float:
        # log P(X > x) = floor(x) * log(1 - s)
        if self.success == 1.0:
            return -inf
        return float(xlog1py(floor(x), -self.success))

    def cumulative(self, x: float) -> float:
        if isnan(x):
            return nan
        if x < 1:
            return 0.0
        if x == inf:
            return 1.0
        return -expm1(self._log_survival(x))

    def complementary_cumulative(self, x: float) -> float:
        if isnan(x):
            return nan
        if x < 1:
            return 1.0
        if x == inf:
            return 0.0
        return exp(self._log_survival(x))

    def mean(self) -> float:
        s = self.success
        return inf if s == 0.0 else 1.0 / s

    def variance(self) -> float:
        s = self.success
        return inf if s == 0.0 else (1.0 - s) / (s * s)

    def std_dev(self) -> float:
        return std_dev_from_variance(self)


def geometric(success: float) -> GeometricDistribution:
    """
    Create a geometric distribution.

    Parameters
    ----------
    success : float
        Success rate, must lie in ``[0, 1]`` (both ends included).

    Raises
    ------
    ValueError
        If ``success`` is outside ``[0, 1]``.
    """
    return GeometricDistribution(success=float(success))


__all__ = [
    "GeometricDistribution",
    "geometric",
]
