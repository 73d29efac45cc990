"""
Exponential distribution.

The continuous probability distribution of the times between events in a
Poisson process, in which events occur continuously and independently at a
constant average rate.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import exp, expm1, inf, log
from typing import TYPE_CHECKING

import numpy as np

from pysatl_distr.distributions.distribution import ContinuousDistribution, Variance
from pysatl_distr.distributions.statistics import std_dev_from_variance
from pysatl_distr.distributions.support import ContinuousSupport
from pysatl_distr.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distr.types import FamilyName

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pysatl_distr.types import NumericArray

_SUPPORT = ContinuousSupport(left=0.0)


@parametrization(family=FamilyName.EXPONENTIAL, name="rate")
@dataclass(frozen=True, slots=True)
class ExponentialDistribution(Parametrization, ContinuousDistribution, Variance):
    """
    Exponential distribution.

    Probability density function:
        f(x) = λ * exp(-λ * x) for x ≥ 0

    Quantiles are obtained by numerically inverting the cumulative
    distribution function.

    Parameters
    ----------
    lambda_ : float
        Rate parameter (λ) of the distribution.
    """

    lambda_: float

    @constraint(description="0 < lambda_ < inf")
    def check_lambda_positive(self) -> bool:
        """Check that rate parameter is positive and finite."""
        return 0 < self.lambda_ < inf

    @property
    def support(self) -> ContinuousSupport:
        """Support of exponential distribution: ``[0, inf)``."""
        return _SUPPORT

    def density(self, x: float) -> float:
        if x < 0:
            return 0.0
        return self.lambda_ * exp(-self.lambda_ * x)

    def log_density(self, x: float) -> float:
        if x < 0:
            return -inf
        return log(self.lambda_) - self.lambda_ * x

    def cumulative(self, x: float) -> float:
        if x < 0:
            return 0.0
        return -expm1(-self.lambda_ * x)

    def complementary_cumulative(self, x: float) -> float:
        if x < 0:
            return 1.0
        return exp(-self.lambda_ * x)

    def mean(self) -> float:
        return 1.0 / self.lambda_

    def variance(self) -> float:
        return 1.0 / (self.lambda_**2)

    def std_dev(self) -> float:
        return std_dev_from_variance(self)


def exponential_from_rate(lambda_: float) -> ExponentialDistribution:
    """
    Create an exponential distribution from its rate.

    Raises
    ------
    ValueError
        If ``lambda_`` is not positive and finite.
    """
    return ExponentialDistribution(lambda_=float(lambda_))


def exponential_from_sample(sample: Sequence[float] | NumericArray) -> ExponentialDistribution:
    """
    Create an exponential distribution whose rate is the sample mean.

    Parameters
    ----------
    sample : Sequence[float] or NumericArray
        One-dimensional sample.

    Raises
    ------
    ValueError
        If the sample is empty or its mean is not a valid rate.
    """
    data = np.asarray(sample, dtype=np.float64)
    if data.size == 0:
        raise ValueError("Sample must be non-empty")
    return exponential_from_rate(float(np.mean(data)))


__all__ = [
    "ExponentialDistribution",
    "exponential_from_rate",
    "exponential_from_sample",
]
