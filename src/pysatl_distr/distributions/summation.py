"""
Discrete Summation
==================

Cumulative probabilities of discrete distributions obtained by summing the
probability mass function over an integer range.

Notes
-----
The summed value is clamped to ``1.0``: accumulated roundoff over many terms
may push it slightly above one. :func:`raw_probability_sum` exposes the
unclamped value so the clamp itself stays testable.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import floor, inf, isnan, nan
from typing import TYPE_CHECKING

import numpy as np

from pysatl_distr.distributions.support import DiscreteSupport

if TYPE_CHECKING:
    from pysatl_distr.distributions.distribution import DiscreteDistribution


def raw_probability_sum(distribution: DiscreteDistribution, low: int, high: int) -> float:
    """
    Sum of ``probability(k)`` for integer ``k`` in ``[low, high]``, not clamped.

    Returns ``0.0`` for an empty range.
    """
    if high < low:
        return 0.0
    masses = np.fromiter(
        (distribution.probability(k) for k in range(low, high + 1)),
        dtype=np.float64,
        count=high - low + 1,
    )
    return float(masses.sum())


def sum_probabilities(distribution: DiscreteDistribution, low: int, high: int) -> float:
    """Sum probabilities in the inclusive range ``[low, high]``, clamped to ``1.0``."""
    return min(1.0, raw_probability_sum(distribution, low, high))


def cdf_from_probability(distribution: DiscreteDistribution, x: float) -> float:
    """
    Build ``P(X <= x)`` from the probability mass function.

    Sums masses from the first point of the distribution's support up to
    ``floor(x)`` (capped at the last support point, if any).

    Parameters
    ----------
    distribution : DiscreteDistribution
        Distribution exposing ``probability`` and a discrete ``support``.
    x : float
        Evaluation point.

    Returns
    -------
    float
        Cumulative probability in ``[0, 1]`` (NaN for NaN input).

    Raises
    ------
    RuntimeError
        If the support is not discrete or has no smallest point.
    """
    support = distribution.support
    if not isinstance(support, DiscreteSupport):
        raise RuntimeError("Discrete support is required for pmf->cdf.")

    low = support.first()
    if low is None:
        raise RuntimeError(
            "pmf->cdf requires a left-bounded support. Provide an analytical "
            "cumulative function for this distribution."
        )

    if isnan(x):
        return nan
    if x == inf:
        return 1.0

    high = floor(x) if x > -inf else low - 1
    last = support.last()
    if last is not None:
        high = min(high, last)

    return sum_probabilities(distribution, low, high)


__all__ = [
    "raw_probability_sum",
    "sum_probabilities",
    "cdf_from_probability",
]
