"""
Derived statistics: variance from standard deviation and vice versa.

Distributions implementing only one of the pair use these helpers for the
other. An undefined (``None``) input yields an undefined output.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import sqrt
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pysatl_distr.distributions.distribution import MaybeVariance, Variance


def maybe_variance_from_std_dev(distribution: MaybeVariance) -> float | None:
    s = distribution.maybe_std_dev()
    return None if s is None else s * s


def maybe_std_dev_from_variance(distribution: MaybeVariance) -> float | None:
    v = distribution.maybe_variance()
    return None if v is None else sqrt(v)


def variance_from_std_dev(distribution: Variance) -> float:
    s = distribution.std_dev()
    return s * s


def std_dev_from_variance(distribution: Variance) -> float:
    return sqrt(distribution.variance())


__all__ = [
    "maybe_variance_from_std_dev",
    "maybe_std_dev_from_variance",
    "variance_from_std_dev",
    "std_dev_from_variance",
]
