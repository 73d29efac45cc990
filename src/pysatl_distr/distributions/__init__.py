"""
Distributions subpackage

Capability interfaces and numerical helpers for probability distributions used
by PySATL Distr:

- capability protocols (:mod:`.distribution`);
- uniform functional API over capabilities (:mod:`.characteristics`);
- quantile root finding (:mod:`.rootfinding`);
- discrete summation of probability masses (:mod:`.summation`);
- derived statistics (:mod:`.statistics`);
- supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .characteristics import (
    GenericCharacteristic,
    complementary_cumulative,
    cumulative,
    density,
    log_density,
    log_probability,
    maybe_mean,
    maybe_std_dev,
    maybe_variance,
    mean,
    probability,
    quantile,
    std_dev,
    variance,
)
from .distribution import (
    ContinuousDistribution,
    DiscreteDistribution,
    Distribution,
    MaybeMean,
    MaybeVariance,
    Mean,
    Variance,
    check_probability,
)
from .rootfinding import RootFindingResult, expand_bracket, find_root, find_root_result
from .statistics import (
    maybe_std_dev_from_variance,
    maybe_variance_from_std_dev,
    std_dev_from_variance,
    variance_from_std_dev,
)
from .summation import cdf_from_probability, raw_probability_sum, sum_probabilities
from .support import (
    ContinuousSupport,
    DiscreteSupport,
    IntegerLatticeDiscreteSupport,
    Support,
)

__all__ = [
    # capabilities
    "Distribution",
    "DiscreteDistribution",
    "ContinuousDistribution",
    "MaybeMean",
    "Mean",
    "MaybeVariance",
    "Variance",
    "check_probability",
    # functional API
    "GenericCharacteristic",
    "cumulative",
    "complementary_cumulative",
    "probability",
    "log_probability",
    "density",
    "log_density",
    "quantile",
    "mean",
    "maybe_mean",
    "variance",
    "maybe_variance",
    "std_dev",
    "maybe_std_dev",
    # root finding
    "RootFindingResult",
    "find_root",
    "find_root_result",
    "expand_bracket",
    # summation
    "raw_probability_sum",
    "sum_probabilities",
    "cdf_from_probability",
    # derived statistics
    "maybe_variance_from_std_dev",
    "maybe_std_dev_from_variance",
    "variance_from_std_dev",
    "std_dev_from_variance",
    # supports
    "Support",
    "ContinuousSupport",
    "DiscreteSupport",
    "IntegerLatticeDiscreteSupport",
]
