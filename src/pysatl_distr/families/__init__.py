"""
Families subpackage

Concrete parametrized distributions:

- geometric distribution (:mod:`.geometric`);
- exponential distribution (:mod:`.exponential`);
- parametrization and constraint machinery (:mod:`.parametrizations`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .exponential import ExponentialDistribution, exponential_from_rate, exponential_from_sample
from .geometric import GeometricDistribution, geometric
from .parametrizations import Parametrization, ParametrizationConstraint, constraint, parametrization

__all__ = [
    "GeometricDistribution",
    "geometric",
    "ExponentialDistribution",
    "exponential_from_rate",
    "exponential_from_sample",
    "Parametrization",
    "ParametrizationConstraint",
    "constraint",
    "parametrization",
]
