"""
Characteristics API
===================

Uniform functional access to distribution characteristics.

Each object in this module is a :class:`GenericCharacteristic`: calling it
with a distribution checks that the distribution satisfies the required
capability protocol and delegates to the corresponding method::

    >>> from pysatl_distr import cumulative, exponential_from_rate
    >>> cumulative(exponential_from_rate(1.0), 0.0)
    0.0

Notes
-----
- The characteristic name controls *what* is computed (e.g., ``"cdf"``).
- A distribution lacking the capability raises :class:`TypeError`.
"""

__author__ = "Leonid Elkin, Mikhail, Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import Any, cast

from pysatl_distr.distributions.distribution import (
    ContinuousDistribution,
    DiscreteDistribution,
    Distribution,
    MaybeMean,
    MaybeVariance,
    Mean,
    Variance,
)
from pysatl_distr.types import CharacteristicName, GenericCharacteristicName


@dataclass(slots=True, frozen=True)
class GenericCharacteristic[In, Out]:
    """
    Callable characteristic descriptor.

    Parameters
    ----------
    name : str
        Characteristic identifier (e.g., ``"pdf"``, ``"cdf"`` or ``"ppf"``).
    capability : type
        Capability protocol the distribution must satisfy.
    method : str
        Name of the method implementing the characteristic.
    """

    name: GenericCharacteristicName
    capability: type[Any]
    method: str

    def __call__(self, distribution: Any, *data: In) -> Out:
        """
        Evaluate the characteristic.

        Parameters
        ----------
        distribution : Any
            Distribution satisfying :attr:`capability`.
        *data : Any
            Evaluation point, if the characteristic takes one.

        Raises
        ------
        TypeError
            If the distribution does not satisfy the capability.
        """
        if not isinstance(distribution, self.capability):
            raise TypeError(
                f"{type(distribution).__name__} does not provide '{self.name}': "
                f"{self.capability.__name__} capability is required."
            )
        return cast(Out, getattr(distribution, self.method)(*data))


cumulative = GenericCharacteristic[float, float](CharacteristicName.CDF, Distribution, "cumulative")
complementary_cumulative = GenericCharacteristic[float, float](
    CharacteristicName.SF, Distribution, "complementary_cumulative"
)

probability = GenericCharacteristic[int, float](
    CharacteristicName.PMF, DiscreteDistribution, "probability"
)
log_probability = GenericCharacteristic[int, float](
    CharacteristicName.LOG_PMF, DiscreteDistribution, "log_probability"
)

density = GenericCharacteristic[float, float](
    CharacteristicName.PDF, ContinuousDistribution, "density"
)
log_density = GenericCharacteristic[float, float](
    CharacteristicName.LOG_PDF, ContinuousDistribution, "log_density"
)
quantile = GenericCharacteristic[float, float](
    CharacteristicName.PPF, ContinuousDistribution, "quantile"
)

mean = GenericCharacteristic[Any, float](CharacteristicName.MEAN, Mean, "mean")
maybe_mean = GenericCharacteristic[Any, float | None](CharacteristicName.MEAN, MaybeMean, "maybe_mean")

variance = GenericCharacteristic[Any, float](CharacteristicName.VAR, Variance, "variance")
maybe_variance = GenericCharacteristic[Any, float | None](
    CharacteristicName.VAR, MaybeVariance, "maybe_variance"
)
std_dev = GenericCharacteristic[Any, float](CharacteristicName.STD, Variance, "std_dev")
maybe_std_dev = GenericCharacteristic[Any, float | None](
    CharacteristicName.STD, MaybeVariance, "maybe_std_dev"
)


__all__ = [
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
]
