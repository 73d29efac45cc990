"""
Distribution Capabilities
=========================

This module defines the capability protocols a distribution may satisfy.
There is no single base class: a distribution is described by the set of
protocols it implements.

- :class:`Distribution` – has a CDF (and a complementary CDF).
- :class:`DiscreteDistribution` – has a probability mass function.
- :class:`ContinuousDistribution` – has a density and a quantile function.
- :class:`MaybeMean` / :class:`Mean` – has a (possibly undefined) mean.
- :class:`MaybeVariance` / :class:`Variance` – has a (possibly undefined)
  variance and standard deviation.

Notes
-----
- All protocols are ``runtime_checkable``, so capabilities can be queried with
  ``isinstance``.
- Default method bodies are inherited only by classes that subclass the
  protocol explicitly. Structural implementations must provide every member.
- Undefined statistics are reported as ``None``, never as NaN.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf, isfinite, log
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pysatl_distr.distributions.rootfinding import expand_bracket, find_root
from pysatl_distr.distributions.statistics import (
    maybe_std_dev_from_variance,
    maybe_variance_from_std_dev,
    std_dev_from_variance,
    variance_from_std_dev,
)
from pysatl_distr.distributions.summation import cdf_from_probability
from pysatl_distr.distributions.support import NON_NEGATIVE_INTEGERS, REAL_LINE

if TYPE_CHECKING:
    from pysatl_distr.distributions.support import ContinuousSupport, DiscreteSupport


def check_probability(p: float) -> None:
    """
    Ensure ``p`` is a probability.

    Raises
    ------
    ValueError
        If ``p`` is outside ``[0, 1]`` or is NaN.
    """
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"Probability must be in [0, 1], got {p!r}")


def _overrides(obj: object, owner: type, name: str) -> bool:
    return getattr(type(obj), name) is not getattr(owner, name)


@runtime_checkable
class Distribution(Protocol):
    """Distribution with a cumulative distribution function."""

    def cumulative(self, x: float) -> float:
        """Cumulative distribution function ``P(X <= x)``."""
        ...

    def complementary_cumulative(self, x: float) -> float:
        """
        One's complement of the cumulative distribution, ``P(X > x)``.

        Implementations are encouraged to override this when ``1 - cdf``
        loses precision in the upper tail.
        """
        return 1.0 - self.cumulative(x)


@runtime_checkable
class DiscreteDistribution(Distribution, Protocol):
    """Distribution over integers with a probability mass function."""

    @property
    def support(self) -> DiscreteSupport:
        return NON_NEGATIVE_INTEGERS

    def probability(self, n: int) -> float:
        """Probability of the ``n``-th outcome; zero outside the support."""
        ...

    def log_probability(self, n: int) -> float:
        p = self.probability(n)
        return log(p) if p > 0.0 else -inf

    def cumulative(self, x: float) -> float:
        return cdf_from_probability(self, x)


@runtime_checkable
class ContinuousDistribution(Distribution, Protocol):
    """Distribution with a probability density function."""

    @property
    def support(self) -> ContinuousSupport:
        return REAL_LINE

    def density(self, x: float) -> float:
        """Probability density at ``x``."""
        ...

    def log_density(self, x: float) -> float:
        d = self.density(x)
        return log(d) if d > 0.0 else -inf

    def quantile(self, p: float) -> float:
        """
        Inverse of the cumulative distribution function.

        The value ``x`` for which ``P(X <= x) = p``, found with
        :func:`~pysatl_distr.distributions.rootfinding.find_root` inside a
        bracket built from the support. Infinite support ends are replaced by
        finite points found with steps sized by the standard deviation (or the
        mean) when the distribution provides one.

        Raises
        ------
        ValueError
            If ``p`` is outside ``[0, 1]``.
        """
        check_probability(p)

        support = self.support
        if p == 0.0:
            return support.left
        if p == 1.0:
            return support.right

        m = self.maybe_mean() if isinstance(self, MaybeMean) else None
        if m is not None and not isfinite(m):
            m = None

        lo, hi = expand_bracket(
            self.cumulative,
            p,
            support.left,
            support.right,
            x0=0.0 if m is None else m,
            init_step=_bracket_step(self, m),
        )

        guess = m if m is not None and lo <= m <= hi else 0.5 * (lo + hi)
        return find_root(self, p, guess, lo, hi)


def _bracket_step(distribution: ContinuousDistribution, mean: float | None) -> float:
    """Initial bracket growth step: the standard deviation, else ``|mean|``, else one."""
    if isinstance(distribution, MaybeVariance):
        s = distribution.maybe_std_dev()
        if s is not None and isfinite(s) and s > 0.0:
            return s
    if mean is not None and mean != 0.0:
        return abs(mean)
    return 1.0


@runtime_checkable
class MaybeMean(Protocol):
    """Distribution whose mean may be undefined for some parameter values."""

    def maybe_mean(self) -> float | None: ...


@runtime_checkable
class Mean(MaybeMean, Protocol):
    """Distribution with a finite mean for all valid parameter values."""

    def mean(self) -> float: ...

    def maybe_mean(self) -> float | None:
        return self.mean()


@runtime_checkable
class MaybeVariance(MaybeMean, Protocol):
    """
    Distribution whose variance may be undefined for some parameter values.

    If the variance is undefined, both :meth:`maybe_variance` and
    :meth:`maybe_std_dev` return ``None``. Minimal complete definition is
    either of the two.
    """

    def maybe_variance(self) -> float | None:
        if not _overrides(self, MaybeVariance, "maybe_std_dev"):
            raise NotImplementedError(
                f"{type(self).__name__} must define maybe_variance or maybe_std_dev."
            )
        return maybe_variance_from_std_dev(self)

    def maybe_std_dev(self) -> float | None:
        if not _overrides(self, MaybeVariance, "maybe_variance"):
            raise NotImplementedError(
                f"{type(self).__name__} must define maybe_variance or maybe_std_dev."
            )
        return maybe_std_dev_from_variance(self)


@runtime_checkable
class Variance(Mean, MaybeVariance, Protocol):
    """
    Distribution with a finite variance for all valid parameter values.

    Minimal complete definition is :meth:`variance` or :meth:`std_dev`.
    """

    def variance(self) -> float:
        if not _overrides(self, Variance, "std_dev"):
            raise NotImplementedError(f"{type(self).__name__} must define variance or std_dev.")
        return variance_from_std_dev(self)

    def std_dev(self) -> float:
        if not _overrides(self, Variance, "variance"):
            raise NotImplementedError(f"{type(self).__name__} must define variance or std_dev.")
        return std_dev_from_variance(self)

    def maybe_variance(self) -> float | None:
        return self.variance()

    def maybe_std_dev(self) -> float | None:
        return self.std_dev()


__all__ = [
    "check_probability",
    "Distribution",
    "DiscreteDistribution",
    "ContinuousDistribution",
    "MaybeMean",
    "Mean",
    "MaybeVariance",
    "Variance",
]
