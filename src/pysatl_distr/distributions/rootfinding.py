"""
Quantile Root Finding
=====================

Numerical inversion of a continuous cumulative distribution function.

- :func:`find_root` – hybrid Newton-Raphson / bisection search for the ``x``
  at which ``cdf(x)`` reaches a target probability.
- :func:`find_root_result` – the same search returning iteration diagnostics.
- :func:`expand_bracket` – turns an infinite search interval into a finite
  bracket around the target probability.

Notes
-----
Every call is independent: the iteration state lives in local variables only,
so the functions are safe to call concurrently on shared distributions.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from dataclasses import dataclass
from math import isfinite
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pysatl_distr.distributions.distribution import ContinuousDistribution
    from pysatl_distr.types import ScalarFunc

ACCURACY = 1e-15
"""Step size below which the search stops."""

MAX_ITERATIONS = 150
"""Hard cap on the number of iterations."""


@dataclass(frozen=True, slots=True)
class RootFindingResult:
    """
    Outcome of :func:`find_root_result`.

    Parameters
    ----------
    root : float
        Final estimate of ``x`` with ``cdf(x) ≈ prob``.
    iterations : int
        Number of iterations performed.
    converged : bool
        ``True`` if the last step was not larger than the requested accuracy,
        ``False`` if the iteration cap stopped the search.
    lo, hi : float
        Bracket at termination.
    """

    root: float
    iterations: int
    converged: bool
    lo: float
    hi: float


def find_root_result(
    distribution: ContinuousDistribution,
    prob: float,
    guess: float,
    lo: float,
    hi: float,
    *,
    accuracy: float = ACCURACY,
    max_iterations: int = MAX_ITERATIONS,
) -> RootFindingResult:
    """
    Approximate the ``x`` for which ``P(X <= x) = prob``.

    Newton-Raphson steps use the density as the derivative of the CDF. Each
    iteration narrows ``[lo, hi]`` around the root; a Newton step landing
    outside the bracket, or a zero density, is replaced by bisection.

    Parameters
    ----------
    distribution : ContinuousDistribution
        Provides ``cumulative`` and ``density``.
    prob : float
        Target probability.
    guess : float
        Initial estimate, expected (not checked) to lie in ``[lo, hi]``.
    lo, hi : float
        Interval in which the distribution reaches ``prob``.
    accuracy : float, default 1e-15
        Stop once the step size is not larger than this.
    max_iterations : int, default 150
        Stop after this many iterations.

    Returns
    -------
    RootFindingResult
        Estimate together with iteration diagnostics.
    """
    i = 0
    dx = 1.0
    x = guess

    while abs(dx) > accuracy and i < max_iterations:
        err = distribution.cumulative(x) - prob
        if err < 0:
            lo = x
        else:
            hi = x

        pdf = distribution.density(x)
        if pdf != 0:
            newton_dx = err / pdf
            newton_x = x - newton_dx
        else:
            newton_dx, newton_x = dx, x

        if pdf == 0 or newton_x < lo or newton_x > hi:
            y = 0.5 * (lo + hi)
            dx = y - x
            x = y
        else:
            dx, x = newton_dx, newton_x

        i += 1

    return RootFindingResult(root=x, iterations=i, converged=abs(dx) <= accuracy, lo=lo, hi=hi)


def find_root(
    distribution: ContinuousDistribution,
    prob: float,
    guess: float,
    lo: float,
    hi: float,
    *,
    accuracy: float = ACCURACY,
    max_iterations: int = MAX_ITERATIONS,
) -> float:
    """
    Approximate the ``x`` for which ``P(X <= x) = prob``.

    See :func:`find_root_result` for the parameters; this returns the root only.
    """
    return find_root_result(
        distribution,
        prob,
        guess,
        lo,
        hi,
        accuracy=accuracy,
        max_iterations=max_iterations,
    ).root


def expand_bracket(
    cdf: ScalarFunc,
    prob: float,
    lo: float,
    hi: float,
    *,
    x0: float = 0.0,
    init_step: float = 1.0,
    expand_factor: float = 2.0,
    max_expand: int = 60,
) -> tuple[float, float]:
    """
    Replace infinite ends of ``[lo, hi]`` by finite points bracketing ``prob``.

    Finite ends are kept as they are. An infinite end is first placed
    ``init_step`` away from the opposite end (or from ``x0`` when both are
    infinite) and then pushed outwards with geometrically growing steps until
    ``cdf(lo) <= prob`` (resp. ``cdf(hi) >= prob``).

    Parameters
    ----------
    cdf : Callable[[float], float]
        Monotone cumulative distribution function.
    prob : float
        Target probability.
    lo, hi : float
        Search interval, usually the support bounds.
    x0 : float, default 0.0
        Bracket center when both ends are infinite.
    init_step : float, default 1.0
        Initial distance of a replaced end.
    expand_factor : float, default 2.0
        Multiplicative step growth.
    max_expand : int, default 60
        Maximum number of growth steps per end.

    Returns
    -------
    tuple[float, float]
        Finite bracket ``(lo, hi)``.

    Warns
    -----
    RuntimeWarning
        If ``prob`` is still not bracketed after ``max_expand`` steps; the
        widest bracket reached is returned.
    """
    center = x0 if not (isfinite(lo) or isfinite(hi)) else None

    if not isfinite(lo):
        step = init_step
        lo = (hi if center is None else center) - step
        for _ in range(max_expand):
            if cdf(lo) <= prob:
                break
            step *= expand_factor
            lo -= step
        else:
            if cdf(lo) > prob:
                _warn_unbracketed(prob, "lower", lo)

    if not isfinite(hi):
        step = init_step
        hi = (lo if center is None else center) + step
        for _ in range(max_expand):
            if cdf(hi) >= prob:
                break
            step *= expand_factor
            hi += step
        else:
            if cdf(hi) < prob:
                _warn_unbracketed(prob, "upper", hi)

    return lo, hi


def _warn_unbracketed(prob: float, side: str, bound: float) -> None:
    warnings.warn(
        f"Could not bracket probability {prob!r}: {side} bound stopped at {bound!r}.",
        RuntimeWarning,
        stacklevel=3,
    )


__all__ = [
    "ACCURACY",
    "MAX_ITERATIONS",
    "RootFindingResult",
    "find_root",
    "find_root_result",
    "expand_bracket",
]
