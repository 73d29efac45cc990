from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_distr.types import BoolArray, Interval1D, Number, NumericArray


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


class ContinuousSupport(Interval1D, Support): ...


@runtime_checkable
class DiscreteSupport(Support, Protocol):
    def first(self) -> int | None: ...

    def last(self) -> int | None: ...


@dataclass(slots=True, frozen=True)
class IntegerLatticeDiscreteSupport(DiscreteSupport):
    """
    Integer lattice ``{k : k ≡ residue (mod modulus), min_k <= k <= max_k}``.

    ``None`` bounds mean the lattice is unbounded on that side.
    """

    residue: int = 0
    modulus: int = 1
    min_k: int | None = None
    max_k: int | None = None

    def __post_init__(self) -> None:
        if self.modulus <= 0:
            raise ValueError("modulus must be a positive integer.")

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        finite = np.isfinite(xf)
        v = np.floor(np.where(finite, xf, 0.0)).astype(int)
        mask = finite & (xf == v)

        if self.min_k is not None:
            mask &= v >= self.min_k
        if self.max_k is not None:
            mask &= v <= self.max_k

        mask &= ((v - self.residue) % self.modulus) == 0

        result = mask.astype(bool)

        if np.ndim(xf) == 0:
            return bool(result)
        return cast(BoolArray, result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))

    def first(self) -> int | None:
        """Smallest lattice point, or ``None`` if the lattice is left-unbounded or empty."""
        if self.min_k is None:
            return None
        first = self.min_k
        offset = (first - self.residue) % self.modulus
        if offset != 0:
            first = first + (self.modulus - offset)
        if self.max_k is not None and first > self.max_k:
            return None
        return first

    def last(self) -> int | None:
        """Largest lattice point, or ``None`` if the lattice is right-unbounded or empty."""
        if self.max_k is None:
            return None
        last = self.max_k
        offset = (last - self.residue) % self.modulus
        last = last - offset
        if self.min_k is not None and last < self.min_k:
            return None
        return last


NON_NEGATIVE_INTEGERS = IntegerLatticeDiscreteSupport(min_k=0)
"""Default support of discrete distributions: ``{0, 1, 2, ...}``."""

REAL_LINE = ContinuousSupport()
"""Default support of continuous distributions: ``(-inf, inf)``."""


__all__ = [
    # Base support protocol
    "Support",
    "ContinuousSupport",
    # Discrete support protocol and implementations
    "DiscreteSupport",
    "IntegerLatticeDiscreteSupport",
    # Defaults
    "NON_NEGATIVE_INTEGERS",
    "REAL_LINE",
]
