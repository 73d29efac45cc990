from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf, nan

import numpy as np
import pytest

from pysatl_distr.distributions.support import (
    NON_NEGATIVE_INTEGERS,
    REAL_LINE,
    ContinuousSupport,
    DiscreteSupport,
    IntegerLatticeDiscreteSupport,
    Support,
)


class TestContinuousSupport:
    support_example = ContinuousSupport(left=0.0, right=1.0, left_closed=True, right_closed=False)

    @pytest.mark.parametrize(
        "point, expected_result",
        [
            (0, True),
            (1, False),
            (0.5, True),
            (-0.1, False),
            (inf, False),
            (-inf, False),
        ],
        ids=[
            "left_bound_closed",
            "right_bound_open",
            "inside_interval",
            "outside_interval",
            "+inf",
            "-inf",
        ],
    )
    def test_contains_scalar(self, point, expected_result):
        assert (point in self.support_example) is expected_result
        assert self.support_example.contains(point) is expected_result

    @pytest.mark.parametrize("infinity", [-inf, inf])
    def test_real_line_doesnt_contain_inf(self, infinity):
        assert infinity not in REAL_LINE
        assert REAL_LINE.contains(infinity) is False

    def test_contains_array(self):
        result = self.support_example.contains(np.array([-1.0, 0.0, 0.5, 1.0]))
        assert isinstance(result, np.ndarray)
        assert result.tolist() == [False, True, True, False]

    def test_is_support(self):
        assert isinstance(REAL_LINE, Support)
        assert not isinstance(REAL_LINE, DiscreteSupport)


class TestIntegerLatticeDiscreteSupport:
    @pytest.mark.parametrize(
        "point, expected_result",
        [(0, True), (3, True), (2.0, True), (2.5, False), (-1, False), (inf, False), (nan, False)],
        ids=["zero", "positive", "integral_float", "fraction", "negative", "inf", "nan"],
    )
    def test_non_negative_integers_contains(self, point, expected_result):
        assert (point in NON_NEGATIVE_INTEGERS) is expected_result

    def test_contains_array(self):
        support = IntegerLatticeDiscreteSupport(residue=1, modulus=2, min_k=0, max_k=7)
        result = support.contains(np.array([0, 1, 2, 3, 7, 9]))
        assert result.tolist() == [False, True, False, True, True, False]

    @pytest.mark.parametrize(
        "support, first, last",
        [
            (IntegerLatticeDiscreteSupport(min_k=1), 1, None),
            (IntegerLatticeDiscreteSupport(min_k=0, max_k=4), 0, 4),
            (IntegerLatticeDiscreteSupport(residue=1, modulus=3, min_k=2, max_k=12), 4, 10),
            (IntegerLatticeDiscreteSupport(max_k=5), None, 5),
            (IntegerLatticeDiscreteSupport(residue=0, modulus=5, min_k=1, max_k=4), None, None),
        ],
        ids=["ray", "bounded", "strided", "left_unbounded", "empty"],
    )
    def test_first_and_last(self, support, first, last):
        assert support.first() == first
        assert support.last() == last

    def test_invalid_modulus(self):
        with pytest.raises(ValueError, match="modulus"):
            IntegerLatticeDiscreteSupport(modulus=0)

    def test_is_discrete_support(self):
        assert isinstance(NON_NEGATIVE_INTEGERS, DiscreteSupport)
