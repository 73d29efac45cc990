from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from pysatl_distr.distributions import (
    ContinuousDistribution,
    DiscreteDistribution,
    Distribution,
    MaybeMean,
    MaybeVariance,
    Mean,
    Variance,
    check_probability,
    complementary_cumulative,
    cumulative,
    density,
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
from pysatl_distr.distributions.support import NON_NEGATIVE_INTEGERS, REAL_LINE
from pysatl_distr.families import exponential_from_rate, geometric
from pysatl_distr.types import CharacteristicName
from tests.utils.mocks import (
    ConstantMassDistribution,
    GapUniformDistribution,
    LogisticDistribution,
    StdDevOnly,
    StructuralDistribution,
    TableDistribution,
)


class TestCapabilityMembership:
    @pytest.mark.parametrize(
        "distribution, capabilities",
        [
            (
                geometric(0.3),
                {Distribution, DiscreteDistribution, MaybeMean, Mean, MaybeVariance, Variance},
            ),
            (
                exponential_from_rate(2.0),
                {Distribution, ContinuousDistribution, MaybeMean, Mean, MaybeVariance, Variance},
            ),
            (LogisticDistribution(), {Distribution, ContinuousDistribution}),
            (TableDistribution((1.0,)), {Distribution, DiscreteDistribution}),
            (StructuralDistribution(), {Distribution}),
            (StdDevOnly(1.0), {MaybeMean, MaybeVariance}),
        ],
        ids=["geometric", "exponential", "logistic", "table", "structural", "maybe_variance"],
    )
    def test_isinstance(self, distribution, capabilities):
        every = {
            Distribution,
            DiscreteDistribution,
            ContinuousDistribution,
            MaybeMean,
            Mean,
            MaybeVariance,
            Variance,
        }
        for capability in every:
            assert isinstance(distribution, capability) is (capability in capabilities), (
                capability.__name__
            )


class TestDefaults:
    def test_complementary_cumulative(self):
        d = LogisticDistribution()
        assert d.complementary_cumulative(1.0) == 1.0 - d.cumulative(1.0)

    def test_default_supports(self):
        assert LogisticDistribution().support is REAL_LINE
        assert ConstantMassDistribution(mass=0.5, count=2).support is NON_NEGATIVE_INTEGERS

    def test_log_probability(self):
        d = TableDistribution((0.25, 0.0, 0.75))

        assert d.log_probability(0) == pytest.approx(math.log(0.25))
        assert d.log_probability(1) == -math.inf
        assert d.log_probability(5) == -math.inf

    def test_log_density(self):
        d = GapUniformDistribution()

        assert d.log_density(0.5) == pytest.approx(math.log(0.5))
        assert d.log_density(1.5) == -math.inf

    def test_maybe_mean_from_mean(self):
        assert geometric(0.25).maybe_mean() == 4.0


class TestQuantile:
    @pytest.mark.parametrize("p", [0.001, 0.1, 0.5, 0.9, 0.999])
    def test_logistic_on_real_line(self, p):
        d = LogisticDistribution(loc=3.0, scale=0.5)
        expected = 3.0 + 0.5 * math.log(p / (1.0 - p))
        assert d.quantile(p) == pytest.approx(expected, abs=1e-9)

    @pytest.mark.parametrize("p", [0.1, 0.6, 0.95])
    def test_bounded_support(self, p):
        d = GapUniformDistribution()
        assert d.cumulative(d.quantile(p)) == pytest.approx(p, abs=1e-12)

    def test_probability_bounds_return_support_bounds(self):
        d = GapUniformDistribution()

        assert d.quantile(0.0) == 0.0
        assert d.quantile(1.0) == 3.0
        assert LogisticDistribution().quantile(0.0) == -math.inf
        assert LogisticDistribution().quantile(1.0) == math.inf

    @pytest.mark.parametrize("p", [-0.1, 1.5, math.nan])
    def test_invalid_probability(self, p):
        with pytest.raises(ValueError, match="Probability must be in"):
            LogisticDistribution().quantile(p)

    @pytest.mark.parametrize("p", [0.0, 0.5, 1.0])
    def test_check_probability_accepts(self, p):
        check_probability(p)


class TestCharacteristics:
    def test_dispatch(self):
        g = geometric(0.5)
        e = exponential_from_rate(2.0)

        assert cumulative(g, 2.0) == g.cumulative(2.0)
        assert complementary_cumulative(e, 1.0) == e.complementary_cumulative(1.0)
        assert probability(g, 3) == 0.125
        assert log_probability(g, 1) == pytest.approx(math.log(0.5))
        assert density(e, 0.0) == 2.0
        assert quantile(e, e.cumulative(0.7)) == pytest.approx(0.7, abs=1e-9)
        assert mean(g) == 2.0
        assert maybe_mean(e) == 0.5
        assert variance(e) == 0.25
        assert std_dev(e) == 0.5
        assert maybe_variance(g) == 2.0
        assert maybe_std_dev(StdDevOnly(None)) is None

    def test_name(self):
        assert quantile.name == CharacteristicName.PPF
        assert cumulative.name == "cdf"

    @pytest.mark.parametrize(
        "characteristic, distribution, capability",
        [
            (density, geometric(0.5), "ContinuousDistribution"),
            (probability, exponential_from_rate(1.0), "DiscreteDistribution"),
            (mean, LogisticDistribution(), "Mean"),
            (variance, StdDevOnly(1.0), "Variance"),
            (cumulative, object(), "Distribution"),
        ],
        ids=["density_of_discrete", "pmf_of_continuous", "mean", "variance", "not_a_distribution"],
    )
    def test_missing_capability(self, characteristic, distribution, capability):
        with pytest.raises(TypeError, match=f"{capability} capability is required"):
            characteristic(distribution, 1)
