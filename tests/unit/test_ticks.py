import numpy as np
import pytest

from modlogscale import ModifiedLogScale
from modlogscale.MLLinear import LinearScale


DOMAINS = [(-100, 100), (10, 1000), (1, 1000), (-3, 250), (-5000, -20), (0, 5),
           (-1e6, 37), (250, 2), (-0.5, 0.5), (12, 13)]


def test_symmetric_domain(symmetric_scale):
    ticks = symmetric_scale.ticks()
    np.testing.assert_allclose(ticks, [-100, -70, -40, -10, -5, 0, 5, 10, 40, 70, 100])


def test_pivot_boundary_not_duplicated(symmetric_scale):
    ticks = symmetric_scale.ticks()
    assert np.sum(np.isclose(ticks, 10)) == 1
    assert np.sum(np.isclose(ticks, -10)) == 1


def test_log_only_domain_uses_clusters(scale):
    scale.setDomain(10, 1000)
    ticks = scale.ticks(10)
    np.testing.assert_allclose(ticks, [20, 40, 60, 80, 100, 200, 400, 600, 800, 1000])


def test_tick_budget_without_zero_crossing(scale):
    for lo, hi, count in [(10, 1000, 10), (10, 100000, 8), (100, 10000, 6)]:
        scale.setDomain(lo, hi)
        assert abs(len(scale.ticks(count)) - count) <= 1


def test_negative_domain_mirrors_positive():
    positive = ModifiedLogScale(10)
    positive.setDomain(20, 5000)
    negative = ModifiedLogScale(10)
    negative.setDomain(-5000, -20)
    np.testing.assert_allclose(negative.ticks(7), -positive.ticks(7)[::-1])


def test_linear_only_domain(scale):
    scale.setDomain(0, 5)
    np.testing.assert_allclose(scale.ticks(), LinearScale(domain=(0, 5)).ticks(10))


@pytest.mark.parametrize("base", [2, 10])
@pytest.mark.parametrize("domain", DOMAINS)
def test_ticks_ascending_unique_inside_domain(base, domain):
    s = ModifiedLogScale(base)
    s.setDomain(*domain)
    ticks = s.ticks(10)
    assert np.all(np.diff(ticks) > 0)
    assert np.all(np.isfinite(ticks))
    assert np.all(ticks >= min(domain))
    assert np.all(ticks <= max(domain))


def test_count_is_remembered(symmetric_scale):
    four = symmetric_scale.ticks(4)
    np.testing.assert_array_equal(symmetric_scale.ticks(), four)
    symmetric_scale.setDomain(-1000, 1000)
    assert len(symmetric_scale.ticks()) <= 8


def test_ticks_are_recomputed_each_call(symmetric_scale):
    first = symmetric_scale.ticks()
    first[:] = 0
    np.testing.assert_allclose(symmetric_scale.ticks()[[0, -1]], [-100, 100])


def test_zero_width_domain(scale):
    scale.setDomain(5, 5)
    assert scale.howManyTicks(5, 5) == 0
    np.testing.assert_array_equal(scale.ticks(), [5])
    scale.setDomain(0, 0)
    np.testing.assert_array_equal(scale.ticks(3), [0])


@pytest.mark.parametrize("base", [1.5, 2])
def test_narrow_domain_between_clusters_has_no_ticks(base):
    s = ModifiedLogScale(base)
    s.setDomain(9.99, 10.01)
    for count in [1, 10, 40]:
        assert len(s.ticks(count)) == 0


def test_zero_width_domain_reports(scale, verbose, capsys):
    scale.setDomain(7, 7)
    scale.ticks()
    assert "zero width" in capsys.readouterr().err


def test_how_many_ticks_is_proportional(scale):
    scale.setDomain(10, 1000)
    assert scale.howManyTicks(10, 100) == 5
    assert scale.howManyTicks(10, 1000) == 10
    assert scale.howManyTicks(100, 100) == 0
    scale.setDomain(-100, 100)
    assert scale.howManyTicks(-10, 10) == 5
    assert scale.howManyTicks(10, 100) == 3


class TestLogTicks:

    def test_clusters(self, scale):
        scale.setDomain(10, 1000)
        np.testing.assert_allclose(scale.logTicks(10, 100), [20, 40, 60, 80, 100])

    def test_only_powers_when_budget_is_small(self, scale):
        scale.setDomain(10, 10 ** 6)
        scale.ticks(3)
        ticks = scale.logTicks(10, 10 ** 6)
        np.testing.assert_allclose(ticks, [10 ** 2, 10 ** 4, 10 ** 6])

    @pytest.mark.parametrize("base", [2, 3, 10])
    def test_inside_bounds_and_unique(self, base):
        s = ModifiedLogScale(base)
        s.setDomain(-10 ** 5, 10 ** 5)
        for lower, upper in [(base, 10 ** 5), (17, 900), (base * 3, base * 3.5), (500, 501)]:
            for count in [1, 5, 10, 40]:
                s.ticks(count)
                ticks = s.logTicks(lower, upper)
                assert np.all(ticks >= lower)
                assert np.all(ticks <= upper)
                assert len(np.unique(ticks)) == len(ticks)

    def test_empty_without_budget(self, scale):
        scale.setDomain(10, 1000)
        assert len(scale.logTicks(100, 100)) == 0
        scale.ticks(0)
        assert len(scale.logTicks(10, 1000)) == 0


def test_verbose_tick_report(symmetric_scale, verbose, capsys):
    symmetric_scale.ticks(10)
    assert "generated 11 ticks, 10 requested" in capsys.readouterr().err
