import itertools

import pytest
from scipy import stats

from core.anova_engine import anova, significance_label


def test_matches_scipy_f_oneway():
    groups = [[12, 11, 14, 13], [9, 10, 8, 11, 10], [6, 7, 5]]
    result = anova(groups)

    assert result.f == pytest.approx(stats.f_oneway(*groups).statistic)
    assert result.df_between == 2
    assert result.df_within == 9


def test_single_group_is_not_available():
    result = anova([[1, 2, 3, 4]])
    assert result.f == 0.0
    assert result.p_approx == "N/A"


def test_no_within_degrees_of_freedom_is_not_available():
    result = anova([[1], [2], [3]])
    assert (result.f, result.p_approx) == (0.0, "N/A")


def test_empty_groups_are_ignored():
    with_empty = anova([[10, 11, 12], [], [4, 5, 6], []])
    without = anova([[10, 11, 12], [4, 5, 6]])

    assert with_empty.f == pytest.approx(without.f)
    assert with_empty.df_between == 1
    assert anova([]).p_approx == "N/A"
    assert anova([[], []]).p_approx == "N/A"


def test_zero_within_variance_gives_zero_f():
    result = anova([[5, 5, 5], [8, 8, 8]])
    assert result.f == 0.0
    assert result.p_approx == "p > 0.05"


def test_identical_distributions_give_f_near_zero():
    group = [4, 8, 10, 12, 15, 9, 11]
    result = anova([group, list(reversed(group))])

    assert result.f == pytest.approx(0.0, abs=1e-12)
    assert result.p_approx == "p > 0.05"


def test_f_is_invariant_to_group_order():
    groups = [[12, 11, 14, 13], [9, 10, 8, 11, 10], [6, 7, 5], [15, 9]]
    expected = anova(groups).f
    for order in itertools.permutations(groups):
        assert anova(list(order)).f == pytest.approx(expected)


@pytest.mark.parametrize("f, label", [
    (0.0, "p > 0.05"),
    (3.0, "p > 0.05"),
    (3.01, "p < 0.05"),
    (5.0, "p < 0.05"),
    (5.5, "p < 0.01"),
    (10.0, "p < 0.01"),
    (10.1, "p < 0.001"),
    (250.0, "p < 0.001"),
])
def test_significance_bands(f, label):
    assert significance_label(f) == label


def test_sums_of_squares_partition_total_variance():
    groups = [[12, 11, 14, 13], [9, 10, 8, 11, 10], [6, 7, 5]]
    values = [v for g in groups for v in g]
    grand_mean = sum(values) / len(values)
    result = anova(groups)

    assert result.ss_between + result.ss_within == pytest.approx(
        sum((v - grand_mean) ** 2 for v in values)
    )
