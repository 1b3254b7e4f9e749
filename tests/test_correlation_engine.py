import random

import numpy as np
import pytest
from scipy import stats

from core.correlation_engine import correlation_strength, rank_average, spearman


def test_tied_values_share_average_rank():
    assert rank_average([1, 1, 2, 3]) == [1.5, 1.5, 3.0, 4.0]
    assert rank_average([3, 1, 3, 3]) == [3.0, 1.0, 3.0, 3.0]
    assert rank_average([]) == []


def test_ties_are_averaged_before_correlating():
    rho = spearman([1, 1, 2, 3], [4, 3, 2, 1])

    # ranks x = [1.5, 1.5, 3, 4]; -4.5 / sqrt(4.5 * 5)
    assert rho == pytest.approx(-4.5 / (4.5 * 5) ** 0.5)
    assert rho == pytest.approx(stats.spearmanr([1, 1, 2, 3], [4, 3, 2, 1])[0])


def test_identical_sequences_give_one():
    x = [3, 9, 1, 4, 4, 7]
    assert spearman(x, x) == pytest.approx(1.0)


def test_monotonic_nonlinear_is_perfect():
    x = [1, 2, 3, 4, 5]
    assert spearman(x, [v ** 3 for v in x]) == pytest.approx(1.0)
    assert spearman(x, [-v ** 2 for v in x]) == pytest.approx(-1.0)


@pytest.mark.parametrize("seed", range(8))
def test_symmetric_and_matches_scipy(seed):
    rng = random.Random(seed)
    n = rng.randint(3, 40)
    x = [rng.randint(1, 5) for _ in range(n)]
    y = [rng.randint(0, 20) for _ in range(n)]
    if len(set(x)) == 1 or len(set(y)) == 1:
        pytest.skip("constant sample")

    assert spearman(x, y) == pytest.approx(spearman(y, x))
    assert spearman(x, y) == pytest.approx(stats.spearmanr(x, y)[0])
    assert -1.0 <= spearman(x, y) <= 1.0


@pytest.mark.parametrize("x, y", [
    ([], []),
    ([1], [2]),
    ([1, 2, 3], [1, 2]),
    ([2, 2, 2], [1, 2, 3]),
])
def test_degenerate_inputs_return_zero(x, y):
    assert spearman(x, y) == 0.0


def test_correlation_strength_bands():
    assert correlation_strength(0.1) == "weak"
    assert correlation_strength(-0.45) == "moderate"
    assert correlation_strength(0.7) == "strong"


def test_accepts_numpy_arrays():
    x = np.array([1.0, 1.0, 2.0, 3.0])
    y = np.array([4.0, 3.0, 2.0, 1.0])
    assert spearman(x, y) == pytest.approx(spearman(list(x), list(y)))
