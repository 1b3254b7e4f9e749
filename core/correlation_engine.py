"""
FILE: core/correlation_engine.py
---------------------------------
Spearman rank correlation: Pearson correlation of tie-averaged ranks.
Degenerate inputs (length mismatch, fewer than two points, no rank
variance) return 0 instead of raising.
"""

from typing import Sequence

import numpy as np
from scipy.stats import rankdata

from constants.statistician import MODERATE_CORRELATION, STRONG_CORRELATION


def rank_average(values: Sequence[float]) -> list[float]:
    """
    1-based ranks; tied values share the mean of the ranks they occupy.
    e.g. [1, 1, 2] → [1.5, 1.5, 3.0]
    """
    if len(values) == 0:
        return []
    return [float(r) for r in rankdata(values, method="average")]


def spearman(x: Sequence[float], y: Sequence[float]) -> float:
    """Spearman's rho in [-1, 1]."""
    n = len(x)
    if n != len(y) or n < 2:
        return 0.0

    dx = np.asarray(rank_average(x))
    dy = np.asarray(rank_average(y))
    dx = dx - dx.mean()
    dy = dy - dy.mean()

    denominator = np.sqrt(np.sum(dx * dx) * np.sum(dy * dy))
    if denominator == 0:
        return 0.0
    return float(np.sum(dx * dy) / denominator)


def correlation_strength(rho: float) -> str:
    abs_rho = abs(rho)
    if abs_rho >= STRONG_CORRELATION:
        return "strong"
    elif abs_rho >= MODERATE_CORRELATION:
        return "moderate"
    return "weak"
