"""
FILE: core/descriptive_engine.py
---------------------------------
Descriptive statistics over a numeric sample.

Quartiles use the nearest-rank position floor(n * p) on the sorted sample
with no interpolation, and std is the population formula (divide by n).
"""

import math
from typing import Sequence

import numpy as np

from Schemas.statistician import StatGroup


def describe(values: Sequence[float]) -> StatGroup:
    """Mean, median, population std, min, max, q1, q3. Empty → all zeros."""
    data = np.asarray(values, dtype=float)
    n = data.size
    if n == 0:
        return StatGroup()

    ordered = np.sort(data)

    return StatGroup(
        mean=float(data.mean()),
        median=float(np.median(ordered)),
        std=float(data.std()),               # ddof=0 → population formula
        min=float(ordered[0]),
        max=float(ordered[-1]),
        q1=float(ordered[math.floor(n * 0.25)]),
        q3=float(ordered[math.floor(n * 0.75)]),
        count=n,
    )


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean, 0 for an empty sample."""
    return float(np.mean(values)) if len(values) else 0.0
