"""
FILE: core/anova_engine.py
---------------------------
One-way ANOVA F statistic with a coarse significance label.

No exact p-value is computed: the F value is banded against fixed
thresholds (see constants/statistician.py). Empty groups may be passed
in and are skipped.
"""

from typing import Sequence

import numpy as np

from Schemas.statistician import AnovaResult
from constants.statistician import F_BANDS, NOT_AVAILABLE_LABEL, NOT_SIGNIFICANT_LABEL


def significance_label(f: float) -> str:
    for threshold, label in F_BANDS:
        if f > threshold:
            return label
    return NOT_SIGNIFICANT_LABEL


def anova(groups: Sequence[Sequence[float]]) -> AnovaResult:
    """
    Between/within variance decomposition over the non-empty groups.
    Returns F = 0 and "N/A" when either degrees of freedom is <= 0.
    """
    non_empty = [np.asarray(g, dtype=float) for g in groups if len(g) > 0]
    k = len(non_empty)
    n = sum(g.size for g in non_empty)

    df_between = k - 1
    df_within  = n - k
    if df_between <= 0 or df_within <= 0:
        return AnovaResult(
            f=0.0,
            p_approx=NOT_AVAILABLE_LABEL,
            df_between=df_between,
            df_within=df_within,
        )

    sizes       = np.array([g.size for g in non_empty], dtype=float)
    group_means = np.array([g.mean() for g in non_empty])
    grand_mean  = np.concatenate(non_empty).mean()

    ss_between = float(np.sum(sizes * (group_means - grand_mean) ** 2))
    ss_within  = float(sum(np.sum((g - m) ** 2) for g, m in zip(non_empty, group_means)))

    ms_between = ss_between / df_between
    ms_within  = ss_within / df_within
    f = 0.0 if ms_within == 0 else ms_between / ms_within

    return AnovaResult(
        f=f,
        p_approx=significance_label(f),
        df_between=df_between,
        df_within=df_within,
        ss_between=ss_between,
        ss_within=ss_within,
    )
