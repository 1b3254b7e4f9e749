"""
FILE: core/insights_engine.py
------------------------------
Derived analyses behind each story chart. Every function takes the
currently filtered students and composes the pure engines:

  failures_analysis          grade by past failures (3 = "3+") + ANOVA
  parent_education_analysis  grade by Medu / Fedu + ANOVA for each
  going_out_analysis         grade by goout + Spearman + ANOVA
  alcohol_analysis           grade by Dalc / Walc + Spearman for each
  study_time_analysis        mean grade per study-time bucket + Spearman
  support_analysis           school x family support groups + grade density
  grade_trajectory           G1 → G2 → G3 movement counts
  pca_analysis               PCA, or None when the sample is too small

An empty student list yields empty levels and zero statistics,
never an exception.
"""

from typing import Callable, Mapping, Sequence

import numpy as np
from scipy.stats import norm

from Schemas.insights import (
    AlcoholAnalysis,
    DensityPoint,
    FailuresAnalysis,
    GoingOutAnalysis,
    LevelSummary,
    ParentEducationAnalysis,
    StudyTimeAnalysis,
    StudyTimeMean,
    SupportAnalysis,
    SupportGroup,
    TrajectoryAnalysis,
)
from Schemas.statistician import AnovaResult, PCAResult
from Schemas.student import StudentRecord
from Utils.data_dictionary import EDUCATION_LABELS, SCALE_LABELS, STUDYTIME_LABELS
from constants.statistician import (
    CRASH_DROP,
    FAILURES_CAP,
    KDE_BANDWIDTH,
    KDE_GRID_MAX,
    KDE_GRID_MIN,
    KDE_GRID_STEP,
    MIN_PCA_RECORDS,
    TARGET_FIELD,
)
from core.anova_engine import anova
from core.correlation_engine import spearman
from core.descriptive_engine import describe, mean
from core.filter_engine import extract
from core.pca_engine import pca


# ─────────────────────────────────────────────
# HELPERS
# ─────────────────────────────────────────────

def grade_by_level(
    students: Sequence[StudentRecord],
    field: str,
    levels: Sequence[int],
    labels: Mapping[int, str] | None = None,
    key: Callable[[StudentRecord], int] | None = None,
) -> list[LevelSummary]:
    """
    Final-grade descriptives for each listed level of `field`, in level order.
    `key` overrides how a student's level is read (e.g. capping failures).
    Levels with no students are kept with count 0.
    """
    read = key or (lambda s: getattr(s, field))
    buckets: dict[int, list[float]] = {level: [] for level in levels}
    for student in students:
        level = read(student)
        if level in buckets:
            buckets[level].append(float(getattr(student, TARGET_FIELD)))

    labels = labels or {}
    return [
        LevelSummary(
            level=level,
            label=labels.get(level, str(level)),
            count=len(buckets[level]),
            stats=describe(buckets[level]),
        )
        for level in levels
    ]


def _anova_over(
    summaries: Sequence[LevelSummary],
    students: Sequence[StudentRecord],
    field: str,
    key: Callable[[StudentRecord], int] | None = None,
) -> AnovaResult:
    """ANOVA of the final grade across the non-empty summarised levels."""
    read = key or (lambda s: getattr(s, field))
    groups = [
        [float(getattr(s, TARGET_FIELD)) for s in students if read(s) == summary.level]
        for summary in summaries
    ]
    return anova([g for g in groups if g])


def _rho_with_target(students: Sequence[StudentRecord], field: str) -> float:
    return spearman(extract(students, field), extract(students, TARGET_FIELD))


def _kde(values: Sequence[float]) -> list[DensityPoint]:
    """Gaussian kernel density on the fixed 0..20 grade grid."""
    if not values:
        return []
    grid = np.arange(KDE_GRID_MIN, KDE_GRID_MAX + KDE_GRID_STEP / 2, KDE_GRID_STEP)
    samples = np.asarray(values, dtype=float)
    z = (grid[:, None] - samples[None, :]) / KDE_BANDWIDTH
    density = norm.pdf(z).sum(axis=1) / (KDE_BANDWIDTH * len(samples))
    return [DensityPoint(x=float(x), density=float(d)) for x, d in zip(grid, density)]


# ─────────────────────────────────────────────
# ANALYSES
# ─────────────────────────────────────────────

def _capped_failures(student: StudentRecord) -> int:
    return min(student.failures, FAILURES_CAP)


def failures_analysis(students: Sequence[StudentRecord]) -> FailuresAnalysis:
    levels = list(range(FAILURES_CAP + 1))
    labels = {level: str(level) for level in levels}
    labels[FAILURES_CAP] = f"{FAILURES_CAP}+"

    summaries = grade_by_level(students, "failures", levels, labels, key=_capped_failures)
    return FailuresAnalysis(
        levels=summaries,
        anova=_anova_over(summaries, students, "failures", key=_capped_failures),
    )


def parent_education_analysis(
    students: Sequence[StudentRecord],
    guardian: str | None = None,
) -> ParentEducationAnalysis:
    """`guardian` restricts to students with that guardian ("mother", "father", "other")."""
    if guardian is not None:
        students = [s for s in students if s.guardian == guardian]

    levels = list(EDUCATION_LABELS)
    mother = grade_by_level(students, "Medu", levels, EDUCATION_LABELS)
    father = grade_by_level(students, "Fedu", levels, EDUCATION_LABELS)
    return ParentEducationAnalysis(
        guardian=guardian,
        mother=mother,
        father=father,
        mother_anova=_anova_over(mother, students, "Medu"),
        father_anova=_anova_over(father, students, "Fedu"),
    )


def going_out_analysis(students: Sequence[StudentRecord]) -> GoingOutAnalysis:
    summaries = grade_by_level(students, "goout", list(SCALE_LABELS), SCALE_LABELS)
    return GoingOutAnalysis(
        levels=summaries,
        rho=_rho_with_target(students, "goout"),
        anova=_anova_over(summaries, students, "goout"),
    )


def alcohol_analysis(students: Sequence[StudentRecord]) -> AlcoholAnalysis:
    levels = list(SCALE_LABELS)
    return AlcoholAnalysis(
        weekday=grade_by_level(students, "Dalc", levels, SCALE_LABELS),
        weekend=grade_by_level(students, "Walc", levels, SCALE_LABELS),
        weekday_rho=_rho_with_target(students, "Dalc"),
        weekend_rho=_rho_with_target(students, "Walc"),
    )


def study_time_analysis(students: Sequence[StudentRecord]) -> StudyTimeAnalysis:
    """Mean final grade for each study-time bucket that has students."""
    means: list[StudyTimeMean] = []
    for level, label in STUDYTIME_LABELS.items():
        grades = [float(s.G3) for s in students if s.studytime == level]
        if grades:
            means.append(StudyTimeMean(studytime=level, label=label, mean=mean(grades)))
    return StudyTimeAnalysis(means=means, rho=_rho_with_target(students, "studytime"))


def support_analysis(students: Sequence[StudentRecord]) -> SupportAnalysis:
    groups: list[SupportGroup] = []
    for school_support in (True, False):
        for family_support in (True, False):
            grades = [
                float(s.G3) for s in students
                if s.schoolsup == school_support and s.famsup == family_support
            ]
            groups.append(SupportGroup(
                school_support=school_support,
                family_support=family_support,
                count=len(grades),
                mean=mean(grades),
                density=_kde(grades),
            ))
    return SupportAnalysis(groups=groups)


def grade_trajectory(students: Sequence[StudentRecord]) -> TrajectoryAnalysis:
    if not students:
        return TrajectoryAnalysis()
    return TrajectoryAnalysis(
        mean_g1=mean(extract(students, "G1")),
        mean_g2=mean(extract(students, "G2")),
        mean_g3=mean(extract(students, "G3")),
        improving=sum(1 for s in students if s.G3 > s.G1),
        declining=sum(1 for s in students if s.G3 < s.G1),
        stable=sum(1 for s in students if s.G3 == s.G1),
        crashers=sum(1 for s in students if s.G2 - s.G3 >= CRASH_DROP),
    )


def pca_analysis(students: Sequence[StudentRecord]) -> PCAResult | None:
    """None signals the "insufficient data for PCA" state."""
    if len(students) < MIN_PCA_RECORDS:
        return None
    return pca(students)
