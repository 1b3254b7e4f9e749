"""
FILE: Schemas/insights.py
--------------------------
Output schemas for the derived analyses in core/insights_engine.py.
Each analysis bundles the grouped descriptives a chart needs with the
test statistic that goes in its note.
"""

from pydantic import BaseModel, Field

from Schemas.statistician import AnovaResult, StatGroup


class LevelSummary(BaseModel):
    level: int | str
    label: str
    count: int
    stats: StatGroup


class FailuresAnalysis(BaseModel):
    levels: list[LevelSummary] = Field(default_factory=list)
    anova:  AnovaResult = Field(default_factory=AnovaResult)


class ParentEducationAnalysis(BaseModel):
    guardian: str | None = None            # None → all guardians
    mother:   list[LevelSummary] = Field(default_factory=list)
    father:   list[LevelSummary] = Field(default_factory=list)
    mother_anova: AnovaResult = Field(default_factory=AnovaResult)
    father_anova: AnovaResult = Field(default_factory=AnovaResult)


class GoingOutAnalysis(BaseModel):
    levels: list[LevelSummary] = Field(default_factory=list)
    rho:    float = 0.0
    anova:  AnovaResult = Field(default_factory=AnovaResult)


class AlcoholAnalysis(BaseModel):
    weekday: list[LevelSummary] = Field(default_factory=list)
    weekend: list[LevelSummary] = Field(default_factory=list)
    weekday_rho: float = 0.0
    weekend_rho: float = 0.0


class StudyTimeMean(BaseModel):
    studytime: int
    label:     str
    mean:      float


class StudyTimeAnalysis(BaseModel):
    means: list[StudyTimeMean] = Field(default_factory=list)
    rho:   float = 0.0


class DensityPoint(BaseModel):
    x:       float
    density: float


class SupportGroup(BaseModel):
    school_support: bool
    family_support: bool
    count:   int
    mean:    float
    density: list[DensityPoint] = Field(default_factory=list)


class SupportAnalysis(BaseModel):
    groups: list[SupportGroup] = Field(default_factory=list)


class TrajectoryAnalysis(BaseModel):
    mean_g1: float = 0.0
    mean_g2: float = 0.0
    mean_g3: float = 0.0
    improving: int = 0       # G3 > G1
    declining: int = 0       # G3 < G1
    stable:    int = 0
    crashers:  int = 0       # sharp drop from G2 to G3
