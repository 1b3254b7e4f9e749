"""
FILE: Schemas/statistician.py
------------------------------
Pydantic result schemas for the statistics engine.
One schema per routine; each captures exactly what that routine produces.

  - StatGroup : describe()
  - AnovaResult : anova()
  - PCAResult   : pca()   (ProjectedPoint + VariableLoading)

Spearman returns a bare float and has no schema.
Results are transient: recomputed whenever the filtered subset changes.
"""

from pydantic import BaseModel, Field


# ─────────────────────────────────────────────
# DESCRIPTIVE
# ─────────────────────────────────────────────

class StatGroup(BaseModel):
    mean:   float = 0.0
    median: float = 0.0
    std:    float = 0.0      # population standard deviation
    min:    float = 0.0
    max:    float = 0.0
    q1:     float = 0.0      # nearest-rank, no interpolation
    q3:     float = 0.0
    count:  int = 0


# ─────────────────────────────────────────────
# ANOVA
# ─────────────────────────────────────────────

class AnovaResult(BaseModel):
    f:          float = 0.0
    p_approx:   str = "N/A"        # coarse banding label, not an exact p-value
    df_between: int = 0
    df_within:  int = 0
    ss_between: float = 0.0
    ss_within:  float = 0.0


# ─────────────────────────────────────────────
# PCA
# ─────────────────────────────────────────────

class ProjectedPoint(BaseModel):
    student_id: int
    pc1: float
    pc2: float
    G3:  int                        # carried for colouring by final grade


class VariableLoading(BaseModel):
    variable:         str
    pc1_loading:      float
    pc2_loading:      float
    pc1_contribution: float         # abs(pc1_loading)
    pc2_contribution: float


class PCAResult(BaseModel):
    variables:   list[str] = Field(default_factory=list)
    projected:   list[ProjectedPoint] = Field(default_factory=list)
    loadings:    list[VariableLoading] = Field(default_factory=list)

    # ── Variance summary for the two extracted components ──
    eigenvalues:            tuple[float, float] = (0.0, 0.0)
    explained_variance_pct: tuple[float, float] = (0.0, 0.0)
    n_observations: int = 0
