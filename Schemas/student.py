"""
FILE: Schemas/student.py
-------------------------
Pydantic record for one row of the student performance dataset.
Field names match the dataset column names so the data dictionary,
grouping keys and PCA variable names can all refer to the same strings.

Records are frozen: every downstream engine works on read-only values.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


Job      = Literal["teacher", "health", "services", "at_home", "other"]
Ordinal5 = Annotated[int, Field(ge=1, le=5)]


class StudentRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=1)                       # 1-based, assigned at parse time

    # ── Identity / demographic ──
    school:   Literal["GP", "MS"]
    sex:      Literal["F", "M"]
    age:      int = Field(ge=0)
    address:  Literal["U", "R"]
    famsize:  Literal["LE3", "GT3"]
    Pstatus:  Literal["T", "A"]

    # ── Family / academic context ──
    Medu:       int = Field(ge=0, le=4)
    Fedu:       int = Field(ge=0, le=4)
    Mjob:       Job
    Fjob:       Job
    reason:     Literal["home", "reputation", "course", "other"]
    guardian:   Literal["mother", "father", "other"]
    traveltime: int = Field(ge=1, le=4)
    studytime:  int = Field(ge=1, le=4)
    failures:   int = Field(ge=0)               # 3 means "3 or more"

    # ── Binary supports / traits ──
    schoolsup:  bool
    famsup:     bool
    paid:       bool
    activities: bool
    nursery:    bool
    higher:     bool
    internet:   bool
    romantic:   bool

    # ── Lifestyle (1-5 scales) ──
    famrel:   Ordinal5
    freetime: Ordinal5
    goout:    Ordinal5
    Dalc:     Ordinal5
    Walc:     Ordinal5
    health:   Ordinal5
    absences: int = Field(ge=0)

    # ── Grades ──
    G1: int = Field(ge=0, le=20)
    G2: int = Field(ge=0, le=20)
    G3: int = Field(ge=0, le=20)               # final grade (target)
