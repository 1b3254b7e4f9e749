import os

# ─────────────────────────────────────────────
# FILE FORMAT
# ─────────────────────────────────────────────

DELIMITER  = ";"
QUOTE_CHAR = '"'
YES_TOKEN  = "yes"

DEFAULT_DATA_PATH = os.environ.get("STUDENT_DATA_PATH", "data/student-mat.csv")


# ─────────────────────────────────────────────
# COLUMNS (header order of student-mat.csv)
# ─────────────────────────────────────────────

CATEGORICAL_FIELDS = (
    "school", "sex", "address", "famsize", "Pstatus",
    "Mjob", "Fjob", "reason", "guardian",
)

BOOLEAN_FIELDS = (
    "schoolsup", "famsup", "paid", "activities",
    "nursery", "higher", "internet", "romantic",
)

INTEGER_FIELDS = (
    "age", "Medu", "Fedu", "traveltime", "studytime", "failures",
    "famrel", "freetime", "goout", "Dalc", "Walc", "health", "absences",
    "G1", "G2", "G3",
)

REQUIRED_COLUMNS = (
    "school", "sex", "age", "address", "famsize", "Pstatus",
    "Medu", "Fedu", "Mjob", "Fjob", "reason", "guardian",
    "traveltime", "studytime", "failures",
    "schoolsup", "famsup", "paid", "activities", "nursery", "higher", "internet", "romantic",
    "famrel", "freetime", "goout", "Dalc", "Walc", "health", "absences",
    "G1", "G2", "G3",
)


# ─────────────────────────────────────────────
# FALLBACK DEFAULTS FOR UNPARSEABLE INTEGERS
# Fields not listed here fall back to 0.
# ─────────────────────────────────────────────

FIELD_DEFAULTS: dict[str, int] = {
    "traveltime": 1,
    "studytime":  1,
    "Dalc":       1,
    "Walc":       1,
    "famrel":     3,
    "freetime":   3,
    "goout":      3,
    "health":     3,
}

DEFAULT_INT = 0
