# ─────────────────────────────────────────────
# ANOVA SIGNIFICANCE BANDS
# Coarse F-value banding, checked from the strictest band down.
# ─────────────────────────────────────────────

F_BANDS: tuple[tuple[float, str], ...] = (
    (10.0, "p < 0.001"),
    (5.0,  "p < 0.01"),
    (3.0,  "p < 0.05"),
)
NOT_SIGNIFICANT_LABEL = "p > 0.05"
NOT_AVAILABLE_LABEL   = "N/A"


# ─────────────────────────────────────────────
# CORRELATION STRENGTH
# ─────────────────────────────────────────────

MODERATE_CORRELATION = 0.3
STRONG_CORRELATION   = 0.7


# ─────────────────────────────────────────────
# PCA
# ─────────────────────────────────────────────

PCA_ITERATIONS  = 100
MIN_PCA_RECORDS = 10      # below this the presentation shows "insufficient data"
TOP_CONTRIBUTORS = 6

# Non-grade numeric variables used for the lifestyle/family projection
PCA_VARIABLES: tuple[str, ...] = (
    "Medu", "Fedu", "traveltime", "studytime", "failures",
    "famrel", "freetime", "goout", "Dalc", "Walc", "health", "absences",
)


# ─────────────────────────────────────────────
# DERIVED ANALYSES
# ─────────────────────────────────────────────

FAILURES_CAP     = 3        # 3 stands for "3 or more"
TARGET_FIELD     = "G3"
CRASH_DROP       = 4        # G2 - G3 at or above this counts as a sharp final drop

KDE_BANDWIDTH    = 1.5
KDE_GRID_MIN     = 0.0
KDE_GRID_MAX     = 20.0
KDE_GRID_STEP    = 0.5
