"""
FILE: core/pca_engine.py
-------------------------
Two-component Principal Component Analysis for small covariance matrices.

Steps:
  1. Extract an n x p matrix of the chosen variables
  2. Standardise each column (population std; a zero std divides by 1)
  3. Covariance of the standardised matrix with divisor n - 1
  4. Dominant eigenvector by power iteration from a uniform unit start vector,
     a fixed PCA_ITERATIONS multiplications, no convergence check
  5. Eigenvalue v'Mv, deflate M - lambda * v v'
  6. Power iteration on the deflated matrix for the second eigenvector
  7. Project every standardised row onto both eigenvectors

The fixed iteration count keeps results reproducible run to run.
Callers decide whether the sample is large enough (MIN_PCA_RECORDS).
"""

from typing import Sequence

import numpy as np

from Schemas.statistician import PCAResult, ProjectedPoint, VariableLoading
from Schemas.student import StudentRecord
from constants.statistician import PCA_ITERATIONS, PCA_VARIABLES, TOP_CONTRIBUTORS


# ─────────────────────────────────────────────
# MATRIX STEPS
# ─────────────────────────────────────────────

def standardize(data: np.ndarray) -> np.ndarray:
    """Column-wise z-scores. Constant columns become all zeros."""
    means = data.mean(axis=0)
    stds  = data.std(axis=0)            # ddof=0 → population formula
    stds  = np.where(stds == 0, 1.0, stds)
    return (data - means) / stds


def covariance_matrix(standardized: np.ndarray) -> np.ndarray:
    """p x p covariance with divisor n - 1 (columns are already centred)."""
    n = standardized.shape[0]
    return standardized.T @ standardized / (n - 1)


def power_iteration(matrix: np.ndarray, iterations: int = PCA_ITERATIONS) -> np.ndarray:
    """
    Approximates the dominant eigenvector of a symmetric matrix.
    If a product collapses to the zero vector the previous unit vector is kept.
    """
    p = matrix.shape[0]
    vector = np.full(p, 1.0 / np.sqrt(p))

    for _ in range(iterations):
        product = matrix @ vector
        norm = np.sqrt(product @ product)
        if norm == 0:
            break
        vector = product / norm

    return vector


def rayleigh_quotient(matrix: np.ndarray, vector: np.ndarray) -> float:
    return float(vector @ matrix @ vector)


def deflate(matrix: np.ndarray, vector: np.ndarray) -> tuple[np.ndarray, float]:
    """Removes the component along `vector`. Returns (deflated, eigenvalue)."""
    eigenvalue = rayleigh_quotient(matrix, vector)
    return matrix - eigenvalue * np.outer(vector, vector), eigenvalue


# ─────────────────────────────────────────────
# PCA
# ─────────────────────────────────────────────

def _check_variables(variables: Sequence[str]) -> None:
    unknown = [v for v in variables if v not in StudentRecord.model_fields]
    if unknown:
        raise ValueError(
            f"Unknown PCA variable(s): {unknown}. "
            f"Available fields are: {list(StudentRecord.model_fields)}."
        )


def pca(
    students: Sequence[StudentRecord],
    variables: Sequence[str] = PCA_VARIABLES,
) -> PCAResult:
    """
    Projects students onto the first two principal components of the
    standardised variables. Fewer than two students → empty result.
    """
    variables = list(variables)
    _check_variables(variables)

    n = len(students)
    if n < 2 or not variables:
        return PCAResult(variables=variables, n_observations=n)

    data = np.array(
        [[float(getattr(s, v)) for v in variables] for s in students],
        dtype=float,
    )
    standardized = standardize(data)
    cov = covariance_matrix(standardized)

    pc1 = power_iteration(cov)
    deflated, lambda1 = deflate(cov, pc1)
    pc2 = power_iteration(deflated)
    lambda2 = rayleigh_quotient(deflated, pc2)

    scores_1 = standardized @ pc1
    scores_2 = standardized @ pc2

    projected = [
        ProjectedPoint(
            student_id=student.id,
            pc1=float(s1),
            pc2=float(s2),
            G3=student.G3,
        )
        for student, s1, s2 in zip(students, scores_1, scores_2)
    ]

    loadings = [
        VariableLoading(
            variable=var,
            pc1_loading=float(pc1[i]),
            pc2_loading=float(pc2[i]),
            pc1_contribution=abs(float(pc1[i])),
            pc2_contribution=abs(float(pc2[i])),
        )
        for i, var in enumerate(variables)
    ]

    total_variance = float(np.trace(cov))
    if total_variance > 0:
        explained = (lambda1 / total_variance * 100, lambda2 / total_variance * 100)
    else:
        explained = (0.0, 0.0)

    return PCAResult(
        variables=variables,
        projected=projected,
        loadings=loadings,
        eigenvalues=(lambda1, lambda2),
        explained_variance_pct=explained,
        n_observations=n,
    )


def top_contributors(
    result: PCAResult,
    component: int = 1,
    k: int = TOP_CONTRIBUTORS,
) -> list[VariableLoading]:
    """The k loadings with the largest absolute weight on component 1 or 2."""
    if component not in (1, 2):
        raise ValueError(f"component must be 1 or 2, got {component}")
    key = "pc1_contribution" if component == 1 else "pc2_contribution"
    return sorted(result.loadings, key=lambda l: getattr(l, key), reverse=True)[:k]
