"""Closed-form determinants and Cramer's rule for 2×2 and 3×3 systems."""

import numpy as np


def det2(A: np.ndarray) -> float:
    return float(A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0])


def det3(A: np.ndarray) -> float:
    """Cofactor expansion along the first row."""
    return float(
        A[0, 0] * (A[1, 1] * A[2, 2] - A[1, 2] * A[2, 1])
        - A[0, 1] * (A[1, 0] * A[2, 2] - A[1, 2] * A[2, 0])
        + A[0, 2] * (A[1, 0] * A[2, 1] - A[1, 1] * A[2, 0])
    )


def determinant(A: np.ndarray) -> float:
    """Determinant of a 2×2 or 3×3 matrix, by explicit formula.

    ``numpy.linalg.det`` goes through LU and returns values like 1e-16 for
    matrices that are exactly singular, which would defeat the exact zero
    test the solver relies on.
    """
    n = A.shape[0]
    if A.shape != (n, n) or n not in (2, 3):
        raise ValueError(f"Expected a 2×2 or 3×3 matrix, got shape {A.shape}")
    return det2(A) if n == 2 else det3(A)


def replace_column(A: np.ndarray, k: int, B: np.ndarray) -> np.ndarray:
    Ak = A.copy()
    Ak[:, k] = B
    return Ak


def cramer(A: np.ndarray, B: np.ndarray):
    """Solve ``A·X = B`` by Cramer's rule.

    Returns ``(det_A, X)`` where *X* is a tuple of floats, or
    ``(det_A, None)`` when ``det(A)`` is exactly zero.
    """
    det_A = determinant(A)
    if det_A == 0:
        return det_A, None
    X = tuple(determinant(replace_column(A, k, B)) / det_A
              for k in range(A.shape[0]))
    return det_A, X


def build_system(kind_arity: int, coeffs) -> tuple:
    """Split a validated coefficient vector into ``(A, B)`` arrays.

    6 coefficients: rows ``[a, b | c]`` and ``[d, e | f]``.
    9 coefficients: rows ``[a, b, c]``, ``[d, e, f]``, ``[g, h, i]`` with
    ``B = [c, f, i]``, i.e. the third column doubles as the right-hand side.
    """
    values = np.asarray(coeffs, dtype=np.float64)
    if kind_arity == 6:
        rows = values.reshape(2, 3)
        return rows[:, :2].copy(), rows[:, 2].copy()
    if kind_arity == 9:
        A = values.reshape(3, 3)
        return A.copy(), A[:, 2].copy()
    raise ValueError(f"No matrix form for {kind_arity} coefficients")
