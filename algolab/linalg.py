"""Small dense linear-algebra routines on nested lists."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

Matrix = list[list[float]]


def _shape(matrix: Sequence[Sequence[float]], name: str) -> tuple[int, int]:
    rows = len(matrix)
    if rows == 0:
        raise ValueError(f"{name} has no rows")
    cols = len(matrix[0])
    if cols == 0:
        raise ValueError(f"{name} has no columns")
    if any(len(row) != cols for row in matrix):
        raise ValueError(f"{name} has rows of different lengths")
    return rows, cols


def matrix_add(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the element-wise sum of two matrices of equal shape."""
    if _shape(a, "a") != _shape(b, "b"):
        raise ValueError("matrices have different sizes")
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def matrix_multiply(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the matrix product a·b."""
    _, inner_a = _shape(a, "a")
    inner_b, _ = _shape(b, "b")
    if inner_a != inner_b:
        raise ValueError("inner dimensions do not match")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def row_reduce(matrix: Sequence[Sequence[float]]) -> Matrix:
    """Gauss-Jordan elimination with partial pivoting; returns a new matrix.

    Each of the m rows is normalised on the diagonal, so the matrix must have
    at least as many columns as rows and a non-zero pivot in every row.
    """
    rows, cols = _shape(matrix, "matrix")
    if rows > cols:
        raise ValueError("matrix has more rows than columns")
    work = [[float(x) for x in row] for row in matrix]

    for i in range(rows):
        pivot_row = max(range(i, rows), key=lambda r: abs(work[r][i]))
        if pivot_row != i:
            work[i], work[pivot_row] = work[pivot_row], work[i]

        pivot = work[i][i]
        if pivot == 0:
            raise ValueError("matrix is singular")
        work[i] = [x / pivot for x in work[i]]

        for k, row in enumerate(work):
            if k == i:
                continue
            factor = row[i]
            work[k] = [x - factor * p for x, p in zip(row, work[i])]
    return work


def least_squares(features: Sequence[Sequence[float]], targets: Sequence[float]) -> list[float]:
    """Solve the normal equations (XᵀX)w = Xᵀy and return the coefficients w."""
    rows, _ = _shape(features, "features")
    if len(targets) != rows:
        raise ValueError("number of targets does not match number of rows")
    x = np.asarray(features, dtype=float)
    y = np.asarray(targets, dtype=float)
    try:
        w = np.linalg.solve(x.T @ x, x.T @ y)
    except np.linalg.LinAlgError as exc:
        raise ValueError("normal equations are singular") from exc
    return [float(v) for v in w]