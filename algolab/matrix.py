"""Square matrix multiplication by Strassen's divide-and-conquer scheme."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[int]]


def _check_square(matrix: Sequence[Sequence[int]], name: str) -> int:
    size = len(matrix)
    if size == 0 or size & (size - 1):
        raise ValueError(f"matrix {name} must have a power-of-two size, got {size}")
    if any(len(row) != size for row in matrix):
        raise ValueError(f"matrix {name} must be square")
    return size


def _add(a: Matrix, b: Matrix) -> Matrix:
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def _sub(a: Matrix, b: Matrix) -> Matrix:
    return [[x - y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def _split(m: Matrix) -> tuple[Matrix, Matrix, Matrix, Matrix]:
    half = len(m) // 2
    top, bottom = m[:half], m[half:]
    return (
        [row[:half] for row in top],
        [row[half:] for row in top],
        [row[:half] for row in bottom],
        [row[half:] for row in bottom],
    )


def _join(c11: Matrix, c12: Matrix, c21: Matrix, c22: Matrix) -> Matrix:
    return [left + right for left, right in zip(c11, c12)] + [
        left + right for left, right in zip(c21, c22)
    ]


def _strassen(a: Matrix, b: Matrix) -> Matrix:
    if len(a) == 1:
        return [[a[0][0] * b[0][0]]]
    a11, a12, a21, a22 = _split(a)
    b11, b12, b21, b22 = _split(b)
    m1 = _strassen(_add(a11, a22), _add(b11, b22))
    m2 = _strassen(_add(a21, a22), b11)
    m3 = _strassen(a11, _sub(b12, b22))
    m4 = _strassen(a22, _sub(b21, b11))
    m5 = _strassen(_add(a11, a12), b22)
    m6 = _strassen(_sub(a21, a11), _add(b11, b12))
    m7 = _strassen(_sub(a12, a22), _add(b21, b22))
    c11 = _add(_sub(_add(m1, m4), m5), m7)
    c12 = _add(m3, m5)
    c21 = _add(m2, m4)
    c22 = _add(_sub(_add(m1, m3), m2), m6)
    return _join(c11, c12, c21, c22)


def strassen_multiply(
    a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]
) -> Matrix:
    """Return the product ``a · b`` of two square matrices of equal power-of-two size.

    Raises ValueError when either matrix is empty, not square, not of a
    power-of-two size, or when the sizes differ.
    """
    size_a = _check_square(a, "a")
    size_b = _check_square(b, "b")
    if size_a != size_b:
        raise ValueError(f"matrix sizes differ: {size_a} and {size_b}")
    return _strassen([list(row) for row in a], [list(row) for row in b])