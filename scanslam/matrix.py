"""Dense matrices with determinant, inverse and the arithmetic operators."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple, Union

Number = Union[int, float]
Index = Union[int, Tuple[int, int]]


class MatrixError(ArithmeticError):
    """Base class of the matrix errors."""


class NotInvertibleMatrixError(MatrixError):
    """The matrix has no inverse."""


class IncompatibleMatrixError(MatrixError):
    """The shapes of the operands do not fit the operation."""


class NotSquareMatrixError(MatrixError):
    """The operation needs a square matrix."""


class DMatrix:
    """A rows x columns matrix; every dimension is at least one.

    Elements are read and written as ``m[i, j]``; ``m[i]`` is row ``i``.
    """

    def __init__(
        self,
        rows: int = 0,
        columns: int = 0,
        values: Optional[Iterable[Sequence[Number]]] = None,
    ) -> None:
        if values is not None:
            data = [list(row) for row in values]
            if not data or not data[0]:
                raise ValueError("matrix values must not be empty")
            width = len(data[0])
            if any(len(row) != width for row in data):
                raise ValueError("all rows must have the same length")
            if (rows and rows != len(data)) or (columns and columns != width):
                raise ValueError("values do not match the given shape")
            self._data: List[List[Number]] = data
        else:
            rows = max(rows, 1)
            columns = max(columns, 1)
            self._data = [[0.0] * columns for _ in range(rows)]

    @property
    def rows(self) -> int:
        """Number of rows."""
        return len(self._data)

    @property
    def columns(self) -> int:
        """Number of columns."""
        return len(self._data[0])

    @property
    def shape(self) -> Tuple[int, int]:
        """Rows and columns."""
        return self.rows, self.columns

    def copy(self) -> DMatrix:
        """An independent copy of the matrix."""
        return DMatrix(values=self._data)

    def tolist(self) -> List[List[Number]]:
        """The elements as a list of row lists."""
        return [list(row) for row in self._data]

    def __getitem__(self, index: Index):
        if isinstance(index, tuple):
            i, j = index
            return self._data[i][j]
        return tuple(self._data[index])

    def __setitem__(self, index: Index, value) -> None:
        if isinstance(index, tuple):
            i, j = index
            self._data[i][j] = value
            return
        row = list(value)
        if len(row) != self.columns:
            raise IncompatibleMatrixError("row length does not match the matrix")
        self._data[index] = row

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DMatrix):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return "DMatrix(values=%r)" % (self._data,)

    def det(self) -> Number:
        """Determinant by Gaussian elimination."""
        if self.rows != self.columns:
            raise NotSquareMatrixError("determinant of a non-square matrix")
        n = self.rows
        aux = self.tolist()
        d: Number = 1
        for i in range(n):
            k = next((r for r in range(i, n) if aux[r][i] != 0), None)
            if k is None:
                return 0
            val = aux[k][i]
            aux[k] = [v / val for v in aux[k]]
            d = d * val
            if k != i:
                aux[k], aux[i] = aux[i], aux[k]
                d = -d
            pivot_row = aux[i]
            for j in range(i + 1, n):
                factor = aux[j][i]
                if factor != 0:
                    aux[j] = [a - factor * p for a, p in zip(aux[j], pivot_row)]
        return d

    def inverse(self) -> DMatrix:
        """Inverse by Gauss-Jordan elimination."""
        if self.rows != self.columns:
            raise NotInvertibleMatrixError("inverse of a non-square matrix")
        n = self.rows
        left = self.tolist()
        right = DMatrix.identity(n).tolist()
        for i in range(n):
            k = next((r for r in range(i, n) if left[r][i] != 0), None)
            if k is None:
                raise NotInvertibleMatrixError("the matrix is singular")
            val = left[k][i]
            left[k] = [v / val for v in left[k]]
            right[k] = [v / val for v in right[k]]
            if k != i:
                left[k], left[i] = left[i], left[k]
                right[k], right[i] = right[i], right[k]
            for j in range(n):
                if j == i:
                    continue
                factor = left[j][i]
                left[j] = [a - factor * p for a, p in zip(left[j], left[i])]
                right[j] = [a - factor * p for a, p in zip(right[j], right[i])]
        return DMatrix(values=right)

    def transpose(self) -> DMatrix:
        """The transposed matrix."""
        return DMatrix(values=[list(column) for column in zip(*self._data)])

    def __mul__(self, other):
        if isinstance(other, DMatrix):
            if self.columns != other.rows:
                raise IncompatibleMatrixError("inner dimensions differ")
            other_columns = list(zip(*other._data))
            return DMatrix(
                values=[
                    [sum(a * b for a, b in zip(row, column)) for column in other_columns]
                    for row in self._data
                ]
            )
        if isinstance(other, (int, float)):
            return DMatrix(values=[[v * other for v in row] for row in self._data])
        return NotImplemented

    def _check_same_shape(self, other: DMatrix) -> None:
        if self.shape != other.shape:
            raise IncompatibleMatrixError("matrix shapes differ")

    def __add__(self, other):
        if not isinstance(other, DMatrix):
            return NotImplemented
        self._check_same_shape(other)
        return DMatrix(
            values=[[a + b for a, b in zip(r1, r2)] for r1, r2 in zip(self._data, other._data)]
        )

    def __sub__(self, other):
        if not isinstance(other, DMatrix):
            return NotImplemented
        self._check_same_shape(other)
        return DMatrix(
            values=[[a - b for a, b in zip(r1, r2)] for r1, r2 in zip(self._data, other._data)]
        )

    @classmethod
    def identity(cls, n: int) -> DMatrix:
        """The n x n identity matrix."""
        matrix = cls(n, n)
        for i in range(matrix.rows):
            matrix[i, i] = 1.0
        return matrix

    def __str__(self) -> str:
        return "{%s}" % ",".join(
            "{%s}" % ",".join(format(v, "g") for v in row) for row in self._data
        )