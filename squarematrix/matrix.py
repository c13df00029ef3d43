"""Square matrices of 32-bit integers or doubles with checked arithmetic."""

from __future__ import annotations

import math
import numbers
import operator
import re
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Union

Number = Union[int, float]

MAX_SIZE = 100
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_INT_PATTERN = re.compile(r"[+-]?\d+")
_DOUBLE_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class MatrixUnderflowError(ArithmeticError):
    """Raised when an integer result falls below the smallest 32-bit value."""


def _check_int(value: int, context: str) -> int:
    if value > INT_MAX:
        raise OverflowError(f"Integer overflow in {context}")
    if value < INT_MIN:
        raise MatrixUnderflowError(f"Integer underflow in {context}")
    return value


class ElementType(Enum):
    """Kind of element a matrix holds; the value is its code in input files."""

    INT = 0
    DOUBLE = 1

    def parse(self, text: str) -> Number:
        """Parse one textual element, raising ValueError if it is not valid."""
        text = text.strip()
        if self is ElementType.INT:
            if not _INT_PATTERN.fullmatch(text):
                raise ValueError(f"not an integer: {text!r}")
            value = int(text)
            if not INT_MIN <= value <= INT_MAX:
                raise ValueError(f"integer out of range: {text!r}")
            return value
        if not _DOUBLE_PATTERN.fullmatch(text):
            raise ValueError(f"not a number: {text!r}")
        result = float(text)
        if math.isinf(result):
            raise ValueError(f"number out of range: {text!r}")
        return result

    def coerce(self, value: object) -> Number:
        """Convert a Python number to this element type."""
        if self is ElementType.INT:
            if isinstance(value, bool):
                value = int(value)
            return _check_int(operator.index(value), "matrix element")
        if not isinstance(value, numbers.Real):
            raise TypeError(f"expected a real number, got {type(value).__name__}")
        return float(value)

    def format(self, value: Number) -> str:
        """Render a value the way matrices print it."""
        if self is ElementType.INT:
            return str(value)
        return f"{value:g}"


class Matrix:
    """A square matrix of at most 100 by 100 elements."""

    def __init__(
        self,
        rows: Sequence[Sequence[Number]],
        element_type: ElementType = ElementType.INT,
    ) -> None:
        rows = [list(row) for row in rows]
        size = len(rows)
        if size == 0:
            raise ValueError("Matrix cannot be empty")
        if size > MAX_SIZE:
            raise ValueError(f"Matrix size cannot exceed {MAX_SIZE}")
        if any(len(row) != size for row in rows):
            raise ValueError("Matrix must be square")
        self._type = ElementType(element_type)
        self._size = size
        self._data = [[self._type.coerce(v) for v in row] for row in rows]

    @classmethod
    def zeros(cls, size: int, element_type: ElementType = ElementType.INT) -> Matrix:
        """Create a size-by-size matrix filled with zeros."""
        if size <= 0:
            raise ValueError("Matrix size cannot be zero")
        if size > MAX_SIZE:
            raise ValueError(f"Matrix size cannot exceed {MAX_SIZE}")
        return cls([[0] * size for _ in range(size)], element_type)

    @property
    def size(self) -> int:
        """Number of rows (and columns)."""
        return self._size

    @property
    def element_type(self) -> ElementType:
        return self._type

    @property
    def rows(self) -> list[list[Number]]:
        """A copy of the elements, row by row."""
        return [list(row) for row in self._data]

    def _check_index(self, index: object) -> tuple[int, int]:
        if not isinstance(index, tuple) or len(index) != 2:
            raise TypeError("matrix index must be a (row, column) pair")
        i, j = (operator.index(k) for k in index)
        if not (0 <= i < self._size and 0 <= j < self._size):
            raise IndexError("Matrix index out of bounds")
        return i, j

    def __getitem__(self, index: tuple[int, int]) -> Number:
        i, j = self._check_index(index)
        return self._data[i][j]

    def __setitem__(self, index: tuple[int, int], value: Number) -> None:
        i, j = self._check_index(index)
        self._data[i][j] = self._type.coerce(value)

    def _compatible(self, other: Matrix, what: str) -> None:
        if self._type is not other._type:
            raise TypeError(f"Matrix element types must match for {what}")
        if self._size != other._size:
            raise ValueError(f"Matrix dimensions must match for {what}")

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._compatible(other, "addition")
        is_int = self._type is ElementType.INT
        result = []
        for left_row, right_row in zip(self._data, other._data):
            row = []
            for a, b in zip(left_row, right_row):
                total = a + b
                if is_int:
                    _check_int(total, "matrix addition")
                row.append(total)
            result.append(row)
        return Matrix(result, self._type)

    def __mul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._compatible(other, "multiplication")
        is_int = self._type is ElementType.INT
        columns = list(zip(*other._data))
        result = []
        for left_row in self._data:
            row = []
            for column in columns:
                total = 0 if is_int else 0.0
                for a, b in zip(left_row, column):
                    product = a * b
                    if is_int:
                        _check_int(product, "matrix multiplication")
                        total = _check_int(total + product, "matrix multiplication")
                    else:
                        total += product
                row.append(total)
            result.append(row)
        return Matrix(result, self._type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._type is other._type and self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self._data!r}, {self._type})"

    def __str__(self) -> str:
        cells = [[self._type.format(v) for v in row] for row in self._data]
        width = max(len(cell) for row in cells for cell in row) + 1
        return "".join(
            "".join(cell.rjust(width) for cell in row) + "\n" for row in cells
        )

    def _diagonal_sum(self, values: Iterable[Number]) -> Number:
        if self._type is ElementType.DOUBLE:
            return sum(values, 0.0)
        total = 0
        for value in values:
            total = _check_int(total + value, "diagonal sum")
        return total

    def sum_diagonal_major(self) -> Number:
        """Sum of the elements from top left to bottom right."""
        return self._diagonal_sum(row[i] for i, row in enumerate(self._data))

    def sum_diagonal_minor(self) -> Number:
        """Sum of the elements from top right to bottom left."""
        return self._diagonal_sum(
            row[self._size - 1 - i] for i, row in enumerate(self._data)
        )

    def _check_line(self, a: int, b: int, kind: str) -> tuple[int, int]:
        a, b = operator.index(a), operator.index(b)
        if not (0 <= a < self._size and 0 <= b < self._size):
            raise IndexError(f"{kind} index out of bounds")
        return a, b

    def swap_rows(self, r1: int, r2: int) -> None:
        """Exchange two rows in place."""
        r1, r2 = self._check_line(r1, r2, "Row")
        self._data[r1], self._data[r2] = self._data[r2], self._data[r1]

    def swap_cols(self, c1: int, c2: int) -> None:
        """Exchange two columns in place."""
        c1, c2 = self._check_line(c1, c2, "Column")
        for row in self._data:
            row[c1], row[c2] = row[c2], row[c1]


def read_matrix(
    tokens: Iterable[str],
    size: int,
    element_type: ElementType = ElementType.INT,
) -> Matrix:
    """Build a matrix from whitespace-separated words, row by row.

    Exactly size * size words are consumed, so a shared iterator can be
    passed to read several matrices in sequence.
    """
    element_type = ElementType(element_type)
    matrix = Matrix.zeros(size, element_type)
    stream = iter(tokens)
    for i in range(size):
        for j in range(size):
            where = f"row {i}, column {j}"
            word = next(stream, None)
            if word is None:
                raise ValueError(f"Invalid matrix element at {where}")
            try:
                value = element_type.parse(word)
            except ValueError:
                raise ValueError(f"Invalid matrix element at {where}") from None
            matrix[i, j] = value
    return matrix