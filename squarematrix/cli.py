"""Interactive menu for loading two square matrices and operating on them."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from squarematrix.matrix import (
    INT_MAX,
    INT_MIN,
    ElementType,
    Matrix,
    Number,
    read_matrix,
)

_INTEGER = re.compile(r"[+-]?\d+")
_DECIMAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SIZE_LIMIT = 2**64

MENU = (
    "\nMenu:\n"
    "1. Display Matrix 1\n"
    "2. Display Matrix 2\n"
    "3. Add Matrices (Matrix1 + Matrix2)\n"
    "4. Multiply Matrices (Matrix1 * Matrix2)\n"
    "5. Display Sum of Diagonals of Matrix 1\n"
    "6. Swap Rows in Matrix 1\n"
    "7. Swap Columns in Matrix 1\n"
    "8. Update an Element in Matrix 1\n"
    "9. Exit\n"
    "Enter your choice: "
)

_EMPTY_INPUT = "Invalid input. Please try again."


class InputError(ValueError):
    """Raised when user or file input cannot be accepted."""


class _Scanner:
    """Reads values from the front of a line, whitespace-separated."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._failed = False

    def take(self, pattern: re.Pattern[str]) -> str | None:
        if self._failed:
            return None
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1
        match = pattern.match(self._text, self._pos)
        if match is None:
            self._failed = True
            return None
        self._pos = match.end()
        return match.group()

    def rest(self) -> str:
        return self._text[self._pos:]

    def exhausted(self) -> bool:
        return not self.rest().strip()

    def size(self) -> int | None:
        """Read a non-negative size; negative input wraps as unsigned values do."""
        token = self.take(_INTEGER)
        if token is None:
            return None
        value = int(token)
        if abs(value) >= _SIZE_LIMIT:
            self._failed = True
            return None
        return value % _SIZE_LIMIT

    def integer(self) -> int | None:
        token = self.take(_INTEGER)
        if token is None:
            return None
        value = int(token)
        if not INT_MIN <= value <= INT_MAX:
            self._failed = True
            return None
        return value

    def element(self, element_type: ElementType) -> Number | None:
        pattern = _INTEGER if element_type is ElementType.INT else _DECIMAL
        token = self.take(pattern)
        if token is None:
            return None
        try:
            return element_type.parse(token)
        except ValueError:
            self._failed = True
            return None


def read_two_indices(line: str | None, max_index: int) -> tuple[int, int]:
    """Parse a line holding exactly two indices no greater than max_index."""
    if not line:
        raise InputError(_EMPTY_INPUT)
    scanner = _Scanner(line)
    first = scanner.size()
    second = scanner.size()
    if first is None or second is None:
        raise InputError(
            f"Invalid input. Please enter two numbers between 0 and {max_index}."
        )
    if not scanner.exhausted():
        raise InputError("Too many values entered. Please enter exactly two numbers.")
    if first > max_index or second > max_index:
        raise InputError(
            f"Index out of range. Please enter numbers between 0 and {max_index}."
        )
    return first, second


def read_value_update(
    line: str | None, max_index: int, element_type: ElementType
) -> tuple[int, int, Number]:
    """Parse a line holding a row, a column and a new element value."""
    if not line:
        raise InputError(_EMPTY_INPUT)
    element_type = ElementType(element_type)
    scanner = _Scanner(line)
    row = scanner.size()
    col = scanner.size()
    value = scanner.element(element_type)
    if row is None or col is None or value is None:
        raise InputError("Invalid input. Please enter row, column, and value.")
    if not scanner.exhausted():
        raise InputError(
            "Too many values entered. Please enter exactly three values."
        )
    if row > max_index or col > max_index:
        raise InputError(
            "Index out of range. Please enter row and column between 0 and "
            f"{max_index}."
        )
    return row, col, value


def read_menu_choice(line: str | None, min_choice: int, max_choice: int) -> int:
    """Parse a line holding one menu choice within the given bounds."""
    if not line:
        raise InputError(_EMPTY_INPUT)
    scanner = _Scanner(line)
    choice = scanner.integer()
    if choice is None:
        raise InputError("Invalid input. Please enter a number.")
    if not scanner.exhausted():
        raise InputError("Too many values entered. Please enter exactly one number.")
    if not min_choice <= choice <= max_choice:
        raise InputError(
            "Invalid choice. Please enter a number between "
            f"{min_choice} and {max_choice}."
        )
    return choice


def load_matrices(path: str | Path) -> tuple[Matrix, Matrix]:
    """Read the size, element type and two matrices from a file."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise InputError(f"Could not open file: {path}") from exc
    scanner = _Scanner(text)
    size = scanner.size()
    type_code = scanner.integer()
    if size is None or type_code is None:
        raise InputError("Invalid input format: expected matrix size and type")
    try:
        element_type = ElementType(type_code)
    except ValueError:
        raise InputError(
            "Invalid matrix type. Must be 0 (int) or 1 (double)"
        ) from None
    Matrix.zeros(size, element_type)
    tokens = iter(scanner.rest().split())
    try:
        first = read_matrix(tokens, size, element_type)
        second = read_matrix(tokens, size, element_type)
    except ValueError as exc:
        raise InputError(f"Error reading matrices: {exc}") from exc
    return first, second


def _show(out: TextIO, title: str, matrix: Matrix) -> None:
    out.write(f"\n{title}:\n{matrix}")


def run_menu(
    matrix1: Matrix,
    matrix2: Matrix,
    lines: Iterable[str],
    out: TextIO,
    err: TextIO,
) -> None:
    """Run the menu loop until the user exits or input runs out.

    Operations that change a matrix change matrix1 in place.
    """
    source = iter(lines)
    max_index = matrix1.size - 1

    def prompt(text: str) -> str | None:
        out.write(text)
        out.flush()
        return next(source, None)

    while True:
        line = prompt(MENU)
        try:
            choice = read_menu_choice(line, 1, 9)
        except InputError as exc:
            out.write(f"{exc}\n")
            if line is None:
                return
            continue

        try:
            match choice:
                case 1:
                    _show(out, "Matrix 1", matrix1)
                case 2:
                    _show(out, "Matrix 2", matrix2)
                case 3:
                    _show(out, "Result of Matrix1 + Matrix2", matrix1 + matrix2)
                case 4:
                    _show(out, "Result of Matrix1 * Matrix2", matrix1 * matrix2)
                case 5:
                    fmt = matrix1.element_type.format
                    major = fmt(matrix1.sum_diagonal_major())
                    minor = fmt(matrix1.sum_diagonal_minor())
                    out.write(
                        f"\nSum of Major Diagonal (Matrix1): {major}\n"
                        f"Sum of Minor Diagonal (Matrix1): {minor}\n"
                    )
                case 6 | 7:
                    kind = "row" if choice == 6 else "column"
                    line = prompt(
                        f"Enter two {kind} indices to swap (0-{max_index}): "
                    )
                    try:
                        a, b = read_two_indices(line, max_index)
                    except InputError as exc:
                        out.write(f"{exc}\n")
                        if line is None:
                            return
                        continue
                    if choice == 6:
                        matrix1.swap_rows(a, b)
                        title = f"Matrix 1 after swapping rows {a} and {b}"
                    else:
                        matrix1.swap_cols(a, b)
                        title = f"Matrix 1 after swapping columns {a} and {b}"
                    _show(out, title, matrix1)
                case 8:
                    line = prompt(
                        f"Enter row, column, and new value (0-{max_index}): "
                    )
                    try:
                        row, col, value = read_value_update(
                            line, max_index, matrix1.element_type
                        )
                    except InputError as exc:
                        out.write(f"{exc}\n")
                        if line is None:
                            return
                        continue
                    matrix1[row, col] = value
                    _show(
                        out,
                        f"Matrix 1 after updating element at ({row}, {col})",
                        matrix1,
                    )
                case 9:
                    out.write("Exiting program.\n")
                    return
        except (ArithmeticError, LookupError, ValueError, TypeError) as exc:
            err.write(f"Error: {exc}\n")


def _input_lines(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield line.rstrip("\r\n")


def main(argv: list[str] | None = None) -> int:
    """Load two matrices and run the interactive menu; return an exit status."""
    parser = argparse.ArgumentParser(
        description="Load two square matrices from a file and operate on them."
    )
    parser.add_argument(
        "file", nargs="?", help="input file; asked for on standard input if omitted"
    )
    args = parser.parse_args(argv)

    lines = _input_lines(sys.stdin)
    out, err = sys.stdout, sys.stderr
    try:
        filename = args.file
        if filename is None:
            out.write("Enter the input file name: ")
            out.flush()
            filename = next(lines, None)
            if not filename:
                raise InputError("Invalid input for filename")
        matrix1, matrix2 = load_matrices(filename)
    except (ValueError, ArithmeticError, LookupError) as exc:
        err.write(f"Error: {exc}\n")
        return 1

    _show(out, "Matrix 1", matrix1)
    _show(out, "Matrix 2", matrix2)
    run_menu(matrix1, matrix2, lines, out, err)
    return 0


if __name__ == "__main__":
    sys.exit(main())