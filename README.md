# squarematrix

Square matrices of integers or floating-point numbers, from 1 × 1 up to
100 × 100. They support addition, multiplication, diagonal sums and
row/column swaps. Integer matrices behave like 32-bit signed integers.
Arithmetic that would leave that range raises `OverflowError` or
`MatrixUnderflowError` (a subclass of `ArithmeticError`) and does not
wrap around.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Library use

```python
from squarematrix.matrix import ElementType, Matrix

a = Matrix([[0, 0, 8], [6, 7, 8], [4, 1, 6]], ElementType.INT)
b = Matrix([[6, 3, 7], [8, 6, 6], [3, 3, 5]], ElementType.INT)

print(a + b)
print(a * b)
print(a.sum_diagonal_major(), a.sum_diagonal_minor())   # 13 19

a.swap_rows(0, 2)
a.swap_cols(0, 1)
a[1, 1] = 42
print(a[1, 1], a.size)
```

Main points of `squarematrix.matrix`:

- `Matrix(rows, element_type=ElementType.INT)` builds a matrix from a
  sequence of rows.
  - Values are converted to the element type. `INT` takes integers only and checks the 32-bit range. `DOUBLE` stores floats.
  - Empty data, non-square data and sizes above 100 raise `ValueError`.
- `Matrix.zeros(size, element_type)` builds a matrix filled with zeros.
- Properties:
  - `size` is the number of rows.
  - `element_type` is the element type.
  - `rows` is a copy of the elements as nested lists.
- Elements are read and written with `m[row, col]`. An index outside the matrix raises `IndexError`.
- `+` and `*` need two matrices of the same size and the same element type.
  - A size mismatch raises `ValueError`.
  - A type mismatch raises `TypeError`.
- Matrices compare equal when their element types and elements are equal.
- `str(m)` right-aligns every element in columns one character wider than the widest element. Each row ends with a newline. Doubles are shown in `%g` style.
- `read_matrix(tokens, size, element_type)` fills a matrix from an iterable of text tokens, row by row.
  - It consumes exactly `size * size` tokens, so one iterator can feed several matrices.
  - A missing or malformed token raises `ValueError` naming the row and column.

## Interactive program

```
squarematrix [FILE]
```

If `FILE` is not given, the program asks for the input file name on
standard input. The file starts with the matrix size `N` and a type flag:
`0` for integers, `1` for floating point. Then come the `N × N` elements of
the first matrix, followed by those of the second:

```
3 0
1 2 3
4 5 6
7 8 9
9 8 7
6 5 4
3 2 1
```

The program shows both matrices and then offers a menu:

1. Display Matrix 1
2. Display Matrix 2
3. Add Matrices (Matrix1 + Matrix2)
4. Multiply Matrices (Matrix1 * Matrix2)
5. Display Sum of Diagonals of Matrix 1
6. Swap Rows in Matrix 1
7. Swap Columns in Matrix 1
8. Update an Element in Matrix 1
9. Exit

Invalid menu entries, indices or values are reported, and the menu is shown
again.

Errors from an operation are printed to standard error as `Error: ...`,
for example an integer overflow during multiplication. The menu then
continues.

The program exits with status 1 after printing the message to standard
error when:

- the file cannot be opened, or
- the file cannot be read as a size, a type and two matrices.

The menu ends when you choose 9 or when standard input runs out.

The same pieces are available from `squarematrix.cli`:

- `load_matrices(path)` reads both matrices from a file.
- `run_menu(matrix1, matrix2, lines, out, err)` runs the menu over any iterable of input lines and any pair of text streams.
- `read_menu_choice`, `read_two_indices` and `read_value_update` parse single input lines. They raise `InputError` for invalid input.

## What it does not do

Changes made from the menu apply to the matrices in memory only. Nothing
is written back to the input file or saved anywhere else.