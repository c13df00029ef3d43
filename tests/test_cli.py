import io
import sys

import pytest

from squarematrix.cli import (
    MENU,
    InputError,
    load_matrices,
    main,
    read_menu_choice,
    read_two_indices,
    read_value_update,
    run_menu,
)
from squarematrix.matrix import INT_MAX, ElementType, Matrix


def _run(m1, m2, lines):
    out, err = io.StringIO(), io.StringIO()
    run_menu(m1, m2, lines, out, err)
    return out.getvalue(), err.getvalue()


def _write(tmp_path, text, name="input.txt"):
    path = tmp_path / name
    path.write_text(text)
    return path


# read_two_indices

def test_two_indices_valid():
    assert read_two_indices("1 2", 3) == (1, 2)


def test_two_indices_extra_spaces():
    assert read_two_indices("   0\t3  ", 3) == (0, 3)


@pytest.mark.parametrize("line", ["", None])
def test_two_indices_empty(line):
    with pytest.raises(InputError, match="Invalid input. Please try again."):
        read_two_indices(line, 3)


def test_two_indices_only_one():
    with pytest.raises(InputError) as info:
        read_two_indices("1", 3)
    assert str(info.value) == "Invalid input. Please enter two numbers between 0 and 3."


def test_two_indices_too_many():
    with pytest.raises(InputError, match="Too many values entered"):
        read_two_indices("1 2 3", 3)


def test_two_indices_trailing_garbage_counts_as_extra():
    with pytest.raises(InputError, match="exactly two numbers"):
        read_two_indices("1 2x", 3)


def test_two_indices_out_of_range():
    with pytest.raises(InputError) as info:
        read_two_indices("0 5", 3)
    assert str(info.value) == "Index out of range. Please enter numbers between 0 and 3."


def test_two_indices_negative_is_out_of_range():
    with pytest.raises(InputError, match="Index out of range"):
        read_two_indices("-1 0", 3)


# read_value_update

def test_value_update_int():
    assert read_value_update("1 2 7", 2, ElementType.INT) == (1, 2, 7)


def test_value_update_double():
    row, col, value = read_value_update("0 0 2.5", 2, ElementType.DOUBLE)
    assert (row, col) == (0, 0)
    assert value == pytest.approx(2.5)


def test_value_update_bad_value():
    with pytest.raises(InputError, match="Please enter row, column, and value"):
        read_value_update("0 0 abc", 2, ElementType.INT)


def test_value_update_int_out_of_range_value():
    with pytest.raises(InputError, match="Please enter row, column, and value"):
        read_value_update("0 0 3000000000", 2, ElementType.INT)


def test_value_update_too_many():
    with pytest.raises(InputError, match="exactly three values"):
        read_value_update("0 0 1 1", 2, ElementType.INT)


def test_value_update_index_out_of_range():
    with pytest.raises(InputError, match="row and column between 0 and 2"):
        read_value_update("3 0 1", 2, ElementType.INT)


def test_value_update_empty():
    with pytest.raises(InputError, match="Please try again"):
        read_value_update("", 2, ElementType.INT)


# read_menu_choice

def test_menu_choice_valid():
    assert read_menu_choice("5", 1, 9) == 5


def test_menu_choice_out_of_range():
    with pytest.raises(InputError) as info:
        read_menu_choice("10", 1, 9)
    assert str(info.value) == "Invalid choice. Please enter a number between 1 and 9."


def test_menu_choice_not_number():
    with pytest.raises(InputError, match="Invalid input. Please enter a number."):
        read_menu_choice("abc", 1, 9)


def test_menu_choice_too_many():
    with pytest.raises(InputError, match="exactly one number"):
        read_menu_choice("3 4", 1, 9)


# load_matrices

def test_load_int_matrices(tmp_path):
    path = _write(tmp_path, "2 0\n1 2\n3 4\n5 6\n7 8\n")
    m1, m2 = load_matrices(path)
    assert m1.rows == [[1, 2], [3, 4]]
    assert m2.rows == [[5, 6], [7, 8]]
    assert m1.element_type is ElementType.INT


def test_load_double_matrices(tmp_path):
    path = _write(tmp_path, "1 1\n1.5\n-2.25\n")
    m1, m2 = load_matrices(path)
    assert m1.element_type is ElementType.DOUBLE
    assert m1[0, 0] == pytest.approx(1.5)
    assert m2[0, 0] == pytest.approx(-2.25)


def test_load_missing_file(tmp_path):
    path = tmp_path / "absent.txt"
    with pytest.raises(InputError) as info:
        load_matrices(path)
    assert str(info.value) == f"Could not open file: {path}"


def test_load_bad_header(tmp_path):
    path = _write(tmp_path, "abc\n")
    with pytest.raises(InputError, match="expected matrix size and type"):
        load_matrices(path)


def test_load_bad_type(tmp_path):
    path = _write(tmp_path, "2 2\n1 2 3 4 5 6 7 8\n")
    with pytest.raises(InputError, match="Must be 0 \\(int\\) or 1 \\(double\\)"):
        load_matrices(path)


def test_load_zero_size(tmp_path):
    path = _write(tmp_path, "0 0\n")
    with pytest.raises(ValueError, match="Matrix size cannot be zero"):
        load_matrices(path)


def test_load_too_large(tmp_path):
    path = _write(tmp_path, "101 0\n")
    with pytest.raises(ValueError, match="Matrix size cannot exceed 100"):
        load_matrices(path)


def test_load_missing_elements(tmp_path):
    path = _write(tmp_path, "2 0\n1 2\n3 4\n5 6\n7\n")
    with pytest.raises(InputError) as info:
        load_matrices(path)
    assert str(info.value).startswith("Error reading matrices: Invalid matrix element at row 1, column 1")


# run_menu

def _pair():
    return Matrix([[1, 2], [3, 4]]), Matrix([[5, 6], [7, 8]])


def test_menu_add_then_exit():
    m1, m2 = _pair()
    out, err = _run(m1, m2, ["3", "9"])
    assert f"\nResult of Matrix1 + Matrix2:\n{m1 + m2}" in out
    assert out.endswith("Exiting program.\n")
    assert err == ""


def test_menu_multiply():
    m1, m2 = _pair()
    out, _ = _run(m1, m2, ["4", "9"])
    assert f"\nResult of Matrix1 * Matrix2:\n{m1 * m2}" in out


def test_menu_display_both():
    m1, m2 = _pair()
    out, _ = _run(m1, m2, ["1", "2", "9"])
    assert f"\nMatrix 1:\n{m1}" in out
    assert f"\nMatrix 2:\n{m2}" in out
    assert out.count(MENU) == 3


def test_menu_diagonals():
    m1, m2 = _pair()
    out, _ = _run(m1, m2, ["5", "9"])
    assert f"Sum of Major Diagonal (Matrix1): {m1.sum_diagonal_major()}\n" in out
    assert f"Sum of Minor Diagonal (Matrix1): {m1.sum_diagonal_minor()}\n" in out


def test_menu_swap_rows_changes_matrix1():
    m1, m2 = _pair()
    original = m1.rows
    out, _ = _run(m1, m2, ["6", "0 1", "9"])
    assert m1.rows == [original[1], original[0]]
    assert "Matrix 1 after swapping rows 0 and 1:" in out


def test_menu_swap_cols_changes_matrix1():
    m1, m2 = _pair()
    original = m1.rows
    out, _ = _run(m1, m2, ["7", "0 1", "9"])
    assert m1.rows == [row[::-1] for row in original]
    assert "Matrix 1 after swapping columns 0 and 1:" in out


def test_menu_update_element():
    m1, m2 = _pair()
    out, _ = _run(m1, m2, ["8", "0 0 42", "9"])
    assert m1[0, 0] == 42
    assert "Matrix 1 after updating element at (0, 0):" in out


def test_menu_bad_swap_input_keeps_matrix():
    m1, m2 = _pair()
    original = m1.rows
    out, _ = _run(m1, m2, ["6", "0 9", "9"])
    assert m1.rows == original
    assert "Index out of range. Please enter numbers between 0 and 1.\n" in out


def test_menu_invalid_choice_reported():
    m1, m2 = _pair()
    out, _ = _run(m1, m2, ["0", "9"])
    assert "Invalid choice. Please enter a number between 1 and 9.\n" in out
    assert out.endswith("Exiting program.\n")


def test_menu_overflow_goes_to_err():
    m1, m2 = Matrix([[INT_MAX]]), Matrix([[1]])
    out, err = _run(m1, m2, ["3", "9"])
    assert err == "Error: Integer overflow in matrix addition\n"
    assert "Result of Matrix1 + Matrix2" not in out


def test_menu_stops_at_end_of_input():
    m1, m2 = _pair()
    out, _ = _run(m1, m2, [])
    assert out == MENU + "Invalid input. Please try again.\n"


# main

def test_main_reads_filename_from_stdin(tmp_path, monkeypatch, capsys):
    path = _write(tmp_path, "2 0\n1 2\n3 4\n5 6\n7 8\n")
    monkeypatch.setattr(sys, "stdin", io.StringIO(f"{path}\n9\n"))
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("Enter the input file name: \nMatrix 1:\n")
    assert f"\nMatrix 2:\n{Matrix([[5, 6], [7, 8]])}" in captured.out
    assert captured.out.endswith("Exiting program.\n")


def test_main_takes_file_argument(tmp_path, monkeypatch, capsys):
    path = _write(tmp_path, "1 0\n3\n4\n")
    monkeypatch.setattr(sys, "stdin", io.StringIO("9\n"))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Enter the input file name" not in out
    assert out.endswith("Exiting program.\n")


def test_main_missing_file(tmp_path, monkeypatch, capsys):
    path = tmp_path / "absent.txt"
    monkeypatch.setattr(sys, "stdin", io.StringIO(f"{path}\n"))
    assert main([]) == 1
    assert capsys.readouterr().err == f"Error: Could not open file: {path}\n"


def test_main_empty_filename(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("\n"))
    assert main([]) == 1
    assert capsys.readouterr().err == "Error: Invalid input for filename\n"