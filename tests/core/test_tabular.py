"""Tests for the read-only tabular view."""

import numpy as np
import pytest

from dilutedml import IndexOutOfRangeError, InvalidArgumentError, TabularData, TabularView, as_tabular
from dilutedml.core.tabular import column_values


class TestTabularData:
    def test_dimensions(self, view):
        assert view.rows == 5
        assert view.cols == 3
        assert view.shape == (5, 3)
        assert len(view) == 5
        assert repr(view) == "TabularData(rows=5, cols=3)"

    def test_cell(self, view):
        assert view.cell(1, 0) == 1.0
        assert isinstance(view.cell(1, 0), float)

    @pytest.mark.parametrize("row, col", [(5, 0), (-1, 0), (0, 3), (0, -1)])
    def test_cell_out_of_range(self, view, row, col):
        with pytest.raises(IndexOutOfRangeError):
            view.cell(row, col)

    def test_values_read_only(self, view):
        with pytest.raises(ValueError):
            view.values[0, 0] = 99.0

    def test_caller_buffer_stays_writeable(self, matrix):
        TabularData(matrix)
        matrix[0, 0] = 42.0
        assert matrix[0, 0] == 42.0

    def test_no_copy_for_float64(self, matrix):
        assert np.shares_memory(TabularData(matrix).values, matrix)

    def test_column_and_row_are_copies(self, view):
        col = view.column(0)
        row = view.row(0)
        col[:] = 0
        row[:] = 0
        assert view.cell(0, 0) == 5.0

    def test_integer_input_converted(self):
        t = TabularData([[1, 2], [3, 4]])
        assert t.values.dtype == np.float64

    @pytest.mark.parametrize("values", [[1.0, 2.0], np.ones((2, 2, 2)), 3.0])
    def test_rejects_non_matrix(self, values):
        with pytest.raises(InvalidArgumentError, match="2-dimensional"):
            TabularData(values)

    def test_rejects_non_numeric(self):
        with pytest.raises(InvalidArgumentError):
            TabularData([["a", "b"]])

    def test_column_label_mismatch(self, matrix):
        with pytest.raises(InvalidArgumentError, match="column labels"):
            TabularData(matrix, columns=["only-one"])

    def test_zero_rows_allowed(self, empty_view):
        assert empty_view.rows == 0
        assert empty_view.cols == 3


class TestAsTabular:
    def test_passthrough(self, view):
        assert as_tabular(view) is view

    def test_custom_view_passthrough(self, list_view):
        assert isinstance(list_view, TabularView)
        assert as_tabular(list_view) is list_view

    def test_array(self, matrix):
        result = as_tabular(matrix)
        assert isinstance(result, TabularData)
        assert result.shape == (5, 3)

    def test_nested_list(self):
        assert as_tabular([[1.0], [2.0]]).rows == 2


class TestColumnValues:
    def test_fast_path(self, view):
        np.testing.assert_array_equal(column_values(view, 1), [2.0, 4.0, 4.0, 4.0, 5.0])

    def test_cell_path(self, list_view):
        np.testing.assert_array_equal(column_values(list_view, 0), [5.0, 1.0, 3.0])

    def test_out_of_range(self, list_view):
        with pytest.raises(IndexOutOfRangeError):
            column_values(list_view, 2)
