"""Shared fixtures for dilutedml tests."""

from __future__ import annotations

import numpy as np
import pytest

from dilutedml.core.backend import set_backend
from dilutedml.core.tabular import TabularData


class ListView:
    """Minimal TabularView over nested lists, without a ``column`` fast path."""

    def __init__(self, data):
        self._data = [list(map(float, row)) for row in data]
        self.reads = 0

    @property
    def rows(self):
        return len(self._data)

    @property
    def cols(self):
        return len(self._data[0]) if self._data else 0

    def cell(self, row, col):
        self.reads += 1
        return self._data[row][col]


@pytest.fixture(autouse=True)
def _numpy_backend():
    set_backend("numpy")
    yield
    set_backend("numpy")


@pytest.fixture
def matrix():
    return np.array(
        [
            [5.0, 2.0, 10.0],
            [1.0, 4.0, 10.0],
            [3.0, 4.0, 10.0],
            [7.0, 4.0, 10.0],
            [9.0, 5.0, 10.0],
        ]
    )


@pytest.fixture
def view(matrix):
    return TabularData(matrix, columns=["a", "b", "c"])


@pytest.fixture
def empty_view():
    return TabularData(np.empty((0, 3)))


@pytest.fixture
def list_view():
    return ListView([[5, 1], [1, 2], [3, 3]])


@pytest.fixture
def single_column():
    def _make(values):
        return TabularData(np.asarray(values, dtype=float).reshape(-1, 1))

    return _make
