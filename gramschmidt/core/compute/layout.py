"""
Physical matrix layout.

NumPy arrays address elements logically as (row, col) whatever their
memory order, so the orthogonalization kernels never branch on layout.
MatrixLayout only decides how the output buffers are allocated and
provides the column accessors the kernels use.
"""

from __future__ import annotations

from enum import Enum
from typing import Any
import numpy as np
from numpy.typing import NDArray


class MatrixLayout(Enum):
    """Memory order of a 2D buffer."""
    ROW_MAJOR = 'C'
    COLUMN_MAJOR = 'F'

    @classmethod
    def of(cls, array: NDArray[Any]) -> MatrixLayout:
        """
        Detect the layout of an array.

        C-contiguous arrays (including those that are also F-contiguous,
        such as single rows or columns) report ROW_MAJOR, F-contiguous
        arrays COLUMN_MAJOR. Non-contiguous views have no physical layout
        of their own and report ROW_MAJOR.
        """
        if array.flags['C_CONTIGUOUS']:
            return cls.ROW_MAJOR
        if array.flags['F_CONTIGUOUS']:
            return cls.COLUMN_MAJOR
        return cls.ROW_MAJOR

    @classmethod
    def from_fortran_order(cls, fortran_order: bool) -> MatrixLayout:
        return cls.COLUMN_MAJOR if fortran_order else cls.ROW_MAJOR

    @property
    def order(self) -> str:
        """NumPy order character ('C' or 'F')."""
        return self.value

    def zeros(self, shape: tuple[int, int]) -> NDArray[np.float64]:
        """Allocate a zeroed float64 buffer in this layout."""
        return np.zeros(shape, dtype=np.float64, order=self.value)

    @staticmethod
    def column(matrix: NDArray[np.float64], j: int) -> NDArray[np.float64]:
        """View of logical column j."""
        return matrix[:, j]

    @staticmethod
    def leading_columns(matrix: NDArray[np.float64], j: int) -> NDArray[np.float64]:
        """View of logical columns 0..j-1."""
        return matrix[:, :j]
