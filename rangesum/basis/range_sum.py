import logging
import numbers
from collections.abc import Iterable

import numpy as np

from rangesum.errors import InvalidRange, OutOfRange, RecordParseError, ShapeMismatch
from rangesum.rows import INT64_MAX, INT64_MIN, read_csv_rows

__all__ = ["RangeSumMatrix"]

logger = logging.getLogger(__name__)


class RangeSumMatrix:
    """
    Base class for matrices that answer rectangular range-sum queries.

    A subclass precomputes an auxiliary table from the rows once and then
    answers every query from that table. The rows and the table are read-only
    numpy arrays, so a built matrix never changes and can be queried from
    several threads at once.

    Subclasses implement ``_compute_prefix_sum`` and ``_rect_sum``.
    """

    def __init__(self, mat):
        """
        Parameters
        ----------
        mat : iterable of sequences of int, or 2-D integer ndarray
            the rows of the matrix, all of the same length. An empty iterable
            gives an empty matrix on which every query fails.

        Raises
        ------
        ShapeMismatch
            a row has a different length than the rows before it
        RecordParseError
            a value is not an integer or does not fit in int64
        SourceReadError
            propagated from a row source that fails while being read
        """
        elems = _collect_rows(mat)
        elems.flags.writeable = False

        table = self._compute_prefix_sum(elems)
        table.flags.writeable = False

        self._elems = elems
        self._table = table
        logger.debug("Built %s with %d rows and %d columns", type(self).__name__, *elems.shape)

    @classmethod
    def from_csv(cls, path, delimiter=","):
        """Build the matrix from a header-less CSV file of integers."""
        return cls(read_csv_rows(path, delimiter=delimiter))

    @property
    def elems(self):
        return self._elems

    @property
    def ncols(self):
        return self._elems.shape[1]

    @property
    def nrows(self):
        return self._elems.shape[0]

    @property
    def shape(self):
        return self._elems.shape

    def __len__(self):
        return self.nrows

    def __repr__(self):
        return f"{type(self).__name__}(nrows={self.nrows}, ncols={self.ncols})"

    def sum(self, startx, starty, endx, endy):
        """
        Sum of all elements in the inclusive rectangle (startx, starty) -> (endx, endy).

        x indexes columns and y indexes rows, both zero-based.

        Raises
        ------
        OutOfRange
            ``endx >= ncols`` or ``endy >= nrows``
        InvalidRange
            a coordinate is negative, or ``startx > endx`` or ``starty > endy``
        TypeError
            a coordinate is not an integer
        """
        self._check_rect(startx, starty, endx, endy)
        # int64 arithmetic wraps around like the precomputed cumulative sums do
        with np.errstate(over="ignore"):
            return int(self._rect_sum(int(startx), int(starty), int(endx), int(endy)))

    def _check_rect(self, startx, starty, endx, endy):
        for name, value in (("startx", startx), ("starty", starty), ("endx", endx), ("endy", endy)):
            if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
                raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
            if value < 0:
                raise InvalidRange(startx, starty, endx, endy, f"{name} is negative")

        if endx >= self.ncols:
            logger.debug("Rejected query, endx=%d with %d columns", endx, self.ncols)
            raise OutOfRange("x", endx, self.ncols)
        if endy >= self.nrows:
            logger.debug("Rejected query, endy=%d with %d rows", endy, self.nrows)
            raise OutOfRange("y", endy, self.nrows)

        if startx > endx:
            raise InvalidRange(startx, starty, endx, endy, "startx is greater than endx")
        if starty > endy:
            raise InvalidRange(startx, starty, endx, endy, "starty is greater than endy")

    def _compute_prefix_sum(self, mat):
        raise NotImplementedError

    def _rect_sum(self, startx, starty, endx, endy):
        raise NotImplementedError


def _collect_rows(mat):
    """Validate the rows of ``mat`` and stack them into one (nrows, ncols) int64 array."""
    if isinstance(mat, np.ndarray) and mat.ndim == 2:
        # Already rectangular, only the values need checking
        return _check_array(mat, "matrix")

    rows = []
    ncols = None
    for i, row in enumerate(mat):
        row = _as_row(row, i)

        # The first row fixes the number of columns
        rl = len(row)
        if ncols is None:
            ncols = rl
        elif ncols != rl:
            raise ShapeMismatch(ncols, rl, row=i)
        rows.append(row)

    if not rows:
        return np.zeros((0, 0), dtype=np.int64)
    return np.stack(rows)


def _as_row(values, i):
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise RecordParseError(f"row {i} is a {values.ndim}-D array, expected a flat sequence of integers")
        return _check_array(values, f"row {i}")

    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise RecordParseError(f"row {i} is not a sequence of integers")
    return np.array([_check_value(v, f"row {i}") for v in values], dtype=np.int64)


def _check_array(arr, where):
    if arr.dtype == object:
        return np.array([_check_value(v, where) for v in arr.flat], dtype=np.int64).reshape(arr.shape)
    if arr.size and (arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.integer)):
        raise RecordParseError(f"{where} holds {arr.dtype} values, expected integers")
    if arr.size and arr.dtype == np.uint64 and arr.max() > INT64_MAX:
        raise RecordParseError(f"{where} holds {arr.max()}, which does not fit in a signed 64-bit integer")
    # astype copies, so later changes to the caller's array do not leak in
    return arr.astype(np.int64)


def _check_value(v, where):
    if isinstance(v, (bool, np.bool_)) or not isinstance(v, numbers.Integral):
        raise RecordParseError(f"{where} holds a non-integer value {v!r}")
    v = int(v)
    if v < INT64_MIN or v > INT64_MAX:
        raise RecordParseError(f"{where} holds {v}, which does not fit in a signed 64-bit integer")
    return v
