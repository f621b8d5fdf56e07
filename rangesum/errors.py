"""
Exceptions raised while building a range-sum matrix or querying it.

Construction errors abort building the matrix, so no partially built matrix is
ever returned. Query errors only concern the call that raised them.
"""

__all__ = [
    "RangeSumError",
    "ConstructionError",
    "SourceReadError",
    "RecordParseError",
    "ShapeMismatch",
    "QueryError",
    "OutOfRange",
    "InvalidRange",
]


class RangeSumError(Exception):
    pass


class ConstructionError(RangeSumError):
    pass


class SourceReadError(ConstructionError, OSError):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"could not read rows from '{path}': {reason}")


class RecordParseError(ConstructionError, ValueError):
    """
    A record could not be decoded into signed 64-bit integers.

    Attributes
    ----------
    line : int or None
        1-based line number of the record in its source, if known
    token : str or None
        the field that failed to parse
    reason : str
        human readable description
    """

    def __init__(self, reason, line=None, token=None):
        self.line = line
        self.token = token
        self.reason = reason
        where = f"line {line}: " if line is not None else ""
        super().__init__(f"{where}{reason}")


class ShapeMismatch(ConstructionError, ValueError):
    def __init__(self, expected, actual, row=None):
        self.expected = expected
        self.actual = actual
        self.row = row
        where = f" (row {row})" if row is not None else ""
        super().__init__(f"each row is expected to have the same number of columns, previous rows had {expected}, this row has {actual}{where}")


class QueryError(RangeSumError):
    pass


class OutOfRange(QueryError, IndexError):
    """
    A query end coordinate lies at or beyond the matrix extent.

    ``axis`` is ``"x"`` for columns and ``"y"`` for rows, ``bound`` the
    offending coordinate and ``limit`` the number of columns or rows.
    """

    def __init__(self, axis, bound, limit):
        self.axis = axis
        self.bound = bound
        self.limit = limit
        kind = "columns" if axis == "x" else "rows"
        super().__init__(f"end{axis} should be lesser than number of {kind} {limit}, got {bound}")


class InvalidRange(QueryError, ValueError):
    def __init__(self, startx, starty, endx, endy, reason):
        self.rect = (startx, starty, endx, endy)
        self.reason = reason
        super().__init__(f"invalid rectangle ({startx}, {starty}) -> ({endx}, {endy}): {reason}")
