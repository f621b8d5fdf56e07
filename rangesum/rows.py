import csv
import logging
import re

import numpy as np

from rangesum.errors import RecordParseError, SourceReadError

__all__ = ["read_csv_rows", "parse_record"]

logger = logging.getLogger(__name__)

INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_record(fields, line=None):
    """
    把一条记录的所有字段解析为有符号64位整数

    Parameters
    ----------
    fields : sequence of str
        记录中的字段，字段两端的空白会被忽略
    line : int, optional
        记录所在的行号(从1开始)，只用于错误信息

    Returns
    -------
    (N,) ndarray of int64
        解析后的行

    Raises
    ------
    RecordParseError
        字段不是十进制整数，或者超出int64范围
    """
    values = []
    for field in fields:
        token = field.strip()
        if not _INTEGER.fullmatch(token):
            raise RecordParseError(f"invalid digit found in field {field!r}", line=line, token=field)
        value = int(token)
        if value < INT64_MIN or value > INT64_MAX:
            raise RecordParseError(f"number too large to fit in a signed 64-bit integer: {token}", line=line, token=field)
        values.append(value)
    return np.array(values, dtype=np.int64)


def read_csv_rows(path, delimiter=","):
    """
    Read a header-less delimited text file record by record.

    Blank lines are skipped. Every other record is yielded as an int64 array;
    checking that all records have the same length is left to the matrix
    that consumes them.

    Parameters
    ----------
    path : str or os.PathLike
        file to read
    delimiter : str
        field separator, a comma by default

    Yields
    ------
    (N,) ndarray of int64
        one row per record, in file order

    Raises
    ------
    SourceReadError
        the file cannot be opened, read or decoded
    RecordParseError
        a field is not a signed 64-bit integer
    """
    try:
        f = open(path, newline="", encoding="utf-8")
    except OSError as e:
        raise SourceReadError(path, e.strerror or str(e)) from e

    logger.debug("Reading rows from %s", path)
    with f:
        reader = csv.reader(f, delimiter=delimiter)
        while True:
            try:
                record = next(reader)
            except StopIteration:
                break
            except (OSError, UnicodeDecodeError, csv.Error) as e:
                raise SourceReadError(path, str(e)) from e

            if not record:
                continue
            yield parse_record(record, line=reader.line_num)
