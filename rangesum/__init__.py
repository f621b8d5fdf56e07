from .basis import RangeSumMatrix, RowPrefixMatrix, SummedAreaMatrix
from .errors import *
from .rows import read_csv_rows

__version__ = "0.1.0"

# 可选的查询方法，键为命令行中使用的名字
METHODS = {
    "rowsum": RowPrefixMatrix,
    "allsum": SummedAreaMatrix,
}
