from .range_sum import RangeSumMatrix
from .prefix_sum import RowPrefixMatrix, SummedAreaMatrix
