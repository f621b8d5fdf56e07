import numpy as np

from rangesum.basis.range_sum import RangeSumMatrix

__all__ = ["RowPrefixMatrix", "SummedAreaMatrix"]


class RowPrefixMatrix(RangeSumMatrix):
    """
    每一行单独计算前缀和，查询时逐行求差再累加

    For the row [1, 2, 5, 11] the stored prefix sums are [1, 3, 8, 19], so
    column 3 holds the sum of columns 0 to 3. A query over rows starty..endy
    costs O(endy - starty + 1).
    """

    def _compute_prefix_sum(self, mat):
        """
        使用numpy.cumsum沿行方向计算前缀和，并在左侧添加一列0

        参数:
        - mat: (nrows, ncols) 的int64数组

        返回:
        - prefix_sum: (nrows, ncols + 1) 的数组，第一列为额外添加的0
        """
        prefix_sum = np.zeros((mat.shape[0], mat.shape[1] + 1), dtype=np.int64)
        prefix_sum[:, 1:] = np.cumsum(mat, axis=1)
        return prefix_sum

    @property
    def presum(self):
        """Per-row running totals, same shape as ``elems``."""
        return self._table[:, 1:]

    def _rect_sum(self, startx, starty, endx, endy):
        # Column views over the selected rows, the padding column stands in for startx - 1 when startx is 0
        rows = self._table[starty : endy + 1]
        return rows[:, endx + 1].sum() - rows[:, startx].sum()


class SummedAreaMatrix(RangeSumMatrix):
    """
    二维前缀和(积分图)，任意子矩阵的和只需要四次查表

    Cell (y, x) of ``allsum`` holds the sum of every element with row <= y
    and column <= x. For the rows

        1, 2, 5, 11
        5, 9, 11, 15
        2, 17, 8, -10

    the table is

        1  3   8   19
        6  17  33  59
        8  36  60  76
    """

    def _compute_prefix_sum(self, mat):
        """
        使用numpy.cumsum计算二维矩阵的前缀和，并在前缀和矩阵的左上角添加一行和一列的零

        每一行先求行内累加和，再加上上一行同一列的累计值，第一行之前视为全0的一行。

        参数:
        - mat: (nrows, ncols) 的int64数组

        返回:
        - prefix_sum: (nrows + 1, ncols + 1) 的数组，第一行和第一列为额外添加的0
        """
        prefix_sum = np.zeros((mat.shape[0] + 1, mat.shape[1] + 1), dtype=np.int64)
        prefix_sum[1:, 1:] = np.cumsum(np.cumsum(mat, axis=1), axis=0)
        return prefix_sum

    @property
    def allsum(self):
        """Per-cell 2-D cumulative totals, same shape as ``elems``."""
        return self._table[1:, 1:]

    def _rect_sum(self, startx, starty, endx, endy):
        # Adjust indices for the extra row and column
        total = self._table[endy + 1, endx + 1]
        total -= self._table[endy + 1, startx]
        total -= self._table[starty, endx + 1]
        total += self._table[starty, startx]
        return total


if __name__ == "__main__":
    mat = [[1, 2, 5, 11], [5, 9, 11, 15], [2, 17, 8, -10]]

    for m in (RowPrefixMatrix(mat), SummedAreaMatrix(mat)):
        # 获取子矩阵 (1, 1) 到 (3, 2) 的和
        print(type(m).__name__, m.sum(1, 1, 3, 2))  # 输出应该是50
