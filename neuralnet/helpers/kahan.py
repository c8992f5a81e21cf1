"""
Compensated (Kahan) summation.

A plain running total loses the low-order bits of every small term added to a
large partial sum, and that error grows with the number of terms. The summer
below carries the lost bits in a separate compensation term and feeds them back
into the next addition.
"""
import numpy as np


class KahanSummer:
    def __init__(self, shape=None):
        # shape=None -> one scalar sum
        # shape=(n,) -> n independent sums updated element-wise
        if shape is None:
            self._sum = 0.0
            self._compensation = 0.0
        else:
            self._sum = np.zeros(shape, dtype=np.float64)
            self._compensation = np.zeros(shape, dtype=np.float64)

    def add(self, term):
        y = term - self._compensation
        t = self._sum + y
        # (t - sum) is the part of y that made it into t
        self._compensation = (t - self._sum) - y
        self._sum = t

    def total(self):
        if isinstance(self._sum, np.ndarray):
            return self._sum.copy()
        return float(self._sum)


def kahan_sum(terms):
    summer = KahanSummer()
    for term in terms:
        summer.add(term)
    return summer.total()
