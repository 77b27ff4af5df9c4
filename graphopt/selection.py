"""
Hoare's QuickSelect for k-th order statistics.

Selection works in place on a single float array. Pivots are drawn from an
injectable ``random.Random`` so runs can be replayed from a seed.

References:
    Hoare, C. A. R. (1961): Algorithm 65: Find. CACM 4 (1) 321-322.
    Eppstein, D. (2007): Blum-style Analysis of Quickselect.
"""
from __future__ import annotations

import numbers
import random
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from .errors import InvalidParameterError, InvalidRangeError


def _is_index(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class QuickSelect:
    """
    In-place k-th order statistic selection.

    A float64 numpy array passed in is used as-is and reordered in place;
    any other sequence is copied into a new float64 array first.

    ``tail_call_optimization_on`` picks the iterative selection loop;
    otherwise the recursive one runs. Both draw pivots in the same order, so
    with equally seeded random sources they return identical results.
    """

    def __init__(
        self,
        element_array: Union[Sequence[float], np.ndarray],
        tail_call_optimization_on: bool = False,
        rng: Optional[random.Random] = None,
    ) -> None:
        array = np.asarray(element_array, dtype=np.float64)
        if array.ndim != 1 or array.size == 0:
            raise InvalidParameterError("QuickSelect needs a non-empty one-dimensional array")
        if not np.all(np.isfinite(array)):
            raise InvalidParameterError("QuickSelect array must hold finite values only")

        self._element_array = array
        self._tail_call_optimization_on = bool(tail_call_optimization_on)
        self._rng = rng if rng is not None else random.Random()

    @property
    def element_array(self) -> np.ndarray:
        return self._element_array

    @property
    def tail_call_optimization_on(self) -> bool:
        return self._tail_call_optimization_on

    # --- Internal helpers ---------------------------------------------------

    def _swap(self, location1: int, location2: int) -> None:
        array = self._element_array
        array[location1], array[location2] = array[location2], array[location1]

    def _check_range(self, left_index: int, right_index: int) -> None:
        size = self._element_array.size
        if not (_is_index(left_index) and _is_index(right_index)):
            raise InvalidRangeError(f"Indices must be integers, got {left_index!r}, {right_index!r}")
        if not 0 <= left_index <= right_index < size:
            raise InvalidRangeError(
                f"Invalid range [{left_index}, {right_index}] for array of size {size}"
            )

    def _check_rank(self, left_index: int, right_index: int, k: int) -> None:
        self._check_range(left_index, right_index)
        if not _is_index(k) or not left_index <= k <= right_index:
            raise InvalidRangeError(f"Rank {k!r} outside range [{left_index}, {right_index}]")

    def pivot_index(self, left_index: int, right_index: int) -> int:
        """Uniformly random index in ``[left_index, right_index]``."""
        return self._rng.randint(left_index, right_index)

    def _three_way_partition(
        self, left_index: int, right_index: int, pivot_index: int
    ) -> Tuple[int, int]:
        array = self._element_array
        pivot_value = array[pivot_index]
        self._swap(pivot_index, right_index)

        store_index = left_index
        for index in range(left_index, right_index):
            if array[index] < pivot_value:
                self._swap(store_index, index)
                store_index += 1

        # Pack duplicates of the pivot right after the smaller elements.
        equal_index = store_index
        for index in range(equal_index, right_index):
            if array[index] == pivot_value:
                self._swap(store_index, index)
                store_index += 1

        self._swap(right_index, store_index)
        return equal_index, store_index

    def _recursive_index_select(self, left_index: int, right_index: int, k: int) -> int:
        if left_index == right_index:
            return left_index

        equal_index, store_index = self._three_way_partition(
            left_index, right_index, self.pivot_index(left_index, right_index)
        )
        if equal_index <= k <= store_index:
            return k
        if k < equal_index:
            return self._recursive_index_select(left_index, equal_index - 1, k)
        return self._recursive_index_select(store_index + 1, right_index, k)

    def _iterative_index_select(self, left_index: int, right_index: int, k: int) -> int:
        while left_index != right_index:
            equal_index, store_index = self._three_way_partition(
                left_index, right_index, self.pivot_index(left_index, right_index)
            )
            if equal_index <= k <= store_index:
                return k
            if k < equal_index:
                right_index = equal_index - 1
            else:
                left_index = store_index + 1
        return left_index

    # --- Public API -----------------------------------------------------------

    def partition(self, left_index: int, right_index: int, pivot_index: int) -> int:
        """
        Partition ``[left_index, right_index]`` around the value at ``pivot_index``.

        Elements smaller than the pivot come first, then the duplicates of the
        pivot, then the pivot itself at the returned index; larger elements
        follow it.

        Returns:
            The pivot's resting index ``store_index``: everything before it is
            ``<=`` the pivot value and everything after it is ``>=``.
        """
        self._check_range(left_index, right_index)
        if not _is_index(pivot_index) or not left_index <= pivot_index <= right_index:
            raise InvalidRangeError(
                f"Pivot index {pivot_index!r} outside range [{left_index}, {right_index}]"
            )
        return self._three_way_partition(left_index, right_index, pivot_index)[1]

    def select_index(self, left_index: int, right_index: int, k: int) -> int:
        """
        Index holding the value that belongs at position ``k`` once
        ``[left_index, right_index]`` is sorted; the range is reordered in place.
        """
        self._check_rank(left_index, right_index, k)
        if self._tail_call_optimization_on:
            return self._iterative_index_select(left_index, right_index, k)
        return self._recursive_index_select(left_index, right_index, k)

    def select(self, left_index: int, right_index: int, k: int) -> float:
        """Value at sorted position ``k`` of the range; ``select(0, n - 1, k)`` is the k-th smallest."""
        return float(self._element_array[self.select_index(left_index, right_index, k)])
