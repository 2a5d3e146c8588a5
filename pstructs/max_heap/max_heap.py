from __future__ import annotations

from typing import Generic, Iterable, List, Optional, TypeVar

import numpy as np

from pstructs import config as ps_config
from pstructs.exceptions import InvariantViolationError
from pstructs.logging import get_logger

T = TypeVar("T")


class MaxHeap(Generic[T]):
    """
    Binary max-heap stored in a Python list.

    The element at index ``i`` has its children at ``2i + 1`` and
    ``2i + 2`` and its parent at ``(i - 1) // 2``; no element is greater
    than its parent, so the largest element sits at index 0.
    """

    def __init__(self) -> None:
        self._data: List[T] = []

    @classmethod
    def from_sequence(cls, items: Iterable[T]) -> MaxHeap[T]:
        """
        Build a heap from an arbitrary sequence.

        Every index after the root is sifted up in increasing order, which
        costs O(n log n).

        Parameters
        ----------
        items : Iterable[T]
            The elements. The sequence is copied; numpy arrays are
            converted to Python scalars.

        Returns
        -------
        MaxHeap[T]
            A heap holding every element of `items`.
        """
        heap = cls()
        if isinstance(items, np.ndarray):
            heap._data = items.tolist()
        else:
            heap._data = list(items)
        for index in range(1, len(heap._data)):
            heap._sift_up(index)
        get_logger("max_heap").debug("heapified %d items", len(heap._data))
        heap._check()
        return heap

    def into_sequence(self) -> List[T]:
        """Hand over the backing list in heap order; the heap is emptied."""
        data, self._data = self._data, []
        return data

    def push(self, item: T) -> None:
        self._data.append(item)
        self._sift_up(len(self._data) - 1)
        self._check()

    def pop(self) -> Optional[T]:
        """Remove and return the largest element, or None if empty."""
        if not self._data:
            return None
        last = self._data.pop()
        if self._data:
            result = self._data[0]
            self._data[0] = last
            self._sift_down(0)
        else:
            result = last
        self._check()
        return result

    def peek(self) -> Optional[T]:
        if not self._data:
            return None
        return self._data[0]

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def copy(self) -> MaxHeap[T]:
        clone = type(self)()
        clone._data = list(self._data)
        return clone

    def _sift_up(self, index: int) -> None:
        data = self._data
        while index > 0:
            parent = (index - 1) // 2
            if data[parent] < data[index]:
                data[parent], data[index] = data[index], data[parent]
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        data = self._data
        size = len(data)
        while True:
            left = 2 * index + 1
            right = left + 1
            if left >= size:
                break
            # Ties between the children go to the right one.
            if right >= size or data[left] > data[right]:
                child = left
            else:
                child = right
            if data[index] < data[child]:
                data[index], data[child] = data[child], data[index]
                index = child
            else:
                break

    def _validate(self) -> bool:
        data = self._data
        for index in range(1, len(data)):
            if data[(index - 1) // 2] < data[index]:
                return False
        return True

    def _check(self) -> None:
        if ps_config.runtime_config().check_invariants and not self._validate():
            raise InvariantViolationError("Heap order violated")

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def __repr__(self) -> str:
        return f"MaxHeap({self._data})"
