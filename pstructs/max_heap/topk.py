from typing import Any

from pstructs.max_heap.max_heap import MaxHeap


def get_topk(heap: MaxHeap, k: int) -> list[Any]:
    """
    Function to get the top-K elements from a heap.

    The heap itself is not modified; the elements are popped from a copy,
    so they come out largest first.

    Parameters
    ----------
    heap : MaxHeap
        A MaxHeap object
    k : int
        The number of 'top-K' elements to retrieve.

    Returns
    -------
    list[Any]
        The 'top-K' elements, in descending order.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    scratch = heap.copy()
    topk = []
    while len(topk) < k and not scratch.is_empty():
        topk.append(scratch.pop())
    return topk
