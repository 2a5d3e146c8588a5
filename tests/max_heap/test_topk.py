from pstructs.max_heap.max_heap import MaxHeap
from pstructs.max_heap.topk import get_topk


class TestGetTopK:
    def test_get_topk_with_negative_k(self):
        heap = MaxHeap.from_sequence([10, 5, 3])
        result = get_topk(heap, -1)
        assert result == []

    def test_get_topk_with_empty_heap(self):
        heap = MaxHeap()
        result = get_topk(heap, 5)
        assert result == []

    def test_get_topk(self):
        heap = MaxHeap.from_sequence([10, 5, 15, 1, 20])
        result = get_topk(heap, 3)
        assert result == [20, 15, 10]

    def test_get_topk_leaves_heap_untouched(self):
        heap = MaxHeap.from_sequence([10, 5, 15, 1, 20])
        before = list(heap._data)

        get_topk(heap, 2)

        assert heap._data == before
        assert len(heap) == 5

    def test_get_topk_larger_than_heap(self):
        heap = MaxHeap.from_sequence([2, 1])
        assert get_topk(heap, 10) == [2, 1]

    def test_get_topk_with_duplicates(self):
        heap = MaxHeap.from_sequence([10, 10, 5, 15])
        result = get_topk(heap, 3)
        assert result == [15, 10, 10]

    def test_get_topk_with_tuples(self):
        heap = MaxHeap.from_sequence(
            [(1, "string"), (2, "int"), (3, "list"), (4, "dict")]
        )
        result = get_topk(heap, 2)
        assert result == [(4, "dict"), (3, "list")]

    def test_get_topk_with_negative_values(self):
        heap = MaxHeap.from_sequence([-10, 0, 5, -5])
        assert get_topk(heap, 2) == [5, 0]
