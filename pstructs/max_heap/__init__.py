from pstructs.max_heap.max_heap import MaxHeap
from pstructs.max_heap.topk import get_topk
