from pstructs.max_heap.max_heap import MaxHeap
from pstructs.max_heap.topk import get_topk
from pstructs.tree.ordering import Ordering, natural_order
from pstructs.tree.persistent.persistent_tree import PersistentTree
