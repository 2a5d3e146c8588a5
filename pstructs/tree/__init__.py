from pstructs.tree.ordering import Comparator, Ordering, natural_order
from pstructs.tree.persistent.persistent_tree import PersistentTree
