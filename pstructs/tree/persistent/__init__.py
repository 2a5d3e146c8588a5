from pstructs.tree.persistent.persistent_tree import PersistentTree
