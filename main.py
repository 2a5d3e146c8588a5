from pstructs import MaxHeap, PersistentTree, get_topk


keys = [50, 25, 75, 10, 40, 60, 90]

# Build a persistent tree; every insert returns a new version
print("Building persistent tree...")
tree = PersistentTree.from_items(keys)
print(f"Root item: {tree.item()}")
print(f"Find 40: {tree.find(40)}")

# Deleting the root splices in its in-order successor
pruned = tree.delete(50)
print(f"Root after delete(50): {pruned.item()}")
print(f"Old version still has 50: {tree.find(50)}")

# Create a max heap from a sequence
print("Creating max heap...")
heap = MaxHeap.from_sequence([1, 3, 2, 7, 9, 5])
print(f"Heap size: {len(heap)}")
print(f"Is empty: {heap.is_empty()}")
print(f"Top 3: {get_topk(heap, 3)}")
print(f"Backing list: {heap.into_sequence()}")
