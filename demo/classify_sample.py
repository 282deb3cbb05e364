"""
Sample Classification - runs the structural tree over the toy collection and prints what a
"run" would show: the gain trace, the separator and the classification listing. Then the
same tree as an indented outline, and a rerun after one document stops being used.
"""

from util.config import configure_logging
from util.samples import TEST_COLLECTION1, make_documents
from classification import DocumentStore
from structural_tree import StructuralTree
from viz import TextTreeDrawer

configure_logging()

store = DocumentStore()
collection_id = store.add_collection(make_documents(TEST_COLLECTION1))

print(store.run(collection_id).report())
print()

TextTreeDrawer().visualize_tree(StructuralTree(store.get_collection(collection_id)), echo=True)
print()

previous = store.change_uses(collection_id, "logo.png", 0)
print(f"Change {previous} to 0 for logo.png")
print(store.run(collection_id).report())
