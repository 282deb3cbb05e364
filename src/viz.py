from pprint import pformat
import textwrap

import probability


class TextTreeDrawer:

	def __init__(self, precision=4, indent="    "):

		self.precision = precision
		self.indent = indent

	def _visualize_node(self, node):
		"""
		Helper method to visualize a single StructuralTree node!

		Inner nodes show the gains of their surviving identifiers (the first one is the
		split), leaves show their documents with probabilities within the leaf.
		"""

		title = f"- NODE {node.tag_path or '/'} ({len(node.documents)} documents)"

		if not node.is_leaf:
			gains = dict([(identifier, round(gain, self.precision)) for identifier, gain in node.gains.items()])
			return f"{title} split on {node.split_identifier}\n" + pformat(gains, indent=4)

		if probability.accumulated_uses(node.documents) == 0:
			docs = dict([(doc.path, 0.0) for doc in node.documents])
		else:
			docs = dict([(doc.path, round(probability.probability_of_document(doc, node.documents), self.precision))
					for doc in node.documents])
		return f"{title} leaf\n" + pformat(docs, indent=4)

	def visualize_tree(self, root, echo=False):
		"""
		Visualizes a structural tree given its root - recursive retrieval, one indented
		block per node, children in build order. Builds the tree if that hasn't happened.
		"""

		root.build_tree()
		blocks = []

		def print_dfs(node, depth=0):

				blocks.append(textwrap.indent(self._visualize_node(node), prefix=self.indent * depth))

				for child in node.children:
						print_dfs(child, depth + 1)

		print_dfs(root)

		outline = "\n".join(blocks)
		if echo:
			print(outline)
		return outline
