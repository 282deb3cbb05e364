"""
StructuralTree - recursive information-gain partitioning of a document collection.

Each node looks at the tag identifiers of its documents, keeps the ones whose
information gain reaches the minimum gain, and splits on the best one: one child per
possible value of that identifier (empty partitions are skipped). Recursion stops at a
node where no identifier survives.

Two textual artifacts come out of a tree:

*   the gain trace (``build_tree``), one line per surviving identifier per node in
    build order, e.g. ``/genre=pop/length=0.92``
*   the classification listing (``render``), one line per document, grouped by leaf,
    e.g. ``/genre=pop/length=short/"song.mp3"``

The listing is a separate pass over the already built children, sorted at render time;
building never sorts children and rendering never changes the structure.
"""
from __future__ import annotations

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import probability
from documents import Document, Tag
from errors import DegenerateDistribution, EmptyCollection
from util.config import config

logger = logging.getLogger(__name__)

GAIN_LINE_FORMAT = "{path}/{identifier}={gain}\n"
DOCUMENT_LINE_FORMAT = '{path}/"{document}"\n'


def format_gain(gain: float, precision: int = 2) -> str:
    """
    Rounds half-up on the shortest decimal representation of ``gain``, so 0.125 prints
    as 0.13 rather than the 0.12 that float formatting would give.
    """
    quantum = Decimal(1).scaleb(-precision)
    return str(Decimal(repr(gain)).quantize(quantum, rounding=ROUND_HALF_UP))


class StructuralTree:
    """
    A node of the structural tree. The root holds the full collection, an empty tag
    path and no tags; every child holds the part of its parent's documents that carries
    the child's last tag.
    """

    def __init__(
        self,
        documents: Sequence[Document],
        tag_path: str = "",
        tags: Tuple[Tag, ...] = (),
        minimum_gain: Optional[float] = None,
        precision: Optional[int] = None,
    ):
        self.documents: List[Document] = list(documents)
        self.tag_path = tag_path
        self.tags: Tuple[Tag, ...] = tuple(tags)
        self.minimum_gain = config.minimum_information_gain if minimum_gain is None else minimum_gain
        self.precision = config.gain_precision if precision is None else precision

        self.children: List[StructuralTree] = []
        self.gains: Dict[str, float] = {}
        self.split_identifier: Optional[str] = None
        self._trace: Optional[str] = None

    @property
    def is_root(self) -> bool:
        return not self.tags

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def last_tag(self) -> Optional[Tag]:
        return self.tags[-1] if self.tags else None

    def walk(self) -> Iterator["StructuralTree"]:
        """Pre-order traversal, children in build order."""
        yield self
        for child in self.children:
            yield from child.walk()

    # ---------------- Construction ----------------
    def build_tree(self) -> str:
        """
        Builds the subtree below this node and returns its gain trace. The tree is only
        built once; later calls return the same trace.
        """
        if self._trace is not None:
            return self._trace

        if self.is_root:
            self._check_root()

        if probability.accumulated_uses(self.documents) == 0:
            # weightless partition after a uses change - nothing to split on
            logger.debug("%s: zero total uses, leaf with %d document(s)", self.tag_path or "/", len(self.documents))
            self._trace = ""
            return self._trace

        self.gains = self._surviving_gains()
        if not self.gains:
            logger.debug("%s: no identifier reaches %s, leaf", self.tag_path or "/", self.minimum_gain)
            self._trace = ""
            return self._trace

        lines = [
            GAIN_LINE_FORMAT.format(
                path=self.tag_path,
                identifier=identifier,
                gain=format_gain(gain, self.precision),
            )
            for identifier, gain in self.gains.items()
        ]

        self.split_identifier = next(iter(self.gains))
        logger.debug(
            "%s: splitting on %s (gain %.4f)",
            self.tag_path or "/", self.split_identifier, self.gains[self.split_identifier],
        )

        for value in probability.possible_tag_values(self.documents, self.split_identifier):
            tag = Tag(self.split_identifier, value)
            documents_with_value = probability.documents_with_tag(self.documents, tag)
            if not documents_with_value:
                continue
            child = self._add_child(f"{self.tag_path}/{tag}", documents_with_value, self.tags + (tag,))
            lines.append(child.build_tree())

        self._trace = "".join(lines)
        return self._trace

    def _check_root(self) -> None:
        if not self.documents:
            raise EmptyCollection("tree construction")
        if probability.accumulated_uses(self.documents) == 0:
            raise DegenerateDistribution(len(self.documents))

    def _surviving_gains(self) -> Dict[str, float]:
        """Identifiers reaching the minimum gain, best first, ties by identifier."""
        gains = {
            identifier: probability.information_gain(self.documents, identifier)
            for identifier in probability.tag_identifiers(self.documents)
        }
        ranked = sorted(gains.items(), key=lambda item: (-item[1], item[0]))
        return {identifier: gain for identifier, gain in ranked if gain >= self.minimum_gain}

    def _add_child(self, tag_path: str, documents: List[Document], tags: Tuple[Tag, ...]) -> "StructuralTree":
        child = StructuralTree(
            documents,
            tag_path=tag_path,
            tags=tags,
            minimum_gain=self.minimum_gain,
            precision=self.precision,
        )
        self.children.append(child)
        return child

    # ---------------- Rendering ----------------
    def render(self) -> str:
        """Classification listing of the subtree, building it first if needed."""
        if self._trace is None:
            self.build_tree()
        return "".join(self._render_lines())

    def _render_lines(self) -> Iterator[str]:
        if self.is_leaf:
            for document in self._sorted_documents():
                yield DOCUMENT_LINE_FORMAT.format(path=self.tag_path, document=document.path)
            return
        for child in self._sorted_children():
            yield from child._render_lines()

    def _sorted_children(self) -> List["StructuralTree"]:
        def key(child):
            return (-probability.probability_of_tag(child.last_tag, self.documents), child.tag_path)

        return sorted(self.children, key=key)

    def _sorted_documents(self) -> List[Document]:
        if probability.accumulated_uses(self.documents) == 0:
            return sorted(self.documents, key=lambda doc: doc.path)

        def key(document):
            return (-probability.probability_of_document(document, self.documents), document.path)

        return sorted(self.documents, key=key)

    def __str__(self):
        return self.render()

    def __repr__(self):
        return f"StructuralTree({self.tag_path or '/'!r}, documents={len(self.documents)}, children={len(self.children)})"
