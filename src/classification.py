"""
Entry points for callers of the classification core.

``classify`` turns one collection into its two textual artifacts. ``DocumentStore`` keeps
the collections registered by an ingestion layer, hands out their ids and serializes
uses changes against runs - it is passed around explicitly, there is no global instance.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from documents import Document
from errors import DuplicateDocumentPath, EmptyCollection, UnknownCollection, UnknownDocument
from structural_tree import StructuralTree

logger = logging.getLogger(__name__)

REPORT_SEPARATOR = "---"


@dataclass
class ClassificationResult:
    """The gain trace and the classification listing of a single tree."""

    trace: str
    listing: str

    def report(self) -> str:
        """Both artifacts separated by a ``---`` line, without trailing newlines."""
        return "\n".join([self.trace.rstrip("\n"), REPORT_SEPARATOR, self.listing.rstrip("\n")])


def classify(
    documents: Sequence[Document],
    minimum_gain: Optional[float] = None,
    precision: Optional[int] = None,
) -> ClassificationResult:
    """
    Builds the structural tree of ``documents`` once and renders both artifacts from it.

    Args:
        documents: non-empty collection with unique paths
        minimum_gain: overrides the configured minimum information gain
        precision: overrides the configured number of decimals in the trace

    Returns:
        ClassificationResult with the trace and the listing
    """
    tree = StructuralTree(documents, minimum_gain=minimum_gain, precision=precision)
    trace = tree.build_tree()
    listing = tree.render()
    return ClassificationResult(trace=trace, listing=listing)


def validate_collection(documents: Sequence[Document]) -> None:
    """
    Checks what the core expects from its input: at least one document, unique paths
    and at most one tag per identifier on each document.
    """
    if not documents:
        raise EmptyCollection("registration")
    seen = set()
    for document in documents:
        if document.path in seen:
            raise DuplicateDocumentPath(document.path)
        seen.add(document.path)
        for identifier in document.identifiers():
            document.tag_value(identifier)


class DocumentStore:
    """Registry of loaded document collections, addressed by the id returned on add."""

    def __init__(self):
        self._collections: List[List[Document]] = []

    def __len__(self):
        return len(self._collections)

    def add_collection(self, documents: Sequence[Document]) -> int:
        documents = list(documents)
        validate_collection(documents)
        self._collections.append(documents)
        index = len(self._collections) - 1
        logger.info("Registered collection %d with %d document(s)", index, len(documents))
        return index

    def get_collection(self, index: int) -> List[Document]:
        if not 0 <= index < len(self._collections):
            raise UnknownCollection(index)
        return self._collections[index]

    def find_document(self, index: int, path: str) -> Document:
        for document in self.get_collection(index):
            if document.path == path:
                return document
        raise UnknownDocument(path)

    def change_uses(self, index: int, path: str, uses: int) -> int:
        """Sets the uses of one document and returns the previous value."""
        document = self.find_document(index, path)
        previous = document.change_uses(uses)
        logger.info("Change %d to %d for %s", previous, uses, path)
        return previous

    def run(
        self,
        index: int,
        minimum_gain: Optional[float] = None,
        precision: Optional[int] = None,
    ) -> ClassificationResult:
        documents = self.get_collection(index)
        logger.info("Classifying collection %d", index)
        return classify(documents, minimum_gain=minimum_gain, precision=precision)

    def uses_by_path(self, index: int) -> Dict[str, int]:
        return {document.path: document.uses for document in self.get_collection(index)}
