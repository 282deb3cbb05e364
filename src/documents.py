"""
Value types consumed by the classification core: tags, documents and the document
category enum.

Tags are plain (identifier, value) pairs. Category-specific normalization (bucketing a
numeric length into a size class and so on) happens before a Document is built, so a
Document only ever carries already-normalized tags.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Set, Tuple

from errors import InconsistentTagSet

UNDEFINED_VALUE = "undefined"
DEFINED_VALUE = "defined"


@dataclass(frozen=True)
class Tag:
    """An attribute of a document, e.g. ``genre=pop``."""

    identifier: str
    value: str = DEFINED_VALUE

    def __post_init__(self):
        if self.value is None:
            object.__setattr__(self, "value", DEFINED_VALUE)
        elif self.value == "":
            object.__setattr__(self, "value", UNDEFINED_VALUE)

    @property
    def is_undefined(self) -> bool:
        """True for the sentinel meaning "the document lacks this identifier"."""
        return self.value.lower() == UNDEFINED_VALUE

    def __str__(self):
        return f"{self.identifier}={self.value}"


class DocumentType(Enum):
    IMAGE = "image"
    AUDIO = "audio"
    VIDEO = "video"
    TEXT = "text"
    PROGRAM = "program"

    @classmethod
    def from_string(cls, name: str) -> Optional["DocumentType"]:
        for document_type in cls:
            if document_type.name.lower() == name.lower():
                return document_type
        return None


def _canonical_tags(tags: Iterable[Tag]) -> Tuple[Tag, ...]:
    # dedupe by (identifier, value) and fix the iteration order
    return tuple(sorted(set(tags), key=lambda t: (t.identifier, t.value)))


@dataclass(eq=False)
class Document:
    """
    A weighted, tagged item. ``uses`` is the only source of probability mass and is the
    only field that changes after construction (see ``change_uses``).

    Equality is identity: two documents are the same only if they are the same object.
    Path uniqueness inside a collection is the job of whoever assembles the collection
    (see ``classification.DocumentStore``).
    """

    path: str
    tags: Tuple[Tag, ...] = field(default_factory=tuple)
    uses: int = 0
    type: Optional[DocumentType] = None

    def __post_init__(self):
        self.tags = _canonical_tags(self.tags)
        self.uses = self._validated_uses(self.uses)

    @staticmethod
    def _validated_uses(uses) -> int:
        if isinstance(uses, bool) or not isinstance(uses, int):
            raise ValueError(f"uses must be an integer, got {uses!r}")
        if uses < 0:
            raise ValueError(f"uses must not be negative, got {uses}")
        return uses

    def identifiers(self) -> Set[str]:
        return {tag.identifier for tag in self.tags}

    def has_identifier(self, identifier: str) -> bool:
        return any(tag.identifier == identifier for tag in self.tags)

    def has_tag(self, tag: Tag) -> bool:
        return tag in self.tags

    def tag_value(self, identifier: str) -> Optional[str]:
        """
        Returns the value this document holds for ``identifier``, or None if it holds
        none. Raises InconsistentTagSet if there is more than one.
        """
        values = [tag.value for tag in self.tags if tag.identifier == identifier]
        if not values:
            return None
        if len(values) > 1:
            raise InconsistentTagSet(self.path, identifier, values)
        return values[0]

    def change_uses(self, uses: int) -> int:
        """Sets a new use count and returns the previous one."""
        previous = self.uses
        self.uses = self._validated_uses(uses)
        return previous

    def with_tags(self, tags: Iterable[Tag]) -> "Document":
        return Document(self.path, tuple(tags), self.uses, self.type)

    def __repr__(self):
        tags = ",".join(str(tag) for tag in self.tags)
        return f"Document({self.path!r}, uses={self.uses}, tags=[{tags}])"
