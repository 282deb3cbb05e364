"""
Error taxonomy for the classification core.

These signal precondition violations of whatever feeds documents into the tree
(ingestion, command layer). Nothing in the core retries or substitutes defaults:
the caller decides how to report them.
"""


class ClassificationError(Exception):
    """Base class for every error raised by the classification core."""


class DegenerateDistribution(ClassificationError, ZeroDivisionError):
    """
    A probability was requested over a collection whose total uses is zero, so there
    is no distribution to speak of.
    """

    def __init__(self, size):
        self.size = size
        super().__init__(f"Collection of {size} document(s) has zero total uses")


class EmptyCollection(ClassificationError, ValueError):

    def __init__(self, operation="classification"):
        self.operation = operation
        super().__init__(f"Cannot run {operation} on an empty document collection")


class InconsistentTagSet(ClassificationError, ValueError):
    """A document holds more than one tag for a single identifier."""

    def __init__(self, path, identifier, values):
        self.path = path
        self.identifier = identifier
        self.values = tuple(values)
        super().__init__(
            f"Document {path!r} has conflicting values for {identifier!r}: {', '.join(self.values)}"
        )


class DuplicateDocumentPath(ClassificationError, ValueError):

    def __init__(self, path):
        self.path = path
        super().__init__(f"Collection contains more than one document with path {path!r}")


class UnknownCollection(ClassificationError, LookupError):

    def __init__(self, index):
        self.index = index
        super().__init__(f"No document collection with id {index}")


class UnknownDocument(ClassificationError, LookupError):

    def __init__(self, path):
        self.path = path
        super().__init__(f"No document with path {path} found")
