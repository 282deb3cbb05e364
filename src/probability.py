"""
Weighted probabilities and Shannon entropy over document collections.

Every document's probability mass is its share of the collection's total uses:

    p(d) = d.uses / sum(uses)

The uncertainty (entropy, base 2) of a collection and the information gain of
partitioning it by a tag identifier follow the usual ID3 definitions:

    H(D)         = -sum p(d) * log2 p(d)
    H(D | id)    =  sum_v p(id=v) * H(D restricted to id=v)
    gain(D, id)  =  H(D) - H(D | id)

All functions are pure; ``docs`` may be any sequence of documents. Entropy sums go through
``math.fsum`` so results do not depend on the order of the documents.
"""
from __future__ import annotations

import math
from typing import List, Sequence, Set

import numpy as np
from scipy import special

from documents import Document, Tag, UNDEFINED_VALUE
from errors import DegenerateDistribution, EmptyCollection

LN_2 = math.log(2)


def documents_with_tag(docs: Sequence[Document], tag: Tag) -> List[Document]:
    """
    Returns the documents that carry ``tag``. For the undefined sentinel this is every
    document that has no tag with the identifier at all, not a literal match.
    """
    if tag.is_undefined:
        return [doc for doc in docs if not doc.has_identifier(tag.identifier)]
    return [doc for doc in docs if doc.has_tag(tag)]


def accumulated_uses(docs: Sequence[Document]) -> int:
    return sum(doc.uses for doc in docs)


def _total_uses(docs: Sequence[Document]) -> int:
    if len(docs) == 0:
        raise EmptyCollection("a probability computation")
    total = accumulated_uses(docs)
    if total == 0:
        raise DegenerateDistribution(len(docs))
    return total


def probability_of_document(doc: Document, docs: Sequence[Document]) -> float:
    return doc.uses / _total_uses(docs)


def probabilities(docs: Sequence[Document]) -> np.ndarray:
    """Probability of every document in ``docs``, in input order."""
    total = _total_uses(docs)
    weights = np.fromiter((doc.uses for doc in docs), dtype=float, count=len(docs))
    return weights / total


def probability_of_tag(tag: Tag, docs: Sequence[Document]) -> float:
    total = _total_uses(docs)
    # one integer sum, one division: partitions with equal uses get equal probabilities
    return accumulated_uses(documents_with_tag(docs, tag)) / total


def uncertainty(docs: Sequence[Document]) -> float:
    # entr(0) == 0, so zero-use documents drop out instead of producing nan
    return math.fsum(special.entr(probabilities(docs))) / LN_2


def tag_identifiers(docs: Sequence[Document]) -> Set[str]:
    return {tag.identifier for doc in docs for tag in doc.tags}


def possible_tag_values(docs: Sequence[Document], identifier: str) -> List[str]:
    """
    Values observed for ``identifier`` in first-seen order. Every tag with a different
    identifier adds the undefined sentinel, so the sentinel is present as soon as any
    document carries any other tag, whether or not some document actually lacks
    ``identifier``.
    """
    values = {}
    for doc in docs:
        for tag in doc.tags:
            if tag.identifier == identifier:
                values.setdefault(tag.value, None)
            else:
                values.setdefault(UNDEFINED_VALUE, None)
    return list(values)


def expected_remaining_uncertainty(docs: Sequence[Document], identifier: str) -> float:
    terms = []
    for value in possible_tag_values(docs, identifier):
        tag = Tag(identifier, value)
        probability = probability_of_tag(tag, docs)
        if probability == 0:
            # empty or weightless partition, contributes 0 * H
            continue
        terms.append(probability * uncertainty(documents_with_tag(docs, tag)))
    return math.fsum(terms)


def information_gain(docs: Sequence[Document], identifier: str) -> float:
    return uncertainty(docs) - expected_remaining_uncertainty(docs, identifier)
