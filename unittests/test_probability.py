import math
import random

import pytest

import probability
from documents import UNDEFINED_VALUE, Document, Tag
from errors import DegenerateDistribution, EmptyCollection
from util.samples import TEST_COLLECTION2, generate_collection, make_documents

H_TWO_THIRDS = -(2 / 3) * math.log2(2 / 3) - (1 / 3) * math.log2(1 / 3)


def pop_rock():
    return [
        Document("A", (Tag("genre", "pop"),), 2),
        Document("B", (Tag("genre", "rock"),), 1),
    ]


def test_documents_with_tag_exact_match():
    docs = make_documents(TEST_COLLECTION2)
    novels = probability.documents_with_tag(docs, Tag("textgenre", "novel"))
    assert [doc.path for doc in novels] == ["a.txt", "b.txt"]
    assert probability.documents_with_tag(docs, Tag("textgenre", "poem")) == []


def test_documents_with_tag_undefined_means_lacking_identifier():
    docs = [
        Document("A", (Tag("genre", "pop"), Tag("mood", "calm")), 1),
        Document("B", (Tag("mood", "sad"),), 1),
        Document("C", (), 1),
    ]
    lacking = probability.documents_with_tag(docs, Tag("genre", UNDEFINED_VALUE))
    assert [doc.path for doc in lacking] == ["B", "C"]
    assert [doc.path for doc in probability.documents_with_tag(docs, Tag("genre", ""))] == ["B", "C"]


def test_probability_of_document():
    docs = pop_rock()
    assert probability.probability_of_document(docs[0], docs) == pytest.approx(2 / 3)
    assert probability.probability_of_document(docs[1], docs) == pytest.approx(1 / 3)


def test_zero_total_uses_is_degenerate():
    docs = [Document("A", (), 0), Document("B", (), 0)]
    with pytest.raises(DegenerateDistribution):
        probability.probability_of_document(docs[0], docs)
    with pytest.raises(DegenerateDistribution):
        probability.uncertainty(docs)
    with pytest.raises(ZeroDivisionError):
        probability.probability_of_tag(Tag("genre", "pop"), docs)


def test_empty_collection_is_rejected():
    with pytest.raises(EmptyCollection):
        probability.uncertainty([])


def test_probability_of_tag():
    docs = make_documents(TEST_COLLECTION2)
    assert probability.probability_of_tag(Tag("textgenre", "novel"), docs) == pytest.approx(8 / 11)
    assert probability.probability_of_tag(Tag("textlength", "short"), docs) == pytest.approx(6 / 11)
    assert probability.probability_of_tag(Tag("textlength", UNDEFINED_VALUE), docs) == 0


def test_uncertainty_of_two_documents():
    assert probability.uncertainty(pop_rock()) == pytest.approx(0.9183, abs=1e-4)
    assert probability.uncertainty(pop_rock()) == pytest.approx(H_TWO_THIRDS)


def test_uncertainty_with_zero_use_documents():
    docs = [Document("A", (), 4), Document("B", (), 0), Document("C", (), 0)]
    assert probability.uncertainty(docs) == 0
    docs[1].change_uses(4)
    assert probability.uncertainty(docs) == pytest.approx(1.0)


def test_uncertainty_is_zero_only_for_single_weighted_document():
    docs = generate_collection(30, seed=3)
    assert probability.uncertainty(docs) > 0
    for doc in docs[1:]:
        doc.change_uses(0)
    assert probability.uncertainty(docs) == 0


def test_possible_values_include_sentinel_for_other_tags():
    docs = [
        Document("A", (Tag("genre", "pop"), Tag("mood", "calm")), 1),
        Document("B", (Tag("genre", "rock"),), 1),
    ]
    assert probability.possible_tag_values(docs, "genre") == ["pop", UNDEFINED_VALUE, "rock"]
    assert probability.possible_tag_values(pop_rock(), "genre") == ["pop", "rock"]
    assert probability.possible_tag_values(docs, "mood") == [UNDEFINED_VALUE, "calm"]


def test_tag_identifiers():
    docs = make_documents(TEST_COLLECTION2)
    assert probability.tag_identifiers(docs) == {"textgenre", "textlength"}


def test_information_gain_of_pure_split():
    docs = pop_rock()
    assert probability.expected_remaining_uncertainty(docs, "genre") == 0
    assert probability.information_gain(docs, "genre") == pytest.approx(0.9183, abs=1e-4)


def test_information_gain_of_sample_collection():
    docs = make_documents(TEST_COLLECTION2)
    total = probability.uncertainty(docs)
    assert total == pytest.approx(1.8230680, abs=1e-6)
    assert probability.expected_remaining_uncertainty(docs, "textgenre") == pytest.approx(
        8 / 11 + 3 / 11 * H_TWO_THIRDS
    )
    assert probability.information_gain(docs, "textgenre") == pytest.approx(0.8453509, abs=1e-6)
    assert probability.information_gain(docs, "textlength") == pytest.approx(1.3221793, abs=1e-6)


def test_expected_uncertainty_skips_weightless_partitions():
    docs = [
        Document("X", (Tag("genre", "pop"),), 0),
        Document("Y", (Tag("genre", "rock"),), 2),
        Document("Z", (Tag("genre", "rock"),), 2),
    ]
    assert probability.expected_remaining_uncertainty(docs, "genre") == pytest.approx(1.0)
    assert probability.information_gain(docs, "genre") == pytest.approx(0.0)


def test_gain_bounds_and_tag_probabilities_sum_to_one():
    docs = generate_collection(40, seed=11)
    total = probability.uncertainty(docs)
    assert total >= 0
    for identifier in probability.tag_identifiers(docs):
        gain = probability.information_gain(docs, identifier)
        assert -1e-9 <= gain <= total + 1e-9
        mass = sum(
            probability.probability_of_tag(Tag(identifier, value), docs)
            for value in probability.possible_tag_values(docs, identifier)
        )
        assert mass == pytest.approx(1.0)


def test_results_do_not_depend_on_document_order():
    docs = generate_collection(25, seed=5)
    shuffled = list(docs)
    random.Random(1).shuffle(shuffled)
    assert probability.uncertainty(shuffled) == probability.uncertainty(docs)
    for identifier in probability.tag_identifiers(docs):
        assert probability.information_gain(shuffled, identifier) == probability.information_gain(docs, identifier)


def test_equal_partition_uses_give_identical_tag_probabilities():
    rows = [("c1", 5, "c"), ("c2", 7, "c"), ("c3", 9, "c"), ("c4", 11, "c"),
            ("j1", 9, "java"), ("j2", 10, "java"), ("j3", 13, "java"),
            ("g", 181, "go")]
    docs = [Document(path, (Tag("language", value),), uses) for path, uses, value in rows]
    c = probability.probability_of_tag(Tag("language", "c"), docs)
    java = probability.probability_of_tag(Tag("language", "java"), docs)
    assert c == java == 32 / 245
