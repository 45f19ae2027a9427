import math

import pytest

from searchless.similarity import (
    RankedDocument,
    cosine_similarity,
    distance_to_similarity,
    euclidean_distance,
    main,
    manhattan_distance,
    rank_by_distance,
)
from searchless.store import Document


def test_cosine_of_vector_with_itself_is_one():
    assert cosine_similarity([0.3, 0.4, 0.5], [0.3, 0.4, 0.5]) == pytest.approx(1.0)


def test_cosine_ignores_scale():
    a = [0.1, 0.2, 0.7]
    b = [0.5, 0.1, 0.3]
    assert cosine_similarity(a, b) == pytest.approx(cosine_similarity([x * 4 for x in a], b))


def test_cosine_of_opposite_vectors_is_negative_of_same():
    a = [0.2, 0.9]
    assert cosine_similarity(a, [-x for x in a]) == pytest.approx(-cosine_similarity(a, a))


def test_cosine_zero_vector_raises():
    with pytest.raises(ValueError):
        cosine_similarity([0.0, 0.0], [1.0, 2.0])


def test_euclidean_3_4_5():
    assert euclidean_distance([0.0, 0.0], [3.0, 4.0]) == pytest.approx(5.0)


def test_distances_are_symmetric_and_zero_on_identity():
    a = [0.8, 0.9, 0.1, 0.2]
    b = [0.2, 0.3, 0.9, 0.8]
    assert euclidean_distance(a, b) == pytest.approx(euclidean_distance(b, a))
    assert manhattan_distance(a, b) == pytest.approx(manhattan_distance(b, a))
    assert euclidean_distance(a, a) == 0
    assert manhattan_distance(a, a) == 0


def test_manhattan_is_at_least_euclidean():
    a = [0.75, 0.85, 0.15, 0.25]
    b = [0.3, 0.4, 0.5, 0.6]
    assert manhattan_distance(a, b) >= euclidean_distance(a, b)


@pytest.mark.parametrize("metric", [cosine_similarity, euclidean_distance, manhattan_distance])
def test_length_mismatch_raises(metric):
    with pytest.raises(ValueError):
        metric([1.0, 2.0], [1.0, 2.0, 3.0])


def test_distance_to_similarity_zero_is_one():
    assert distance_to_similarity(0.0) == 1.0


def test_distance_to_similarity_decreases():
    assert distance_to_similarity(0.5) > distance_to_similarity(2.0) > 0


def _docs():
    return [
        Document(id="far", content="far", embedding=[5.0, 5.0]),
        Document(id="near", content="near", embedding=[0.1, 0.1]),
        Document(id="mid", content="mid", embedding=[1.0, 1.0]),
    ]


@pytest.mark.parametrize("metric", [euclidean_distance, manhattan_distance])
def test_rank_by_distance_orders_nearest_first(metric):
    ranked = rank_by_distance([0.0, 0.0], _docs(), metric)
    assert [r.id for r in ranked] == ["near", "mid", "far"]
    distances = [r.distance for r in ranked]
    assert distances == sorted(distances)
    for r in ranked:
        assert isinstance(r, RankedDocument)
        assert r.similarity == pytest.approx(distance_to_similarity(r.distance))


def test_rank_by_distance_requires_embeddings():
    with pytest.raises(ValueError):
        rank_by_distance([0.0], [Document(id="x", content="x")], euclidean_distance)


def test_main_prints_all_three_sections(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "COSINE SIMILARITY" in out
    assert "EUCLIDEAN DISTANCE" in out
    assert "MANHATTAN DISTANCE" in out
    assert out.count("[doc1]") == 3
    assert not math.isnan(float(out.split("Score: ")[1].split()[0]))