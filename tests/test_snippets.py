import pytest

from searchless.snippets import (
    documentation_snippets,
    generate_query_embedding,
    highlight,
    main,
    perform_semantic_search,
)
from searchless.store import VectorDB


@pytest.fixture
def collection():
    coll = VectorDB().create_collection("docs")
    coll.add_documents(documentation_snippets(), 1)
    return coll


@pytest.mark.parametrize(
    "query",
    [
        "",
        "a",
        "how to deploy applications",
        "API authentication methods",
        "x" * 500,
        "héllo wörld ünïcode",
    ],
)
def test_query_embedding_shape_and_range(query):
    embedding = generate_query_embedding(query)
    assert len(embedding) == 16
    assert all(0.0 <= v <= 1.0 for v in embedding)


@pytest.mark.parametrize("query", ["security best practices", "z" * 300, ""])
def test_query_embedding_steps_by_a_tenth(query):
    embedding = generate_query_embedding(query)
    for previous, current in zip(embedding, embedding[1:]):
        step = (current - previous) % 1.0
        assert step == pytest.approx(0.1, abs=1e-9) or step == pytest.approx(1.1 % 1.0, abs=1e-9)


def test_query_embedding_is_deterministic():
    embeddings = [generate_query_embedding("container orchestration") for _ in range(3)]
    assert len(embeddings[0]) == 16
    assert all(embedding == embeddings[0] for embedding in embeddings[1:])
    assert embeddings[0] != generate_query_embedding("container orchestratio")


def test_query_embedding_of_empty_query_starts_at_zero():
    embedding = generate_query_embedding("")
    assert embedding[0] == 0.0
    assert embedding[1] == pytest.approx(0.1)


def test_query_embedding_differs_by_text():
    assert generate_query_embedding("abc") != generate_query_embedding("abd")


def test_documentation_snippets_are_well_formed():
    docs = documentation_snippets()
    ids = [d.id for d in docs]
    assert len(ids) == len(set(ids))
    assert len(docs) == 26
    assert ids[0] == "be-001"
    for doc in docs:
        assert len(doc.embedding) == 16
        assert set(doc.metadata) == {"category", "difficulty", "topic"}
        assert doc.metadata["difficulty"] in {"intermediate", "advanced"}


def test_only_one_snippet_mentions_docker():
    matching = [d.id for d in documentation_snippets() if "Docker" in d.content]
    assert matching == ["do-001"]


def test_highlight_wraps_every_occurrence():
    assert highlight("Use Docker now", "Docker") == "Use **Docker** now"
    assert highlight("Docker and Dockerfiles", "Docker") == "**Docker** and **Docker**files"


def test_highlight_without_match_or_term_is_unchanged():
    assert highlight("plain text", "Docker") == "plain text"
    assert highlight("plain text", "") == "plain text"


def test_perform_semantic_search_matches_direct_query(collection, capsys):
    query = "database performance optimization"
    results = perform_semantic_search(collection, query, "Performance & Optimization", 3)
    expected = collection.query_embedding(generate_query_embedding(query), 3)
    assert [r.id for r in results] == [r.id for r in expected]
    assert len(results) == 3
    scores = [r.similarity for r in results]
    assert scores == sorted(scores, reverse=True)
    out = capsys.readouterr().out
    assert "Performance & Optimization" in out
    assert f"[{results[0].id}]" in out


def test_perform_semantic_search_rejects_zero_count(collection):
    with pytest.raises(ValueError):
        perform_semantic_search(collection, "anything", "Nothing", 0)


def test_category_filter_keeps_only_category(collection):
    results = collection.query_embedding(generate_query_embedding("data"), 3, {"category": "backend"})
    assert len(results) == 3
    assert all(r.metadata["category"] == "backend" for r in results)


def test_main_prints_highlighted_docker_result(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "**Docker**" in out
    assert "[do-001]" in out
    assert "Queries performed: 9" in out
    assert "Documents: 26" in out