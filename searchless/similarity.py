"""Vector similarity and distance measures, and a demo comparing them."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from searchless.store import Document, VectorDB

Metric = Callable[[Sequence[float], Sequence[float]], float]


def _check_lengths(a: Sequence[float], b: Sequence[float]) -> None:
    if len(a) != len(b):
        raise ValueError(f"vectors must have the same length, got {len(a)} and {len(b)}")


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine of the angle between two vectors."""
    _check_lengths(a, b)
    dot = sum(x * y for x, y in zip(a, b))
    norm_a = math.sqrt(sum(x * x for x in a))
    norm_b = math.sqrt(sum(y * y for y in b))
    if norm_a == 0 or norm_b == 0:
        raise ValueError("cosine similarity is undefined for a zero vector")
    return dot / (norm_a * norm_b)


def euclidean_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Straight-line distance between two vectors."""
    _check_lengths(a, b)
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)))


def manhattan_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Sum of absolute coordinate differences."""
    _check_lengths(a, b)
    return sum(abs(x - y) for x, y in zip(a, b))


def distance_to_similarity(distance: float) -> float:
    """Map a distance to a similarity in (0, 1]; smaller distance, higher score."""
    return 1.0 / (1.0 + distance)


@dataclass(frozen=True)
class RankedDocument:
    """A document scored by its distance from a query."""

    id: str
    content: str
    distance: float
    similarity: float


def rank_by_distance(
    query: Sequence[float], documents: Iterable[Document], metric: Metric
) -> list[RankedDocument]:
    """Score documents by ``metric`` against ``query``, nearest first."""
    ranked = []
    for doc in documents:
        if doc.embedding is None:
            raise ValueError(f"document {doc.id!r} has no embedding")
        distance = metric(query, doc.embedding)
        ranked.append(
            RankedDocument(doc.id, doc.content, distance, distance_to_similarity(distance))
        )
    ranked.sort(key=lambda r: r.distance)
    return ranked


_DOCUMENTS = [
    Document(
        id="doc1",
        content="Database systems for storing and retrieving structured data efficiently",
        embedding=[0.8, 0.9, 0.1, 0.2, 0.7, 0.8, 0.3, 0.4],
    ),
    Document(
        id="doc2",
        content="Machine learning algorithms for pattern recognition and prediction",
        embedding=[0.2, 0.3, 0.9, 0.8, 0.1, 0.2, 0.7, 0.6],
    ),
    Document(
        id="doc3",
        content="Web development frameworks for building interactive applications",
        embedding=[0.5, 0.4, 0.6, 0.7, 0.5, 0.6, 0.4, 0.3],
    ),
    Document(
        id="doc4",
        content="Data storage solutions with high availability and scalability",
        embedding=[0.7, 0.8, 0.2, 0.3, 0.6, 0.7, 0.4, 0.5],
    ),
    Document(
        id="doc5",
        content="Cloud computing platforms for scalable application deployment",
        embedding=[0.3, 0.4, 0.5, 0.6, 0.8, 0.7, 0.6, 0.5],
    ),
]

_QUERY = "data storage and database systems"
_QUERY_EMBEDDING = [0.75, 0.85, 0.15, 0.25, 0.65, 0.75, 0.35, 0.45]


def _print_ranked(title: str, ranked: list[RankedDocument]) -> None:
    print(f"\n📊 {title}")
    print("   Lower values = more similar")
    print("   ─────────────────────────────")
    for i, result in enumerate(ranked, start=1):
        print(
            f"   {i}. [{result.id}] Distance: {result.distance:.4f}, "
            f"Similarity: {result.similarity:.4f}"
        )
        print(f"      {result.content}")


def main(argv: Sequence[str] | None = None) -> int:
    """Rank the same documents by cosine, Euclidean and Manhattan measures."""
    argparse.ArgumentParser(
        description="Compare similarity measures on a small document set."
    ).parse_args(argv)

    print("🔍 Similarity Modes Demo - Same Query, Different Perspectives")
    print("==========================================================")

    db = VectorDB()
    collection = db.create_collection("documents")
    collection.add_documents(_DOCUMENTS, 1)

    print(f'🔍 Query: "{_QUERY}"')
    print("📐 Embedding: [" + " ".join(f"{x:g}" for x in _QUERY_EMBEDDING) + "]")
    print()

    print("📊 1. COSINE SIMILARITY (searchless default)")
    print("   Higher values = more similar")
    print("   ─────────────────────────────")
    for i, result in enumerate(collection.query_embedding(_QUERY_EMBEDDING, 5), start=1):
        print(f"   {i}. [{result.id}] Score: {result.similarity:.4f}")
        print(f"      {result.content}")

    _print_ranked(
        "2. EUCLIDEAN DISTANCE",
        rank_by_distance(_QUERY_EMBEDDING, _DOCUMENTS, euclidean_distance),
    )
    _print_ranked(
        "3. MANHATTAN DISTANCE",
        rank_by_distance(_QUERY_EMBEDDING, _DOCUMENTS, manhattan_distance),
    )

    print("\n🎯 Key Insights:")
    print("   • Cosine similarity focuses on vector direction (angle)")
    print("   • Euclidean distance measures straight-line distance in space")
    print("   • Manhattan distance measures grid-like distance")
    print("   • Different metrics can rank results differently!")
    print("   • searchless uses cosine similarity for best semantic matching")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())