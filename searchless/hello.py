"""Minimal semantic search over a handful of technology concepts."""

from __future__ import annotations

import argparse
import time
from typing import Sequence

from searchless.store import Document, VectorDB

_QUERY = "database storage and retrieval systems"
_QUERY_EMBEDDING = [
    0.15, 0.75, 0.25, 0.85, 0.35, 0.65, 0.45, 0.7,
    0.3, 0.8, 0.15, 0.85, 0.25, 0.65, 0.35, 0.75,
]


def tech_concepts() -> list[Document]:
    """Ten technology concepts with pre-computed 16-dimensional embeddings."""
    return [
        Document("1", "Relational database management systems store data in tables with structured relationships",
                 [0.1, 0.8, 0.2, 0.9, 0.3, 0.7, 0.4, 0.6, 0.5, 0.8, 0.1, 0.9, 0.2, 0.7, 0.3, 0.6]),
        Document("2", "NoSQL databases provide flexible schema and horizontal scaling capabilities",
                 [0.2, 0.7, 0.3, 0.8, 0.4, 0.6, 0.5, 0.9, 0.1, 0.7, 0.2, 0.8, 0.3, 0.6, 0.4, 0.9]),
        Document("3", "Vector databases enable similarity search using machine learning embeddings",
                 [0.3, 0.6, 0.4, 0.7, 0.5, 0.9, 0.1, 0.8, 0.2, 0.6, 0.3, 0.7, 0.4, 0.9, 0.5, 0.8]),
        Document("4", "Microservices architecture decomposes applications into small, independent services",
                 [0.4, 0.5, 0.6, 0.3, 0.7, 0.2, 0.8, 0.1, 0.9, 0.5, 0.4, 0.6, 0.7, 0.8, 0.3, 0.2]),
        Document("5", "Container orchestration platforms manage deployment and scaling of containerized applications",
                 [0.5, 0.4, 0.7, 0.2, 0.8, 0.1, 0.9, 0.3, 0.6, 0.4, 0.5, 0.7, 0.8, 0.2, 0.9, 0.1]),
        Document("6", "Machine learning models learn patterns from data to make predictions",
                 [0.6, 0.3, 0.8, 0.1, 0.9, 0.2, 0.7, 0.4, 0.5, 0.3, 0.6, 0.8, 0.9, 0.1, 0.7, 0.2]),
        Document("7", "Cloud computing provides on-demand access to computing resources over the internet",
                 [0.7, 0.2, 0.9, 0.1, 0.8, 0.3, 0.6, 0.5, 0.4, 0.2, 0.7, 0.9, 0.8, 0.3, 0.6, 0.1]),
        Document("8", "DevOps practices integrate development and operations for faster software delivery",
                 [0.8, 0.1, 0.7, 0.3, 0.6, 0.4, 0.5, 0.2, 0.9, 0.1, 0.8, 0.7, 0.6, 0.4, 0.5, 0.3]),
        Document("9", "API gateways manage and secure access to microservices and backend systems",
                 [0.9, 0.2, 0.6, 0.4, 0.5, 0.8, 0.3, 0.7, 0.1, 0.2, 0.9, 0.6, 0.5, 0.8, 0.4, 0.7]),
        Document("10", "Distributed systems coordinate multiple computers to work together as a single system",
                 [0.1, 0.9, 0.5, 0.6, 0.2, 0.8, 0.4, 0.7, 0.3, 0.9, 0.1, 0.5, 0.6, 0.7, 0.8, 0.4]),
    ]


def main(argv: Sequence[str] | None = None) -> int:
    """Load the concepts into an in-memory collection and run one query."""
    argparse.ArgumentParser(
        description="Semantic search over a few technology concepts, in memory."
    ).parse_args(argv)

    print("🔍 Hello Searchless - Semantic search without the infrastructure")
    print("==============================================================")
    start = time.perf_counter()

    documents = tech_concepts()
    collection = VectorDB().create_collection("tech-concepts")
    collection.add_documents(documents, 1)

    print(f'\n📊 Searching for: "{_QUERY}"')
    print("─────────────────────────────────────────────────────────────")

    for i, result in enumerate(collection.query_embedding(_QUERY_EMBEDDING, 5), start=1):
        print(f"{i}. [ID: {result.id}] Similarity: {result.similarity:.4f}")
        print(f"   Content: {result.content}\n")

    elapsed_ms = (time.perf_counter() - start) * 1000
    print(f"⚡ Total time: {elapsed_ms:.3f}ms")
    print(f"📝 Searched {len(documents)} documents in memory")
    print("🎯 No Docker, no services, no complexity - just a library")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())