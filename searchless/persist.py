"""Build a persistent knowledge base on disk, then reload and query it."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from searchless.store import Document, Result, VectorDB

_COLLECTION_NAME = "knowledge-base"
_DEFAULT_PATH = "./searchless-data"

_QUERY_CONTAINERS = [
    0.15, 0.85, 0.35, 0.65, 0.45, 0.75, 0.25, 0.55,
    0.4, 0.8, 0.15, 0.7, 0.35, 0.6, 0.45, 0.65,
]
_QUERY_ARCHITECTURE = [
    0.25, 0.75, 0.45, 0.55, 0.35, 0.85, 0.15, 0.65,
    0.3, 0.9, 0.25, 0.6, 0.45, 0.7, 0.35, 0.8,
]
_QUERY_API = [
    0.35, 0.65, 0.25, 0.75, 0.45, 0.55, 0.35, 0.85,
    0.15, 0.7, 0.35, 0.8, 0.25, 0.9, 0.45, 0.6,
]

QueryOutcome = tuple[list[Result], list[Result], list[Result]]


def knowledge_base_documents() -> list[Document]:
    """Five technical snippets with embeddings, category and difficulty."""
    return [
        Document(
            "doc-001",
            "Docker containers provide lightweight, portable application packaging",
            [0.1, 0.9, 0.3, 0.7, 0.5, 0.8, 0.2, 0.6, 0.4, 0.9, 0.1, 0.8, 0.3, 0.7, 0.5, 0.6],
            {"category": "containerization", "difficulty": "beginner"},
        ),
        Document(
            "doc-002",
            "Kubernetes orchestrates containers across clusters with automated scaling",
            [0.2, 0.8, 0.4, 0.6, 0.3, 0.9, 0.1, 0.7, 0.5, 0.8, 0.2, 0.6, 0.4, 0.9, 0.3, 0.7],
            {"category": "orchestration", "difficulty": "advanced"},
        ),
        Document(
            "doc-003",
            "Microservice architecture breaks applications into independent, deployable services",
            [0.3, 0.7, 0.5, 0.9, 0.1, 0.6, 0.2, 0.8, 0.4, 0.7, 0.3, 0.9, 0.5, 0.6, 0.1, 0.8],
            {"category": "architecture", "difficulty": "intermediate"},
        ),
        Document(
            "doc-004",
            "REST APIs enable communication between services using HTTP protocols",
            [0.4, 0.6, 0.2, 0.8, 0.3, 0.7, 0.5, 0.9, 0.1, 0.6, 0.4, 0.8, 0.2, 0.7, 0.3, 0.9],
            {"category": "api", "difficulty": "beginner"},
        ),
        Document(
            "doc-005",
            "Database sharding distributes data across multiple database instances",
            [0.5, 0.9, 0.1, 0.7, 0.3, 0.8, 0.4, 0.6, 0.2, 0.9, 0.5, 0.7, 0.1, 0.8, 0.3, 0.6],
            {"category": "database", "difficulty": "advanced"},
        ),
    ]


def describe_tree(db_path: str | Path) -> list[str]:
    """Lines describing the directory tree under ``db_path``, with file sizes."""
    root = Path(db_path)
    lines = [f"   {root.name or str(root)}/"]

    def walk(directory: Path, depth: int) -> None:
        indent = "   " + "  " * depth
        for entry in sorted(directory.iterdir()):
            if entry.is_dir():
                lines.append(f"{indent}{entry.name}/")
                walk(entry, depth + 1)
            else:
                lines.append(f"{indent}{entry.name} ({entry.stat().st_size} bytes)")

    walk(root, 1)
    return lines


def create_and_save(db_path: str | Path) -> list[Result]:
    """Create the knowledge base under ``db_path`` and return a test query's results."""
    print("\n📝 Creating persistent database...")
    db = VectorDB.persistent(db_path, False)
    collection = db.create_collection(
        _COLLECTION_NAME,
        {"description": "Technical documentation snippets", "version": "1.0"},
    )

    documents = knowledge_base_documents()
    print(f"   Adding {len(documents)} documents to collection...")
    collection.add_documents(documents, 1)
    print("   ✅ Documents added and persisted to disk")

    print("\n📂 Database structure on disk:")
    try:
        for line in describe_tree(db_path):
            print(line)
    except OSError as exc:
        print(f"   Error reading directory: {exc}")

    print("\n🔍 Testing query before exit...")
    results = collection.query_embedding(_QUERY_CONTAINERS, 2)
    for i, result in enumerate(results, start=1):
        print(f"   {i}. [{result.id}] Similarity: {result.similarity:.4f}")
        print(f"      {result.content}")
    return results


def _print_scored(results: list[Result]) -> None:
    for i, result in enumerate(results, start=1):
        print(f"      {i}. [{result.id}] Score: {result.similarity:.4f}")
        print(f"         {result.content}")


def load_and_query(db_path: str | Path) -> dict[str, QueryOutcome]:
    """Reload the database and run three queries against every collection.

    Returns, per collection name, the results of the plain query, the
    beginner-only query and the query restricted to content mentioning 'API'.
    """
    print("\n🔄 Loading database from disk...")
    db = VectorDB.persistent(db_path, False)
    collections = db.list_collections()
    print(f"   Found {len(collections)} collections:")

    outcomes: dict[str, QueryOutcome] = {}
    for name in sorted(collections):
        print(f"   - {name} ({collections[name].count()} documents)")
        coll = db.get_collection(name)
        if coll is None:
            continue

        print("\n🔍 Performing instant queries (no loading time!)...")

        print("\n   Query 1: 'container technology'")
        containers = coll.query_embedding(_QUERY_CONTAINERS, 3)
        _print_scored(containers)

        print("\n   Query 2: 'service architecture' (beginner level only)")
        beginner = coll.query_embedding(_QUERY_ARCHITECTURE, 5, {"difficulty": "beginner"})
        if not beginner:
            print("      No results found for beginner difficulty")
        for i, result in enumerate(beginner, start=1):
            print(
                f"      {i}. [{result.id}] Score: {result.similarity:.4f} "
                f"(Category: {result.metadata.get('category', '')})"
            )
            print(f"         {result.content}")

        print("\n   Query 3: Documents containing 'API'")
        api = coll.query_embedding(_QUERY_API, 5, None, {"$contains": "API"})
        if not api:
            print("      No documents containing 'API' found")
        _print_scored(api)

        outcomes[name] = (containers, beginner, api)

    print("\n🎯 Key Benefits:")
    print("   ✅ Instant startup - no re-indexing required")
    print("   ✅ Data persists between program runs")
    print("   ✅ No external database server needed")
    print("   ✅ SQLite-like simplicity with vector search power")
    print(f"\n💡 Try deleting the '{Path(db_path).name}' folder and run again!")
    return outcomes


def main(argv: Sequence[str] | None = None) -> int:
    """Create the database on the first run; reload and query it afterwards."""
    parser = argparse.ArgumentParser(
        description="Persist a small vector database to disk and reload it."
    )
    parser.add_argument("path", nargs="?", default=_DEFAULT_PATH, help="database directory")
    args = parser.parse_args(argv)

    print("💾 Persist & Reload Demo - SQLite-like Persistence")
    print("=================================================")

    if Path(args.path).exists():
        print("📁 Found existing database, loading...")
        load_and_query(args.path)
    else:
        print("🆕 No existing database found, creating new one...")
        create_and_save(args.path)
        print("\n" + "=" * 50)
        print("💡 Run this program again to see the persistence in action!")
        print("   The database will reload instantly from disk")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())