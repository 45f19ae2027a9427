"""Semantic search over a set of documentation snippets, with filters."""

from __future__ import annotations

import argparse
import time
from typing import Sequence

from searchless.store import Collection, Document, Result, VectorDB

_INT64_MASK = (1 << 64) - 1
_INT64_SIGN = 1 << 63

_SEARCHES = (
    ("how to deploy applications", "Deployment & Operations", 3),
    ("debugging and troubleshooting errors", "Debugging & Error Handling", 3),
    ("database performance optimization", "Performance & Optimization", 3),
    ("security best practices", "Security Guidelines", 3),
    ("container orchestration", "Container Management", 3),
    ("API authentication methods", "Authentication & APIs", 3),
)

_BACKEND_QUERY = [0.4, 0.8, 0.2, 0.9, 0.3, 0.7, 0.5, 0.6, 0.1, 0.8, 0.4, 0.9, 0.2, 0.7, 0.3, 0.6]
_DEVOPS_QUERY = [0.6, 0.7, 0.3, 0.8, 0.4, 0.9, 0.2, 0.5, 0.7, 0.6, 0.8, 0.3, 0.9, 0.4, 0.5, 0.2]
_DOCKER_QUERY = [0.5, 0.6, 0.4, 0.7, 0.3, 0.8, 0.2, 0.9, 0.1, 0.6, 0.5, 0.7, 0.4, 0.8, 0.3, 0.9]


def _wrap_int64(value: int) -> int:
    value &= _INT64_MASK
    return value - (1 << 64) if value & _INT64_SIGN else value


def generate_query_embedding(query: str) -> list[float]:
    """A deterministic 16-dimensional embedding derived from the query text.

    Values lie in [0, 1].
    """
    hash_value = 0
    for char in query:
        hash_value = _wrap_int64(hash_value * 31 + ord(char))

    # Truncated remainder: the sign follows the dividend.
    remainder = abs(hash_value) % 1000
    if hash_value < 0:
        remainder = -remainder
    base = remainder / 1000.0
    length_term = (len(query.encode("utf-8")) % 10) * 0.01

    embedding = []
    for i in range(16):
        value = base + i * 0.1 + length_term
        while value > 1.0:
            value -= 1.0
        while value < 0.0:
            value += 1.0
        embedding.append(value)
    return embedding


def _doc(doc_id: str, content: str, embedding: list[float], category: str,
         difficulty: str, topic: str) -> Document:
    return Document(
        doc_id,
        content,
        embedding,
        {"category": category, "difficulty": difficulty, "topic": topic},
    )


def documentation_snippets() -> list[Document]:
    """Documentation snippets with embeddings, category, difficulty and topic."""
    return [
        # Backend development
        _doc("be-001",
             "Set up a REST API using Node.js and Express framework. Configure middleware for logging, CORS, and authentication. Define routes for CRUD operations.",
             [0.1, 0.9, 0.2, 0.8, 0.3, 0.7, 0.4, 0.6, 0.5, 0.8, 0.1, 0.9, 0.2, 0.7, 0.3, 0.6],
             "backend", "intermediate", "api"),
        _doc("be-002",
             "Database connection pooling in PostgreSQL. Configure maximum connections, timeout settings, and connection retry logic for production environments.",
             [0.2, 0.8, 0.3, 0.7, 0.4, 0.6, 0.5, 0.9, 0.1, 0.7, 0.2, 0.8, 0.3, 0.6, 0.4, 0.9],
             "backend", "advanced", "database"),
        _doc("be-003",
             "Implement caching strategies using Redis. Set up cache invalidation policies, handle distributed caching, and optimize cache hit ratios.",
             [0.3, 0.7, 0.4, 0.6, 0.5, 0.9, 0.1, 0.8, 0.2, 0.6, 0.3, 0.7, 0.4, 0.9, 0.5, 0.8],
             "backend", "advanced", "performance"),
        _doc("be-004",
             "Handle file uploads securely. Validate file types, limit file sizes, scan for malware, and store files in cloud storage with proper access controls.",
             [0.4, 0.6, 0.5, 0.9, 0.1, 0.8, 0.2, 0.7, 0.3, 0.5, 0.4, 0.6, 0.7, 0.8, 0.9, 0.2],
             "backend", "intermediate", "security"),
        # Frontend development
        _doc("fe-001",
             "Create responsive layouts using CSS Grid and Flexbox. Implement mobile-first design patterns and ensure cross-browser compatibility.",
             [0.5, 0.5, 0.6, 0.4, 0.7, 0.3, 0.8, 0.2, 0.9, 0.4, 0.5, 0.6, 0.7, 0.8, 0.3, 0.2],
             "frontend", "intermediate", "css"),
        _doc("fe-002",
             "State management in React applications. Use Redux Toolkit for complex state, Context API for simple state, and implement proper state normalization.",
             [0.6, 0.4, 0.7, 0.3, 0.8, 0.2, 0.9, 0.1, 0.5, 0.3, 0.6, 0.7, 0.8, 0.2, 0.9, 0.1],
             "frontend", "advanced", "react"),
        _doc("fe-003",
             "Optimize web performance using lazy loading, code splitting, and image optimization. Implement service workers for offline functionality.",
             [0.7, 0.3, 0.8, 0.2, 0.9, 0.1, 0.6, 0.4, 0.5, 0.2, 0.7, 0.8, 0.9, 0.1, 0.6, 0.3],
             "frontend", "advanced", "performance"),
        _doc("fe-004",
             "Form validation and user input handling. Implement client-side validation, sanitize inputs, provide meaningful error messages, and handle accessibility.",
             [0.8, 0.2, 0.9, 0.1, 0.6, 0.4, 0.5, 0.3, 0.7, 0.1, 0.8, 0.9, 0.6, 0.4, 0.5, 0.7],
             "frontend", "intermediate", "forms"),
        # DevOps and infrastructure
        _doc("do-001",
             "Deploy applications using Docker containers. Create optimized Dockerfiles, manage multi-stage builds, and implement container orchestration with Kubernetes.",
             [0.9, 0.1, 0.8, 0.2, 0.7, 0.3, 0.6, 0.4, 0.5, 0.9, 0.1, 0.8, 0.7, 0.6, 0.4, 0.5],
             "devops", "advanced", "containers"),
        _doc("do-002",
             "Set up CI/CD pipelines using GitHub Actions. Automate testing, building, and deployment processes. Configure environment-specific deployments.",
             [0.1, 0.8, 0.2, 0.9, 0.3, 0.6, 0.4, 0.7, 0.5, 0.8, 0.1, 0.9, 0.2, 0.7, 0.3, 0.6],
             "devops", "intermediate", "cicd"),
        _doc("do-003",
             "Monitor applications using Prometheus and Grafana. Set up metrics collection, create alerting rules, and build comprehensive dashboards.",
             [0.2, 0.7, 0.3, 0.8, 0.4, 0.5, 0.6, 0.9, 0.1, 0.7, 0.2, 0.8, 0.3, 0.6, 0.4, 0.9],
             "devops", "advanced", "monitoring"),
        _doc("do-004",
             "Infrastructure as Code using Terraform. Define cloud resources, manage state files, and implement proper resource lifecycle management.",
             [0.3, 0.6, 0.4, 0.7, 0.5, 0.4, 0.7, 0.8, 0.2, 0.6, 0.3, 0.7, 0.4, 0.9, 0.5, 0.8],
             "devops", "advanced", "infrastructure"),
        # Security
        _doc("sec-001",
             "Implement OAuth 2.0 authentication flow. Configure authorization servers, handle token refresh, and secure API endpoints with proper scopes.",
             [0.4, 0.5, 0.6, 0.3, 0.7, 0.2, 0.8, 0.1, 0.9, 0.5, 0.4, 0.6, 0.7, 0.8, 0.3, 0.2],
             "security", "advanced", "authentication"),
        _doc("sec-002",
             "Secure API endpoints against common attacks. Implement rate limiting, input validation, SQL injection prevention, and CSRF protection.",
             [0.5, 0.4, 0.7, 0.2, 0.8, 0.1, 0.9, 0.3, 0.6, 0.4, 0.5, 0.7, 0.8, 0.2, 0.9, 0.1],
             "security", "intermediate", "api-security"),
        _doc("sec-003",
             "Data encryption at rest and in transit. Use AES encryption for stored data, implement TLS properly, and manage encryption keys securely.",
             [0.6, 0.3, 0.8, 0.1, 0.9, 0.2, 0.7, 0.4, 0.5, 0.3, 0.6, 0.8, 0.9, 0.1, 0.7, 0.2],
             "security", "advanced", "encryption"),
        # Database
        _doc("db-001",
             "Optimize database queries for better performance. Use proper indexing strategies, analyze query execution plans, and implement query caching.",
             [0.7, 0.2, 0.9, 0.1, 0.8, 0.3, 0.6, 0.5, 0.4, 0.2, 0.7, 0.9, 0.8, 0.3, 0.6, 0.1],
             "database", "advanced", "performance"),
        _doc("db-002",
             "Database backup and recovery strategies. Implement automated backups, test restore procedures, and set up point-in-time recovery.",
             [0.8, 0.1, 0.7, 0.3, 0.6, 0.4, 0.5, 0.2, 0.9, 0.1, 0.8, 0.7, 0.6, 0.4, 0.5, 0.3],
             "database", "intermediate", "backup"),
        _doc("db-003",
             "Database migration best practices. Plan schema changes, handle data transformations, and ensure zero-downtime deployments.",
             [0.9, 0.2, 0.6, 0.4, 0.5, 0.8, 0.3, 0.7, 0.1, 0.2, 0.9, 0.6, 0.5, 0.8, 0.4, 0.7],
             "database", "intermediate", "migration"),
        # Testing
        _doc("test-001",
             "Write comprehensive unit tests using Jest and React Testing Library. Test components, hooks, and async operations with proper mocking.",
             [0.1, 0.9, 0.5, 0.6, 0.2, 0.8, 0.4, 0.7, 0.3, 0.9, 0.1, 0.5, 0.6, 0.7, 0.8, 0.4],
             "testing", "intermediate", "unit-testing"),
        _doc("test-002",
             "Integration testing for API endpoints. Test database interactions, external service calls, and end-to-end workflows with realistic data.",
             [0.2, 0.8, 0.6, 0.5, 0.3, 0.7, 0.5, 0.8, 0.4, 0.8, 0.2, 0.6, 0.7, 0.8, 0.9, 0.5],
             "testing", "advanced", "integration-testing"),
        _doc("test-003",
             "Automated browser testing with Playwright. Create reliable end-to-end tests, handle dynamic content, and implement visual regression testing.",
             [0.3, 0.7, 0.7, 0.4, 0.4, 0.6, 0.6, 0.9, 0.5, 0.7, 0.3, 0.7, 0.8, 0.9, 0.1, 0.6],
             "testing", "advanced", "e2e-testing"),
        # Performance
        _doc("perf-001",
             "Application performance monitoring and optimization. Use profiling tools, identify bottlenecks, and implement performance improvements.",
             [0.4, 0.6, 0.8, 0.3, 0.5, 0.5, 0.7, 0.1, 0.6, 0.6, 0.4, 0.8, 0.9, 0.1, 0.2, 0.7],
             "performance", "advanced", "monitoring"),
        _doc("perf-002",
             "Load testing and capacity planning. Use tools like JMeter or k6 to simulate traffic, identify system limits, and plan for scaling.",
             [0.5, 0.5, 0.9, 0.2, 0.6, 0.4, 0.8, 0.2, 0.7, 0.5, 0.5, 0.9, 0.1, 0.2, 0.3, 0.8],
             "performance", "advanced", "load-testing"),
        # Debugging
        _doc("debug-001",
             "Debug production issues using logging and monitoring tools. Set up structured logging, analyze error patterns, and implement alerting.",
             [0.6, 0.4, 0.1, 0.1, 0.7, 0.3, 0.9, 0.3, 0.8, 0.4, 0.6, 0.1, 0.2, 0.3, 0.4, 0.9],
             "debugging", "intermediate", "production"),
        _doc("debug-002",
             "Memory leak detection and resolution. Use memory profiling tools, identify leak sources, and implement proper memory management.",
             [0.7, 0.3, 0.2, 0.9, 0.8, 0.2, 0.1, 0.4, 0.9, 0.3, 0.7, 0.2, 0.3, 0.4, 0.5, 0.1],
             "debugging", "advanced", "memory"),
        _doc("debug-003",
             "Distributed tracing for microservices. Implement OpenTelemetry, trace requests across services, and analyze performance bottlenecks.",
             [0.8, 0.2, 0.3, 0.8, 0.9, 0.1, 0.2, 0.5, 0.1, 0.2, 0.8, 0.3, 0.4, 0.5, 0.6, 0.2],
             "debugging", "advanced", "tracing"),
    ]


def highlight(content: str, term: str) -> str:
    """Wrap every occurrence of ``term`` in ``content`` with ``**``."""
    if not term:
        return content
    return content.replace(term, f"**{term}**")


def _format_ms(seconds: float) -> str:
    return f"{seconds * 1000:.3f}ms"


def perform_semantic_search(
    collection: Collection, query: str, description: str, count: int
) -> list[Result]:
    """Embed ``query``, print the top ``count`` matches and return them."""
    print(f"🔍 {description}")
    print(f'Query: "{query}"')
    print("─" * 50)

    start = time.perf_counter()
    results = collection.query_embedding(generate_query_embedding(query), count)
    elapsed = time.perf_counter() - start

    for i, result in enumerate(results, start=1):
        print(f"{i}. [{result.id}] Score: {result.similarity:.4f}")
        print(f"   {result.content}")
        print(
            f"   📂 {result.metadata.get('category', '')} | "
            f"🎯 {result.metadata.get('difficulty', '')}"
        )
    print(f"⚡ Query time: {_format_ms(elapsed)}")
    return results


def _print_filtered(results: list[Result]) -> None:
    for i, result in enumerate(results, start=1):
        print(f"   {i}. [{result.id}] Score: {result.similarity:.4f}")
        print(f"      {result.content}")
        print(
            f"      Category: {result.metadata.get('category', '')} | "
            f"Difficulty: {result.metadata.get('difficulty', '')}"
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Run a series of semantic, metadata-filtered and content-filtered searches."""
    argparse.ArgumentParser(
        description="Semantic search over documentation snippets."
    ).parse_args(argv)

    print("📚 Semantic Snippets Demo - Real Documentation Search")
    print("====================================================")
    start = time.perf_counter()

    collection = VectorDB().create_collection("docs")
    documents = documentation_snippets()
    print(f"📝 Loading {len(documents)} documentation snippets...")
    collection.add_documents(documents, 1)
    print(f"⚡ Loaded in: {_format_ms(time.perf_counter() - start)}\n")

    for query, description, count in _SEARCHES:
        perform_semantic_search(collection, query, description, count)
        print()

    print("🔍 ADVANCED SEARCH - Filtering by Category")
    print("==========================================")

    print("\n📋 Backend-only search for 'data processing':")
    _print_filtered(collection.query_embedding(_BACKEND_QUERY, 3, {"category": "backend"}))

    print("\n📋 DevOps-only search for 'monitoring':")
    _print_filtered(collection.query_embedding(_DEVOPS_QUERY, 3, {"category": "devops"}))

    print("\n🔍 CONTENT FILTERING - Documents mentioning specific terms")
    print("=========================================================")
    print("\n📋 All documents containing 'Docker':")
    docker = collection.query_embedding(_DOCKER_QUERY, 10, None, {"$contains": "Docker"})
    if not docker:
        print("   No documents containing 'Docker' found")
    for i, result in enumerate(docker, start=1):
        print(f"   {i}. [{result.id}] Score: {result.similarity:.4f}")
        print(f"      {highlight(result.content, 'Docker')}")

    total = time.perf_counter() - start
    query_count = len(_SEARCHES) + 3
    print("\n🎯 SUMMARY")
    print("=========")
    print(f"📊 Documents: {len(documents)}")
    print(f"⚡ Total time: {_format_ms(total)}")
    print(f"🔍 Queries performed: {query_count}")
    print(f"💡 Average query time: ~{total * 1000 / query_count:.2f}ms")
    print("🚀 Pure in-memory semantic search - no external services!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())