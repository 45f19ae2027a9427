"""In-memory vector store of document collections, optionally persisted to disk."""

from __future__ import annotations

import gzip
import hashlib
import json
import math
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping, Sequence

EmbeddingFunc = Callable[[str], Sequence[float]]

_METADATA_STEM = "00000000"
_WHERE_DOCUMENT_OPERATORS = ("$contains", "$not_contains")


def _normalize(vector: Sequence[float]) -> tuple[float, ...]:
    values = tuple(float(x) for x in vector)
    if not values:
        raise ValueError("embedding must not be empty")
    norm = math.sqrt(sum(x * x for x in values))
    if norm == 0:
        raise ValueError("embedding must not be a zero vector")
    return tuple(x / norm for x in values)


def _hash_name(name: str) -> str:
    return hashlib.sha256(name.encode("utf-8")).hexdigest()[:8]


def _write_json(path: Path, data: Any) -> None:
    payload = json.dumps(data).encode("utf-8")
    if path.suffix == ".gz":
        with gzip.open(path, "wb") as fh:
            fh.write(payload)
    else:
        path.write_bytes(payload)


def _read_json(path: Path) -> Any:
    if path.suffix == ".gz":
        with gzip.open(path, "rb") as fh:
            return json.loads(fh.read().decode("utf-8"))
    return json.loads(path.read_text(encoding="utf-8"))


@dataclass
class Document:
    """A piece of content with its embedding and string metadata."""

    id: str
    content: str = ""
    embedding: Sequence[float] | None = None
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Result:
    """A document returned by a query, with its cosine similarity to the query."""

    id: str
    content: str
    metadata: dict[str, str]
    embedding: tuple[float, ...]
    similarity: float


class Collection:
    """A named set of documents searchable by embedding similarity."""

    def __init__(
        self,
        name: str,
        metadata: Mapping[str, str] | None = None,
        embedding_func: EmbeddingFunc | None = None,
        *,
        directory: Path | None = None,
        compress: bool = False,
    ) -> None:
        self.name = name
        self.metadata = dict(metadata or {})
        self.embedding_func = embedding_func
        self._documents: dict[str, Document] = {}
        self._directory = directory
        self._compress = compress
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"Collection(name={self.name!r}, count={self.count()})"

    def _file(self, stem: str) -> Path:
        assert self._directory is not None
        suffix = ".json.gz" if self._compress else ".json"
        return self._directory / (stem + suffix)

    def _save_metadata(self) -> None:
        if self._directory is None:
            return
        self._directory.mkdir(parents=True, exist_ok=True)
        _write_json(self._file(_METADATA_STEM), {"name": self.name, "metadata": self.metadata})

    def _save_document(self, doc: Document) -> None:
        if self._directory is None:
            return
        _write_json(
            self._file(_hash_name(doc.id)),
            {
                "id": doc.id,
                "content": doc.content,
                "embedding": list(doc.embedding or ()),
                "metadata": doc.metadata,
            },
        )

    def _load_documents(self) -> None:
        assert self._directory is not None
        for path in sorted(self._directory.iterdir()):
            if not path.is_file() or path.name.startswith(_METADATA_STEM + "."):
                continue
            data = _read_json(path)
            self._documents[data["id"]] = Document(
                id=data["id"],
                content=data["content"],
                embedding=tuple(data["embedding"]),
                metadata=dict(data["metadata"]),
            )

    def _prepare(self, doc: Document) -> Document:
        if not doc.id:
            raise ValueError("document ID must not be empty")
        if doc.embedding is not None and len(doc.embedding) > 0:
            embedding = doc.embedding
        elif not doc.content:
            raise ValueError(f"document {doc.id!r}: either embedding or content must be filled")
        elif self.embedding_func is None:
            raise ValueError(
                f"document {doc.id!r} has no embedding and the collection has no embedding function"
            )
        else:
            embedding = self.embedding_func(doc.content)
        return Document(
            id=doc.id,
            content=doc.content,
            embedding=_normalize(embedding),
            metadata=dict(doc.metadata),
        )

    def add_documents(self, documents: Iterable[Document], concurrency: int = 1) -> None:
        """Add documents, embedding those without an embedding, using up to ``concurrency`` workers."""
        if concurrency < 1:
            raise ValueError("concurrency must be at least 1")
        docs = list(documents)
        with ThreadPoolExecutor(max_workers=concurrency) as pool:
            prepared = list(pool.map(self._prepare, docs))
        with self._lock:
            for doc in prepared:
                self._documents[doc.id] = doc
                self._save_document(doc)

    def query_embedding(
        self,
        embedding: Sequence[float],
        n_results: int,
        where: Mapping[str, str] | None = None,
        where_document: Mapping[str, str] | None = None,
    ) -> list[Result]:
        """Return up to ``n_results`` matching documents, most similar first."""
        if n_results <= 0:
            raise ValueError("n_results must be greater than 0")
        where = where or {}
        where_document = where_document or {}
        for operator in where_document:
            if operator not in _WHERE_DOCUMENT_OPERATORS:
                raise ValueError(f"unsupported where_document operator: {operator!r}")
        query = _normalize(embedding)

        with self._lock:
            if n_results > len(self._documents):
                raise ValueError("n_results must be <= the number of documents in the collection")
            candidates = list(self._documents.values())

        results = []
        for doc in candidates:
            if not all(doc.metadata.get(k) == v for k, v in where.items()):
                continue
            if not _matches_content(doc.content, where_document):
                continue
            vector = tuple(doc.embedding or ())
            if len(vector) != len(query):
                raise ValueError(
                    f"query embedding has {len(query)} dimensions, "
                    f"document {doc.id!r} has {len(vector)}"
                )
            similarity = sum(x * y for x, y in zip(query, vector))
            results.append(Result(doc.id, doc.content, dict(doc.metadata), vector, similarity))

        results.sort(key=lambda r: r.similarity, reverse=True)
        return results[:n_results]

    def count(self) -> int:
        """Number of documents in the collection."""
        with self._lock:
            return len(self._documents)


def _matches_content(content: str, where_document: Mapping[str, str]) -> bool:
    for operator, value in where_document.items():
        if operator == "$contains" and value not in content:
            return False
        if operator == "$not_contains" and value in content:
            return False
    return True


class VectorDB:
    """A set of named collections, held in memory and optionally mirrored to a directory."""

    def __init__(self) -> None:
        self._collections: dict[str, Collection] = {}
        self._directory: Path | None = None
        self._compress = False
        self._lock = threading.RLock()

    @classmethod
    def persistent(cls, path: str | Path, compress: bool = False) -> VectorDB:
        """Open, creating if needed, a database stored under ``path``."""
        db = cls()
        directory = Path(path)
        if directory.exists() and not directory.is_dir():
            raise ValueError(f"path is not a directory: {directory}")
        directory.mkdir(parents=True, exist_ok=True)
        db._directory = directory
        db._compress = compress
        for sub in sorted(directory.iterdir()):
            if not sub.is_dir():
                continue
            meta_files = [p for p in sub.iterdir() if p.name.startswith(_METADATA_STEM + ".")]
            if not meta_files:
                continue
            meta = _read_json(meta_files[0])
            collection = Collection(
                meta["name"], meta["metadata"], directory=sub, compress=compress
            )
            collection._load_documents()
            db._collections[collection.name] = collection
        return db

    def create_collection(
        self,
        name: str,
        metadata: Mapping[str, str] | None = None,
        embedding_func: EmbeddingFunc | None = None,
    ) -> Collection:
        """Create a new, empty collection."""
        if not name:
            raise ValueError("collection name must not be empty")
        with self._lock:
            if name in self._collections:
                raise ValueError(f"collection {name!r} already exists")
            directory = None if self._directory is None else self._directory / _hash_name(name)
            collection = Collection(
                name, metadata, embedding_func, directory=directory, compress=self._compress
            )
            collection._save_metadata()
            self._collections[name] = collection
            return collection

    def get_collection(
        self, name: str, embedding_func: EmbeddingFunc | None = None
    ) -> Collection | None:
        """Return the named collection, or None if there is none."""
        with self._lock:
            collection = self._collections.get(name)
        if collection is not None and embedding_func is not None:
            collection.embedding_func = embedding_func
        return collection

    def list_collections(self) -> dict[str, Collection]:
        """All collections by name."""
        with self._lock:
            return dict(self._collections)