# searchless

Semantic search without the infrastructure. `searchless` is a small vector
store that runs inside your Python process: create a collection, add
documents with their embeddings, and query by embedding. A database lives in
memory, or is mirrored to a directory and reloaded later. It needs nothing
outside the standard library.

## Installation

```
pip install .
```

## Usage

```python
from searchless.store import Document, VectorDB

db = VectorDB()
collection = db.create_collection("tech-concepts")
collection.add_documents(
    [
        Document(id="1", content="Relational databases store tables", embedding=[0.1, 0.8, 0.2]),
        Document(id="2", content="Vector databases enable similarity search", embedding=[0.3, 0.6, 0.4]),
    ],
    1,
)

for result in collection.query_embedding([0.15, 0.75, 0.25], 2):
    print(result.id, f"{result.similarity:.4f}", result.content)
```

- `Document` holds `id`, `content`, `embedding` and string `metadata`.
- `Collection.add_documents(documents, concurrency)` normalises each
  embedding and stores the document, replacing one with the same ID. A
  document without an embedding is embedded with the collection's
  `embedding_func` (a callable from text to a vector) if one was given to
  `create_collection`; otherwise a `ValueError` is raised. Empty IDs and zero
  vectors are rejected too.
- `Collection.query_embedding(embedding, n_results, where=None, where_document=None)`
  returns up to `n_results` `Result` objects (`id`, `content`, `metadata`,
  `embedding`, `similarity`), ordered by cosine similarity, highest first.
  `where` keeps documents whose metadata has all the given key/value pairs,
  e.g. `{"difficulty": "beginner"}`; `where_document` accepts `$contains`
  and `$not_contains`, e.g. `{"$contains": "API"}`. `n_results` must be
  positive and no more than the number of documents in the collection, and
  the query must have the same dimension as the stored embeddings; otherwise
  `ValueError` is raised.
- `Collection.count()` gives the number of documents.
- `VectorDB.get_collection(name, embedding_func=None)` returns a collection
  or `None`; `VectorDB.list_collections()` returns all collections by name.
  Creating a collection whose name already exists raises `ValueError`.

### Persistence

```python
db = VectorDB.persistent("./searchless-data", False)
```

`VectorDB.persistent(path, compress)` opens, creating if needed, a database
under `path`. Every collection gets its own subdirectory holding one JSON
file for its name and metadata and one per document; with `compress=True`
the files are gzip-compressed. Collections already on disk are loaded when
the path is opened.

### Distance measures

`searchless.similarity` provides `cosine_similarity`, `euclidean_distance`,
`manhattan_distance`, `distance_to_similarity` (`1 / (1 + distance)`) and
`rank_by_distance(query, documents, metric)`, which returns
`RankedDocument`s sorted nearest first.

## Commands

Each command is a short walkthrough:

```
searchless-hello        # search ten tech concepts in memory
searchless-similarity   # one query ranked by cosine, Euclidean and Manhattan measures
searchless-persist [PATH]
                        # create a database on disk (default ./searchless-data),
                        # run again with the same path to reload and query it
searchless-snippets     # search documentation snippets with metadata and content filters
searchless-benchmark [--dimension N] [--queries N] [--sizes N ...] [--seed N]
                        # query latency and memory; defaults: 384 dimensions,
                        # 1000 queries, sizes 100 1000 10000
```

## What it does not do

`searchless` does not produce embeddings from text. Documents come with their
vectors, or you pass your own `embedding_func`. The snippets walkthrough
derives query vectors from a hash of the text; that is for show only and
carries no meaning. There is no server and no index structure: every query
compares against every stored document.

## Tests

```
pip install .[test]
pytest
```