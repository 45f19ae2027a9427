import re

from searchless.hello import main, tech_concepts
from searchless.store import VectorDB


def test_tech_concepts_shape():
    docs = tech_concepts()
    assert len(docs) == 10
    assert len({d.id for d in docs}) == 10
    assert all(len(d.embedding) == 16 for d in docs)
    assert all(d.content for d in docs)


def test_concepts_load_into_collection():
    coll = VectorDB().create_collection("tech-concepts")
    coll.add_documents(tech_concepts(), 1)
    assert coll.count() == 10
    first = tech_concepts()[0]
    assert coll.query_embedding(first.embedding, 1)[0].id == first.id


def test_main_prints_five_ranked_results(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    matches = re.findall(r"^(\d+)\. \[ID: (\w+)\] Similarity: ([0-9.]+)$", out, re.MULTILINE)
    assert [int(m[0]) for m in matches] == [1, 2, 3, 4, 5]
    sims = [float(m[2]) for m in matches]
    assert sims == sorted(sims, reverse=True)
    ids = {d.id for d in tech_concepts()}
    assert all(m[1] in ids for m in matches)
    assert "Searched 10 documents in memory" in out