import random

import pytest

from searchless.benchmark import (
    BenchmarkResult,
    format_detailed_stats,
    format_results,
    generate_random_embedding,
    generate_test_documents,
    response_time_distribution,
    run_benchmark,
    summarize,
)


def test_random_embedding_range_and_length():
    vec = generate_random_embedding(50, random.Random(1))
    assert len(vec) == 50
    assert all(-1.0 <= x < 1.0 for x in vec)


def test_random_embedding_is_reproducible_with_seed():
    a = generate_random_embedding(8, random.Random(42))
    b = generate_random_embedding(8, random.Random(42))
    assert a == b


def test_generate_test_documents():
    docs = generate_test_documents(3, 4, random.Random(0))
    assert [d.id for d in docs] == ["doc_0", "doc_1", "doc_2"]
    assert docs[1].content == "Test document 1 content about various topics"
    assert all(len(d.embedding) == 4 for d in docs)


def test_summarize_statistics():
    result = summarize(10, [5, 1, 3, 2, 4], 15, 2048)
    assert result.query_times == [1, 2, 3, 4, 5]
    assert result.min_query_time == 1
    assert result.max_query_time == 5
    assert result.p50_query_time == 3
    assert result.p95_query_time == 5
    assert result.p99_query_time == 5
    assert result.avg_query_time == 3
    assert result.query_count == 5
    assert result.memory_usage == 2048


def test_summarize_empty_raises():
    with pytest.raises(ValueError):
        summarize(10, [], 0, 0)


def test_response_time_distribution_buckets():
    counts = response_time_distribution([50_000, 100_000, 999_999, 1_000_000, 5_000_000])
    assert list(counts) == ["< 100μs", "100-500μs", "500μs-1ms", "1-5ms", "> 5ms"]
    assert list(counts.values()) == [1, 1, 1, 1, 1]


def test_response_time_distribution_total_matches():
    times = [10, 200_000, 300_000, 7_000_000]
    assert sum(response_time_distribution(times).values()) == len(times)


def test_format_results_has_row_per_result():
    results = [
        summarize(100, [1000, 2000], 3000, 0),
        summarize(1000, [4000, 5000], 9000, 0),
    ]
    text = format_results(results)
    lines = text.splitlines()
    assert "BENCHMARK RESULTS" in lines
    assert lines[3].startswith("Dataset")
    assert lines[-2].startswith("100 ")
    assert lines[-1].startswith("1000 ")


def test_format_detailed_stats():
    result = summarize(7, [1_500_000], 1_500_000, 0)
    text = format_detailed_stats(result)
    assert "DETAILED STATS - 7 Documents" in text
    assert "Min Query Time: 1.5ms" in text
    assert "  1-5ms: 1 queries (100.0%)" in text


def test_run_benchmark_invariants(capsys):
    result = run_benchmark(10, 20, 4, random.Random(3))
    assert isinstance(result, BenchmarkResult)
    assert result.dataset_size == 10
    assert result.query_count == 20
    assert len(result.query_times) == 20
    assert result.query_times == sorted(result.query_times)
    assert (
        result.min_query_time
        <= result.p50_query_time
        <= result.p95_query_time
        <= result.p99_query_time
        <= result.max_query_time
    )
    assert "Benchmarking with 10 documents..." in capsys.readouterr().out


def test_run_benchmark_too_few_documents():
    with pytest.raises(ValueError):
        run_benchmark(3, 5, 4, random.Random(0))


def test_main_small_run(capsys):
    from searchless.benchmark import main

    assert main(["--sizes", "10", "20", "--queries", "5", "--dimension", "8", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "BENCHMARK RESULTS" in out
    assert "DETAILED STATS - 20 Documents" in out
    assert "PERFORMANCE ASSESSMENT" in out