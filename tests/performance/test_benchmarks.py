"""Performance benchmarks for the command search engine."""

import random
import string

import pytest
from command_search.core.engine import SearchEngine
from command_search.core.field_scorer import FieldScorer
from command_search.models.record import Record


# Filler words never contain the letters of "git", so the real git record
# is the only one that can match it.
FILLER_LETTERS = "".join(c for c in string.ascii_lowercase if c not in "git")


def random_word(rng, length):
    return "".join(rng.choice(FILLER_LETTERS) for _ in range(length))


class TestPerformanceBenchmarks:
    """Performance benchmark tests."""

    @pytest.fixture
    def engine(self):
        """Create a search engine for benchmarking."""
        return SearchEngine()

    @pytest.fixture
    def large_library(self):
        """Generate a large record collection with a few realistic commands."""
        rng = random.Random(42)
        records = []
        for i in range(1000):
            words = [random_word(rng, rng.randint(3, 9)) for _ in range(4)]
            records.append(Record(
                id=str(i),
                name=" ".join(words[:2]),
                value=" ".join(words[1:]),
                description=" ".join(words),
                tags=words[:2]
            ))

        records.extend([
            Record(id="git", name="Git Status", value="git status", tags=["git", "status"]),
            Record(id="ls", name="List Files", value="ls -la", tags=["filesystem", "list"]),
            Record(id="up", name="Docker Compose Up", value="docker-compose up -d", tags=["docker"]),
        ])
        return records

    def test_substring_search_performance(self, engine, large_library, benchmark):
        """Benchmark a typical substring query."""
        results = benchmark(engine.search, large_library, "git")

        assert results
        assert results[0].record.id == "git"
        scores = [result.score for result in results]
        assert scores == sorted(scores, reverse=True)

    def test_typo_search_performance(self, engine, large_library, benchmark):
        """Benchmark a misspelled query."""
        results = benchmark(engine.search, large_library, "dokcer")

        assert any(result.record.id == "up" for result in results)

    def test_blank_search_performance(self, engine, large_library, benchmark):
        """Benchmark the unfiltered listing."""
        results = benchmark(engine.search, large_library, "")

        assert len(results) == len(large_library)

    def test_field_scorer_performance(self, benchmark):
        """Benchmark scoring a single long field."""
        scorer = FieldScorer()
        text = " ".join(["docker compose up detached services"] * 20)

        score = benchmark(scorer.score, "xompose", text)

        assert score > 0
