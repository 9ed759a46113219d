"""
Test suite for quiz context assembly.

System role: Verification of budgeted context sampling
"""

from quizgenie.core.quiz_generation.context_builder import ContextBuilder, build_context


class TestBuildContext:
    """Test suite for build_context()."""

    def test_should_join_all_chunks_when_within_budget(self) -> None:
        assert build_context(["alpha", "beta"], 100) == "alpha\n\nbeta"

    def test_should_return_empty_string_without_chunks(self) -> None:
        assert build_context([], 100) == ""

    def test_should_respect_budget(self) -> None:
        # Arrange
        chunks = [str(i) * 100 for i in range(10)]

        # Act
        context = build_context(chunks, 350)

        # Assert
        assert len(context) <= 350

    def test_should_sample_across_whole_bucket_in_order(self) -> None:
        # Arrange
        chunks = [f"chunk-{i:02d}-" + "x" * 90 for i in range(20)]

        # Act
        context = build_context(chunks, 500)

        # Assert
        picked = [part[:8] for part in context.split("\n\n")]
        assert picked[0] == "chunk-00"
        assert int(picked[-1][6:8]) >= 10
        assert picked == sorted(picked)

    def test_should_truncate_single_oversized_chunk(self) -> None:
        assert build_context(["y" * 1000], 120) == "y" * 120

    def test_should_return_empty_for_non_positive_budget(self) -> None:
        assert build_context(["text"], 0) == ""


class TestContextBuilder:
    """Test suite for ContextBuilder."""

    def test_build_should_apply_configured_budget(self) -> None:
        builder = ContextBuilder(max_chars=10)

        assert builder.build(["0123456789abcdef"]) == "0123456789"
