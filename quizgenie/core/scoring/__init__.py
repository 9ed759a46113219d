"""Attempt scoring."""

from quizgenie.core.scoring.scoring_engine import (
    AttemptResult,
    ScoringEngine,
    SubmittedAnswer,
    compute_score,
)

__all__ = ["AttemptResult", "ScoringEngine", "SubmittedAnswer", "compute_score"]
