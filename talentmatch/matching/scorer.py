"""Compatibility scoring."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence

from talentmatch.confidence import confidence_for
from talentmatch.matching.scorer_protocol import Scorer

if TYPE_CHECKING:
    from talentmatch.persistence.models import Opportunity, TalentProfile

logger = logging.getLogger(__name__)

BASELINE_SCORE = 75
MIN_SCORE = 0
MAX_SCORE = 100


class BaselineScorer:
    """Placeholder scorer returning a fixed baseline for every pair.

    Either snapshot may be None (the record was never published or has been
    removed); the result is the same.
    """

    def __init__(self, baseline: int = BASELINE_SCORE):
        if not MIN_SCORE <= baseline <= MAX_SCORE:
            raise ValueError(f"Baseline must be within [{MIN_SCORE}, {MAX_SCORE}], got {baseline}")
        self.baseline = baseline

    def score(
        self,
        talent: Optional[TalentProfile],
        opportunity: Optional[Opportunity],
        criteria: Sequence[str],
    ) -> int:
        return self.baseline


def score_pair(
    talent: Optional[TalentProfile],
    opportunity: Optional[Opportunity],
    criteria: Sequence[str],
    scorer: Optional[Scorer] = None,
) -> tuple[int, int]:
    """
    Score a pair and derive its confidence.

    Args:
        talent: Talent snapshot, or None if absent
        opportunity: Opportunity snapshot, or None if absent
        criteria: Matching criteria (at most 5)
        scorer: Scoring engine (defaults to BaselineScorer)

    Returns:
        (score, confidence)

    Raises:
        ValueError: If the scorer returns a value outside [0, 100]
    """
    scorer = scorer or BaselineScorer()
    score = scorer.score(talent, opportunity, criteria)
    # bool is an int subclass but never a score
    valid_type = isinstance(score, int) and not isinstance(score, bool)
    if not valid_type or not MIN_SCORE <= score <= MAX_SCORE:
        raise ValueError(
            f"{type(scorer).__name__} returned {score!r}; scores must be ints in "
            f"[{MIN_SCORE}, {MAX_SCORE}]"
        )
    return score, confidence_for(score)


def get_scorer(scoring_engine: str = "baseline") -> Scorer:
    """Factory: create a Scorer based on the configured scoring engine.

    Args:
        scoring_engine: Engine name from settings

    Returns:
        A Scorer instance (always baseline for now; other names
        fall back with a warning).
    """
    if scoring_engine != "baseline":
        logger.warning(
            "Scoring engine '%s' is not available. Falling back to baseline.",
            scoring_engine,
        )
    return BaselineScorer()
