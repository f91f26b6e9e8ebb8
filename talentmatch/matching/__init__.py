"""Compatibility matching and scoring."""
from talentmatch.confidence import confidence_for
from .scorer import BaselineScorer, get_scorer, score_pair
from .scorer_protocol import Scorer

__all__ = ["BaselineScorer", "Scorer", "confidence_for", "get_scorer", "score_pair"]
