"""Scorer protocol for pluggable compatibility engines.

Defines the interface that all scoring implementations must satisfy.
BaselineScorer is the placeholder implementation; a real feature-comparison
scorer (skill overlap, location, experience level) implements the same
protocol and drops in without touching the registry services.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence, runtime_checkable

if TYPE_CHECKING:
    from talentmatch.persistence.models import Opportunity, TalentProfile


@runtime_checkable
class Scorer(Protocol):
    """Protocol for compatibility scoring engines."""

    def score(
        self,
        talent: Optional[TalentProfile],
        opportunity: Optional[Opportunity],
        criteria: Sequence[str],
    ) -> int:
        """Score a talent/opportunity pair. Must return an int in [0, 100]."""
        ...
