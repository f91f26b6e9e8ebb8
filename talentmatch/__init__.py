"""TalentMatch: identity-scoped talent/opportunity registry with compatibility scoring."""

__version__ = "0.1.0"
