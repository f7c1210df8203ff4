"""Match engine."""

from .match import MatchEngine

__all__ = ["MatchEngine"]
