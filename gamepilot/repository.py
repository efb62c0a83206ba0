"""Abstract read-only lookup interface for moods and mood combinations."""

from __future__ import annotations

from abc import ABC, abstractmethod

from gamepilot.models import Mood, MoodCombination


class MoodRepository(ABC):
    """Abstract base class for mood catalogues consumed by the scorer.

    The :class:`~gamepilot.scoring.MoodScorer` and
    :class:`~gamepilot.engine.RecommendationEngine` receive a repository at
    construction time and only ever read from it, so implementations must
    not change what they return once handed to a scorer.
    """

    @abstractmethod
    def find_mood_by_id(self, mood_id: str) -> Mood | None:
        """Return the mood with id *mood_id*, or ``None`` if unknown."""

    @abstractmethod
    def find_combination(
        self, mood_a: str, mood_b: str
    ) -> MoodCombination | None:
        """Return the predefined combination for the pair, ignoring order.

        Args:
            mood_a: One mood id.
            mood_b: The other mood id.

        Returns:
            The :class:`~gamepilot.models.MoodCombination` declared for the
            unordered pair ``{mood_a, mood_b}``, or ``None``.
        """
