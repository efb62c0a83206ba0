"""Mood catalogue: the read-only mood/combination lookup used by scoring."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from gamepilot.adapters import parse_combination, parse_mood
from gamepilot.models import Mood, MoodCombination
from gamepilot.moods import DEFAULT_COMBINATIONS, DEFAULT_MOODS
from gamepilot.repository import MoodRepository

logger = logging.getLogger(__name__)

_MAX_RECOMMENDED_COMBINATIONS = 3


class MoodCatalogue(MoodRepository):
    """Immutable in-memory catalogue of moods and predefined combinations.

    Built once at startup and shared by every request.  Nothing mutates it
    after construction, so concurrent readers need no locking.

    When the same unordered pair is declared by more than one combination,
    :meth:`find_combination` returns the first declaration;
    :meth:`recommended_combinations` still sees every declaration.

    Args:
        moods: Mood definitions.  Ids must be unique.
        combinations: Predefined mood pairings.

    Raises:
        ValueError: If *moods* is empty or contains duplicate ids.
    """

    def __init__(
        self,
        moods: Iterable[Mood],
        combinations: Iterable[MoodCombination] = (),
    ) -> None:
        self._moods: dict[str, Mood] = {}
        for mood in moods:
            if mood.mood_id in self._moods:
                raise ValueError(f"Duplicate mood id: {mood.mood_id!r}")
            self._moods[mood.mood_id] = mood
        if not self._moods:
            raise ValueError("A mood catalogue needs at least one mood")

        self._combinations: tuple[MoodCombination, ...] = tuple(combinations)
        self._by_pair: dict[frozenset[str], MoodCombination] = {}
        for combo in self._combinations:
            self._by_pair.setdefault(combo.pair, combo)

        self._check_relations()
        logger.info(
            "Mood catalogue loaded: %d moods, %d combinations.",
            len(self._moods),
            len(self._combinations),
        )

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def default(cls) -> MoodCatalogue:
        """Return a catalogue holding the built-in moods and combinations."""
        return cls(DEFAULT_MOODS, DEFAULT_COMBINATIONS)

    @classmethod
    def from_json_file(cls, path: str | Path) -> MoodCatalogue:
        """Load a catalogue from ``{"moods": [...], "combinations": [...]}``.

        Raises:
            OSError: If the file cannot be read.
            ValueError: If the file is not valid JSON or an entry is malformed.
        """
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValueError(f"{path}: catalogue root must be an object")
        moods = [parse_mood(m) for m in data.get("moods", [])]
        combinations = [parse_combination(c) for c in data.get("combinations", [])]
        logger.info("Read mood catalogue from %s", path)
        return cls(moods, combinations)

    # ------------------------------------------------------------------
    # MoodRepository interface
    # ------------------------------------------------------------------

    def find_mood_by_id(self, mood_id: str) -> Mood | None:
        return self._moods.get(mood_id)

    def find_combination(self, mood_a: str, mood_b: str) -> MoodCombination | None:
        return self._by_pair.get(frozenset((mood_a, mood_b)))

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    def get_all_moods(self) -> list[Mood]:
        """Return all moods in declaration order."""
        return list(self._moods.values())

    def get_all_combinations(self) -> list[MoodCombination]:
        return list(self._combinations)

    def __len__(self) -> int:
        return len(self._moods)

    def __contains__(self, mood_id: object) -> bool:
        return mood_id in self._moods

    # ------------------------------------------------------------------
    # Combination advice
    # ------------------------------------------------------------------

    def recommended_combinations(self, mood_id: str) -> list[MoodCombination]:
        """Return up to 3 combinations led by *mood_id*, strongest first.

        Returns:
            Combinations whose ``primary_mood`` is *mood_id*, sorted by
            descending intensity.  Empty if the mood is unknown.
        """
        if mood_id not in self._moods:
            return []
        led = [c for c in self._combinations if c.primary_mood == mood_id]
        led.sort(key=lambda c: c.intensity, reverse=True)
        return led[:_MAX_RECOMMENDED_COMBINATIONS]

    def validate_combination(self, primary_id: str, secondary_id: str) -> bool:
        """Return whether two moods make a sensible combination.

        Declared compatibility wins, then declared conflict; otherwise the
        pair is valid only if a predefined combination exists.
        """
        primary = self._moods.get(primary_id)
        secondary = self._moods.get(secondary_id)
        if primary is None or secondary is None:
            return False
        if secondary_id in primary.compatible_moods:
            return True
        if secondary_id in primary.conflicting_moods:
            return False
        return self.find_combination(primary_id, secondary_id) is not None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _check_relations(self) -> None:
        """Warn about relations that name unknown moods or contradict."""
        for mood in self._moods.values():
            for other in mood.compatible_moods | mood.conflicting_moods:
                if other not in self._moods:
                    logger.warning(
                        "Mood %r references unknown mood %r.", mood.mood_id, other
                    )
            for other in mood.compatible_moods & mood.conflicting_moods:
                logger.warning(
                    "Mood %r lists %r as both compatible and conflicting.",
                    mood.mood_id,
                    other,
                )
            for other_id in mood.compatible_moods:
                other = self._moods.get(other_id)
                if other is not None and mood.mood_id in other.conflicting_moods:
                    logger.warning(
                        "Moods %r and %r disagree on whether they combine.",
                        mood.mood_id,
                        other_id,
                    )
        for combo in self._combinations:
            for mood_id in (combo.primary_mood, combo.secondary_mood):
                if mood_id not in self._moods:
                    logger.warning(
                        "Combination %s+%s references unknown mood %r.",
                        combo.primary_mood,
                        combo.secondary_mood,
                        mood_id,
                    )
