"""Mood compatibility scoring: single-mood, hybrid and composite scores."""

from __future__ import annotations

import logging
from typing import Mapping

import numpy as np

from gamepilot.models import (
    Game,
    Mood,
    MoodInfluence,
    RecommendationContext,
    SocialContext,
)
from gamepilot.repository import MoodRepository

logger = logging.getLogger(__name__)

NEUTRAL_SCORE = 50.0

# Single-mood factor weights: (subscore - 50) * weight
GENRE_WEIGHT = 0.30
TAG_WEIGHT = 0.25
PLATFORM_WEIGHT = 0.15
ENERGY_WEIGHT = 0.15
SOCIAL_WEIGHT = 0.15

# Composite weights
PRIMARY_MOOD_WEIGHT = 0.4
SECONDARY_MOOD_WEIGHT = 0.25
HYBRID_WEIGHT = 0.15
GENRE_AFFINITY_WEIGHT = 0.1
CONTEXT_WEIGHT = 0.1

# Platform subscores when the user forces a platform preference
PREFERRED_PLATFORM_MATCH = 80.0
PREFERRED_PLATFORM_MISS = 30.0

# Hybrid bonuses when no predefined combination exists
COMBINATION_INTENSITY_SCALE = 25.0
COMPATIBLE_BONUS = 20.0
CONFLICTING_PENALTY = -10.0
DEFAULT_NEUTRAL_BONUS = 5.0

_BASE_GAME_LEVEL = 5

_HIGH_ENERGY_GENRES = frozenset({"action", "racing", "sports"})
_LOW_ENERGY_GENRES = frozenset({"puzzle", "casual", "simulation"})
_HIGH_ENERGY_TAGS = frozenset({"intense", "fast-paced", "competitive"})
_LOW_ENERGY_TAGS = frozenset({"relaxing", "meditative", "cozy"})
_SOCIAL_TAGS = frozenset({"multiplayer", "cooperative", "team-based"})
_SOLO_TAGS = frozenset({"single-player", "solo"})


def clamp_score(value: float) -> float:
    """Clamp *value* into [0, 100] and return it as a plain float."""
    return float(np.clip(value, 0.0, 100.0))


def estimate_game_energy(game: Game) -> int:
    """Estimate how stimulating *game* is, starting from a neutral 5.

    Unbounded: an action game tagged intense and competitive reaches 11.
    """
    energy = _BASE_GAME_LEVEL
    for genre in game.genre_names:
        if genre in _HIGH_ENERGY_GENRES:
            energy += 2
        elif genre in _LOW_ENERGY_GENRES:
            energy -= 1
    for tag in game.tags:
        if tag in _HIGH_ENERGY_TAGS:
            energy += 2
        elif tag in _LOW_ENERGY_TAGS:
            energy -= 1
    return energy


def estimate_game_social(game: Game) -> int:
    """Estimate how much social play *game* involves, from its tags."""
    social = _BASE_GAME_LEVEL
    for tag in game.tags:
        if tag in _SOCIAL_TAGS:
            social += 3
        elif tag in _SOLO_TAGS:
            social -= 2
    return social


class MoodScorer:
    """Scores games against moods.

    The scorer is stateless apart from its injected, read-only
    :class:`~gamepilot.repository.MoodRepository`, so one instance can be
    shared across threads.

    Args:
        repository: Mood/combination lookup used for hybrid bonuses.
        neutral_combination_bonus: Hybrid bonus for two moods with no
            declared relation and no predefined combination.
    """

    def __init__(
        self,
        repository: MoodRepository,
        neutral_combination_bonus: float = DEFAULT_NEUTRAL_BONUS,
    ) -> None:
        self._repository = repository
        self._neutral_bonus = neutral_combination_bonus

    # ------------------------------------------------------------------
    # Component subscores (each in [0, 100])
    # ------------------------------------------------------------------

    def genre_compatibility(self, game: Game, mood: Mood) -> float:
        return self._mean_weight(game.genre_names, mood.genre_weights)

    def tag_compatibility(self, game: Game, mood: Mood) -> float:
        return self._mean_weight(game.tags, mood.tag_weights)

    def platform_compatibility(
        self, game: Game, mood: Mood, preferred_platform: str | None = None
    ) -> float:
        """Score platform fit.

        A forced preference overrides the mood's platform bias entirely:
        80 if the game runs on it, 30 otherwise.  Platformless games are
        neutral either way.
        """
        platforms = game.platform_names
        if not platforms:
            return NEUTRAL_SCORE
        if preferred_platform:
            if preferred_platform in platforms:
                return PREFERRED_PLATFORM_MATCH
            return PREFERRED_PLATFORM_MISS
        return self._mean_weight(platforms, mood.platform_bias)

    def energy_compatibility(self, game: Game, mood: Mood) -> float:
        diff = abs(estimate_game_energy(game) - mood.energy_level)
        return clamp_score(100 - diff * 10)

    def social_compatibility(
        self,
        game: Game,
        mood: Mood,
        social_context: SocialContext | None = None,
    ) -> float:
        """Score social fit; an explicit solo/group context beats the mood."""
        game_social = estimate_game_social(game)
        if social_context == SocialContext.SOLO:
            return 80.0 if game_social <= 5 else 30.0
        if social_context == SocialContext.GROUP:
            return 80.0 if game_social >= 7 else 40.0
        diff = abs(game_social - mood.social_requirement)
        return clamp_score(100 - diff * 8)

    # ------------------------------------------------------------------
    # Single mood
    # ------------------------------------------------------------------

    def score_single_mood(
        self,
        game: Game,
        mood: Mood,
        context: RecommendationContext | None = None,
    ) -> float:
        """Return 50 plus the five weighted component deltas.

        Not clamped here; callers clamp.  With every subscore in [0, 100]
        the result already stays within [0, 100].
        """
        platform = context.platform if context else None
        social_context = context.social_context if context else None

        score = NEUTRAL_SCORE
        score += (self.genre_compatibility(game, mood) - NEUTRAL_SCORE) * GENRE_WEIGHT
        score += (self.tag_compatibility(game, mood) - NEUTRAL_SCORE) * TAG_WEIGHT
        score += (
            self.platform_compatibility(game, mood, platform) - NEUTRAL_SCORE
        ) * PLATFORM_WEIGHT
        score += (self.energy_compatibility(game, mood) - NEUTRAL_SCORE) * ENERGY_WEIGHT
        score += (
            self.social_compatibility(game, mood, social_context) - NEUTRAL_SCORE
        ) * SOCIAL_WEIGHT
        return score

    # ------------------------------------------------------------------
    # Hybrid / contextual bonuses
    # ------------------------------------------------------------------

    def hybrid_bonus(self, game: Game, primary: Mood, secondary: Mood) -> float:
        """Return the bonus for using *primary* and *secondary* together.

        A predefined combination scores ``intensity * 25``.  Otherwise the
        declared relations decide (+20 compatible, -10 conflicting), read
        from both moods so that the bonus does not depend on which mood is
        primary.  Unrelated pairs get the neutral bonus.
        """
        combination = self._repository.find_combination(
            primary.mood_id, secondary.mood_id
        )
        if combination is not None:
            return combination.intensity * COMBINATION_INTENSITY_SCALE

        if (
            secondary.mood_id in primary.compatible_moods
            or primary.mood_id in secondary.compatible_moods
        ):
            return COMPATIBLE_BONUS
        if (
            secondary.mood_id in primary.conflicting_moods
            or primary.mood_id in secondary.conflicting_moods
        ):
            return CONFLICTING_PENALTY
        return self._neutral_bonus

    @staticmethod
    def genre_affinity_bonus(game: Game, affinity: Mapping[str, float]) -> float:
        """Mean of the user's 0–1 affinity over the game's genres, as 0–100."""
        genres = game.genre_names
        if not genres:
            return 0.0
        return clamp_score(np.mean([affinity.get(g, 0.0) for g in genres]) * 100)

    @staticmethod
    def context_bonus(mood: Mood, context: RecommendationContext | None) -> float:
        """Reward a match between time available and the mood's session length."""
        if context is None or not context.time_available or mood.session_patterns is None:
            return 0.0
        preferred = mood.session_patterns.preferred_session_length
        time_match = max(0.0, 100 - abs(context.time_available - preferred) / 2)
        return (time_match - NEUTRAL_SCORE) * 0.5

    # ------------------------------------------------------------------
    # Composite
    # ------------------------------------------------------------------

    def composite_score(
        self,
        game: Game,
        primary: Mood,
        secondary: Mood | None = None,
        context: RecommendationContext | None = None,
    ) -> float:
        score, _ = self.score_game(game, primary, secondary, context)
        return score

    def score_game(
        self,
        game: Game,
        primary: Mood,
        secondary: Mood | None = None,
        context: RecommendationContext | None = None,
    ) -> tuple[float, MoodInfluence]:
        """Return the clamped composite score and its influence breakdown.

        Args:
            game: The game to score.
            primary: Resolved primary mood.
            secondary: Resolved secondary mood, if any.
            context: Request context; ``None`` behaves like an empty context.

        Returns:
            ``(score, influence)`` where *score* is in [0, 100].
        """
        influence = self.mood_influence(game, primary, secondary, context)
        score = NEUTRAL_SCORE + (influence.primary - NEUTRAL_SCORE) * PRIMARY_MOOD_WEIGHT

        if secondary is not None:
            score += (influence.secondary - NEUTRAL_SCORE) * SECONDARY_MOOD_WEIGHT
            score += influence.hybrid * HYBRID_WEIGHT

        if context is not None and context.user_genre_affinity:
            score += (
                self.genre_affinity_bonus(game, context.user_genre_affinity)
                * GENRE_AFFINITY_WEIGHT
            )

        score += self.context_bonus(primary, context) * CONTEXT_WEIGHT
        return clamp_score(score), influence

    def mood_influence(
        self,
        game: Game,
        primary: Mood,
        secondary: Mood | None = None,
        context: RecommendationContext | None = None,
    ) -> MoodInfluence:
        """Return the factor breakdown behind *game*'s composite score.

        ``primary`` and ``secondary`` are the clamped single-mood scores,
        ``hybrid`` the combination bonus; the last two are 0 without a
        secondary mood.  The genre, tag, platform, energy and social entries
        are subscores against the primary mood only.
        """
        secondary_score = 0.0
        hybrid = 0.0
        if secondary is not None:
            secondary_score = clamp_score(
                self.score_single_mood(game, secondary, context)
            )
            hybrid = self.hybrid_bonus(game, primary, secondary)

        return MoodInfluence(
            primary=clamp_score(self.score_single_mood(game, primary, context)),
            secondary=secondary_score,
            genre=self.genre_compatibility(game, primary),
            tags=self.tag_compatibility(game, primary),
            platform=self.platform_compatibility(
                game, primary, context.platform if context else None
            ),
            hybrid=hybrid,
            energy=self.energy_compatibility(game, primary),
            social=self.social_compatibility(
                game, primary, context.social_context if context else None
            ),
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _mean_weight(names: list[str] | tuple[str, ...], table: Mapping[str, float]) -> float:
        """Average ``table[name] * 100`` over *names*; absent names count 50."""
        if not names:
            return NEUTRAL_SCORE
        return clamp_score(np.mean([table.get(n, 0.5) * 100 for n in names]))
