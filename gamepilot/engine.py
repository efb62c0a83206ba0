"""Recommendation engine: ranks a game catalogue against a mood context."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

import numpy as np

from gamepilot.models import (
    DEFAULT_INTENSITY,
    CombinationAnalysis,
    EnhancedRecommendation,
    Game,
    Mood,
    MoodCompatibility,
    MoodFilterResult,
    MoodInfluence,
    RecommendationContext,
    ScoredGame,
    SocialContext,
    UnknownMoodError,
)
from gamepilot.profiling import analyze_game_profile, compatibility_score, mood_alignment
from gamepilot.reasoning import generate_reasons, join_reasons, preference_reason
from gamepilot.repository import MoodRepository
from gamepilot.scoring import MoodScorer, clamp_score

logger = logging.getLogger(__name__)

MIN_SCORE_THRESHOLD = 30.0
DEFAULT_MAX_RECOMMENDATIONS = 20
DEFAULT_MOOD_BASED_LIMIT = 10

_STANDARD_AFFINITY_SCALE = 30
_NEUTRAL_SOCIAL_MATCH = 70.0
_GOOD_SOCIAL_MATCH = 85.0
_POOR_SOCIAL_MATCH = 45.0

_STANDARD_INFLUENCE = MoodInfluence(
    primary=50.0,
    secondary=0.0,
    genre=50.0,
    tags=50.0,
    platform=50.0,
    hybrid=0.0,
    energy=50.0,
    social=50.0,
)


class RecommendationEngine:
    """Ranks games for a mood context and explains each pick.

    Every call is a pure, single pass over the games it is given: no
    input is mutated and no state is kept between calls, so a single
    engine can serve concurrent requests.

    Ordering: descending score, ties broken by ascending game id so that
    identical inputs always produce identical output.

    Args:
        repository: Read-only mood/combination lookup.
        scorer: Scorer to use; defaults to a :class:`MoodScorer` over
            *repository*.
        min_score: Minimum composite score for a game to be included.
        max_recommendations: Default cap for :meth:`get_recommendations`.
        mood_based_limit: Default cap for
            :meth:`get_mood_based_recommendations`.
        default_intensity: Mood intensity used when a caller gives none.
    """

    def __init__(
        self,
        repository: MoodRepository,
        scorer: MoodScorer | None = None,
        min_score: float = MIN_SCORE_THRESHOLD,
        max_recommendations: int = DEFAULT_MAX_RECOMMENDATIONS,
        mood_based_limit: int = DEFAULT_MOOD_BASED_LIMIT,
        default_intensity: float = DEFAULT_INTENSITY,
    ) -> None:
        self._repository = repository
        self._scorer = scorer or MoodScorer(repository)
        self._min_score = min_score
        self._max_recommendations = max_recommendations
        self._mood_based_limit = mood_based_limit
        self._default_intensity = default_intensity

    @property
    def default_intensity(self) -> float:
        return self._default_intensity

    # ------------------------------------------------------------------
    # Mood filter
    # ------------------------------------------------------------------

    def filter_by_mood(
        self, games: Iterable[Game], context: RecommendationContext
    ) -> MoodFilterResult:
        """Score, threshold and sort *games* for *context*.

        Args:
            games: Candidate games.
            context: Request context; its primary mood must resolve.

        Returns:
            A :class:`~gamepilot.models.MoodFilterResult` holding only games
            scoring at least the minimum threshold, best-first.

        Raises:
            UnknownMoodError: If ``context.primary_mood`` is not in the
                catalogue.  No partial result is produced.
        """
        scored = self.score_games(games, context)
        result = MoodFilterResult()
        for item in scored:
            gid = item.game.game_id
            result.games.append(item.game)
            result.scores[gid] = item.score
            result.reasoning[gid] = join_reasons(item.reasons)
            result.mood_influence[gid] = item.influence
        return result

    def score_games(
        self, games: Iterable[Game], context: RecommendationContext
    ) -> list[ScoredGame]:
        """Like :meth:`filter_by_mood` but returns :class:`ScoredGame` items."""
        primary, secondary = self._resolve_moods(context)
        return self._score_resolved(games, context, primary, secondary)

    # ------------------------------------------------------------------
    # Enhanced recommendations
    # ------------------------------------------------------------------

    def get_recommendations(
        self,
        games: Iterable[Game],
        context: RecommendationContext | None = None,
        genre_affinity: Mapping[str, float] | None = None,
        limit: int | None = None,
        min_score: float | None = None,
    ) -> list[EnhancedRecommendation]:
        """Return enriched recommendations, best-first.

        With a *context* the mood filter drives scoring.  Without one, games
        are scored on *genre_affinity* alone.

        Args:
            games: Candidate games.
            context: Optional mood context.
            genre_affinity: Genre affinity used when *context* is ``None``
                (a context carries its own ``user_genre_affinity``).
            limit: Maximum results; defaults to the engine's cap.
            min_score: Threshold on top of the mood filter's own.

        Raises:
            UnknownMoodError: If the context's primary mood does not resolve.
            ValueError: If *limit* is negative.
        """
        limit = self._max_recommendations if limit is None else limit
        if limit < 0:
            raise ValueError("limit must be non-negative")
        threshold = self._min_score if min_score is None else min_score

        if context is not None:
            recommendations = self._mood_recommendations(games, context)
        else:
            recommendations = self._standard_recommendations(games, genre_affinity or {})

        kept = [r for r in recommendations if r.score >= threshold]
        kept.sort(key=lambda r: (-r.score, r.game_id))
        return kept[:limit]

    def get_mood_based_recommendations(
        self,
        mood_id: str,
        games: Iterable[Game],
        secondary_mood: str | None = None,
        intensity: float | None = None,
        limit: int | None = None,
        genre_affinity: Mapping[str, float] | None = None,
        time_available: int | None = None,
        social_context: SocialContext | None = None,
        platform: str | None = None,
    ) -> list[EnhancedRecommendation]:
        """Convenience wrapper building a context from keyword arguments.

        *intensity* and *limit* default to the engine's configured values.
        """
        context = RecommendationContext(
            primary_mood=mood_id,
            secondary_mood=secondary_mood,
            platform=platform,
            social_context=social_context,
            time_available=time_available,
            user_genre_affinity=dict(genre_affinity) if genre_affinity else None,
            intensity=self._default_intensity if intensity is None else intensity,
        )
        if limit is None:
            limit = self._mood_based_limit
        return self.get_recommendations(games, context, limit=limit)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _resolve_moods(
        self, context: RecommendationContext
    ) -> tuple[Mood, Mood | None]:
        primary = self._repository.find_mood_by_id(context.primary_mood)
        if primary is None:
            raise UnknownMoodError(context.primary_mood)

        secondary = None
        if context.secondary_mood:
            secondary = self._repository.find_mood_by_id(context.secondary_mood)
            if secondary is None:
                logger.warning(
                    "Secondary mood %r not found; scoring on %r alone.",
                    context.secondary_mood,
                    context.primary_mood,
                )
        return primary, secondary

    def _score_resolved(
        self,
        games: Iterable[Game],
        context: RecommendationContext,
        primary: Mood,
        secondary: Mood | None,
    ) -> list[ScoredGame]:
        scored: list[ScoredGame] = []
        total = 0
        for game in games:
            total += 1
            score, influence = self._scorer.score_game(game, primary, secondary, context)
            if score < self._min_score:
                continue
            reasons = generate_reasons(game, primary, influence, secondary)
            scored.append(ScoredGame(game, score, reasons, influence))

        scored.sort(key=lambda s: (-s.score, s.game.game_id))
        logger.debug(
            "Mood filter %s%s kept %d of %d games.",
            primary.mood_id,
            f"+{secondary.mood_id}" if secondary else "",
            len(scored),
            total,
        )
        return scored

    def _mood_recommendations(
        self, games: Iterable[Game], context: RecommendationContext
    ) -> list[EnhancedRecommendation]:
        primary, secondary = self._resolve_moods(context)
        recommendations = []
        for item in self._score_resolved(games, context, primary, secondary):
            profile = analyze_game_profile(item.game)
            compatibility = MoodCompatibility(
                energy=compatibility_score(profile.energy, primary.energy_level),
                social=compatibility_score(profile.social, primary.social_requirement),
                cognitive=compatibility_score(profile.cognitive, primary.cognitive_load),
                time=compatibility_score(profile.time_commitment, primary.time_commitment),
            )
            combination = (
                self._analyze_combination(item.game, primary, secondary, context.intensity)
                if secondary is not None
                else None
            )
            recommendations.append(
                _build_recommendation(
                    item.game,
                    item.score,
                    item.reasons,
                    item.influence,
                    _social_match(profile.social, context.social_context),
                    compatibility,
                    combination,
                )
            )
        return recommendations

    def _standard_recommendations(
        self, games: Iterable[Game], affinity: Mapping[str, float]
    ) -> list[EnhancedRecommendation]:
        recommendations = []
        for game in games:
            bonus = sum(affinity.get(g, 0.0) * _STANDARD_AFFINITY_SCALE for g in game.genre_names)
            score = clamp_score(50.0 + bonus)
            recommendations.append(
                _build_recommendation(
                    game,
                    score,
                    (preference_reason(score),),
                    _STANDARD_INFLUENCE,
                    _NEUTRAL_SOCIAL_MATCH,
                    MoodCompatibility(),
                    None,
                )
            )
        return recommendations

    @staticmethod
    def _analyze_combination(
        game: Game, primary: Mood, secondary: Mood, intensity: float
    ) -> CombinationAnalysis:
        alignments = [mood_alignment(game, primary), mood_alignment(game, secondary)]
        synergy = float(np.mean(alignments)) * intensity
        return CombinationAnalysis(
            primary=primary.name,
            secondary=secondary.name,
            synergy=synergy,
            reasoning=(
                f"Strong {primary.name.lower()} + {secondary.name.lower()} "
                f"combination with {round(synergy)}% compatibility"
            ),
        )


def _social_match(game_social: int, social_context: SocialContext | None) -> float:
    if social_context == SocialContext.SOLO:
        return _GOOD_SOCIAL_MATCH if game_social <= 5 else _POOR_SOCIAL_MATCH
    if social_context == SocialContext.GROUP:
        return _GOOD_SOCIAL_MATCH if game_social >= 7 else _POOR_SOCIAL_MATCH
    return _NEUTRAL_SOCIAL_MATCH


def _build_recommendation(
    game: Game,
    score: float,
    reasons: tuple[str, ...],
    influence: MoodInfluence,
    social_match: float,
    compatibility: MoodCompatibility,
    combination: CombinationAnalysis | None,
) -> EnhancedRecommendation:
    return EnhancedRecommendation(
        game_id=game.game_id,
        title=game.title,
        primary_genre=game.genre_names[0] if game.genres else "Unknown",
        score=score,
        reasons=reasons,
        mood_match=score,
        social_match=social_match,
        tags=game.tags,
        mood_influence=influence,
        mood_compatibility=compatibility,
        mood_combination=combination,
    )
