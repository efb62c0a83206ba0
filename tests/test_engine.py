"""Tests for RecommendationEngine."""

from __future__ import annotations

import copy

import numpy as np
import pytest

from gamepilot.catalogue import MoodCatalogue
from gamepilot.engine import RecommendationEngine
from gamepilot.models import (
    Game,
    Genre,
    Mood,
    Platform,
    RecommendationContext,
    SessionPatterns,
    SocialContext,
    UnknownMoodError,
)


def _chill(**overrides) -> RecommendationContext:
    return RecommendationContext(primary_mood="chill", **overrides)


# ---------------------------------------------------------------------------
# filter_by_mood
# ---------------------------------------------------------------------------


class TestFilterByMood:
    def test_sorted_descending_with_id_tie_break(self, engine, sample_games) -> None:
        result = engine.filter_by_mood(sample_games, _chill())
        ids = [g.game_id for g in result.games]
        # g_bare and g_unknown tie at 53.84
        assert ids == ["g_puzzle", "g_bare", "g_unknown", "g_coop", "g_action"]

    def test_adjacent_scores_non_increasing(self, engine, sample_games) -> None:
        result = engine.filter_by_mood(sample_games, _chill(secondary_mood="energetic"))
        scores = [result.scores[g.game_id] for g in result.games]
        assert all(a >= b for a, b in zip(scores, scores[1:]))

    def test_maps_keyed_by_included_games(self, engine, sample_games) -> None:
        result = engine.filter_by_mood(sample_games, _chill())
        ids = {g.game_id for g in result.games}
        assert set(result.scores) == ids
        assert set(result.reasoning) == ids
        assert set(result.mood_influence) == ids

    def test_expected_scores(self, engine, sample_games) -> None:
        result = engine.filter_by_mood(sample_games, _chill())
        assert result.scores["g_puzzle"] == pytest.approx(66.24)
        assert result.scores["g_coop"] == pytest.approx(49.76)
        assert result.scores["g_action"] == pytest.approx(45.24)

    def test_reasoning_joined(self, engine, puzzle_game) -> None:
        result = engine.filter_by_mood([puzzle_game], _chill())
        assert result.reasoning["g_puzzle"] == (
            "Perfect chill mood match with puzzle genres. "
            "Matches your chill mood with relaxing gameplay. "
            "Energy level matches your chill mood. "
            "Social aspect fits your current mood"
        )

    def test_unknown_primary_mood_raises(self, engine, sample_games) -> None:
        with pytest.raises(UnknownMoodError) as exc_info:
            engine.filter_by_mood(sample_games, RecommendationContext(primary_mood="nope"))
        assert exc_info.value.mood_id == "nope"

    def test_unknown_primary_mood_is_value_error(self, engine) -> None:
        with pytest.raises(ValueError):
            engine.filter_by_mood([], RecommendationContext(primary_mood="nope"))

    def test_unknown_secondary_mood_is_ignored(self, engine, sample_games) -> None:
        alone = engine.filter_by_mood(sample_games, _chill())
        with_missing = engine.filter_by_mood(sample_games, _chill(secondary_mood="nope"))
        assert with_missing.scores == alone.scores

    def test_empty_catalogue(self, engine) -> None:
        result = engine.filter_by_mood([], _chill())
        assert result.games == []
        assert result.scores == {}

    def test_does_not_mutate_inputs(self, engine, sample_games) -> None:
        games = list(sample_games)
        affinity = {"puzzle": 0.5}
        snapshot = copy.deepcopy((games, affinity))
        engine.filter_by_mood(games, _chill(user_genre_affinity=affinity))
        assert (games, affinity) == snapshot

    def test_to_dict(self, engine, puzzle_game) -> None:
        data = engine.filter_by_mood([puzzle_game], _chill()).to_dict()
        assert data["games"] == [
            {
                "id": "g_puzzle",
                "title": "Tile Garden",
                "genres": ["puzzle"],
                "tags": ["relaxing"],
                "platforms": ["mobile"],
            }
        ]
        assert data["scores"]["g_puzzle"] == pytest.approx(66.24)
        assert data["mood_influence"]["g_puzzle"]["hybrid"] == 0.0


class TestThreshold:
    @pytest.fixture
    def gloomy_engine(self) -> RecommendationEngine:
        gloom = Mood(
            "gloom",
            "Gloom",
            genre_weights={"horror": 0.0},
            tag_weights={"gore": 0.0},
            energy_level=0,
            social_requirement=0,
            conflicting_moods=frozenset({"dread"}),
            session_patterns=SessionPatterns(30),
        )
        dread = Mood(
            "dread",
            "Dread",
            genre_weights={"horror": 0.0},
            tag_weights={"gore": 0.0},
            energy_level=0,
            social_requirement=0,
        )
        return RecommendationEngine(MoodCatalogue([gloom, dread]))

    @pytest.fixture
    def gloomy_context(self) -> RecommendationContext:
        return RecommendationContext(
            primary_mood="gloom",
            secondary_mood="dread",
            platform="switch",
            time_available=300,
        )

    def test_excludes_below_threshold(self, gloomy_engine, gloomy_context) -> None:
        bad = Game("g_bad", "Bleak", (Genre("horror"),), ("gore",), (Platform("pc"),))
        ok = Game("g_ok", "Blank")
        result = gloomy_engine.filter_by_mood([bad, ok], gloomy_context)
        assert [g.game_id for g in result.games] == ["g_ok"]
        assert result.scores["g_ok"] == pytest.approx(46.975)

    def test_every_included_score_meets_threshold(self, engine, sample_games) -> None:
        for secondary in (None, "energetic", "creative", "social"):
            result = engine.filter_by_mood(sample_games, _chill(secondary_mood=secondary))
            assert all(score >= 30 for score in result.scores.values())

    def test_custom_threshold(self, catalogue, sample_games) -> None:
        strict = RecommendationEngine(catalogue, min_score=60)
        result = strict.filter_by_mood(sample_games, _chill())
        assert [g.game_id for g in result.games] == ["g_puzzle"]

    def test_score_equal_to_threshold_is_kept(
        self, catalogue, scorer, chill_mood, puzzle_game
    ) -> None:
        context = _chill()
        exact, _ = scorer.score_game(puzzle_game, chill_mood, None, context)
        engine = RecommendationEngine(catalogue, scorer=scorer, min_score=exact)
        result = engine.filter_by_mood([puzzle_game], context)
        assert [g.game_id for g in result.games] == ["g_puzzle"]
        assert result.scores["g_puzzle"] == exact

    def test_score_just_below_threshold_is_dropped(
        self, catalogue, scorer, chill_mood, puzzle_game
    ) -> None:
        context = _chill()
        exact, _ = scorer.score_game(puzzle_game, chill_mood, None, context)
        engine = RecommendationEngine(
            catalogue, scorer=scorer, min_score=float(np.nextafter(exact, np.inf))
        )
        assert engine.filter_by_mood([puzzle_game], context).games == []

    def test_recommendations_share_the_boundary(
        self, catalogue, scorer, chill_mood, puzzle_game
    ) -> None:
        exact, _ = scorer.score_game(puzzle_game, chill_mood, None, _chill())
        engine = RecommendationEngine(catalogue, scorer=scorer)
        kept = engine.get_recommendations([puzzle_game], _chill(), min_score=exact)
        assert [r.game_id for r in kept] == ["g_puzzle"]
        above = float(np.nextafter(exact, np.inf))
        assert engine.get_recommendations([puzzle_game], _chill(), min_score=above) == []


# ---------------------------------------------------------------------------
# Enhanced recommendations
# ---------------------------------------------------------------------------


class TestGetRecommendations:
    def test_mood_path_limit_and_threshold(self, engine, sample_games) -> None:
        recs = engine.get_recommendations(sample_games, _chill(), limit=2)
        assert [r.game_id for r in recs] == ["g_puzzle", "g_bare"]

        recs = engine.get_recommendations(sample_games, _chill(), min_score=50)
        assert [r.game_id for r in recs] == ["g_puzzle", "g_bare", "g_unknown"]

    def test_default_limit(self, catalogue) -> None:
        games = [Game(f"g{i:02d}", f"Game {i}") for i in range(30)]
        engine = RecommendationEngine(catalogue, max_recommendations=20)
        assert len(engine.get_recommendations(games, _chill())) == 20

    def test_negative_limit_rejected(self, engine, sample_games) -> None:
        with pytest.raises(ValueError):
            engine.get_recommendations(sample_games, _chill(), limit=-1)

    def test_mood_compatibility(self, engine, puzzle_game) -> None:
        (rec,) = engine.get_recommendations([puzzle_game], _chill())
        assert rec.mood_compatibility.energy == pytest.approx(100.0)
        assert rec.mood_compatibility.social == pytest.approx(90.0)
        assert rec.mood_compatibility.cognitive == pytest.approx(80.0)
        assert rec.mood_compatibility.time == pytest.approx(90.0)

    def test_fields(self, engine, puzzle_game) -> None:
        (rec,) = engine.get_recommendations([puzzle_game], _chill())
        assert rec.title == "Tile Garden"
        assert rec.primary_genre == "puzzle"
        assert rec.mood_match == rec.score
        assert rec.social_match == 70.0
        assert rec.tags == ("relaxing",)
        assert rec.mood_combination is None

    def test_combination_analysis(self, engine, puzzle_game) -> None:
        (rec,) = engine.get_recommendations([puzzle_game], _chill(secondary_mood="creative"))
        combo = rec.mood_combination
        assert combo is not None
        # (64 + 50) / 2 * 0.8
        assert combo.synergy == pytest.approx(45.6)
        assert combo.reasoning == "Strong chill + creative combination with 46% compatibility"

    def test_social_match(self, engine, puzzle_game, coop_game) -> None:
        solo = engine.get_recommendations(
            [puzzle_game, coop_game], _chill(social_context=SocialContext.SOLO), min_score=0
        )
        by_id = {r.game_id: r for r in solo}
        assert by_id["g_puzzle"].social_match == 85.0
        assert by_id["g_coop"].social_match == 45.0

    def test_standard_path_without_context(self, engine, sample_games) -> None:
        recs = engine.get_recommendations(sample_games, genre_affinity={"puzzle": 1.0})
        assert recs[0].game_id == "g_puzzle"
        assert recs[0].score == pytest.approx(80.0)
        assert recs[0].reasons == ("Strong match for your preferences",)
        assert recs[1].reasons == ("Potential match for your preferences",)
        assert recs[0].mood_influence.hybrid == 0.0

    def test_standard_path_clamps(self, engine) -> None:
        game = Game("g", "Mash", (Genre("a"), Genre("b"), Genre("c"), Genre("d")))
        (rec,) = engine.get_recommendations([game], genre_affinity=dict.fromkeys("abcd", 1.0))
        assert rec.score == 100.0

    def test_unknown_mood_raises(self, engine, sample_games) -> None:
        with pytest.raises(UnknownMoodError):
            engine.get_recommendations(sample_games, RecommendationContext(primary_mood="nope"))


class TestMoodBasedRecommendations:
    def test_builds_context(self, engine, sample_games) -> None:
        recs = engine.get_mood_based_recommendations(
            "chill", sample_games, secondary_mood="creative", intensity=0.5, limit=1
        )
        assert len(recs) == 1
        assert recs[0].game_id == "g_puzzle"
        assert recs[0].mood_combination.synergy == pytest.approx(28.5)

    def test_matches_explicit_context(self, engine, sample_games) -> None:
        via_helper = engine.get_mood_based_recommendations(
            "chill", sample_games, time_available=30, genre_affinity={"puzzle": 0.8}
        )
        explicit = engine.get_recommendations(
            sample_games,
            _chill(time_available=30, user_genre_affinity={"puzzle": 0.8}),
            limit=10,
        )
        assert [r.to_dict() for r in via_helper] == [r.to_dict() for r in explicit]

    def test_default_limit(self, catalogue) -> None:
        games = [Game(f"g{i:02d}", f"Game {i}") for i in range(15)]
        engine = RecommendationEngine(catalogue)
        assert len(engine.get_mood_based_recommendations("chill", games)) == 10

    def test_configured_limit_and_intensity(self, catalogue, sample_games) -> None:
        engine = RecommendationEngine(catalogue, mood_based_limit=2, default_intensity=0.5)
        assert engine.default_intensity == 0.5
        recs = engine.get_mood_based_recommendations(
            "chill", sample_games, secondary_mood="creative"
        )
        assert len(recs) == 2
        assert recs[0].game_id == "g_puzzle"
        # (64 + 50) / 2 * 0.5
        assert recs[0].mood_combination.synergy == pytest.approx(28.5)

    def test_explicit_arguments_override_configuration(self, catalogue, sample_games) -> None:
        engine = RecommendationEngine(catalogue, mood_based_limit=2, default_intensity=0.5)
        recs = engine.get_mood_based_recommendations(
            "chill", sample_games, secondary_mood="creative", intensity=1.0, limit=1
        )
        assert len(recs) == 1
        assert recs[0].mood_combination.synergy == pytest.approx(57.0)


class TestDefaultCatalogue:
    def test_every_builtin_mood_ranks(self, sample_games) -> None:
        catalogue = MoodCatalogue.default()
        engine = RecommendationEngine(catalogue)
        for mood in catalogue.get_all_moods():
            result = engine.filter_by_mood(sample_games, RecommendationContext(mood.mood_id))
            assert result.games
