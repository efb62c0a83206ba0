"""Shared pytest fixtures for all GamePilot recommender tests."""

from __future__ import annotations

import pytest

from gamepilot.catalogue import MoodCatalogue
from gamepilot.engine import RecommendationEngine
from gamepilot.models import Game, Genre, Mood, MoodCombination, Platform, SessionPatterns
from gamepilot.scoring import MoodScorer


# ---------------------------------------------------------------------------
# Mood fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def chill_mood() -> Mood:
    return Mood(
        mood_id="chill",
        name="Chill",
        genre_weights={"puzzle": 0.9, "casual": 0.8, "action": 0.2},
        tag_weights={"relaxing": 0.9, "cozy": 0.8, "intense": 0.1},
        platform_bias={"pc": 0.7, "mobile": 0.9},
        energy_level=3,
        social_requirement=3,
        compatible_moods=frozenset({"creative"}),
        conflicting_moods=frozenset({"energetic"}),
        session_patterns=SessionPatterns(preferred_session_length=30),
    )


@pytest.fixture
def energetic_mood() -> Mood:
    return Mood(
        mood_id="energetic",
        name="Energetic",
        genre_weights={"action": 0.9, "racing": 0.8, "puzzle": 0.2},
        tag_weights={"intense": 0.9, "competitive": 0.8, "relaxing": 0.1},
        platform_bias={"console": 0.9, "pc": 0.8},
        energy_level=9,
        social_requirement=6,
        compatible_moods=frozenset({"social"}),
        conflicting_moods=frozenset({"chill"}),
        session_patterns=SessionPatterns(preferred_session_length=45),
    )


@pytest.fixture
def creative_mood() -> Mood:
    return Mood(
        mood_id="creative",
        name="Creative",
        genre_weights={"simulation": 0.9},
        tag_weights={"building": 0.9},
        energy_level=5,
        social_requirement=4,
        compatible_moods=frozenset({"chill"}),
        session_patterns=SessionPatterns(preferred_session_length=75),
    )


@pytest.fixture
def social_mood() -> Mood:
    return Mood(
        mood_id="social",
        name="Social",
        genre_weights={"sports": 0.8},
        tag_weights={"multiplayer": 0.9, "cooperative": 0.8},
        energy_level=6,
        social_requirement=9,
        compatible_moods=frozenset({"energetic"}),
    )


@pytest.fixture
def focused_mood() -> Mood:
    return Mood(
        mood_id="focused",
        name="Focused",
        genre_weights={"strategy": 0.9},
        tag_weights={"strategic": 0.9},
        energy_level=5,
        social_requirement=2,
    )


@pytest.fixture
def all_moods(
    chill_mood, energetic_mood, creative_mood, social_mood, focused_mood
) -> list[Mood]:
    return [chill_mood, energetic_mood, creative_mood, social_mood, focused_mood]


@pytest.fixture
def combinations() -> list[MoodCombination]:
    return [
        MoodCombination("energetic", "social", 0.8, "Energetic social gaming"),
        MoodCombination("focused", "creative", 0.4, "Careful building"),
    ]


@pytest.fixture
def catalogue(all_moods, combinations) -> MoodCatalogue:
    return MoodCatalogue(all_moods, combinations)


@pytest.fixture
def scorer(catalogue) -> MoodScorer:
    return MoodScorer(catalogue)


@pytest.fixture
def engine(catalogue, scorer) -> RecommendationEngine:
    return RecommendationEngine(repository=catalogue, scorer=scorer)


# ---------------------------------------------------------------------------
# Game fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def puzzle_game() -> Game:
    return Game(
        "g_puzzle", "Tile Garden", (Genre("puzzle"),), ("relaxing",), (Platform("mobile"),)
    )


@pytest.fixture
def action_game() -> Game:
    return Game(
        "g_action",
        "Redline Rush",
        (Genre("action"),),
        ("intense", "competitive"),
        (Platform("console"), Platform("pc")),
    )


@pytest.fixture
def coop_game() -> Game:
    return Game(
        "g_coop",
        "Castle Crew",
        (Genre("sports"),),
        ("multiplayer", "cooperative"),
        (Platform("console"),),
    )


@pytest.fixture
def bare_game() -> Game:
    """A game with no genres, tags or platforms."""
    return Game("g_bare", "Mystery Box")


@pytest.fixture
def unknown_game() -> Game:
    """A game whose genre/tag/platform are absent from the chill mood's tables."""
    return Game(
        "g_unknown", "Odd One", (Genre("strategy"),), ("retro",), (Platform("switch"),)
    )


@pytest.fixture
def sample_games(puzzle_game, action_game, coop_game, bare_game, unknown_game) -> list[Game]:
    return [puzzle_game, action_game, coop_game, bare_game, unknown_game]
