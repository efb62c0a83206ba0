"""Core domain dataclasses shared across all GamePilot recommender modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

# Strength of a mood selection when the caller does not give one.
DEFAULT_INTENSITY = 0.8


class SocialContext(str, Enum):
    """Who the user intends to play with for this request."""

    SOLO = "solo"
    GROUP = "group"


class UnknownMoodError(ValueError):
    """Raised when a required mood id does not resolve in the catalogue."""

    def __init__(self, mood_id: str) -> None:
        super().__init__(f"Primary mood not found: {mood_id!r}")
        self.mood_id = mood_id


# ---------------------------------------------------------------------------
# Games
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Genre:
    """A canonical genre value. Raw payloads are normalised to this shape."""

    name: str


@dataclass(frozen=True)
class Platform:
    """A canonical platform value (``"pc"``, ``"console"``, ``"mobile"``...)."""

    name: str


@dataclass(frozen=True)
class Game:
    """The subset of a catalogue game that the scorer reads.

    Attributes:
        game_id: Unique identifier for the game.
        title: Human-readable game title.
        genres: Ordered genres; the first one is treated as the primary genre.
        tags: Ordered free-form gameplay tags (e.g. ``"cozy"``, ``"intense"``).
        platforms: Ordered platforms the game is available on.
    """

    game_id: str
    title: str
    genres: tuple[Genre, ...] = ()
    tags: tuple[str, ...] = ()
    platforms: tuple[Platform, ...] = ()

    @property
    def genre_names(self) -> list[str]:
        return [g.name for g in self.genres]

    @property
    def platform_names(self) -> list[str]:
        return [p.name for p in self.platforms]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.game_id,
            "title": self.title,
            "genres": self.genre_names,
            "tags": list(self.tags),
            "platforms": self.platform_names,
        }


# ---------------------------------------------------------------------------
# Mood catalogue
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SessionPatterns:
    """Behavioural signals associated with a mood.

    Attributes:
        preferred_session_length: Typical session length in minutes.
        likelihood_of_multiplayer: 0–1.
        tolerance_for_difficulty: 0–1.
        desire_for_novelty: 0–1.
    """

    preferred_session_length: int
    likelihood_of_multiplayer: float | None = None
    tolerance_for_difficulty: float | None = None
    desire_for_novelty: float | None = None


@dataclass(frozen=True)
class Mood:
    """A named gaming mood with weight tables and intensity scalars.

    Weight tables map a genre/tag/platform name to a 0–1 affinity.  Names
    missing from a table are treated as neutral by the scorer.  The tables
    are copied into read-only mappings on construction.

    Attributes:
        mood_id: Stable identifier (e.g. ``"low-energy"``).
        name: Display name (e.g. ``"Low-Energy"``).
        genre_weights: Genre name to weight.
        tag_weights: Tag name to weight.
        platform_bias: Platform name to weight.
        energy_level: 0–10, how stimulating the mood wants play to be.
        social_requirement: 0–10, how much interaction the mood expects.
        cognitive_load: 0–10, how much focus the mood tolerates.
        time_commitment: 0–10, how deep a session the mood wants.
        compatible_moods: Ids of moods that combine well with this one.
        conflicting_moods: Ids of moods that combine badly with this one.
        session_patterns: Optional behavioural signals.
        description: Optional one-line description.
    """

    mood_id: str
    name: str
    genre_weights: Mapping[str, float] = field(default_factory=dict, hash=False)
    tag_weights: Mapping[str, float] = field(default_factory=dict, hash=False)
    platform_bias: Mapping[str, float] = field(default_factory=dict, hash=False)
    energy_level: int = 5
    social_requirement: int = 5
    cognitive_load: int = 5
    time_commitment: int = 5
    compatible_moods: frozenset[str] = frozenset()
    conflicting_moods: frozenset[str] = frozenset()
    session_patterns: SessionPatterns | None = None
    description: str = ""

    def __post_init__(self) -> None:
        for name in ("genre_weights", "tag_weights", "platform_bias"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.mood_id,
            "name": self.name,
            "description": self.description,
            "energy_level": self.energy_level,
            "social_requirement": self.social_requirement,
            "cognitive_load": self.cognitive_load,
            "time_commitment": self.time_commitment,
            "compatible_moods": sorted(self.compatible_moods),
            "conflicting_moods": sorted(self.conflicting_moods),
        }


@dataclass(frozen=True)
class MoodCombination:
    """A predefined pairing of two moods and how strongly they reinforce.

    Attributes:
        primary_mood: Mood id declared first.
        secondary_mood: Mood id declared second.
        intensity: 0–1 strength of the combination.
        context: Short human-readable description of the pairing.
    """

    primary_mood: str
    secondary_mood: str
    intensity: float
    context: str = ""

    @property
    def pair(self) -> frozenset[str]:
        """The unordered pair of mood ids."""
        return frozenset((self.primary_mood, self.secondary_mood))

    def to_dict(self) -> dict[str, Any]:
        return {
            "primary_mood": self.primary_mood,
            "secondary_mood": self.secondary_mood,
            "intensity": self.intensity,
            "context": self.context,
        }


# ---------------------------------------------------------------------------
# Request / result types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RecommendationContext:
    """Request-scoped inputs for a mood recommendation pass.

    Attributes:
        primary_mood: Mood id that must resolve in the catalogue.
        secondary_mood: Optional second mood id for hybrid scoring.
        platform: Optional forced platform preference.
        social_context: Optional ``solo`` / ``group`` hint.
        time_available: Optional minutes the user has to play.
        user_genre_affinity: Optional genre name to 0–1 affinity.
        intensity: 0–1 strength of the mood selection, used for the
            combination synergy figure.
    """

    primary_mood: str
    secondary_mood: str | None = None
    platform: str | None = None
    social_context: SocialContext | None = None
    time_available: int | None = None
    user_genre_affinity: dict[str, float] | None = field(default=None, hash=False)
    intensity: float = DEFAULT_INTENSITY


@dataclass(frozen=True)
class MoodInfluence:
    """Per-game breakdown of the factors that drove its score."""

    primary: float
    secondary: float
    genre: float
    tags: float
    platform: float
    hybrid: float
    energy: float
    social: float

    def to_dict(self) -> dict[str, float]:
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "genre": self.genre,
            "tags": self.tags,
            "platform": self.platform,
            "hybrid": self.hybrid,
            "energy": self.energy,
            "social": self.social,
        }


@dataclass(frozen=True)
class ScoredGame:
    """A single game's composite score with its explanation."""

    game: Game
    score: float
    reasons: tuple[str, ...]
    influence: MoodInfluence


@dataclass
class MoodFilterResult:
    """Output of :meth:`~gamepilot.engine.RecommendationEngine.filter_by_mood`.

    ``games`` is sorted best-first; the three maps are keyed by game id and
    contain exactly the games in ``games``.
    """

    games: list[Game] = field(default_factory=list)
    scores: dict[str, float] = field(default_factory=dict)
    reasoning: dict[str, str] = field(default_factory=dict)
    mood_influence: dict[str, MoodInfluence] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "games": [g.to_dict() for g in self.games],
            "scores": dict(self.scores),
            "reasoning": dict(self.reasoning),
            "mood_influence": {
                gid: infl.to_dict() for gid, infl in self.mood_influence.items()
            },
        }


@dataclass(frozen=True)
class MoodCompatibility:
    """How closely a game's estimated profile matches the primary mood."""

    energy: float = 50.0
    social: float = 50.0
    cognitive: float = 50.0
    time: float = 50.0

    def to_dict(self) -> dict[str, float]:
        return {
            "energy": self.energy,
            "social": self.social,
            "cognitive": self.cognitive,
            "time": self.time,
        }


@dataclass(frozen=True)
class CombinationAnalysis:
    """Synergy of a primary/secondary mood pair for one game."""

    primary: str
    secondary: str
    synergy: float
    reasoning: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "synergy": self.synergy,
            "reasoning": self.reasoning,
        }


@dataclass(frozen=True)
class EnhancedRecommendation:
    """A recommendation enriched with compatibility and combination detail."""

    game_id: str
    title: str
    primary_genre: str
    score: float
    reasons: tuple[str, ...]
    mood_match: float
    social_match: float
    tags: tuple[str, ...]
    mood_influence: MoodInfluence
    mood_compatibility: MoodCompatibility
    mood_combination: CombinationAnalysis | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "game_id": self.game_id,
            "title": self.title,
            "primary_genre": self.primary_genre,
            "score": self.score,
            "reasons": list(self.reasons),
            "mood_match": self.mood_match,
            "social_match": self.social_match,
            "tags": list(self.tags),
            "mood_influence": self.mood_influence.to_dict(),
            "mood_compatibility": self.mood_compatibility.to_dict(),
            "mood_combination": (
                self.mood_combination.to_dict() if self.mood_combination else None
            ),
        }
