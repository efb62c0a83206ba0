"""Ingestion adapters: normalise raw JSON-like payloads into domain models.

Upstream callers send games whose genres and platforms may be plain
strings or ``{"name": ...}`` objects, numeric or string ids, and camelCase
or snake_case keys.  Everything past this module sees only the canonical
dataclasses from :mod:`gamepilot.models`.
"""

from __future__ import annotations

from typing import Any, Mapping

from gamepilot.models import (
    DEFAULT_INTENSITY,
    Game,
    Genre,
    Mood,
    MoodCombination,
    Platform,
    RecommendationContext,
    SessionPatterns,
    SocialContext,
)


def parse_game(raw: Mapping[str, Any]) -> Game:
    """Build a :class:`~gamepilot.models.Game` from a raw mapping.

    Args:
        raw: Mapping with ``id`` (or ``game_id``), optional ``title`` /
            ``name``, and optional ``genres``, ``tags`` and ``platforms``
            lists.

    Returns:
        The normalised :class:`~gamepilot.models.Game`.

    Raises:
        ValueError: If *raw* is not a mapping, the id is missing, or a list
            field is not a list.
    """
    _require_mapping(raw, "game")
    raw_id = _first(raw, "id", "game_id", "gameId")
    if raw_id is None or raw_id == "":
        raise ValueError("game payload is missing an id")
    game_id = normalize_id(raw_id)
    title = _first(raw, "title", "name") or game_id

    return Game(
        game_id=game_id,
        title=str(title),
        genres=tuple(Genre(n) for n in _names(raw.get("genres"), "genres")),
        tags=tuple(str(t) for t in _list(raw.get("tags"), "tags")),
        platforms=tuple(
            Platform(n) for n in _names(raw.get("platforms"), "platforms")
        ),
    )


def parse_games(raws: Any) -> list[Game]:
    """Parse a list of raw games; anything but a list or tuple is rejected."""
    return [parse_game(r) for r in _list(raws, "games")]


def parse_context(
    raw: Mapping[str, Any], default_intensity: float = DEFAULT_INTENSITY
) -> RecommendationContext:
    """Build a :class:`~gamepilot.models.RecommendationContext`.

    Args:
        raw: Context mapping, snake_case or camelCase keys.
        default_intensity: Intensity used when *raw* carries none.

    Raises:
        ValueError: If *raw* is not a mapping, ``primary_mood`` is missing,
            ``social_context`` is not one of ``solo`` / ``group``, or a
            numeric field does not hold a number.
    """
    _require_mapping(raw, "context")
    primary = _first(raw, "primary_mood", "primaryMood")
    if not primary:
        raise ValueError("context is missing primary_mood")

    social_raw = _first(raw, "social_context", "socialContext")
    try:
        social = SocialContext(social_raw) if social_raw else None
    except ValueError:
        raise ValueError(
            f"social_context must be 'solo' or 'group', got {social_raw!r}"
        ) from None

    time_raw = _first(raw, "time_available", "timeAvailable")
    affinity_raw = _first(raw, "user_genre_affinity", "userGenreAffinity")
    intensity_raw = raw.get("intensity")

    return RecommendationContext(
        primary_mood=str(primary),
        secondary_mood=_optional_str(_first(raw, "secondary_mood", "secondaryMood")),
        platform=_optional_str(_first(raw, "platform", "preferred_platform", "preferredPlatform")),
        social_context=social,
        time_available=(
            parse_int(time_raw, "time_available") if time_raw is not None else None
        ),
        user_genre_affinity=parse_weights(affinity_raw) if affinity_raw else None,
        intensity=(
            parse_float(intensity_raw, "intensity")
            if intensity_raw is not None
            else default_intensity
        ),
    )


def parse_mood(raw: Mapping[str, Any]) -> Mood:
    """Build a :class:`~gamepilot.models.Mood` from a catalogue file entry."""
    _require_mapping(raw, "mood entry")
    mood_id = _first(raw, "id", "mood_id")
    if not mood_id:
        raise ValueError("mood entry is missing an id")

    patterns_raw = _first(raw, "session_patterns", "sessionPatterns")
    patterns = None
    if patterns_raw:
        _require_mapping(patterns_raw, "session_patterns")
        length = _first(patterns_raw, "preferred_session_length", "preferredSessionLength")
        if length is None:
            raise ValueError(f"mood {mood_id!r} session_patterns lacks a preferred length")
        patterns = SessionPatterns(
            preferred_session_length=parse_int(length, "preferred_session_length"),
            likelihood_of_multiplayer=_first(
                patterns_raw, "likelihood_of_multiplayer", "likelihoodOfMultiplayer"
            ),
            tolerance_for_difficulty=_first(
                patterns_raw, "tolerance_for_difficulty", "toleranceForDifficulty"
            ),
            desire_for_novelty=_first(patterns_raw, "desire_for_novelty", "desireForNovelty"),
        )

    return Mood(
        mood_id=str(mood_id),
        name=str(raw.get("name") or mood_id),
        description=str(raw.get("description", "")),
        genre_weights=parse_weights(_first(raw, "genre_weights", "genreWeights")),
        tag_weights=parse_weights(_first(raw, "tag_weights", "tagWeights")),
        platform_bias=parse_weights(_first(raw, "platform_bias", "platformBias")),
        energy_level=parse_int(
            _first(raw, "energy_level", "energyLevel", default=5), "energy_level"
        ),
        social_requirement=parse_int(
            _first(raw, "social_requirement", "socialRequirement", default=5),
            "social_requirement",
        ),
        cognitive_load=parse_int(
            _first(raw, "cognitive_load", "cognitiveLoad", default=5), "cognitive_load"
        ),
        time_commitment=parse_int(
            _first(raw, "time_commitment", "timeCommitment", default=5), "time_commitment"
        ),
        compatible_moods=frozenset(
            _list(_first(raw, "compatible_moods", "compatibleMoods"), "compatible_moods")
        ),
        conflicting_moods=frozenset(
            _list(_first(raw, "conflicting_moods", "conflictingMoods"), "conflicting_moods")
        ),
        session_patterns=patterns,
    )


def parse_combination(raw: Mapping[str, Any]) -> MoodCombination:
    _require_mapping(raw, "combination entry")
    primary = _first(raw, "primary_mood", "primaryMood")
    secondary = _first(raw, "secondary_mood", "secondaryMood")
    if not primary or not secondary:
        raise ValueError("combination entry needs primary_mood and secondary_mood")
    return MoodCombination(
        primary_mood=str(primary),
        secondary_mood=str(secondary),
        intensity=parse_float(raw.get("intensity", 0.0), "intensity"),
        context=str(raw.get("context", "")),
    )


def parse_weights(raw: Mapping[str, Any] | None) -> dict[str, float]:
    if not raw:
        return {}
    _require_mapping(raw, "weight table")
    return {str(k): parse_float(v, f"weight {k!r}") for k, v in raw.items()}


def normalize_id(raw_id: Any) -> str:
    """Return *raw_id* as a string; integral floats lose their ``.0``.

    JSON transports (``google.protobuf.Struct`` included) carry every
    number as a double, so ``42`` can arrive as ``42.0``.
    """
    if isinstance(raw_id, float) and raw_id.is_integer():
        return str(int(raw_id))
    return str(raw_id)


def parse_float(value: Any, field_name: str) -> float:
    """``float(value)``, with non-numeric input reported as ``ValueError``."""
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{field_name} must be a number, got {value!r}") from None


def parse_int(value: Any, field_name: str) -> int:
    number = parse_float(value, field_name)
    try:
        return int(number)
    except (OverflowError, ValueError):
        raise ValueError(f"{field_name} must be a finite number, got {value!r}") from None


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _require_mapping(raw: Any, what: str) -> None:
    if not isinstance(raw, Mapping):
        raise ValueError(f"{what} must be an object, got {type(raw).__name__}")


def _first(raw: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the value of the first key present in *raw*."""
    for key in keys:
        if key in raw and raw[key] is not None:
            return raw[key]
    return default


def _list(value: Any, field_name: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{field_name} must be a list, got {type(value).__name__}")
    return list(value)


def _names(value: Any, field_name: str) -> list[str]:
    """Flatten ``["a", {"name": "b"}]`` into ``["a", "b"]``."""
    names: list[str] = []
    for item in _list(value, field_name):
        if isinstance(item, Mapping):
            name = item.get("name")
            if not name:
                raise ValueError(f"{field_name} entry is missing a name: {item!r}")
            names.append(str(name))
        else:
            names.append(str(item))
    return names


def _optional_str(value: Any) -> str | None:
    return str(value) if value else None
