"""Game characteristic profiles used by the enhanced recommendation view.

These estimates are coarser than the scorer's and are bounded to 1–10 so
they can be compared with a mood's energy/social/cognitive/time scalars.
"""

from __future__ import annotations

from dataclasses import dataclass

from gamepilot.models import Game, Mood
from gamepilot.scoring import clamp_score

_MIN_LEVEL = 1
_MAX_LEVEL = 10

# (genres that raise, genres that lower) per dimension, applied +2 / -1
_GENRE_RULES: dict[str, tuple[frozenset[str], frozenset[str]]] = {
    "energy": (frozenset({"action", "racing", "sports"}), frozenset({"puzzle", "casual", "simulation"})),
    "social": (frozenset({"multiplayer", "sports"}), frozenset({"puzzle", "rpg"})),
    "cognitive": (frozenset({"strategy", "puzzle", "rpg"}), frozenset({"action", "casual"})),
    "time_commitment": (frozenset({"rpg", "strategy", "simulation"}), frozenset({"puzzle", "casual"})),
}

# (tags that raise, raise amount, tags that lower) per dimension, lowering by 1
_TAG_RULES: dict[str, tuple[frozenset[str], int, frozenset[str]]] = {
    "energy": (frozenset({"intense", "fast-paced"}), 1, frozenset({"relaxing", "meditative"})),
    "social": (frozenset({"multiplayer", "cooperative"}), 2, frozenset({"single-player", "solo"})),
    "cognitive": (frozenset({"strategic", "complex"}), 1, frozenset({"simple", "casual"})),
    "time_commitment": (frozenset({"epic", "lengthy"}), 1, frozenset({"quick", "short"})),
}


@dataclass(frozen=True)
class GameProfile:
    """Estimated 1–10 characteristics of a game."""

    energy: int = 5
    social: int = 5
    cognitive: int = 5
    time_commitment: int = 5


def analyze_game_profile(game: Game) -> GameProfile:
    """Estimate *game*'s energy, social, cognitive and time profile."""
    levels = {dim: 5 for dim in _GENRE_RULES}

    for genre in game.genre_names:
        for dim, (raising, lowering) in _GENRE_RULES.items():
            if genre in raising:
                levels[dim] += 2
            if genre in lowering:
                levels[dim] -= 1

    for tag in game.tags:
        for dim, (raising, amount, lowering) in _TAG_RULES.items():
            if tag in raising:
                levels[dim] += amount
            if tag in lowering:
                levels[dim] -= 1

    return GameProfile(
        **{dim: max(_MIN_LEVEL, min(_MAX_LEVEL, v)) for dim, v in levels.items()}
    )


def compatibility_score(game_value: float, mood_value: float) -> float:
    return max(0.0, 100.0 - abs(game_value - mood_value) * 10)


def mood_alignment(game: Game, mood: Mood) -> float:
    """How well *game* lines up with *mood*'s genre and tag tables, 0–100.

    Each genre moves the score by ``(weight - 0.5) * 20`` and each tag by
    ``(weight - 0.5) * 15``, starting from 50.
    """
    score = 50.0
    for genre in game.genre_names:
        score += (mood.genre_weights.get(genre, 0.5) - 0.5) * 20
    for tag in game.tags:
        score += (mood.tag_weights.get(tag, 0.5) - 0.5) * 15
    return clamp_score(score)
