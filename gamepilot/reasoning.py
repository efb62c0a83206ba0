"""Human-readable reasons explaining why a game matched a mood."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from gamepilot.models import Game, Mood, MoodInfluence

STRONG_FACTOR_THRESHOLD = 70.0
STRONG_HYBRID_THRESHOLD = 15.0
STRONG_TAG_WEIGHT = 0.7
_MAX_NAMED = 2


@dataclass(frozen=True)
class ReasonInput:
    """Everything a reason rule may look at."""

    game: Game
    primary: Mood
    influence: MoodInfluence
    secondary: Mood | None = None

    @property
    def mood_label(self) -> str:
        return self.primary.name.lower()

    @property
    def top_genres(self) -> str:
        return ", ".join(self.game.genre_names[:_MAX_NAMED])

    @property
    def matching_tags(self) -> str:
        """The game's first two tags that the primary mood strongly favours."""
        strong = [
            t for t in self.game.tags
            if self.primary.tag_weights.get(t, 0.0) > STRONG_TAG_WEIGHT
        ]
        return ", ".join(strong[:_MAX_NAMED])


@dataclass(frozen=True)
class ReasonRule:
    predicate: Callable[[ReasonInput], bool]
    template: Callable[[ReasonInput], str]


REASON_RULES: tuple[ReasonRule, ...] = (
    ReasonRule(
        lambda r: r.influence.genre > STRONG_FACTOR_THRESHOLD,
        lambda r: f"Perfect {r.mood_label} mood match with {r.top_genres} genres",
    ),
    ReasonRule(
        lambda r: r.influence.tags > STRONG_FACTOR_THRESHOLD and bool(r.matching_tags),
        lambda r: f"Matches your {r.mood_label} mood with {r.matching_tags} gameplay",
    ),
    ReasonRule(
        lambda r: r.secondary is not None
        and r.influence.hybrid > STRONG_HYBRID_THRESHOLD,
        lambda r: (
            f"Excellent combination of {r.mood_label} and "
            f"{r.secondary.name.lower()} moods"
        ),
    ),
    ReasonRule(
        lambda r: r.influence.energy > STRONG_FACTOR_THRESHOLD,
        lambda r: f"Energy level matches your {r.mood_label} mood",
    ),
    ReasonRule(
        lambda r: r.influence.social > STRONG_FACTOR_THRESHOLD,
        lambda r: "Social aspect fits your current mood",
    ),
)


def generate_reasons(
    game: Game,
    primary: Mood,
    influence: MoodInfluence,
    secondary: Mood | None = None,
    rules: tuple[ReasonRule, ...] = REASON_RULES,
) -> tuple[str, ...]:
    """Return the reasons whose rule fires, in rule order.

    Never empty: when no rule fires a generic sentence naming the primary
    mood is returned instead.
    """
    data = ReasonInput(game, primary, influence, secondary)
    reasons = tuple(rule.template(data) for rule in rules if rule.predicate(data))
    return reasons or (f"Good match for {data.mood_label} mood",)


def join_reasons(reasons: tuple[str, ...]) -> str:
    return ". ".join(reasons)


def preference_reason(score: float) -> str:
    """Reason used when no mood was selected and only genre affinity scored."""
    if score > 70:
        return "Strong match for your preferences"
    if score > 50:
        return "Good match for your preferences"
    return "Potential match for your preferences"
