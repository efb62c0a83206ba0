"""Built-in mood catalogue data.

Moods describe emotional/mental states, distinct from genres, that shape
which games feel right to play.  Combinations list mood pairs that work
well together and how strongly.
"""

from __future__ import annotations

from gamepilot.models import Mood, MoodCombination, SessionPatterns

DEFAULT_MOODS: tuple[Mood, ...] = (
    Mood(
        mood_id="low-energy",
        name="Low-Energy",
        description="Relaxed gaming with minimal mental effort",
        energy_level=2,
        social_requirement=3,
        cognitive_load=2,
        time_commitment=3,
        genre_weights={
            "casual": 0.9,
            "puzzle": 0.8,
            "simulation": 0.7,
            "strategy": 0.3,
            "action": 0.2,
        },
        tag_weights={
            "relaxing": 0.9,
            "meditative": 0.8,
            "cozy": 0.8,
            "intense": 0.1,
            "competitive": 0.1,
        },
        platform_bias={"pc": 0.7, "mobile": 0.9, "console": 0.6},
        compatible_moods=frozenset({"creative", "exploratory"}),
        conflicting_moods=frozenset({"competitive", "high-energy"}),
        session_patterns=SessionPatterns(20, 0.2, 0.3, 0.4),
    ),
    Mood(
        mood_id="high-energy",
        name="High-Energy",
        description="Exciting, stimulating gameplay experiences",
        energy_level=9,
        social_requirement=6,
        cognitive_load=7,
        time_commitment=6,
        genre_weights={
            "action": 0.9,
            "racing": 0.8,
            "sports": 0.7,
            "puzzle": 0.2,
            "simulation": 0.3,
        },
        tag_weights={
            "intense": 0.9,
            "fast-paced": 0.8,
            "exciting": 0.8,
            "relaxing": 0.1,
            "meditative": 0.1,
        },
        platform_bias={"pc": 0.8, "console": 0.9, "mobile": 0.5},
        compatible_moods=frozenset({"competitive", "social"}),
        conflicting_moods=frozenset({"low-energy", "deep-focus"}),
        session_patterns=SessionPatterns(45, 0.7, 0.6, 0.7),
    ),
    Mood(
        mood_id="deep-focus",
        name="Deep-Focus",
        description="Strategic thinking and deep concentration",
        energy_level=5,
        social_requirement=2,
        cognitive_load=9,
        time_commitment=8,
        genre_weights={
            "strategy": 0.9,
            "puzzle": 0.8,
            "rpg": 0.7,
            "action": 0.3,
            "casual": 0.2,
        },
        tag_weights={
            "strategic": 0.9,
            "challenging": 0.8,
            "complex": 0.7,
            "simple": 0.2,
            "casual": 0.2,
        },
        platform_bias={"pc": 0.9, "console": 0.6, "mobile": 0.3},
        compatible_moods=frozenset({"immersive", "exploratory"}),
        conflicting_moods=frozenset({"high-energy", "social"}),
        session_patterns=SessionPatterns(90, 0.1, 0.9, 0.5),
    ),
    Mood(
        mood_id="social",
        name="Social",
        description="Playing and connecting with others",
        energy_level=6,
        social_requirement=9,
        cognitive_load=5,
        time_commitment=6,
        genre_weights={
            "multiplayer": 0.9,
            "sports": 0.7,
            "casual": 0.6,
            "strategy": 0.5,
            "puzzle": 0.3,
        },
        tag_weights={
            "multiplayer": 0.9,
            "cooperative": 0.8,
            "team-based": 0.8,
            "single-player": 0.2,
            "solo": 0.2,
        },
        platform_bias={"pc": 0.8, "console": 0.9, "mobile": 0.6},
        compatible_moods=frozenset({"high-energy", "competitive"}),
        conflicting_moods=frozenset({"deep-focus", "low-energy"}),
        session_patterns=SessionPatterns(60, 0.9, 0.5, 0.6),
    ),
    Mood(
        mood_id="creative",
        name="Creative",
        description="Building and expressing creativity",
        energy_level=5,
        social_requirement=4,
        cognitive_load=6,
        time_commitment=7,
        genre_weights={
            "simulation": 0.9,
            "casual": 0.7,
            "puzzle": 0.6,
            "action": 0.3,
            "strategy": 0.5,
        },
        tag_weights={
            "creative": 0.9,
            "building": 0.8,
            "customization": 0.8,
            "destructive": 0.2,
            "competitive": 0.3,
        },
        platform_bias={"pc": 0.9, "console": 0.5, "mobile": 0.4},
        compatible_moods=frozenset({"low-energy", "exploratory"}),
        conflicting_moods=frozenset({"competitive", "high-energy"}),
        session_patterns=SessionPatterns(75, 0.3, 0.4, 0.8),
    ),
    Mood(
        mood_id="exploratory",
        name="Exploratory",
        description="Discovering new worlds and secrets",
        energy_level=6,
        social_requirement=5,
        cognitive_load=5,
        time_commitment=7,
        genre_weights={
            "adventure": 0.9,
            "rpg": 0.8,
            "simulation": 0.6,
            "action": 0.5,
            "puzzle": 0.4,
        },
        tag_weights={
            "exploration": 0.9,
            "discovery": 0.8,
            "open-world": 0.8,
            "linear": 0.2,
            "structured": 0.3,
        },
        platform_bias={"pc": 0.8, "console": 0.8, "mobile": 0.5},
        compatible_moods=frozenset({"immersive", "creative"}),
        conflicting_moods=frozenset({"competitive"}),
        session_patterns=SessionPatterns(80, 0.4, 0.5, 0.9),
    ),
    Mood(
        mood_id="competitive",
        name="Competitive",
        description="Challenge-seeking and achievement-focused",
        energy_level=8,
        social_requirement=7,
        cognitive_load=7,
        time_commitment=6,
        genre_weights={
            "action": 0.8,
            "sports": 0.8,
            "multiplayer": 0.9,
            "casual": 0.2,
            "simulation": 0.3,
        },
        tag_weights={
            "competitive": 0.9,
            "challenging": 0.8,
            "skill-based": 0.8,
            "casual": 0.1,
            "relaxing": 0.1,
        },
        platform_bias={"pc": 0.9, "console": 0.8, "mobile": 0.4},
        compatible_moods=frozenset({"high-energy", "social"}),
        conflicting_moods=frozenset({"low-energy", "creative"}),
        session_patterns=SessionPatterns(50, 0.8, 0.8, 0.4),
    ),
    Mood(
        mood_id="immersive",
        name="Immersive",
        description="Story-driven and atmospheric experiences",
        energy_level=4,
        social_requirement=2,
        cognitive_load=6,
        time_commitment=9,
        genre_weights={
            "rpg": 0.9,
            "adventure": 0.8,
            "story": 0.9,
            "action": 0.4,
            "puzzle": 0.5,
        },
        tag_weights={
            "story-driven": 0.9,
            "atmospheric": 0.8,
            "immersive": 0.8,
            "arcade": 0.2,
            "casual": 0.3,
        },
        platform_bias={"pc": 0.8, "console": 0.9, "mobile": 0.3},
        compatible_moods=frozenset({"deep-focus", "exploratory"}),
        conflicting_moods=frozenset({"high-energy", "social"}),
        session_patterns=SessionPatterns(120, 0.1, 0.6, 0.7),
    ),
)

# Order matters: when a pair is declared twice the first declaration wins.
DEFAULT_COMBINATIONS: tuple[MoodCombination, ...] = (
    MoodCombination("low-energy", "creative", 0.8, "Relaxed building and creativity"),
    MoodCombination("high-energy", "competitive", 0.9, "Intense competitive gameplay"),
    MoodCombination("deep-focus", "immersive", 0.8, "Deep strategic immersion"),
    MoodCombination("social", "high-energy", 0.7, "Energetic social gaming"),
    MoodCombination("exploratory", "immersive", 0.8, "Deep world exploration"),
    MoodCombination("creative", "low-energy", 0.7, "Casual creative expression"),
    MoodCombination("competitive", "social", 0.8, "Team-based competition"),
    MoodCombination("immersive", "deep-focus", 0.9, "Story-driven concentration"),
)
