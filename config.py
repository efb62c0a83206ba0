"""Application configuration driven by environment variables.

All settings have sensible defaults for local development.
"""

import os

# ---------------------------------------------------------------------------
# gRPC server
# ---------------------------------------------------------------------------

GRPC_SERVER_HOST: str = os.getenv("GRPC_SERVER_HOST", "0.0.0.0")
GRPC_SERVER_PORT: int = int(os.getenv("GRPC_SERVER_PORT", "50051"))

# Thread pool size for the gRPC server.  Each concurrent RPC occupies one
# thread, so this caps concurrent request handling.
GRPC_MAX_WORKERS: int = int(os.getenv("GRPC_MAX_WORKERS", "10"))

# Seconds in-flight RPCs get to finish after SIGTERM/SIGINT.
SHUTDOWN_GRACE_SECONDS: int = int(os.getenv("SHUTDOWN_GRACE_SECONDS", "5"))

# ---------------------------------------------------------------------------
# Mood catalogue
# ---------------------------------------------------------------------------

# Optional JSON file replacing the built-in moods/combinations.
MOOD_CATALOGUE_PATH: str | None = os.getenv("MOOD_CATALOGUE_PATH") or None

# ---------------------------------------------------------------------------
# Recommendation engine
# ---------------------------------------------------------------------------

MIN_SCORE_THRESHOLD: float = float(os.getenv("MIN_SCORE_THRESHOLD", "30"))
MAX_RECOMMENDATIONS: int = int(os.getenv("MAX_RECOMMENDATIONS", "20"))

# Result cap for mood-based recommendation requests that give no limit.
MOOD_BASED_LIMIT: int = int(os.getenv("MOOD_BASED_LIMIT", "10"))

# Mood intensity assumed when a request does not carry one.
DEFAULT_COMBINATION_INTENSITY: float = float(
    os.getenv("DEFAULT_COMBINATION_INTENSITY", "0.8")
)

# Hybrid bonus for mood pairs with no declared relation or combination.
NEUTRAL_COMBINATION_BONUS: float = float(os.getenv("NEUTRAL_COMBINATION_BONUS", "5"))

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
