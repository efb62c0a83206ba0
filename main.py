"""Entry point: wires all components and starts the gRPC server."""

from __future__ import annotations

import logging
import signal
import sys
from concurrent import futures

import grpc

import config
from gamepilot.catalogue import MoodCatalogue
from gamepilot.engine import RecommendationEngine
from gamepilot.scoring import MoodScorer
from gamepilot.service import MoodRecommenderServicer, build_generic_handler

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def load_catalogue() -> MoodCatalogue:
    """Return the configured catalogue, or the built-in one."""
    if config.MOOD_CATALOGUE_PATH:
        return MoodCatalogue.from_json_file(config.MOOD_CATALOGUE_PATH)
    return MoodCatalogue.default()


def build_server(catalogue: MoodCatalogue) -> grpc.Server:
    """Construct and configure the gRPC server with all dependencies wired.

    Args:
        catalogue: The loaded :class:`~gamepilot.catalogue.MoodCatalogue`.

    Returns:
        A configured but not-yet-started :class:`grpc.Server`.
    """
    scorer = MoodScorer(
        catalogue,
        neutral_combination_bonus=config.NEUTRAL_COMBINATION_BONUS,
    )
    engine = RecommendationEngine(
        repository=catalogue,
        scorer=scorer,
        min_score=config.MIN_SCORE_THRESHOLD,
        max_recommendations=config.MAX_RECOMMENDATIONS,
        mood_based_limit=config.MOOD_BASED_LIMIT,
        default_intensity=config.DEFAULT_COMBINATION_INTENSITY,
    )
    servicer = MoodRecommenderServicer(engine=engine, catalogue=catalogue)

    server = grpc.server(
        futures.ThreadPoolExecutor(max_workers=config.GRPC_MAX_WORKERS)
    )
    server.add_generic_rpc_handlers((build_generic_handler(servicer),))
    server.add_insecure_port(
        f"{config.GRPC_SERVER_HOST}:{config.GRPC_SERVER_PORT}"
    )
    return server


def main() -> None:
    """Load the mood catalogue and serve until signalled.

    Startup sequence:
    1. Load the mood catalogue (built-in or ``MOOD_CATALOGUE_PATH``).
    2. Build the gRPC server.
    3. Register ``SIGTERM``/``SIGINT`` shutdown handlers.
    4. Start serving.
    """
    catalogue = load_catalogue()
    server = build_server(catalogue)

    def handle_shutdown(signum: int, frame: object) -> None:
        sig_name = signal.Signals(signum).name
        logger.info("Received %s — shutting down…", sig_name)
        server.stop(grace=config.SHUTDOWN_GRACE_SECONDS)
        sys.exit(0)

    signal.signal(signal.SIGTERM, handle_shutdown)
    signal.signal(signal.SIGINT, handle_shutdown)

    server.start()
    logger.info(
        "Mood recommender gRPC server listening on %s:%d",
        config.GRPC_SERVER_HOST,
        config.GRPC_SERVER_PORT,
    )
    server.wait_for_termination()


if __name__ == "__main__":
    main()
