"""gRPC servicer: the entry point for all inbound recommendation calls.

Messages are ``google.protobuf.Struct`` documents carrying the JSON shape
the web frontend already uses, so the service is registered with a
generic handler rather than generated stubs.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

import grpc
from google.protobuf import json_format
from google.protobuf.struct_pb2 import Struct

from gamepilot.adapters import (
    parse_context,
    parse_float,
    parse_games,
    parse_int,
    parse_weights,
)
from gamepilot.catalogue import MoodCatalogue
from gamepilot.engine import RecommendationEngine
from gamepilot.models import RecommendationContext

logger = logging.getLogger(__name__)

SERVICE_NAME = "gamepilot.MoodRecommender"

_RECOMMENDATION_WARN_THRESHOLD_MS = 450

_METHODS = (
    "FilterByMood",
    "GetRecommendations",
    "GetRecommendedCombinations",
    "ValidateCombination",
    "ListMoods",
)


class MoodRecommenderServicer:
    """Implements the ``gamepilot.MoodRecommender`` service.

    Every method takes and returns a :class:`Struct`.  Invalid input
    (including an unknown primary mood) sets ``INVALID_ARGUMENT``; anything
    else unexpected is logged and sets ``INTERNAL``.  An empty
    :class:`Struct` is returned whenever a status code is set.

    Args:
        engine: The :class:`~gamepilot.engine.RecommendationEngine`.
        catalogue: The :class:`~gamepilot.catalogue.MoodCatalogue` the
            engine was built over.
    """

    def __init__(self, engine: RecommendationEngine, catalogue: MoodCatalogue) -> None:
        self._engine = engine
        self._catalogue = catalogue

    # ------------------------------------------------------------------
    # Recommendation requests
    # ------------------------------------------------------------------

    def FilterByMood(self, request: Struct, context: Any) -> Struct:
        """Score and filter ``games`` for the mood ``context``.

        Request: ``{"games": [...], "context": {"primary_mood": ...}}``.
        Response: ``{"games", "scores", "reasoning", "mood_influence"}``.
        """

        def handle(payload: dict[str, Any]) -> dict[str, Any]:
            if not payload.get("context"):
                raise ValueError("context is required")
            games = parse_games(payload.get("games") or [])
            result = self._engine.filter_by_mood(games, self._context(payload["context"]))
            return result.to_dict()

        return self._run("FilterByMood", request, context, handle, timed=True)

    def GetRecommendations(self, request: Struct, context: Any) -> Struct:
        """Return enhanced recommendations.

        Request: ``{"games": [...], "context"?: {...}, "genre_affinity"?: {...},
        "limit"?: n, "min_score"?: x}``.
        Response: ``{"recommendations": [...]}``.
        """

        def handle(payload: dict[str, Any]) -> dict[str, Any]:
            games = parse_games(payload.get("games") or [])
            ctx = self._context(payload["context"]) if payload.get("context") else None
            limit = payload.get("limit")
            min_score = payload.get("min_score")
            recommendations = self._engine.get_recommendations(
                games,
                ctx,
                genre_affinity=parse_weights(payload.get("genre_affinity")),
                limit=parse_int(limit, "limit") if limit is not None else None,
                min_score=(
                    parse_float(min_score, "min_score") if min_score is not None else None
                ),
            )
            return {"recommendations": [r.to_dict() for r in recommendations]}

        return self._run("GetRecommendations", request, context, handle, timed=True)

    # ------------------------------------------------------------------
    # Catalogue requests
    # ------------------------------------------------------------------

    def GetRecommendedCombinations(self, request: Struct, context: Any) -> Struct:
        def handle(payload: dict[str, Any]) -> dict[str, Any]:
            mood_id = payload.get("mood_id")
            if not mood_id:
                raise ValueError("mood_id must be non-empty")
            combos = self._catalogue.recommended_combinations(str(mood_id))
            return {"combinations": [c.to_dict() for c in combos]}

        return self._run("GetRecommendedCombinations", request, context, handle)

    def ValidateCombination(self, request: Struct, context: Any) -> Struct:
        def handle(payload: dict[str, Any]) -> dict[str, Any]:
            primary = payload.get("primary_mood")
            secondary = payload.get("secondary_mood")
            if not primary or not secondary:
                raise ValueError("primary_mood and secondary_mood must be non-empty")
            return {
                "valid": self._catalogue.validate_combination(str(primary), str(secondary))
            }

        return self._run("ValidateCombination", request, context, handle)

    def ListMoods(self, request: Struct, context: Any) -> Struct:
        def handle(payload: dict[str, Any]) -> dict[str, Any]:
            return {"moods": [m.to_dict() for m in self._catalogue.get_all_moods()]}

        return self._run("ListMoods", request, context, handle)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _context(self, raw: Any) -> RecommendationContext:
        return parse_context(raw, default_intensity=self._engine.default_intensity)

    def _run(
        self,
        method: str,
        request: Struct,
        context: Any,
        handle: Callable[[dict[str, Any]], dict[str, Any]],
        timed: bool = False,
    ) -> Struct:
        """Decode *request*, call *handle*, and map errors to gRPC codes."""
        start_ms = time.monotonic() * 1000
        try:
            payload = json_format.MessageToDict(request)
            return dict_to_struct(handle(payload))
        except ValueError as exc:
            logger.warning("%s rejected: %s", method, exc)
            context.set_code(grpc.StatusCode.INVALID_ARGUMENT)
            context.set_details(str(exc))
            return Struct()
        except Exception:
            logger.exception("Unexpected error in %s", method)
            context.set_code(grpc.StatusCode.INTERNAL)
            context.set_details(f"Internal error in {method}.")
            return Struct()
        finally:
            if timed:
                elapsed_ms = time.monotonic() * 1000 - start_ms
                if elapsed_ms > _RECOMMENDATION_WARN_THRESHOLD_MS:
                    logger.warning("%s took %.1fms", method, elapsed_ms)
                else:
                    logger.debug("%s took %.1fms", method, elapsed_ms)


def dict_to_struct(payload: dict[str, Any]) -> Struct:
    """Convert a JSON-compatible dict into a :class:`Struct`."""
    return json_format.ParseDict(payload, Struct())


def build_generic_handler(servicer: MoodRecommenderServicer) -> grpc.GenericRpcHandler:
    """Return a handler registering every servicer method under ``SERVICE_NAME``."""
    handlers = {
        name: grpc.unary_unary_rpc_method_handler(
            getattr(servicer, name),
            request_deserializer=Struct.FromString,
            response_serializer=Struct.SerializeToString,
        )
        for name in _METHODS
    }
    return grpc.method_handlers_generic_handler(SERVICE_NAME, handlers)
