"""API schemas for the cleaning endpoints."""

from .clean_schemas import (
    LabelRequest,
    LabelResponse,
    RouteRequest,
    RouteResponse,
    TripRequest,
    TripResponse,
    StopRequest,
    StopResponse,
    FeedRequest,
    FeedResponse,
    TransformStatsResponse,
)

__all__ = [
    "LabelRequest",
    "LabelResponse",
    "RouteRequest",
    "RouteResponse",
    "TripRequest",
    "TripResponse",
    "StopRequest",
    "StopResponse",
    "FeedRequest",
    "FeedResponse",
    "TransformStatsResponse",
]
