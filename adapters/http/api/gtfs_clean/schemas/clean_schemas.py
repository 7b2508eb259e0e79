"""Request and response schemas for the cleaning endpoints."""

from typing import List, Optional
from pydantic import BaseModel

from src.gtfs_clean_bc.label.domain.services.label_cleaner import LabelKind


class LabelRequest(BaseModel):
    text: str
    kind: LabelKind = LabelKind.STOP_NAME


class LabelResponse(BaseModel):
    text: str
    kind: LabelKind
    cleaned: str


class RouteRequest(BaseModel):
    id: str
    short_name: str
    long_name: Optional[str] = None
    desc: Optional[str] = None  # Used when long_name is missing
    color: Optional[str] = None


class RouteResponse(BaseModel):
    id: str
    short_name: str
    long_name: str
    color: str

    class Config:
        from_attributes = True


class TripRequest(BaseModel):
    id: str
    route_id: str = ""
    headsign: str


class TripResponse(BaseModel):
    """Cleaned headsign and the direction ID used by the real-time API."""
    id: str
    route_id: str
    headsign: str  # "N-Station Centrale"
    direction: int
    direction_name: str  # NORTH, SOUTH, EAST, WEST


class StopRequest(BaseModel):
    id: str
    name: str
    code: Optional[str] = None


class StopResponse(BaseModel):
    id: int
    code: str
    name: str
    source_id: str

    class Config:
        from_attributes = True


class FeedRequest(BaseModel):
    routes: List[RouteRequest] = []
    trips: List[TripRequest] = []
    stops: List[StopRequest] = []


class TransformStatsResponse(BaseModel):
    routes: int
    routes_without_long_name: int
    trips: int
    stops: int

    class Config:
        from_attributes = True


class FeedResponse(BaseModel):
    agency: str
    routes: List[RouteResponse]
    trips: List[TripResponse]
    stops: List[StopResponse]
    stats: TransformStatsResponse
