import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from core.config import settings
from core.rate_limiter import limiter, RateLimits
from src.gtfs_clean_bc.agency.domain.entities.agency_profile import AgencyProfile, get_agency_profile
from src.gtfs_clean_bc.feed.application.feed_transformer import FeedTransformer
from src.gtfs_clean_bc.label.domain.services.label_cleaner import clean_label
from src.gtfs_clean_bc.route.domain.entities.route import RouteRecord
from src.gtfs_clean_bc.shared.domain.exceptions import FeedContractError
from src.gtfs_clean_bc.stop.domain.entities.stop import StopRecord
from src.gtfs_clean_bc.trip.domain.entities.trip import CleanedTrip, TripRecord
from adapters.http.api.gtfs_clean.schemas import (
    FeedRequest,
    FeedResponse,
    LabelRequest,
    LabelResponse,
    RouteRequest,
    RouteResponse,
    StopRequest,
    StopResponse,
    TransformStatsResponse,
    TripRequest,
    TripResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/clean", tags=["Cleaning"])


def get_profile() -> AgencyProfile:
    """Agency profile selected by AGENCY_CODE."""
    return get_agency_profile(settings.AGENCY_CODE)


def _trip_response(trip: CleanedTrip) -> TripResponse:
    return TripResponse(
        id=trip.id,
        route_id=trip.route_id,
        headsign=trip.headsign,
        direction=int(trip.direction),
        direction_name=trip.direction.name,
    )


def _route_record(payload: RouteRequest) -> RouteRecord:
    return RouteRecord(
        id=payload.id,
        short_name=payload.short_name,
        long_name=payload.long_name,
        desc=payload.desc,
        color=payload.color,
    )


def _trip_record(payload: TripRequest) -> TripRecord:
    return TripRecord(id=payload.id, route_id=payload.route_id, headsign=payload.headsign)


def _stop_record(payload: StopRequest) -> StopRecord:
    return StopRecord(id=payload.id, name=payload.name, code=payload.code)


@router.post("/labels", response_model=LabelResponse)
@limiter.limit(RateLimits.RECORD)
async def clean_label_text(
    request: Request,
    payload: LabelRequest,
    profile: AgencyProfile = Depends(get_profile),
):
    """Clean a single route long name or stop name."""
    return LabelResponse(
        text=payload.text,
        kind=payload.kind,
        cleaned=clean_label(payload.text, payload.kind, profile.locale),
    )


@router.post("/routes", response_model=RouteResponse)
@limiter.limit(RateLimits.RECORD)
async def clean_route(
    request: Request,
    payload: RouteRequest,
    profile: AgencyProfile = Depends(get_profile),
):
    """Clean route short and long names."""
    route = FeedTransformer(profile).transform_route(_route_record(payload))
    return RouteResponse.model_validate(route)


@router.post("/trips", response_model=TripResponse)
@limiter.limit(RateLimits.RECORD)
async def classify_trip(
    request: Request,
    payload: TripRequest,
    profile: AgencyProfile = Depends(get_profile),
):
    """Classify a trip headsign into a real-time API direction.

    Returns 422 when the headsign has no direction marker.
    """
    try:
        trip = FeedTransformer(profile).transform_trip(_trip_record(payload))
    except FeedContractError as e:
        logger.warning(f"Rejected trip {payload.id}: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    return _trip_response(trip)


@router.post("/stops", response_model=StopResponse)
@limiter.limit(RateLimits.RECORD)
async def clean_stop(
    request: Request,
    payload: StopRequest,
    profile: AgencyProfile = Depends(get_profile),
):
    """Resolve stop code and ID, and clean the stop name.

    Returns 422 when the stop code is not numeric.
    """
    try:
        stop = FeedTransformer(profile).transform_stop(_stop_record(payload))
    except FeedContractError as e:
        logger.warning(f"Rejected stop {payload.id}: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    return StopResponse.model_validate(stop)


@router.post("/feed", response_model=FeedResponse)
@limiter.limit(RateLimits.FEED)
async def clean_feed(
    request: Request,
    payload: FeedRequest,
    profile: AgencyProfile = Depends(get_profile),
):
    """Clean a whole feed. The first invalid record rejects the request."""
    transformer = FeedTransformer(profile)
    try:
        feed = transformer.transform_feed(
            routes=[_route_record(r) for r in payload.routes],
            trips=[_trip_record(t) for t in payload.trips],
            stops=[_stop_record(s) for s in payload.stops],
        )
    except FeedContractError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return FeedResponse(
        agency=profile.name,
        routes=[RouteResponse.model_validate(r) for r in feed.routes],
        trips=[_trip_response(t) for t in feed.trips],
        stops=[StopResponse.model_validate(s) for s in feed.stops],
        stats=TransformStatsResponse.model_validate(transformer.stats),
    )
