"""Feed transformer.

Applies the label cleaner, direction classifier and identifier resolver to
every route, trip and stop of one feed, for one agency profile.

Records are independent: the transformer keeps no state between them
apart from the counters in TransformStats. A fatal data fault is logged
with the offending record and re-raised, which stops the run.

Usage:
    transformer = FeedTransformer(get_agency_profile("rtc_quebec"))
    feed = transformer.transform_feed(routes, trips, stops)
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from src.gtfs_clean_bc.agency.domain.entities.agency_profile import AgencyProfile
from src.gtfs_clean_bc.label.domain.services.label_cleaner import LabelKind, clean_label
from src.gtfs_clean_bc.route.domain.entities.route import CleanedRoute, RouteRecord
from src.gtfs_clean_bc.route.domain.services.route_cleaner import (
    clean_route_long_name,
    clean_route_short_name,
)
from src.gtfs_clean_bc.shared.domain.exceptions import FeedContractError
from src.gtfs_clean_bc.stop.domain.entities.stop import CleanedStop, StopRecord
from src.gtfs_clean_bc.stop.domain.services.identifier_resolver import resolve_stop_identity
from src.gtfs_clean_bc.trip.domain.entities.trip import CleanedTrip, TripRecord
from src.gtfs_clean_bc.trip.domain.services.direction_classifier import classify_headsign

logger = logging.getLogger(__name__)


@dataclass
class TransformStats:
    """Statistics from a transform run."""
    routes: int = 0
    routes_without_long_name: int = 0
    trips: int = 0
    stops: int = 0

    def __str__(self) -> str:
        return (
            f"Routes: {self.routes} ({self.routes_without_long_name} without long name), "
            f"Trips: {self.trips}, "
            f"Stops: {self.stops}"
        )


@dataclass
class CleanedFeed:
    routes: List[CleanedRoute] = field(default_factory=list)
    trips: List[CleanedTrip] = field(default_factory=list)
    stops: List[CleanedStop] = field(default_factory=list)


class FeedTransformer:
    """Cleans the records of one feed with an agency profile."""

    def __init__(self, profile: AgencyProfile):
        self.profile = profile
        self.locale = profile.locale
        self.stats = TransformStats()

    def transform_route(self, route: RouteRecord) -> CleanedRoute:
        long_name = clean_route_long_name(route.long_name, route.desc, self.locale)
        if not long_name:
            self.stats.routes_without_long_name += 1
        return CleanedRoute(
            id=route.id,
            short_name=clean_route_short_name(route.short_name, self.locale),
            long_name=long_name,
            color=(route.color or self.profile.color).upper(),
        )

    def transform_trip(self, trip: TripRecord) -> CleanedTrip:
        classification = classify_headsign(trip.headsign, self.locale, trip_id=trip.id)
        return CleanedTrip(
            id=trip.id,
            route_id=trip.route_id,
            headsign=classification.headsign,
            direction=classification.direction,
        )

    def transform_stop(self, stop: StopRecord) -> CleanedStop:
        identity = resolve_stop_identity(stop.code, stop.id)
        return CleanedStop(
            id=identity.stop_id,
            code=identity.code,
            name=clean_label(stop.name, LabelKind.STOP_NAME, self.locale),
            source_id=stop.id,
        )

    def transform_routes(self, routes: Iterable[RouteRecord]) -> List[CleanedRoute]:
        cleaned = []
        for route in routes:
            cleaned.append(self.transform_route(route))
            self.stats.routes += 1
        logger.info(f"Cleaned {len(cleaned)} routes for {self.profile.name}")
        return cleaned

    def transform_trips(self, trips: Iterable[TripRecord]) -> List[CleanedTrip]:
        cleaned = []
        for trip in trips:
            try:
                cleaned.append(self.transform_trip(trip))
            except FeedContractError as e:
                logger.error(f"Trip {trip.id} (route {trip.route_id}): {e}")
                raise
            self.stats.trips += 1
        logger.info(f"Classified {len(cleaned)} trips for {self.profile.name}")
        return cleaned

    def transform_stops(self, stops: Iterable[StopRecord]) -> List[CleanedStop]:
        cleaned = []
        for stop in stops:
            try:
                cleaned.append(self.transform_stop(stop))
            except FeedContractError as e:
                logger.error(f"Stop {stop.id} ({stop.name}): {e}")
                raise
            self.stats.stops += 1
        logger.info(f"Cleaned {len(cleaned)} stops for {self.profile.name}")
        return cleaned

    def transform_feed(
        self,
        routes: Iterable[RouteRecord],
        trips: Iterable[TripRecord],
        stops: Iterable[StopRecord],
    ) -> CleanedFeed:
        """Clean a whole feed. Stops at the first fatal record."""
        feed = CleanedFeed(
            routes=self.transform_routes(routes),
            trips=self.transform_trips(trips),
            stops=self.transform_stops(stops),
        )
        logger.info(f"Feed transform complete: {self.stats}")
        return feed
