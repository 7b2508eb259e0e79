from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class Direction(IntEnum):
    """Direction IDs expected by the agency real-time API."""
    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3


@dataclass(frozen=True)
class TripRecord:
    """GTFS Trip record as handed over by the feed reader."""

    id: str
    route_id: str
    headsign: str
    direction_id: Optional[int] = None  # GTFS 0/1, ignored by the classifier

    @classmethod
    def from_gtfs(cls, row: dict) -> "TripRecord":
        """Create TripRecord from GTFS CSV row."""
        return cls(
            id=row.get("trip_id", ""),
            route_id=row.get("route_id", ""),
            headsign=row.get("trip_headsign", ""),
            direction_id=int(row["direction_id"]) if row.get("direction_id") else None,
        )


@dataclass(frozen=True)
class TripClassification:
    """Cleaned headsign and the direction it was classified into."""

    headsign: str
    direction: Direction


@dataclass(frozen=True)
class CleanedTrip:
    id: str
    route_id: str
    headsign: str
    direction: Direction
