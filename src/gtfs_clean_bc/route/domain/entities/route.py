from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RouteRecord:
    """GTFS Route record as handed over by the feed reader."""

    id: str
    short_name: str
    long_name: Optional[str] = None
    desc: Optional[str] = None
    color: Optional[str] = None

    @classmethod
    def from_gtfs(cls, row: dict) -> "RouteRecord":
        """Create RouteRecord from GTFS CSV row."""
        return cls(
            id=row.get("route_id", ""),
            short_name=row.get("route_short_name", ""),
            long_name=row.get("route_long_name") or None,
            desc=row.get("route_desc") or None,
            color=row.get("route_color") or None,
        )


@dataclass(frozen=True)
class CleanedRoute:
    id: str
    short_name: str  # Uppercase, matched as-is by the real-time API
    long_name: str
    color: str  # Hex without #
