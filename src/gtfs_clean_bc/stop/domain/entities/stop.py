from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class StopRecord:
    """GTFS Stop record as handed over by the feed reader."""

    id: str
    name: str
    code: Optional[str] = None

    @classmethod
    def from_gtfs(cls, row: dict) -> "StopRecord":
        """Create StopRecord from GTFS CSV row."""
        return cls(
            id=row.get("stop_id", ""),
            name=row.get("stop_name", ""),
            code=row.get("stop_code") or None,
        )


@dataclass(frozen=True)
class StopIdentity:
    code: str  # Display code, used by the real-time API
    stop_id: int


@dataclass(frozen=True)
class CleanedStop:
    id: int
    code: str
    name: str
    source_id: str
