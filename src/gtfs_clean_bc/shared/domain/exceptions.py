"""Errors raised while cleaning a GTFS feed.

FeedContractError and its subclasses mean the operator's data broke an
assumption the real-time API depends on. They are never recovered from:
the feed run stops and the offending value is reported.
"""

from typing import Optional


class FeedContractError(ValueError):
    """Base class for fatal feed data faults."""


class UnclassifiableHeadsignError(FeedContractError):
    """Trip headsign does not end with a known direction marker."""

    def __init__(self, headsign: Optional[str], trip_id: Optional[str] = None):
        self.headsign = headsign
        self.trip_id = trip_id
        where = f" (trip {trip_id})" if trip_id else ""
        super().__init__(f"Unexpected trip headsign '{headsign}'{where}!")


class InvalidStopCodeError(FeedContractError):
    """Stop code cannot be used as a numeric stop ID."""

    def __init__(self, code: Optional[str], stop_id: Optional[str] = None):
        self.code = code
        self.stop_id = stop_id
        where = f" (stop {stop_id})" if stop_id else ""
        super().__init__(f"Stop code '{code}' is not an integer{where}!")


class MissingStopIdentifierError(FeedContractError):
    """Stop has neither a code nor an ID."""

    def __init__(self):
        super().__init__("Stop has no code and no ID!")


class UnknownAgencyError(KeyError):
    """No agency profile is registered under the requested code."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown agency profile: {code}")
