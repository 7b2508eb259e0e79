"""Stop code and stop ID resolution.

The operator publishes numeric stop codes, and the real-time API expects
them both as the display code and as the stop ID. Some stops ship without
a code; their GTFS stop_id is then shown instead.
"""

import logging
from typing import Optional

from src.gtfs_clean_bc.shared.domain.exceptions import (
    InvalidStopCodeError,
    MissingStopIdentifierError,
)
from src.gtfs_clean_bc.stop.domain.entities.stop import StopIdentity

logger = logging.getLogger(__name__)


def resolve_stop_code(code: Optional[str], stop_id: Optional[str]) -> str:
    """Return the stop code verbatim, or the raw stop_id when the code is blank.

    Examples:
        resolve_stop_code("123", "999") -> "123"
        resolve_stop_code("", "999") -> "999"

    Raises:
        MissingStopIdentifierError: If both are empty
    """
    if code and code.strip():
        return code
    if not stop_id:
        raise MissingStopIdentifierError()
    logger.debug(f"Stop {stop_id} has no code, using its ID as code")
    return stop_id


def resolve_stop_id(code: Optional[str], stop_id: Optional[str] = None) -> int:
    """Parse the stop code as the numeric stop ID.

    Only the code is parsed, never the fallback stop_id.

    Raises:
        InvalidStopCodeError: If the code is empty or not an integer
    """
    digits = (code or "").strip()
    # Unsigned ASCII digits only: stop IDs are never negative and int() would
    # also accept "+12" and "1_000"
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidStopCodeError(code, stop_id)
    return int(digits)


def resolve_stop_identity(code: Optional[str], stop_id: Optional[str]) -> StopIdentity:
    """Resolve the display code first, then the numeric ID from the code.

    A stop without a code still fails here: its display code could fall back
    to stop_id but its numeric ID cannot.
    """
    resolved_code = resolve_stop_code(code, stop_id)
    return StopIdentity(code=resolved_code, stop_id=resolve_stop_id(code, stop_id))
