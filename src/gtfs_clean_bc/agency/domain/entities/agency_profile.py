"""Agency profiles.

An agency is a configuration value: its metadata plus the locale rule
tables its feed is cleaned with. Profiles are selected once at startup
(see core.config.Settings.AGENCY_CODE).

Usage:
    from src.gtfs_clean_bc.agency.domain.entities.agency_profile import get_agency_profile

    profile = get_agency_profile("rtc_quebec")
    profile.locale.tag  # "fr_CA"
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict

from src.gtfs_clean_bc.locale.domain.value_objects.locale_rules import FR_CA, LocaleRules
from src.gtfs_clean_bc.shared.domain.exceptions import UnknownAgencyError


class RouteType(IntEnum):
    """GTFS Route types."""
    TRAM = 0
    SUBWAY = 1
    RAIL = 2
    BUS = 3
    FERRY = 4


@dataclass(frozen=True, eq=False)
class AgencyProfile:
    """Static configuration for one transit agency."""
    code: str
    name: str
    color: str  # Hex without #, used when a route has no color
    route_type: RouteType
    locale: LocaleRules
    url: str = ""


AGENCY_PROFILES: Dict[str, AgencyProfile] = {}

# -----------------------------------------------------------------------------
# RTC (Réseau de transport de la Capitale), Québec
# https://www.rtcquebec.ca/donnees-ouvertes
# -----------------------------------------------------------------------------
AGENCY_PROFILES['rtc_quebec'] = AgencyProfile(
    code='rtc_quebec',
    name='RTC',
    color='A3C614',  # Official green is 7DBA00 (PMS 376)
    route_type=RouteType.BUS,
    locale=FR_CA,
    url='https://www.rtcquebec.ca',
)


def get_agency_profile(code: str) -> AgencyProfile:
    """Get agency profile by code.

    Raises:
        UnknownAgencyError: If no profile is registered for code
    """
    try:
        return AGENCY_PROFILES[code]
    except KeyError:
        raise UnknownAgencyError(code) from None
