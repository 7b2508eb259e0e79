"""Route name cleaning."""

from typing import Optional

from src.gtfs_clean_bc.label.domain.services.label_cleaner import LabelKind, clean_label
from src.gtfs_clean_bc.locale.domain.value_objects.locale_rules import FR_CA, LocaleRules


def clean_route_short_name(short_name: Optional[str], locale: LocaleRules = FR_CA) -> str:
    """Uppercase the route short name.

    The real-time API looks routes up by this exact value ("800", "1A", "ECOLE").
    """
    if not short_name:
        return ""
    return locale.upper(short_name.strip())


def clean_route_long_name(
    long_name: Optional[str],
    desc: Optional[str] = None,
    locale: LocaleRules = FR_CA,
) -> str:
    """Clean the route long name, falling back to route_desc when it is missing.

    Returns an empty string when neither field is provided.
    """
    if not long_name or not long_name.strip():
        long_name = desc
    return clean_label(long_name, LabelKind.ROUTE, locale)
