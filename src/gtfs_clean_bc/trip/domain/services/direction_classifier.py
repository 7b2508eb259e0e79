"""Trip headsign direction classification.

Operator headsigns end with the direction in parentheses, e.g.
"Station Centrale (Nord)". The real-time API matches vehicles by direction,
so each headsign is classified into one of four Direction values and
rewritten as "N-Station Centrale".

There is no default direction. A headsign matching no rule is a feed
contract violation and must stop the run rather than be guessed.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from src.gtfs_clean_bc.label.domain.services.label_cleaner import (
    clean_generic_label,
    clean_parenthesis,
    clean_saint,
    clean_street_types,
    remove_null,
)
from src.gtfs_clean_bc.locale.domain.value_objects.locale_rules import (
    FR_CA,
    LOCALES,
    DirectionRule,
    LocaleRules,
)
from src.gtfs_clean_bc.shared.domain.exceptions import UnclassifiableHeadsignError
from src.gtfs_clean_bc.trip.domain.entities.trip import TripClassification

logger = logging.getLogger(__name__)

LETTER_PREFIX = re.compile(r"([A-Z])\s*-\s*(.*)", re.DOTALL)


@dataclass(frozen=True)
class ClassificationResult:
    """Either a classification or the headsign that could not be classified."""

    headsign: Optional[str]
    classification: Optional[TripClassification] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.classification is not None

    def unwrap(self, trip_id: Optional[str] = None) -> TripClassification:
        """Return the classification or raise UnclassifiableHeadsignError."""
        if self.classification is None:
            raise UnclassifiableHeadsignError(self.headsign, trip_id)
        return self.classification


def validate_direction_rules(rules: Sequence[DirectionRule]) -> None:
    """Check that no headsign can match two rules.

    Raises:
        ValueError: If two rules share a direction, a letter or a word
    """
    for attribute in ("direction", "letter", "word"):
        values = [getattr(rule, attribute) for rule in rules]
        if attribute == "word":
            values = [v.lower() for v in values]
        if len(set(values)) != len(values):
            raise ValueError(f"Direction rules share a {attribute}: {values}")


def clean_trip_headsign(headsign: str, locale: LocaleRules = FR_CA) -> str:
    """Agency cleanup of a letter-prefixed headsign ("N - ST-JEAN" -> "N-Saint-Jean")."""
    letter = None
    match = LETTER_PREFIX.fullmatch(headsign.strip())
    if match:
        letter, headsign = match.group(1), match.group(2)
    headsign = clean_parenthesis(headsign)
    headsign = remove_null(headsign)
    headsign = clean_saint(headsign, locale)
    headsign = clean_street_types(headsign, locale)
    headsign = clean_generic_label(headsign, locale)
    return f"{letter}-{headsign}" if letter else headsign


def try_classify_headsign(
    headsign: Optional[str],
    locale: LocaleRules = FR_CA,
) -> ClassificationResult:
    """Classify a headsign without raising.

    Rules are tried in table order (North, South, East, West); the first
    match wins.
    """
    if not headsign or not headsign.strip():
        return ClassificationResult(headsign=headsign, error="empty headsign")

    # Bounding whitespace is ignored; any other text after the marker fails
    text = headsign.strip()
    for rule in locale.direction_rules:
        match = rule.pattern.fullmatch(text)
        if match:
            rewritten = f"{rule.letter}-{match.group(1)}"
            classification = TripClassification(
                headsign=clean_trip_headsign(rewritten, locale),
                direction=rule.direction,
            )
            logger.debug(f"Headsign '{headsign}' -> {classification.headsign} ({rule.direction.name})")
            return ClassificationResult(headsign=headsign, classification=classification)

    words = ", ".join(rule.word for rule in locale.direction_rules)
    return ClassificationResult(
        headsign=headsign,
        error=f"headsign does not end with one of ({words})",
    )


def classify_headsign(
    headsign: Optional[str],
    locale: LocaleRules = FR_CA,
    trip_id: Optional[str] = None,
) -> TripClassification:
    """Classify a headsign into a direction and rewrite it.

    Examples:
        classify_headsign("Station Centrale (Nord)") -> ("N-Station Centrale", Direction.NORTH)
        classify_headsign("Laurier (Sud)") -> ("S-Laurier", Direction.SOUTH)

    Raises:
        UnclassifiableHeadsignError: If no direction rule matches
    """
    return try_classify_headsign(headsign, locale).unwrap(trip_id)


for _locale in LOCALES.values():
    validate_direction_rules(_locale.direction_rules)
