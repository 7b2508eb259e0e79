"""Locale rule tables used by the label cleaner and direction classifier.

A deployment runs with exactly one locale. Everything locale specific
(saint abbreviations, street types, words kept lowercase, direction
vocabulary) lives here as data so that adding a locale needs no code
changes. Patterns are compiled once when the tables are built and are
only read afterwards.
"""

import re
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Tuple

from src.gtfs_clean_bc.trip.domain.entities.trip import Direction


@dataclass(frozen=True)
class DirectionRule:
    """A direction word and the letter that prefixes rewritten headsigns."""

    direction: Direction
    letter: str
    word: str
    pattern: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # "<leading text> (<word>)" with nothing after the closing parenthesis
        compiled = re.compile(r"(.*) \(" + re.escape(self.word) + r"\)", re.IGNORECASE)
        object.__setattr__(self, "pattern", compiled)


@dataclass(frozen=True, eq=False)
class LocaleRules:
    """Static text rules for one locale."""

    tag: str
    # Regex with two groups: the abbreviation and the separator after it
    saint_pattern: str
    # Lowercase abbreviation -> spelled-out form
    saint_forms: Dict[str, str]
    # Full street type -> accepted abbreviations (lowercase, no period)
    street_types: Dict[str, Tuple[str, ...]]
    lowercase_words: FrozenSet[str]
    # Articles only kept lowercase before an apostrophe (l'Église, d'Estimauville)
    elided_words: FrozenSet[str]
    direction_rules: Tuple[DirectionRule, ...]

    saint_regex: re.Pattern = field(init=False, repr=False, compare=False)
    street_type_regex: re.Pattern = field(init=False, repr=False, compare=False)
    street_type_lookup: Dict[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "saint_regex", re.compile(self.saint_pattern, re.IGNORECASE))

        lookup = {}
        for full_word, abbreviations in self.street_types.items():
            for abbreviation in abbreviations:
                lookup[abbreviation] = full_word
        # Longest first so "boulv" wins over "boul"
        alternatives = "|".join(
            re.escape(a) for a in sorted(lookup, key=len, reverse=True)
        )
        # Whole words, but a separating " -Boul." still counts
        street_regex = re.compile(r"(?<!\w)(?<!\w-)(" + alternatives + r")\b\.?", re.IGNORECASE)
        object.__setattr__(self, "street_type_regex", street_regex)
        object.__setattr__(self, "street_type_lookup", lookup)

    def upper(self, text: str) -> str:
        """Uppercase following the locale casing rules (é -> É)."""
        return text.upper()


FR_CA = LocaleRules(
    tag="fr_CA",
    # St-Jean, St Jean, St.-Jean, St. Jean, Ste-Foy, ST-JEAN
    saint_pattern=r"(?<![\w'])(ste|st)(\s*\.?\s*-\s*|\.?\s+|\s*\.\s*)(?=\w)",
    saint_forms={"st": "saint", "ste": "sainte"},
    street_types={
        "avenue": ("av", "ave"),
        "boulevard": ("boul", "boulv", "bd", "blvd"),
        "chemin": ("ch",),
        "route": ("rte",),
        "place": ("pl",),
        "montée": ("mtée", "mtee"),
        "rang": ("rg",),
        "terrasse": ("terr",),
        "carré": ("carr",),
        "croissant": ("crois",),
        "promenade": ("prom",),
        "autoroute": ("aut",),
    },
    lowercase_words=frozenset({
        "de", "du", "des", "la", "le", "les", "et", "à", "au", "aux", "en",
        "sur", "sous", "par", "pour",
    }),
    elided_words=frozenset({"l", "d"}),
    direction_rules=(
        DirectionRule(Direction.NORTH, "N", "nord"),
        DirectionRule(Direction.SOUTH, "S", "sud"),
        DirectionRule(Direction.EAST, "E", "est"),
        DirectionRule(Direction.WEST, "O", "ouest"),
    ),
)

EN_CA = LocaleRules(
    tag="en_CA",
    # "St" alone means Street in English, so a period or hyphen is required
    saint_pattern=r"(?<![\w'])(ste|st)(\s*\.?\s*-\s*|\s*\.\s*)(?=\w)",
    saint_forms={"st": "saint", "ste": "sainte"},
    street_types={
        "avenue": ("av", "ave"),
        "boulevard": ("boul", "blvd"),
        "road": ("rd",),
        "drive": ("dr",),
        "crescent": ("cres",),
        "place": ("pl",),
        "terrace": ("terr",),
        "highway": ("hwy",),
    },
    lowercase_words=frozenset({
        "of", "the", "and", "at", "on", "to", "in", "by", "for",
    }),
    elided_words=frozenset(),
    direction_rules=(
        DirectionRule(Direction.NORTH, "N", "north"),
        DirectionRule(Direction.SOUTH, "S", "south"),
        DirectionRule(Direction.EAST, "E", "east"),
        DirectionRule(Direction.WEST, "W", "west"),
    ),
)

LOCALES: Dict[str, LocaleRules] = {
    FR_CA.tag: FR_CA,
    EN_CA.tag: EN_CA,
}
