"""Label cleaning for GTFS route and stop names.

Operator exports mix abbreviations, ALL CAPS names, parenthetical remarks
and literal "null" placeholders. clean_label() turns them into the
canonical display label.

Step order matters: each step assumes the previous ones already ran.

    1. Parenthetical remarks stripped (two passes, repeated for nested groups)
    2. "null" placeholders removed
    3. Saint abbreviations spelled out
    4. Stop names: bounds cleaned and street types expanded
    5. Generic label cleanup (spacing, separators, ALL CAPS -> Title Case)

Every function here is pure and clean_label() is idempotent.
"""

import re
from enum import Enum
from typing import Optional

from src.gtfs_clean_bc.locale.domain.value_objects.locale_rules import FR_CA, LocaleRules


class LabelKind(str, Enum):
    """Which record field a label comes from."""
    ROUTE = "route"
    STOP_NAME = "stop_name"


# Pass 1: one or more fully parenthesized remarks ending the label
TRAILING_PARENTHESIS = re.compile(r"(?:\s*\([^()]*\))+\s*$")
# Pass 2: [bracketed] remarks, inner (remarks) followed by more text, unclosed "(..."
RESIDUAL_PARENTHESIS = re.compile(r"\s*(?:\[[^\[\]]*\]|\([^()]*\)(?=\s*\S)|\([^()]*$)")

NULL = re.compile(r"[\-\s]*\bnull\b[\s\-]*", re.IGNORECASE)

BOUNDS = re.compile(r"^[\s\-,.;:/]+|[\s\-,.;:/]+$")
DANGLING_SEPARATORS = re.compile(r"^[\s\-/,;:]+|[\s\-/,;:]+$")
SPACES = re.compile(r"\s+")
DASH_SEPARATOR = re.compile(r"\s*-\s+|\s+-\s*")
PARENTHESIS_INNER_SPACE = re.compile(r"\(\s+")
GLUED_PARENTHESIS = re.compile(r"(?<=\w)\(")
CLOSE_PARENTHESIS = re.compile(r"\s+\)")
SPACE_BEFORE_PUNCTUATION = re.compile(r"\s+([,.;:])")


def match_case(source: str, word: str) -> str:
    """Return word cased like source ("ST" -> "SAINT", "St" -> "Saint")."""
    if len(source) > 1 and source.isupper():
        return word.upper()
    if source[:1].isupper():
        return word[:1].upper() + word[1:]
    return word.lower()


def clean_saint(text: str, locale: LocaleRules = FR_CA) -> str:
    """Spell out saint abbreviations (St-Jean -> Saint-Jean, Ste-Foy -> Sainte-Foy)."""

    def _replace(match: re.Match) -> str:
        abbreviation, separator = match.group(1), match.group(2)
        spelled = match_case(abbreviation, locale.saint_forms[abbreviation.lower()])
        return spelled + ("-" if "-" in separator else " ")

    return locale.saint_regex.sub(_replace, text)


def clean_parenthesis(text: str) -> str:
    """Strip parenthetical remarks, nested ones included.

    The two passes are kept separate: pass 2 only sees what is left once
    the trailing remarks are gone. Each round only removes the innermost
    groups, so both passes repeat until the text stops changing.

    Examples:
        "Laurier (express)" -> "Laurier"
        "A (B (C)) D" -> "A  D"
    """
    while True:
        stripped = TRAILING_PARENTHESIS.sub("", text)
        stripped = RESIDUAL_PARENTHESIS.sub(" ", stripped)
        # Every substitution removes at least one bracket
        if stripped == text:
            return stripped
        text = stripped


def remove_null(text: str) -> str:
    """Remove literal "null" placeholders and the separators around them."""
    return NULL.sub(" ", text)


def clean_bounds(text: str) -> str:
    """Strip whitespace and punctuation artifacts at both ends."""
    return BOUNDS.sub("", text)


def clean_street_types(text: str, locale: LocaleRules = FR_CA) -> str:
    """Expand street type abbreviations (boul. -> boulevard, Blvd. -> Boulevard)."""

    def _replace(match: re.Match) -> str:
        abbreviation = match.group(1)
        return match_case(abbreviation, locale.street_type_lookup[abbreviation.lower()])

    return locale.street_type_regex.sub(_replace, text)


def _capitalize(word: str, keep_lowercase: bool) -> str:
    if keep_lowercase:
        return word
    # Handle hyphenated words (e.g., "saint-jean" -> "Saint-Jean", "t-4" -> "T-4")
    if "-" in word:
        parts = word.split("-")
        return "-".join(p.capitalize() if p.isalpha() else p.upper() for p in parts)
    return word.capitalize()


def title_case_label(text: str, locale: LocaleRules = FR_CA) -> str:
    """Convert an ALL CAPS label to Title Case.

    Labels that already mix upper and lower case are returned unchanged.

    Examples:
        "STATION CENTRALE" -> "Station Centrale"
        "DE LA SAVANE" -> "De la Savane"
        "L'ÉGLISE DU VILLAGE" -> "L'Église du Village"
    """
    has_upper = any(c.isupper() for c in text)
    has_lower = any(c.islower() for c in text)
    if not has_upper or has_lower:
        return text

    result = []
    for i, word in enumerate(text.lower().split(" ")):
        # Elided articles: l'église -> l'Église
        if "'" in word:
            head, _, tail = word.partition("'")
            head = _capitalize(head, i > 0 and head in locale.elided_words)
            result.append(head + "'" + _capitalize(tail, False))
        else:
            result.append(_capitalize(word, i > 0 and word in locale.lowercase_words))
    return " ".join(result)


def clean_generic_label(text: str, locale: LocaleRules = FR_CA) -> str:
    """Final cleanup shared by every label: spacing, separators and casing."""
    text = SPACES.sub(" ", text)
    text = DASH_SEPARATOR.sub(" - ", text)
    text = PARENTHESIS_INNER_SPACE.sub("(", text)
    text = GLUED_PARENTHESIS.sub(" (", text)
    text = CLOSE_PARENTHESIS.sub(")", text)
    text = SPACE_BEFORE_PUNCTUATION.sub(r"\1", text)
    text = DANGLING_SEPARATORS.sub("", text)
    text = SPACES.sub(" ", text)
    return title_case_label(text, locale)


def clean_label(text: Optional[str], kind: LabelKind, locale: LocaleRules = FR_CA) -> str:
    """Clean a route long name or a stop name.

    Args:
        text: Raw label from the feed (None is treated as empty)
        kind: LabelKind.ROUTE or LabelKind.STOP_NAME
        locale: Locale rule tables

    Returns:
        Canonical label, possibly empty

    Examples:
        clean_label("Saint-Jean Blvd. (express)", LabelKind.STOP_NAME) -> "Saint-Jean Boulevard"
        clean_label("Route - null", LabelKind.ROUTE) -> "Route"
    """
    if not text:
        return ""

    text = clean_parenthesis(text)
    text = remove_null(text)
    text = clean_saint(text, locale)

    if kind == LabelKind.STOP_NAME:
        text = clean_bounds(text)
        text = clean_street_types(text, locale)

    return clean_generic_label(text, locale)
