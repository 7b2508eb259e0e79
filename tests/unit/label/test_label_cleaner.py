"""Unit tests for route and stop label cleaning."""

import itertools

import pytest

from src.gtfs_clean_bc.label.domain.services.label_cleaner import (
    LabelKind,
    clean_bounds,
    clean_label,
    clean_parenthesis,
    clean_saint,
    clean_street_types,
    match_case,
    remove_null,
    title_case_label,
)
from src.gtfs_clean_bc.locale.domain.value_objects.locale_rules import EN_CA


class TestSaint:
    """Tests for saint abbreviation spelling."""

    @pytest.mark.parametrize("raw,expected", [
        ("St-Jean", "Saint-Jean"),
        ("Ste-Foy", "Sainte-Foy"),
        ("St. Jean", "Saint Jean"),
        ("St.-Jean", "Saint-Jean"),
        ("ST-JEAN", "SAINT-JEAN"),
        ("Boulevard St-Jean", "Boulevard Saint-Jean"),
        ("St .Jean", "Saint Jean"),
        ("St- Saint", "Saint-Saint"),
    ])
    def test_abbreviations_spelled_out(self, raw, expected):
        assert clean_saint(raw) == expected

    @pytest.mark.parametrize("text", ["Saint-Jean", "Sainte-Foy", "Station", "Ouest", "Est"])
    def test_other_words_untouched(self, text):
        """Words merely containing 'st' must not change."""
        assert clean_saint(text) == text

    def test_english_street_not_a_saint(self):
        """In English a bare 'St' is a street type."""
        assert clean_saint("Main St", EN_CA) == "Main St"
        assert clean_saint("St. Clair", EN_CA) == "Saint Clair"


class TestParenthesis:
    """Tests for the two parenthesis passes."""

    def test_trailing_remark_removed(self):
        assert clean_parenthesis("Laurier (express)").strip() == "Laurier"

    def test_several_trailing_remarks_removed(self):
        assert clean_parenthesis("Laurier (A) (B)").strip() == "Laurier"

    def test_inner_remark_removed(self):
        result = clean_parenthesis("Charlesbourg (via Henri-Bourassa) Express")
        assert "(" not in result
        assert "Express" in result

    def test_brackets_removed(self):
        assert clean_parenthesis("Laurier [temporaire]").strip() == "Laurier"

    def test_unclosed_remark_removed(self):
        assert clean_parenthesis("Laurier (temporaire").strip() == "Laurier"

    @pytest.mark.parametrize("raw,expected", [
        ("St-Jean ((x))", "St-Jean"),
        ("A (B (C)) D", "A D"),
        ("Laurier (a (b (c)))", "Laurier"),
        ("Laurier [x] (a (b)) suite", "Laurier suite"),
    ])
    def test_nested_remarks_removed(self, raw, expected):
        assert " ".join(clean_parenthesis(raw).split()) == expected

    def test_empty_remark_removed(self):
        assert clean_parenthesis("Laurier ()").strip() == "Laurier"


class TestNull:
    """Tests for 'null' placeholder removal."""

    @pytest.mark.parametrize("raw", ["null", "NULL", " - null", "null - "])
    def test_placeholder_removed(self, raw):
        assert remove_null(raw).strip() == ""

    def test_word_containing_null_kept(self):
        assert remove_null("Nullarbor") == "Nullarbor"


class TestStreetTypes:
    """Tests for street type expansion."""

    @pytest.mark.parametrize("raw,expected", [
        ("Boul. Laurier", "Boulevard Laurier"),
        ("Saint-Jean Blvd", "Saint-Jean Boulevard"),
        ("AV. CARTIER", "AVENUE CARTIER"),
        ("Ch. Sainte-Foy", "Chemin Sainte-Foy"),
        ("rte de l'Église", "route de l'Église"),
    ])
    def test_abbreviations_expanded(self, raw, expected):
        assert clean_street_types(raw) == expected

    def test_full_words_untouched(self):
        assert clean_street_types("Avenue Cartier") == "Avenue Cartier"

    def test_english_table(self):
        assert clean_street_types("Bank Hwy", EN_CA) == "Bank Highway"


class TestCasing:
    """Tests for ALL CAPS to Title Case conversion."""

    @pytest.mark.parametrize("raw,expected", [
        ("STATION CENTRALE", "Station Centrale"),
        ("DE LA SAVANE", "De la Savane"),
        ("L'ÉGLISE DU VILLAGE", "L'Église du Village"),
        ("SAINT-JEAN", "Saint-Jean"),
        ("CHEMIN D'ESTIMAUVILLE", "Chemin d'Estimauville"),
        ("GARE D", "Gare D"),
        ("AVENUE L", "Avenue L"),
    ])
    def test_all_caps_converted(self, raw, expected):
        assert title_case_label(raw) == expected

    def test_mixed_case_unchanged(self):
        assert title_case_label("Gare du Palais") == "Gare du Palais"

    def test_match_case(self):
        assert match_case("ST", "saint") == "SAINT"
        assert match_case("St", "saint") == "Saint"
        assert match_case("st", "saint") == "saint"


class TestCleanLabel:
    """Tests for the full clean_label pipeline."""

    def test_stop_name_with_remark_and_abbreviation(self):
        assert clean_label("Saint-Jean Blvd. (express)", LabelKind.STOP_NAME) == "Saint-Jean Boulevard"

    def test_route_null_placeholder(self):
        assert clean_label("Route - null", LabelKind.ROUTE) == "Route"

    def test_route_keeps_street_abbreviations(self):
        """Street types are only expanded in stop names."""
        assert clean_label("Boul. Laurier", LabelKind.ROUTE) == "Boul. Laurier"

    def test_stop_bounds_cleaned(self):
        assert clean_bounds(" - Laurier / ") == "Laurier"
        assert clean_label(" - Laurier / ", LabelKind.STOP_NAME) == "Laurier"

    def test_all_caps_stop(self):
        assert clean_label("ST-JEAN BLVD. (EXPRESS)", LabelKind.STOP_NAME) == "Saint-Jean Boulevard"

    def test_spacing_normalized(self):
        assert clean_label("  Laurier  ,  Cartier ", LabelKind.ROUTE) == "Laurier, Cartier"
        assert clean_label("Charlesbourg -Limoilou", LabelKind.ROUTE) == "Charlesbourg - Limoilou"

    @pytest.mark.parametrize("text", [None, "", "null", "(express)"])
    def test_empty_results(self, text):
        assert clean_label(text, LabelKind.ROUTE) == ""

    @pytest.mark.parametrize("kind", list(LabelKind))
    @pytest.mark.parametrize("raw", [
        "Saint-Jean Blvd. (express)",
        "ST-JEAN BLVD. (EXPRESS)",
        "Route - null",
        "A - null - B",
        "Station (Nord) [x]",
        "L'ÉGLISE DU VILLAGE",
        "  Laurier  ,  Cartier ",
        "Ch. Ste-Foy (temporaire",
        "Charlesbourg (via Henri-Bourassa) Express",
        "- Gare du Palais -",
        "St-Jean ((x))",
        "A (B (C)) D",
        "St-(express)Saint",
        "Laurier -Ch. Ste-Foy",
        "ST .JEAN",
    ])
    def test_idempotent(self, raw, kind):
        once = clean_label(raw, kind)
        assert clean_label(once, kind) == once

    @pytest.mark.parametrize("raw,expected", [
        ("St-Jean ((x))", "Saint-Jean"),
        ("A (B (C)) D", "A D"),
        ("St-(express)Saint", "Saint-Saint"),
    ])
    def test_nested_remarks(self, raw, expected):
        assert clean_label(raw, LabelKind.ROUTE) == expected


# Every combination of these fragments is cleaned twice
PREFIXES = ["", "ST-", "St. ", "- ", "ste "]
CORES = ["Jean", "JEAN BOUL.", "l'Église", "GARE D", "Ch. Laurier"]
REMARKS = ["", " (express)", " ((x))", " (A (B)) suite", " [x]", " (temporaire", "-null", "(x)Saint"]
SUFFIXES = ["", " D", " -", " / ", " ()"]


class TestCleanLabelIdempotence:
    """Cleaning an already cleaned label must not change it."""

    @pytest.mark.parametrize("kind", list(LabelKind))
    @pytest.mark.parametrize("raw", [
        "".join(parts) for parts in itertools.product(PREFIXES, CORES, REMARKS, SUFFIXES)
    ])
    def test_clean_twice(self, raw, kind):
        once = clean_label(raw, kind)
        assert clean_label(once, kind) == once

    @pytest.mark.parametrize("raw", [
        "".join(parts) for parts in itertools.product(PREFIXES, CORES, REMARKS)
    ])
    def test_no_parenthesis_left(self, raw):
        cleaned = clean_label(raw, LabelKind.STOP_NAME)
        assert "(" not in cleaned
        assert "[" not in cleaned
