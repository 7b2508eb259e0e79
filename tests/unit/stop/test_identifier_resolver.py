"""Unit tests for stop code and stop ID resolution."""

import pytest

from src.gtfs_clean_bc.shared.domain.exceptions import (
    FeedContractError,
    InvalidStopCodeError,
    MissingStopIdentifierError,
)
from src.gtfs_clean_bc.stop.domain.entities.stop import StopIdentity, StopRecord
from src.gtfs_clean_bc.stop.domain.services.identifier_resolver import (
    resolve_stop_code,
    resolve_stop_id,
    resolve_stop_identity,
)


class TestResolveStopCode:
    """Tests for display code precedence."""

    def test_code_wins_over_id(self):
        assert resolve_stop_code("123", "999") == "123"

    @pytest.mark.parametrize("code", ["", "   ", None])
    def test_falls_back_to_id(self, code):
        assert resolve_stop_code(code, "999") == "999"

    def test_code_used_verbatim(self):
        """The real-time API matches on the exact code string."""
        assert resolve_stop_code(" 123 ", "999") == " 123 "
        assert resolve_stop_code(" 123", "999") == " 123"

    def test_id_used_verbatim(self):
        assert resolve_stop_code("", "STOP_4521 ") == "STOP_4521 "

    def test_both_empty_is_fatal(self):
        with pytest.raises(MissingStopIdentifierError):
            resolve_stop_code("", "")


class TestResolveStopId:
    """Tests for numeric stop ID parsing."""

    def test_numeric_code(self):
        assert resolve_stop_id("1234") == 1234

    def test_leading_zeros(self):
        assert resolve_stop_id("0042") == 42

    def test_surrounding_whitespace_ignored(self):
        assert resolve_stop_id(" 123 ") == 123

    @pytest.mark.parametrize("code", ["", None, "12a", "+12", "1_000", "-5", "1.5"])
    def test_non_numeric_code_is_fatal(self, code):
        with pytest.raises(InvalidStopCodeError) as exc_info:
            resolve_stop_id(code, "S1")
        assert exc_info.value.code == code
        assert exc_info.value.stop_id == "S1"

    @pytest.mark.parametrize("code", ["-5", "+12"])
    def test_signed_code_is_fatal(self, code):
        """Stop IDs are unsigned; a sign is a malformed code."""
        with pytest.raises(InvalidStopCodeError):
            resolve_stop_id(code)

    def test_error_is_feed_contract_error(self):
        with pytest.raises(FeedContractError):
            resolve_stop_id("abc")
        with pytest.raises(ValueError):
            resolve_stop_id("abc")


class TestResolveStopIdentity:
    """Tests for the combined resolution order."""

    def test_code_used_for_both(self):
        assert resolve_stop_identity("4521", "S1") == StopIdentity(code="4521", stop_id=4521)

    def test_padded_code_kept_for_display(self):
        assert resolve_stop_identity(" 4521", "S1") == StopIdentity(code=" 4521", stop_id=4521)

    def test_empty_code_fails_on_numeric_id(self):
        """The display code could fall back to the ID, but the numeric ID only comes from the code."""
        assert resolve_stop_code("", "4521") == "4521"
        with pytest.raises(InvalidStopCodeError) as exc_info:
            resolve_stop_identity("", "4521")
        assert exc_info.value.code == ""

    def test_both_empty_reports_missing_identifier(self):
        with pytest.raises(MissingStopIdentifierError):
            resolve_stop_identity(None, "")


class TestStopRecord:
    """Tests for StopRecord.from_gtfs()."""

    def test_from_gtfs(self):
        stop = StopRecord.from_gtfs({"stop_id": "S1", "stop_name": "Laurier", "stop_code": "1234"})
        assert stop == StopRecord(id="S1", name="Laurier", code="1234")

    def test_from_gtfs_empty_code(self):
        stop = StopRecord.from_gtfs({"stop_id": "S1", "stop_name": "Laurier", "stop_code": ""})
        assert stop.code is None
