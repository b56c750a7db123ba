"""
Eventmaster Form Parsing Golden Tests

🔒 GOLDEN: These tests document how HTML form fields become queries and
   events.

Usage:
    pytest tests/unit/golden -v
"""
import pytest

from microservices.eventmaster_service.errors import (
    DecodeError, NotFoundError, OperationError, StoreError, ValidationError,
)
from microservices.eventmaster_service.models import UNBOUNDED
from microservices.eventmaster_service.ui_routes import (
    build_event,
    build_query,
    format_time,
    http_status_for,
    parse_date_bound,
    parse_event_time,
    split_tags,
    to_json,
)

pytestmark = [pytest.mark.unit, pytest.mark.golden]


class TestParseDateBoundChar:
    """Characterization: query form date bounds"""

    def test_empty_is_unbounded(self):
        assert parse_date_bound("", "startDate") == UNBOUNDED

    def test_date_is_utc_midnight(self):
        assert parse_date_bound("2023-01-01", "startDate") == 1672531200

    @pytest.mark.parametrize("value", [
        "01/02/2023", "2023-13-01", "yesterday", "2023-1-1", "2023-01-1", " 2023-01-01",
    ])
    def test_malformed_date_raises_validation_error(self, value):
        with pytest.raises(ValidationError) as exc_info:
            parse_date_bound(value, "endDate")
        assert "endDate" in str(exc_info.value)


class TestParseEventTimeChar:
    """Characterization: create form date + time"""

    def test_date_and_minutes(self):
        assert parse_event_time("2023-01-01", "00:00") == 1672531200
        assert parse_event_time("2023-01-01", "01:30") == 1672531200 + 5400

    def test_seconds_accepted(self):
        assert parse_event_time("2023-01-01", "00:00:07") == 1672531207

    def test_empty_date_rejected(self):
        with pytest.raises(ValidationError, match="date cannot be empty"):
            parse_event_time("", "10:00")

    def test_empty_time_rejected(self):
        with pytest.raises(ValidationError, match="time cannot be empty"):
            parse_event_time("2023-01-01", "")

    def test_malformed_time_rejected(self):
        with pytest.raises(ValidationError):
            parse_event_time("2023-01-01", "noon")

    @pytest.mark.parametrize("date, time_of_day", [
        ("2023-1-1", "10:00"),
        ("2023-01-01", "9:05"),
        ("2023-01-01", "10:5"),
    ])
    def test_unpadded_fields_rejected(self, date, time_of_day):
        """CHAR: Every date and time field must be zero padded"""
        with pytest.raises(ValidationError):
            parse_event_time(date, time_of_day)


class TestSplitTagsChar:
    """Characterization: comma separated tags"""

    def test_empty_string_gives_no_tags(self):
        assert split_tags("") == []

    def test_splits_and_strips(self):
        assert split_tags("a, b ,c") == ["a", "b", "c"]

    def test_drops_empty_entries(self):
        assert split_tags("a,,b, ,") == ["a", "b"]


class TestBuildQueryChar:
    """Characterization: query form -> Query"""

    def test_empty_form_matches_everything(self):
        query = build_query("", "", "", "", "")
        assert query.dc == []
        assert query.host == []
        assert query.topic_name == []
        assert query.time_start == UNBOUNDED
        assert query.time_end == UNBOUNDED

    def test_filled_form(self):
        query = build_query("us-east-1", "web-01", "deploy", "2023-01-01", "2023-01-02")
        assert query.dc == ["us-east-1"]
        assert query.host == ["web-01"]
        assert query.topic_name == ["deploy"]
        assert query.time_start == 1672531200
        assert query.time_end == 1672617600


class TestBuildEventChar:
    """Characterization: create form -> UnaddedEvent"""

    def test_builds_event(self):
        event = build_event(
            topic="deploy", dc="us-east-1", tags="release, api", host="web-01",
            user="alice", data='{"version": "2"}', date="2023-01-01", time_of_day="00:00",
        )
        assert event.topic_name == "deploy"
        assert event.dc == "us-east-1"
        assert event.tags == ["release", "api"]
        assert event.host == "web-01"
        assert event.user == "alice"
        assert event.data == {"version": "2"}
        assert event.event_time == 1672531200

    def test_empty_data_is_empty_document(self):
        event = build_event("t", "d", "", "", "", "", "2023-01-01", "00:00")
        assert event.data == {}

    def test_malformed_data_raises_decode_error(self):
        with pytest.raises(DecodeError):
            build_event("t", "d", "", "", "", "{bad", "2023-01-01", "00:00")


class TestHttpStatusChar:
    """Characterization: error class -> HTTP status"""

    @pytest.mark.parametrize("error, status", [
        (ValidationError("x"), 400),
        (DecodeError("x"), 400),
        (NotFoundError("x"), 404),
        (StoreError("x"), 500),
        (RuntimeError("x"), 500),
        (OperationError("ui_add_event", DecodeError("x")), 400),
    ])
    def test_status_mapping(self, error, status):
        assert http_status_for(error) == status


class TestTemplateFiltersChar:
    """Characterization: template filters"""

    def test_format_time(self):
        assert format_time(1672531200) == "2023-01-01 00:00:00 UTC"

    def test_format_time_unbounded_is_blank(self):
        assert format_time(UNBOUNDED) == ""

    def test_to_json_sorts_keys(self):
        assert to_json({"b": 1, "a": 2}) == '{"a": 2, "b": 1}'
