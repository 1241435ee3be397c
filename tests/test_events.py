"""
Tests for the UI event logging utility.
"""

import json
import logging
from datetime import datetime, timezone

import pytest

from recipebook.events import log_event, log_navigation, log_recipe_added, log_recipe_viewed


@pytest.fixture
def event_file(tmp_path, monkeypatch):
    path = tmp_path / "logs" / "events.jsonl"
    monkeypatch.setenv("RECIPEBOOK_EVENT_LOG", str(path))
    return path


def read_records(path):
    with open(path, "r", encoding="utf-8") as f:
        return [json.loads(line) for line in f]


class TestEventLogging:
    """Test event logging functionality."""

    def test_log_event_writes_valid_json(self, event_file):
        """log_event appends one JSON line with ts, event, session_id and payload."""
        log_event("test_event", session_id="test_session_123", payload={"key": "value", "number": 42})

        records = read_records(event_file)
        assert len(records) == 1
        record = records[0]
        assert record["event"] == "test_event"
        assert record["session_id"] == "test_session_123"
        assert record["payload"] == {"key": "value", "number": 42}

        ts = datetime.fromisoformat(record["ts"])
        assert abs((datetime.now(timezone.utc) - ts).total_seconds()) < 5

    def test_log_event_handles_none_values(self, event_file):
        log_event("test_event", session_id=None, payload=None)

        record = read_records(event_file)[0]
        assert record["session_id"] is None
        assert record["payload"] == {}

    def test_no_file_when_unconfigured(self, tmp_path, monkeypatch, caplog):
        """Without RECIPEBOOK_EVENT_LOG, events only go to the logger."""
        monkeypatch.delenv("RECIPEBOOK_EVENT_LOG", raising=False)
        monkeypatch.chdir(tmp_path)

        with caplog.at_level(logging.DEBUG, logger="recipebook.events"):
            log_event("test_event", session_id="abc", payload={"x": 1})

        assert list(tmp_path.iterdir()) == []
        assert "test_event" in caplog.text

    def test_unwritable_path_never_raises(self, tmp_path, monkeypatch):
        """A directory in place of the event file is swallowed."""
        monkeypatch.setenv("RECIPEBOOK_EVENT_LOG", str(tmp_path))
        try:
            log_event("test_event", session_id="abc", payload={})
        except Exception as exc:
            pytest.fail(f"log_event should not raise, but raised: {exc}")


class TestEventHelpers:
    """Test the per-event helper functions."""

    def test_log_recipe_viewed(self, event_file):
        log_recipe_viewed("s1", recipe_id=99, found=False)
        record = read_records(event_file)[0]
        assert record["event"] == "recipe_viewed"
        assert record["payload"] == {"recipe_id": 99, "found": False}

    def test_log_recipe_added(self, event_file):
        log_recipe_added("s1", recipe_id=3, category="Main Course", ingredient_count=1, rating=2)
        record = read_records(event_file)[0]
        assert record["event"] == "recipe_added"
        assert record["payload"] == {
            "recipe_id": 3,
            "category": "Main Course",
            "ingredient_count": 1,
            "rating": 2,
        }

    def test_log_navigation(self, event_file):
        log_navigation("s1", "detail/2")
        assert read_records(event_file)[0]["payload"] == {"route": "detail/2"}

    def test_app_flow_emits_events(self, event_file):
        """RecipeApp logs navigation, views and additions through its listeners."""
        from recipebook.app import RecipeApp

        app = RecipeApp(session_id="flow")
        app.open_recipe(1)
        app.go_back()
        form = app.open_add()
        form.name = "Tea"
        form.ingredient_name = "Water"
        form.ingredient_amount = "1 cup"
        form.add_ingredient_draft()
        app.submit_add()

        events = [r["event"] for r in read_records(event_file)]
        assert events == [
            "navigated",
            "recipe_viewed",
            "navigated",
            "navigated",
            "recipe_added",
            "navigated",
        ]
        assert all(r["session_id"] == "flow" for r in read_records(event_file))
