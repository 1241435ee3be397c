# recipebook/events.py
"""
UI event logging for the recipe book.

Responsibilities:
- Provide a single log_event(...) function that:
  - Emits every event on the module logger at DEBUG level.
  - Appends a JSONL record to the configured event file, if any
    (RECIPEBOOK_EVENT_LOG).
  - Never raises exceptions (event logging is strictly non-blocking).

- Provide small helper functions for the app's event types:
  - log_recipe_viewed(...)
  - log_recipe_added(...)
  - log_navigation(...)
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from .config import AppConfig

logger = logging.getLogger(__name__)


def _event_log_file() -> Optional[Path]:
    return AppConfig.get_event_log_path()


def _write_to_file(path: Path, record: Dict[str, Any]) -> None:
    """
    Append a single JSON record to `path` as JSONL.
    Never raise exceptions.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")
    except Exception as exc:
        logger.debug("Failed to write event to %s: %s", path, exc)


def log_event(
    event: str,
    session_id: Optional[str],
    payload: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Core event logger.

    Behavior:
    - Build a record with keys: ts, event, session_id, payload.
    - Log the record at DEBUG level.
    - If an event file is configured, append the record to it as one JSON line.
    - Never raise exceptions.
    """
    record = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "event": event,
        "session_id": session_id,
        "payload": payload or {},
    }
    logger.debug("event %s session=%s payload=%s", event, session_id, record["payload"])

    try:
        path = _event_log_file()
    except Exception as exc:
        logger.debug("Could not resolve event log path: %s", exc)
        return
    if path is not None:
        _write_to_file(path, record)


# ---------------------------------------------------------------------------
# Helper functions for common event types
# ---------------------------------------------------------------------------

def log_recipe_viewed(session_id: Optional[str], recipe_id: int, found: bool) -> None:
    """
    Log a recipe_viewed event.

    payload:
    {
        "recipe_id": 3,
        "found": true     # false when the detail screen had nothing to show
    }
    """
    log_event("recipe_viewed", session_id, {"recipe_id": recipe_id, "found": found})


def log_recipe_added(
    session_id: Optional[str],
    recipe_id: int,
    category: str,
    ingredient_count: int,
    rating: int,
) -> None:
    """
    Log a recipe_added event.

    payload:
    {
        "recipe_id": 3,
        "category": "Main Course",
        "ingredient_count": 1,
        "rating": 2
    }
    """
    payload = {
        "recipe_id": recipe_id,
        "category": category,
        "ingredient_count": ingredient_count,
        "rating": rating,
    }
    log_event("recipe_added", session_id, payload)


def log_navigation(session_id: Optional[str], route: str) -> None:
    """Log a navigated event with the route name ("list", "detail/3", "add")."""
    log_event("navigated", session_id, {"route": route})
