"""Core SDK: configuration, event writing and postings."""

import json
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

_LOG_DIR: Optional[Path] = None
_PROJECT_ID: Optional[str] = None

EVENTS_FILE = "events.jsonl"
POSTINGS_FILE = "postings.jsonl"


def init(project_id: str, log_dir: Path) -> None:
    """Configure the SDK. Must be called before emitting events."""
    global _LOG_DIR, _PROJECT_ID
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    _LOG_DIR = log_dir
    _PROJECT_ID = project_id


def is_initialized() -> bool:
    return _LOG_DIR is not None


def new_id() -> str:
    """Return a fresh identifier for events and exchanges."""
    return str(uuid.uuid4())


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _write_jsonl(path: Path, data: Dict[str, Any]) -> None:
    with open(path, "a", encoding="utf-8") as f:
        f.write(json.dumps(data, ensure_ascii=False) + "\n")


def _require_log_dir() -> Path:
    if _LOG_DIR is None:
        raise RuntimeError("controllog.init() must be called before emitting events")
    return _LOG_DIR


def event(
    kind: str,
    payload: Optional[Dict[str, Any]] = None,
    *,
    project_id: Optional[str] = None,
    run_id: Optional[str] = None,
    task_id: Optional[str] = None,
    agent_id: Optional[str] = None,
    event_id: Optional[str] = None,
    postings: Optional[List[Dict[str, Any]]] = None,
) -> str:
    """Write an event (and any postings attached to it).

    Returns the event id so callers can correlate follow-up events.
    """
    log_dir = _require_log_dir()
    event_id = event_id or new_id()

    record = {
        "event_id": event_id,
        "kind": kind,
        "ts": _now(),
        "project_id": project_id or _PROJECT_ID,
        "run_id": run_id,
        "task_id": task_id,
        "agent_id": agent_id,
        "payload_json": payload or {},
    }
    _write_jsonl(log_dir / EVENTS_FILE, record)

    for posting in postings or []:
        post(event_id=event_id, **posting)

    return event_id


def post(
    *,
    event_id: str,
    account_type: str,
    account_id: str,
    unit: str,
    delta_numeric: float,
    dims: Optional[Dict[str, Any]] = None,
) -> None:
    """Write a single posting line tied to an event."""
    log_dir = _require_log_dir()
    record = {
        "posting_id": new_id(),
        "event_id": event_id,
        "account_type": account_type,
        "account_id": account_id,
        "unit": unit,
        "delta_numeric": delta_numeric,
        "dims_json": dims or {},
    }
    _write_jsonl(log_dir / POSTINGS_FILE, record)
