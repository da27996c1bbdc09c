"""
Append-only alert log (JSONL). Trims to last 24h when file exceeds 100KB.
"""
from __future__ import annotations

import json
import os
from datetime import datetime, timedelta, timezone

from models import TrackedObject

LOG_PATH = os.environ.get("NEOWATCH_ALERTS_PATH", "data/alerts.jsonl")
MAX_FILE_BYTES = 100 * 1024  # 100KB
KEEP_LAST_N_WHEN_EMPTY = 100


def _ensure_dir(path: str) -> None:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)


def _alert_to_line(obj: TrackedObject, message: str, now: datetime) -> str:
    approach_date = obj.close_approach_data[0].close_approach_date if obj.close_approach_data else None
    d = {
        "neo_reference_id": obj.neo_reference_id,
        "name": obj.name,
        "approach_date": approach_date,
        "message": message,
        "timestamp": now.isoformat(),
    }
    return json.dumps(d, ensure_ascii=False) + "\n"


def _parse_line(line: str) -> dict | None:
    line = line.strip()
    if not line:
        return None
    try:
        return json.loads(line)
    except json.JSONDecodeError:
        return None


def _parse_ts(d: dict) -> datetime | None:
    raw = d.get("timestamp")
    if not raw:
        return None
    try:
        ts = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except (ValueError, TypeError, AttributeError):
        return None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


def _trim(path: str, now: datetime) -> None:
    """Rewrite keeping only alerts from the last 24h (or the last KEEP_LAST_N_WHEN_EMPTY lines)."""
    cutoff = now - timedelta(hours=24)
    with open(path, "r", encoding="utf-8") as f:
        all_lines = [ln.rstrip("\n") for ln in f if ln.strip()]
    kept: list[str] = []
    for line in all_lines:
        d = _parse_line(line)
        if not d:
            continue
        ts = _parse_ts(d)
        if ts and ts >= cutoff:
            kept.append(line)
    if not kept:
        kept = all_lines[-KEEP_LAST_N_WHEN_EMPTY:]
    with open(path, "w", encoding="utf-8") as f:
        for line in kept:
            f.write(line + "\n")


def append_alerts(alerts: list[tuple[TrackedObject, str]], path: str | None = None) -> None:
    """Append (object, message) pairs to the log. If file size > 100KB, trim to the last 24h."""
    if not alerts:
        return
    path = path or LOG_PATH
    now = datetime.now(timezone.utc)
    _ensure_dir(path)
    with open(path, "a", encoding="utf-8") as f:
        for obj, message in alerts:
            f.write(_alert_to_line(obj, message, now))
    if os.path.getsize(path) > MAX_FILE_BYTES:
        _trim(path, now)


def read_last_alerts(limit: int = 200, path: str | None = None) -> list[dict]:
    """Read log file and return the last `limit` alerts as list of dicts (newest first)."""
    path = path or LOG_PATH
    if not os.path.exists(path):
        return []
    with open(path, "r", encoding="utf-8") as f:
        lines = [line for line in f if line.strip()]
    out: list[dict] = []
    for line in reversed(lines[-limit:]):
        d = _parse_line(line)
        if d:
            out.append(d)
    return out
