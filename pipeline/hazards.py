"""
Selects potentially hazardous objects approaching one orbiting body and groups them by approach date.
"""
from datetime import datetime, timezone

from errors import DateParseError
from models import TrackedObject
from pipeline.window import NASA_DATE_FORMAT


def parse_approach_timestamp(value: str) -> int:
    """Parse a YYYY-MM-DD close approach date as UTC midnight, in nanoseconds since the epoch."""
    try:
        parsed = datetime.strptime(value, NASA_DATE_FORMAT)
    except (ValueError, TypeError) as e:
        raise DateParseError(value) from e
    seconds = int(parsed.replace(tzinfo=timezone.utc).timestamp())
    return seconds * 1_000_000_000


def is_hazard_for(obj: TrackedObject, target_body: str) -> bool:
    """Hazardous, with a first close approach whose orbiting body is exactly target_body."""
    if not obj.is_potentially_hazardous_asteroid:
        return False
    if not obj.close_approach_data:
        return False
    return obj.close_approach_data[0].orbiting_body == target_body


def select_hazardous(batch: list[TrackedObject], target_body: str) -> dict[int, list[TrackedObject]]:
    """
    Group the hazardous objects of batch by the timestamp of their first close approach.
    Objects that do not qualify are skipped. Within a group objects keep their batch order.
    Raises DateParseError if a qualifying object has a malformed date.
    """
    groups: dict[int, list[TrackedObject]] = {}
    for obj in batch:
        if not is_hazard_for(obj, target_body):
            continue
        timestamp = parse_approach_timestamp(obj.close_approach_data[0].close_approach_date)
        groups.setdefault(timestamp, []).append(obj)
    return groups
