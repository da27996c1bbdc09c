"""
Deterministic ordering of timestamp groups.
"""
from models import TrackedObject


def ordered_timestamps(groups: dict[int, list[TrackedObject]]) -> list[int]:
    """All group keys, ascending. Does not depend on the mapping's iteration order."""
    keys = list(groups.keys())
    keys.sort()
    return keys


def flatten(groups: dict[int, list[TrackedObject]]) -> list[TrackedObject]:
    """Objects of every group, earliest timestamp first, keeping each group's own order."""
    objects: list[TrackedObject] = []
    for key in ordered_timestamps(groups):
        objects.extend(groups[key])
    return objects
