"""
Novelty detector: diffs a fetched batch against the observed set.
"""
from models import TrackedObject


def merge(
    previous: list[TrackedObject],
    current: list[TrackedObject],
) -> tuple[list[TrackedObject], list[TrackedObject]]:
    """
    Return (merged, novel).

    merged is previous followed by every object of current whose neo_reference_id was not seen yet,
    in current's order. novel is exactly those appended objects. previous is not modified.
    """
    seen: set[str] = {o.neo_reference_id for o in previous}
    merged: list[TrackedObject] = list(previous)
    novel: list[TrackedObject] = []
    for obj in current:
        if obj.neo_reference_id in seen:
            continue
        seen.add(obj.neo_reference_id)
        merged.append(obj)
        novel.append(obj)
    return merged, novel


if __name__ == "__main__":
    base = [TrackedObject(neo_reference_id="3542519", name="(2010 PK9)")]
    merged, first_new = merge([], base)
    _, second_new = merge(merged, base)
    print("First fetch new objects:", len(first_new))
    print("Second fetch new objects:", len(second_new))
