"""
Format a TrackedObject as a short alert message.
"""
from __future__ import annotations

import random
from datetime import datetime

from models import TrackedObject
from pipeline.window import NASA_DATE_FORMAT

QUALIFYING_ADJECTIVES = [
    "harmless",
    "nasty",
    "threatening",
    "dangerous",
    "critical",
    "terrible",
    "bloody",
    "destructive",
    "deadly",
    "fatal",
]


def readable_name(name: str) -> str:
    """Designation between the first pair of parentheses, e.g. '(2010 PK9)' -> '2010 PK9'."""
    i = name.find("(")
    if i >= 0:
        j = name.find(")", i)
        if j >= 0:
            inner = name[i + 1:j]
            if inner:
                return inner
    return name


def readable_speed(speed: str) -> str:
    """Shorten long decimals to one digit: '12.345678' -> '12.3'."""
    parts = speed.split(".")
    if len(parts) == 2 and len(parts[1]) > 2:
        return f"{parts[0]}.{parts[1][:1]}"
    return speed


def format_alert(obj: TrackedObject, body: str, rng: random.Random | None = None) -> str:
    """Turn one object into the alert line. The object must have at least one close approach."""
    rng = rng or random
    approach = obj.close_approach_data[0]
    approach_date = datetime.strptime(approach.close_approach_date, NASA_DATE_FORMAT)
    km = obj.estimated_diameter.kilometers
    diameter = (km.estimated_diameter_min + km.estimated_diameter_max) / 2
    month = approach_date.strftime("%B")[:3]
    return (
        f"🔭 a #{rng.choice(QUALIFYING_ADJECTIVES)} #asteroid {readable_name(obj.name)}, "
        f"Ø ~{diameter:.2f} km and ~{readable_speed(approach.relative_velocity.kilometers_per_second)} km/s "
        f"is coming close to #{body} on {month}. {approach_date.day:02d} (details here {obj.nasa_jpl_url})"
    )


if __name__ == "__main__":
    from models import CloseApproach, Diameter, EstimatedDiameter, RelativeVelocity

    o = TrackedObject(
        neo_reference_id="3542519",
        name="(2010 PK9)",
        nasa_jpl_url="http://ssd.jpl.nasa.gov/sbdb.cgi?sstr=3542519",
        is_potentially_hazardous_asteroid=True,
        estimated_diameter=EstimatedDiameter(kilometers=Diameter(estimated_diameter_min=0.1, estimated_diameter_max=0.3)),
        close_approach_data=[
            CloseApproach(
                close_approach_date="2016-09-08",
                relative_velocity=RelativeVelocity(kilometers_per_second="12.345678"),
                orbiting_body="Earth",
            )
        ],
    )
    print(format_alert(o, "Earth"))
