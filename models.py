from typing import Any

from pydantic import BaseModel, ConfigDict


class Diameter(BaseModel):
    estimated_diameter_min: float = 0.0
    estimated_diameter_max: float = 0.0


class EstimatedDiameter(BaseModel):
    kilometers: Diameter = Diameter()
    meters: Diameter = Diameter()
    miles: Diameter = Diameter()
    feet: Diameter = Diameter()


class RelativeVelocity(BaseModel):
    kilometers_per_second: str = ""
    kilometers_per_hour: str = ""
    miles_per_hour: str = ""


class MissDistance(BaseModel):
    astronomical: str = ""
    lunar: str = ""
    kilometers: str = ""
    miles: str = ""


class CloseApproach(BaseModel):
    # kept as the raw feed string, parsed when grouping
    close_approach_date: str = ""
    epoch_date_close_approach: int | None = None
    relative_velocity: RelativeVelocity = RelativeVelocity()
    miss_distance: MissDistance = MissDistance()
    orbiting_body: str = ""


class TrackedObject(BaseModel):
    """
    One near-Earth object close approach as returned by the NeoWs feed.
    Identity is neo_reference_id.
    """
    model_config = ConfigDict(frozen=True)

    neo_reference_id: str
    name: str = ""
    nasa_jpl_url: str = ""
    absolute_magnitude_h: float | None = None
    estimated_diameter: EstimatedDiameter = EstimatedDiameter()
    is_potentially_hazardous_asteroid: bool = False
    close_approach_data: list[CloseApproach] = []


class FeedPage(BaseModel):
    """Parsed response from /neo/rest/v1/feed. Keys of near_earth_objects are YYYY-MM-DD."""
    element_count: int = 0
    near_earth_objects: dict[str, list[Any] | None] = {}


if __name__ == "__main__":
    example = TrackedObject(
        neo_reference_id="3542519",
        name="(2010 PK9)",
        nasa_jpl_url="http://ssd.jpl.nasa.gov/sbdb.cgi?sstr=3542519",
        is_potentially_hazardous_asteroid=True,
        close_approach_data=[CloseApproach(close_approach_date="2016-09-08", orbiting_body="Earth")],
    )
    print(example.model_dump_json())
