import pytest

from models import CloseApproach, Diameter, EstimatedDiameter, RelativeVelocity, TrackedObject


@pytest.fixture
def make_object():
    def _make(
        neo_id: str,
        approach_date: str = "2016-09-08",
        hazardous: bool = True,
        body: str = "Earth",
        name: str | None = None,
        approaches: list[CloseApproach] | None = None,
    ) -> TrackedObject:
        if approaches is None:
            approaches = [
                CloseApproach(
                    close_approach_date=approach_date,
                    relative_velocity=RelativeVelocity(kilometers_per_second="12.345678"),
                    orbiting_body=body,
                )
            ]
        return TrackedObject(
            neo_reference_id=neo_id,
            name=name if name is not None else f"({neo_id})",
            nasa_jpl_url=f"http://ssd.jpl.nasa.gov/sbdb.cgi?sstr={neo_id}",
            is_potentially_hazardous_asteroid=hazardous,
            estimated_diameter=EstimatedDiameter(
                kilometers=Diameter(estimated_diameter_min=0.1, estimated_diameter_max=0.3)
            ),
            close_approach_data=approaches,
        )

    return _make
