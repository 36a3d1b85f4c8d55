"""Initial cities and points of interest loaded on startup."""
from typing import List

from cityinfo.domain.entities.city import City
from cityinfo.domain.entities.point_of_interest import PointOfInterest


def build_seed_cities() -> List[City]:
    """Fresh seed entities (new objects on every call)."""
    return [
        City(
            id=1,
            name="New York City",
            description="The one with that big park.",
            points_of_interest=[
                PointOfInterest(
                    id=1,
                    city_id=1,
                    name="Central Park",
                    description="The most visited urban park in the United States.",
                ),
                PointOfInterest(
                    id=2,
                    city_id=1,
                    name="Empire State Building",
                    description="A 102-story skyscraper located in Midtown Manhattan.",
                ),
            ],
        ),
        City(
            id=2,
            name="Antwerp",
            description="The one with the cathedral that was never really finished.",
            points_of_interest=[
                PointOfInterest(
                    id=3,
                    city_id=2,
                    name="Cathedral of Our Lady",
                    description="A Gothic style cathedral, conceived by architects Jan and Pieter Appelmans.",
                ),
                PointOfInterest(
                    id=4,
                    city_id=2,
                    name="Antwerp Central Station",
                    description="The finest example of railway architecture in Belgium.",
                ),
            ],
        ),
        City(
            id=3,
            name="Paris",
            description="The one with that big tower.",
            points_of_interest=[
                PointOfInterest(
                    id=5,
                    city_id=3,
                    name="Eiffel Tower",
                    description="A wrought iron lattice tower on the Champ de Mars, named after engineer Gustave Eiffel.",
                ),
                PointOfInterest(
                    id=6,
                    city_id=3,
                    name="The Louvre",
                    description="The world's largest museum.",
                ),
            ],
        ),
    ]
