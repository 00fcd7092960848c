"""Document model for planet records.

Records are owned by the document store and only ever read by this service.
The store enforces no schema, so every attribute is optional, numbers stored
in text attributes are read as text, and unknown fields (including the
store's own ``_id`` and ``__v``) are ignored.
"""

from pydantic import BaseModel, ConfigDict, Field


class Planet(BaseModel):
    """A planet record as stored in the ``planets`` collection."""

    model_config = ConfigDict(
        extra="ignore",
        coerce_numbers_to_str=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Earth",
                    "id": 3,
                    "description": "The third planet from the Sun.",
                    "image": "https://example.com/images/earth.png",
                    "velocity": "29.78 km/s",
                    "distance": "149.6 million km",
                }
            ]
        },
    )

    name: str | None = Field(default=None, description="Planet name")
    id: int | None = Field(default=None, description="Lookup key, not unique")
    description: str | None = Field(default=None, description="Free-text summary")
    image: str | None = Field(default=None, description="Image reference or URL")
    velocity: str | None = Field(default=None, description="Orbital velocity")
    distance: str | None = Field(default=None, description="Distance from the Sun")
