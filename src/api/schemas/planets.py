"""Request models for planet lookups."""

from pydantic import BaseModel, Field, field_validator

from src.api.constants import MAX_PLANET_ID


class PlanetLookupRequest(BaseModel):
    """Body of ``POST /planet``.

    Numeric strings such as ``"3"`` are accepted, since HTML form values arrive
    as text. Booleans, fractions, negative numbers and integers too large for
    the store are rejected before the store is queried.
    """

    id: int = Field(
        ...,
        ge=0,
        le=MAX_PLANET_ID,
        description="Value of the planet's id field",
        examples=[3],
    )

    @field_validator("id", mode="before")
    @classmethod
    def reject_bool(cls, v: object) -> object:
        """Reject booleans, which would otherwise coerce to 0 or 1."""
        if isinstance(v, bool):
            msg = "id must be an integer, not a boolean"
            raise ValueError(msg)  # noqa: TRY004 - pydantic expects ValueError
        return v
