"""Read-only repository for planet records."""

from typing import Any

from loguru import logger
from pymongo.asynchronous.collection import AsyncCollection
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from src.core.exceptions import StoreError
from src.infrastructure.database.models import Planet

# Store-internal fields never leave the repository
PLANET_PROJECTION = {"_id": False, "__v": False}


class PlanetRepository:
    """Looks up planet records by their ``id`` field.

    Args:
        collection: The collection holding planet records.
    """

    def __init__(self, collection: AsyncCollection[dict[str, Any]]) -> None:
        self.collection = collection

    async def find_by_planet_id(self, planet_id: int) -> Planet | None:
        """Retrieve the first planet whose ``id`` field matches.

        The ``id`` field carries no uniqueness constraint; when several
        documents match, the store decides which one comes first.

        Args:
            planet_id: Value of the ``id`` field to match.

        Returns:
            Planet | None: The record if found, None otherwise.

        Raises:
            StoreError: If the query fails or the stored document cannot be
                read as a planet.
        """
        logger.debug("Fetching planet by id: {}", planet_id)

        try:
            document = await self.collection.find_one(
                {"id": planet_id}, projection=PLANET_PROJECTION
            )
        except PyMongoError as e:
            raise StoreError(
                "Error retrieving planet data.",
                context={"planet_id": planet_id},
                cause=e,
            ) from e

        if document is None:
            logger.debug("Planet not found with id: {}", planet_id)
            return None

        try:
            return Planet.model_validate(document)
        except ValidationError as e:
            raise StoreError(
                "Error retrieving planet data.",
                context={"planet_id": planet_id},
                cause=e,
            ) from e
