"""Planet lookup endpoint."""

from fastapi import APIRouter
from loguru import logger

from src.api.schemas.planets import PlanetLookupRequest
from src.core.exceptions import NotFoundError
from src.infrastructure.database import Planet, PlanetRepositoryDep

router = APIRouter(tags=["planets"])


@router.post(
    "/planet",
    response_model=Planet,
    response_model_exclude_unset=True,
    responses={
        404: {"description": "No planet with this id", "content": {"text/plain": {}}},
        422: {"description": "Invalid planet id", "content": {"text/plain": {}}},
        500: {"description": "Store unavailable", "content": {"text/plain": {}}},
    },
)
async def get_planet(
    body: PlanetLookupRequest, repository: PlanetRepositoryDep
) -> Planet:
    """Look up a planet by its id field.

    Args:
        body: Lookup request carrying the planet id.
        repository: Planet repository injected per request.

    Returns:
        Planet: The stored record, with only the fields it actually has.

    Raises:
        NotFoundError: If no record matches.
    """
    planet = await repository.find_by_planet_id(body.id)
    if planet is None:
        raise NotFoundError("Planet not found.", context={"planet_id": body.id})

    logger.debug("Found planet {} for id {}", planet.name, body.id)
    return planet
