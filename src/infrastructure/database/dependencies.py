"""FastAPI dependency injection for the document store.

The store client lives on ``app.state`` (set by the application lifespan);
these dependencies read it from the current request so handlers never touch a
module-level singleton. Tests replace ``get_planet_repository`` through
``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends, Request

from src.infrastructure.database.client import MongoManager
from src.infrastructure.database.repository import PlanetRepository


def get_mongo_manager(request: Request) -> MongoManager:
    """Return the store client owned by the running application.

    Args:
        request: The current request.

    Returns:
        MongoManager: The application's store client handle.
    """
    manager: MongoManager = request.app.state.mongo
    return manager


def get_planet_repository(
    manager: Annotated[MongoManager, Depends(get_mongo_manager)],
) -> PlanetRepository:
    """Provide a planet repository bound to the application's collection.

    Args:
        manager: The application's store client handle.

    Returns:
        PlanetRepository: Repository over the planets collection.
    """
    return PlanetRepository(manager.planets)


# Type alias for cleaner dependency injection
PlanetRepositoryDep = Annotated[PlanetRepository, Depends(get_planet_repository)]
