"""Document store access for planet records.

Core components:
- **client**: Store client lifecycle owned by the application
- **models**: Pydantic model of a planet record
- **repository**: Read-only lookups by planet id
- **dependencies**: FastAPI dependency injection helpers
"""

from src.infrastructure.database.client import MongoManager, create_mongo_client
from src.infrastructure.database.dependencies import (
    PlanetRepositoryDep,
    get_mongo_manager,
    get_planet_repository,
)
from src.infrastructure.database.models import Planet
from src.infrastructure.database.repository import PlanetRepository

__all__ = [
    "MongoManager",
    "Planet",
    "PlanetRepository",
    "PlanetRepositoryDep",
    "create_mongo_client",
    "get_mongo_manager",
    "get_planet_repository",
]
