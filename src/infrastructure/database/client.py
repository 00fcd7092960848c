"""Document store client lifecycle.

``MongoManager`` owns the single ``AsyncMongoClient`` of the process. The
application lifespan creates it, stores it on ``app.state`` and closes it on
shutdown; request handlers receive it through dependency injection.

The driver connects lazily and pools connections internally, so one client is
shared by all requests without extra locking.
"""

from typing import Any

from loguru import logger
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from src.core.config import DatabaseConfig


class MongoManager:
    """Owns the document store client and hands out the planets collection.

    Args:
        config: Database configuration.
        client: Optional pre-built client, mainly for tests.
    """

    def __init__(
        self,
        config: DatabaseConfig,
        client: AsyncMongoClient[dict[str, Any]] | None = None,
    ) -> None:
        self.config = config
        self._client = client

    @property
    def client(self) -> AsyncMongoClient[dict[str, Any]]:
        """Get or create the client.

        Returns:
            AsyncMongoClient: The driver client.
        """
        if self._client is None:
            self._client = create_mongo_client(self.config)
        return self._client

    @property
    def planets(self) -> AsyncCollection[dict[str, Any]]:
        """Collection holding planet records."""
        database = self.client[self.config.database_name]
        return database[self.config.collection_name]

    async def ping(self) -> tuple[bool, str | None]:
        """Check if the store answers.

        Returns:
            tuple[bool, str | None]: A tuple containing:
                - bool: True if the ping succeeded, False otherwise
                - str | None: Error message if the ping failed
        """
        try:
            await self.client.admin.command("ping")
        except PyMongoError as e:
            return False, str(e)
        else:
            return True, None

    async def close(self) -> None:
        """Close the client and its connection pool."""
        if self._client is not None:
            await self._client.close()
            logger.info("Document store client closed")
            self._client = None


def create_mongo_client(config: DatabaseConfig) -> AsyncMongoClient[dict[str, Any]]:
    """Create an async MongoDB client from configuration.

    Credentials are passed separately from the connection string and only
    when configured.

    Args:
        config: Database configuration.

    Returns:
        AsyncMongoClient: Configured client; no connection is made yet.
    """
    options: dict[str, Any] = {
        "serverSelectionTimeoutMS": config.server_selection_timeout_ms,
    }
    if config.mongo_username is not None:
        options["username"] = config.mongo_username
    if config.mongo_password is not None:
        options["password"] = config.mongo_password

    client: AsyncMongoClient[dict[str, Any]] = AsyncMongoClient(
        config.mongo_uri, **options
    )
    logger.info(
        "Created document store client - database: {}, collection: {}",
        config.database_name,
        config.collection_name,
    )
    return client
