"""MongoDB connection.

Thin lifecycle wrapper around motor's AsyncIOMotorClient satisfying
ConnectionProtocol. The engine creates one per connect() call and closes it
on disconnect().

Usage:
    connection = MongoConnection("mongodb://localhost:27017/test")
    database = await connection.connect()
    ...
    await connection.close()
"""

from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from mongo_fixtures.logging import get_component_logger
from mongo_fixtures.protocols import LoggerProtocol

# Database selected when neither the caller nor the URI names one
DEFAULT_DATABASE = "test"


class MongoConnection:
    """MongoDB session satisfying ConnectionProtocol."""

    def __init__(
        self,
        uri: str,
        options: Optional[Dict[str, Any]] = None,
        logger: Optional[LoggerProtocol] = None,
    ):
        """Initialize connection.

        Args:
            uri: MongoDB connection string
            options: Keyword options passed to AsyncIOMotorClient
            logger: Logger for DI (uses context logger if not provided)
        """
        self.uri = uri
        self.options = dict(options or {})
        self._logger = get_component_logger("MongoConnection", logger)
        self._client: Optional[AsyncIOMotorClient] = None

    async def connect(self, db_name: Optional[str] = None) -> AsyncIOMotorDatabase:
        """Open the client and select a database.

        The server is pinged so a bad URI fails here rather than on the
        first write.

        Args:
            db_name: Database name; defaults to the URI's, then 'test'

        Returns:
            Selected database
        """
        client = AsyncIOMotorClient(self.uri, **self.options)
        try:
            await client.admin.command("ping")
        except Exception:
            client.close()
            raise
        self._client = client

        if db_name:
            database = client.get_database(db_name)
        else:
            database = client.get_default_database(default=DEFAULT_DATABASE)
        self._logger.debug("mongo_connected", database=database.name)
        return database

    async def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            self._logger.debug("mongo_closed")


__all__ = [
    "DEFAULT_DATABASE",
    "MongoConnection",
]
