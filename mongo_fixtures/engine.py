"""Fixture engine.

Owns the database session and drives the two public operations:

- load():   discover -> classify/filter -> bulk-load every data file
            concurrently -> barrier -> run every script concurrently
- unload(): discover -> classify/filter -> delete all documents from every
            data file's collection concurrently

Both discover through the same function, so they act on the same files.

Usage:
    fixtures = Fixtures(dir="tests/fixtures", filter="^users")
    await fixtures.connect("mongodb://localhost:27017/test")
    await fixtures.unload()
    await fixtures.load()
    await fixtures.disconnect()
"""

import asyncio
import os
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional

from pymongo.errors import OperationFailure

from mongo_fixtures.classifier import select_fixtures
from mongo_fixtures.config.constants import DEFAULT_FIXTURES_DIR, NAMESPACE_NOT_FOUND
from mongo_fixtures.database import MongoConnection
from mongo_fixtures.errors import MalformedFixtureError, PreconditionError
from mongo_fixtures.loader import load_documents
from mongo_fixtures.logging import NullLogger, get_component_logger
from mongo_fixtures.protocols import (
    ConnectionProtocol,
    ConnectionState,
    DatabaseProtocol,
    FixtureFile,
    FixtureKind,
    FixtureResolverProtocol,
    FixtureSet,
    LoadResult,
    LoggerProtocol,
    Success,
)
from mongo_fixtures.resolvers.registry import resolver_table
from mongo_fixtures.scripts import run_script

ConnectionFactory = Callable[[str, Dict[str, Any]], ConnectionProtocol]


@dataclass
class Session:
    """One open connection and the database selected on it."""
    connection: ConnectionProtocol
    database: DatabaseProtocol


def _list_files(directory: str) -> List[str]:
    with os.scandir(directory) as entries:
        return [entry.name for entry in entries if entry.is_file()]


class Fixtures:
    """Loads and unloads a directory of fixtures into MongoDB."""

    def __init__(
        self,
        dir: str = DEFAULT_FIXTURES_DIR,
        filter: Optional[str] = None,
        mute: bool = False,
        *,
        logger: Optional[LoggerProtocol] = None,
        resolvers: Optional[Mapping[str, FixtureResolverProtocol]] = None,
        connection_factory: Optional[ConnectionFactory] = None,
    ):
        """Initialize engine.

        Args:
            dir: Fixtures directory
            filter: Regex; only file names it matches take part
            mute: Suppress all logging
            logger: Logger for DI (uses context logger if not provided)
            resolvers: Extension -> resolver overrides for this engine
            connection_factory: Builds a connection from (uri, options);
                defaults to MongoConnection
        """
        self.fixture_set = FixtureSet(directory=dir, filter=filter, mute=mute)
        if mute:
            self._logger: LoggerProtocol = NullLogger()
        else:
            self._logger = get_component_logger("Fixtures", logger)
        self._resolvers = resolver_table(resolvers)
        self._connection_factory = connection_factory or self._mongo_connection
        self._session: Optional[Session] = None

        self._logger.info("fixtures_directory", directory=self.fixture_set.directory)
        if self.fixture_set.pattern is None:
            self._logger.info("filter_disabled")

    # =========================================================================
    # Connection lifecycle
    # =========================================================================

    @property
    def state(self) -> ConnectionState:
        if self._session is None:
            return ConnectionState.UNCONNECTED
        return ConnectionState.CONNECTED

    @property
    def database(self) -> Optional[DatabaseProtocol]:
        return self._session.database if self._session else None

    def _mongo_connection(self, uri: str, options: Dict[str, Any]) -> ConnectionProtocol:
        return MongoConnection(uri, options, logger=self._logger)

    async def connect(
        self,
        uri: str,
        options: Optional[Dict[str, Any]] = None,
        db_name: Optional[str] = None,
    ) -> "Fixtures":
        """Open the database session.

        Args:
            uri: MongoDB connection string
            options: Driver options
            db_name: Database to use; defaults to the one in the URI

        Returns:
            self, for chaining

        Raises:
            PreconditionError: If uri is empty or the engine is already connected
        """
        if not uri:
            raise PreconditionError("uri required")
        if self.state is ConnectionState.CONNECTED:
            raise PreconditionError("already connected; call disconnect() first")

        connection = self._connection_factory(uri, dict(options or {}))
        database = await connection.connect(db_name)
        self._session = Session(connection=connection, database=database)
        self._logger.info("using_database", database=database.name)
        return self

    async def disconnect(self) -> None:
        """Close the session. Does nothing when not connected."""
        if self._session is None:
            return
        session, self._session = self._session, None
        await session.connection.close()
        self._logger.info("disconnected")

    async def __aenter__(self) -> "Fixtures":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.disconnect()

    def _require_session(self, operation: str) -> Session:
        if self._session is None:
            raise PreconditionError(f"must call connect() before {operation}()")
        return self._session

    # =========================================================================
    # Discovery
    # =========================================================================

    async def discover(self) -> List[FixtureFile]:
        """List, filter and classify the fixtures directory."""
        names = await asyncio.to_thread(_list_files, self.fixture_set.directory)
        fixtures = select_fixtures(names, self.fixture_set, self._logger)
        for fixture in fixtures:
            if fixture.kind is FixtureKind.IGNORED:
                self._logger.debug("fixture_ignored", file=fixture.name)
        return fixtures

    def _resolver_for(self, fixture: FixtureFile) -> FixtureResolverProtocol:
        resolver = self._resolvers.get(fixture.extension)
        if resolver is None:
            raise MalformedFixtureError(
                str(fixture.path), fixture.collection, f"no resolver for {fixture.extension}"
            )
        return resolver

    async def _join(
        self,
        phase: str,
        fixtures: List[FixtureFile],
        tasks: List[Awaitable[Any]],
    ) -> List[Any]:
        """Wait for every task of a phase, then fail if any task failed.

        The first failure in directory order is re-raised unchanged.
        """
        results = await asyncio.gather(*tasks, return_exceptions=True)
        failures = [
            (fixture, result)
            for fixture, result in zip(fixtures, results)
            if isinstance(result, BaseException)
        ]
        if failures:
            self._logger.error(
                f"{phase}_failed",
                failed=[fixture.name for fixture, _ in failures],
                total=len(results),
            )
            raise failures[0][1]
        self._logger.info(f"{phase}_all_done", total=len(results))
        return results

    # =========================================================================
    # Load
    # =========================================================================

    async def _load_one(self, database: DatabaseProtocol, fixture: FixtureFile) -> LoadResult:
        return await load_documents(database, fixture, self._resolver_for(fixture), self._logger)

    async def _run_one(self, database: DatabaseProtocol, fixture: FixtureFile) -> Success:
        return await run_script(database, fixture, self._resolver_for(fixture), self._logger)

    async def load(self) -> "Fixtures":
        """Insert every data fixture, then run every script.

        Returns:
            self, for chaining

        Raises:
            PreconditionError: If not connected
            MalformedFixtureError: If a data file does not hold a document array
            ScriptContractError: If a script breaks the calling convention
            PyMongoError: If a database write fails
        """
        session = self._require_session("load")
        fixtures = await self.discover()
        data = [f for f in fixtures if f.kind is FixtureKind.DATA]
        scripts = [f for f in fixtures if f.kind is FixtureKind.SCRIPT]

        await self._join("load", data, [self._load_one(session.database, f) for f in data])
        # Barrier: scripts only see fully loaded collections
        await self._join("script", scripts, [self._run_one(session.database, f) for f in scripts])
        return self

    # =========================================================================
    # Unload
    # =========================================================================

    async def _unload_one(self, database: DatabaseProtocol, fixture: FixtureFile) -> None:
        collection = database.get_collection(fixture.collection)
        try:
            await collection.delete_many({})
        except OperationFailure as e:
            if e.code == NAMESPACE_NOT_FOUND:
                self._logger.debug("unload_namespace_not_found", collection=fixture.collection)
                return
            self._logger.error("unload_error", collection=fixture.collection, error=str(e))
            raise
        except Exception as e:
            self._logger.error("unload_error", collection=fixture.collection, error=str(e))
            raise
        self._logger.info("unload_done", collection=fixture.collection)

    async def unload(self) -> "Fixtures":
        """Delete all documents from every data fixture's collection.

        Script fixtures are not touched. A missing collection counts as
        already unloaded.

        Returns:
            self, for chaining

        Raises:
            PreconditionError: If not connected
            PyMongoError: For any database error other than namespace not found
        """
        session = self._require_session("unload")
        fixtures = await self.discover()
        data = [f for f in fixtures if f.kind is FixtureKind.DATA]

        await self._join("unload", data, [self._unload_one(session.database, f) for f in data])
        return self


__all__ = [
    "ConnectionFactory",
    "Fixtures",
    "Session",
]
