"""Protocols and shared types for mongo_fixtures."""

from mongo_fixtures.protocols.interfaces import (
    CollectionProtocol,
    ConnectionProtocol,
    DatabaseProtocol,
    FixtureResolverProtocol,
    LoggerProtocol,
)
from mongo_fixtures.protocols.types import (
    ConnectionState,
    Failure,
    FixtureFile,
    FixtureKind,
    FixtureSet,
    LoadResult,
    Success,
)

__all__ = [
    # Interfaces
    "CollectionProtocol",
    "ConnectionProtocol",
    "DatabaseProtocol",
    "FixtureResolverProtocol",
    "LoggerProtocol",
    # Types
    "ConnectionState",
    "Failure",
    "FixtureFile",
    "FixtureKind",
    "FixtureSet",
    "LoadResult",
    "Success",
]
