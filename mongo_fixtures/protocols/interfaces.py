"""Protocol definitions - interfaces for dependency injection.

These are typing.Protocol classes for static type checking. The engine only
talks to the database, the logger and the fixture resolvers through them, so
tests can swap in in-memory fakes and applications can swap in other drivers.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable


# =============================================================================
# LOGGING
# =============================================================================

@runtime_checkable
class LoggerProtocol(Protocol):
    """Structured logging interface."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def bind(self, **kwargs: Any) -> "LoggerProtocol": ...


# =============================================================================
# DATABASE
# =============================================================================

@runtime_checkable
class CollectionProtocol(Protocol):
    """Collection handle.

    Only the two write paths the fixtures need: one batched write for
    loading and one delete-all for unloading.
    """

    @property
    def name(self) -> str: ...

    async def bulk_write(self, requests: List[Any], ordered: bool = True) -> Any: ...
    async def delete_many(self, filter: Dict[str, Any]) -> Any: ...


@runtime_checkable
class DatabaseProtocol(Protocol):
    """Selected database."""

    @property
    def name(self) -> str: ...

    def get_collection(self, name: str) -> CollectionProtocol: ...


@runtime_checkable
class ConnectionProtocol(Protocol):
    """Database session.

    Lifecycle: connect/close
    """

    async def connect(self, db_name: Optional[str] = None) -> DatabaseProtocol: ...
    async def close(self) -> None: ...


# =============================================================================
# FIXTURE RESOLUTION
# =============================================================================

@runtime_checkable
class FixtureResolverProtocol(Protocol):
    """Turns a fixture file into a value.

    For data files the value is a sequence of documents; for script files it
    is a callable taking a collection handle and returning an awaitable.
    """

    async def resolve(self, path: Path) -> Any: ...
