"""Python type definitions for the fixture engine.

Value objects shared by the classifier, the loader, the script runner and
the engine. All of them are immutable once built.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional


# =============================================================================
# ENUMS
# =============================================================================


class FixtureKind(str, Enum):
    """Classification of a directory entry."""
    DATA = "data"
    SCRIPT = "script"
    IGNORED = "ignored"


class ConnectionState(str, Enum):
    """Engine connection lifecycle."""
    UNCONNECTED = "unconnected"
    CONNECTED = "connected"


# =============================================================================
# CONFIGURATION
# =============================================================================


@dataclass(frozen=True)
class FixtureSet:
    """Which fixtures an engine works on.

    The filter is compiled once here so that load and unload apply the exact
    same pattern.

    Usage:
        fixture_set = FixtureSet(directory="tests/fixtures", filter="^users")
        fixture_set.pattern.search("users.json")
    """
    directory: str = "fixtures"
    filter: Optional[str] = None
    mute: bool = False
    pattern: Optional[re.Pattern] = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not isinstance(self.directory, str) or not self.directory.strip():
            raise ValueError("directory is required and must be a non-empty string")
        if self.filter:
            try:
                compiled = re.compile(self.filter)
            except re.error as e:
                raise ValueError(f"invalid filter pattern {self.filter!r}: {e}") from e
            object.__setattr__(self, "pattern", compiled)


# =============================================================================
# FIXTURE FILES
# =============================================================================


@dataclass(frozen=True)
class FixtureFile:
    """One classified entry of the fixtures directory."""
    path: Path
    name: str
    stem: str
    extension: str
    kind: FixtureKind
    collection: Optional[str] = None


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading one data file."""
    collection: str
    file: str
    inserted: int = 0
    skipped: bool = False


# =============================================================================
# SCRIPT OUTCOMES
# =============================================================================


@dataclass(frozen=True)
class Success:
    """Script finished; value is whatever the script produced."""
    value: Any = None


@dataclass(frozen=True)
class Failure:
    """Script reported an error without raising it."""
    error: BaseException

    def __post_init__(self) -> None:
        if not isinstance(self.error, BaseException):
            raise TypeError("Failure.error must be an exception instance")
