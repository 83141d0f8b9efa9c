"""mongo_fixtures - deterministic MongoDB test fixtures.

Loads a directory of fixture files into MongoDB before a test run and
removes them afterwards:

- ``<collection>.json``          JSON array of documents
- ``<collection>.js`` / ``.ts``  module exporting an array of documents
- ``<collection>_.js`` / ``.ts`` module exporting ``exports(collection)``,
                                 run after every data file is loaded

Usage:
    from mongo_fixtures import Fixtures

    fixtures = Fixtures(dir="tests/fixtures")
    await fixtures.connect("mongodb://localhost:27017/test")
    await fixtures.load()
    ...
    await fixtures.unload()
    await fixtures.disconnect()
"""

from mongo_fixtures.engine import Fixtures
from mongo_fixtures.errors import (
    FixtureError,
    MalformedFixtureError,
    PreconditionError,
    ScriptContractError,
)
from mongo_fixtures.protocols import (
    ConnectionState,
    Failure,
    FixtureFile,
    FixtureKind,
    FixtureSet,
    LoadResult,
    Success,
)
from mongo_fixtures.resolvers import ModuleRegistry, register_resolver

__version__ = "0.1.0"

__all__ = [
    "Fixtures",
    # Errors
    "FixtureError",
    "MalformedFixtureError",
    "PreconditionError",
    "ScriptContractError",
    # Types
    "ConnectionState",
    "Failure",
    "FixtureFile",
    "FixtureKind",
    "FixtureSet",
    "LoadResult",
    "Success",
    # Resolvers
    "ModuleRegistry",
    "register_resolver",
]
