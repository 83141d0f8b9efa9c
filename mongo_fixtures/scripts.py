"""Post-load script runner.

A script fixture exports a callable that receives the collection handle and
returns an awaitable. The awaited value is read as a tagged outcome:
Failure(error) fails the script, Success(value) or any plain value
completes it.
"""

import inspect

from mongo_fixtures.errors import ScriptContractError
from mongo_fixtures.protocols import (
    DatabaseProtocol,
    Failure,
    FixtureFile,
    FixtureResolverProtocol,
    LoggerProtocol,
    Success,
)


async def run_script(
    database: DatabaseProtocol,
    fixture: FixtureFile,
    resolver: FixtureResolverProtocol,
    logger: LoggerProtocol,
) -> Success:
    """Run one script fixture against its collection.

    Args:
        database: Connected database
        fixture: Script fixture; its collection is the stem minus the marker
        resolver: Resolver for the fixture's extension
        logger: Engine logger

    Returns:
        Success carrying the script's value

    Raises:
        ScriptContractError: If the export is not callable or does not
            return an awaitable
    """
    collection = database.get_collection(fixture.collection)
    script = await resolver.resolve(fixture.path)
    if not callable(script):
        raise ScriptContractError(fixture.name, "must export a function taking a collection")

    logger.info("script_start", script=fixture.name, collection=fixture.collection)
    try:
        pending = script(collection)
        if not inspect.isawaitable(pending):
            raise ScriptContractError(fixture.name, "must return an awaitable")
        outcome = await pending
        if isinstance(outcome, Failure):
            raise outcome.error
    except Exception as e:
        logger.error("script_error", script=fixture.name, error=str(e))
        raise

    logger.info("script_done", script=fixture.name)
    return outcome if isinstance(outcome, Success) else Success(outcome)


__all__ = [
    "run_script",
]
