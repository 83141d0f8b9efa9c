"""Bulk document loader.

Inserts the documents of one data fixture with a single unordered bulk
write. Nothing is written unless the whole file resolved to a list of
documents.
"""

from collections.abc import Mapping
from typing import Any, List

from pymongo import InsertOne

from mongo_fixtures.errors import MalformedFixtureError
from mongo_fixtures.protocols import (
    DatabaseProtocol,
    FixtureFile,
    FixtureResolverProtocol,
    LoadResult,
    LoggerProtocol,
)


def to_documents(value: Any, fixture: FixtureFile) -> List[Mapping]:
    """Check that a resolved fixture value is a sequence of documents.

    Raises:
        MalformedFixtureError: If the value is not a list/tuple of mappings
    """
    if not isinstance(value, (list, tuple)):
        raise MalformedFixtureError(
            str(fixture.path),
            fixture.collection,
            f"expected an array of documents, got {type(value).__name__}; "
            "verify that a docs array was exported",
        )
    for index, doc in enumerate(value):
        if not isinstance(doc, Mapping):
            raise MalformedFixtureError(
                str(fixture.path),
                fixture.collection,
                f"element {index} is a {type(doc).__name__}, not a document",
            )
    return list(value)


async def load_documents(
    database: DatabaseProtocol,
    fixture: FixtureFile,
    resolver: FixtureResolverProtocol,
    logger: LoggerProtocol,
) -> LoadResult:
    """Load one data fixture into its collection.

    Args:
        database: Connected database
        fixture: Data fixture to load
        resolver: Resolver for the fixture's extension
        logger: Engine logger

    Returns:
        LoadResult; skipped=True when the file held no documents

    Raises:
        MalformedFixtureError: If the file does not hold a document array
        PyMongoError: If the bulk write fails (re-raised as is)
    """
    collection_name = fixture.collection
    docs = to_documents(await resolver.resolve(fixture.path), fixture)
    logger.info("load_start", collection=collection_name, file=fixture.name)

    if not docs:
        # An empty bulk write is rejected by the server
        logger.info("load_not_required", collection=collection_name, file=fixture.name)
        return LoadResult(collection=collection_name, file=fixture.name, skipped=True)

    collection = database.get_collection(collection_name)
    requests = [InsertOne(doc) for doc in docs]
    try:
        await collection.bulk_write(requests, ordered=False)
    except Exception as e:
        logger.error("load_error", collection=collection_name, file=fixture.name, error=str(e))
        raise

    logger.info("load_done", collection=collection_name, inserted=len(requests))
    return LoadResult(collection=collection_name, file=fixture.name, inserted=len(requests))


__all__ = [
    "load_documents",
    "to_documents",
]
