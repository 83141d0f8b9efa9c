"""Fixture file classification.

Turns directory entries into FixtureFile values: data files, script files
or ignored files, after applying the FixtureSet's name filter. load() and
unload() both go through select_fixtures() so they always see the same
subset of the directory.
"""

from pathlib import Path
from typing import Iterable, List

from mongo_fixtures.config.constants import (
    DATA_EXTENSIONS,
    SCRIPT_EXTENSIONS,
    SCRIPT_MARKER,
)
from mongo_fixtures.protocols import FixtureFile, FixtureKind, FixtureSet, LoggerProtocol


def is_supported_extension(extension: str) -> bool:
    return extension.lower() in DATA_EXTENSIONS


def is_script(stem: str, extension: str) -> bool:
    """A script is a .js/.ts file whose stem ends with the marker."""
    return stem.endswith(SCRIPT_MARKER) and extension.lower() in SCRIPT_EXTENSIONS


def script_collection_name(stem: str) -> str:
    """Strip exactly one trailing marker from a script stem."""
    return stem[: -len(SCRIPT_MARKER)]


def classify(name: str, directory: str) -> FixtureFile:
    """Classify one file name.

    Args:
        name: File name as listed in the directory
        directory: Fixtures directory the name belongs to

    Returns:
        FixtureFile with kind and target collection filled in
    """
    path = Path(directory) / name
    stem = path.stem
    extension = path.suffix.lower()

    if not is_supported_extension(extension):
        kind, collection = FixtureKind.IGNORED, None
    elif is_script(stem, extension):
        kind, collection = FixtureKind.SCRIPT, script_collection_name(stem)
    else:
        kind, collection = FixtureKind.DATA, stem

    return FixtureFile(
        path=path,
        name=name,
        stem=stem,
        extension=extension,
        kind=kind,
        collection=collection,
    )


def passes_filter(name: str, fixture_set: FixtureSet, logger: LoggerProtocol) -> bool:
    """Apply the FixtureSet filter to one file name."""
    if fixture_set.pattern is None:
        return True
    matched = fixture_set.pattern.search(name) is not None
    logger.info(
        "filter_decision",
        filter=fixture_set.filter,
        file=name,
        decision="matches" if matched else "excludes",
    )
    return matched


def select_fixtures(
    names: Iterable[str],
    fixture_set: FixtureSet,
    logger: LoggerProtocol,
) -> List[FixtureFile]:
    """Filter and classify directory entries.

    Names are sorted first so the selection does not depend on the order the
    file system lists them in. Ignored files are kept in the result; callers
    skip them by kind.

    Args:
        names: File names found in the fixtures directory
        fixture_set: Directory and filter to apply
        logger: Logger for filter decisions

    Returns:
        Classified fixtures that passed the filter, ordered by name
    """
    return [
        classify(name, fixture_set.directory)
        for name in sorted(names)
        if passes_filter(name, fixture_set, logger)
    ]


__all__ = [
    "classify",
    "is_script",
    "is_supported_extension",
    "passes_filter",
    "script_collection_name",
    "select_fixtures",
]
