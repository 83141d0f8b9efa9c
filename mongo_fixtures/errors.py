"""Fixture engine errors.

Database errors are not wrapped: pymongo exceptions reach the caller as the
driver raised them.
"""


class FixtureError(Exception):
    """Base class for errors raised by mongo_fixtures."""


class PreconditionError(FixtureError):
    """Operation called in the wrong engine state or with missing arguments."""


class MalformedFixtureError(FixtureError):
    """A fixture file could not be turned into a list of documents."""

    def __init__(self, file: str, collection: str, message: str):
        self.file = file
        self.collection = collection
        self.message = message
        super().__init__(f"[{collection}] {file}: {message}")


class ScriptContractError(FixtureError):
    """A script file did not honour the script calling convention."""

    def __init__(self, script: str, message: str):
        self.script = script
        self.message = message
        super().__init__(f"script {script} {message}")


__all__ = [
    "FixtureError",
    "PreconditionError",
    "MalformedFixtureError",
    "ScriptContractError",
]
