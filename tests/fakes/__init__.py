"""Test doubles for mongo_fixtures tests."""

from fakes.fake_mongo import FakeCollection, FakeConnection, FakeDatabase

__all__ = [
    "FakeCollection",
    "FakeConnection",
    "FakeDatabase",
]
