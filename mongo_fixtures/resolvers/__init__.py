"""Fixture resolvers: turn fixture files into documents or script functions."""

from mongo_fixtures.resolvers.json_resolver import JsonResolver
from mongo_fixtures.resolvers.module_resolver import ModuleRegistry, SourceModuleResolver
from mongo_fixtures.resolvers.registry import (
    get_resolver,
    list_resolvers,
    register_resolver,
    resolver_table,
    unregister_resolver,
)

__all__ = [
    # Resolvers
    "JsonResolver",
    "ModuleRegistry",
    "SourceModuleResolver",
    # Registry
    "get_resolver",
    "list_resolvers",
    "register_resolver",
    "resolver_table",
    "unregister_resolver",
]
