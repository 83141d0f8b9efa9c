"""Fixture resolver registry.

Maps a file extension to the resolver that turns files with that extension
into values. JSON and module resolvers are registered on import; an engine
can override any of them per instance with ``Fixtures(resolvers=...)``.

Usage:
    from mongo_fixtures.resolvers.registry import register_resolver, get_resolver

    register_resolver(".ts", MyTranspilingResolver())
    resolver = get_resolver(".ts")
"""

from typing import Dict, List, Mapping, Optional

from mongo_fixtures.config.constants import JSON_EXTENSION, SCRIPT_EXTENSIONS
from mongo_fixtures.protocols import FixtureResolverProtocol

# Resolver registry: maps lower-cased extension (with dot) to resolver
_RESOLVERS: Dict[str, FixtureResolverProtocol] = {}


def register_resolver(extension: str, resolver: FixtureResolverProtocol) -> None:
    """Register a resolver for an extension (e.g. '.json')."""
    _RESOLVERS[extension.lower()] = resolver


def unregister_resolver(extension: str) -> bool:
    """Unregister a resolver.

    Returns:
        True if a resolver was registered and removed
    """
    return _RESOLVERS.pop(extension.lower(), None) is not None


def get_resolver(extension: str) -> Optional[FixtureResolverProtocol]:
    return _RESOLVERS.get(extension.lower())


def list_resolvers() -> List[str]:
    return list(_RESOLVERS.keys())


def resolver_table(
    overrides: Optional[Mapping[str, FixtureResolverProtocol]] = None,
) -> Dict[str, FixtureResolverProtocol]:
    """Snapshot of the registry with per-engine overrides applied.

    Args:
        overrides: Extension -> resolver entries replacing registered ones

    Returns:
        New dict; later registry changes do not affect it
    """
    table = dict(_RESOLVERS)
    for extension, resolver in (overrides or {}).items():
        table[extension.lower()] = resolver
    return table


# =============================================================================
# Built-in Resolver Registration
# =============================================================================

def _register_builtin_resolvers() -> None:
    from mongo_fixtures.resolvers.json_resolver import JsonResolver
    from mongo_fixtures.resolvers.module_resolver import SourceModuleResolver

    register_resolver(JSON_EXTENSION, JsonResolver())
    module_resolver = SourceModuleResolver()
    for extension in SCRIPT_EXTENSIONS:
        register_resolver(extension, module_resolver)


_register_builtin_resolvers()


__all__ = [
    "register_resolver",
    "unregister_resolver",
    "get_resolver",
    "list_resolvers",
    "resolver_table",
]
