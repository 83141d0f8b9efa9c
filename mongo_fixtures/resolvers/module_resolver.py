"""Module fixture resolvers.

.js and .ts fixtures are not parsed as data: they are modules whose single
exported value is either a list of documents or a script function. Two
implementations of that contract live here:

- SourceModuleResolver executes the file as Python source and returns its
  module-level ``exports`` attribute.
- ModuleRegistry serves values registered in memory, keyed by file name,
  for test suites that build fixtures in code.

Usage:
    registry = ModuleRegistry()
    registry.register("users.js", [{"name": "a"}])

    @registry.script("users_.js")
    async def add_admin(collection):
        await collection.insert_one({"name": "admin"})

    fixtures = Fixtures(dir="fixtures", resolvers={".js": registry})
"""

import importlib.machinery
import importlib.util
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from mongo_fixtures.config.constants import EXPORTS_ATTRIBUTE
from mongo_fixtures.errors import MalformedFixtureError


class _FixtureSourceLoader(importlib.machinery.SourceFileLoader):
    """Source loader that never writes a bytecode cache into the fixtures directory."""

    def set_data(self, path, data, *, _mode=0o666):
        pass


class SourceModuleResolver:
    """Executes a fixture file as a Python module."""

    def __init__(self, attribute: str = EXPORTS_ATTRIBUTE):
        """Initialize resolver.

        Args:
            attribute: Module attribute holding the fixture's value
        """
        self.attribute = attribute

    async def resolve(self, path: Path) -> Any:
        path = path.resolve()
        name = f"mongo_fixtures.loaded.{path.stem}"

        # Fresh module on every call; fixtures are not cached between loads
        loader = _FixtureSourceLoader(name, str(path))
        spec = importlib.util.spec_from_loader(name, loader)
        module = importlib.util.module_from_spec(spec)
        try:
            loader.exec_module(module)
        except SyntaxError as e:
            raise MalformedFixtureError(str(path), path.stem, f"invalid module: {e}") from e

        if not hasattr(module, self.attribute):
            raise MalformedFixtureError(
                str(path),
                path.stem,
                f"no value exported; assign the fixture to module-level '{self.attribute}'",
            )
        return getattr(module, self.attribute)


class ModuleRegistry:
    """In-memory module resolver keyed by fixture file name."""

    def __init__(self, modules: Optional[Dict[str, Any]] = None):
        self._modules: Dict[str, Any] = dict(modules or {})

    def register(self, name: str, value: Any) -> None:
        """Register the exported value for a file name (e.g. 'users.js')."""
        self._modules[name] = value

    def unregister(self, name: str) -> bool:
        """Remove a registration. Returns True if one existed."""
        if name in self._modules:
            del self._modules[name]
            return True
        return False

    def script(self, name: str) -> Callable[[Callable], Callable]:
        """Decorator registering a script function under a file name."""
        def decorator(func: Callable) -> Callable:
            self.register(name, func)
            return func
        return decorator

    def __contains__(self, name: str) -> bool:
        return name in self._modules

    async def resolve(self, path: Path) -> Any:
        try:
            return self._modules[path.name]
        except KeyError:
            raise MalformedFixtureError(
                str(path), path.stem, "no module registered for this file"
            ) from None


__all__ = [
    "ModuleRegistry",
    "SourceModuleResolver",
]
