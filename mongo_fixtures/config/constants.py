"""Static constants for fixture discovery and teardown."""

# Fixture files
DATA_EXTENSIONS: tuple[str, ...] = (".json", ".js", ".ts")
SCRIPT_EXTENSIONS: tuple[str, ...] = (".js", ".ts")
JSON_EXTENSION: str = ".json"
SCRIPT_MARKER: str = "_"

# Name of the module attribute holding a .js/.ts fixture's value
EXPORTS_ATTRIBUTE: str = "exports"

DEFAULT_FIXTURES_DIR: str = "fixtures"

# MongoDB "ns not found"
NAMESPACE_NOT_FOUND: int = 26

__all__ = [
    "DATA_EXTENSIONS",
    "SCRIPT_EXTENSIONS",
    "JSON_EXTENSION",
    "SCRIPT_MARKER",
    "EXPORTS_ATTRIBUTE",
    "DEFAULT_FIXTURES_DIR",
    "NAMESPACE_NOT_FOUND",
]
