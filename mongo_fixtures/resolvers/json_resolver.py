"""JSON fixture resolver."""

import asyncio
import json
from pathlib import Path
from typing import Any

from mongo_fixtures.errors import MalformedFixtureError


class JsonResolver:
    """Reads a .json fixture as raw bytes and parses one JSON value."""

    async def resolve(self, path: Path) -> Any:
        contents = await asyncio.to_thread(path.read_bytes)
        try:
            return json.loads(contents)
        except ValueError as e:
            raise MalformedFixtureError(str(path), path.stem, str(e)) from e
