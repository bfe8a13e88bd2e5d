"""Installation-scoped state that survives restarts."""

import asyncio
import logging
from pathlib import Path
from typing import Any, Protocol

from aws_ctx.lib.errors import StateWriteError
from aws_ctx.lib.result import Err, Ok, Result
from aws_ctx.lib.storage import file

logger = logging.getLogger(__name__)


class PersistentState(Protocol):
    """Key/value state collaborator."""

    def get(self, key: str, default: Any = None) -> Any: ...

    async def update(self, key: str, value: Any) -> Result[None, StateWriteError]: ...


class FileMemento:
    """PersistentState backed by a single JSON file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def get(self, key: str, default: Any = None) -> Any:
        match file.load_json_object(self._path):
            case Ok(data):
                return data.get(key, default)
            case Err(reason):
                logger.warning("Ignoring state file: %s", reason)
                return default

    async def update(self, key: str, value: Any) -> Result[None, StateWriteError]:
        match file.load_json_object(self._path):
            case Err(reason):
                return Err(StateWriteError(key, reason))
            case Ok(data):
                pass

        if value is None:
            data.pop(key, None)
        else:
            data[key] = value

        try:
            await asyncio.to_thread(file.dump_json_object, self._path, data)
        except (OSError, TypeError) as e:
            return Err(StateWriteError(key, str(e)))
        return Ok(None)
