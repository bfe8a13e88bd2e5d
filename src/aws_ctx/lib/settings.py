"""Settings store - scoped key/value settings.

The context manager only needs `read` and `write`. `JsonSettingsStore` backs
them with one JSON object per scope:

    global     ~/.config/aws-ctx/settings.json
    workspace  <project>/.aws-ctx/settings.json   (optional)

Reads prefer the workspace value over the global one. Writing None removes
the key from the target scope.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Protocol

from aws_ctx.lib.errors import SettingsWriteError
from aws_ctx.lib.result import Err, Ok, Result
from aws_ctx.lib.storage import file
from aws_ctx.models import ConfigurationTarget

logger = logging.getLogger(__name__)


class SettingsStore(Protocol):
    """Scoped settings collaborator."""

    def read(self, key: str, default: Any = None) -> Any: ...

    async def write(
        self,
        key: str,
        value: Any,
        target: ConfigurationTarget = ConfigurationTarget.GLOBAL,
    ) -> Result[None, SettingsWriteError]: ...


class JsonSettingsStore:
    """Settings persisted as JSON files, one per scope."""

    def __init__(self, global_path: Path, workspace_path: Path | None = None) -> None:
        self._paths: dict[ConfigurationTarget, Path] = {ConfigurationTarget.GLOBAL: global_path}
        if workspace_path is not None:
            self._paths[ConfigurationTarget.WORKSPACE] = workspace_path

    def read(self, key: str, default: Any = None) -> Any:
        for target in (ConfigurationTarget.WORKSPACE, ConfigurationTarget.GLOBAL):
            path = self._paths.get(target)
            if path is None:
                continue
            match file.load_json_object(path):
                case Ok(data) if key in data:
                    return data[key]
                case Err(reason):
                    logger.warning("Ignoring %s settings: %s", target, reason)
        return default

    async def write(
        self,
        key: str,
        value: Any,
        target: ConfigurationTarget = ConfigurationTarget.GLOBAL,
    ) -> Result[None, SettingsWriteError]:
        path = self._paths.get(target)
        if path is None:
            return Err(SettingsWriteError(key, f"No {target} settings scope configured"))

        match file.load_json_object(path):
            case Err(reason):
                return Err(SettingsWriteError(key, reason))
            case Ok(data):
                pass

        if value is None:
            data.pop(key, None)
        else:
            data[key] = value

        try:
            await asyncio.to_thread(file.dump_json_object, path, data)
        except (OSError, TypeError) as e:
            return Err(SettingsWriteError(key, str(e)))

        logger.debug("Wrote %s setting %r to %s", target, key, path)
        return Ok(None)
