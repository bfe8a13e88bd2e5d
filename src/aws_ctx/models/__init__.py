"""Context data models.

Pure data structures with JSON serialization. No storage coupling.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

# Logical storage slots, one per context field
PROFILE_SETTING_KEY = "profile"
REGIONS_SETTING_KEY = "explorerRegions"
ACCOUNT_ID_STATE_KEY = "accountId"


class ConfigurationTarget(StrEnum):
    """Settings scope a write lands in."""

    GLOBAL = "global"
    WORKSPACE = "workspace"


@dataclass(frozen=True)
class ContextSnapshot:
    """Complete context as seen by change listeners.

    Always the full state after a write, never a diff.
    """

    profile_name: str | None = None
    account_id: str | None = None
    regions: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "profileName": self.profile_name,
            "accountId": self.account_id,
            "regions": list(self.regions),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)
