"""AWS context manager - the single access point for profile, account and regions.

Flow for every mutator:
1. Write the new value through to its store
2. If the write failed, return the error; nobody is notified
3. Otherwise fire one change event carrying the full snapshot

Reads always go to the stores; the manager caches nothing.
"""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import replace

from botocore.credentials import Credentials

from aws_ctx.lib.credentials import (
    CredentialResolver,
    CredentialsManager,
    CredentialsManagerResolver,
    default_resolvers,
    resolve_chain,
)
from aws_ctx.lib.errors import (
    NoProfileSelectedError,
    ResolveError,
    SettingsWriteError,
    StateWriteError,
)
from aws_ctx.lib.events import EventEmitter, Listener, Subscription
from aws_ctx.lib.memento import PersistentState
from aws_ctx.lib.result import Err, Ok, Result, unwrap_or
from aws_ctx.lib.settings import SettingsStore
from aws_ctx.models import (
    ACCOUNT_ID_STATE_KEY,
    PROFILE_SETTING_KEY,
    REGIONS_SETTING_KEY,
    ConfigurationTarget,
    ContextSnapshot,
)

logger = logging.getLogger(__name__)


class AwsContextManager:
    """Holds the selected profile, account id and explorer regions.

    Example:
        manager = AwsContextManager(settings, state)
        manager.on_did_change_context(lambda c: print(c.regions))
        await manager.add_explorer_region("us-east-1")
        credentials = await manager.get_credentials()
    """

    def __init__(
        self,
        settings: SettingsStore,
        state: PersistentState,
        credentials_manager: CredentialsManager | None = None,
        resolvers: Sequence[CredentialResolver] | None = None,
    ) -> None:
        self._settings = settings
        self._state = state

        chain: list[CredentialResolver] = []
        if credentials_manager is not None:
            chain.append(CredentialsManagerResolver(credentials_manager))
        chain.extend(resolvers if resolvers is not None else default_resolvers())
        self._resolvers = tuple(chain)

        self._on_did_change_context: EventEmitter[ContextSnapshot] = EventEmitter()
        # Region updates are read-modify-write; one at a time per manager
        self._regions_lock = asyncio.Lock()

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    def on_did_change_context(self, listener: Listener[ContextSnapshot]) -> Subscription:
        """Register a listener called once per successful mutation."""
        return self._on_did_change_context.subscribe(listener)

    # -------------------------------------------------------------------------
    # Credentials
    # -------------------------------------------------------------------------

    async def get_credentials(self, profile_name: str | None = None) -> Credentials | None:
        """Credentials for the given or stored profile, or None. Never raises."""
        return unwrap_or(await self.resolve_credentials(profile_name), None)

    async def resolve_credentials(
        self, profile_name: str | None = None
    ) -> Result[Credentials, ResolveError]:
        """Like get_credentials, but a miss reports what was tried."""
        name = profile_name or self.get_credential_profile_name()
        if not name:
            return Err(NoProfileSelectedError())
        return await resolve_chain(self._resolvers, name)

    # -------------------------------------------------------------------------
    # Profile
    # -------------------------------------------------------------------------

    def get_credential_profile_name(self) -> str | None:
        return self._settings.read(PROFILE_SETTING_KEY)

    async def set_credential_profile_name(
        self, profile_name: str | None
    ) -> Result[ContextSnapshot, SettingsWriteError]:
        match await self._settings.write(
            PROFILE_SETTING_KEY, profile_name, ConfigurationTarget.GLOBAL
        ):
            case Err() as e:
                return e
            case Ok(_):
                pass

        logger.info("Credential profile set to %r", profile_name)
        return Ok(self._notify(replace(self.current_context(), profile_name=profile_name)))

    # -------------------------------------------------------------------------
    # Account
    # -------------------------------------------------------------------------

    def get_credential_account_id(self) -> str | None:
        return self._state.get(ACCOUNT_ID_STATE_KEY)

    async def set_credential_account_id(
        self, account_id: str | None
    ) -> Result[ContextSnapshot, StateWriteError]:
        match await self._state.update(ACCOUNT_ID_STATE_KEY, account_id):
            case Err() as e:
                return e
            case Ok(_):
                pass

        logger.info("Credential account id set to %r", account_id)
        return Ok(self._notify(replace(self.current_context(), account_id=account_id)))

    # -------------------------------------------------------------------------
    # Explorer regions
    # -------------------------------------------------------------------------

    def get_explorer_regions(self) -> list[str]:
        regions = self._settings.read(REGIONS_SETTING_KEY)
        if regions is None:
            return []
        if not isinstance(regions, list):
            logger.warning(
                "Ignoring %s setting: expected a list, got %r", REGIONS_SETTING_KEY, regions
            )
            return []
        return list(regions)

    async def add_explorer_region(
        self, *regions: str
    ) -> Result[ContextSnapshot, SettingsWriteError]:
        """Append regions in the order given. Duplicates are kept."""
        async with self._regions_lock:
            updated = [*self.get_explorer_regions(), *regions]
            return await self._write_regions(updated)

    async def remove_explorer_region(
        self, *regions: str
    ) -> Result[ContextSnapshot, SettingsWriteError]:
        """Drop every occurrence of each given region."""
        async with self._regions_lock:
            removed = set(regions)
            updated = [r for r in self.get_explorer_regions() if r not in removed]
            return await self._write_regions(updated)

    async def _write_regions(
        self, regions: list[str]
    ) -> Result[ContextSnapshot, SettingsWriteError]:
        match await self._settings.write(REGIONS_SETTING_KEY, regions, ConfigurationTarget.GLOBAL):
            case Err() as e:
                return e
            case Ok(_):
                pass

        logger.info("Explorer regions set to %s", regions)
        return Ok(self._notify(replace(self.current_context(), regions=tuple(regions))))

    # -------------------------------------------------------------------------
    # Snapshots
    # -------------------------------------------------------------------------

    def current_context(self) -> ContextSnapshot:
        """Snapshot of the context as currently stored."""
        return ContextSnapshot(
            profile_name=self.get_credential_profile_name(),
            account_id=self.get_credential_account_id(),
            regions=tuple(self.get_explorer_regions()),
        )

    def _notify(self, snapshot: ContextSnapshot) -> ContextSnapshot:
        self._on_did_change_context.fire(snapshot)
        return snapshot
