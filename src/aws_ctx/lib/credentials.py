"""Credential resolution for a named profile.

Resolution is an ordered list of resolver strategies. Each one returns a
Result; the first Ok wins and every Err is kept so a total miss can say what
was tried:

    1. CredentialsManagerResolver  pluggable manager (optional)
    2. SharedFileResolver          [profile] in ~/.aws/credentials
    3. ProcessResolver             credential_process of the profile

The file and process formats belong to botocore; these resolvers only adapt
its providers to the Result contract.
"""

import asyncio
import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, Protocol, TypeAlias

import botocore.session
from botocore.credentials import Credentials, ProcessProvider, SharedCredentialProvider
from botocore.exceptions import BotoCoreError

from aws_ctx.lib.errors import CredentialSourceError, CredentialsNotFoundError
from aws_ctx.lib.result import Err, Ok, Result

logger = logging.getLogger(__name__)

CredentialsResult: TypeAlias = Result[Credentials, CredentialSourceError]

# botocore surfaces malformed files and process output as builtin errors
_LOAD_ERRORS = (BotoCoreError, OSError, ValueError, AttributeError)


class CredentialsManager(Protocol):
    """Resolves credentials for a profile through an alternate mechanism.

    Raises if the profile is unknown.
    """

    async def get_credentials(self, profile_name: str) -> Credentials: ...


class CredentialResolver(Protocol):
    """One step of the credential chain."""

    source: str

    async def resolve(self, profile_name: str) -> CredentialsResult: ...


class CredentialsManagerResolver:
    """Ask a CredentialsManager; any failure is a miss for this step."""

    source = "credentials-manager"

    def __init__(self, manager: CredentialsManager) -> None:
        self._manager = manager

    async def resolve(self, profile_name: str) -> CredentialsResult:
        try:
            credentials = await self._manager.get_credentials(profile_name)
        except Exception as e:
            return Err(CredentialSourceError(self.source, profile_name, str(e) or type(e).__name__))
        if credentials is None:
            return Err(CredentialSourceError(self.source, profile_name, "No credentials returned"))
        return Ok(credentials)


class SharedFileResolver:
    """Static keys from the shared credentials file."""

    source = "shared-credentials-file"

    def __init__(self, credentials_file: Path | None = None) -> None:
        self._credentials_file = credentials_file

    def _filename(self) -> str:
        if self._credentials_file is not None:
            return str(self._credentials_file)
        return botocore.session.Session().get_config_variable("credentials_file")

    async def resolve(self, profile_name: str) -> CredentialsResult:
        filename = self._filename()
        provider = SharedCredentialProvider(creds_filename=filename, profile_name=profile_name)
        try:
            credentials = await asyncio.to_thread(provider.load)
        except _LOAD_ERRORS as e:
            return Err(CredentialSourceError(self.source, profile_name, str(e)))
        if credentials is None:
            return Err(
                CredentialSourceError(self.source, profile_name, f"Profile not found in {filename}")
            )
        return Ok(credentials)


class ProcessResolver:
    """Credentials printed by the profile's credential_process command."""

    source = "credential-process"

    def __init__(self, load_config: Callable[[], dict[str, Any]] | None = None) -> None:
        self._load_config = load_config

    def _config_loader(self) -> Callable[[], dict[str, Any]]:
        if self._load_config is not None:
            return self._load_config
        session = botocore.session.Session()
        return lambda: session.full_config

    async def resolve(self, profile_name: str) -> CredentialsResult:
        provider = ProcessProvider(profile_name=profile_name, load_config=self._config_loader())
        try:
            credentials = await asyncio.to_thread(provider.load)
        except _LOAD_ERRORS as e:
            return Err(CredentialSourceError(self.source, profile_name, str(e)))
        if credentials is None:
            return Err(
                CredentialSourceError(self.source, profile_name, "No credential_process configured")
            )
        return Ok(credentials)


def default_resolvers() -> list[CredentialResolver]:
    """File then process - the fallbacks tried after any credentials manager."""
    return [SharedFileResolver(), ProcessResolver()]


async def resolve_chain(
    resolvers: Sequence[CredentialResolver], profile_name: str
) -> Result[Credentials, CredentialsNotFoundError]:
    """Try each resolver in order, short-circuiting on the first success."""
    attempts: list[CredentialSourceError] = []
    for resolver in resolvers:
        match await resolver.resolve(profile_name):
            case Ok(credentials):
                logger.debug("Resolved profile %r via %s", profile_name, resolver.source)
                return Ok(credentials)
            case Err(error):
                logger.debug(
                    "%s: no credentials for %r: %s", error.source, profile_name, error.reason
                )
                attempts.append(error)
    return Err(CredentialsNotFoundError(profile_name, tuple(attempts)))
