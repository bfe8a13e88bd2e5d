"""Error types for the AWS context manager.

All errors are frozen dataclasses - no exceptions in business logic.
Pattern match on these in the CLI layer to provide user-friendly messages.
"""

from dataclasses import dataclass
from typing import TypeAlias

# =============================================================================
# Storage Errors
# =============================================================================


@dataclass(frozen=True, slots=True)
class SettingsWriteError:
    """Failed to write a setting."""

    key: str
    reason: str


@dataclass(frozen=True, slots=True)
class StateWriteError:
    """Failed to write installation state."""

    key: str
    reason: str


# =============================================================================
# Credential Errors
# =============================================================================


@dataclass(frozen=True, slots=True)
class NoProfileSelectedError:
    """No profile was given and none is stored in settings."""


@dataclass(frozen=True, slots=True)
class CredentialSourceError:
    """One credential source could not produce credentials for a profile."""

    source: str
    profile_name: str
    reason: str


@dataclass(frozen=True, slots=True)
class CredentialsNotFoundError:
    """No credential source produced credentials for a profile."""

    profile_name: str
    attempts: tuple[CredentialSourceError, ...] = ()


# =============================================================================
# Account Errors
# =============================================================================


@dataclass(frozen=True, slots=True)
class AccountLookupError:
    """STS could not report the account for the resolved credentials."""

    profile_name: str
    reason: str


# =============================================================================
# Type Aliases for Error Unions
# =============================================================================

ContextWriteError: TypeAlias = SettingsWriteError | StateWriteError
ResolveError: TypeAlias = NoProfileSelectedError | CredentialsNotFoundError
LoginError: TypeAlias = (
    NoProfileSelectedError
    | CredentialsNotFoundError
    | AccountLookupError
    | SettingsWriteError
    | StateWriteError
)
