"""Shared pytest fixtures for aws-ctx tests."""

import asyncio
import tempfile
from pathlib import Path
from typing import Any

import pytest
from botocore.credentials import Credentials

from aws_ctx.lib.errors import CredentialSourceError, SettingsWriteError, StateWriteError
from aws_ctx.lib.result import Err, Ok, Result
from aws_ctx.models import ConfigurationTarget

TEST_ACCESS_KEY = "opensesame"
TEST_SECRET_KEY = "itsasecrettoeverybody"


class FakeSettingsStore:
    """In-memory settings. Writes yield to the loop before landing."""

    def __init__(self, journal: list[str] | None = None, values: dict[str, Any] | None = None):
        self.values: dict[str, Any] = dict(values or {})
        self.writes: list[tuple[str, Any, ConfigurationTarget]] = []
        self.journal = journal if journal is not None else []
        self.fail_writes = False

    def read(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    async def write(
        self,
        key: str,
        value: Any,
        target: ConfigurationTarget = ConfigurationTarget.GLOBAL,
    ) -> Result[None, SettingsWriteError]:
        await asyncio.sleep(0)
        if self.fail_writes:
            return Err(SettingsWriteError(key, "disk full"))
        self.writes.append((key, value, target))
        if value is None:
            self.values.pop(key, None)
        else:
            self.values[key] = value
        self.journal.append(f"write:{key}")
        return Ok(None)


class FakeMemento:
    """In-memory persistent state."""

    def __init__(self, journal: list[str] | None = None):
        self.values: dict[str, Any] = {}
        self.journal = journal if journal is not None else []
        self.fail_writes = False

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    async def update(self, key: str, value: Any) -> Result[None, StateWriteError]:
        await asyncio.sleep(0)
        if self.fail_writes:
            return Err(StateWriteError(key, "read-only"))
        if value is None:
            self.values.pop(key, None)
        else:
            self.values[key] = value
        self.journal.append(f"update:{key}")
        return Ok(None)


class FakeResolver:
    """Resolver that succeeds with fixed credentials, or misses when given none."""

    def __init__(self, source: str, credentials: Credentials | None = None):
        self.source = source
        self.credentials = credentials
        self.calls: list[str] = []

    async def resolve(self, profile_name: str) -> Result[Credentials, CredentialSourceError]:
        self.calls.append(profile_name)
        if self.credentials is None:
            return Err(CredentialSourceError(self.source, profile_name, "not configured"))
        return Ok(self.credentials)


class FakeCredentialsManager:
    """Knows one profile; raises for everything else."""

    def __init__(self, expected_name: str | None = None, reported: Credentials | None = None):
        self.expected_name = expected_name
        self.reported = reported
        self.calls: list[str] = []

    async def get_credentials(self, profile_name: str) -> Credentials:
        self.calls.append(profile_name)
        if self.reported is not None and profile_name == self.expected_name:
            return self.reported
        raise KeyError(profile_name)


@pytest.fixture(autouse=True)
def isolated_aws_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> dict[str, Path]:
    """Point botocore at empty per-test config files, never ~/.aws."""
    aws_dir = tmp_path / "aws"
    aws_dir.mkdir()
    files = {
        "credentials": aws_dir / "credentials",
        "config": aws_dir / "config",
    }
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(files["credentials"]))
    monkeypatch.setenv("AWS_CONFIG_FILE", str(files["config"]))
    for var in ("AWS_PROFILE", "AWS_DEFAULT_PROFILE"):
        monkeypatch.delenv(var, raising=False)
    return files


@pytest.fixture
def aws_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    """Mock AWS credentials for moto."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


@pytest.fixture
def temp_xdg_dirs(monkeypatch: pytest.MonkeyPatch):
    """Create temporary XDG directories for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        base = Path(tmpdir)
        config_dir = base / "config"
        data_dir = base / "data"

        config_dir.mkdir()
        data_dir.mkdir()

        monkeypatch.setenv("XDG_CONFIG_HOME", str(config_dir))
        monkeypatch.setenv("XDG_DATA_HOME", str(data_dir))

        yield {
            "config": config_dir,
            "data": data_dir,
            "base": base,
        }


@pytest.fixture
def journal() -> list[str]:
    """Shared record of writes and notifications, in the order they happened."""
    return []


@pytest.fixture
def settings(journal: list[str]) -> FakeSettingsStore:
    return FakeSettingsStore(journal)


@pytest.fixture
def state(journal: list[str]) -> FakeMemento:
    return FakeMemento(journal)


@pytest.fixture
def test_credentials() -> Credentials:
    return Credentials(TEST_ACCESS_KEY, TEST_SECRET_KEY)


@pytest.fixture
def make_resolver():
    """Factory for FakeResolver."""
    return FakeResolver


@pytest.fixture
def make_credentials_manager():
    """Factory for FakeCredentialsManager."""
    return FakeCredentialsManager
