"""Tests for the aws-ctx command line."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner
from moto import mock_aws

from aws_ctx.main import cli


@pytest.fixture
def runner(temp_xdg_dirs) -> CliRunner:
    return CliRunner()


@pytest.fixture
def dev_profile(isolated_aws_config) -> None:
    isolated_aws_config["credentials"].write_text(
        "[dev]\naws_access_key_id = AKIDEXAMPLE12345\naws_secret_access_key = testing\n"
    )


def _settings(temp_xdg_dirs) -> dict:
    path = temp_xdg_dirs["config"] / "aws-ctx" / "settings.json"
    return json.loads(path.read_text())


class TestRegionCommands:
    """Tests for region list/add/remove."""

    def test_list_empty(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["region", "list"])

        assert result.exit_code == 0
        assert result.output == ""

    def test_add_then_list(self, runner: CliRunner, temp_xdg_dirs) -> None:
        result = runner.invoke(cli, ["region", "add", "us-east-1", "eu-west-1"])

        assert result.exit_code == 0, result.output
        assert "us-east-1, eu-west-1" in result.output
        assert _settings(temp_xdg_dirs)["explorerRegions"] == ["us-east-1", "eu-west-1"]

        listed = runner.invoke(cli, ["region", "list"])
        assert listed.output.splitlines() == ["us-east-1", "eu-west-1"]

    def test_remove(self, runner: CliRunner, temp_xdg_dirs) -> None:
        runner.invoke(cli, ["region", "add", "us-east-1", "eu-west-1"])

        result = runner.invoke(cli, ["region", "remove", "us-east-1"])

        assert result.exit_code == 0, result.output
        assert _settings(temp_xdg_dirs)["explorerRegions"] == ["eu-west-1"]

    def test_add_requires_region(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["region", "add"])

        assert result.exit_code != 0


class TestProfileCommands:
    """Tests for profile show/set/clear."""

    def test_show_none(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["profile", "show"])

        assert result.output.strip() == "(none)"

    def test_set_show_clear(self, runner: CliRunner) -> None:
        set_result = runner.invoke(cli, ["profile", "set", "dev"])
        assert set_result.exit_code == 0, set_result.output

        assert runner.invoke(cli, ["profile", "show"]).output.strip() == "dev"

        runner.invoke(cli, ["profile", "clear"])
        assert runner.invoke(cli, ["profile", "show"]).output.strip() == "(none)"

    def test_workspace_profile_overrides_global(self, runner: CliRunner, tmp_path: Path) -> None:
        workspace = tmp_path / "project"
        (workspace / ".aws-ctx").mkdir(parents=True)
        (workspace / ".aws-ctx" / "settings.json").write_text(json.dumps({"profile": "local"}))
        runner.invoke(cli, ["profile", "set", "dev"])

        result = runner.invoke(cli, ["profile", "show", "--workspace", str(workspace)])

        assert result.output.strip() == "local"


class TestStatusCommand:
    """Tests for status."""

    def test_status_json(self, runner: CliRunner) -> None:
        runner.invoke(cli, ["profile", "set", "dev"])
        runner.invoke(cli, ["region", "add", "ap-southeast-2"])

        result = runner.invoke(cli, ["status", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "profileName": "dev",
            "accountId": None,
            "regions": ["ap-southeast-2"],
        }

    def test_status_human(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["status"])

        assert result.exit_code == 0
        assert "Profile: (none)" in result.output
        assert "Explorer Regions (0)" in result.output


class TestCredentialsCommand:
    """Tests for credentials."""

    def test_resolves_and_masks(self, runner: CliRunner, dev_profile) -> None:
        result = runner.invoke(cli, ["credentials", "--profile", "dev"])

        assert result.exit_code == 0, result.output
        assert "shared-credentials-file" in result.output
        assert "AKID********2345" in result.output
        assert "AKIDEXAMPLE12345" not in result.output

    def test_no_profile(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["credentials"])

        assert result.exit_code == 1
        assert "No profile selected" in result.output

    def test_unknown_profile_lists_attempts(self, runner: CliRunner, dev_profile) -> None:
        result = runner.invoke(cli, ["credentials", "--profile", "ghost"])

        assert result.exit_code == 1
        assert "shared-credentials-file" in result.output
        assert "credential-process" in result.output


class TestLoginCommands:
    """Tests for login/logout."""

    def test_login_and_logout(self, runner: CliRunner, dev_profile, aws_credentials) -> None:
        with mock_aws():
            result = runner.invoke(cli, ["login", "--profile", "dev"])

        assert result.exit_code == 0, result.output
        assert "account 123456789012" in result.output

        status = json.loads(runner.invoke(cli, ["status", "--json"]).output)
        assert status["profileName"] == "dev"
        assert status["accountId"] == "123456789012"

        logout = runner.invoke(cli, ["logout"])
        assert logout.exit_code == 0
        status = json.loads(runner.invoke(cli, ["status", "--json"]).output)
        assert status["profileName"] is None
        assert status["accountId"] is None

    def test_login_without_profile_fails(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["login"])

        assert result.exit_code == 1
        assert "No profile selected" in result.output
