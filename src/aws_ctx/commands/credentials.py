"""Credentials command - show which source resolves a profile."""

from pathlib import Path

import click

from aws_ctx.commands.common import (
    echo_key_value,
    handle_result,
    make_manager,
    profile_option,
    run,
    workspace_option,
)


def _mask(access_key: str) -> str:
    """AKIA************WXYZ"""
    if len(access_key) <= 8:
        return "*" * len(access_key)
    return f"{access_key[:4]}{'*' * (len(access_key) - 8)}{access_key[-4:]}"


@click.command()
@profile_option
@workspace_option
def credentials(profile: str | None, workspace: Path | None) -> None:
    """Resolve credentials for a profile without changing the context.

    \b
    Examples:
      aws-ctx credentials
      aws-ctx credentials --profile dev
    """
    manager = make_manager(workspace)
    resolved = handle_result(run(manager.resolve_credentials(profile)))

    echo_key_value("Profile", profile or manager.get_credential_profile_name())
    echo_key_value("Source", resolved.method)
    echo_key_value("Access Key", _mask(resolved.access_key))
