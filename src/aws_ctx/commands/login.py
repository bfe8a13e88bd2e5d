"""Login commands - activate a profile and record its account."""

from pathlib import Path

import click

from aws_ctx import workflows
from aws_ctx.commands.common import (
    handle_result,
    make_manager,
    profile_option,
    region_option,
    run,
    workspace_option,
)


@click.command()
@profile_option
@region_option
@workspace_option
def login(profile: str | None, region: str, workspace: Path | None) -> None:
    """Resolve credentials, look up the account and make the profile active.

    \b
    Examples:
      aws-ctx login --profile dev
      aws-ctx login            # re-check the stored profile
    """
    manager = make_manager(workspace)
    snapshot = handle_result(run(workflows.login(manager, profile, region)))
    click.secho(
        f"Logged in as '{snapshot.profile_name}' (account {snapshot.account_id})",
        fg="green",
        bold=True,
    )


@click.command()
@workspace_option
def logout(workspace: Path | None) -> None:
    """Forget the active profile and account id."""
    manager = make_manager(workspace)
    handle_result(run(workflows.logout(manager)), success_message="Logged out")
