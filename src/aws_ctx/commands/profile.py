"""Profile commands - show, set, clear the active credential profile."""

from pathlib import Path

import click

from aws_ctx.commands.common import handle_result, make_manager, run, workspace_option


@click.group()
def profile() -> None:
    """Manage the active credential profile."""
    pass


@profile.command("show")
@workspace_option
def show(workspace: Path | None) -> None:
    """Print the active profile name."""
    name = make_manager(workspace).get_credential_profile_name()
    if name is None:
        click.echo("(none)")
        return
    click.echo(name)


@profile.command("set")
@click.argument("name")
@workspace_option
def set_(name: str, workspace: Path | None) -> None:
    """Make NAME the active profile.

    Does not check that credentials exist; use 'aws-ctx login' for that.
    """
    manager = make_manager(workspace)
    handle_result(
        run(manager.set_credential_profile_name(name)),
        success_message=f"Active profile: {name}",
    )


@profile.command("clear")
@workspace_option
def clear(workspace: Path | None) -> None:
    """Forget the active profile."""
    manager = make_manager(workspace)
    handle_result(run(manager.set_credential_profile_name(None)), success_message="Profile cleared")
