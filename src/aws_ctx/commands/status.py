"""Status command - show the current context."""

from pathlib import Path

import click

from aws_ctx.commands.common import (
    echo_key_value,
    echo_section,
    json_option,
    make_manager,
    workspace_option,
)


@click.command()
@workspace_option
@json_option
def status(workspace: Path | None, as_json: bool) -> None:
    """Show the selected profile, account id and explorer regions.

    \b
    Examples:
      aws-ctx status
      aws-ctx status --json
    """
    current = make_manager(workspace).current_context()

    if as_json:
        click.echo(current.to_json())
        return

    click.echo("AWS Context")
    click.echo("=" * 40)
    echo_key_value("Profile", current.profile_name or "(none)")
    echo_key_value("Account", current.account_id or "(unknown)")

    echo_section(f"Explorer Regions ({len(current.regions)})")
    if current.regions:
        for code in current.regions:
            click.echo(f"  {code}")
    else:
        click.echo("  (none)")

    click.echo()
