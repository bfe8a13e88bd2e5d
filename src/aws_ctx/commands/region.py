"""Region commands - list, add, remove explorer regions."""

from pathlib import Path

import click

from aws_ctx.commands.common import handle_result, make_manager, run, workspace_option


@click.group()
def region() -> None:
    """Manage the regions shown in the explorer."""
    pass


@region.command("list")
@workspace_option
def list_regions(workspace: Path | None) -> None:
    """Print explorer regions in display order."""
    for code in make_manager(workspace).get_explorer_regions():
        click.echo(code)


@region.command("add")
@click.argument("regions", nargs=-1, required=True)
@workspace_option
def add(regions: tuple[str, ...], workspace: Path | None) -> None:
    """Append REGIONS to the explorer, in the order given.

    \b
    Examples:
      aws-ctx region add us-east-1
      aws-ctx region add eu-west-1 ap-southeast-2
    """
    manager = make_manager(workspace)
    snapshot = handle_result(run(manager.add_explorer_region(*regions)))
    click.secho(f"Explorer regions: {', '.join(snapshot.regions)}", fg="green", bold=True)


@region.command("remove")
@click.argument("regions", nargs=-1, required=True)
@workspace_option
def remove(regions: tuple[str, ...], workspace: Path | None) -> None:
    """Remove every occurrence of REGIONS from the explorer."""
    manager = make_manager(workspace)
    snapshot = handle_result(run(manager.remove_explorer_region(*regions)))
    remaining = ", ".join(snapshot.regions) or "(none)"
    click.secho(f"Explorer regions: {remaining}", fg="green", bold=True)
