"""aws-ctx CLI entry point."""

import logging

import click

from . import __version__
from .commands import credentials, login, logout, profile, region, status


@click.group()
@click.version_option(version=__version__, prog_name="aws-ctx")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """aws-ctx - active AWS profile, account and explorer regions."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
cli.add_command(status)
cli.add_command(profile)
cli.add_command(region)
cli.add_command(credentials)
cli.add_command(login)
cli.add_command(logout)


if __name__ == "__main__":
    cli()
