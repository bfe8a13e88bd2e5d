"""Shared CLI utilities.

Common options, context manager creation, error handling, output formatting.
"""

import asyncio
import sys
from collections.abc import Callable, Coroutine
from pathlib import Path
from typing import Any, ParamSpec, TypeVar

import click

from aws_ctx.lib import paths
from aws_ctx.lib.aws import DEFAULT_REGION
from aws_ctx.lib.context import AwsContextManager
from aws_ctx.lib.errors import (
    AccountLookupError,
    CredentialsNotFoundError,
    NoProfileSelectedError,
    SettingsWriteError,
    StateWriteError,
)
from aws_ctx.lib.memento import FileMemento
from aws_ctx.lib.result import Err, Ok, Result
from aws_ctx.lib.settings import JsonSettingsStore

# Type variables for decorators
P = ParamSpec("P")
T = TypeVar("T")


# Common CLI options as decorators
def workspace_option(fn: Callable[P, T]) -> Callable[P, T]:
    """Add --workspace/-w option."""
    return click.option(
        "--workspace",
        "-w",
        type=click.Path(file_okay=False, path_type=Path),
        default=None,
        help="Project directory whose .aws-ctx/settings.json overrides global settings",
    )(fn)


def region_option(fn: Callable[P, T]) -> Callable[P, T]:
    """Add --region/-r option."""
    return click.option(
        "--region",
        "-r",
        default=DEFAULT_REGION,
        show_default=True,
        help="AWS region for STS calls",
    )(fn)


def profile_option(fn: Callable[P, T]) -> Callable[P, T]:
    """Add --profile/-p option."""
    return click.option(
        "--profile",
        "-p",
        default=None,
        help="AWS profile (defaults to the stored profile)",
    )(fn)


def json_option(fn: Callable[P, T]) -> Callable[P, T]:
    """Add --json flag for JSON output."""
    return click.option(
        "--json",
        "as_json",
        is_flag=True,
        help="Output as JSON",
    )(fn)


def make_manager(workspace: Path | None = None) -> AwsContextManager:
    """Create the context manager over the XDG settings and state files."""
    settings = JsonSettingsStore(
        paths.settings_path(),
        paths.workspace_settings_path(workspace) if workspace else None,
    )
    return AwsContextManager(settings, FileMemento(paths.state_path()))


def run(coro: Coroutine[Any, Any, T]) -> T:
    """Run a context manager coroutine to completion."""
    return asyncio.run(coro)


def handle_result(result: Result[T, Any], success_message: str | None = None) -> T:
    """Handle a Result, exiting on error with appropriate message.

    On Ok: returns the value, optionally prints success message
    On Err: prints error and exits with code 1
    """
    match result:
        case Ok(value):
            if success_message:
                click.secho(success_message, fg="green", bold=True)
            return value
        case Err(error):
            handle_error(error)
            sys.exit(1)  # Should never reach here, but for type checker


def handle_error(error: Any) -> None:
    """Print error message and exit."""
    message = _format_error(error)
    click.secho(f"Error: {message}", fg="red", err=True)
    sys.exit(1)


def _format_error(error: Any) -> str:
    """Format error for display."""
    match error:
        case NoProfileSelectedError():
            return "No profile selected. Pass --profile or run 'aws-ctx profile set NAME'."

        case CredentialsNotFoundError(profile_name, attempts):
            lines = [f"No credentials found for profile '{profile_name}'."]
            lines.extend(f"  {a.source}: {a.reason}" for a in attempts)
            return "\n".join(lines)

        case AccountLookupError(profile_name, reason):
            return f"Could not determine the account for profile '{profile_name}': {reason}"

        case SettingsWriteError(key, reason):
            return f"Failed to save setting '{key}': {reason}"

        case StateWriteError(key, reason):
            return f"Failed to save state '{key}': {reason}"

        case _:
            return str(error)


def echo_key_value(key: str, value: Any, indent: int = 0) -> None:
    """Print a key-value pair with optional indentation."""
    prefix = "  " * indent
    click.echo(f"{prefix}{key}: {value}")


def echo_section(title: str) -> None:
    """Print a section header."""
    click.echo()
    click.secho(title, bold=True)
    click.echo("-" * len(title))
