"""Workflows layer - orchestrate the context manager into user intents."""

from aws_ctx.workflows.login import login, logout

__all__ = [
    "login",
    "logout",
]
