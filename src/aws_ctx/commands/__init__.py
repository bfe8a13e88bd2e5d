"""Commands layer - CLI facade over the context manager and workflows."""

from aws_ctx.commands.credentials import credentials
from aws_ctx.commands.login import login, logout
from aws_ctx.commands.profile import profile
from aws_ctx.commands.region import region
from aws_ctx.commands.status import status

__all__ = [
    "status",
    "profile",
    "region",
    "credentials",
    "login",
    "logout",
]
