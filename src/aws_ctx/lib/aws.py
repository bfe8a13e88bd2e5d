"""AWS session and client management for resolved credentials.

AwsContext wraps one set of resolved credentials.
Uses cached_property for lazy client initialization.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING

import boto3
from botocore.credentials import Credentials
from botocore.exceptions import BotoCoreError, ClientError

from aws_ctx.lib.errors import AccountLookupError
from aws_ctx.lib.result import Err, Ok, Result

if TYPE_CHECKING:
    from mypy_boto3_sts import STSClient

DEFAULT_REGION = "us-east-1"


@dataclass
class AwsContext:
    """Boto3 session built from credentials the context manager resolved.

    Example:
        ctx = AwsContext(credentials, region="eu-west-1")
        ctx.sts.get_caller_identity()
    """

    credentials: Credentials
    region: str = DEFAULT_REGION

    @cached_property
    def session(self) -> boto3.Session:
        """Boto3 session pinned to the resolved credentials."""
        frozen = self.credentials.get_frozen_credentials()
        return boto3.Session(
            aws_access_key_id=frozen.access_key,
            aws_secret_access_key=frozen.secret_key,
            aws_session_token=frozen.token,
            region_name=self.region,
        )

    @cached_property
    def sts(self) -> STSClient:
        """STS client."""
        return self.session.client("sts")


def lookup_account_id(ctx: AwsContext, profile_name: str) -> Result[str, AccountLookupError]:
    """Account id the credentials belong to, via GetCallerIdentity."""
    try:
        return Ok(ctx.sts.get_caller_identity()["Account"])
    except ClientError as e:
        return Err(AccountLookupError(profile_name, e.response["Error"].get("Message", str(e))))
    except BotoCoreError as e:
        return Err(AccountLookupError(profile_name, str(e)))
