"""Login workflow - select a profile and remember its account.

Flow:
1. Resolve credentials for the given (or stored) profile
2. Ask STS which account they belong to
3. Persist profile, then account id (one change event each)
"""

import logging

from aws_ctx.lib.aws import DEFAULT_REGION, AwsContext, lookup_account_id
from aws_ctx.lib.context import AwsContextManager
from aws_ctx.lib.errors import ContextWriteError, LoginError, NoProfileSelectedError
from aws_ctx.lib.result import Err, Ok, Result
from aws_ctx.models import ContextSnapshot

logger = logging.getLogger(__name__)


async def login(
    manager: AwsContextManager,
    profile_name: str | None = None,
    region: str = DEFAULT_REGION,
) -> Result[ContextSnapshot, LoginError]:
    """Make profile_name the active profile and record its account id.

    Nothing is persisted unless both credential resolution and the STS
    lookup succeed.
    """
    name = profile_name or manager.get_credential_profile_name()
    if not name:
        return Err(NoProfileSelectedError())

    match await manager.resolve_credentials(name):
        case Err(error):
            return Err(error)
        case Ok(credentials):
            pass

    match lookup_account_id(AwsContext(credentials, region), name):
        case Err(error):
            return Err(error)
        case Ok(account_id):
            pass

    logger.info("Logging in with profile %r (account %s)", name, account_id)

    match await manager.set_credential_profile_name(name):
        case Err(error):
            return Err(error)
        case Ok(_):
            pass

    return await manager.set_credential_account_id(account_id)


async def logout(manager: AwsContextManager) -> Result[ContextSnapshot, ContextWriteError]:
    """Forget the active profile and account id."""
    match await manager.set_credential_profile_name(None):
        case Err(error):
            return Err(error)
        case Ok(_):
            pass

    return await manager.set_credential_account_id(None)
