"""Helpers shared by the STS based providers."""

import time
from typing import Callable, Optional

from credential_chain.constants import MAX_SESSION_NAME_LENGTH
from credential_chain.credentials.exceptions import InvalidResponseError
from credential_chain.credentials.types import Credentials
from credential_chain.sts.models import StsCredentials


def _timestamp_suffix() -> str:
    return str(int(time.time() * 1000))


_session_suffix: Callable[[], str] = _timestamp_suffix


def set_session_suffix_generator(generator: Callable[[], str]) -> None:
    """Replace the generator used for the uniqueness suffix of default session names."""
    global _session_suffix
    _session_suffix = generator


def reset_session_suffix_generator() -> None:
    """Restore the default millisecond timestamp suffix."""
    global _session_suffix
    _session_suffix = _timestamp_suffix


def default_session_name(purpose: str) -> str:
    """
    Build a default role session name for the given purpose.

    Args:
        purpose (str): Tag identifying what the session is for, e.g.
            ``"assume-role-from-profile"``.

    Returns:
        str: ``"{purpose}-{suffix}"`` truncated to the STS maximum length.
    """
    return f"{purpose}-{_session_suffix()}"[:MAX_SESSION_NAME_LENGTH]


def into_credentials(
    sts_credentials: Optional[StsCredentials],
    provider_name: str,
    role_arn: Optional[str] = None,
) -> Credentials:
    """
    Convert an STS credentials block into ``Credentials``.

    Args:
        sts_credentials: Credentials block from an STS response.
        provider_name: Name recorded on the returned credentials.
        role_arn: Role the credentials were requested for, named in errors.

    Raises:
        InvalidResponseError: If the response carried no credentials.
    """
    if sts_credentials is None:
        raise InvalidResponseError(
            "STS credentials must be defined", role_arn=role_arn
        )
    return Credentials(
        access_key_id=sts_credentials.access_key_id,
        secret_access_key=sts_credentials.secret_access_key,
        session_token=sts_credentials.session_token,
        expiry=sts_credentials.expiration,
        provider_name=provider_name,
    )
