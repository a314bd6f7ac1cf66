"""Environment variable credential provider implementation."""

import os
from typing import Mapping, Optional

from credential_chain.constants import (
    ENV_ACCESS_KEY_ID,
    ENV_SECRET_ACCESS_KEY,
    ENV_SECRET_KEY_LEGACY,
    ENV_SESSION_TOKEN,
)
from credential_chain.credentials.base import ProvideCredentials
from credential_chain.credentials.exceptions import CredentialsNotLoadedError
from credential_chain.credentials.types import Credentials
from credential_chain.observability.logger_adaptor import get_logger

logger = get_logger(__name__)


class EnvironmentCredentialsProvider(ProvideCredentials):
    """Provider for credentials from ``AWS_*`` environment variables.

    Variables are read when credentials are requested, not when the
    provider is built.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ

    async def provide_credentials(self) -> Credentials:
        """
        Read credentials from the environment.

        Returns:
            Credentials: Credentials built from the environment variables.

        Raises:
            CredentialsNotLoadedError: If the access key or secret key is not set.
        """
        environ = self._environ if self._environ is not None else os.environ

        access_key_id = environ.get(ENV_ACCESS_KEY_ID, "").strip()
        secret_access_key = (
            environ.get(ENV_SECRET_ACCESS_KEY)
            or environ.get(ENV_SECRET_KEY_LEGACY)
            or ""
        ).strip()
        session_token = environ.get(ENV_SESSION_TOKEN, "").strip() or None

        if not access_key_id:
            raise CredentialsNotLoadedError(
                f"environment variable not set: {ENV_ACCESS_KEY_ID}"
            )
        if not secret_access_key:
            raise CredentialsNotLoadedError(
                f"environment variable not set: {ENV_SECRET_ACCESS_KEY}"
            )

        logger.debug("loaded credentials from environment")
        return Credentials(
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token,
            provider_name="EnvironmentVariable",
        )
