"""Static credential provider implementation."""

from credential_chain.credentials.base import ProvideCredentials
from credential_chain.credentials.types import Credentials


class StaticCredentialsProvider(ProvideCredentials):
    """Provider for credentials held in memory."""

    def __init__(self, credentials: Credentials):
        self._credentials = credentials

    async def provide_credentials(self) -> Credentials:
        """
        Return the held credentials as is.

        Returns:
            Credentials: The same credentials this provider was built with.
        """
        return self._credentials

    def __repr__(self) -> str:
        return f"StaticCredentialsProvider({self._credentials!r})"
