"""Base definitions for credential providers."""

from typing import Protocol, runtime_checkable

from credential_chain.credentials.types import Credentials


@runtime_checkable
class ProvideCredentials(Protocol):
    """Protocol defining the interface for credential providers."""

    async def provide_credentials(self) -> Credentials:
        """
        Load credentials from this provider's source.

        Returns:
            Credentials: The loaded credentials.

        Raises:
            CredentialsError: If credentials cannot be loaded.
        """
        ...
