"""Execution of a resolved provider chain."""

from typing import Optional

from credential_chain.credentials.base import ProvideCredentials
from credential_chain.credentials.exceptions import (
    InvalidResponseError,
    ProviderError,
)
from credential_chain.credentials.types import Credentials
from credential_chain.observability.logger_adaptor import get_logger
from credential_chain.profile.exec import (
    ClientConfiguration,
    NamedProviderFactory,
    ProviderChain,
    default_named_providers,
)
from credential_chain.profile.repr import ProfileChain

logger = get_logger(__name__)


async def execute_chain(
    chain: ProviderChain, client_config: ClientConfiguration
) -> Credentials:
    """
    Load base credentials, then assume each role of the chain in order.

    Each hop is called with the credentials produced by the step right
    before it. The first failure stops the chain; no partial result is
    returned.

    Args:
        chain: The resolved chain.
        client_config: Transport and region for the STS calls.

    Returns:
        Credentials: Credentials of the last hop, or of the base when the
        chain has no hops.

    Raises:
        CredentialsError: From the base provider or from the first failing hop.
            A ``ProviderError`` or ``InvalidResponseError`` from a hop carries
            its ``hop_index``.
    """
    credentials = await chain.base.provide_credentials()
    logger.debug(f"loaded base credentials: {credentials!r}")

    for index, hop in enumerate(chain.chain):
        try:
            credentials = await hop.credentials(credentials, client_config)
        except ProviderError as e:
            logger.warning(f"failed to assume role {hop.role_arn} at hop {index}")
            raise e.at_hop(index) from e.cause
        except InvalidResponseError as e:
            logger.warning(
                f"invalid response assuming role {hop.role_arn} at hop {index}"
            )
            raise e.at_hop(index) from e
        logger.debug(f"assumed role {hop.role_arn}: {credentials!r}")

    return credentials


class ProfileChainCredentialsProvider(ProvideCredentials):
    """Credentials provider backed by a resolved profile chain.

    Example:
        >>> provider = ProfileChainCredentialsProvider.from_profile_chain(
        ...     ProfileChain(base=NamedSource("Environment"), chain=[RoleArn(arn)]),
        ...     client_config=ClientConfiguration.from_settings(),
        ... )
        >>> credentials = await provider.provide_credentials()
    """

    def __init__(self, chain: ProviderChain, client_config: ClientConfiguration):
        self.chain = chain
        self.client_config = client_config

    @classmethod
    def from_profile_chain(
        cls,
        profile_chain: ProfileChain,
        client_config: Optional[ClientConfiguration] = None,
        factory: Optional[NamedProviderFactory] = None,
    ) -> "ProfileChainCredentialsProvider":
        """
        Resolve ``profile_chain`` and wrap it in a provider.

        Args:
            profile_chain: The declarative chain.
            client_config: Defaults to ``ClientConfiguration.from_settings()``.
            factory: Defaults to ``default_named_providers()``.

        Raises:
            UnknownProviderError: If the base names an unregistered source.
        """
        if client_config is None:
            client_config = ClientConfiguration.from_settings()
        if factory is None:
            factory = default_named_providers()
        chain = ProviderChain.from_repr(profile_chain, factory, client_config)
        return cls(chain, client_config)

    async def provide_credentials(self) -> Credentials:
        return await execute_chain(self.chain, self.client_config)

    def __repr__(self) -> str:
        return f"ProfileChainCredentialsProvider({self.chain!r})"
