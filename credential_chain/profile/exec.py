"""Resolution of a declarative profile chain into executable providers."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Sequence, Tuple

from credential_chain.config import get_settings
from credential_chain.constants import (
    ASSUME_ROLE_SESSION_PURPOSE,
    ENVIRONMENT_SOURCE_NAME,
    WEB_IDENTITY_SESSION_PURPOSE,
)
from credential_chain.credentials.base import ProvideCredentials
from credential_chain.credentials.exceptions import (
    ProviderError,
    UnknownProviderError,
)
from credential_chain.credentials.providers.environment import (
    EnvironmentCredentialsProvider,
)
from credential_chain.credentials.providers.static import StaticCredentialsProvider
from credential_chain.credentials.providers.web_identity import (
    WebIdentityTokenCredentialsProvider,
)
from credential_chain.credentials.types import Credentials
from credential_chain.observability.logger_adaptor import get_logger
from credential_chain.profile import repr as profile_repr
from credential_chain.sts.client import Boto3StsTransport, StsConfig, StsTransport
from credential_chain.sts.models import AssumeRoleRequest
from credential_chain.sts.util import default_session_name, into_credentials

logger = get_logger(__name__)

ASSUME_ROLE_PROVIDER_NAME = "AssumeRoleProvider"


@dataclass(frozen=True)
class ClientConfiguration:
    """Configuration shared by every STS call a chain makes.

    Attributes:
        transport: Call boundary used to reach STS.
        region: Region of the STS endpoint.
        endpoint_url: Optional STS endpoint override.
    """

    transport: StsTransport
    region: Optional[str] = None
    endpoint_url: Optional[str] = None

    @classmethod
    def from_settings(
        cls, transport: Optional[StsTransport] = None
    ) -> "ClientConfiguration":
        """Build a configuration from ``CredentialChainSettings``.

        Defaults to a ``Boto3StsTransport`` when no transport is given.
        """
        settings = get_settings()
        return cls(
            transport=transport or Boto3StsTransport(),
            region=settings.sts_region,
            endpoint_url=settings.sts_endpoint_url,
        )


@dataclass(frozen=True)
class AssumeRoleProvider:
    """One role assumption step of a chain.

    Attributes:
        role_arn: Role to assume.
        external_id: External id passed to STS, if any.
        session_name: Role session name. A default is generated on each
            call when unset.
    """

    role_arn: str
    external_id: Optional[str] = None
    session_name: Optional[str] = None

    async def credentials(
        self, input_credentials: Credentials, client_config: ClientConfiguration
    ) -> Credentials:
        """
        Assume this role using ``input_credentials`` as the calling identity.

        Args:
            input_credentials: Credentials produced by the previous step.
            client_config: Transport and region for the STS call.

        Returns:
            Credentials: Temporary credentials for ``role_arn``.

        Raises:
            ProviderError: If the STS call fails.
            InvalidResponseError: If STS returned no credentials.
        """
        config = StsConfig(
            credentials=input_credentials,
            region=client_config.region,
            endpoint_url=client_config.endpoint_url,
        )
        session_name = self.session_name
        if session_name is None:
            session_name = default_session_name(ASSUME_ROLE_SESSION_PURPOSE)
        request = AssumeRoleRequest(
            role_arn=self.role_arn,
            external_id=self.external_id,
            role_session_name=session_name,
        )
        try:
            response = await client_config.transport.assume_role(request, config)
        except Exception as e:
            raise ProviderError(
                e, provider_name=ASSUME_ROLE_PROVIDER_NAME, role_arn=self.role_arn
            ) from e
        return into_credentials(
            response.credentials, ASSUME_ROLE_PROVIDER_NAME, role_arn=self.role_arn
        )


class NamedProviderFactory:
    """Read-only registry of credential providers by source name."""

    def __init__(self, providers: Mapping[str, ProvideCredentials]):
        self._providers = MappingProxyType(dict(providers))

    def provider(self, name: str) -> Optional[ProvideCredentials]:
        """Return the provider registered as ``name``, or ``None``."""
        return self._providers.get(name)

    def names(self) -> Tuple[str, ...]:
        return tuple(self._providers)

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def __iter__(self) -> Iterator[str]:
        return iter(self._providers)

    def __len__(self) -> int:
        return len(self._providers)


def default_named_providers() -> NamedProviderFactory:
    """Registry with the credential sources a profile may name out of the box."""
    return NamedProviderFactory(
        {ENVIRONMENT_SOURCE_NAME: EnvironmentCredentialsProvider()}
    )


class ProviderChain:
    """A resolved base provider followed by the roles to assume, in order."""

    def __init__(
        self, base: ProvideCredentials, chain: Sequence[AssumeRoleProvider] = ()
    ):
        self._base = base
        self._chain = tuple(chain)

    @property
    def base(self) -> ProvideCredentials:
        return self._base

    @property
    def chain(self) -> Tuple[AssumeRoleProvider, ...]:
        return self._chain

    def __len__(self) -> int:
        return len(self._chain)

    def __repr__(self) -> str:
        return f"ProviderChain(base={self._base!r}, hops={len(self._chain)})"

    @classmethod
    def from_repr(
        cls,
        profile_chain: profile_repr.ProfileChain,
        factory: NamedProviderFactory,
        client_config: Optional[ClientConfiguration] = None,
    ) -> "ProviderChain":
        """
        Resolve a declarative chain.

        The base provider is looked up or constructed once here. No network
        or file access happens during resolution.

        Args:
            profile_chain: The declarative chain.
            factory: Registry used for ``NamedSource`` bases.
            client_config: Transport and region handed to a web identity base.
                Defaults to ``ClientConfiguration.from_settings()``.

        Returns:
            ProviderChain: The resolved chain, one hop per declared role.

        Raises:
            UnknownProviderError: If a named source is not in ``factory``.
        """
        if client_config is None:
            client_config = ClientConfiguration.from_settings()
        base = cls._resolve_base(profile_chain.base, factory, client_config)
        logger.info(f"first credentials will be loaded from {profile_chain.base!r}")

        chain = []
        for role in profile_chain.chain:
            logger.info(f"which will be used to assume a role: {role!r}")
            chain.append(
                AssumeRoleProvider(
                    role_arn=role.role_arn,
                    external_id=role.external_id,
                    session_name=role.session_name,
                )
            )
        return cls(base, chain)

    @staticmethod
    def _resolve_base(
        base: profile_repr.BaseProvider,
        factory: NamedProviderFactory,
        client_config: ClientConfiguration,
    ) -> ProvideCredentials:
        if isinstance(base, profile_repr.NamedSource):
            provider = factory.provider(base.name)
            if provider is None:
                raise UnknownProviderError(base.name)
            return provider

        if isinstance(base, profile_repr.AccessKey):
            return StaticCredentialsProvider(
                Credentials(
                    access_key_id=base.access_key_id,
                    secret_access_key=base.secret_access_key,
                    session_token=base.session_token,
                    provider_name="ProfileFile",
                )
            )

        if isinstance(base, profile_repr.WebIdentityToken):
            return WebIdentityTokenCredentialsProvider.from_parts(
                web_identity_token_file=base.web_identity_token_file,
                role_arn=base.role_arn,
                session_name=(
                    base.session_name
                    if base.session_name is not None
                    else default_session_name(WEB_IDENTITY_SESSION_PURPOSE)
                ),
                transport=client_config.transport,
                region=client_config.region,
                endpoint_url=client_config.endpoint_url,
            )

        raise TypeError(f"unsupported base provider: {base!r}")


def build_provider_chain(
    factory: NamedProviderFactory,
    profile_chain: profile_repr.ProfileChain,
    client_config: Optional[ClientConfiguration] = None,
) -> ProviderChain:
    """Resolve ``profile_chain`` against ``factory``. See ``ProviderChain.from_repr``."""
    return ProviderChain.from_repr(profile_chain, factory, client_config)
