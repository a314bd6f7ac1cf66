"""Resolve and execute AWS profile credential chains.

A profile chain is a base credential source followed by roles to assume.
``ProviderChain.from_repr`` resolves the chain and ``execute_chain`` runs it:

    >>> from credential_chain import (
    ...     AccessKey, ClientConfiguration, NamedProviderFactory,
    ...     ProfileChain, ProviderChain, RoleArn, execute_chain,
    ... )
    >>> chain = ProviderChain.from_repr(
    ...     ProfileChain(
    ...         base=AccessKey("AKIDEXAMPLE", "secret"),
    ...         chain=[RoleArn("arn:aws:iam::111111111111:role/A")],
    ...     ),
    ...     NamedProviderFactory({}),
    ...     ClientConfiguration.from_settings(),
    ... )
    >>> credentials = await execute_chain(chain, ClientConfiguration.from_settings())
"""

from credential_chain.credentials import (
    Credentials,
    CredentialsError,
    CredentialsNotLoadedError,
    InvalidResponseError,
    ProfileFileError,
    ProvideCredentials,
    ProviderError,
    UnknownProviderError,
)
from credential_chain.profile import (
    AccessKey,
    AssumeRoleProvider,
    ClientConfiguration,
    NamedProviderFactory,
    NamedSource,
    ProfileChain,
    ProfileChainCredentialsProvider,
    ProviderChain,
    RoleArn,
    WebIdentityToken,
    build_provider_chain,
    default_named_providers,
    execute_chain,
)

__version__ = "0.1.0"

__all__ = [
    # Credentials
    "Credentials",
    "ProvideCredentials",
    # Errors
    "CredentialsError",
    "CredentialsNotLoadedError",
    "InvalidResponseError",
    "ProfileFileError",
    "ProviderError",
    "UnknownProviderError",
    # Declarative chain
    "AccessKey",
    "NamedSource",
    "ProfileChain",
    "RoleArn",
    "WebIdentityToken",
    # Resolution and execution
    "AssumeRoleProvider",
    "ClientConfiguration",
    "NamedProviderFactory",
    "ProfileChainCredentialsProvider",
    "ProviderChain",
    "build_provider_chain",
    "default_named_providers",
    "execute_chain",
]
