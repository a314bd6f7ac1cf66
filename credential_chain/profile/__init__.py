from credential_chain.profile.exec import (
    AssumeRoleProvider,
    ClientConfiguration,
    NamedProviderFactory,
    ProviderChain,
    build_provider_chain,
    default_named_providers,
)
from credential_chain.profile.provider import (
    ProfileChainCredentialsProvider,
    execute_chain,
)
from credential_chain.profile.repr import (
    AccessKey,
    BaseProvider,
    NamedSource,
    ProfileChain,
    RoleArn,
    WebIdentityToken,
)

__all__ = [
    "AccessKey",
    "AssumeRoleProvider",
    "BaseProvider",
    "ClientConfiguration",
    "NamedProviderFactory",
    "NamedSource",
    "ProfileChain",
    "ProfileChainCredentialsProvider",
    "ProviderChain",
    "RoleArn",
    "WebIdentityToken",
    "build_provider_chain",
    "default_named_providers",
    "execute_chain",
]
