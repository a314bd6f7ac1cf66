from credential_chain.credentials.providers.environment import (
    EnvironmentCredentialsProvider,
)
from credential_chain.credentials.providers.static import StaticCredentialsProvider
from credential_chain.credentials.providers.web_identity import (
    WebIdentityTokenCredentialsProvider,
    WebIdentityTokenRole,
)

__all__ = [
    "EnvironmentCredentialsProvider",
    "StaticCredentialsProvider",
    "WebIdentityTokenCredentialsProvider",
    "WebIdentityTokenRole",
]
