from credential_chain.sts.client import (
    Boto3StsTransport,
    StsConfig,
    StsTransport,
    create_sts_client,
)
from credential_chain.sts.models import (
    AssumeRoleRequest,
    AssumeRoleResponse,
    AssumeRoleWithWebIdentityRequest,
    StsCredentials,
)
from credential_chain.sts.util import default_session_name, into_credentials

__all__ = [
    "AssumeRoleRequest",
    "AssumeRoleResponse",
    "AssumeRoleWithWebIdentityRequest",
    "Boto3StsTransport",
    "StsConfig",
    "StsCredentials",
    "StsTransport",
    "create_sts_client",
    "default_session_name",
    "into_credentials",
]
