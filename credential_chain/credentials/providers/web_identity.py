"""Web identity token credential provider implementation."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import aiofiles

from credential_chain.credentials.base import ProvideCredentials
from credential_chain.credentials.exceptions import (
    CredentialsNotLoadedError,
    ProviderError,
)
from credential_chain.credentials.types import Credentials
from credential_chain.observability.logger_adaptor import get_logger
from credential_chain.sts.client import StsConfig, StsTransport
from credential_chain.sts.models import AssumeRoleWithWebIdentityRequest
from credential_chain.sts.util import into_credentials

logger = get_logger(__name__)

PROVIDER_NAME = "WebIdentityToken"


@dataclass(frozen=True)
class WebIdentityTokenRole:
    """Static configuration for a web identity role.

    Attributes:
        web_identity_token_file: Path to the file holding the OIDC token.
        role_arn: Role to assume with the token.
        session_name: Role session name sent to STS.
    """

    web_identity_token_file: Path
    role_arn: str
    session_name: str


class WebIdentityTokenCredentialsProvider(ProvideCredentials):
    """Provider exchanging a web identity token file for role credentials.

    The token file is read on every call to ``provide_credentials``; nothing
    is read or sent when the provider is constructed.
    """

    def __init__(
        self,
        static_configuration: WebIdentityTokenRole,
        transport: StsTransport,
        region: Optional[str] = None,
        endpoint_url: Optional[str] = None,
    ):
        self.static_configuration = static_configuration
        self._transport = transport
        self._region = region
        self._endpoint_url = endpoint_url

    @classmethod
    def from_parts(
        cls,
        web_identity_token_file: Union[str, Path],
        role_arn: str,
        session_name: str,
        transport: StsTransport,
        region: Optional[str] = None,
        endpoint_url: Optional[str] = None,
    ) -> "WebIdentityTokenCredentialsProvider":
        return cls(
            WebIdentityTokenRole(
                web_identity_token_file=Path(web_identity_token_file),
                role_arn=role_arn,
                session_name=session_name,
            ),
            transport=transport,
            region=region,
            endpoint_url=endpoint_url,
        )

    async def _read_token(self) -> str:
        token_file = self.static_configuration.web_identity_token_file
        try:
            async with aiofiles.open(token_file, mode="r") as f:
                token = await f.read()
        except OSError as e:
            raise CredentialsNotLoadedError(
                f"could not read web identity token file {token_file}: {e}"
            ) from e
        return token.strip()

    async def provide_credentials(self) -> Credentials:
        """
        Exchange the web identity token for temporary credentials.

        Returns:
            Credentials: Temporary credentials for the configured role.

        Raises:
            CredentialsNotLoadedError: If the token file cannot be read.
            ProviderError: If the STS call fails.
        """
        role = self.static_configuration
        token = await self._read_token()
        request = AssumeRoleWithWebIdentityRequest(
            role_arn=role.role_arn,
            role_session_name=role.session_name,
            web_identity_token=token,
        )
        config = StsConfig(region=self._region, endpoint_url=self._endpoint_url)
        logger.debug(f"assuming role {role.role_arn} with web identity token")
        try:
            response = await self._transport.assume_role_with_web_identity(
                request, config
            )
        except Exception as e:
            raise ProviderError(
                e, provider_name=PROVIDER_NAME, role_arn=role.role_arn
            ) from e
        return into_credentials(
            response.credentials, PROVIDER_NAME, role_arn=role.role_arn
        )

    def __repr__(self) -> str:
        role = self.static_configuration
        return (
            f"WebIdentityTokenCredentialsProvider(role_arn={role.role_arn!r}, "
            f"web_identity_token_file={str(role.web_identity_token_file)!r})"
        )
