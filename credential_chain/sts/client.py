"""Call boundary to the STS delegation service."""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Protocol

import boto3
from botocore import UNSIGNED
from botocore.config import Config

from credential_chain.credentials.types import Credentials
from credential_chain.observability.logger_adaptor import get_logger
from credential_chain.sts.models import (
    AssumeRoleRequest,
    AssumeRoleResponse,
    AssumeRoleWithWebIdentityRequest,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class StsConfig:
    """Request scoped configuration for one STS call.

    Attributes:
        credentials: Identity making the call. ``None`` for unsigned calls.
        region: Region of the STS endpoint.
        endpoint_url: Optional endpoint override.
    """

    credentials: Optional[Credentials] = None
    region: Optional[str] = None
    endpoint_url: Optional[str] = None


class StsTransport(Protocol):
    """Protocol for the remote delegation calls made by the chain.

    Implementations raise on transport or service failures.
    """

    async def assume_role(
        self, request: AssumeRoleRequest, config: StsConfig
    ) -> AssumeRoleResponse:
        ...

    async def assume_role_with_web_identity(
        self, request: AssumeRoleWithWebIdentityRequest, config: StsConfig
    ) -> AssumeRoleResponse:
        ...


def create_sts_client(config: StsConfig) -> Any:
    """
    Create a boto3 STS client scoped to the identity and region in ``config``.

    Args:
        config: Request configuration. Without credentials the client
            sends unsigned requests.

    Returns:
        A boto3 STS client.
    """
    client_kwargs: Dict[str, Any] = {}
    if config.region:
        client_kwargs["region_name"] = config.region
    if config.endpoint_url:
        client_kwargs["endpoint_url"] = config.endpoint_url

    if config.credentials is not None:
        client_kwargs["aws_access_key_id"] = config.credentials.access_key_id
        client_kwargs["aws_secret_access_key"] = config.credentials.secret_access_key
        if config.credentials.session_token:
            client_kwargs["aws_session_token"] = config.credentials.session_token
    else:
        client_kwargs["config"] = Config(signature_version=UNSIGNED)

    return boto3.client("sts", **client_kwargs)


class Boto3StsTransport(StsTransport):
    """STS transport backed by boto3.

    boto3 is synchronous, so each call runs in a thread pool executor.
    """

    def __init__(
        self,
        client_factory: Callable[[StsConfig], Any] = create_sts_client,
        executor: Optional[ThreadPoolExecutor] = None,
    ):
        self._client_factory = client_factory
        self._executor = executor

    async def _run(self, config: StsConfig, operation: str, **params: Any) -> Any:
        def call() -> Dict[str, Any]:
            client = self._client_factory(config)
            return getattr(client, operation)(**params)

        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, call)

    async def assume_role(
        self, request: AssumeRoleRequest, config: StsConfig
    ) -> AssumeRoleResponse:
        logger.debug(f"calling sts:AssumeRole for {request.role_arn}")
        response = await self._run(config, "assume_role", **request.to_params())
        return AssumeRoleResponse.model_validate(response)

    async def assume_role_with_web_identity(
        self, request: AssumeRoleWithWebIdentityRequest, config: StsConfig
    ) -> AssumeRoleResponse:
        logger.debug(f"calling sts:AssumeRoleWithWebIdentity for {request.role_arn}")
        response = await self._run(
            config, "assume_role_with_web_identity", **request.to_params()
        )
        return AssumeRoleResponse.model_validate(response)
