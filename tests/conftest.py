"""Global test configuration and fixtures."""

import asyncio
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

import pytest

from credential_chain.credentials.types import Credentials
from credential_chain.profile.exec import ClientConfiguration
from credential_chain.sts import util as sts_util
from credential_chain.sts.client import StsConfig
from credential_chain.sts.models import (
    AssumeRoleRequest,
    AssumeRoleResponse,
    AssumeRoleWithWebIdentityRequest,
    StsCredentials,
)

EXPIRATION = datetime(2030, 1, 1, tzinfo=timezone.utc)


def sts_credentials_for(role_arn: str) -> StsCredentials:
    """Deterministic STS credentials for a role, so tests can trace which hop produced them."""
    return StsCredentials(
        access_key_id=f"ASIA-{role_arn}",
        secret_access_key=f"secret-{role_arn}",
        session_token=f"token-{role_arn}",
        expiration=EXPIRATION,
    )


class RecordingStsTransport:
    """In-memory STS transport that records every call it receives."""

    def __init__(self, failures: Optional[Dict[str, Exception]] = None):
        self.failures = failures or {}
        self.assume_role_calls: List[Tuple[AssumeRoleRequest, StsConfig]] = []
        self.web_identity_calls: List[
            Tuple[AssumeRoleWithWebIdentityRequest, StsConfig]
        ] = []
        self.in_flight = False

    @property
    def call_count(self) -> int:
        return len(self.assume_role_calls) + len(self.web_identity_calls)

    async def assume_role(
        self, request: AssumeRoleRequest, config: StsConfig
    ) -> AssumeRoleResponse:
        assert not self.in_flight, "assume_role issued while another call is in flight"
        self.in_flight = True
        try:
            self.assume_role_calls.append((request, config))
            await asyncio.sleep(0)
            if request.role_arn in self.failures:
                raise self.failures[request.role_arn]
            return AssumeRoleResponse(credentials=sts_credentials_for(request.role_arn))
        finally:
            self.in_flight = False

    async def assume_role_with_web_identity(
        self, request: AssumeRoleWithWebIdentityRequest, config: StsConfig
    ) -> AssumeRoleResponse:
        self.web_identity_calls.append((request, config))
        if request.role_arn in self.failures:
            raise self.failures[request.role_arn]
        return AssumeRoleResponse(credentials=sts_credentials_for(request.role_arn))


@pytest.fixture
def fixed_session_suffix():
    """Pin the suffix of default session names for the duration of a test."""
    sts_util.set_session_suffix_generator(lambda: "1700000000000")
    yield "1700000000000"
    sts_util.reset_session_suffix_generator()


@pytest.fixture
def transport() -> RecordingStsTransport:
    return RecordingStsTransport()


@pytest.fixture
def client_config(transport: RecordingStsTransport) -> ClientConfiguration:
    return ClientConfiguration(transport=transport, region="us-east-1")


@pytest.fixture
def static_credentials() -> Credentials:
    return Credentials(
        access_key_id="AKIDEXAMPLE",
        secret_access_key="secret",
        provider_name="ProfileFile",
    )


@pytest.fixture
def make_transport():
    """Factory for transports that fail on selected role arns."""
    return RecordingStsTransport
