import asyncio
from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from botocore.exceptions import EndpointConnectionError

from credential_chain.credentials.exceptions import (
    CredentialsNotLoadedError,
    InvalidResponseError,
    ProviderError,
    UnknownProviderError,
)
from credential_chain.credentials.providers.environment import (
    EnvironmentCredentialsProvider,
)
from credential_chain.credentials.types import Credentials
from credential_chain.profile.exec import (
    ClientConfiguration,
    NamedProviderFactory,
    ProviderChain,
)
from credential_chain.profile.provider import (
    ProfileChainCredentialsProvider,
    execute_chain,
)
from credential_chain.profile.repr import AccessKey, NamedSource, ProfileChain, RoleArn
from credential_chain.sts.models import AssumeRoleResponse, StsCredentials

ROLE_1 = "arn:aws:iam::111111111111:role/A"
ROLE_2 = "arn:aws:iam::222222222222:role/B"
ROLE_3 = "arn:aws:iam::333333333333:role/C"


def build(client_config: ClientConfiguration, *roles: RoleArn) -> ProviderChain:
    return ProviderChain.from_repr(
        ProfileChain(base=AccessKey("AKIDEXAMPLE", "secret"), chain=roles),
        NamedProviderFactory({}),
        client_config,
    )


class StrictOrderTransport:
    """Fails if a role is assumed before the previous role's credentials exist."""

    def __init__(self, expected_roles):
        self.expected_roles = list(expected_roles)
        self.completed = []

    async def assume_role(self, request, config):
        position = len(self.completed)
        if request.role_arn != self.expected_roles[position]:
            raise AssertionError(f"{request.role_arn} called out of order")
        expected_caller = (
            "AKIDEXAMPLE" if position == 0 else f"key-{self.completed[-1]}"
        )
        if config.credentials.access_key_id != expected_caller:
            raise AssertionError(f"{request.role_arn} called with stale credentials")
        await asyncio.sleep(0)
        self.completed.append(request.role_arn)
        return AssumeRoleResponse(
            credentials=StsCredentials(
                access_key_id=f"key-{request.role_arn}",
                secret_access_key="secret",
                session_token="token",
                expiration=datetime(2030, 1, 1, tzinfo=timezone.utc),
            )
        )

    async def assume_role_with_web_identity(self, request, config):
        raise AssertionError("not expected")


class TestExecuteChain:
    @pytest.mark.asyncio
    async def test_no_hops_returns_base_credentials(
        self, client_config: ClientConfiguration, transport
    ):
        credentials = await execute_chain(build(client_config), client_config)

        assert credentials == Credentials("AKIDEXAMPLE", "secret")
        assert transport.call_count == 0

    @pytest.mark.asyncio
    async def test_single_hop_uses_static_credentials(
        self, client_config: ClientConfiguration, transport, fixed_session_suffix
    ):
        chain = build(client_config, RoleArn(ROLE_1))
        assert len(chain.chain) == 1

        credentials = await execute_chain(chain, client_config)

        assert len(transport.assume_role_calls) == 1
        request, config = transport.assume_role_calls[0]
        assert config.credentials == Credentials("AKIDEXAMPLE", "secret")
        assert request.role_session_name == (
            f"assume-role-from-profile-{fixed_session_suffix}"
        )
        assert credentials.access_key_id == f"ASIA-{ROLE_1}"

    @pytest.mark.asyncio
    async def test_two_hops_are_sequential(
        self, client_config: ClientConfiguration, transport
    ):
        chain = build(
            client_config, RoleArn(ROLE_1), RoleArn(ROLE_2, external_id="eid")
        )

        credentials = await execute_chain(chain, client_config)

        assert [r.role_arn for r, _ in transport.assume_role_calls] == [ROLE_1, ROLE_2]
        first_request, first_config = transport.assume_role_calls[0]
        second_request, second_config = transport.assume_role_calls[1]
        assert first_request.external_id is None
        assert first_config.credentials.access_key_id == "AKIDEXAMPLE"
        assert second_request.external_id == "eid"
        assert second_config.credentials.access_key_id == f"ASIA-{ROLE_1}"
        assert second_config.credentials.session_token == f"token-{ROLE_1}"
        assert credentials.access_key_id == f"ASIA-{ROLE_2}"

    @pytest.mark.asyncio
    async def test_each_hop_only_sees_previous_hop(
        self, client_config: ClientConfiguration, transport
    ):
        chain = build(
            client_config, RoleArn(ROLE_1), RoleArn(ROLE_2), RoleArn(ROLE_3)
        )

        await execute_chain(chain, client_config)

        callers = [c.credentials.access_key_id for _, c in transport.assume_role_calls]
        assert callers == ["AKIDEXAMPLE", f"ASIA-{ROLE_1}", f"ASIA-{ROLE_2}"]

    @pytest.mark.asyncio
    async def test_strict_order_double(self):
        transport = StrictOrderTransport([ROLE_1, ROLE_2, ROLE_3])
        client_config = ClientConfiguration(transport=transport)
        chain = build(
            client_config, RoleArn(ROLE_1), RoleArn(ROLE_2), RoleArn(ROLE_3)
        )

        credentials = await execute_chain(chain, client_config)

        assert transport.completed == [ROLE_1, ROLE_2, ROLE_3]
        assert credentials.access_key_id == f"key-{ROLE_3}"

    @pytest.mark.asyncio
    async def test_failing_hop_stops_chain(self, make_transport):
        error = EndpointConnectionError(endpoint_url="https://sts.amazonaws.com")
        transport = make_transport(failures={ROLE_2: error})
        client_config = ClientConfiguration(transport=transport, region="us-east-1")
        chain = build(
            client_config, RoleArn(ROLE_1), RoleArn(ROLE_2), RoleArn(ROLE_3)
        )

        with pytest.raises(ProviderError) as exc_info:
            await execute_chain(chain, client_config)

        assert [r.role_arn for r, _ in transport.assume_role_calls] == [ROLE_1, ROLE_2]
        assert exc_info.value.hop_index == 1
        assert exc_info.value.role_arn == ROLE_2
        assert exc_info.value.cause is error
        assert exc_info.value.__cause__ is error
        assert ROLE_2 in str(exc_info.value)
        assert "after 1 successful hops" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_empty_response_names_failing_hop(self, make_transport):
        transport = make_transport()
        original = transport.assume_role

        async def assume_role(request, config):
            if request.role_arn == ROLE_2:
                transport.assume_role_calls.append((request, config))
                return AssumeRoleResponse()
            return await original(request, config)

        transport.assume_role = assume_role
        client_config = ClientConfiguration(transport=transport, region="us-east-1")
        chain = build(
            client_config, RoleArn(ROLE_1), RoleArn(ROLE_2), RoleArn(ROLE_3)
        )

        with pytest.raises(InvalidResponseError) as exc_info:
            await execute_chain(chain, client_config)

        assert [r.role_arn for r, _ in transport.assume_role_calls] == [ROLE_1, ROLE_2]
        assert exc_info.value.role_arn == ROLE_2
        assert exc_info.value.hop_index == 1
        assert ROLE_2 in str(exc_info.value)
        assert "after 1 successful hops" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_base_failure_stops_before_hops(
        self, client_config: ClientConfiguration, transport
    ):
        chain = ProviderChain.from_repr(
            ProfileChain(base=NamedSource("Environment"), chain=[RoleArn(ROLE_1)]),
            NamedProviderFactory({"Environment": EnvironmentCredentialsProvider({})}),
            client_config,
        )

        with pytest.raises(CredentialsNotLoadedError):
            await execute_chain(chain, client_config)

        assert transport.call_count == 0

    @pytest.mark.asyncio
    async def test_cancellation_stops_chain(self):
        started = asyncio.Event()
        release = asyncio.Event()

        async def assume_role(request, config):
            started.set()
            await release.wait()
            raise AssertionError("should have been cancelled")

        transport = AsyncMock()
        transport.assume_role.side_effect = assume_role
        client_config = ClientConfiguration(transport=transport)
        chain = build(client_config, RoleArn(ROLE_1), RoleArn(ROLE_2))

        task = asyncio.create_task(execute_chain(chain, client_config))
        await started.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert transport.assume_role.await_count == 1

    @pytest.mark.asyncio
    async def test_concurrent_executions_share_chain(self, client_config, transport):
        chain = build(client_config, RoleArn(ROLE_1))
        other_transport = type(transport)()
        other_config = ClientConfiguration(transport=other_transport)

        first, second = await asyncio.gather(
            execute_chain(chain, client_config),
            execute_chain(chain, other_config),
        )

        assert first == second
        assert transport.call_count == 1
        assert other_transport.call_count == 1


class TestProfileChainCredentialsProvider:
    @pytest.mark.asyncio
    async def test_provide_credentials(
        self, client_config: ClientConfiguration, transport
    ):
        provider = ProfileChainCredentialsProvider.from_profile_chain(
            ProfileChain(base=AccessKey("AKIDEXAMPLE", "secret"), chain=[RoleArn(ROLE_1)]),
            client_config=client_config,
            factory=NamedProviderFactory({}),
        )

        credentials = await provider.provide_credentials()

        assert credentials.access_key_id == f"ASIA-{ROLE_1}"
        assert transport.call_count == 1

    def test_default_factory_rejects_unknown_source(
        self, client_config: ClientConfiguration
    ):
        with pytest.raises(UnknownProviderError, match="Ec2InstanceMetadata"):
            ProfileChainCredentialsProvider.from_profile_chain(
                ProfileChain(base=NamedSource("Ec2InstanceMetadata")),
                client_config=client_config,
            )

    @pytest.mark.asyncio
    async def test_environment_source_from_default_factory(
        self, client_config: ClientConfiguration, monkeypatch
    ):
        monkeypatch.setenv("AWS_ACCESS_KEY_ID", "AKIDENV")
        monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "envsecret")
        monkeypatch.delenv("AWS_SESSION_TOKEN", raising=False)

        provider = ProfileChainCredentialsProvider.from_profile_chain(
            ProfileChain(base=NamedSource("Environment"), chain=[RoleArn(ROLE_1)]),
            client_config=client_config,
        )
        await provider.provide_credentials()

        _, config = client_config.transport.assume_role_calls[0]
        assert config.credentials == Credentials("AKIDENV", "envsecret")

    def test_chain_can_be_a_named_source(self, client_config, static_credentials):
        inner = ProfileChainCredentialsProvider.from_profile_chain(
            ProfileChain(base=AccessKey("AKIDEXAMPLE", "secret")),
            client_config=client_config,
            factory=NamedProviderFactory({}),
        )
        chain = ProviderChain.from_repr(
            ProfileChain(base=NamedSource("source_profile")),
            NamedProviderFactory({"source_profile": inner}),
            client_config,
        )
        assert chain.base is inner
