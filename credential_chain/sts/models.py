"""Pydantic models for the STS requests and responses used by the chain.

Field aliases match the STS API member names so that the raw dictionaries
returned by boto3 validate directly.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class StsCredentials(BaseModel):
    """Temporary credentials block returned by STS."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    access_key_id: str = Field(alias="AccessKeyId")
    secret_access_key: str = Field(alias="SecretAccessKey")
    session_token: str = Field(alias="SessionToken")
    expiration: datetime = Field(alias="Expiration")


class AssumedRoleUser(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    assumed_role_id: str = Field(alias="AssumedRoleId")
    arn: str = Field(alias="Arn")


class AssumeRoleResponse(BaseModel):
    """Response of ``AssumeRole`` and ``AssumeRoleWithWebIdentity``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    credentials: Optional[StsCredentials] = Field(default=None, alias="Credentials")
    assumed_role_user: Optional[AssumedRoleUser] = Field(
        default=None, alias="AssumedRoleUser"
    )


class AssumeRoleRequest(BaseModel):
    """Input of a single ``AssumeRole`` call."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    role_arn: str = Field(alias="RoleArn")
    role_session_name: str = Field(alias="RoleSessionName")
    external_id: Optional[str] = Field(default=None, alias="ExternalId")

    def to_params(self) -> Dict[str, Any]:
        """Keyword arguments for the boto3 ``assume_role`` call."""
        return self.model_dump(by_alias=True, exclude_none=True)


class AssumeRoleWithWebIdentityRequest(BaseModel):
    """Input of a single ``AssumeRoleWithWebIdentity`` call."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    role_arn: str = Field(alias="RoleArn")
    role_session_name: str = Field(alias="RoleSessionName")
    web_identity_token: str = Field(alias="WebIdentityToken", repr=False)

    def to_params(self) -> Dict[str, Any]:
        """Keyword arguments for the boto3 ``assume_role_with_web_identity`` call."""
        return self.model_dump(by_alias=True, exclude_none=True)
