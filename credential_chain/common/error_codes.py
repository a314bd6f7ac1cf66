"""
Error codes for credential-chain.

Error codes follow the format: Chain-{Component}-{HTTP_Code}-{Unique_ID}

Components:
- Profile: Errors while resolving a profile chain
- Provider: Errors raised while loading credentials
- Sts: Errors in responses from the delegation service
"""

from enum import Enum
from typing import Dict


class ErrorComponent(Enum):
    """Components that can generate errors in the system."""

    PROFILE = "Profile"
    PROVIDER = "Provider"
    STS = "Sts"


class ErrorCode:
    """Error code with component, HTTP code, and description."""

    def __init__(
        self, component: str, http_code: str, unique_id: str, description: str
    ):
        self.code = f"Chain-{component}-{http_code}-{unique_id}"
        self.description = description

    def __str__(self) -> str:
        return f"{self.code}: {self.description}"


PROFILE_ERRORS = {
    "UNKNOWN_PROVIDER_ERROR": ErrorCode(
        ErrorComponent.PROFILE.value, "400", "00", "Unknown credential source"
    ),
}

PROVIDER_ERRORS = {
    "PROVIDER_ERROR": ErrorCode(
        ErrorComponent.PROVIDER.value, "502", "00", "Credential provider failed"
    ),
    "CREDENTIALS_NOT_LOADED": ErrorCode(
        ErrorComponent.PROVIDER.value, "401", "00", "No credentials available"
    ),
}

STS_ERRORS = {
    "INVALID_RESPONSE_ERROR": ErrorCode(
        ErrorComponent.STS.value, "502", "00", "Invalid delegation response"
    ),
}

# Combined dictionary of all error codes
CREDENTIAL_ERRORS: Dict[str, ErrorCode] = {
    **PROFILE_ERRORS,
    **PROVIDER_ERRORS,
    **STS_ERRORS,
}
