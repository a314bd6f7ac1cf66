"""Custom exceptions for credential operations.

Two families are defined: ``ProfileFileError`` for failures while a
profile chain is being resolved, and ``CredentialsError`` for failures
while credentials are being loaded.
"""

from typing import Optional

from credential_chain.common.error_codes import CREDENTIAL_ERRORS, ErrorCode


class ProfileFileError(Exception):
    """Base exception for errors resolving a profile chain."""

    error_code: ErrorCode = CREDENTIAL_ERRORS["UNKNOWN_PROVIDER_ERROR"]


class UnknownProviderError(ProfileFileError):
    """Raised when a profile names a credential source that is not registered.

    Attributes:
        name: The credential source name that could not be resolved.

    Example:
        >>> raise UnknownProviderError("floozle")
        UnknownProviderError: profile referenced `floozle` provider but that provider is not supported
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"profile referenced `{name}` provider but that provider is not supported"
        )


class CredentialsError(Exception):
    """Base exception for credential loading.

    All errors produced while executing a provider or a chain inherit
    from this class.
    """

    error_code: ErrorCode = CREDENTIAL_ERRORS["PROVIDER_ERROR"]


class CredentialsNotLoadedError(CredentialsError):
    """Raised when a provider has no credentials to supply.

    This can occur when:
    - Environment variables are not set
    - A web identity token file is missing or unreadable
    """

    error_code = CREDENTIAL_ERRORS["CREDENTIALS_NOT_LOADED"]


class InvalidResponseError(CredentialsError):
    """Raised when the delegation service returns a response without credentials.

    Attributes:
        reason: What was wrong with the response.
        role_arn: Role being assumed, if any.
        hop_index: 0-based position of the failing hop within a chain.
    """

    error_code = CREDENTIAL_ERRORS["INVALID_RESPONSE_ERROR"]

    def __init__(
        self,
        reason: str,
        role_arn: Optional[str] = None,
        hop_index: Optional[int] = None,
    ):
        self.reason = reason
        self.role_arn = role_arn
        self.hop_index = hop_index
        message = reason
        if role_arn:
            message += f" for role `{role_arn}`"
        if hop_index is not None:
            message += f" (after {hop_index} successful hops)"
        super().__init__(message)

    def at_hop(self, hop_index: int) -> "InvalidResponseError":
        """Return a copy of this error tagged with its position in a chain."""
        return InvalidResponseError(
            self.reason, role_arn=self.role_arn, hop_index=hop_index
        )


class ProviderError(CredentialsError):
    """Raised when a provider's remote call fails.

    The original exception is kept on ``cause`` and as ``__cause__`` when
    raised with ``raise ... from``.

    Attributes:
        cause: The transport or service exception.
        provider_name: Name of the provider that failed.
        role_arn: Role being assumed when the failure happened, if any.
        hop_index: 0-based position of the failing hop within a chain.
    """

    def __init__(
        self,
        cause: BaseException,
        provider_name: str,
        role_arn: Optional[str] = None,
        hop_index: Optional[int] = None,
    ):
        self.cause = cause
        self.provider_name = provider_name
        self.role_arn = role_arn
        self.hop_index = hop_index
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        message = f"{self.provider_name} failed to load credentials"
        if self.role_arn:
            message += f" for role `{self.role_arn}`"
        message += f": {self.cause}"
        if self.hop_index is not None:
            message += f" (after {self.hop_index} successful hops)"
        return message

    def at_hop(self, hop_index: int) -> "ProviderError":
        """Return a copy of this error tagged with its position in a chain."""
        return ProviderError(
            self.cause,
            provider_name=self.provider_name,
            role_arn=self.role_arn,
            hop_index=hop_index,
        )
