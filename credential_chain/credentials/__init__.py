"""Credential types, provider protocol and exceptions."""

from credential_chain.credentials.base import ProvideCredentials
from credential_chain.credentials.exceptions import (
    CredentialsError,
    CredentialsNotLoadedError,
    InvalidResponseError,
    ProfileFileError,
    ProviderError,
    UnknownProviderError,
)
from credential_chain.credentials.types import Credentials

__all__ = [
    "Credentials",
    "CredentialsError",
    "CredentialsNotLoadedError",
    "InvalidResponseError",
    "ProfileFileError",
    "ProvideCredentials",
    "ProviderError",
    "UnknownProviderError",
]
