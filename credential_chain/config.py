"""Configuration settings for credential-chain using Pydantic."""

from functools import lru_cache
from typing import Any, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class CredentialChainSettings(BaseSettings):
    """Central configuration for credential-chain.

    This class uses Pydantic's BaseSettings which allows for configuration via environment
    variables and/or direct assignment. Environment variables take precedence over defaults.

    Environment Variables:
        CREDENTIAL_CHAIN_STS_REGION: Region used for STS calls made by the chain
        CREDENTIAL_CHAIN_STS_ENDPOINT_URL: Override for the STS endpoint
    """

    model_config = SettingsConfigDict(
        env_prefix="CREDENTIAL_CHAIN_",
        case_sensitive=False,
        extra="allow",
    )

    sts_region: Optional[str] = None
    sts_endpoint_url: Optional[str] = None

    @classmethod
    def get_settings(cls, **kwargs: Any) -> "CredentialChainSettings":
        """Create settings with optional overrides."""
        return cls(**kwargs)


# Global settings instance with default values
settings = CredentialChainSettings()


@lru_cache()
def get_settings() -> CredentialChainSettings:
    """Get the global settings instance.

    Note:
        This function is cached to avoid re-reading environment variables.
        To refresh settings, call get_settings.cache_clear()
    """
    return settings


def configure_settings(**kwargs: Any) -> None:
    """Configure global settings with overrides.

    Example:
        >>> configure_settings(sts_region="eu-west-1")
    """
    global settings
    settings = CredentialChainSettings.get_settings(**kwargs)
    get_settings.cache_clear()
