"""Core credential types."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Credentials:
    """A set of AWS credentials.

    Credentials are never mutated; each step of a chain produces a new
    value. ``provider_name`` records where the credentials came from and
    does not take part in equality.

    Attributes:
        access_key_id: Access key id.
        secret_access_key: Secret access key.
        session_token: Session token for temporary credentials.
        expiry: When temporary credentials expire.
        provider_name: Name of the provider that produced these credentials.
    """

    access_key_id: str
    secret_access_key: str
    session_token: Optional[str] = None
    expiry: Optional[datetime] = None
    provider_name: str = field(default="Static", compare=False)

    def __repr__(self) -> str:
        return (
            f"Credentials(provider_name={self.provider_name!r}, "
            f"access_key_id={self.access_key_id!r}, "
            f"secret_access_key='** redacted **', "
            f"expiry={self.expiry!r})"
        )

    __str__ = __repr__
