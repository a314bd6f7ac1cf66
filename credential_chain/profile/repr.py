"""Declarative representation of a profile credential chain.

A chain is one base provider followed by zero or more roles to assume, in
declaration order. Values here are already validated by the profile parser
and carry no behavior.

Example:
    >>> ProfileChain(
    ...     base=AccessKey("AKIDEXAMPLE", "secret"),
    ...     chain=[RoleArn("arn:aws:iam::111111111111:role/A")],
    ... )
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence, Union


@dataclass(frozen=True)
class NamedSource:
    """A credential source resolved by name, e.g. ``credential_source = Environment``."""

    name: str


@dataclass(frozen=True)
class AccessKey:
    """Static access keys declared in the profile."""

    access_key_id: str
    secret_access_key: str = field(repr=False)
    session_token: Optional[str] = field(default=None, repr=False)


@dataclass(frozen=True)
class WebIdentityToken:
    """A role assumed with a web identity token file."""

    role_arn: str
    web_identity_token_file: str
    session_name: Optional[str] = None


BaseProvider = Union[NamedSource, AccessKey, WebIdentityToken]


@dataclass(frozen=True)
class RoleArn:
    """A role to assume on top of the previous credentials in the chain."""

    role_arn: str
    external_id: Optional[str] = None
    session_name: Optional[str] = None


@dataclass(frozen=True)
class ProfileChain:
    """Base provider plus the ordered roles to assume."""

    base: BaseProvider
    chain: Sequence[RoleArn] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "chain", tuple(self.chain))
