"""Credential sources and the credential resolver."""

from .assume_role import AssumeRoleCredentialSource
from .aws import (
    DefaultChainCredentialSource,
    ProfileCredentialSource,
    StaticCredentialSource,
)
from .base import CredentialSource
from .factory import (
    create_base_credential_source,
    generate_role_session_name,
    resolve_credential_source,
)

__all__ = [
    "AssumeRoleCredentialSource",
    "CredentialSource",
    "DefaultChainCredentialSource",
    "ProfileCredentialSource",
    "StaticCredentialSource",
    "create_base_credential_source",
    "generate_role_session_name",
    "resolve_credential_source",
]
