"""Credential source selection.

Decision order for the base source: explicit key pair, then named profile,
then the default provider chain. A configured role ARN wraps the base source
in an AssumeRoleCredentialSource.
"""

import uuid

from iam_db_driver.properties import ResolvedConfig

from .assume_role import AssumeRoleCredentialSource
from .aws import (
    DefaultChainCredentialSource,
    ProfileCredentialSource,
    StaticCredentialSource,
)
from .base import CredentialSource

ROLE_SESSION_NAME_PREFIX = "IAM_RDS_DRIVER_WRAPPER"


def generate_role_session_name() -> str:
    """Generate a unique role session name for concurrent connections."""
    return f"{ROLE_SESSION_NAME_PREFIX}{uuid.uuid4().hex}"


def create_base_credential_source(config: ResolvedConfig) -> CredentialSource:
    """Select the base credential source for a connection attempt."""
    if config.has_static_credentials:
        return StaticCredentialSource(
            access_key_id=config.access_key_id,  # type: ignore[arg-type]
            secret_access_key=config.secret_access_key,  # type: ignore[arg-type]
        )
    if config.profile is not None:
        return ProfileCredentialSource(profile_name=config.profile)
    return DefaultChainCredentialSource()


def resolve_credential_source(config: ResolvedConfig) -> CredentialSource:
    """Resolve the credential source for a connection attempt.

    Args:
        config: The resolved connection configuration.

    Returns:
        The base credential source, wrapped for role assumption when a role
        ARN is configured.
    """
    base = create_base_credential_source(config)
    if config.role_arn is None:
        return base

    return AssumeRoleCredentialSource(
        base=base,
        role_arn=config.role_arn,
        role_session_name=config.role_session_name or generate_role_session_name(),
        external_id=config.external_id,
    )
