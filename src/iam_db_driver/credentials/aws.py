"""Base AWS credential sources.

This module provides the three base sources a connection can authenticate
with: an explicit key pair, a named profile, or the default provider chain.
"""

from dataclasses import dataclass, field

import boto3


@dataclass(frozen=True)
class StaticCredentialSource:
    """Credential source backed by an explicit access key pair."""

    access_key_id: str
    secret_access_key: str = field(repr=False)

    def create_session(self, region_name: str | None = None) -> boto3.session.Session:
        """Create a session authenticated with the static key pair."""
        return boto3.session.Session(
            aws_access_key_id=self.access_key_id,
            aws_secret_access_key=self.secret_access_key,
            region_name=region_name,
        )


@dataclass(frozen=True)
class ProfileCredentialSource:
    """Credential source backed by a named profile in the shared AWS config."""

    profile_name: str

    def create_session(self, region_name: str | None = None) -> boto3.session.Session:
        """Create a session for the named profile."""
        return boto3.session.Session(
            profile_name=self.profile_name, region_name=region_name
        )


@dataclass(frozen=True)
class DefaultChainCredentialSource:
    """Credential source backed by the default AWS provider chain.

    The chain covers environment variables, shared credential files,
    container credentials and instance metadata.
    """

    def create_session(self, region_name: str | None = None) -> boto3.session.Session:
        """Create a session that resolves credentials through the default chain."""
        return boto3.session.Session(region_name=region_name)
