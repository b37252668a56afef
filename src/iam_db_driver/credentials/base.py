"""Base credential source interface.

This module defines the CredentialSource protocol that every credential source
implements so the token generator can obtain an authenticated boto3 session.
"""

from typing import Protocol

import boto3


class CredentialSource(Protocol):
    """Interface for credential sources."""

    def create_session(self, region_name: str | None = None) -> boto3.session.Session:
        """Create a boto3 session backed by this source's credentials.

        Args:
            region_name: Region the session's clients default to.

        Returns:
            A session whose credentials come from this source.
        """
        ...
