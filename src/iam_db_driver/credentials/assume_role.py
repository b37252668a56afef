"""STS role assumption credential source.

This module provides AssumeRoleCredentialSource, which decorates a base
credential source with temporary credentials obtained by assuming an IAM role.
The temporary credentials are refreshed by botocore when they expire.
"""

from dataclasses import dataclass

import boto3
import botocore.session
import structlog
from botocore.credentials import (
    AssumeRoleCredentialFetcher,
    CredentialProvider,
    CredentialResolver,
    DeferredRefreshableCredentials,
)

from iam_db_driver.exceptions import TokenGenerationError

from .base import CredentialSource

# Get logger for this module
logger = structlog.get_logger(__name__)


class _AssumedRoleProvider(CredentialProvider):
    """botocore provider handing out refreshable assumed-role credentials."""

    METHOD = "assume-role"

    def __init__(self, fetcher: AssumeRoleCredentialFetcher) -> None:
        super().__init__()
        self._fetcher = fetcher

    def load(self) -> DeferredRefreshableCredentials:
        return DeferredRefreshableCredentials(
            refresh_using=self._fetcher.fetch_credentials, method=self.METHOD
        )


@dataclass(frozen=True)
class AssumeRoleCredentialSource:
    """Credential source that assumes a role using a base source's credentials."""

    base: CredentialSource
    role_arn: str
    role_session_name: str
    external_id: str | None = None

    def create_session(self, region_name: str | None = None) -> boto3.session.Session:
        """Create a session whose credentials come from ``sts:AssumeRole``.

        Args:
            region_name: Region for the STS client and the returned session.

        Returns:
            A session backed by refreshable assumed-role credentials.

        Raises:
            TokenGenerationError: If the base source yields no credentials.
        """
        base_session = self.base.create_session(region_name)
        source_credentials = base_session.get_credentials()
        if source_credentials is None:
            error_message = "No base credentials available to assume role"
            raise TokenGenerationError(error_message)

        extra_args = {"RoleSessionName": self.role_session_name}
        if self.external_id is not None:
            extra_args["ExternalId"] = self.external_id

        fetcher = AssumeRoleCredentialFetcher(
            client_creator=base_session.client,
            source_credentials=source_credentials,
            role_arn=self.role_arn,
            extra_args=extra_args,
        )

        botocore_session = botocore.session.Session()
        botocore_session.register_component(
            "credential_provider", CredentialResolver([_AssumedRoleProvider(fetcher)])
        )
        logger.debug(
            "Prepared assumed role credentials",
            role_arn=self.role_arn,
            role_session_name=self.role_session_name,
        )
        return boto3.session.Session(
            botocore_session=botocore_session, region_name=region_name
        )
