"""AWS region resolution.

Order, first match wins: explicit region, the region configured for a named
profile, then the default chain: ``AWS_REGION``, the boto3 session default
(``AWS_DEFAULT_REGION`` and the shared config file), then instance metadata.
"""

import os

import boto3
import botocore.session
import structlog
from botocore.exceptions import ProfileNotFound
from botocore.utils import InstanceMetadataRegionFetcher

# Get logger for this module
logger = structlog.get_logger(__name__)


def resolve_region(region: str | None, profile: str | None) -> str | None:
    """Determine the AWS region to request the token for.

    Args:
        region: Explicit region from the connection configuration.
        profile: Named profile whose configured region is consulted next.

    Returns:
        The resolved region, or None if no source provides one.
    """
    if region:
        return region

    if profile:
        profile_region = get_profile_region(profile)
        if profile_region:
            return profile_region

    return get_default_region()


def get_profile_region(profile: str) -> str | None:
    """Return the region configured for a named profile, if any."""
    try:
        scoped_config = botocore.session.Session(profile=profile).get_scoped_config()
    except ProfileNotFound:
        logger.debug("AWS profile not found for region lookup", profile=profile)
        return None
    return scoped_config.get("region")


def get_default_region() -> str | None:
    """Return the region from the default provider chain."""
    region = os.getenv("AWS_REGION") or boto3.session.Session().region_name
    if region:
        return region

    # Honours AWS_EC2_METADATA_DISABLED
    region = InstanceMetadataRegionFetcher().retrieve_region()
    if region:
        logger.debug("Resolved AWS region from instance metadata", region=region)
    return region
