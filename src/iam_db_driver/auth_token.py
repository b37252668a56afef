"""RDS IAM authentication token generation.

This module mints the short-lived token that replaces the database password.
Tokens are presigned locally by botocore from the session credentials; with an
assumed role the credentials themselves are fetched from STS first.
"""

import structlog
from botocore.exceptions import BotoCoreError, ClientError

from .credentials import CredentialSource
from .exceptions import ConfigurationError, TokenGenerationError

# Get logger for this module
logger = structlog.get_logger(__name__)


def generate_auth_token(
    host: str,
    port: int,
    username: str | None,
    region: str | None,
    credentials: CredentialSource,
) -> str:
    """Generate an IAM authentication token for a database user.

    Args:
        host: Database hostname the token is scoped to.
        port: Database port the token is scoped to.
        username: Database user the token authenticates.
        region: AWS region of the database.
        credentials: Source of the AWS credentials used to sign the token.

    Returns:
        The authentication token.

    Raises:
        ConfigurationError: If the username or region is missing.
        TokenGenerationError: If the AWS SDK fails to produce a token.
    """
    if not username:
        error_message = "No database user specified for IAM authentication"
        raise ConfigurationError(error_message, "token_generator")
    if not region:
        error_message = "No AWS region could be resolved for IAM authentication"
        raise ConfigurationError(error_message, "token_generator")

    try:
        session = credentials.create_session(region_name=region)
        client = session.client("rds", region_name=region)
        token = client.generate_db_auth_token(
            DBHostname=host, Port=port, DBUsername=username, Region=region
        )
    except (BotoCoreError, ClientError) as e:
        error_message = f"Failed to generate IAM auth token: {e}"
        raise TokenGenerationError(error_message, host) from e

    logger.debug(
        "Generated IAM auth token", host=host, port=port, username=username, region=region
    )
    return token  # type: ignore[no-any-return]
