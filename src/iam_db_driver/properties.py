"""Connection property resolution.

This module merges URL query parameters with caller-supplied connection
properties and the wrapper preset defaults into one ``ResolvedConfig``.

Query parameters take precedence over caller properties: they are available
before the property mapping is consulted and are used to pick the delegate
driver.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from .presets import WrapperPreset

DELEGATE_DRIVER_CLASS_PROPERTY = "delegateDriverClass"
DELEGATE_DRIVER_SCHEME_NAME_PROPERTY = "delegateDriverSchemeName"
AWS_REGION_PROPERTY = "awsRegion"
AWS_PROFILE_PROPERTY = "awsProfile"
AWS_STS_CREDENTIAL_ROLE_ARN_PROPERTY = "awsStsCredentialProviderRoleArn"
AWS_STS_CREDENTIAL_SESSION_NAME_PROPERTY = "awsStsCredentialProviderSessionName"
AWS_STS_CREDENTIAL_EXTERNAL_ID_PROPERTY = "awsStsCredentialProviderExternalId"
AWS_ACCESS_KEY_ID_PROPERTY = "awsAccessKeyId"
AWS_SECRET_ACCESS_KEY_PROPERTY = "awsSecretAccessKey"  # noqa: S105

WRAPPER_OPTION_NAMES = frozenset(
    {
        DELEGATE_DRIVER_CLASS_PROPERTY,
        DELEGATE_DRIVER_SCHEME_NAME_PROPERTY,
        AWS_REGION_PROPERTY,
        AWS_PROFILE_PROPERTY,
        AWS_STS_CREDENTIAL_ROLE_ARN_PROPERTY,
        AWS_STS_CREDENTIAL_SESSION_NAME_PROPERTY,
        AWS_STS_CREDENTIAL_EXTERNAL_ID_PROPERTY,
        AWS_ACCESS_KEY_ID_PROPERTY,
        AWS_SECRET_ACCESS_KEY_PROPERTY,
    }
)


@dataclass(frozen=True)
class ResolvedConfig:
    """Effective configuration for a single connection attempt."""

    password_property: str
    user_property: str
    username: str | None = None
    region: str | None = None
    profile: str | None = None
    access_key_id: str | None = None
    secret_access_key: str | None = field(default=None, repr=False)
    role_arn: str | None = None
    role_session_name: str | None = None
    external_id: str | None = None
    driver_class_name: str | None = None
    delegate_scheme_name: str | None = None

    @property
    def has_static_credentials(self) -> bool:
        """Whether both halves of an explicit key pair are present."""
        return self.access_key_id is not None and self.secret_access_key is not None


def get_property(
    name: str,
    properties: Mapping[str, str] | None,
    query_params: Mapping[str, str],
) -> str | None:
    """Look up an option, preferring the URL query over caller properties."""
    value = query_params.get(name)
    if value is None and properties is not None:
        value = properties.get(name)
    return value


def merge_properties(
    properties: Mapping[str, str] | None,
    query_params: Mapping[str, str],
) -> dict[str, str]:
    """Merge caller properties with query parameters; query parameters win."""
    merged = dict(properties or {})
    merged.update(query_params)
    return merged


def resolve_config(
    properties: Mapping[str, str] | None,
    query_params: Mapping[str, str],
    preset: WrapperPreset,
) -> ResolvedConfig:
    """Build the resolved configuration for one connection attempt.

    Args:
        properties: Caller-supplied connection properties.
        query_params: Parameters decoded from the URL query string.
        preset: Wrapper defaults (property names, delegate identifiers).

    Returns:
        The merged configuration.
    """
    merged = merge_properties(properties, query_params)
    return ResolvedConfig(
        password_property=preset.password_property,
        user_property=preset.user_property,
        username=merged.get(preset.user_property),
        region=merged.get(AWS_REGION_PROPERTY),
        profile=merged.get(AWS_PROFILE_PROPERTY),
        access_key_id=merged.get(AWS_ACCESS_KEY_ID_PROPERTY),
        secret_access_key=merged.get(AWS_SECRET_ACCESS_KEY_PROPERTY),
        role_arn=merged.get(AWS_STS_CREDENTIAL_ROLE_ARN_PROPERTY),
        role_session_name=merged.get(AWS_STS_CREDENTIAL_SESSION_NAME_PROPERTY),
        external_id=merged.get(AWS_STS_CREDENTIAL_EXTERNAL_ID_PROPERTY),
        driver_class_name=(
            merged.get(DELEGATE_DRIVER_CLASS_PROPERTY) or preset.driver_class_name
        ),
        delegate_scheme_name=(
            preset.delegate_scheme_name
            or merged.get(DELEGATE_DRIVER_SCHEME_NAME_PROPERTY)
        ),
    )
