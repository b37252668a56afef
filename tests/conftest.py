"""PyTest configuration and shared test fixtures.

This module provides PyTest configuration, shared fixtures, and test
utilities that are used across multiple test files.
"""

import os
from collections.abc import Generator
from dataclasses import dataclass
from pathlib import Path

import pytest
import structlog


@dataclass
class AwsConfigFiles:
    """Isolated shared AWS config and credentials files for one test."""

    config_file: Path
    credentials_file: Path

    def add_profile(
        self,
        name: str,
        region: str | None = None,
        access_key_id: str | None = None,
        secret_access_key: str | None = None,
    ) -> None:
        """Append a profile to the isolated config/credentials files."""
        if region is not None:
            section = "default" if name == "default" else f"profile {name}"
            with self.config_file.open("a") as handle:
                handle.write(f"[{section}]\nregion = {region}\n")
        if access_key_id is not None and secret_access_key is not None:
            with self.credentials_file.open("a") as handle:
                handle.write(
                    f"[{name}]\n"
                    f"aws_access_key_id = {access_key_id}\n"
                    f"aws_secret_access_key = {secret_access_key}\n"
                )


@pytest.fixture(autouse=True)
def aws_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[AwsConfigFiles, None, None]:
    """Isolate every test from the real AWS environment.

    Clears AWS_* variables, points the shared config files at empty temp
    files and disables instance metadata lookups.
    """
    for name in list(os.environ):
        if name.startswith("AWS_"):
            monkeypatch.delenv(name)

    files = AwsConfigFiles(
        config_file=tmp_path / "aws_config",
        credentials_file=tmp_path / "aws_credentials",
    )
    files.config_file.write_text("")
    files.credentials_file.write_text("")
    monkeypatch.setenv("AWS_CONFIG_FILE", str(files.config_file))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(files.credentials_file))
    monkeypatch.setenv("AWS_EC2_METADATA_DISABLED", "true")
    yield files


@pytest.fixture
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog's default configuration after the test."""
    yield
    structlog.reset_defaults()
