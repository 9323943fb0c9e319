"""Configuration for selecting and tuning a disk implementation."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

# Longest path the Windows file APIs accept without the \\?\ prefix
WINDOWS_MAX_PATH = 260

ENV_PREFIX = "BUILDFS_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class DiskConfigError(Exception):
    """Invalid disk configuration."""

    pass


class DiskConfig(BaseModel):
    """Settings used to build a DiskInterface."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    platform: Literal["auto", "posix", "windows"] = "auto"
    max_path: int = Field(default=WINDOWS_MAX_PATH, gt=0, alias="maxPath")
    console_diagnostics: bool = Field(default=False, alias="consoleDiagnostics")

    def resolved_platform(self) -> str:
        """Get the concrete platform family.

        Returns:
            "windows" or "posix". "auto" follows the running interpreter.
        """
        if self.platform != "auto":
            return self.platform
        return "windows" if os.name == "nt" else "posix"

    @classmethod
    def from_data(cls, data: Mapping[str, object]) -> DiskConfig:
        """Validate a mapping into a config.

        Raises:
            DiskConfigError: If a value is missing or malformed.
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise DiskConfigError(f"Invalid disk configuration: {e}") from e

    @classmethod
    def from_file(cls, path: Path) -> DiskConfig:
        """Load a config from a JSON file.

        Args:
            path: Path to the JSON file.

        Returns:
            Parsed DiskConfig.

        Raises:
            DiskConfigError: If the file is missing or its contents are invalid.
        """
        if not path.exists():
            raise DiskConfigError(f"Disk configuration not found: {path}")

        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError as e:
            raise DiskConfigError(f"Invalid JSON in {path}: {e}") from e
        if not isinstance(data, dict):
            raise DiskConfigError(f"Disk configuration must be a JSON object: {path}")
        return cls.from_data(data)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DiskConfig:
        """Build a config from BUILDFS_* environment variables.

        Reads BUILDFS_PLATFORM, BUILDFS_MAX_PATH and
        BUILDFS_CONSOLE_DIAGNOSTICS. Unset variables keep their defaults.

        Args:
            environ: Environment to read. Defaults to os.environ.

        Raises:
            DiskConfigError: If a variable holds an invalid value.
        """
        env = os.environ if environ is None else environ
        data: dict[str, object] = {}

        if f"{ENV_PREFIX}PLATFORM" in env:
            data["platform"] = env[f"{ENV_PREFIX}PLATFORM"].strip().lower()
        if f"{ENV_PREFIX}MAX_PATH" in env:
            data["max_path"] = env[f"{ENV_PREFIX}MAX_PATH"].strip()
        if f"{ENV_PREFIX}CONSOLE_DIAGNOSTICS" in env:
            data["console_diagnostics"] = _parse_flag(
                f"{ENV_PREFIX}CONSOLE_DIAGNOSTICS", env[f"{ENV_PREFIX}CONSOLE_DIAGNOSTICS"]
            )

        return cls.from_data(data)


def _parse_flag(name: str, value: str) -> bool:
    """Parse a boolean environment variable."""
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise DiskConfigError(f"{name} must be a boolean, got {value!r}")
