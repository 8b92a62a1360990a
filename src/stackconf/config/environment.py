"""
Environment-backed defaults, the lowest-priority settings layer.

Uses pydantic-settings so each default can be overridden with a
STACKCONF_ environment variable:

  STACKCONF_VERSION_REPORTING=false
  STACKCONF_PATH_METADATA=false
  STACKCONF_OUTPUT=build/cloud-assembly
"""

import typing as _typing

import pydantic_settings as _pydantic_settings

ENV_PREFIX = "STACKCONF_"


class EnvironmentDefaults(_pydantic_settings.BaseSettings):
    """Built-in settings defaults, overridable from the environment."""

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
    )

    version_reporting: bool = True
    """Report library versions in synthesized templates."""

    path_metadata: bool = True
    """Record construct paths as resource metadata."""

    output: str = "cdk.out"
    """Directory the cloud assembly is written to."""

    def to_layer(self) -> dict[str, _typing.Any]:
        """Render as a settings layer using the toolkit's camelCase keys."""
        return {
            "versionReporting": self.version_reporting,
            "pathMetadata": self.path_metadata,
            "output": self.output,
        }
