"""
stackconf: layered configuration for toolkit command invocations.

Merges command-line arguments, project config, project context, user
config and environment defaults into one view with deterministic
precedence.
"""

from stackconf.config import (
    Command,
    CommandLineArguments,
    Configuration,
    Context,
    EnvironmentDefaults,
    SettingsStore,
)
from stackconf.errors import ConfigurationError

__version__ = "0.1.0"

__all__ = [
    "Command",
    "CommandLineArguments",
    "Configuration",
    "ConfigurationError",
    "Context",
    "EnvironmentDefaults",
    "SettingsStore",
    "__version__",
]
