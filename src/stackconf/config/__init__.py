"""
Configuration module for stackconf.

Stores, the layered context, command-line coercion and the default rules
that turn an argument bag into a settings layer.
"""

from stackconf.config.arguments import Command, CommandLineArguments
from stackconf.config.configuration import Configuration
from stackconf.config.context import Context
from stackconf.config.environment import EnvironmentDefaults
from stackconf.config.store import SettingsStore

__all__ = [
    "Command",
    "CommandLineArguments",
    "Configuration",
    "Context",
    "EnvironmentDefaults",
    "SettingsStore",
]
