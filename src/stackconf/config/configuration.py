"""
Configuration: assembles every source into settings and context.

Settings precedence (highest to lowest):
1. Command-line arguments
2. Project config
3. User config
4. Environment defaults (STACKCONF_* variables, then built-in values)

Context precedence (highest to lowest):
1. `--context` assignments from the command line (read-only)
2. `context` section of the project config (read-only)
3. Project context (mutable; receives context writes)
4. `context` section of the user config (read-only, optional)

Files are read elsewhere; load() takes their already-parsed contents.
"""

import collections.abc as _abc
import logging as _logging
import typing as _typing

import stackconf.config.arguments as arguments
import stackconf.config.context as context_
import stackconf.config.environment as environment_
import stackconf.config.store as store
import stackconf.errors as errors

_logger = _logging.getLogger(__name__)

CONTEXT_KEY = "context"

# Keys that only make sense per project and are rejected in the user config
PROJECT_ONLY_KEYS = ("build",)


class Configuration:
    """
    All settings for one toolkit invocation.

    Example:
        >>> config = Configuration({"_": ["deploy"], "context": ["env=prod"]})
        >>> _ = config.load(project_config={"app": "python app.py"})
        >>> config.settings.get("app")
        'python app.py'
        >>> config.context.get("env")
        'prod'
    """

    def __init__(
        self,
        command_line_arguments: (
            "_abc.Mapping[str, _typing.Any] | arguments.CommandLineArguments | None"
        ) = None,
        *,
        read_user_context: bool = True,
        environment: environment_.EnvironmentDefaults | None = None,
    ) -> None:
        """
        Args:
            command_line_arguments: Parsed argument bag, if any.
            read_user_context: Include the user config's context section.
            environment: Defaults layer; read from the environment if omitted.

        Raises:
            ConfigurationError: If the argument bag is malformed.
        """
        if command_line_arguments is not None:
            self.command_line_arguments = store.SettingsStore.from_command_line_arguments(
                command_line_arguments
            )
        else:
            self.command_line_arguments = store.SettingsStore()
        self.command_line_context = self.command_line_arguments.sub_settings(
            [CONTEXT_KEY]
        ).make_read_only()

        defaults = environment if environment is not None else environment_.EnvironmentDefaults()
        self.default_config = store.SettingsStore(defaults.to_layer())

        self._read_user_context = read_user_context
        self.settings = store.SettingsStore()
        self.context = context_.Context()
        self._project_config: store.SettingsStore | None = None
        self._project_context: store.SettingsStore | None = None
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def project_config(self) -> store.SettingsStore:
        if self._project_config is None:
            raise errors.ConfigurationError("Call load() first")
        return self._project_config

    @property
    def project_context(self) -> store.SettingsStore:
        if self._project_context is None:
            raise errors.ConfigurationError("Call load() first")
        return self._project_context

    def load(
        self,
        *,
        user_config: _abc.Mapping[str, _typing.Any] | None = None,
        project_config: _abc.Mapping[str, _typing.Any] | None = None,
        project_context: _abc.Mapping[str, _typing.Any] | None = None,
    ) -> "Configuration":
        """
        Build `settings` and `context` from already-loaded file contents.

        Args:
            user_config: Contents of the per-user config file.
            project_config: Contents of the per-project config file.
            project_context: Contents of the per-project context file.

        Returns:
            self, for chaining.

        Raises:
            ConfigurationError: If the user config sets a project-only key.
        """
        user = _load_layer("user config", user_config)
        self._project_config = _load_layer("project config", project_config)
        self._project_context = _load_layer("project context", project_context)

        for key in PROJECT_ONLY_KEYS:
            if user.get(key) is not None:
                raise errors.ConfigurationError(
                    f"The `{key}` key cannot be specified in the user config, "
                    f"specify it in the project config instead"
                )

        context_sources = [
            self.command_line_context,
            self._project_config.sub_settings([CONTEXT_KEY]).make_read_only(),
            self._project_context,
        ]
        if self._read_user_context:
            context_sources.append(user.sub_settings([CONTEXT_KEY]).make_read_only())
        self.context = context_.Context(*context_sources)

        self.settings = store.SettingsStore.merge_all(
            self.default_config,
            user,
            self._project_config,
            self.command_line_arguments,
        ).make_read_only()
        _logger.debug("merged settings: %s", self.settings.all)

        self._loaded = True
        return self


def _load_layer(
    name: str,
    values: _abc.Mapping[str, _typing.Any] | None,
) -> store.SettingsStore:
    layer = store.SettingsStore(values)
    if not layer.empty:
        _logger.debug("%s: %s", name, layer.all)
    return layer
