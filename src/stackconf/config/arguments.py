"""Typed view of the parsed command-line argument bag.

The argument parser itself lives outside this package. What it produces is
a plain mapping such as::

    {"_": ["deploy", "my-stack"], "STACKS": ["my-stack"], "exclusively": True,
     "context": ["env=prod"], "outputsFile": "outputs.json"}

CommandLineArguments validates the handful of keys the default rules
interpret and keeps every other key verbatim.
"""

import collections.abc as _abc
import enum as _enum
import typing as _typing

import pydantic as _pydantic

import stackconf.errors as errors


class Command(str, _enum.Enum):
    """Toolkit command names, as they appear first in the positional list."""

    LS = "ls"
    LIST = "list"
    DIFF = "diff"
    BOOTSTRAP = "bootstrap"
    DEPLOY = "deploy"
    DESTROY = "destroy"
    SYNTHESIZE = "synthesize"
    SYNTH = "synth"
    METADATA = "metadata"
    INIT = "init"
    VERSION = "version"
    WATCH = "watch"


class CommandLineArguments(_pydantic.BaseModel):
    """
    Parsed argument bag.

    Known keys are typed; any other key is preserved as an extra field and
    read back with get().
    """

    model_config = _pydantic.ConfigDict(extra="allow", populate_by_name=True)

    positional: list[str] = _pydantic.Field(default_factory=list, alias="_")
    """Positional arguments; the first one is the command name."""

    stacks: list[str] | None = _pydantic.Field(default=None, alias="STACKS")
    """Stack names selected on the command line."""

    exclusively: bool = False
    """Only act on the selected stacks, not their dependencies."""

    context: list[str] = _pydantic.Field(default_factory=list)
    """Raw `key=value` context tokens."""

    tags: list[str] | None = None
    """Raw `Key=Value` tag tokens."""

    @_pydantic.field_validator("positional", mode="before")
    @classmethod
    def _normalize_commands(cls, value: _typing.Any) -> _typing.Any:
        # Command members may be passed instead of plain strings
        if isinstance(value, (list, tuple)):
            return [item.value if isinstance(item, _enum.Enum) else item for item in value]
        return value

    @_pydantic.field_validator("context", mode="before")
    @classmethod
    def _context_none_is_empty(cls, value: _typing.Any) -> _typing.Any:
        return [] if value is None else value

    @classmethod
    def from_mapping(
        cls,
        argv: "_abc.Mapping[str, _typing.Any] | CommandLineArguments",
    ) -> "CommandLineArguments":
        """
        Validate a raw argument bag.

        Raises:
            ConfigurationError: If a known key has the wrong shape.
        """
        if isinstance(argv, CommandLineArguments):
            return argv
        try:
            return cls.model_validate(dict(argv))
        except _pydantic.ValidationError as e:
            raise errors.ConfigurationError(f"invalid command-line arguments: {e}") from e

    @property
    def command(self) -> str | None:
        """The command name, or None when no positional argument was given."""
        return self.positional[0] if self.positional else None

    def get(self, name: str) -> _typing.Any:
        """Return an extra (non-interpreted) argument, or None if absent."""
        extras = self.model_extra or {}
        return extras.get(name)
