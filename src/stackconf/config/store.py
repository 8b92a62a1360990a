"""
SettingsStore: a single configuration layer.

A store owns a nested dict and is either mutable or read-only. Read-only
stores ignore every mutation silently (the call returns False), so a stack
of layers can be written through without knowing which ones are frozen.

None stands for "absent" throughout: get() returns None for missing paths,
set(path, None) removes the path, and merging never lets None override.
"""

import collections.abc as _abc
import logging as _logging
import typing as _typing

import stackconf.config.arguments as arguments
import stackconf.config.defaults as defaults
import stackconf.layers as layers

_logger = _logging.getLogger(__name__)


class SettingsStore:
    """
    One layer of settings.

    Example:
        >>> store = SettingsStore({"app": "python app.py"})
        >>> store.set(["context", "env"], "prod")
        True
        >>> store.make_read_only().set(["app"], "node app.js")
        False
        >>> store.all
        {'app': 'python app.py', 'context': {'env': 'prod'}}
    """

    def __init__(
        self,
        values: _abc.Mapping[str, _typing.Any] | None = None,
        *,
        read_only: bool = False,
    ) -> None:
        """
        Args:
            values: Initial contents. Deep-copied; the store never aliases them.
            read_only: Create the store already frozen.
        """
        self._values: dict[str, _typing.Any] = layers.thaw(values) if values else {}
        self._read_only = read_only

    @classmethod
    def from_command_line_arguments(
        cls,
        argv: "_abc.Mapping[str, _typing.Any] | arguments.CommandLineArguments",
    ) -> "SettingsStore":
        """
        Build the command-line layer from a parsed argument bag.

        Raises:
            ConfigurationError: If the argument bag is malformed.
        """
        args = arguments.CommandLineArguments.from_mapping(argv)
        return cls(defaults.compute_settings(args))

    @classmethod
    def merge_all(cls, *stores: "SettingsStore") -> "SettingsStore":
        """Fold stores left to right; later stores take priority."""
        result = cls()
        for store in stores:
            result = result.merge(store)
        return result

    @property
    def read_only(self) -> bool:
        return self._read_only

    @property
    def empty(self) -> bool:
        return not self._values

    @property
    def all(self) -> dict[str, _typing.Any]:
        """Independent copy of the whole tree."""
        return layers.thaw(self._values)

    @property
    def view(self) -> layers.TreeView:
        """Read-only live view of the tree, without copying."""
        return layers.TreeView(self._values)

    def get(self, path: layers.PathLike = ()) -> _typing.Any:
        """
        Get a copy of the value at a path.

        Returns:
            The value, or None if any segment of the path is missing.
        """
        return layers.thaw(layers.get_path(self._values, layers.normalize(path)))

    def set(self, path: layers.PathLike, value: _typing.Any) -> bool:
        """
        Store a value at a path, creating intermediate levels.

        An empty path replaces the whole tree (value must be a mapping).
        A None value removes the path instead.

        Returns:
            True if the store changed, False if it is read-only or the path
            cannot be addressed.
        """
        segments = layers.normalize(path)
        if value is None:
            return self.unset(segments)
        if self._rejects_mutation("set", segments):
            return False
        if not segments:
            if not isinstance(value, _abc.Mapping):
                return False
            self._values = layers.thaw(value)
            return True
        return layers.set_path(self._values, segments, layers.thaw(value))

    def unset(self, path: layers.PathLike) -> bool:
        """Remove a path. Absent paths and read-only stores are no-ops."""
        segments = layers.normalize(path)
        if self._rejects_mutation("unset", segments):
            return False
        return layers.unset_path(self._values, segments)

    def clear(self) -> bool:
        """Remove every key. No-op on a read-only store."""
        if self._rejects_mutation("clear", ()):
            return False
        self._values = {}
        return True

    def make_read_only(self) -> "SettingsStore":
        """
        Freeze this store in place and return it.

        This is a one-way transition on the instance: every holder of the
        store sees it become read-only. Contents are not copied.
        """
        self._read_only = True
        return self

    def merge(self, other: "SettingsStore") -> "SettingsStore":
        """
        Return a new mutable store with `other` deep-merged over this one.

        Dicts merge per key, lists and scalars from `other` replace.
        Neither store is modified.
        """
        return SettingsStore(layers.deep_merge(self._values, other._values))

    def sub_settings(self, prefix: layers.PathLike) -> "SettingsStore":
        """New mutable store over a copy of the dict at `prefix` (or empty)."""
        value = self.get(prefix)
        return SettingsStore(value if isinstance(value, dict) else None)

    def _rejects_mutation(self, operation: str, path: layers.Path) -> bool:
        if self._read_only:
            _logger.debug("Ignoring %s(%r) on read-only settings", operation, list(path))
        return self._read_only

    def __repr__(self) -> str:
        mode = "read-only" if self._read_only else "mutable"
        return f"SettingsStore({self._values!r}, {mode})"
