"""
Context: an ordered stack of SettingsStore layers seen as one mapping.

Layers are held by reference (first = highest priority). Reads are
resolved across all layers at call time, so changes made through any
reference to a store show up on the next read.

    >>> project = SettingsStore({"env": {"region": "eu-west-1", "account": "111"}})
    >>> cli = SettingsStore({"env": {"region": "us-east-1"}}).make_read_only()
    >>> ctx = Context(cli, project)
    >>> ctx.get("env")
    {'region': 'us-east-1', 'account': '111'}
    >>> ctx.set("retries", 3)  # lands in `project`, the first mutable layer
"""

import logging as _logging
import typing as _typing

import stackconf.config.store as store
import stackconf.errors as errors
import stackconf.layers as layers

_logger = _logging.getLogger(__name__)


class Context:
    """
    Layered view over several stores.

    Args:
        *stores: Layers in priority order (first = highest). With no
            arguments a single fresh mutable store is used.
    """

    def __init__(self, *stores: store.SettingsStore) -> None:
        self._stores: list[store.SettingsStore] = (
            list(stores) if stores else [store.SettingsStore()]
        )

    @property
    def stores(self) -> tuple[store.SettingsStore, ...]:
        return tuple(self._stores)

    @property
    def all(self) -> dict[str, _typing.Any]:
        """Fully merged mapping; higher layers win per sub-key."""
        return layers.resolve_layers(self._views()) or {}

    @property
    def keys(self) -> list[str]:
        return list(self.all)

    def has(self, key: str) -> bool:
        return key in self

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return any(layer.get(key) is not None for layer in self._stores)

    def get(self, path: layers.PathLike) -> _typing.Any:
        """
        Resolve a path across all layers.

        Returns:
            A copy of the merged value (dicts are merged across layers,
            anything else comes from the highest layer that has it), or None.
        """
        return layers.resolve_layers(self._views(), layers.normalize(path))

    def set(self, path: layers.PathLike, value: _typing.Any) -> None:
        """
        Write to the first mutable layer. Lower layers are left as they are.

        Raises:
            ConfigurationError: If every layer is read-only.
        """
        for layer in self._stores:
            if layer.read_only:
                continue
            layer.set(path, value)
            return
        raise errors.ConfigurationError(
            f"Cannot set {list(layers.normalize(path))}: all context layers are read-only"
        )

    def unset(self, path: layers.PathLike) -> None:
        """Remove a path from every layer. Read-only layers keep their value."""
        for layer in self._stores:
            layer.unset(path)

    def clear(self) -> None:
        """Empty every layer. Read-only layers keep their contents."""
        for layer in self._stores:
            layer.clear()

    def _views(self) -> list[layers.TreeView]:
        return [layer.view for layer in self._stores]

    def __repr__(self) -> str:
        return f"Context({self._stores!r})"
