"""
Merge functions for configuration layers.

Two strategies are used side by side:

- deep_merge(): eager, combines two mappings into a new dict. Used when two
  stores are folded into one (defaults + user + project + command line).
- resolve_layers(): lazy, resolves a single path across any number of layers
  at read time. Used by Context so that writes to any layer are visible on
  the next read without rebuilding anything.

Both share the same rules: dicts merge key by key with the higher-priority
side winning per sub-key; lists and scalars replace wholesale; None never
overrides a value.
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import stackconf.layers._view as _view
import stackconf.layers._paths as _paths


def deep_merge(
    base: _abc.Mapping[str, _typing.Any],
    override: _abc.Mapping[str, _typing.Any],
) -> dict[str, _typing.Any]:
    """
    Deep merge two mappings, with override taking priority.

    Neither argument is modified; the result shares no structure with them.

    Args:
        base: Lower-priority mapping.
        override: Higher-priority mapping.

    Returns:
        New merged dict.

    Example:
        >>> deep_merge({"a": {"x": 1, "y": 2}, "l": [1, 2]}, {"a": {"y": 3}, "l": [9]})
        {'a': {'x': 1, 'y': 3}, 'l': [9]}
    """
    result: dict[str, _typing.Any] = _view.thaw(base)
    for key, value in override.items():
        if value is None:
            continue
        existing = result.get(key)
        if isinstance(value, _abc.Mapping):
            if isinstance(existing, dict):
                result[key] = deep_merge(existing, value)
            else:
                result[key] = deep_merge({}, value)
        else:
            result[key] = _view.thaw(value)
    return result


def resolve_layers(
    layers: _abc.Sequence[_abc.Mapping[str, _typing.Any]],
    path: _paths.Path = (),
) -> _typing.Any:
    """
    Resolve a path across layers ordered highest priority first.

    The first layer holding a non-dict value at the path decides the result
    outright. If the first hits are dicts, they are merged with each other
    (higher layers winning per sub-key) until a layer with a non-dict value
    is reached; that value and everything below it are shadowed.

    Args:
        layers: Layer trees, index 0 = highest priority.
        path: Normalized path. The empty path resolves the whole view.

    Returns:
        An independent copy of the resolved value, or None if no layer has it.
    """
    found: list[_abc.Mapping[str, _typing.Any]] = []
    for layer in layers:
        value = _paths.get_path(layer, path)
        if value is None:
            continue
        if not isinstance(value, _abc.Mapping):
            if not found:
                return _view.thaw(value)
            break
        found.append(value)

    if not found:
        return None

    result: dict[str, _typing.Any] = {}
    for value in reversed(found):
        result = deep_merge(result, value)
    return result
