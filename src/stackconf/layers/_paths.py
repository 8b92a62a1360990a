"""
Path addressing for nested configuration trees.

A path is a tuple of segments. String segments select keys in mappings,
integer segments select elements of lists:

    >>> tree = {"context": {"regions": ["us-east-1", "eu-west-1"]}}
    >>> get_path(tree, ("context", "regions", 1))
    'eu-west-1'
    >>> get_path(tree, ("context", "missing", "deeper")) is None
    True

Resolution never raises for missing segments; the result is simply None.
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

# ("context", "regions", 1) addresses tree["context"]["regions"][1]
Path: _typing.TypeAlias = tuple[str | int, ...]

# What public APIs accept: a single segment or any sequence of segments
PathLike: _typing.TypeAlias = str | int | _abc.Sequence[str | int]


def normalize(path: PathLike) -> Path:
    """
    Turn a path-like value into a tuple of segments.

    A bare string is one key, not a dotted path: context keys such as
    ``@scope/pkg:flag.enabled`` are kept whole.

    Raises:
        TypeError: If a segment is neither str nor int.
    """
    if isinstance(path, (str, int)) and not isinstance(path, bool):
        return (path,)

    segments = tuple(path)
    for segment in segments:
        if isinstance(segment, bool) or not isinstance(segment, (str, int)):
            raise TypeError(
                f"Path segments must be str or int, got {type(segment).__name__}"
            )
    return segments


def _is_list(value: object) -> bool:
    return isinstance(value, _abc.Sequence) and not isinstance(value, (str, bytes))


def _step(current: _typing.Any, segment: str | int) -> tuple[bool, _typing.Any]:
    """Descend one level. Returns (found, child)."""
    if isinstance(segment, str):
        if isinstance(current, _abc.Mapping) and segment in current:
            return True, current[segment]
        return False, None
    if _is_list(current) and 0 <= segment < len(current):
        return True, current[segment]
    return False, None


def get_path(tree: _typing.Any, path: Path) -> _typing.Any:
    """
    Resolve a path against a tree.

    Args:
        tree: Root mapping (or any nested value).
        path: Normalized path. An empty path returns the tree itself.

    Returns:
        The value at the path, or None if any segment is missing.
    """
    current = tree
    for segment in path:
        found, current = _step(current, segment)
        if not found:
            return None
    return current


def set_path(tree: dict[str, _typing.Any], path: Path, value: _typing.Any) -> bool:
    """
    Assign a value at a path, creating intermediate dicts as needed.

    A string segment that is missing, or that holds a scalar, is replaced
    with a new dict. An integer segment must address an existing element of
    an existing list; lists are never grown or created. The whole path is
    checked first, so an unaddressable path leaves the tree untouched.

    Args:
        tree: Root dict to modify in place.
        path: Normalized, non-empty path.
        value: Value to store at the leaf.

    Returns:
        True if the value was stored, False if the path is unaddressable.
    """
    if not _addressable(tree, path):
        return False

    current: _typing.Any = tree
    for segment in path[:-1]:
        if isinstance(segment, str) and not isinstance(current.get(segment), (dict, list)):
            current[segment] = {}
        current = current[segment]
    current[path[-1]] = value
    return True


def _addressable(tree: dict[str, _typing.Any], path: Path) -> bool:
    """Check, without writing, that set_path() can store a value at path."""
    if not path:
        return False

    current: _typing.Any = tree
    for index, segment in enumerate(path[:-1]):
        if isinstance(segment, str):
            if not isinstance(current, dict):
                return False
            child = current.get(segment)
            if not isinstance(child, (dict, list)):
                # Every level below is created as a new dict: only keys fit
                return all(isinstance(rest, str) for rest in path[index + 1 :])
            current = child
        else:
            found, child = _step(current, segment)
            if not found or not isinstance(child, (dict, list)):
                return False
            current = child

    leaf = path[-1]
    if isinstance(leaf, str):
        return isinstance(current, dict)
    return isinstance(current, list) and 0 <= leaf < len(current)


def unset_path(tree: dict[str, _typing.Any], path: Path) -> bool:
    """
    Remove the value at a path.

    Returns:
        True if something was removed, False if the path was absent.
    """
    if not path:
        return False

    parent = get_path(tree, path[:-1])
    leaf = path[-1]
    if isinstance(leaf, str):
        if isinstance(parent, dict) and leaf in parent:
            del parent[leaf]
            return True
        return False
    if isinstance(parent, list) and 0 <= leaf < len(parent):
        del parent[leaf]
        return True
    return False
