"""
Read-only access to a store's tree.

TreeView lets rules and the context resolver look at a settings tree
without copying it. thaw() produces an independent plain copy.
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing


class TreeView(_abc.Mapping[str, _typing.Any]):
    """
    Live, read-only view of a settings tree.

    Nested dicts come back as views and lists as tuples, so nothing in the
    tree can be changed through it.

    Example:
        >>> view = TreeView({"context": {"regions": ["us-east-1"]}})
        >>> view["context"]["regions"]
        ('us-east-1',)
    """

    __slots__ = ("_tree",)

    def __init__(self, tree: _abc.Mapping[str, _typing.Any]) -> None:
        self._tree = tree

    def __getitem__(self, key: str) -> _typing.Any:
        return _view(self._tree[key])

    def __iter__(self) -> _typing.Iterator[str]:
        return iter(self._tree)

    def __len__(self) -> int:
        return len(self._tree)

    def __repr__(self) -> str:
        return f"TreeView({self._tree!r})"


def _view(value: _typing.Any) -> _typing.Any:
    if isinstance(value, TreeView):
        return value
    if isinstance(value, _abc.Mapping):
        return TreeView(value)
    if isinstance(value, list):
        return tuple(_view(item) for item in value)
    return value


def thaw(value: _typing.Any) -> _typing.Any:
    """
    Deep-copy a value into plain dicts and lists.

    Example:
        >>> thaw(TreeView({"tags": [{"Key": "team"}]}))
        {'tags': [{'Key': 'team'}]}
    """
    if isinstance(value, _abc.Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, _abc.Sequence) and not isinstance(value, (str, bytes)):
        return [thaw(item) for item in value]
    return value
