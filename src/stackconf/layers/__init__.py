"""
Layer primitives: path addressing, read-only views and merge functions.

These operate on plain nested dicts and know nothing about stores,
commands or precedence policy.
"""

from stackconf.layers._merge import deep_merge, resolve_layers
from stackconf.layers._paths import Path, PathLike, get_path, normalize, set_path, unset_path
from stackconf.layers._view import TreeView, thaw

__all__ = [
    "Path",
    "PathLike",
    "TreeView",
    "deep_merge",
    "get_path",
    "normalize",
    "resolve_layers",
    "set_path",
    "thaw",
    "unset_path",
]
