"""
structedit.paths: Nested updates with structural sharing.

`set_path` threads a value down a path of keys and rebuilds only the
containers on that path.  Everything off the path is reused as is:

    state = {"a": {"b": [1, 2, 3]}, "other": {...}}
    new = set_path(state, ["a", "b", 1], 9)

    new                   → {"a": {"b": [1, 9, 3]}, "other": {...}}
    new["other"] is state["other"]        (untouched branch shared)
    set_path(state, ["a", "b", 1], 2) is state   (nothing changed)

Each key picks the editor for its level: an index (int) goes through
`set_item`, anything else through `set_property`.  When the container
found at a level has the wrong shape for its key, it is treated as
missing and a fresh one is built.
"""

import numbers
from typing import Any, Optional, Sequence

from .core import set_item, set_property
from .lookup import get_path, lookup
from .sentinels import Shape, shape_of

__all__ = ["set_path", "get_path", "key_shape"]


def key_shape(key: Any) -> Shape:
    """
    The container shape a path key addresses.

    Numbers are indices, even bad ones such as nan, so that set_item gets
    to reject them.  bool is a name.
    """
    if isinstance(key, numbers.Real) and not isinstance(key, bool):
        return Shape.SEQUENCE
    return Shape.MAPPING


def set_path(target: Any, path: Optional[Sequence[Any]], value: Any, index: int = 0) -> Any:
    """
    Return `target` with the location at `path` set to `value`.

    A None path (or one already consumed up to `index`) replaces the
    whole value.  UNDEFINED as `value` removes the final key.
    """
    if path is None or index == len(path):
        return value

    key = path[index]
    wanted = key_shape(key)
    container = target if shape_of(target) is wanted else None

    child = set_path(lookup(container, key), path, value, index + 1)

    if wanted is Shape.SEQUENCE:
        return set_item(container, key, child)
    return set_property(container, key, child)
