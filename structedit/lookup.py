"""
structedit.lookup: Reading values out of nested containers.

Three primitives shared by the equality predicates and the path engine:

    own_keys(value)             keys of a mapping, indices of a sequence
                                or string, attribute names of an object
    lookup(value, key)          one step down, UNDEFINED when missing
    get_path(value, path)       many steps down; `path` is a key sequence
                                or a dotted string such as "a.b[0].c"

Digit segments of a dotted string address sequence indices.  On a
mapping, an integer key that is missing falls back to its string form,
so "items.0" and "items[0]" resolve the same way against {"items": {"0": x}}.
"""

import functools
import re
from typing import Any, Iterable, Optional, Union

from .sentinels import UNDEFINED, Shape, is_absent, shape_of

PathLike = Union[str, Iterable[Any]]

_PATH_TOKEN = re.compile(
    r"""[^.\[\]]+"""                                 # bare name
    r"""|\[(-?\d+)\]"""                              # [3]
    r"""|\[(["'])((?:(?!\2)[^\\]|\\.)*?)\2\]"""      # ["quoted.key"]
)
_ESCAPE = re.compile(r"\\(.)")
_TEXT_TYPES = (str, bytes, bytearray)


def own_keys(value: Any) -> list:
    """Own keys of `value`, in iteration order.  Numbers have none."""
    # Strings are atoms for editing, but compare character by character.
    if isinstance(value, _TEXT_TYPES):
        return list(range(len(value)))
    shape = shape_of(value)
    if shape is Shape.MAPPING:
        return list(value.keys())
    if shape is Shape.SEQUENCE:
        return list(range(len(value)))
    if shape is Shape.OTHER:
        attrs = getattr(value, "__dict__", None)
        if attrs is not None:
            return list(attrs)
    return []


def as_index(key: Any) -> Optional[int]:
    """`key` as a sequence index, or None if it cannot be one."""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, float) and key.is_integer():
        return int(key)
    if isinstance(key, str) and key.isdigit():
        return int(key)
    return None


def lookup(value: Any, key: Any, default: Any = UNDEFINED) -> Any:
    """`value[key]` for mappings and sequences, `getattr` for objects."""
    shape = shape_of(value)

    if shape is Shape.MAPPING:
        try:
            return value[key]
        except (KeyError, TypeError):
            pass
        if isinstance(key, int) and not isinstance(key, bool):
            return value.get(str(key), default)
        return default

    if shape is Shape.SEQUENCE or isinstance(value, _TEXT_TYPES):
        index = as_index(key)
        # Negative indices are not own keys.
        if index is not None and 0 <= index < len(value):
            return value[index]
        return default

    if shape is Shape.OTHER and isinstance(key, str):
        return getattr(value, key, default)

    return default


@functools.lru_cache(maxsize=1024)
def parse_path(text: str) -> tuple:
    """
    Split a dotted path string into keys.

        parse_path("a.b")          → ("a", "b")
        parse_path("rows[2].name") → ("rows", 2, "name")
        parse_path('m["x.y"]')     → ("m", "x.y")
    """
    keys = []
    for match in _PATH_TOKEN.finditer(text):
        index, quote, quoted = match.groups()
        if index is not None:
            keys.append(int(index))
        elif quote is not None:
            keys.append(_ESCAPE.sub(r"\1", quoted))
        else:
            keys.append(match.group(0))
    return tuple(keys)


def get_path(target: Any, path: PathLike, default: Any = UNDEFINED) -> Any:
    """
    Resolve `path` inside `target`.

    Returns `default` as soon as a step is missing, and also when the
    resolved value itself is UNDEFINED.  A None path resolves to `target`.
    """
    if path is None:
        return target
    keys = parse_path(path) if isinstance(path, str) else path
    value = target
    for key in keys:
        if is_absent(value):
            return default
        value = lookup(value, key)
    return default if value is UNDEFINED else value
