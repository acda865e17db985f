"""
structedit: Immutable updates with structural sharing
=====================================================

Pure functions that derive new lists and dicts from existing ones,
returning the very same object whenever nothing observable changes:

    set_item(["a", "b", "c"], 1, "x")              → ["a", "x", "c"]
    set_property({"x": 1, "y": 2}, "y", UNDEFINED)  → {"x": 1}
    set_path({"a": {"b": [1, 2, 3]}}, ["a", "b", 1], 9)
                                                   → {"a": {"b": [1, 9, 3]}}
    same({"x": 1, "y": 2}, {"x": 1, "y": 3}, ["x"]) → True

Because unchanged inputs come back by identity, callers can memoize and
skip work with a plain `is` check.
"""

from structedit.sentinels import (
    EMPTY_MAPPING,
    EMPTY_SEQUENCE,
    UNDEFINED,
    Shape,
    is_absent,
    shape_of,
)
from structedit.core import (
    # Sequences
    index_of,
    insert_item,
    insert_items,
    replace_item,
    set_item,
    # Mappings
    set_properties,
    set_property,
)
from structedit.paths import get_path, key_shape, set_path
from structedit.equality import different, same, strict_equal
from structedit.lookup import lookup, own_keys, parse_path
from structedit.config import Settings, configure, get_settings
from structedit.errors import InvalidIndexError, StructEditError

__version__ = "0.1.0"
__all__ = [
    "EMPTY_SEQUENCE", "EMPTY_MAPPING", "UNDEFINED", "Shape", "is_absent", "shape_of",
    "index_of", "insert_item", "insert_items", "replace_item", "set_item",
    "set_property", "set_properties",
    "set_path", "get_path", "key_shape",
    "same", "different", "strict_equal",
    "lookup", "own_keys", "parse_path",
    "Settings", "configure", "get_settings",
    "StructEditError", "InvalidIndexError",
]
