"""
structedit.core: Sequence and mapping editing
==============================================

Every function here is pure.  It never mutates its input, and it returns
either the input itself (when the edit would not change anything that
`strict_equal` can observe) or a freshly built container:

    seq = ["a", "b", "c"]
    set_item(seq, 1, "x")         → ["a", "x", "c"]     (new list)
    set_item(seq, 1, "b")         → seq                  (same object)
    set_item(seq, 1, UNDEFINED)   → ["a", "c"]          (removal)

    m = {"x": 1, "y": 2}
    set_property(m, "y", UNDEFINED)   → {"x": 1}
    set_property(m, "x", 1)           → m

RULES SHARED BY BOTH FAMILIES
─────────────────────────────

    • An absent container (None or UNDEFINED) is read as the matching empty
      sentinel.  Edits that leave it empty return the sentinel itself.
    • UNDEFINED as a value means "no value": it is never stored, and
      assigning it removes what was there.
    • Results are plain `list` / `dict` objects.  Inputs may be any
      Sequence / Mapping, including the read-only sentinels.

Index validation follows structedit.config: outside production, an index
that is not a finite whole number raises InvalidIndexError; in production
the edit is skipped and a warning is logged.
"""

import logging
import math
import operator
from typing import Any, Iterable, Mapping, Optional, Sequence

from .config import get_settings
from .equality import same, strict_equal
from .errors import InvalidIndexError
from .sentinels import EMPTY_MAPPING, EMPTY_SEQUENCE, UNDEFINED, is_absent

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════
#  INDEX HANDLING
# ═══════════════════════════════════════════════════════════════════

def _coerce_index(index: Any) -> Optional[int]:
    """
    Turn `index` into an int, or report it.

    Accepts ints (and anything implementing __index__) and floats holding
    a whole number.  Returns None for a rejected index in production mode.
    """
    if not isinstance(index, bool):
        try:
            return operator.index(index)
        except TypeError:
            pass
        if isinstance(index, float) and math.isfinite(index) and index.is_integer():
            return int(index)

    if not get_settings().production:
        raise InvalidIndexError(index)
    logger.warning("Ignoring edit with invalid sequence index %r", index)
    return None


def _sequence_or_empty(seq: Optional[Sequence]) -> Sequence:
    return EMPTY_SEQUENCE if is_absent(seq) else seq


def _mapping_or_empty(mapping: Optional[Mapping]) -> Mapping:
    return EMPTY_MAPPING if is_absent(mapping) else mapping


def index_of(seq: Optional[Sequence], value: Any) -> int:
    """Position of the first element strictly equal to `value`, else -1."""
    if is_absent(seq):
        return -1
    for position, item in enumerate(seq):
        if strict_equal(item, value):
            return position
    return -1


# ═══════════════════════════════════════════════════════════════════
#  SEQUENCE EDITING
# ═══════════════════════════════════════════════════════════════════

def insert_item(seq: Optional[Sequence], value: Any, index: Optional[int] = None) -> Sequence:
    """
    Return a new list with `value` inserted at `index`.

    Without `index` the value is appended.  An UNDEFINED `value` leaves
    `seq` untouched.
    """
    if is_absent(seq):
        return EMPTY_SEQUENCE if value is UNDEFINED else [value]
    if value is UNDEFINED:
        return seq
    items = list(seq)
    if index is None:
        items.append(value)
        return items
    index = _coerce_index(index)
    if index is None:
        return seq
    items.insert(index, value)
    return items


def insert_items(seq: Optional[Sequence], values: Optional[Iterable], index: Optional[int] = None) -> Sequence:
    """
    Return a new list with all of `values` spliced in at `index`.

    If `seq` is absent, `values` itself is returned, not a copy: callers
    must not mutate it afterwards.
    """
    if is_absent(seq):
        return EMPTY_SEQUENCE if is_absent(values) else values
    if is_absent(values):
        return seq
    items = list(seq)
    if index is None:
        items.extend(values)
        return items
    index = _coerce_index(index)
    if index is None:
        return seq
    items[index:index] = values
    return items


def replace_item(seq: Optional[Sequence], previous_value: Any, value: Any) -> Sequence:
    """Replace the first occurrence of `previous_value` with `value`."""
    return set_item(seq, index_of(seq, previous_value), value)


def set_item(seq: Optional[Sequence], index: Optional[int], value: Any) -> Sequence:
    """
    Return `seq` with `seq[index]` set to `value`.

        • index None or -1          → `seq` untouched
        • value UNDEFINED           → element at `index` removed, if any
        • value strictly equal      → `seq` untouched
        • index >= len(seq)         → `value` appended

    Other negative indices count from the end.  One that still falls
    before the start prepends `value` (and removes nothing).
    """
    if index is None:
        return _sequence_or_empty(seq)
    index = _coerce_index(index)
    if index is None or index == -1:
        return _sequence_or_empty(seq)

    if is_absent(seq):
        return EMPTY_SEQUENCE if value is UNDEFINED else [value]

    length = len(seq)
    if index < 0:
        index += length
        if index < 0:
            return seq if value is UNDEFINED else [value, *seq]

    if value is UNDEFINED:
        if index >= length:
            return seq
        items = list(seq)
        del items[index]
        return items

    if index >= length:
        items = list(seq)
        items.append(value)
        return items

    if strict_equal(seq[index], value):
        return seq
    items = list(seq)
    items[index] = value
    return items


# ═══════════════════════════════════════════════════════════════════
#  MAPPING EDITING
# ═══════════════════════════════════════════════════════════════════

def _omit_undefined(mapping: Mapping) -> Mapping:
    """Drop UNDEFINED-valued keys; returns `mapping` itself if there are none."""
    for value in mapping.values():
        if value is UNDEFINED:
            return {k: v for k, v in mapping.items() if v is not UNDEFINED}
    return mapping


def set_property(mapping: Optional[Mapping], key: Any, value: Any) -> Mapping:
    """
    Return `mapping` with `mapping[key]` set to `value`.

    An UNDEFINED `value` removes `key`.  An UNDEFINED `key` leaves the
    mapping untouched; None is an ordinary key.
    """
    if key is UNDEFINED:
        return _mapping_or_empty(mapping)
    if is_absent(mapping):
        return EMPTY_MAPPING if value is UNDEFINED else {key: value}

    if value is UNDEFINED:
        if key not in mapping:
            return mapping
        result = dict(mapping)
        del result[key]
        return result

    if key in mapping and strict_equal(mapping[key], value):
        return mapping
    return {**mapping, key: value}


def set_properties(mapping: Optional[Mapping], values: Optional[Mapping]) -> Mapping:
    """
    Return `mapping` with every entry of `values` merged in.

    Keys of `values` holding UNDEFINED are removed from the result, as
    with `set_property`.  If no key of `values` changes anything, the
    original `mapping` is returned.
    """
    if is_absent(values):
        return _mapping_or_empty(mapping)
    if is_absent(mapping):
        return _omit_undefined(values)
    if same(mapping, values, list(values.keys())):
        return mapping
    return _omit_undefined({**mapping, **values})
