"""
structedit.equality: Strict and structural equality.

`strict_equal` is the leaf comparison used everywhere an edit decides
whether it changes anything:

    • identical objects are equal
    • numbers compare by value (1 == 1.0), but bool only equals bool
    • str / bytes / dates / UUIDs compare by value within the same type
    • containers and arbitrary objects compare by identity only

`same` lifts it to one level of properties (or, in deep mode, to dotted
paths), and `different` is its negation packaged as a predicate for
change detection:

    changed = different(["value.name"])
    if changed(old_props, new_props):
        recompute()
"""

import datetime
import numbers
import uuid
from typing import Any, Callable, Iterable, Optional, Union

from .lookup import get_path, lookup, own_keys
from .sentinels import is_absent

Properties = Optional[Union[str, Iterable[Any]]]

_VALUE_TYPES = (str, bytes, datetime.date, datetime.time, datetime.timedelta, uuid.UUID)


def strict_equal(a: Any, b: Any) -> bool:
    """Equality without looking inside containers."""
    if a is b:
        return True
    # bool is a subclass of int, so True == 1 unless guarded.
    if isinstance(a, bool) or isinstance(b, bool):
        return False
    if isinstance(a, numbers.Number) and isinstance(b, numbers.Number):
        return a == b
    if isinstance(a, _VALUE_TYPES) and type(a) is type(b):
        return a == b
    return False


def _union_keys(a: Any, b: Any) -> list:
    keys = own_keys(a)
    seen = set(keys)
    for key in own_keys(b):
        if key not in seen:
            seen.add(key)
            keys.append(key)
    return keys


def _resolve(value: Any, name: Any, deep: bool) -> Any:
    if not deep:
        return lookup(value, name)
    if isinstance(name, str):
        return get_path(value, name)
    return get_path(value, (name,))


def same(a: Any, b: Any, properties: Properties = None, deep: bool = False) -> bool:
    """
    True if `a` and `b` agree on every name in `properties`.

    Unless provided, `properties` is the union of both operands' own
    keys.  With `deep=True`, each name is a dotted path ("p1.p2") resolved
    inside both operands.  Leaves are compared with `strict_equal`.
    """
    if strict_equal(a, b):
        return True
    if is_absent(a) or is_absent(b):
        return False
    if properties is None:
        properties = _union_keys(a, b)
    elif isinstance(properties, str):
        properties = (properties,)
    for name in properties:
        if not strict_equal(_resolve(a, name, deep), _resolve(b, name, deep)):
            return False
    return True


def different(properties: Properties = None, deep: bool = True) -> Callable[[Any, Any], bool]:
    """Predicate that is True when `a` and `b` differ on `properties`."""
    if properties is not None and not isinstance(properties, str):
        properties = tuple(properties)

    def predicate(a: Any, b: Any) -> bool:
        return not same(a, b, properties, deep)
    return predicate
