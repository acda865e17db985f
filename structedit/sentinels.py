"""
structedit.sentinels: Canonical empties and the UNDEFINED marker.

Three process-wide constants:

    EMPTY_SEQUENCE   the frozen empty tuple; stands for "no sequence"
    EMPTY_MAPPING    a read-only empty mapping; stands for "no mapping"
    UNDEFINED        "no value here"; storing it in a mapping deletes the key

`None` stays an ordinary value.  Only container arguments treat it as
absent, see `is_absent`.
"""

from enum import Enum, auto
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any


class _Undefined:
    """Singleton type of UNDEFINED.  Falsy, and only ever one instance."""
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()

EMPTY_SEQUENCE: tuple = ()

EMPTY_MAPPING: Mapping = MappingProxyType({})


def is_absent(container: Any) -> bool:
    """True for a missing container argument (None or UNDEFINED)."""
    return container is None or container is UNDEFINED


# ═══════════════════════════════════════════════════════════════════
#  CONTAINER SHAPES
# ═══════════════════════════════════════════════════════════════════

class Shape(Enum):
    """What kind of container a value is, as far as editing goes."""
    ABSENT = auto()
    SEQUENCE = auto()
    MAPPING = auto()
    OTHER = auto()


def shape_of(value: Any) -> Shape:
    if is_absent(value):
        return Shape.ABSENT
    # Strings and bytes are sequences to Python but atoms to us.
    if isinstance(value, (str, bytes, bytearray)):
        return Shape.OTHER
    if isinstance(value, Mapping):
        return Shape.MAPPING
    if isinstance(value, Sequence):
        return Shape.SEQUENCE
    return Shape.OTHER
