# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Typed tag values

A decoded tag holds exactly one variant: an integer, a 64-bit integer,
a float, a rational, raw bytes, a homogeneous array of one primitive
element type, or text. The variant is fixed when the value is written.

Copyright 2025 DNAi inc.
"""

import array
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence

from dnmakernote.rational import Rational


class ElementType(Enum):
    """Primitive element types as (struct code, size in bytes, signed)."""
    INT8 = ('b', 1, True)
    UINT8 = ('B', 1, False)
    INT16 = ('h', 2, True)
    UINT16 = ('H', 2, False)
    INT32 = ('i', 4, True)
    UINT32 = ('I', 4, False)
    INT64 = ('q', 8, True)
    FLOAT32 = ('f', 4, True)
    FLOAT64 = ('d', 8, True)
    RATIONAL = ('II', 8, False)

    @property
    def struct_code(self) -> str:
        return self.value[0]

    @property
    def size(self) -> int:
        return self.value[1]

    @property
    def signed(self) -> bool:
        return self.value[2]

    @property
    def is_integer(self) -> bool:
        return self not in (ElementType.FLOAT32, ElementType.FLOAT64, ElementType.RATIONAL)

    def narrow(self, value: Any) -> Any:
        """
        Coerce a value to this element type.

        Integers are wrapped to the type's bit width (two's complement for
        signed types), matching a cast in the camera firmware.

        Args:
            value: Value to coerce

        Returns:
            Coerced value
        """
        if self.is_integer:
            bits = self.size * 8
            value = int(value) & ((1 << bits) - 1)
            if self.signed and value >= 1 << (bits - 1):
                value -= 1 << bits
            return value
        if self is ElementType.RATIONAL:
            if not isinstance(value, Rational):
                raise TypeError(f"Expected Rational element, got {type(value).__name__}")
            return value
        return float(value)


class TagValueKind(Enum):
    """Variant of a stored tag value."""
    INT = 'int'
    LONG = 'long'
    FLOAT = 'float'
    RATIONAL = 'rational'
    BYTES = 'bytes'
    ARRAY = 'array'
    TEXT = 'text'
    OBJECT = 'object'


INT32_MIN = -(1 << 31)
UINT32_MAX = (1 << 32) - 1

# array.array typecodes that hold integers
INTEGER_TYPECODES = frozenset('bBhHiIlLqQ')

_TYPECODE_ELEMENT_TYPES = {
    'b': ElementType.INT8,
    'B': ElementType.UINT8,
    'h': ElementType.INT16,
    'H': ElementType.UINT16,
    'i': ElementType.INT32,
    'I': ElementType.UINT32,
    'l': ElementType.INT64,
    'L': ElementType.INT64,
    'q': ElementType.INT64,
    'Q': ElementType.INT64,
    'f': ElementType.FLOAT32,
    'd': ElementType.FLOAT64,
}


@dataclass(frozen=True)
class TagValue:
    """A stored tag value and its variant."""
    kind: TagValueKind
    value: Any
    element_type: Optional[ElementType] = None

    @classmethod
    def of_int(cls, value: int) -> 'TagValue':
        value = int(value)
        if INT32_MIN <= value <= UINT32_MAX:
            return cls(TagValueKind.INT, value)
        return cls(TagValueKind.LONG, value)

    @classmethod
    def of_long(cls, value: int) -> 'TagValue':
        return cls(TagValueKind.LONG, int(value))

    @classmethod
    def of_float(cls, value: float) -> 'TagValue':
        return cls(TagValueKind.FLOAT, float(value))

    @classmethod
    def of_rational(cls, value: Rational) -> 'TagValue':
        return cls(TagValueKind.RATIONAL, value)

    @classmethod
    def of_bytes(cls, value: bytes) -> 'TagValue':
        return cls(TagValueKind.BYTES, bytes(value))

    @classmethod
    def of_text(cls, value: str) -> 'TagValue':
        return cls(TagValueKind.TEXT, str(value))

    @classmethod
    def of_array(cls, values: Sequence[Any], element_type: ElementType) -> 'TagValue':
        """
        Build an array value, narrowing every element to element_type.

        Args:
            values: Elements
            element_type: Element type of the array

        Returns:
            TagValue holding an immutable tuple
        """
        return cls(
            TagValueKind.ARRAY,
            tuple(element_type.narrow(v) for v in values),
            element_type,
        )

    @classmethod
    def of_object(cls, value: Any) -> 'TagValue':
        """
        Wrap a value no other variant can hold.

        Sequences are copied into a tuple; anything else is kept as given.
        """
        if isinstance(value, (list, tuple, array.array)):
            value = tuple(value)
        return cls(TagValueKind.OBJECT, value)

    @classmethod
    def infer(cls, value: Any) -> 'TagValue':
        """
        Infer the variant of a plain Python value.

        Used where a record is stored without any manufacturer-specific
        handling, so whatever the IFD reader produced is kept as-is.
        Values with no typed representation (None, mixed or non-numeric
        sequences, unsupported array typecodes) become OBJECT values.

        Args:
            value: Python value

        Returns:
            TagValue for the value
        """
        if isinstance(value, TagValue):
            return value
        if isinstance(value, bool):
            return cls.of_int(int(value))
        if isinstance(value, int):
            return cls.of_int(value)
        if isinstance(value, float):
            return cls.of_float(value)
        if isinstance(value, Rational):
            return cls.of_rational(value)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls.of_bytes(bytes(value))
        if isinstance(value, str):
            return cls.of_text(value)
        element_type = None
        if isinstance(value, array.array):
            element_type = _TYPECODE_ELEMENT_TYPES.get(value.typecode)
        elif isinstance(value, (list, tuple)):
            element_type = _element_type_for_items(value)
        if element_type is not None:
            return cls.of_array(value, element_type)
        return cls.of_object(value)


def _element_type_for_items(items: Sequence[Any]) -> Optional[ElementType]:
    if items and all(isinstance(v, Rational) for v in items):
        return ElementType.RATIONAL
    if all(isinstance(v, int) for v in items):
        if all(INT32_MIN <= v < (1 << 31) for v in items):
            return ElementType.INT32
        if all(0 <= v <= UINT32_MAX for v in items):
            return ElementType.UINT32
        return ElementType.INT64
    if all(isinstance(v, (int, float)) for v in items):
        return ElementType.FLOAT64
    return None


def is_integer_array(value: Any) -> bool:
    """
    Check whether a value is an already-widened integer array.

    Byte buffers are excluded: they are raw records, not per-index
    integer fields.

    Args:
        value: Candidate value

    Returns:
        True for a list/tuple of ints or an integer array.array
    """
    if isinstance(value, array.array):
        return value.typecode in INTEGER_TYPECODES
    if isinstance(value, (list, tuple)):
        return all(isinstance(v, int) and not isinstance(v, bool) for v in value)
    return False


def is_byte_buffer(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray, memoryview))
