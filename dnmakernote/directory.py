# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Directory of decoded maker note tags

A Directory maps integer tag ids to typed values and carries an ordered
list of decode errors. A decoder populates one directory per call; the
formatting layer then reads it back through the typed getters below,
which return None instead of raising when a tag is missing or holds a
different variant.

Copyright 2025 DNAi inc.
"""

from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from dnmakernote.rational import Rational
from dnmakernote.tag_values import ElementType, TagValue, TagValueKind


# Reader kind -> stored kinds it accepts
_COMPATIBLE_KINDS = {
    TagValueKind.LONG: (TagValueKind.INT, TagValueKind.LONG),
}


class Directory:
    """
    Typed tag store for one decoded maker note record.

    Writes always succeed and the last write to a tag id wins. A
    directory is owned by a single decode call and is not thread safe.
    """

    def __init__(self, name: str = "MakerNote"):
        """
        Initialize an empty directory.

        Args:
            name: Display name of the record (e.g., "Canon Makernote")
        """
        self.name = name
        self._values: Dict[int, TagValue] = {}
        self._errors: List[str] = []

    # Setters

    def set(self, tag_id: int, value: TagValue) -> None:
        """
        Store a value, replacing any previous value for the tag.

        Args:
            tag_id: Tag id
            value: Typed value
        """
        self._values[tag_id] = value

    def set_int(self, tag_id: int, value: int) -> None:
        self.set(tag_id, TagValue.of_int(value))

    def set_long(self, tag_id: int, value: int) -> None:
        self.set(tag_id, TagValue.of_long(value))

    def set_float(self, tag_id: int, value: float) -> None:
        self.set(tag_id, TagValue.of_float(value))

    def set_rational(self, tag_id: int, value: Rational) -> None:
        self.set(tag_id, TagValue.of_rational(value))

    def set_bytes(self, tag_id: int, value: bytes) -> None:
        self.set(tag_id, TagValue.of_bytes(value))

    def set_string(self, tag_id: int, value: str) -> None:
        self.set(tag_id, TagValue.of_text(value))

    def set_array(self, tag_id: int, values: Sequence[Any], element_type: ElementType) -> None:
        """
        Store a homogeneous array, narrowing each element to element_type.

        Args:
            tag_id: Tag id
            values: Elements
            element_type: Element type
        """
        self.set(tag_id, TagValue.of_array(values, element_type))

    def set_object(self, tag_id: int, value: Any) -> None:
        """
        Store a plain Python value with its variant inferred.

        Args:
            tag_id: Tag id
            value: Any value; one with no typed variant is stored as OBJECT
        """
        self.set(tag_id, TagValue.infer(value))

    # Getters

    def get_tag_value(self, tag_id: int) -> Optional[TagValue]:
        return self._values.get(tag_id)

    def get(self, tag_id: int, kind: TagValueKind) -> Optional[Any]:
        """
        Get a value if it is present and of a compatible variant.

        Args:
            tag_id: Tag id
            kind: Requested variant

        Returns:
            The stored Python value, or None when the tag is absent or
            holds an incompatible variant
        """
        stored = self._values.get(tag_id)
        if stored is None:
            return None
        if stored.kind not in _COMPATIBLE_KINDS.get(kind, (kind,)):
            return None
        return stored.value

    def get_object(self, tag_id: int) -> Optional[Any]:
        """Get the stored value whatever its variant."""
        stored = self._values.get(tag_id)
        return None if stored is None else stored.value

    def get_int(self, tag_id: int) -> Optional[int]:
        return self.get(tag_id, TagValueKind.INT)

    def get_long(self, tag_id: int) -> Optional[int]:
        return self.get(tag_id, TagValueKind.LONG)

    def get_float(self, tag_id: int) -> Optional[float]:
        return self.get(tag_id, TagValueKind.FLOAT)

    def get_rational(self, tag_id: int) -> Optional[Rational]:
        return self.get(tag_id, TagValueKind.RATIONAL)

    def get_bytes(self, tag_id: int) -> Optional[bytes]:
        return self.get(tag_id, TagValueKind.BYTES)

    def get_string(self, tag_id: int) -> Optional[str]:
        return self.get(tag_id, TagValueKind.TEXT)

    def get_array(self, tag_id: int, element_type: Optional[ElementType] = None) -> Optional[Tuple[Any, ...]]:
        """
        Get an array value.

        Args:
            tag_id: Tag id
            element_type: If given, the array must have this element type

        Returns:
            Tuple of elements, or None
        """
        stored = self._values.get(tag_id)
        if stored is None or stored.kind is not TagValueKind.ARRAY:
            return None
        if element_type is not None and stored.element_type is not element_type:
            return None
        return stored.value

    def get_int_array(self, tag_id: int) -> Optional[Tuple[int, ...]]:
        """Get an array value whose elements are integers of any width."""
        stored = self._values.get(tag_id)
        if stored is None or stored.kind is not TagValueKind.ARRAY:
            return None
        if not stored.element_type.is_integer:
            return None
        return stored.value

    # Introspection

    def contains(self, tag_id: int) -> bool:
        return tag_id in self._values

    def __contains__(self, tag_id: object) -> bool:
        return tag_id in self._values

    def tag_ids(self) -> List[int]:
        """Tag ids in the order they were first written."""
        return list(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def is_empty(self) -> bool:
        return not self._values

    # Errors

    def add_error(self, message: str) -> None:
        """
        Record a decode error. Decoding continues after this call.

        Args:
            message: Human-readable description of what could not be decoded
        """
        self._errors.append(message)

    @property
    def errors(self) -> Tuple[str, ...]:
        return tuple(self._errors)

    def has_errors(self) -> bool:
        return bool(self._errors)

    def error_count(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"<Directory {self.name!r}: {len(self._values)} tags, {len(self._errors)} errors>"
