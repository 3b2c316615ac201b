# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Sequential variable-width record decoder

Some records cannot be described by a static offset table: the first
element is a count, and later fields are that many elements wide. Canon
AFInfo is the main example. Its values are sequential and the AF area
X/Y position fields each hold numafpoints values (1, 5, 7, 9, 15, 45 or
53 in practice) while the points-in-focus field holds one bit per point,
packed into 16-bit words. Area coordinates are signed offsets from the
image centre.

The walk is single pass: the cursor moves through the array while a tag
counter moves through the documented field order, one field per step.

Copyright 2025 DNAi inc.
"""

import logging
from typing import Any, Callable, Dict, Optional

from dnmakernote.config import DecoderConfig
from dnmakernote.directory import Directory
from dnmakernote.tag_spaces import TagSpace
from dnmakernote.tag_values import ElementType, is_integer_array

logger = logging.getLogger(__name__)

# Width of a bulk field as a function of the record's leading count
WidthFunction = Callable[[int], int]


def points_width(count: int) -> int:
    return count


def bitmask_width(count: int) -> int:
    """Number of 16-bit words needed for one bit per point."""
    return (count + 15) // 16


class SequentialVariableRecordDecoder:
    """
    Decodes a count-prefixed record with data-dependent field widths.
    """

    def __init__(
        self,
        space: TagSpace,
        bulk_fields: Dict[int, WidthFunction],
        element_type: ElementType = ElementType.INT16,
        config: Optional[DecoderConfig] = None
    ):
        """
        Initialize decoder.

        Args:
            space: Tag space of the record
            bulk_fields: Local field index -> width function of the leading count
            element_type: Element type bulk values are narrowed to
            config: Decoder configuration
        """
        self.space = space
        self.bulk_fields = dict(bulk_fields)
        self.element_type = element_type
        self.config = config or DecoderConfig()

    def decode(self, directory: Directory, tag_type: int, values: Any) -> None:
        """
        Walk the record and write one tag per field.

        Never raises for malformed data. A bulk field that does not fit
        in the remaining values is skipped with an error, but its width
        is still consumed so later fields keep their positions.

        Args:
            directory: Directory to populate
            tag_type: Tag id the record was read from
            values: Integer array from the IFD reader
        """
        if not is_integer_array(values):
            directory.set_object(tag_type, values)
            return

        length = len(values)
        if length == 0:
            self._fail(directory, f"{self.space.record} record is empty")
            return

        count = values[0]
        index = 0
        tag_number = 0
        while index < length:
            tag_id = self.space.tag_id(tag_number)
            width_function = self.bulk_fields.get(tag_number)

            if width_function is None:
                directory.set_int(tag_id, values[index])
                index += 1
            else:
                if count < 0:
                    self._fail(directory, f"{self.space.record} point count is negative ({count})")
                    return
                width = width_function(count)
                if index + width <= length:
                    directory.set_array(tag_id, values[index:index + width], self.element_type)
                else:
                    self._fail(
                        directory,
                        f"{self.space.record} field {tag_number} needs {width} values at index {index}, "
                        f"only {length - index} remain"
                    )
                # Consumed whether or not it could be read
                index += width

            tag_number += 1

    def _fail(self, directory: Directory, message: str) -> None:
        logger.log(self.config.error_log_level, "%s: %s", directory.name, message)
        directory.add_error(message)
