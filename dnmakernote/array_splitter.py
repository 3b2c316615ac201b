# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Fixed array splitting

Copyright 2025 DNAi inc.
"""

import logging
from typing import Any

from dnmakernote.directory import Directory
from dnmakernote.tag_spaces import TagSpace
from dnmakernote.tag_values import is_integer_array

logger = logging.getLogger(__name__)


class FixedArraySplitter:
    """
    Splits an integer array into one synthetic tag per index.

    Used for records where every index has a fixed, documented meaning
    (Canon CameraSettings, FocalLength, ShotInfo and Panorama).
    """

    def __init__(self, space: TagSpace):
        """
        Initialize splitter.

        Args:
            space: Tag space receiving the split values
        """
        self.space = space

    def split(self, directory: Directory, tag_type: int, array: Any) -> None:
        """
        Write array[i] to space.tag_id(i) for every index.

        The original array is not kept. A value that is not an integer
        array gets no special handling and is stored unsplit under
        tag_type.

        Args:
            directory: Directory to populate
            tag_type: Tag id the array was read from
            array: Array from the IFD reader
        """
        if not is_integer_array(array):
            logger.debug("%s: tag 0x%04X is not an integer array, storing unsplit",
                         self.space.record, tag_type)
            directory.set_object(tag_type, array)
            return

        for index, value in enumerate(array):
            directory.set_int(self.space.tag_id(index), value)
