# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Canon MakerNote array decoding

Several Canon maker note tags hold int16 arrays whose indices each have
their own meaning. These are split out into synthetic tags and the
original array is dropped. Arrays of any other element kind, and tags
with no split rule, are stored unchanged.

Copyright 2025 DNAi inc.
"""

from typing import Any, Callable, Dict, Optional

from dnmakernote.af_info_decoder import SequentialVariableRecordDecoder, bitmask_width, points_width
from dnmakernote.array_splitter import FixedArraySplitter
from dnmakernote.config import DecoderConfig
from dnmakernote.directory import Directory
from dnmakernote.tag_spaces import (
    CANON_AF_INFO,
    CANON_CAMERA_SETTINGS,
    CANON_FOCAL_LENGTH,
    CANON_PANORAMA,
    CANON_SHOT_INFO,
    CanonAFInfo,
)

# Canon MakerNote IFD tags that carry split arrays
TAG_CAMERA_SETTINGS_ARRAY = 0x0001
TAG_FOCAL_LENGTH_ARRAY = 0x0002
TAG_SHOT_INFO_ARRAY = 0x0004
TAG_PANORAMA_ARRAY = 0x0005
TAG_AF_INFO_ARRAY = 0x0012

ARRAY_TAGS = (
    TAG_CAMERA_SETTINGS_ARRAY,
    TAG_FOCAL_LENGTH_ARRAY,
    TAG_SHOT_INFO_ARRAY,
    TAG_PANORAMA_ARRAY,
    TAG_AF_INFO_ARRAY,
)


class CanonMakerNoteDecoder:
    """
    Decodes Canon MakerNote array tags into synthetic tags.
    """

    def __init__(self, config: Optional[DecoderConfig] = None):
        """
        Initialize Canon decoder.

        Args:
            config: Decoder configuration
        """
        self.config = config or DecoderConfig()
        self.af_info_decoder = SequentialVariableRecordDecoder(
            CANON_AF_INFO,
            {
                CanonAFInfo.AF_AREA_X_POSITIONS: points_width,
                CanonAFInfo.AF_AREA_Y_POSITIONS: points_width,
                CanonAFInfo.AF_POINTS_IN_FOCUS: bitmask_width,
            },
            element_type=self.config.af_position_type,
            config=self.config,
        )
        self._handlers: Dict[int, Callable[[Directory, int, Any], None]] = {
            TAG_CAMERA_SETTINGS_ARRAY: FixedArraySplitter(CANON_CAMERA_SETTINGS).split,
            TAG_FOCAL_LENGTH_ARRAY: FixedArraySplitter(CANON_FOCAL_LENGTH).split,
            TAG_SHOT_INFO_ARRAY: FixedArraySplitter(CANON_SHOT_INFO).split,
            TAG_PANORAMA_ARRAY: FixedArraySplitter(CANON_PANORAMA).split,
            TAG_AF_INFO_ARRAY: self.af_info_decoder.decode,
        }

    def decode_array(self, directory: Directory, tag_type: int, array: Any) -> None:
        """
        Store a Canon MakerNote array tag.

        Args:
            directory: Canon MakerNote directory
            tag_type: MakerNote tag id the array was read from
            array: Array from the IFD reader
        """
        handler = self._handlers.get(tag_type)
        if handler is None:
            directory.set_object(tag_type, array)
            return
        handler(directory, tag_type, array)
