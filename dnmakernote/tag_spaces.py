# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Synthetic tag spaces

Several maker note tags hold an array whose indices each have their own
meaning. Those indices are exposed as synthetic tags. Each manufacturer
record gets a private numeric range (its OFFSET) so synthetic ids never
collide with Exif tags or with another record's synthetic tags.

Inside the library a synthetic tag is addressed as (TagSpace, local
field); the numeric id is only produced when writing to a Directory.

Copyright 2025 DNAi inc.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional


class Manufacturer(Enum):
    """Camera manufacturers with record decoders."""
    CANON = 'Canon'
    OLYMPUS = 'Olympus'
    SONY = 'Sony'
    KODAK = 'Kodak'


@dataclass(frozen=True)
class TagSpace:
    """
    A manufacturer record's synthetic tag range.

    Attributes:
        manufacturer: Owning manufacturer
        record: Record name (e.g., "AFInfo")
        offset: First synthetic tag id of the range
        size: Number of ids reserved for the range
    """
    manufacturer: Manufacturer
    record: str
    offset: int
    size: int = 0x100

    def tag_id(self, local_index: int) -> int:
        """
        Get the numeric tag id of a local field.

        Args:
            local_index: Index of the field inside the record

        Returns:
            offset + local_index
        """
        return self.offset + int(local_index)

    def local_index(self, tag_id: int) -> Optional[int]:
        if tag_id in self:
            return tag_id - self.offset
        return None

    def __contains__(self, tag_id: object) -> bool:
        return isinstance(tag_id, int) and self.offset <= tag_id < self.offset + self.size


# Canon

CANON_CAMERA_SETTINGS = TagSpace(Manufacturer.CANON, 'CameraSettings', 0xC100)
CANON_FOCAL_LENGTH = TagSpace(Manufacturer.CANON, 'FocalLength', 0xC200)
CANON_SHOT_INFO = TagSpace(Manufacturer.CANON, 'ShotInfo', 0xC400)
CANON_PANORAMA = TagSpace(Manufacturer.CANON, 'Panorama', 0xC500)
CANON_AF_INFO = TagSpace(Manufacturer.CANON, 'AFInfo', 0xD200)


class CanonCameraSettings(IntEnum):
    MACRO_MODE = 0x01
    SELF_TIMER_DELAY = 0x02
    QUALITY = 0x03
    FLASH_MODE = 0x04
    CONTINUOUS_DRIVE_MODE = 0x05
    FOCUS_MODE_1 = 0x07
    RECORD_MODE = 0x09
    IMAGE_SIZE = 0x0A
    EASY_SHOOTING_MODE = 0x0B
    DIGITAL_ZOOM = 0x0C
    CONTRAST = 0x0D
    SATURATION = 0x0E
    SHARPNESS = 0x0F
    ISO = 0x10
    METERING_MODE = 0x11
    FOCUS_TYPE = 0x12
    AF_POINT_SELECTED = 0x13
    EXPOSURE_MODE = 0x14
    LENS_TYPE = 0x16
    LONG_FOCAL_LENGTH = 0x17
    SHORT_FOCAL_LENGTH = 0x18
    FOCAL_UNITS_PER_MM = 0x19
    MAX_APERTURE = 0x1A
    MIN_APERTURE = 0x1B
    FLASH_ACTIVITY = 0x1C
    FLASH_DETAILS = 0x1D
    FOCUS_CONTINUOUS = 0x1E
    AE_SETTING = 0x1F
    FOCUS_MODE_2 = 0x20
    DISPLAY_APERTURE = 0x21
    ZOOM_SOURCE_WIDTH = 0x22
    ZOOM_TARGET_WIDTH = 0x23
    SPOT_METERING_MODE = 0x25
    PHOTO_EFFECT = 0x26
    MANUAL_FLASH_OUTPUT = 0x27
    COLOR_TONE = 0x29
    SRAW_QUALITY = 0x2D


class CanonFocalLength(IntEnum):
    WHITE_BALANCE = 0x07
    SEQUENCE_NUMBER = 0x09
    AF_POINT_USED = 0x0E
    FLASH_BIAS = 0x0F
    AUTO_EXPOSURE_BRACKETING = 0x10
    AEB_BRACKET_VALUE = 0x11
    SUBJECT_DISTANCE = 0x13


class CanonShotInfo(IntEnum):
    AUTO_ISO = 1
    BASE_ISO = 2
    MEASURED_EV = 3
    TARGET_APERTURE = 4
    TARGET_EXPOSURE_TIME = 5
    EXPOSURE_COMPENSATION = 6
    WHITE_BALANCE = 7
    SLOW_SHUTTER = 8
    SEQUENCE_NUMBER = 9
    OPTICAL_ZOOM_CODE = 10
    CAMERA_TEMPERATURE = 12
    FLASH_GUIDE_NUMBER = 13
    AF_POINTS_IN_FOCUS = 14
    FLASH_EXPOSURE_BRACKETING = 15
    AUTO_EXPOSURE_BRACKETING = 16
    AEB_BRACKET_VALUE = 17
    CONTROL_MODE = 18
    FOCUS_DISTANCE_UPPER = 19
    FOCUS_DISTANCE_LOWER = 20
    F_NUMBER = 21
    EXPOSURE_TIME = 22
    MEASURED_EV_2 = 23
    BULB_DURATION = 24
    CAMERA_TYPE = 26
    AUTO_ROTATE = 27
    ND_FILTER = 28
    SELF_TIMER_2 = 29
    FLASH_OUTPUT = 33


class CanonPanorama(IntEnum):
    PANORAMA_FRAME_NUMBER = 2
    PANORAMA_DIRECTION = 5


class CanonAFInfo(IntEnum):
    """AFInfo fields in record order. Fields 8-10 are variable width."""
    NUM_AF_POINTS = 0
    VALID_AF_POINTS = 1
    IMAGE_WIDTH = 2
    IMAGE_HEIGHT = 3
    AF_IMAGE_WIDTH = 4
    AF_IMAGE_HEIGHT = 5
    AF_AREA_WIDTH = 6
    AF_AREA_HEIGHT = 7
    AF_AREA_X_POSITIONS = 8
    AF_AREA_Y_POSITIONS = 9
    AF_POINTS_IN_FOCUS = 10
    PRIMARY_AF_POINT_1 = 11
    PRIMARY_AF_POINT_2 = 12


# Olympus

OLYMPUS_CAMERA_SETTINGS = TagSpace(Manufacturer.OLYMPUS, 'CameraSettings', 0xF000)


class OlympusCameraSettings(IntEnum):
    EXPOSURE_MODE = 2
    FLASH_MODE = 3
    WHITE_BALANCE = 4
    IMAGE_SIZE = 5
    IMAGE_QUALITY = 6
    SHOOTING_MODE = 7
    METERING_MODE = 8
    APEX_FILM_SPEED_VALUE = 9
    APEX_SHUTTER_SPEED_TIME_VALUE = 10
    APEX_APERTURE_VALUE = 11
    MACRO_MODE = 12
    DIGITAL_ZOOM = 13
    EXPOSURE_COMPENSATION = 14
    BRACKET_STEP = 15
    INTERVAL_LENGTH = 17
    INTERVAL_NUMBER = 18
    FOCAL_LENGTH = 19
    FOCUS_DISTANCE = 20
    FLASH_FIRED = 21
    DATE = 22
    TIME = 23
    MAX_APERTURE_AT_FOCAL_LENGTH = 24
    FILE_NUMBER_MEMORY = 27
    LAST_FILE_NUMBER = 28
    WHITE_BALANCE_RED = 29
    WHITE_BALANCE_GREEN = 30
    WHITE_BALANCE_BLUE = 31
    SATURATION = 32
    CONTRAST = 33
    SHARPNESS = 34
    SUBJECT_PROGRAM = 35
    FLASH_COMPENSATION = 36
    ISO_SETTING = 37
    CAMERA_MODEL = 38
    INTERVAL_MODE = 39
    FOLDER_NAME = 40


# Sony: Tag9050b ids are the byte offsets of the fields in the deciphered record

SONY_TAG_9050B = TagSpace(Manufacturer.SONY, 'Tag9050b', 0, size=0x200)


class SonyTag9050b(IntEnum):
    SHUTTER = 0x0026
    FLASH_STATUS = 0x0039
    SHUTTER_COUNT = 0x003A
    SONY_EXPOSURE_TIME = 0x0046
    SONY_F_NUMBER = 0x0048
    RELEASE_MODE_2 = 0x006D
    INTERNAL_SERIAL_NUMBER = 0x0088
    LENS_MOUNT = 0x0105
    LENS_FORMAT = 0x0106
    LENS_TYPE_2 = 0x0107
    DISTORTION_CORR_PARAMS_PRESENT = 0x010B
    APS_C_SIZE_CAPTURE = 0x0114
    LENS_SPEC_FEATURES = 0x0116
    SHUTTER_COUNT_3 = 0x019F


# Kodak: plaintext fixed-offset record; ids are byte offsets after the 8-byte header

KODAK_MAKERNOTE = TagSpace(Manufacturer.KODAK, 'Makernote', 0, size=0x80)


class KodakMakernote(IntEnum):
    KODAK_MODEL = 0
    QUALITY = 9
    BURST_MODE = 10
    IMAGE_WIDTH = 12
    IMAGE_HEIGHT = 14
    YEAR_CREATED = 16
    MONTH_DAY_CREATED = 18
    TIME_CREATED = 20
    BURST_MODE_2 = 24
    SHUTTER_MODE = 27
    METERING_MODE = 28
    SEQUENCE_NUMBER = 29
    F_NUMBER = 30
    EXPOSURE_TIME = 32
    EXPOSURE_COMPENSATION = 36
    FOCUS_MODE = 56
    WHITE_BALANCE = 64
    FLASH_MODE = 92
    FLASH_FIRED = 93
    ISO_SETTING = 94
    ISO = 96
    TOTAL_ZOOM = 98
    DATE_TIME_STAMP = 100
    COLOR_MODE = 102
    DIGITAL_ZOOM = 104
    SHARPNESS = 107
