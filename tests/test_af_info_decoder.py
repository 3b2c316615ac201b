"""
Unit tests for SequentialVariableRecordDecoder using the Canon AFInfo layout.
"""

import logging

import pytest

from dnmakernote.af_info_decoder import SequentialVariableRecordDecoder, bitmask_width, points_width
from dnmakernote.config import DecoderConfig
from dnmakernote.tag_spaces import CANON_AF_INFO, CanonAFInfo
from dnmakernote.tag_values import ElementType

HEADER = [5, 5, 3000, 2000, 3000, 2000, 100, 80]
X_POSITIONS = [-500, -250, 0, 250, 500]
Y_POSITIONS = [0, 10, -10, 20, -20]


def tag(field):
    return CANON_AF_INFO.tag_id(field)


def make_decoder(config=None, element_type=ElementType.INT16):
    return SequentialVariableRecordDecoder(
        CANON_AF_INFO,
        {
            CanonAFInfo.AF_AREA_X_POSITIONS: points_width,
            CanonAFInfo.AF_AREA_Y_POSITIONS: points_width,
            CanonAFInfo.AF_POINTS_IN_FOCUS: bitmask_width,
        },
        element_type=element_type,
        config=config,
    )


class TestWidthFunctions:
    """Test suite for bulk field widths"""

    def test_points_width(self):
        assert points_width(9) == 9

    @pytest.mark.parametrize("count,expected", [
        (0, 0), (1, 1), (5, 1), (16, 1), (17, 2), (45, 3), (53, 4),
    ])
    def test_bitmask_width_is_ceiling(self, count, expected):
        """Test that one 16-bit word holds sixteen points"""
        assert bitmask_width(count) == expected


class TestAFInfoDecode:
    """Test suite for complete records"""

    def test_five_points(self, directory):
        """Test that X and Y each hold exactly numPoints values"""
        values = HEADER + X_POSITIONS + Y_POSITIONS + [0b00101] + [2, 0]
        make_decoder().decode(directory, 0x0012, values)

        assert not directory.has_errors()
        assert directory.get_int(tag(CanonAFInfo.NUM_AF_POINTS)) == 5
        assert directory.get_int(tag(CanonAFInfo.AF_AREA_HEIGHT)) == 80
        assert directory.get_array(tag(CanonAFInfo.AF_AREA_X_POSITIONS), ElementType.INT16) == tuple(X_POSITIONS)
        assert directory.get_array(tag(CanonAFInfo.AF_AREA_Y_POSITIONS), ElementType.INT16) == tuple(Y_POSITIONS)
        assert directory.get_array(tag(CanonAFInfo.AF_POINTS_IN_FOCUS)) == (0b00101,)
        assert directory.get_int(tag(CanonAFInfo.PRIMARY_AF_POINT_1)) == 2
        assert directory.get_int(tag(CanonAFInfo.PRIMARY_AF_POINT_2)) == 0
        assert not directory.contains(0x0012)

    def test_positions_are_narrowed(self, directory):
        """Test that unsigned 16-bit input is stored as signed offsets"""
        values = HEADER + [0xFFFF, 0xFE0C, 0, 1, 2] + Y_POSITIONS + [0]
        make_decoder().decode(directory, 0x0012, values)

        assert directory.get_array(tag(CanonAFInfo.AF_AREA_X_POSITIONS)) == (-1, -500, 0, 1, 2)

    def test_seventeen_points_use_two_focus_words(self, directory):
        """Test that points in focus spans ceil(n / 16) words"""
        count = 17
        header = [count] + HEADER[1:]
        values = header + list(range(count)) + list(range(count)) + [0xFFFF, 0x0001] + [3]
        make_decoder().decode(directory, 0x0012, values)

        assert not directory.has_errors()
        assert len(directory.get_array(tag(CanonAFInfo.AF_AREA_X_POSITIONS))) == count
        assert directory.get_array(tag(CanonAFInfo.AF_POINTS_IN_FOCUS)) == (-1, 1)
        assert directory.get_int(tag(CanonAFInfo.PRIMARY_AF_POINT_1)) == 3
        assert not directory.contains(tag(CanonAFInfo.PRIMARY_AF_POINT_2))

    def test_zero_points_write_empty_arrays(self, directory):
        """Test that a zero count leaves the cursor in place"""
        values = [0, 0, 1, 2, 3, 4, 5, 6, 7, 9]
        make_decoder().decode(directory, 0x0012, values)

        assert directory.get_array(tag(CanonAFInfo.AF_AREA_X_POSITIONS)) == ()
        assert directory.get_array(tag(CanonAFInfo.AF_AREA_Y_POSITIONS)) == ()
        assert directory.get_array(tag(CanonAFInfo.AF_POINTS_IN_FOCUS)) == ()
        assert directory.get_int(tag(CanonAFInfo.PRIMARY_AF_POINT_1)) == 7
        assert directory.get_int(tag(CanonAFInfo.PRIMARY_AF_POINT_2)) == 9

    def test_configured_element_type(self, directory):
        """Test that bulk fields use the decoder's element type"""
        values = HEADER + [0xFFFF] * 5 + Y_POSITIONS + [0]
        make_decoder(element_type=ElementType.UINT16).decode(directory, 0x0012, values)

        assert directory.get_array(tag(CanonAFInfo.AF_AREA_X_POSITIONS), ElementType.UINT16) == (0xFFFF,) * 5


class TestAFInfoMalformed:
    """Test suite for records that cannot be fully decoded"""

    def test_truncated_bulk_field(self, directory):
        """Test that a bulk field past the end is skipped with an error"""
        values = HEADER + [1, 2, 3]
        make_decoder().decode(directory, 0x0012, values)

        for field in range(8):
            assert directory.contains(tag(field))
        assert not directory.contains(tag(CanonAFInfo.AF_AREA_X_POSITIONS))
        assert directory.error_count() == 1
        assert "AFInfo" in directory.errors[0]

    def test_truncated_second_bulk_field(self, directory):
        """Test that fields before the truncation are kept"""
        values = HEADER + X_POSITIONS + [1, 2]
        make_decoder().decode(directory, 0x0012, values)

        assert directory.get_array(tag(CanonAFInfo.AF_AREA_X_POSITIONS)) == tuple(X_POSITIONS)
        assert not directory.contains(tag(CanonAFInfo.AF_AREA_Y_POSITIONS))
        assert directory.error_count() == 1

    def test_negative_count(self, directory):
        """Test that a negative count stops at the first bulk field"""
        values = [-1, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
        make_decoder().decode(directory, 0x0012, values)

        assert directory.get_int(tag(CanonAFInfo.NUM_AF_POINTS)) == -1
        assert len(directory) == 8
        assert directory.error_count() == 1
        assert "negative" in directory.errors[0]

    def test_empty_record(self, directory):
        """Test that an empty array records an error and writes nothing"""
        make_decoder().decode(directory, 0x0012, [])

        assert directory.is_empty()
        assert directory.error_count() == 1

    def test_bytes_stored_unsplit(self, directory):
        """Test that a non-integer value is kept under the source tag"""
        make_decoder().decode(directory, 0x0012, b"\x05\x00")

        assert directory.get_bytes(0x0012) == b"\x05\x00"
        assert not directory.has_errors()

    def test_none_stored_unsplit(self, directory):
        """Test that a missing value is kept without raising"""
        make_decoder().decode(directory, 0x0012, None)

        assert directory.contains(0x0012)
        assert directory.get_object(0x0012) is None
        assert not directory.has_errors()

    def test_errors_logged_at_configured_level(self, directory, caplog):
        """Test that skipped fields are logged at the configured level"""
        config = DecoderConfig.from_dict({'error_log_level': logging.WARNING})
        with caplog.at_level(logging.WARNING, logger="dnmakernote.af_info_decoder"):
            make_decoder(config).decode(directory, 0x0012, HEADER + [1])

        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.WARNING
