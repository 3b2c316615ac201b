"""
Unit tests for Sony Tag9050b decoding.
"""

import pytest

from dnmakernote.ciphered_record import SonyCipher
from dnmakernote.vendor_sony import TAG_9050, TAG_9050B_FIELDS, Sony9050bDecoder
from dnmakernote.tag_spaces import SONY_TAG_9050B, SonyTag9050b
from dnmakernote.tag_values import ElementType


@pytest.fixture
def decoder():
    return Sony9050bDecoder()


class TestSony9050b:
    """Test suite for a complete Tag9050b block"""

    def test_sample_block(self, directory, decoder, sony_plaintext):
        """Test every field of a known plaintext"""
        decoder.decode(directory, TAG_9050, SonyCipher.encipher(sony_plaintext))

        assert not directory.has_errors()
        assert directory.get_array(SonyTag9050b.SHUTTER, ElementType.UINT16) == (100, 200, 300)
        assert directory.get_int(SonyTag9050b.FLASH_STATUS) == 1
        assert directory.get_long(SonyTag9050b.SHUTTER_COUNT) == 123456
        assert directory.get_float(SonyTag9050b.SONY_EXPOSURE_TIME) == pytest.approx(1.0)
        assert directory.get_float(SonyTag9050b.SONY_F_NUMBER) == pytest.approx(4.0)
        assert directory.get_int(SonyTag9050b.RELEASE_MODE_2) == 2
        assert directory.get_array(SonyTag9050b.INTERNAL_SERIAL_NUMBER) == (0x01, 0x23, 0x45, 0x67, 0x89, 0xAB)
        assert directory.get_int(SonyTag9050b.LENS_MOUNT) == 1
        assert directory.get_int(SonyTag9050b.LENS_FORMAT) == 2
        assert directory.get_int(SonyTag9050b.LENS_TYPE_2) == 32790
        assert directory.get_int(SonyTag9050b.DISTORTION_CORR_PARAMS_PRESENT) == 1
        assert directory.get_int(SonyTag9050b.APS_C_SIZE_CAPTURE) == 0
        assert directory.get_bytes(SonyTag9050b.LENS_SPEC_FEATURES) == b"\x00\x31"
        assert directory.get_long(SonyTag9050b.SHUTTER_COUNT_3) == 98765
        assert len(directory) == len(TAG_9050B_FIELDS)

    def test_tag_ids_are_offsets(self):
        """Test that each field is stored under its byte offset"""
        for field in TAG_9050B_FIELDS:
            assert field.tag_id == field.offset
            assert field.tag_id in SONY_TAG_9050B

    def test_zero_exposure_code(self, directory, decoder):
        """Test that an unset exposure time reads as 0.0"""
        decoder.decode(directory, TAG_9050, SonyCipher.encipher(bytes(0x200)))
        assert directory.get_float(SonyTag9050b.SONY_EXPOSURE_TIME) == 0.0

    def test_input_not_mutated(self, directory, decoder, sony_plaintext):
        """Test that the caller's buffer is left enciphered"""
        data = bytearray(SonyCipher.encipher(sony_plaintext))
        before = bytes(data)
        decoder.decode(directory, TAG_9050, data)
        assert bytes(data) == before

    def test_truncated_block(self, directory, decoder, sony_plaintext):
        """Test that fields inside a short block are still decoded"""
        decoder.decode(directory, TAG_9050, SonyCipher.encipher(sony_plaintext[:0x50]))

        assert directory.get_array(SonyTag9050b.SHUTTER) == (100, 200, 300)
        assert directory.get_int(SonyTag9050b.FLASH_STATUS) == 1
        assert directory.get_long(SonyTag9050b.SHUTTER_COUNT) == 123456
        assert directory.get_float(SonyTag9050b.SONY_EXPOSURE_TIME) == pytest.approx(1.0)
        assert directory.get_float(SonyTag9050b.SONY_F_NUMBER) == pytest.approx(4.0)
        assert len(directory) == 5
        assert directory.error_count() == len(TAG_9050B_FIELDS) - 5

    def test_empty_block(self, directory, decoder):
        """Test that an empty block records one error per field"""
        decoder.decode(directory, TAG_9050, b"")
        assert directory.is_empty()
        assert directory.error_count() == len(TAG_9050B_FIELDS)

    def test_non_buffer_stored_unsplit(self, directory, decoder):
        """Test that a value other than bytes is kept under the source tag"""
        decoder.decode(directory, TAG_9050, [1, 2, 3])
        assert directory.get_array(TAG_9050) == (1, 2, 3)
