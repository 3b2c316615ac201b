"""
Unit tests for the scalar value codecs.
"""

import math

import pytest

from dnmakernote.scalar_codecs import (
    BoundedValue,
    aperture_from_apex,
    decode_bit_flags,
    decode_ev_modulo,
    decode_ev_triple,
    decode_flash_bias,
    decode_min_max,
    f_number_from_apex,
    iso_from_apex,
    round_half_up,
    round_significant,
    shutter_from_apex,
    sony_exposure_time,
    sony_f_number,
)


class TestBitFlags:
    """Test suite for bit flag decomposition"""

    def test_set_bits_in_order(self):
        """Test that bits {0, 2} give exactly their two labels"""
        labels = ["Flash", "Red-eye", "Fill", "Slow sync", "Rear curtain", "Wireless"]
        assert decode_bit_flags(0b101, labels) == ["Flash", "Fill"]

    def test_pair_labels(self):
        """Test that pair labels emit the clear or set text"""
        labels = [("Off", "On"), None, ("Manual", "Auto")]
        assert decode_bit_flags(0b100, labels) == ["Off", "Auto"]

    def test_unlabelled_bits_ignored(self):
        """Test that bits without a label are skipped"""
        assert decode_bit_flags(0xFF, [None, "B"]) == ["B"]

    def test_zero_value(self):
        """Test that no bits set gives no single labels"""
        assert decode_bit_flags(0, ["A", "B"]) == []


class TestEvCodecs:
    """Test suite for EV decoding"""

    @pytest.mark.parametrize("code,expected", [
        (0x00, 0.0),
        (0x0C, 1 / 3),
        (0x10, 0.5),
        (0x14, 2 / 3),
        (0x20, 1.0),
        (-0x10, -0.5),
        (-0x2C, -4 / 3),
        (0x40, 2.0),
    ])
    def test_ev_modulo(self, code, expected):
        """Test 1/32 steps with thirds special-cased"""
        assert decode_ev_modulo(code) == pytest.approx(expected)

    @pytest.mark.parametrize("code,expected", [
        (0xFFC0, -2.0),
        (0x000C, 0.375),
        (0x0014, 0.625),
        (0x0000, 0.0),
        (0x0040, 2.0),
    ])
    def test_flash_bias(self, code, expected):
        """Test Canon flash bias codes"""
        assert decode_flash_bias(code) == expected

    @pytest.mark.parametrize("values,expected", [
        ([0, 1, 3, 0], 0.0),
        ([-105, 1, 12, 0], -8.75),
        ([1, 1, 6], 1 / 6),
    ])
    def test_ev_triple(self, values, expected):
        """Test a*b/c program shift values"""
        assert decode_ev_triple(values) == pytest.approx(expected)

    @pytest.mark.parametrize("values", [[1, 1, 0], [1, 1], None])
    def test_ev_triple_absent(self, values):
        """Test that a zero divisor or short input is absent"""
        assert decode_ev_triple(values) is None


class TestMinMax:
    """Test suite for value/min/max triples"""

    def test_triple(self):
        result = decode_min_max([5, 1, 10])
        assert result == BoundedValue(5, 1, 10)
        assert result.maximum == 10

    def test_short_input(self):
        assert decode_min_max([5, 1]) is None
        assert decode_min_max(None) is None


class TestPowerLaws:
    """Test suite for APEX style conversions"""

    def test_f_number_from_apex(self):
        assert f_number_from_apex(0) == pytest.approx(1.0)
        assert f_number_from_apex(512) == pytest.approx(2.0)

    def test_iso_from_apex(self):
        assert iso_from_apex(56) == pytest.approx(200.0)
        assert iso_from_apex(40) == pytest.approx(50.0)

    def test_shutter_from_apex(self):
        assert shutter_from_apex(49) == pytest.approx(1.0)
        assert shutter_from_apex(57) == pytest.approx(0.5)

    def test_aperture_from_apex(self):
        assert aperture_from_apex(8) == pytest.approx(1.0)
        assert aperture_from_apex(40) == pytest.approx(4.0)

    def test_sony_exposure_time(self):
        """Test that code 0 means no exposure time"""
        assert sony_exposure_time(0) == 0.0
        assert sony_exposure_time(4096) == pytest.approx(1.0)
        assert sony_exposure_time(6144) == pytest.approx(1 / 256)

    def test_sony_f_number(self):
        assert sony_f_number(4096) == pytest.approx(1.0)
        assert sony_f_number(5120) == pytest.approx(4.0)


class TestRounding:
    """Test suite for formatting helpers"""

    @pytest.mark.parametrize("value,places,expected", [
        (2.675, 2, 2.68),
        (-0.125, 2, -0.13),
        (0.5, 0, 1.0),
        (1.0, 3, 1.0),
    ])
    def test_round_half_up(self, value, places, expected):
        """Test that halves round away from zero"""
        assert round_half_up(value, places) == expected

    def test_round_significant(self):
        assert round_significant(0.0123456, 3) == 0.0123
        assert round_significant(1234.5, 2) == 1200.0
        assert round_significant(0.0, 3) == 0.0
        assert math.isinf(round_significant(math.inf, 3))
