# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Scalar value codecs

Stateless conversions from the integer codes cameras store to physical
quantities: bit flags, EV fractions, APEX power laws and value/min/max
triples. Decoders store the full-precision results; rounding helpers at
the end of the module are for the formatting layer only.

Copyright 2025 DNAi inc.
"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import List, NamedTuple, Optional, Sequence, Tuple, Union

# A bit label: None (ignored), a label emitted only when the bit is set,
# or a (clear label, set label) pair
BitLabel = Optional[Union[str, Tuple[str, str]]]


def decode_bit_flags(value: int, labels: Sequence[BitLabel]) -> List[str]:
    """
    Decompose an integer into bit labels, least significant bit first.

    Bits are independent: each one is tested as (value >> k) & 1.

    Args:
        value: Flag word
        labels: Label for bit k at index k

    Returns:
        Active labels in bit order
    """
    parts = []
    for bit_index, label in enumerate(labels):
        if label is None:
            continue
        is_set = (value >> bit_index) & 1 == 1
        if isinstance(label, tuple):
            parts.append(label[1] if is_set else label[0])
        elif is_set:
            parts.append(label)
    return parts


def decode_ev_modulo(value: int) -> float:
    """
    Decode an EV stored in 1/32 steps with thirds special-cased.

    The low five bits are the fraction. Cameras write 0x0C and 0x14 for
    1/3 and 2/3 of a stop, which are not exact multiples of 1/32.

    Args:
        value: Signed EV code

    Returns:
        EV as a float
    """
    sign = 1
    if value < 0:
        sign = -1
        value = -value
    frac = value & 0x1F
    base = value & ~0x1F
    if frac == 0x0C:
        frac = 0x20 / 3
    elif frac == 0x14:
        frac = 0x40 / 3
    return sign * (base + frac) / 0x20


def decode_flash_bias(value: int) -> float:
    """
    Decode Canon's FocalLength flash bias.

    Values above 0xF000 are negative 16-bit codes. Steps are plain
    1/32 EV, so thirds come out as 0.375 and 0.625.

    Args:
        value: Unsigned 16-bit code

    Returns:
        Flash bias in EV
    """
    if value > 0xF000:
        return -((0xFFFF - value) + 1) / 32.0
    return value / 32.0


class BoundedValue(NamedTuple):
    """A setting together with the range the camera allows for it."""
    value: int
    minimum: int
    maximum: int


def decode_min_max(values: Optional[Sequence[int]]) -> Optional[BoundedValue]:
    """
    Decode a [value, min, max] triple.

    Args:
        values: Array read from the record

    Returns:
        BoundedValue, or None if fewer than three elements are present
    """
    if values is None or len(values) < 3:
        return None
    return BoundedValue(values[0], values[1], values[2])


def decode_ev_triple(values: Optional[Sequence[int]]) -> Optional[float]:
    """
    Decode an EV stored as a*b/c (Nikon program shift and similar).

    Args:
        values: At least three integers a, b, c

    Returns:
        EV, or None if fewer than three values are present or c is zero
    """
    if values is None or len(values) < 3 or values[2] == 0:
        return None
    return values[0] * values[1] / values[2]


def f_number_from_apex(code: int) -> float:
    """Aperture from a code in 1/256 stop units: sqrt(2) ** (code / 256)."""
    return math.pow(math.sqrt(2.0), code / 256.0)


def iso_from_apex(code: int) -> float:
    """ISO speed from an APEX film speed code: 2 ** (code/8 - 1) * 3.125."""
    return math.pow(2.0, code / 8.0 - 1) * 3.125


def shutter_from_apex(code: int) -> float:
    """Exposure time in seconds from an APEX time code: 2 ** ((49 - code) / 8)."""
    return math.pow(2.0, (49 - code) / 8.0)


def aperture_from_apex(code: int) -> float:
    """F-stop from an APEX aperture code: 2 ** (code/16 - 0.5)."""
    return math.pow(2.0, code / 16.0 - 0.5)


def sony_exposure_time(code: int) -> float:
    """
    Exposure time in seconds from a Sony 1/256 stop code.

    The exponent uses float division. metadata-extractor divides the code
    by 256 as an integer, so its values step in whole stops, and it has
    no zero case (code 0 gives 65536 there).

    Args:
        code: Unsigned 16-bit code; 0 means no exposure time was recorded

    Returns:
        2 ** (16 - code / 256), or 0.0 for code 0
    """
    if code == 0:
        return 0.0
    return math.pow(2.0, 16 - code / 256.0)


def sony_f_number(code: int) -> float:
    """F-number from a Sony 1/256 stop code: 2 ** ((code/256 - 16) / 2)."""
    return math.pow(2.0, (code / 256.0 - 16) / 2)


def round_half_up(value: float, places: int) -> float:
    """
    Round to a fixed number of decimal places, halves away from zero.

    Args:
        value: Value to round
        places: Decimal places to keep

    Returns:
        Rounded value
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_significant(value: float, digits: int) -> float:
    """
    Round to a number of significant digits, halves away from zero.

    Args:
        value: Value to round
        digits: Significant digits to keep (at least 1)

    Returns:
        Rounded value; zero and non-finite values are returned unchanged
    """
    if value == 0 or not math.isfinite(value):
        return value
    exponent = math.floor(math.log10(abs(value)))
    return round_half_up(value, digits - 1 - exponent)
