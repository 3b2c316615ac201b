# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Rational value type

TIFF and Exif store non-integer quantities as a numerator/denominator
pair. Cameras write unreduced pairs and use a zero denominator to mean
"not applicable", so this type keeps the pair exactly as read instead of
normalizing it the way fractions.Fraction would.

Copyright 2025 DNAi inc.
"""

import math
from typing import Union


def _gcd(a: int, b: int) -> int:
    a = abs(a)
    b = abs(b)
    while a != 0 and b != 0:
        if a > b:
            a %= b
        else:
            b %= a
    return b if a == 0 else a


class Rational:
    """
    Immutable numerator/denominator pair.

    Equality compares numeric value (1/2 == 2/4); use equals_exact()
    to compare the stored pair.
    """

    __slots__ = ('_numerator', '_denominator')

    def __init__(self, numerator: int, denominator: int):
        """
        Initialize a rational.

        Args:
            numerator: Numerator as read from the record
            denominator: Denominator as read from the record (may be 0)
        """
        self._numerator = int(numerator)
        self._denominator = int(denominator)

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    def double_value(self) -> float:
        """
        Get the value as a float.

        Returns:
            0.0 when the numerator is zero, a signed infinity when only the
            denominator is zero, otherwise numerator / denominator
        """
        if self._numerator == 0:
            return 0.0
        if self._denominator == 0:
            return math.copysign(math.inf, self._numerator)
        return self._numerator / self._denominator

    def int_value(self) -> int:
        """Get the value truncated towards zero (0 for a zero denominator)."""
        if self._denominator == 0:
            return 0
        value = self.double_value()
        return int(value)

    def reciprocal(self) -> 'Rational':
        return Rational(self._denominator, self._numerator)

    def is_integer(self) -> bool:
        return (
            self._denominator == 1
            or (self._denominator != 0 and self._numerator % self._denominator == 0)
            or (self._denominator == 0 and self._numerator == 0)
        )

    def is_zero(self) -> bool:
        return self._numerator == 0 or self._denominator == 0

    def simplified(self) -> 'Rational':
        """
        Get this rational reduced by the greatest common divisor.

        Returns:
            New Rational; 0/0 is returned unchanged
        """
        gcd = _gcd(self._numerator, self._denominator)
        if gcd == 0:
            return Rational(self._numerator, self._denominator)
        return Rational(self._numerator // gcd, self._denominator // gcd)

    def equals_exact(self, other: 'Rational') -> bool:
        return self._numerator == other._numerator and self._denominator == other._denominator

    def __mul__(self, other: Union['Rational', int]) -> 'Rational':
        if isinstance(other, int):
            return Rational(self._numerator * other, self._denominator)
        if isinstance(other, Rational):
            return Rational(self._numerator * other._numerator, self._denominator * other._denominator)
        return NotImplemented

    __rmul__ = __mul__

    def __add__(self, other: Union['Rational', int]) -> 'Rational':
        if isinstance(other, int):
            other = Rational(other, 1)
        if isinstance(other, Rational):
            return Rational(
                self._numerator * other._denominator + other._numerator * self._denominator,
                self._denominator * other._denominator,
            )
        return NotImplemented

    __radd__ = __add__

    def __float__(self) -> float:
        return self.double_value()

    def __int__(self) -> int:
        return self.int_value()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.double_value() == other.double_value()

    def __lt__(self, other: 'Rational') -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.double_value() < other.double_value()

    def __le__(self, other: 'Rational') -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.double_value() <= other.double_value()

    def __hash__(self) -> int:
        return hash(self.double_value())

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"

    def __str__(self) -> str:
        return f"{self._numerator}/{self._denominator}"
