# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Decoder configuration

Copyright 2025 DNAi inc.
"""

import logging
from typing import Any, Dict, Mapping

from dnmakernote.byte_reader import VALID_BYTE_ORDERS
from dnmakernote.tag_values import ElementType


class DecoderConfig:
    """
    Configuration shared by the record decoders.

    Byte orders default to what the cameras write: Olympus camera
    settings are Motorola order regardless of the enclosing TIFF, Sony
    enciphered records are Intel order.
    """

    def __init__(self):
        """Initialize with default settings."""
        # Level used when a field is skipped or a record is abandoned
        self.error_log_level: int = logging.DEBUG

        self.olympus_byte_order: str = '>'
        self.sony_byte_order: str = '<'

        # AF area positions are signed offsets from the image centre
        self.af_position_type: ElementType = ElementType.INT16

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> 'DecoderConfig':
        """
        Build a configuration from a mapping of overrides.

        Args:
            values: Attribute names and values; unspecified attributes keep defaults

        Returns:
            DecoderConfig instance

        Raises:
            ValueError: If a key is unknown or a value is invalid
        """
        config = cls()
        known = set(vars(config))
        for key, value in values.items():
            if key not in known:
                raise ValueError(f"Unknown decoder setting: {key}")
            setattr(config, key, value)
        config.validate()
        return config

    def validate(self) -> None:
        for name in ('olympus_byte_order', 'sony_byte_order'):
            if getattr(self, name) not in VALID_BYTE_ORDERS:
                raise ValueError(f"{name} must be '<' or '>', got {getattr(self, name)!r}")
        if not isinstance(self.af_position_type, ElementType) or not self.af_position_type.is_integer:
            raise ValueError("af_position_type must be an integer ElementType")
        if not isinstance(self.error_log_level, int):
            raise ValueError("error_log_level must be a logging level")

    def to_dict(self) -> Dict[str, Any]:
        return dict(vars(self))
