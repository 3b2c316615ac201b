# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Decoder registry

Maps (manufacturer, maker note tag) to the function that decodes that
tag's record. The caller identifies the manufacturer; the registry only
looks up what to run for it.

Copyright 2025 DNAi inc.
"""

import logging
from typing import Any, Callable, Dict, Optional, Tuple

from dnmakernote.config import DecoderConfig
from dnmakernote.directory import Directory
from dnmakernote.tag_spaces import Manufacturer
from dnmakernote import vendor_canon, vendor_kodak, vendor_olympus, vendor_sony

logger = logging.getLogger(__name__)

# (directory, tag_type, raw value) -> None
RecordDecoder = Callable[[Directory, int, Any], None]


class MakerNoteRegistry:
    """
    Registry of record decoders keyed by manufacturer and tag id.
    """

    def __init__(self, config: Optional[DecoderConfig] = None):
        """
        Initialize an empty registry.

        Args:
            config: Decoder configuration passed on to built-in decoders
        """
        self.config = config or DecoderConfig()
        self._decoders: Dict[Tuple[Manufacturer, int], RecordDecoder] = {}

    def register(self, manufacturer: Manufacturer, tag_type: int, decoder: RecordDecoder) -> None:
        """
        Register a decoder, replacing any existing one for the same key.

        Args:
            manufacturer: Manufacturer whose maker note carries the tag
            tag_type: Maker note tag id
            decoder: Callable taking (directory, tag_type, raw value)
        """
        self._decoders[(manufacturer, tag_type)] = decoder

    def lookup(self, manufacturer: Manufacturer, tag_type: int) -> Optional[RecordDecoder]:
        return self._decoders.get((manufacturer, tag_type))

    def is_registered(self, manufacturer: Manufacturer, tag_type: int) -> bool:
        return (manufacturer, tag_type) in self._decoders

    def decode(self, manufacturer: Manufacturer, tag_type: int, raw: Any, directory: Directory) -> None:
        """
        Decode one maker note tag into directory.

        Tags without a registered decoder are stored as-is.

        Args:
            manufacturer: Manufacturer selected by the caller
            tag_type: Maker note tag id
            raw: Value from the IFD reader (byte buffer or integer array)
            directory: Directory owned by this call
        """
        decoder = self.lookup(manufacturer, tag_type)
        if decoder is None:
            directory.set_object(tag_type, raw)
            return
        logger.debug("Decoding %s tag 0x%04X into %s", manufacturer.value, tag_type, directory.name)
        decoder(directory, tag_type, raw)


def build_default_registry(config: Optional[DecoderConfig] = None) -> MakerNoteRegistry:
    """
    Create a registry with the built-in Canon, Kodak, Olympus and Sony decoders.

    Args:
        config: Decoder configuration

    Returns:
        MakerNoteRegistry instance
    """
    registry = MakerNoteRegistry(config)

    canon = vendor_canon.CanonMakerNoteDecoder(registry.config)
    for tag_type in vendor_canon.ARRAY_TAGS:
        registry.register(Manufacturer.CANON, tag_type, canon.decode_array)

    olympus = vendor_olympus.OlympusMakerNoteDecoder(registry.config)
    for tag_type in vendor_olympus.CAMERA_SETTINGS_TAGS:
        registry.register(Manufacturer.OLYMPUS, tag_type, olympus.decode_camera_settings)

    sony = vendor_sony.Sony9050bDecoder(registry.config)
    registry.register(Manufacturer.SONY, vendor_sony.TAG_9050, sony.decode)

    kodak = vendor_kodak.KodakMakerNoteDecoder(registry.config)
    registry.register(Manufacturer.KODAK, vendor_kodak.TAG_MAKERNOTE, kodak.decode)

    return registry
