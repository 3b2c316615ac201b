# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
DNMakerNote - Pure Python maker note record decoding

Decodes manufacturer-specific maker note records (already located by a
TIFF/IFD reader) into typed synthetic tags. Malformed records never raise;
problems are recorded in the directory's error list.

Copyright 2025 DNAi inc.
"""

__version__ = "0.1.0"
__author__ = "DNAi inc."

from dnmakernote.exceptions import DNMakerNoteError, MetadataReadError, BufferBoundsError
from dnmakernote.rational import Rational
from dnmakernote.tag_values import ElementType, TagValue, TagValueKind
from dnmakernote.directory import Directory
from dnmakernote.tag_spaces import Manufacturer, TagSpace
from dnmakernote.config import DecoderConfig
from dnmakernote.array_splitter import FixedArraySplitter
from dnmakernote.af_info_decoder import SequentialVariableRecordDecoder
from dnmakernote.ciphered_record import CipheredFixedRecordDecoder, FieldSpec, SonyCipher
from dnmakernote.vendor_canon import CanonMakerNoteDecoder
from dnmakernote.vendor_olympus import OlympusMakerNoteDecoder
from dnmakernote.vendor_kodak import KodakMakerNoteDecoder
from dnmakernote.vendor_sony import Sony9050bDecoder
from dnmakernote.registry import MakerNoteRegistry, build_default_registry

__all__ = [
    "DNMakerNoteError",
    "MetadataReadError",
    "BufferBoundsError",
    "Rational",
    "ElementType",
    "TagValue",
    "TagValueKind",
    "Directory",
    "Manufacturer",
    "TagSpace",
    "DecoderConfig",
    "FixedArraySplitter",
    "SequentialVariableRecordDecoder",
    "CipheredFixedRecordDecoder",
    "FieldSpec",
    "SonyCipher",
    "CanonMakerNoteDecoder",
    "OlympusMakerNoteDecoder",
    "KodakMakerNoteDecoder",
    "Sony9050bDecoder",
    "MakerNoteRegistry",
    "build_default_registry",
]
