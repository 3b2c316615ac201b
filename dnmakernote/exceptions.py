# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Exception classes for DNMakerNote

This module defines custom exceptions for the DNMakerNote library.
Decoders never let these escape for malformed input; they are caught
per field and turned into directory error entries.

Copyright 2025 DNAi inc.
"""


class DNMakerNoteError(Exception):
    """
    Base exception for all DNMakerNote errors.

    All DNMakerNote exceptions inherit from this class, allowing
    catch-all error handling for any DNMakerNote-related errors.
    """
    def __init__(self, message: str = ""):
        """
        Initialize the exception with an optional error message.

        Args:
            message: Descriptive error message explaining what went wrong
        """
        self.message = message
        super().__init__(message)


class MetadataReadError(DNMakerNoteError):
    """
    Raised when a maker note record cannot be read.

    This exception is raised when:
    - A record is too short to hold a required field
    - A leading count implies more data than the record holds
    """
    pass


class BufferBoundsError(MetadataReadError):
    """
    Raised when a read would run past the end of a buffer.

    Carries the requested offset and count together with the buffer
    length so callers can log exactly which read failed.
    """
    def __init__(self, offset: int, count: int, length: int):
        """
        Initialize the exception from the failed read.

        Args:
            offset: Requested byte offset
            count: Requested number of bytes
            length: Length of the underlying buffer
        """
        self.offset = offset
        self.count = count
        self.length = length
        if offset < 0:
            message = f"Attempt to read from buffer using a negative index ({offset})"
        else:
            message = (
                f"Attempt to read from beyond end of underlying data source "
                f"(requested index: {offset}, requested count: {count}, max index: {length - 1})"
            )
        super().__init__(message)
