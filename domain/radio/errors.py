"""Radio Bounded Context - Error Hierarchy.

Custom exceptions for frequency construction, parsing and decoding.
Each error renders a fixed message; details live on attributes.
"""

from __future__ import annotations


class RadioFrequencyError(Exception):
    """Base error for radio frequency operations."""

    message = "Radio frequency error"

    def __str__(self) -> str:
        return self.message


class InvalidFrequencyError(RadioFrequencyError):
    """Left part outside the airband or right part not a valid channel code.

    Attributes:
        left: The offending left (MHz) part
        right: The offending right (channel) part
    """

    message = "Invalid frequency"

    def __init__(self, left: object = None, right: object = None) -> None:
        self.left = left
        self.right = right
        super().__init__(left, right)


class NotEnoughPartsError(RadioFrequencyError):
    """Text held fewer than two dot-separated segments."""

    message = "Not enough parts"


class FrequencyParseError(RadioFrequencyError):
    """A text segment was not a valid unsigned 16-bit integer.

    Attributes:
        cause: The underlying ValueError raised while parsing the segment
    """

    message = "Int parse error"

    def __init__(self, cause: ValueError) -> None:
        self.cause = cause
        super().__init__(cause)


class FrequencyDecodeError(RadioFrequencyError):
    """Structured document could not be decoded into a RadioFrequency."""

    message = "Invalid frequency document"
