"""Radio Bounded Context - Value Objects.

Immutable data structures representing aviation VHF frequencies.
All validation occurs at construction time via Pydantic.

Text form is ``LLL.RRR``: the MHz part and the channel part, each zero-padded
to at least three digits.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from domain.radio.errors import (
    FrequencyParseError,
    InvalidFrequencyError,
    NotEnoughPartsError,
)

# ---------------------------------------------------------------------------
# Channel Plan Constants
# ---------------------------------------------------------------------------
U16_MAX = 65535

# Civil aviation VHF band, MHz (inclusive)
BAND_MIN_MHZ = 118
BAND_MAX_MHZ = 137

# Valid values of right % 100 across both channel plans
VALID_CHANNELS = frozenset(
    {0, 5, 10, 15, 25, 30, 35, 40, 50, 55, 60, 65, 75, 80, 85, 90}
)
# Subset of VALID_CHANNELS belonging to the 25 kHz plan; the rest are 8.33 kHz
SPACING_25_KHZ_CHANNELS = frozenset({0, 25, 50, 75})

# Optional "+" then ASCII digits only (str.isdigit would admit other scripts)
_U16_PATTERN = re.compile(r"\+?[0-9]+")


def _parse_u16(segment: str) -> int:
    """Parse one text segment as an unsigned 16-bit integer.

    Stricter than int(): no surrounding whitespace, no "-", no "_" separators.

    Raises:
        ValueError: If the segment is empty, holds a non-digit, or overflows.
    """
    if not segment:
        raise ValueError("cannot parse integer from empty string")
    if not _U16_PATTERN.fullmatch(segment):
        raise ValueError(f"invalid digit found in {segment!r}")
    # Drop leading zeros and bound the length; int() refuses very long strings
    digits = segment.lstrip("+").lstrip("0") or "0"
    if len(digits) > len(str(U16_MAX)):
        raise ValueError(f"number too large to fit in 16 bits: {segment!r}")
    value = int(digits)
    if value > U16_MAX:
        raise ValueError(f"number too large to fit in 16 bits: {segment!r}")
    return value


class RadioFrequency(BaseModel):
    """Aviation VHF frequency as a (MHz, channel) pair (Value Object).

    Invariants:
        left in [118, 137]
        right % 100 in VALID_CHANNELS
        is_25_khz_spaced == (right % 100 in SPACING_25_KHZ_CHANNELS)

    is_25_khz_spaced is derived from right. It may be passed explicitly
    (decoding a stored document) but must agree with the derived value.

    Instances order by (left, right, is_25_khz_spaced).
    """

    left: int = Field(ge=0, le=U16_MAX, strict=True)  # MHz part
    right: int = Field(ge=0, le=U16_MAX, strict=True)  # Channel part
    is_25_khz_spaced: bool = Field(default=False, strict=True)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_channel(self) -> "RadioFrequency":
        # Left before right
        if not (BAND_MIN_MHZ <= self.left <= BAND_MAX_MHZ):
            raise ValueError(
                f"left part outside {BAND_MIN_MHZ}-{BAND_MAX_MHZ} MHz: {self.left}"
            )
        # Only the last two digits select the channel
        last_two = self.right % 100
        if last_two not in VALID_CHANNELS:
            raise ValueError(f"right part is not a valid channel code: {self.right}")

        spaced = last_two in SPACING_25_KHZ_CHANNELS
        if "is_25_khz_spaced" in self.model_fields_set:
            if self.is_25_khz_spaced != spaced:
                raise ValueError(
                    f"is_25_khz_spaced={self.is_25_khz_spaced} contradicts "
                    f"channel code {last_two:02d}"
                )
        else:
            object.__setattr__(self, "is_25_khz_spaced", spaced)
            self.model_fields_set.add("is_25_khz_spaced")

        return self

    # -----------------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------------
    @classmethod
    def new(cls, left: int, right: int) -> RadioFrequency:
        """Build a validated frequency from its two parts.

        Raises:
            InvalidFrequencyError: If left is outside the airband or right is
                not a valid channel code. The pydantic error is chained.
        """
        try:
            return cls(left=left, right=right)
        except ValidationError as exc:
            raise InvalidFrequencyError(left, right) from exc

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> RadioFrequency:
        """Copy this frequency, revalidating any updated fields.

        is_25_khz_spaced is re-derived unless the update supplies it.

        Raises:
            InvalidFrequencyError: If the updated parts break an invariant.
        """
        if not update:
            return super().model_copy(deep=deep)
        data = {"left": self.left, "right": self.right, **update}
        try:
            return type(self).model_validate(data)
        except ValidationError as exc:
            raise InvalidFrequencyError(data["left"], data["right"]) from exc

    @classmethod
    def parse(cls, text: str) -> RadioFrequency:
        """Parse ``LLL.RRR`` text.

        Only the first two dot-separated segments are read; anything after a
        second dot is ignored. Leading zeros are accepted.

        Raises:
            NotEnoughPartsError: If a segment is missing.
            FrequencyParseError: If a segment is not an unsigned 16-bit integer.
            InvalidFrequencyError: If the parsed parts break an invariant.
        """
        parts = iter(text.split("."))
        left = cls._next_part(parts)
        right = cls._next_part(parts)
        return cls.new(left, right)

    @staticmethod
    def _next_part(parts: Iterator[str]) -> int:
        segment = next(parts, None)
        if segment is None:
            raise NotEnoughPartsError()
        try:
            return _parse_u16(segment)
        except ValueError as exc:
            raise FrequencyParseError(exc) from exc

    # -----------------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------------
    @property
    def is_8_33_khz_spaced(self) -> bool:
        """True if the channel belongs to the 8.33 kHz plan."""
        return not self.is_25_khz_spaced

    def frequency(self) -> tuple[int, int]:
        """Return (left, right) unchanged."""
        return (self.left, self.right)

    def __str__(self) -> str:
        return f"{self.left:03d}.{self.right:03d}"

    # -----------------------------------------------------------------------
    # Ordering
    # -----------------------------------------------------------------------
    def _sort_key(self) -> tuple[int, int, bool]:
        return (self.left, self.right, self.is_25_khz_spaced)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RadioFrequency):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, RadioFrequency):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, RadioFrequency):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, RadioFrequency):
            return NotImplemented
        return self._sort_key() >= other._sort_key()
