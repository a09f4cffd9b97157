"""Domain Port(s) for structured frequency encoding.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete serialization here.
"""

from __future__ import annotations

from typing import Protocol

from .value_objects import RadioFrequency


class FrequencyCodec(Protocol):
    """Port for encoding frequencies to, and decoding them from, documents.

    Implementations live in infrastructure (e.g., JSON adapter).
    """

    def encode(self, frequency: RadioFrequency) -> str:
        """Encode one frequency as a document."""
        ...

    def decode(self, payload: str | bytes) -> RadioFrequency:
        """Decode one document, revalidating every invariant."""
        ...
