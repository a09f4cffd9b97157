"""JSON adapter for FrequencyCodec.

Encodes RadioFrequency values as JSON objects using the value type's field
layout::

    {"left": 120, "right": 905, "is_25_khz_spaced": false}

Lists encode as JSON arrays of such objects. Decoding always goes back through
RadioFrequency validation, so a document cannot smuggle in an out-of-band
frequency or a spacing flag that contradicts its channel code.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import TypeAdapter, ValidationError

from domain.radio.errors import FrequencyDecodeError
from domain.radio.value_objects import RadioFrequency

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)

# Validator for array documents (built once)
_FREQUENCY_LIST = TypeAdapter(list[RadioFrequency])


class JsonFrequencyAdapter:
    """Infrastructure adapter encoding frequencies as JSON documents.

    Parameters
    ----------
    indent: int | None
        Indentation for pretty-printed output. None (default) produces compact
        single-line JSON.
    """

    def __init__(self, indent: int | None = None) -> None:
        if indent is not None and indent < 0:
            raise ValueError(f"indent must be >= 0, got {indent}")
        self.indent = indent

    def encode(self, frequency: RadioFrequency) -> str:
        """Encode one frequency as a JSON object."""
        document = frequency.model_dump_json(indent=self.indent)
        logger.debug("Encoded frequency %s", frequency)
        return document

    def decode(self, payload: str | bytes) -> RadioFrequency:
        """Decode one JSON object into a RadioFrequency.

        Raises:
            FrequencyDecodeError: If the payload is not valid JSON, has wrong
                field types, or breaks a frequency invariant.
        """
        try:
            frequency = RadioFrequency.model_validate_json(payload)
        except ValidationError as exc:
            logger.warning(
                "Rejected frequency document (%d error(s)): %s",
                exc.error_count(),
                exc.errors()[0]["msg"],
            )
            raise FrequencyDecodeError() from exc
        logger.debug("Decoded frequency %s", frequency)
        return frequency

    def encode_many(self, frequencies: Iterable[RadioFrequency]) -> str:
        """Encode frequencies as a JSON array, preserving iteration order."""
        items = list(frequencies)
        document = _FREQUENCY_LIST.dump_json(items, indent=self.indent).decode()
        logger.debug("Encoded %d frequencies", len(items))
        return document

    def decode_many(self, payload: str | bytes) -> list[RadioFrequency]:
        """Decode a JSON array into a list of RadioFrequency.

        All-or-nothing: one invalid element rejects the whole document.

        Raises:
            FrequencyDecodeError: If the payload or any element is invalid.
        """
        try:
            frequencies = _FREQUENCY_LIST.validate_json(payload)
        except ValidationError as exc:
            logger.warning(
                "Rejected frequency list document (%d error(s)): %s",
                exc.error_count(),
                exc.errors()[0]["msg"],
            )
            raise FrequencyDecodeError() from exc
        logger.debug("Decoded %d frequencies", len(frequencies))
        return frequencies
