"""Infrastructure adapters for the radio bounded context.

Provides structured (JSON) encoding of RadioFrequency.
"""

from .json_adapter import JsonFrequencyAdapter

__all__ = ["JsonFrequencyAdapter"]
