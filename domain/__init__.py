"""Airband Frequency Domain Layer.

This package contains the core business logic organized by bounded contexts:
- radio: Aviation VHF frequencies, channel plans, text form
"""

from domain import radio

__all__ = ["radio"]
