"""Domain models used across application layer boundaries."""

from .clock import Clock, FixedClock, SystemClock
from .formatting import (
    domain_format_iso_timestamp,
    domain_format_locale_timestamp,
    domain_format_status_label,
    domain_truncate_identifier,
)
from .models import MessageKind, OutputDocument, ProofRecord

__all__ = [
    "Clock",
    "FixedClock",
    "MessageKind",
    "OutputDocument",
    "ProofRecord",
    "SystemClock",
    "domain_format_iso_timestamp",
    "domain_format_locale_timestamp",
    "domain_format_status_label",
    "domain_truncate_identifier",
]
