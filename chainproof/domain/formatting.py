"""Named presentation formatting helpers shared by mapping and export paths.

Display conventions such as identifier truncation and status case folding live
here so their exact rules stay independently testable.
"""

from __future__ import annotations

from datetime import datetime, timezone

DOMAIN_TRUNCATE_DEFAULT_LENGTH = 10
DOMAIN_TRUNCATE_ELLIPSIS = "..."


def domain_truncate_identifier(value: str, length: int = DOMAIN_TRUNCATE_DEFAULT_LENGTH) -> str:
    """Truncate one identifier for display and append the ellipsis marker.

    The marker is appended unconditionally, also when the value is shorter
    than `length`.

    Args:
        value: Identifier text, typically an address.
        length: Number of leading characters to keep.

    Returns:
        str: Leading characters followed by `...`.

    Raises:
        ValueError: Raised when length is negative.
    """

    if length < 0:
        raise ValueError("length must not be negative")
    return f"{value[:length]}{DOMAIN_TRUNCATE_ELLIPSIS}"


def domain_format_status_label(status: str) -> str:
    """Return the human-readable status label used in document bodies.

    Args:
        status: Free-form verification status.

    Returns:
        str: Upper-cased status.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return status.upper()


def domain_format_iso_timestamp(moment: datetime) -> str:
    """Render one instant as ISO-8601 UTC text with millisecond precision.

    Args:
        moment: Instant to render. Naive values are interpreted as UTC.

    Returns:
        str: Timestamp such as `2024-01-01T00:00:00.000Z`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc_moment = moment.astimezone(timezone.utc)
    return utc_moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def domain_format_locale_timestamp(moment: datetime) -> str:
    """Render one instant as a locale-style display string.

    The instant is rendered in its own timezone using the `M/D/YYYY, h:mm:ss AM`
    convention.

    Args:
        moment: Instant to render, already converted to the display timezone.

    Returns:
        str: Display timestamp such as `1/1/2024, 12:00:00 AM`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    hour_12 = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return (
        f"{moment.month}/{moment.day}/{moment.year}, "
        f"{hour_12}:{moment.minute:02d}:{moment.second:02d} {meridiem}"
    )
