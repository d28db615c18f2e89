"""Resolve a user-supplied shift amount into milliseconds."""

from srtshift.core.timecode import SRTParseError, TimeSpan


def parse_offset(value: str) -> int:
    """Parse a shift amount given as milliseconds or as a time span.

    Args:
        value: Either a signed integer such as "500" or "-1200", or a
            duration string "HH:MM:SS,mmm --> HH:MM:SS,mmm"

    Returns:
        Shift in milliseconds; for a duration string, end minus start

    Raises:
        SRTParseError: If value is neither an integer nor a valid time span

    Examples:
        >>> parse_offset("-250")
        -250
        >>> parse_offset("00:00:01,000 --> 00:00:03,500")
        2500
    """
    if "-->" in value:
        try:
            span = TimeSpan.parse(value.strip())
        except SRTParseError as e:
            raise SRTParseError(f"Invalid offset duration {value!r}: {e}") from e
        return span.duration_ms

    try:
        return int(value.strip())
    except ValueError as e:
        raise SRTParseError(
            f"Invalid offset {value!r}, expected milliseconds or "
            "'HH:MM:SS,mmm --> HH:MM:SS,mmm'"
        ) from e
