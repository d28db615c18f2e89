"""Core business logic modules."""

from srtshift.core.shifter import parse_offset
from srtshift.core.splitter import divide_text
from srtshift.core.subtitle import Subtitle, SubtitleEntry
from srtshift.core.timecode import SRTParseError, TimeField, TimeSpan, Timecode

__all__ = [
    "SRTParseError",
    "Subtitle",
    "SubtitleEntry",
    "TimeField",
    "TimeSpan",
    "Timecode",
    "divide_text",
    "parse_offset",
]
