"""srtshift: shift and split SubRip (.srt) subtitle files."""

from srtshift.core import (
    SRTParseError,
    Subtitle,
    SubtitleEntry,
    TimeSpan,
    Timecode,
    parse_offset,
)
from srtshift.formats import load_srt, parse_srt, save_srt, serialize_srt

__version__ = "1.2.0"

__all__ = [
    "SRTParseError",
    "Subtitle",
    "SubtitleEntry",
    "TimeSpan",
    "Timecode",
    "__version__",
    "load_srt",
    "parse_offset",
    "parse_srt",
    "save_srt",
    "serialize_srt",
]
