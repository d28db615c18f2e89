"""Subtitle format handlers."""

from srtshift.formats.srt import (
    load_srt,
    parse_srt,
    save_srt,
    serialize_entry,
    serialize_srt,
)

__all__ = [
    "load_srt",
    "parse_srt",
    "save_srt",
    "serialize_entry",
    "serialize_srt",
]
