"""SRT format parser and serializer."""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import TYPE_CHECKING

import structlog

from srtshift.core.subtitle import Subtitle, SubtitleEntry
from srtshift.core.timecode import TIMESPAN_SAMPLE, TimeSpan, is_timespan
from srtshift.utils.config import get_settings

if TYPE_CHECKING:
    from pathlib import Path

logger = structlog.get_logger()

# Trailing number + time span pair that flushes the last real entry
_SENTINEL_LINES = ("99999", TIMESPAN_SAMPLE)

# previous number, previous span, >= 1 text line, next number, next span
_MIN_FLUSH_LINES = 5


@dataclass(frozen=True)
class _ScanState:
    """Accumulator threaded through the line scan."""

    buffer: tuple[str, ...] = ()
    entries: tuple[SubtitleEntry, ...] = ()


def _scan_line(state: _ScanState, line: str) -> _ScanState:
    """Feed one line into the scan, flushing a finished entry if possible."""
    buffer = (*state.buffer, line)
    if not is_timespan(line):
        return _ScanState(buffer=buffer, entries=state.entries)

    candidate = tuple(s for s in buffer if s)
    spans = [s for s in candidate if is_timespan(s)]
    if len(candidate) < _MIN_FLUSH_LINES or len(spans) < 2:
        return _ScanState(buffer=buffer, entries=state.entries)

    # candidate[0] is the number, candidate[1] the span of a well-formed entry
    entry = SubtitleEntry(
        index=len(state.entries) + 1,
        span=TimeSpan.parse(spans[0]),
        text="".join(f"{s}\n" for s in candidate[2:-2]),
    )
    return _ScanState(buffer=candidate[-2:], entries=(*state.entries, entry))


def parse_srt(content: str) -> Subtitle:
    """Parse SRT format string into Subtitle object.

    Args:
        content: SRT format string content

    Returns:
        Subtitle object containing parsed entries, renumbered from 1

    Notes:
        - Parsing never fails; lines that are not valid time spans are
          treated as text, and content with no time span yields an empty
          Subtitle
        - Blank lines are dropped, including blank lines inside text
        - An entry with no text lines absorbs the number and timing lines of
          the entry after it as its own text, so the two are emitted as one
    """
    lines = [*content.splitlines(), *_SENTINEL_LINES]
    state = reduce(_scan_line, lines, _ScanState())

    logger.debug("srt_parsed", lines=len(lines) - 2, entries=len(state.entries))
    return Subtitle(state.entries)


def serialize_entry(entry: SubtitleEntry) -> str:
    """Serialize a single entry, including the trailing blank line."""
    return f"{entry.index}\n{entry.span}\n{entry.text}\n"


def serialize_srt(subtitle: Subtitle) -> str:
    """Serialize Subtitle object to SRT format string.

    Args:
        subtitle: Subtitle object to serialize

    Returns:
        SRT format string; empty string for an empty Subtitle
    """
    return "".join(serialize_entry(entry) for entry in subtitle)


def load_srt(path: Path, *, encoding: str | None = None) -> Subtitle:
    """Read and parse an SRT file.

    Args:
        path: SRT file to read
        encoding: Text encoding, defaults to the configured encoding

    Returns:
        Parsed Subtitle

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid in the given encoding
    """
    encoding = encoding or get_settings().encoding
    content = path.read_text(encoding=encoding)
    subtitle = parse_srt(content)
    logger.info("srt_loaded", path=str(path), entries=len(subtitle))
    return subtitle


def save_srt(path: Path, subtitle: Subtitle, *, encoding: str | None = None) -> Path:
    """Serialize and write a Subtitle to an SRT file.

    The content is written to a temporary sibling file first and then moved
    over ``path``, so a failed write never leaves a partial file behind.

    Args:
        path: Destination file
        subtitle: Subtitle to write
        encoding: Text encoding, defaults to the configured encoding

    Returns:
        Path to the written file

    Raises:
        OSError: If the file cannot be written
    """
    encoding = encoding or get_settings().encoding
    tmp_path = path.with_name(f".{path.name}.tmp")
    try:
        tmp_path.write_text(serialize_srt(subtitle), encoding=encoding)
        tmp_path.replace(path)
    except (OSError, UnicodeEncodeError):
        tmp_path.unlink(missing_ok=True)
        raise

    logger.info("srt_saved", path=str(path), entries=len(subtitle))
    return path
