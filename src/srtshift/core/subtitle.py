"""Subtitle domain models."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace

from srtshift.core.splitter import divide_text
from srtshift.core.timecode import TimeSpan


@dataclass(frozen=True)
class SubtitleEntry:
    """Single numbered subtitle entry with timing and text.

    ``text`` holds one or more lines, each terminated by a newline.
    """

    index: int
    span: TimeSpan
    text: str

    def offset(self, delta_ms: int) -> SubtitleEntry:
        """Return a copy with the time span shifted by ``delta_ms``."""
        return replace(self, span=self.span.offset(delta_ms))

    def split(self) -> tuple[SubtitleEntry, SubtitleEntry]:
        """Divide the text into two entries sharing index and timing."""
        left, right = divide_text(self.text)
        return replace(self, text=left), replace(self, text=right)

    def __add__(self, delta_ms: int) -> SubtitleEntry:
        if not isinstance(delta_ms, int):
            return NotImplemented
        return self.offset(delta_ms)


@dataclass(frozen=True, init=False)
class Subtitle:
    """Ordered collection of subtitle entries."""

    entries: tuple[SubtitleEntry, ...]

    def __init__(self, entries: Iterable[SubtitleEntry] = ()) -> None:
        object.__setattr__(self, "entries", tuple(entries))

    def offset(self, delta_ms: int) -> Subtitle:
        """Shift every entry by ``delta_ms`` milliseconds."""
        return Subtitle(entry.offset(delta_ms) for entry in self.entries)

    def split(self) -> tuple[Subtitle, Subtitle]:
        """Split every entry's text into two time-synchronized subtitles.

        Returns:
            Tuple of (left, right) subtitles, with the same entry count,
            indices and timing as this subtitle
        """
        halves = [entry.split() for entry in self.entries]
        left = Subtitle(pair[0] for pair in halves)
        right = Subtitle(pair[1] for pair in halves)
        return left, right

    def __add__(self, delta_ms: int) -> Subtitle:
        if not isinstance(delta_ms, int):
            return NotImplemented
        return self.offset(delta_ms)

    def __len__(self) -> int:
        """Return number of entries."""
        return len(self.entries)

    def __iter__(self) -> Iterator[SubtitleEntry]:
        """Iterate over entries."""
        return iter(self.entries)

    def __getitem__(self, index: int) -> SubtitleEntry:
        """Get entry by index (0-based)."""
        return self.entries[index]
