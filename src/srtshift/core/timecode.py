"""SRT timecode and time span value types."""

from __future__ import annotations

from dataclasses import dataclass

MILLISECONDS_PER_SECOND = 1000
MILLISECONDS_PER_MINUTE = 60 * MILLISECONDS_PER_SECOND
MILLISECONDS_PER_HOUR = 60 * MILLISECONDS_PER_MINUTE

TIMECODE_SAMPLE = "00:02:19,482"
TIMESPAN_SAMPLE = "00:02:19,482 --> 00:02:21,609"
TIMESPAN_DELIMITER = " --> "


class SRTParseError(ValueError):
    """Exception raised when an SRT timecode or time span cannot be parsed."""


@dataclass(frozen=True)
class TimeField:
    """Fixed-width zero-padded digit group with an upper bound.

    Attributes:
        name: Field name used in error messages
        modulus: Exclusive upper bound of the field value
        width: Number of digits in the canonical text form
    """

    name: str
    modulus: int
    width: int

    def parse(self, label: str) -> int:
        """Parse a digit group, enforcing width, digits and range.

        Args:
            label: Raw field text, e.g. "05"

        Returns:
            Field value

        Raises:
            SRTParseError: If the label has the wrong width, is not numeric,
                or is not below the modulus
        """
        if len(label) != self.width:
            raise SRTParseError(
                f"{self.name}: expected {self.width} digits, got {label!r}"
            )
        if not (label.isascii() and label.isdigit()):
            raise SRTParseError(f"{self.name}: not a number {label!r}")

        value = int(label)
        if value >= self.modulus:
            raise SRTParseError(
                f"{self.name}: value {value} out of range [0, {self.modulus})"
            )
        return value

    def clamp(self, value: int) -> int:
        """Clamp a value into [0, modulus - 1]."""
        return min(max(value, 0), self.modulus - 1)

    def format(self, value: int) -> str:
        """Render a value zero-padded to the field width."""
        return f"{value:0{self.width}d}"


HOURS = TimeField("hours", 24, 2)
MINUTES = TimeField("minutes", 60, 2)
SECONDS = TimeField("seconds", 60, 2)
MILLISECONDS = TimeField("milliseconds", 1000, 3)


@dataclass(frozen=True)
class Timecode:
    """Zero-padded SRT timecode: hours:minutes:seconds,milliseconds.

    Use ``Timecode.parse`` for text (strict) and ``Timecode.from_fields``
    for numeric fields (clamped). ``from_milliseconds`` does not cap the
    hours field, so timecodes past 24 hours can be produced by arithmetic.
    """

    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    def __post_init__(self):
        """Validate field ranges; hours is only bounded below."""
        if self.hours < 0:
            raise ValueError(f"hours must be non-negative, got {self.hours}")
        for time_field, value in (
            (MINUTES, self.minutes),
            (SECONDS, self.seconds),
            (MILLISECONDS, self.milliseconds),
        ):
            if not 0 <= value < time_field.modulus:
                raise ValueError(
                    f"{time_field.name} must be in [0, {time_field.modulus}), "
                    f"got {value}"
                )

    @classmethod
    def parse(cls, text: str) -> Timecode:
        """Parse a canonical ``HH:MM:SS,mmm`` string.

        Args:
            text: Timecode string, exactly 12 characters

        Returns:
            Parsed Timecode

        Raises:
            SRTParseError: If the text does not match the timecode grammar
        """
        if len(text) != len(TIMECODE_SAMPLE):
            raise SRTParseError(
                f"timecode must be {len(TIMECODE_SAMPLE)} characters, "
                f"got {len(text)} in {text!r}"
            )

        hms = text.split(":")
        if len(hms) != 3:
            raise SRTParseError(
                f"timecode must have 3 ':'-separated parts, got {len(hms)} in {text!r}"
            )

        sm = hms[2].split(",")
        if len(sm) != 2:
            raise SRTParseError(
                f"timecode seconds must be 'SS,mmm', got {hms[2]!r} in {text!r}"
            )

        return cls(
            hours=HOURS.parse(hms[0]),
            minutes=MINUTES.parse(hms[1]),
            seconds=SECONDS.parse(sm[0]),
            milliseconds=MILLISECONDS.parse(sm[1]),
        )

    @classmethod
    def from_fields(
        cls, hours: int, minutes: int, seconds: int, milliseconds: int
    ) -> Timecode:
        """Build a Timecode from numeric fields, clamping each into range."""
        return cls(
            hours=HOURS.clamp(hours),
            minutes=MINUTES.clamp(minutes),
            seconds=SECONDS.clamp(seconds),
            milliseconds=MILLISECONDS.clamp(milliseconds),
        )

    @classmethod
    def from_milliseconds(cls, ms: int) -> Timecode:
        """Build a Timecode from a millisecond count; negatives clamp to zero."""
        ms = max(ms, 0)
        hours, ms = divmod(ms, MILLISECONDS_PER_HOUR)
        minutes, ms = divmod(ms, MILLISECONDS_PER_MINUTE)
        seconds, ms = divmod(ms, MILLISECONDS_PER_SECOND)
        return cls(hours=hours, minutes=minutes, seconds=seconds, milliseconds=ms)

    @property
    def total_milliseconds(self) -> int:
        """Total milliseconds since zero."""
        return (
            self.hours * MILLISECONDS_PER_HOUR
            + self.minutes * MILLISECONDS_PER_MINUTE
            + self.seconds * MILLISECONDS_PER_SECOND
            + self.milliseconds
        )

    def offset(self, delta_ms: int) -> Timecode:
        """Shift by ``delta_ms`` milliseconds, clamping at zero."""
        return Timecode.from_milliseconds(self.total_milliseconds + delta_ms)

    def __add__(self, delta_ms: int) -> Timecode:
        if not isinstance(delta_ms, int):
            return NotImplemented
        return self.offset(delta_ms)

    def __sub__(self, delta_ms: int) -> Timecode:
        if not isinstance(delta_ms, int):
            return NotImplemented
        return self.offset(-delta_ms)

    def __str__(self) -> str:
        return (
            f"{HOURS.format(self.hours)}:{MINUTES.format(self.minutes)}:"
            f"{SECONDS.format(self.seconds)},{MILLISECONDS.format(self.milliseconds)}"
        )


@dataclass(frozen=True)
class TimeSpan:
    """Start/end Timecode pair, rendered as ``START --> END``.

    No ordering between start and end is enforced.
    """

    start: Timecode
    end: Timecode

    @classmethod
    def parse(cls, text: str) -> TimeSpan:
        """Parse a ``HH:MM:SS,mmm --> HH:MM:SS,mmm`` line.

        Args:
            text: Time span line, exactly 29 characters

        Returns:
            Parsed TimeSpan

        Raises:
            SRTParseError: If the line is not a well-formed time span
        """
        if len(text) != len(TIMESPAN_SAMPLE):
            raise SRTParseError(
                f"time span must be {len(TIMESPAN_SAMPLE)} characters, "
                f"got {len(text)} in {text!r}"
            )

        parts = text.split(TIMESPAN_DELIMITER)
        if len(parts) != 2 or len(parts[0]) != len(parts[1]):
            raise SRTParseError(
                f"time span must be 'START{TIMESPAN_DELIMITER}END', got {text!r}"
            )

        try:
            start = Timecode.parse(parts[0])
        except SRTParseError as e:
            raise SRTParseError(f"start: {e}") from e

        try:
            end = Timecode.parse(parts[1])
        except SRTParseError as e:
            raise SRTParseError(f"end: {e}") from e

        return cls(start=start, end=end)

    @property
    def duration_ms(self) -> int:
        """End minus start in milliseconds; negative for reversed spans."""
        return self.end.total_milliseconds - self.start.total_milliseconds

    def offset(self, delta_ms: int) -> TimeSpan:
        """Shift both endpoints by ``delta_ms`` milliseconds."""
        return TimeSpan(
            start=self.start.offset(delta_ms), end=self.end.offset(delta_ms)
        )

    def __add__(self, delta_ms: int) -> TimeSpan:
        if not isinstance(delta_ms, int):
            return NotImplemented
        return self.offset(delta_ms)

    def __sub__(self, delta_ms: int) -> TimeSpan:
        if not isinstance(delta_ms, int):
            return NotImplemented
        return self.offset(-delta_ms)

    def __str__(self) -> str:
        return f"{self.start}{TIMESPAN_DELIMITER}{self.end}"


def is_timespan(line: str) -> bool:
    """Return True if ``line`` parses as a TimeSpan."""
    try:
        TimeSpan.parse(line)
    except SRTParseError:
        return False
    return True
