import logging
import re
from datetime import timedelta
from typing import Optional

from pymonad.either import Either, Left, Right

from .domain.errors import InvalidDurationEncoding
from .domain.models import PlaylistEntry
from .renderers import GridRenderer, Renderer, StandardRenderer

logger = logging.getLogger(__name__)

_SECONDS_PATTERN = re.compile(r"\+?[0-9]+")
_CLOCK_PATTERN = re.compile(r"([0-9]+):([0-9]{1,2}):([0-9]{1,2})")


def parse_length_seconds(value: str) -> Optional[timedelta]:
    """Parses the lengthSeconds string of a playlist video, None if not a count of seconds."""
    if not _SECONDS_PATTERN.fullmatch(value):
        return None
    try:
        return timedelta(seconds=int(value))
    except (OverflowError, ValueError):
        return None


def parse_clock_duration(text: str) -> Optional[timedelta]:
    """
    Parses the overlay text of a grid video ("5:30", "1:05:30").

    An "mm:ss" text is read as "0:mm:ss". Returns None when the text is not a
    clock value.
    """
    if text.count(":") == 1:
        text = "0:" + text
    match = _CLOCK_PATTERN.fullmatch(text)
    if not match:
        return None
    try:
        hours, minutes, seconds = (int(group) for group in match.groups())
        if minutes > 59 or seconds > 59:
            return None
        return timedelta(hours=hours, minutes=minutes, seconds=seconds)
    except (OverflowError, ValueError):
        return None


def _normalize_standard(renderer: StandardRenderer) -> Either[InvalidDurationEncoding, PlaylistEntry]:
    duration = parse_length_seconds(renderer.length_seconds)
    if duration is None:
        logger.error(f"Invalid duration '{renderer.length_seconds}' for video '{renderer.video_id}'.")
        return Left(InvalidDurationEncoding(f"Invalid video duration: '{renderer.length_seconds}'"))

    return Right(PlaylistEntry(
        video_id=renderer.video_id,
        title=renderer.title.text,
        author=renderer.author.text,
        duration=duration,
    ))


def _normalize_grid(renderer: GridRenderer) -> PlaylistEntry:
    duration = parse_clock_duration(renderer.duration_text)
    if duration is None:
        logger.warning(
            f"Invalid duration '{renderer.duration_text}' for video '{renderer.video_id}', using 0:00."
        )
        duration = timedelta(0)

    return PlaylistEntry(
        video_id=renderer.video_id,
        title=renderer.title.text,
        author=renderer.author.text,
        duration=duration,
    )


def normalize_entry(renderer: Renderer) -> Either[InvalidDurationEncoding, PlaylistEntry]:
    """
    Converts one renderer into a PlaylistEntry.

    A bad lengthSeconds on a playlist video aborts the extraction, whereas a
    bad overlay text on a grid video only zeroes its duration.
    """
    if isinstance(renderer, StandardRenderer):
        return _normalize_standard(renderer)
    return Right(_normalize_grid(renderer))
