import logging
import re
from typing import List, NamedTuple, Optional, Tuple

from pymonad.either import Either, Left, Right

from .domain.errors import AppError, InvalidPlaylistReference, UnrecognizedURLShape
from .domain.models import PlaylistTarget

logger = logging.getLogger(__name__)

PLAYLIST_URL = "https://www.youtube.com/playlist?list={}"

_PLAYLIST_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]{18,42}")
_PLAYLIST_IN_URL_PATTERN = re.compile(r"[&?]list=([A-Za-z0-9_-]{18,42})(&.*)?\Z")


class ListingShape(NamedTuple):
    kind: str
    template: str
    pattern: "re.Pattern[str]"


# Priority order matters: the first shape that matches wins.
LISTING_SHAPES: List[ListingShape] = [
    ListingShape("playlist", PLAYLIST_URL, re.compile(r"[?&](list|p)=([^/&]+)")),
    ListingShape("c", "https://www.youtube.com/c/{}/videos", re.compile(r"/(c)/([^/&]+)/videos")),
    ListingShape("channel", "https://www.youtube.com/channel/{}/videos", re.compile(r"/(channel)/([^/&]+)/videos")),
    ListingShape("user", "https://www.youtube.com/user/{}/videos", re.compile(r"/(user)/([^/&]+)/videos")),
    ListingShape("handle", "https://www.youtube.com/{}/videos", re.compile(r"/(www\.youtube\.com)/([^/&]+)/videos")),
]


def _find_playlist_id(reference: str) -> Optional[str]:
    if _PLAYLIST_ID_PATTERN.fullmatch(reference):
        return reference
    match = _PLAYLIST_IN_URL_PATTERN.search(reference)
    return match.group(1) if match else None


def extract_playlist_id(reference: str) -> Either[InvalidPlaylistReference, str]:
    """
    Extracts a playlist id from a bare id or from a URL carrying a list= parameter.

    Args:
        reference: A playlist id or a playlist URL.

    Returns:
        Either: A Right(playlist_id), or a Left(InvalidPlaylistReference).
    """
    playlist_id = _find_playlist_id(reference)
    if playlist_id:
        return Right(playlist_id)

    logger.error(f"'{reference}' is not a valid playlist id or playlist URL.")
    return Left(InvalidPlaylistReference(f"Invalid playlist reference: '{reference}'."))


def _match_listing(url: str) -> Optional[Tuple[ListingShape, str]]:
    for shape in LISTING_SHAPES:
        match = shape.pattern.search(url)
        if match and match.group(2):
            return shape, match.group(2)
    return None


def classify_url(url: str) -> Either[UnrecognizedURLShape, str]:
    """
    Maps a YouTube URL to the canonical URL of the listing it points at.

    Returns:
        Either: A Right(canonical_url), or a Left(UnrecognizedURLShape).
    """
    matched = _match_listing(url)
    if matched is None:
        logger.error(f"No known URL shape matches '{url}'.")
        return Left(UnrecognizedURLShape(f"Failed to parse an id from URL '{url}'."))

    shape, segment = matched
    return Right(shape.template.format(segment))


def resolve_reference(reference: str) -> Either[AppError, PlaylistTarget]:
    """
    Works out which page has to be fetched for a user supplied reference.

    A bare id or a list= URL resolves to the playlist page. Any other URL is
    run through the listing classifier (channel, user and handle pages).
    """
    reference = reference.strip()

    playlist_id = _find_playlist_id(reference)
    if playlist_id:
        return Right(PlaylistTarget(identifier=playlist_id, link=PLAYLIST_URL.format(playlist_id)))

    if "/" not in reference:
        return extract_playlist_id(reference)

    matched = _match_listing(reference)
    if matched is None:
        return classify_url(reference)

    shape, segment = matched
    logger.info(f"Reference '{reference}' resolved as a '{shape.kind}' listing.")
    return Right(
        PlaylistTarget(identifier=segment, link=shape.template.format(segment), kind=shape.kind)
    )
