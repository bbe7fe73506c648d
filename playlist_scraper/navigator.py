import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Union

from pydantic import ValidationError
from pymonad.either import Either, Left, Right
from toolz import get_in

from .domain.errors import MalformedPlaylistPayload
from .renderers import RAW_VIDEO_NODES, RawVideoNode

logger = logging.getLogger(__name__)

Step = Union[str, int]
Path = Sequence[Step]

# Paths into ytInitialData. YouTube does not document this structure, so every
# lookup below tolerates missing keys and short arrays.
PLAYLIST_TITLE: Path = ("metadata", "playlistMetadataRenderer", "title")
CHANNEL_TITLE: Path = ("metadata", "channelMetadataRenderer", "title")
PLAYLIST_AUTHOR: Path = (
    "sidebar", "playlistSidebarRenderer", "items", 1,
    "playlistSidebarSecondaryInfoRenderer", "videoOwner", "videoOwnerRenderer",
    "title", "runs", 0, "text",
)
CHANNEL_DESCRIPTION: Path = ("metadata", "channelMetadataRenderer", "description")
CHANNEL_IMAGE: Path = ("metadata", "channelMetadataRenderer", "avatar", "thumbnails", 0, "url")

PLAYLIST_VIDEOS: Path = (
    "contents", "twoColumnBrowseResultsRenderer", "tabs", 0,
    "tabRenderer", "content", "sectionListRenderer", "contents", 0,
    "itemSectionRenderer", "contents", 0,
    "playlistVideoListRenderer", "contents",
)
GRID_VIDEOS: Path = (
    "contents", "twoColumnBrowseResultsRenderer", "tabs", 1,
    "tabRenderer", "content", "sectionListRenderer", "contents", 0,
    "itemSectionRenderer", "contents", 0,
    "gridRenderer", "items",
)


@dataclass(frozen=True)
class PlaylistMetadata:
    title: str = ""
    author: str = ""
    description: str = ""
    image: str = ""


def navigate(data: Any, path: Path) -> Optional[Any]:
    """Follows a path of keys and indices, returning None on any missing step."""
    return get_in(path, data)


def text_at(data: Any, path: Path) -> str:
    value = navigate(data, path)
    return value if isinstance(value, str) else ""


def read_metadata(data: Any) -> PlaylistMetadata:
    """Reads the playlist level fields, falling back to channel metadata."""
    title = text_at(data, PLAYLIST_TITLE) or text_at(data, CHANNEL_TITLE)
    author = text_at(data, PLAYLIST_AUTHOR) or title
    return PlaylistMetadata(
        title=title,
        author=author,
        description=text_at(data, CHANNEL_DESCRIPTION),
        image=text_at(data, CHANNEL_IMAGE),
    )


def _materialize(raw: Any, path_name: str) -> Either[MalformedPlaylistPayload, List[Optional[RawVideoNode]]]:
    if raw is None:
        return Right([])
    try:
        return Right(RAW_VIDEO_NODES.validate_python(raw))
    except ValidationError as e:
        logger.error(f"Unexpected shape for the {path_name} video list: {e}")
        return Left(MalformedPlaylistPayload(f"Invalid {path_name} video list: {e}"))


def read_video_nodes(data: Any) -> Either[MalformedPlaylistPayload, List[Optional[RawVideoNode]]]:
    """
    Reads the raw per-video nodes.

    The playlist video list is tried first; the channel grid is only read
    when the playlist list yields nothing.

    Returns:
        Either: A Right(nodes), or a Left(MalformedPlaylistPayload) when the
        list exists but does not have the expected shape.
    """
    def fallback(nodes: List[Optional[RawVideoNode]]):
        if nodes:
            return Right(nodes)
        logger.info("Playlist video list is empty, reading the channel grid instead.")
        return _materialize(navigate(data, GRID_VIDEOS), "grid")

    return _materialize(navigate(data, PLAYLIST_VIDEOS), "playlist").bind(fallback)
