import logging
from typing import Any, Iterable, List, Optional, Union

from pymonad.either import Either, Right

from .domain.errors import AppError
from .domain.models import Playlist, PlaylistEntry
from .locator import decode_initial_data, locate_initial_data
from .navigator import PlaylistMetadata, read_metadata, read_video_nodes
from .normalizer import normalize_entry
from .renderers import RawVideoNode

logger = logging.getLogger(__name__)


def assemble_playlist(
    metadata: PlaylistMetadata,
    nodes: Iterable[Optional[RawVideoNode]],
    playlist_id: str = "",
    link: str = "",
) -> Either[AppError, Playlist]:
    """
    Builds the Playlist from its metadata and raw video nodes.

    Nodes that are not exactly one known renderer, and entries without a
    video id, are skipped. Order of the source listing is preserved.

    Returns:
        Either: A Right(Playlist), or the Left of the first entry that
        cannot be normalized.
    """
    entries: List[PlaylistEntry] = []
    for position, node in enumerate(nodes):
        renderer = node.renderer if node is not None else None
        if renderer is None:
            logger.warning(f"Skipping item {position}: not a single playlist or grid video.")
            continue
        if not renderer.video_id:
            logger.warning(f"Skipping item {position}: no video id.")
            continue

        result = normalize_entry(renderer)
        if result.is_left():
            return result
        entries.append(result.value)

    logger.info(f"Playlist '{metadata.title}' assembled with {len(entries)} videos.")
    return Right(Playlist(
        playlist_id=playlist_id,
        title=metadata.title,
        author=metadata.author,
        description=metadata.description,
        link=link,
        image=metadata.image,
        videos=tuple(entries),
    ))


def playlist_from_data(data: Any, playlist_id: str = "", link: str = "") -> Either[AppError, Playlist]:
    """Builds the Playlist from an already decoded ytInitialData document."""
    metadata = read_metadata(data)
    return read_video_nodes(data).bind(
        lambda nodes: assemble_playlist(metadata, nodes, playlist_id, link)
    )


def extract_playlist(body: Union[bytes, str], playlist_id: str = "", link: str = "") -> Either[AppError, Playlist]:
    """
    Extracts a Playlist from the raw HTML of a YouTube playlist or channel page.

    Args:
        body: The response body of the page.
        playlist_id: Identifier stamped on the result.
        link: Link stamped on the result.

    Returns:
        Either: A Right(Playlist), or a Left(AppError) describing the first
        structural failure.
    """
    return (
        locate_initial_data(body)
        .bind(decode_initial_data)
        .bind(lambda data: playlist_from_data(data, playlist_id, link))
    )
