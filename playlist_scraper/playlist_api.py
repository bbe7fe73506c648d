import logging
from typing import Optional

from pymonad.either import Either

from .adapters.requests_fetcher import RequestsPageFetcher
from .assembler import extract_playlist
from .domain.errors import AppError
from .domain.models import Playlist, PlaylistTarget
from .domain.ports import PageFetcher
from .identifiers import resolve_reference

logger = logging.getLogger(__name__)


def get_playlist(reference: str, fetcher: Optional[PageFetcher] = None) -> Either[AppError, Playlist]:
    """
    Retrieves a playlist or channel listing from YouTube.

    Args:
        reference: A playlist id, a playlist URL or a channel/user videos URL.
        fetcher: The port used to download the page. Defaults to a RequestsPageFetcher.

    Returns:
        Either: A Right(Playlist) in case of success, or a Left(AppError).
    """
    fetcher = fetcher or RequestsPageFetcher()

    def fetch_and_extract(target: PlaylistTarget) -> Either[AppError, Playlist]:
        logger.info(f"Retrieving {target.kind} '{target.identifier}'.")
        return fetcher.fetch(target.link).bind(
            lambda body: extract_playlist(body, playlist_id=target.identifier, link=target.link)
        )

    return resolve_reference(reference).bind(fetch_and_extract)
