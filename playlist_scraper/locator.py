import json
import logging
from typing import Any, Optional, Union

from bs4 import BeautifulSoup
from pymonad.either import Either, Left, Right

from .domain.errors import EmbeddedDataNotFound, MalformedPlaylistPayload

logger = logging.getLogger(__name__)

INITIAL_DATA_PREFIX = "var ytInitialData ="


def find_initial_data(body: Union[bytes, str]) -> Optional[str]:
    """
    Returns the JSON text assigned to ytInitialData, or None when the page
    has no such script.

    Scripts are visited in document order and the first match wins.
    """
    soup = BeautifulSoup(body, "html.parser")
    for script in soup.find_all("script"):
        text = script.string
        if text is None or not text.startswith(INITIAL_DATA_PREFIX):
            continue
        return text[len(INITIAL_DATA_PREFIX):].strip().strip(";").strip()
    return None


def locate_initial_data(body: Union[bytes, str]) -> Either[EmbeddedDataNotFound, str]:
    """
    Locates the embedded ytInitialData payload of a YouTube page.

    Returns:
        Either: A Right(json_text), or a Left(EmbeddedDataNotFound) when no
        script carries a payload.
    """
    payload = find_initial_data(body)
    if not payload:
        logger.error("No ytInitialData script found in the page.")
        return Left(EmbeddedDataNotFound("Could not locate the playlist data in the page."))

    logger.info(f"ytInitialData located ({len(payload)} characters).")
    return Right(payload)


def decode_initial_data(payload: str) -> Either[MalformedPlaylistPayload, Any]:
    try:
        return Right(json.loads(payload))
    except json.JSONDecodeError as e:
        logger.error(f"ytInitialData is not valid JSON: {e}")
        return Left(MalformedPlaylistPayload(f"Invalid playlist JSON: {e}"))
