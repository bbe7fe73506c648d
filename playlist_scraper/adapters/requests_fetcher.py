import logging
from typing import Optional

import requests
from pymonad.either import Either, Left, Right

from ..domain.errors import FetchError
from ..domain.ports import PageFetcher

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
ACCEPT_LANGUAGE = "en-US,en;q=0.9"
# Metadata paths are only stable for the English interface.
QUERY_PARAMS = {"hl": "en"}


class RequestsPageFetcher(PageFetcher):
    def __init__(self, session: Optional[requests.Session] = None, timeout: float = DEFAULT_TIMEOUT):
        self._session = session or requests.Session()
        self._timeout = timeout

    def fetch(self, url: str) -> Either[FetchError, bytes]:
        """
        Downloads the page at the given URL with the English interface.

        Returns:
            Either[FetchError, bytes]: Right with the response body or Left with an error.
        """
        logger.info(f"Fetching '{url}'...")
        try:
            response = self._session.get(
                url,
                params=QUERY_PARAMS,
                headers={"User-Agent": USER_AGENT, "Accept-Language": ACCEPT_LANGUAGE},
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            error_message = f"Could not fetch '{url}': {e}"
            logger.error(f"Failed to fetch '{url}': {e}")
            return Left(FetchError(error_message))

        logger.info(f"Fetched '{url}' ({len(response.content)} bytes).")
        return Right(response.content)
