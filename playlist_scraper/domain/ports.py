from abc import ABC, abstractmethod
from pymonad.either import Either

from .errors import FetchError


class PageFetcher(ABC):
    """
    Port defining the contract for retrieving a raw YouTube page.
    """

    @abstractmethod
    def fetch(self, url: str) -> Either[FetchError, bytes]:
        """
        Retrieves the page at the given URL.

        Returns:
            Either: A Right(response_body) or a Left(FetchError).
        """
        pass
