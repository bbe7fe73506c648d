# playlist_scraper/domain/errors.py
from dataclasses import dataclass

@dataclass(frozen=True)
class AppError:
    """Base class for application errors."""
    message: str

@dataclass(frozen=True)
class InvalidPlaylistReference(AppError):
    """The input is neither a bare playlist id nor a URL with a list= parameter."""
    pass

@dataclass(frozen=True)
class UnrecognizedURLShape(AppError):
    """The URL matches none of the known listing shapes."""
    pass

@dataclass(frozen=True)
class EmbeddedDataNotFound(AppError):
    """No ytInitialData script could be located in the page."""
    pass

@dataclass(frozen=True)
class MalformedPlaylistPayload(AppError):
    """The embedded JSON could not be decoded into the expected shape."""
    pass

@dataclass(frozen=True)
class InvalidDurationEncoding(AppError):
    """A playlist video carries a non-numeric lengthSeconds value."""
    pass

@dataclass(frozen=True)
class FetchError(AppError):
    """Error while retrieving the page over HTTP."""
    pass
