from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional, Tuple


@dataclass(frozen=True)
class PlaylistEntry:
    """A single video of a playlist, in playlist order."""
    video_id: str
    title: str
    author: str
    duration: timedelta = timedelta(0)

    def to_dict(self) -> dict:
        return {
            "id": self.video_id,
            "title": self.title,
            "author": self.author,
            "duration": int(self.duration.total_seconds()),
        }


@dataclass(frozen=True)
class Playlist:
    """Represents a YouTube playlist or channel listing."""
    playlist_id: str = ""
    title: str = ""
    author: str = ""
    description: str = ""
    link: str = ""
    image: str = ""
    pub_date: Optional[datetime] = None
    videos: Tuple[PlaylistEntry, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        """Plain dict view, durations as whole seconds."""
        return {
            "id": self.playlist_id,
            "title": self.title,
            "author": self.author,
            "description": self.description,
            "link": self.link,
            "image": self.image,
            "pub_date": self.pub_date.isoformat() if self.pub_date else None,
            "videos": [video.to_dict() for video in self.videos],
        }


@dataclass(frozen=True)
class PlaylistTarget:
    """DTO describing which page to fetch for a user reference."""
    identifier: str
    link: str
    kind: str = "playlist"
