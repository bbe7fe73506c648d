import json

import pytest


def _runs(text):
    return {"runs": [{"text": text}]}


def _section(tab_content):
    return {
        "tabRenderer": {
            "content": {
                "sectionListRenderer": {
                    "contents": [{"itemSectionRenderer": {"contents": [tab_content]}}]
                }
            }
        }
    }


@pytest.fixture
def standard_video():
    """Factory for a playlistVideoRenderer node."""
    def _make(video_id="abc123", title="T", author="A", length_seconds="61"):
        return {
            "playlistVideoRenderer": {
                "videoId": video_id,
                "title": _runs(title),
                "shortBylineText": _runs(author),
                "lengthSeconds": length_seconds,
            }
        }
    return _make


@pytest.fixture
def grid_video():
    """Factory for a gridVideoRenderer node."""
    def _make(video_id="grid001", title="Grid title", author="Channel", duration_text="5:30"):
        return {
            "gridVideoRenderer": {
                "videoId": video_id,
                "title": _runs(title),
                "shortBylineText": _runs(author),
                "thumbnailOverlays": [
                    {"thumbnailOverlayTimeStatusRenderer": {"text": {"simpleText": duration_text}}}
                ],
            }
        }
    return _make


@pytest.fixture
def playlist_data():
    """Factory for the ytInitialData of a playlist page."""
    def _make(videos, title="My Playlist", owner="Playlist Owner"):
        return {
            "metadata": {"playlistMetadataRenderer": {"title": title}},
            "sidebar": {
                "playlistSidebarRenderer": {
                    "items": [
                        {"playlistSidebarPrimaryInfoRenderer": {"title": _runs(title)}},
                        {
                            "playlistSidebarSecondaryInfoRenderer": {
                                "videoOwner": {"videoOwnerRenderer": {"title": _runs(owner)}}
                            }
                        },
                    ]
                }
            },
            "contents": {
                "twoColumnBrowseResultsRenderer": {
                    "tabs": [_section({"playlistVideoListRenderer": {"contents": videos}})]
                }
            },
        }
    return _make


@pytest.fixture
def channel_data():
    """Factory for the ytInitialData of a channel videos page."""
    def _make(items, title="My Channel", description="About the channel",
              avatar="https://yt3.ggpht.com/avatar.jpg"):
        return {
            "metadata": {
                "channelMetadataRenderer": {
                    "title": title,
                    "description": description,
                    "avatar": {"thumbnails": [{"url": avatar, "width": 900}]},
                }
            },
            "contents": {
                "twoColumnBrowseResultsRenderer": {
                    "tabs": [
                        {"tabRenderer": {"title": "Home"}},
                        _section({"gridRenderer": {"items": items}}),
                    ]
                }
            },
        }
    return _make


@pytest.fixture
def make_page():
    """Factory wrapping a ytInitialData document in a YouTube-like HTML page."""
    def _make(data, prefix="var ytInitialData = "):
        payload = data if isinstance(data, str) else json.dumps(data)
        return (
            "<!DOCTYPE html><html><head>"
            "<script>var ytcfg = {\"EXPERIMENT_FLAGS\": {}};</script>"
            "</head><body><div id=\"content\">"
            f"<script nonce=\"xyz\">{prefix}{payload};</script>"
            "</div></body></html>"
        ).encode("utf-8")
    return _make
