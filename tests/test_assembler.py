import dataclasses
from datetime import timedelta

import pytest

from playlist_scraper.assembler import assemble_playlist, extract_playlist
from playlist_scraper.domain.errors import (
    EmbeddedDataNotFound,
    InvalidDurationEncoding,
    MalformedPlaylistPayload,
)
from playlist_scraper.domain.models import PlaylistEntry
from playlist_scraper.logger_config import setup_logger
from playlist_scraper.navigator import PlaylistMetadata
from playlist_scraper.renderers import RawVideoNode

# Setup logger for tests
setup_logger()


def test_extract_playlist_single_entry(make_page, playlist_data, standard_video, caplog):
    """
    Given a page whose ytInitialData holds one playlist video,
    When extract_playlist is called,
    Then the playlist holds exactly that entry.
    """
    body = make_page(playlist_data([standard_video("abc123", "T", "A", "61")]))

    result = extract_playlist(body)

    assert result.is_right()
    playlist = result.value
    assert playlist.videos == (
        PlaylistEntry(video_id="abc123", title="T", author="A", duration=timedelta(seconds=61)),
    )
    assert playlist.title == "My Playlist"
    assert playlist.author == "Playlist Owner"
    assert playlist.pub_date is None
    assert "assembled with 1 videos" in caplog.text


def test_extract_playlist_stamps_id_and_link(make_page, playlist_data, standard_video):
    body = make_page(playlist_data([standard_video()]))

    playlist = extract_playlist(
        body, playlist_id="PL59FEE129ADFF2B12", link="https://www.youtube.com/playlist?list=PL59FEE129ADFF2B12"
    ).value

    assert playlist.playlist_id == "PL59FEE129ADFF2B12"
    assert playlist.link == "https://www.youtube.com/playlist?list=PL59FEE129ADFF2B12"


def test_extract_playlist_missing_script():
    """
    Given a page without a ytInitialData script,
    When extract_playlist is called,
    Then a Left(EmbeddedDataNotFound) is returned.
    """
    result = extract_playlist(b"<html><head><script>var ytcfg = {};</script></head><body></body></html>")

    assert result.is_left()
    error_value, _ = result.monoid
    assert isinstance(error_value, EmbeddedDataNotFound)


def test_extract_playlist_invalid_json(make_page):
    result = extract_playlist(make_page("{not json"))

    assert result.is_left()
    error_value, _ = result.monoid
    assert isinstance(error_value, MalformedPlaylistPayload)


def test_extract_playlist_channel_grid(make_page, channel_data, grid_video):
    """
    Given a channel page without playlist videos but with a grid of three videos,
    When extract_playlist is called,
    Then the three grid videos are returned in order.
    """
    items = [
        grid_video("g1", duration_text="5:30"),
        grid_video("g2", duration_text="1:05:30"),
        grid_video("g3", duration_text="LIVE"),
    ]

    result = extract_playlist(make_page(channel_data(items, title="Creator")))

    assert result.is_right()
    playlist = result.value
    assert [video.video_id for video in playlist.videos] == ["g1", "g2", "g3"]
    assert [video.duration for video in playlist.videos] == [
        timedelta(minutes=5, seconds=30),
        timedelta(hours=1, minutes=5, seconds=30),
        timedelta(0),
    ]
    assert playlist.title == "Creator"
    assert playlist.author == "Creator"
    assert playlist.image == "https://yt3.ggpht.com/avatar.jpg"


def test_extract_playlist_skips_invalid_nodes(make_page, playlist_data, standard_video, caplog):
    """
    Given playlist items that are not videos (continuation, neither renderer),
    When extract_playlist is called,
    Then they contribute no entries and cause no failure.
    """
    videos = [
        standard_video("first"),
        {"continuationItemRenderer": {"trigger": "CONTINUATION_TRIGGER_ON_ITEM_SHOWN"}},
        standard_video("second"),
    ]

    result = extract_playlist(make_page(playlist_data(videos)))

    assert result.is_right()
    assert [video.video_id for video in result.value.videos] == ["first", "second"]
    assert "Skipping item 1" in caplog.text


def test_extract_playlist_invalid_length_aborts(make_page, playlist_data, standard_video):
    videos = [standard_video("ok"), standard_video("broken", length_seconds="N/A")]

    result = extract_playlist(make_page(playlist_data(videos)))

    assert result.is_left()
    error_value, _ = result.monoid
    assert isinstance(error_value, InvalidDurationEncoding)


def test_assemble_playlist_drops_entries_without_id(standard_video, caplog):
    nodes = [
        RawVideoNode.model_validate(standard_video("")),
        RawVideoNode.model_validate(standard_video("kept")),
        None,
    ]

    result = assemble_playlist(PlaylistMetadata(title="T", author="A"), nodes)

    assert [video.video_id for video in result.value.videos] == ["kept"]
    assert "Skipping item 0: no video id." in caplog.text


def test_playlist_is_immutable(make_page, playlist_data, standard_video):
    playlist = extract_playlist(make_page(playlist_data([standard_video()]))).value

    with pytest.raises(dataclasses.FrozenInstanceError):
        playlist.title = "changed"
    assert isinstance(playlist.videos, tuple)


def test_playlist_to_dict(make_page, playlist_data, standard_video):
    playlist = extract_playlist(make_page(playlist_data([standard_video("abc123", "T", "A", "61")]))).value

    data = playlist.to_dict()

    assert data["title"] == "My Playlist"
    assert data["pub_date"] is None
    assert data["videos"] == [{"id": "abc123", "title": "T", "author": "A", "duration": 61}]


def test_extract_playlist_skips_id_less_entry_before_duration(make_page, playlist_data, standard_video, caplog):
    """
    Given a playlist item without a video id and with an invalid lengthSeconds,
    When extract_playlist is called,
    Then the item is skipped and the rest of the playlist is kept.
    """
    videos = [standard_video("", length_seconds="N/A"), standard_video("kept")]

    result = extract_playlist(make_page(playlist_data(videos)))

    assert result.is_right()
    assert [video.video_id for video in result.value.videos] == ["kept"]
    assert "Skipping item 0: no video id." in caplog.text
