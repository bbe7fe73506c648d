"""
Typed view over the per-video nodes of ytInitialData.

A raw node is either a ``playlistVideoRenderer`` (playlist pages) or a
``gridVideoRenderer`` (channel video grids). Field names follow the JSON keys
through aliases; unknown keys are ignored and ``null`` values count as absent.
"""
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator


class _Node(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class TextRun(_Node):
    text: str = ""


class Runs(_Node):
    """The runs container YouTube wraps every title and byline in."""
    runs: List[TextRun] = Field(default_factory=list)

    @property
    def text(self) -> str:
        return self.runs[0].text if self.runs else ""


class StandardRenderer(_Node):
    video_id: str = Field("", alias="videoId")
    title: Runs = Field(default_factory=Runs)
    author: Runs = Field(default_factory=Runs, alias="shortBylineText")
    length_seconds: str = Field("", alias="lengthSeconds")


class SimpleText(_Node):
    simple_text: str = Field("", alias="simpleText")


class TimeStatusRenderer(_Node):
    text: SimpleText = Field(default_factory=SimpleText)


class ThumbnailOverlay(_Node):
    time_status: TimeStatusRenderer = Field(
        default_factory=TimeStatusRenderer, alias="thumbnailOverlayTimeStatusRenderer"
    )


class GridRenderer(_Node):
    video_id: str = Field("", alias="videoId")
    title: Runs = Field(default_factory=Runs)
    author: Runs = Field(default_factory=Runs, alias="shortBylineText")
    thumbnail_overlays: List[ThumbnailOverlay] = Field(default_factory=list, alias="thumbnailOverlays")

    @property
    def duration_text(self) -> str:
        if not self.thumbnail_overlays:
            return ""
        return self.thumbnail_overlays[0].time_status.text.simple_text


Renderer = Union[StandardRenderer, GridRenderer]


class RawVideoNode(_Node):
    standard: Optional[StandardRenderer] = Field(None, alias="playlistVideoRenderer")
    grid: Optional[GridRenderer] = Field(None, alias="gridVideoRenderer")

    @property
    def renderer(self) -> Optional[Renderer]:
        """The populated variant, or None unless exactly one is present."""
        if (self.standard is None) == (self.grid is None):
            return None
        return self.standard if self.standard is not None else self.grid


RAW_VIDEO_NODES = TypeAdapter(List[Optional[RawVideoNode]])
