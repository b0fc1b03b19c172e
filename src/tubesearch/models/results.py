"""
Pydantic models for InnerTube search results.

Models
------
Thumbnail
    One image variant attached to a result record.
VideoResult, ChannelResult, PlaylistResult
    The three record variants, discriminated by their ``type`` field.
SearchResult
    Discriminated union over the three variants.
PageResult
    Records and continuation token extracted from one API response.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, computed_field

from tubesearch.constants import WATCH_URL


class Thumbnail(BaseModel):
    """
    One image variant of a record's thumbnail.

    Upstream emits variants smallest-to-largest, so the last element of a
    thumbnail sequence is treated as the highest resolution.

    Attributes
    ----------
    url : str
        Image URL.
    width : int
        Image width in pixels (0 when upstream omits it).
    height : int
        Image height in pixels (0 when upstream omits it).
    """

    model_config = ConfigDict(frozen=True)

    url: str = ""
    width: int = 0
    height: int = 0


class VideoResult(BaseModel):
    """
    A video returned by a search.

    Attributes
    ----------
    type : Literal["video"]
        Record discriminator.
    id : str
        YouTube video ID; empty when upstream omits it.
    title : str
        Video title.
    thumbnails : tuple[Thumbnail, ...]
        Thumbnail variants, smallest first.
    author : str
        Channel name of the uploader.
    duration : str
        Display duration (e.g. ``"10:00"``).
    published_at : str
        Relative publish time text (e.g. ``"2 years ago"``).
    view_count : str
        View count text (e.g. ``"1,234 views"``).
    description : str
        Description snippet.
    badges : tuple[str, ...]
        Badge labels such as ``"4K"`` or ``"New"``.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["video"] = "video"
    id: str = ""
    title: str = ""
    thumbnails: tuple[Thumbnail, ...] = ()
    author: str = ""
    duration: str = ""
    published_at: str = ""
    view_count: str = ""
    description: str = ""
    badges: tuple[str, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def link(self) -> str:
        """
        Canonical watch URL for this video.

        Returns
        -------
        str
            URL in the format ``https://www.youtube.com/watch?v={id}``.
        """
        return f"{WATCH_URL}{self.id}"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def thumbnail_url(self) -> str:
        """
        URL of the highest-resolution thumbnail.

        Returns
        -------
        str
            URL of the last thumbnail variant, or ``""`` when there is none.
        """
        if not self.thumbnails:
            return ""
        return self.thumbnails[-1].url


class ChannelResult(BaseModel):
    """A channel returned by a search."""

    model_config = ConfigDict(frozen=True)

    type: Literal["channel"] = "channel"
    id: str = ""
    title: str = ""
    thumbnails: tuple[Thumbnail, ...] = ()
    description: str = ""
    subscriber_count: str = ""
    video_count: str = ""


class PlaylistResult(BaseModel):
    """A playlist returned by a search."""

    model_config = ConfigDict(frozen=True)

    type: Literal["playlist"] = "playlist"
    id: str = ""
    title: str = ""
    thumbnails: tuple[Thumbnail, ...] = ()
    video_count: str = ""
    author: str = ""


SearchResult = Annotated[
    Union[VideoResult, ChannelResult, PlaylistResult],
    Field(discriminator="type"),
]
"""Any record a search can return, discriminated by ``type``."""

search_results_adapter: TypeAdapter[list[SearchResult]] = TypeAdapter(
    list[SearchResult]
)
"""Validates/dumps lists of records, e.g. for the result cache."""


class PageResult(BaseModel):
    """
    Outcome of parsing one InnerTube search response.

    Attributes
    ----------
    records : tuple[SearchResult, ...]
        Recognized records in upstream order.
    continuation_token : str | None
        Token for the next page, or None when the result set is exhausted.
    error : str | None
        Set when traversal aborted partway; ``records`` then holds only
        what was extracted before the failure.
    """

    model_config = ConfigDict(frozen=True)

    records: tuple[SearchResult, ...] = ()
    continuation_token: str | None = None
    error: str | None = None

    @property
    def is_partial(self) -> bool:
        """Whether traversal aborted before the whole response was read."""
        return self.error is not None
