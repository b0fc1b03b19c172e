"""
Record parser for InnerTube renderer nodes.

Each search item is a mapping holding exactly one "renderer" key that
names its kind (``videoRenderer``, ``channelRenderer`` or
``playlistRenderer``). ``RENDERER_PARSERS`` lists the recognized keys in
precedence order; if a node ever carries more than one, the first entry
of the table wins.

Every field is optional. Missing fields yield empty strings or empty
tuples, never an exception.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from tubesearch.models.results import (
    ChannelResult,
    PlaylistResult,
    SearchResult,
    Thumbnail,
    VideoResult,
)
from tubesearch.parsers.text_extractor import get_text
from tubesearch.utils.accessors import dig, dig_list

logger = logging.getLogger(__name__)


def _parse_thumbnails(raw: list[Any]) -> tuple[Thumbnail, ...]:
    """
    Build Thumbnail models from a raw thumbnail list.

    Entries that are not mappings are skipped; non-integer dimensions
    become 0. Upstream order (smallest first) is preserved.
    """
    thumbnails: list[Thumbnail] = []
    for entry in raw:
        if not isinstance(entry, Mapping):
            continue
        url = entry.get("url")
        width = entry.get("width")
        height = entry.get("height")
        thumbnails.append(
            Thumbnail(
                url=url if isinstance(url, str) else "",
                width=width if isinstance(width, int) else 0,
                height=height if isinstance(height, int) else 0,
            )
        )
    return tuple(thumbnails)


def _string(value: Any) -> str:
    return value if isinstance(value, str) else ""


def parse_video_renderer(video: Mapping[str, Any]) -> VideoResult:
    """
    Parse the body of a ``videoRenderer`` node.

    The description prefers the first detailed metadata snippet and falls
    back to ``descriptionSnippet``. Badges keep only non-empty labels.

    Parameters
    ----------
    video : Mapping[str, Any]
        Value of the ``videoRenderer`` key.

    Returns
    -------
    VideoResult
        The parsed video.
    """
    description = get_text(
        dig(video, "detailedMetadataSnippets", 0, "snippetText")
    ) or get_text(video.get("descriptionSnippet"))

    badges = tuple(
        label
        for label in (
            dig(badge, "metadataBadgeRenderer", "label")
            for badge in dig_list(video, "badges")
        )
        if label and isinstance(label, str)
    )

    return VideoResult(
        id=_string(video.get("videoId")),
        title=get_text(video.get("title")),
        thumbnails=_parse_thumbnails(dig_list(video, "thumbnail", "thumbnails")),
        author=get_text(video.get("ownerText")),
        duration=get_text(video.get("lengthText")),
        published_at=get_text(video.get("publishedTimeText")),
        view_count=get_text(video.get("viewCountText")),
        description=description,
        badges=badges,
    )


def parse_channel_renderer(channel: Mapping[str, Any]) -> ChannelResult:
    """Parse the body of a ``channelRenderer`` node."""
    return ChannelResult(
        id=_string(channel.get("channelId")),
        title=get_text(channel.get("title")),
        thumbnails=_parse_thumbnails(dig_list(channel, "thumbnail", "thumbnails")),
        description=get_text(channel.get("descriptionSnippet")),
        subscriber_count=get_text(channel.get("subscriberCountText")),
        video_count=get_text(channel.get("videoCountText")),
    )


def parse_playlist_renderer(playlist: Mapping[str, Any]) -> PlaylistResult:
    """
    Parse the body of a ``playlistRenderer`` node.

    Playlists nest thumbnails one level deeper than videos and channels
    (``thumbnails[0].thumbnails``); only the first group is used.
    """
    return PlaylistResult(
        id=_string(playlist.get("playlistId")),
        title=get_text(playlist.get("title")),
        thumbnails=_parse_thumbnails(dig_list(playlist, "thumbnails", 0, "thumbnails")),
        video_count=get_text(playlist.get("videoCountText")),
        author=get_text(playlist.get("longBylineText")),
    )


RENDERER_PARSERS: tuple[tuple[str, Callable[[Mapping[str, Any]], SearchResult]], ...] = (
    ("videoRenderer", parse_video_renderer),
    ("channelRenderer", parse_channel_renderer),
    ("playlistRenderer", parse_playlist_renderer),
)
"""Renderer keys and their parsers, in precedence order."""

RENDERER_KEYS: frozenset[str] = frozenset(key for key, _ in RENDERER_PARSERS)


def is_renderer_item(node: Any) -> bool:
    """Check whether ``node`` carries one of the recognized renderer keys."""
    return isinstance(node, Mapping) and any(
        isinstance(node.get(key), Mapping) for key in RENDERER_KEYS
    )


def parse_record(item: Any) -> SearchResult | None:
    """
    Classify one raw search item into a typed record.

    Parameters
    ----------
    item : Any
        One entry of a section's item list.

    Returns
    -------
    SearchResult | None
        The record for the first renderer key present, or None when the
        item carries no recognized renderer (ads, shelves, spelling
        corrections, ...).

    Examples
    --------
    >>> parse_record({"videoRenderer": {"videoId": "abc123"}}).link
    'https://www.youtube.com/watch?v=abc123'
    >>> parse_record({"adSlotRenderer": {}}) is None
    True
    """
    if not isinstance(item, Mapping):
        return None

    for key, parser in RENDERER_PARSERS:
        body = item.get(key)
        if isinstance(body, Mapping):
            return parser(body)

    logger.debug("Skipping unrecognized item with keys %s", list(item.keys()))
    return None
