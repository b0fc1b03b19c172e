"""
Text extraction for InnerTube text nodes.

InnerTube encodes display text in several shapes::

    "plain string"
    {"simpleText": "pre-rendered string"}
    {"runs": [{"text": "rich "}, {"text": "text", "bold": true}]}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def get_text(node: Any) -> str:
    """
    Return the plain text carried by an InnerTube text node.

    Resolution order: absent node gives ``""``; a string is returned
    as-is; a non-empty ``simpleText`` wins next; otherwise the ``text``
    of every entry in ``runs`` is concatenated in order without a
    separator. Anything else gives ``""``. Never raises.

    Parameters
    ----------
    node : Any
        Text node taken from a renderer, possibly None.

    Returns
    -------
    str
        The extracted text.

    Examples
    --------
    >>> get_text({"runs": [{"text": "Never "}, {"text": "Gonna"}]})
    'Never Gonna'
    >>> get_text(None)
    ''
    """
    if not node:
        return ""
    if isinstance(node, str):
        return node
    if not isinstance(node, Mapping):
        return ""

    simple_text = node.get("simpleText")
    if simple_text and isinstance(simple_text, str):
        return simple_text

    runs = node.get("runs")
    if isinstance(runs, list):
        return "".join(_run_text(run) for run in runs)

    return ""


def _run_text(run: Any) -> str:
    """Text of one rich-text run, or ``""`` if it carries none."""
    if isinstance(run, Mapping):
        text = run.get("text")
        if isinstance(text, str):
            return text
    return ""
