"""Safe accessors for loosely-typed JSON documents.

InnerTube responses are not contractually stable: any intermediate node
may be missing, null, or of an unexpected type. These helpers walk a path
of mapping keys and sequence indices and fall back to a default instead
of raising.
"""

from collections.abc import Mapping, Sequence
from typing import Any, List, Union

PathPart = Union[str, int]

_MISSING = object()


def dig(node: Any, *path: PathPart, default: Any = None) -> Any:
    """
    Follow ``path`` through nested mappings and sequences.

    String parts index mappings; integer parts index lists and tuples
    (negative indices count from the end). Any missing key, out-of-range
    index, type mismatch or ``None`` along the way yields ``default``.

    Parameters
    ----------
    node : Any
        Root JSON value.
    *path : str | int
        Keys and indices to follow.
    default : Any, optional
        Value returned when the path cannot be followed (default: None).

    Returns
    -------
    Any
        The value found at ``path``, or ``default``.

    Examples
    --------
    >>> dig({"a": {"b": [1, 2, 3]}}, "a", "b", -1)
    3
    >>> dig({"a": None}, "a", "b", default="")
    ''
    """
    current = node
    for part in path:
        if isinstance(part, str):
            if not isinstance(current, Mapping):
                return default
            current = current.get(part, _MISSING)
        else:
            if isinstance(current, (str, bytes)) or not isinstance(current, Sequence):
                return default
            try:
                current = current[part]
            except IndexError:
                return default
        if current is _MISSING or current is None:
            return default
    return current


def dig_list(node: Any, *path: PathPart) -> List[Any]:
    """Follow ``path`` like :func:`dig`, returning ``[]`` unless a list is found."""
    value = dig(node, *path)
    if isinstance(value, list):
        return value
    return []
