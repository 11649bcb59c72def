"""
Path string normalization shared by the matcher and the rule engine
"""

import os
from typing import Optional

from .errors import InvalidPathEncoding

CURRENT_DIR_PREFIX = "./"


def normalize_path(path: str) -> str:
    """
    Canonicalize a path string for display and matching.

    Converts OS separators to forward slashes and strips any leading
    "./" markers. "." itself normalizes to the empty string.
    """
    if os.sep != "/":
        path = path.replace(os.sep, "/")
    while path.startswith(CURRENT_DIR_PREFIX):
        path = path[len(CURRENT_DIR_PREFIX):]
    if path == ".":
        return ""
    return path


def join_relative(parent: str, name: str) -> str:
    """Join a normalized parent path and an entry name."""
    if not parent:
        return name
    return f"{parent.rstrip('/')}/{name}"


def relative_to_base(path: str, base: str) -> Optional[str]:
    """
    Return path relative to base, or None when path is not inside base.

    Both arguments are normalized relative paths; "" is the search root.
    """
    if not base:
        return path
    prefix = base.rstrip('/') + '/'
    if path.startswith(prefix):
        return path[len(prefix):]
    return None


def fold_case(text: str, insensitive: bool) -> str:
    """Lower-case text when matching case-insensitively."""
    if not insensitive:
        return text
    return text.lower()


def ensure_text(name: str) -> str:
    """
    Check that a directory entry name is valid UTF-8 text.

    os.scandir decodes undecodable bytes as lone surrogates; those names
    cannot be printed or matched reliably.

    Raises:
        InvalidPathEncoding: If the name contains undecodable bytes
    """
    try:
        name.encode('utf-8')
    except UnicodeEncodeError as e:
        raise InvalidPathEncoding(f"Found invalid path string: {name!r}") from e
    return name
