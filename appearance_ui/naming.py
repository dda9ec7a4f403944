"""Identifier and CSS class naming conventions."""
from __future__ import annotations

import re

DEFAULT_CLASS_PREFIX = "appearance"

_UNSAFE_ATTRIBUTE_CHARS = re.compile(r"[^A-Za-z0-9_.:-]")


def sanitize_name(name: str) -> str:
    """Return ``name`` trimmed with its first space replaced by ``_``.

    Only the first embedded space is replaced; ``"a b c"`` becomes ``"a_b c"``.
    """

    return name.strip().replace(" ", "_", 1)


def attribute_name(name: object) -> str:
    """Return ``name`` as a markup-safe attribute name.

    The name is sanitized first, then every character outside
    ``[A-Za-z0-9_.:-]`` becomes ``_``.
    """

    return _UNSAFE_ATTRIBUTE_CHARS.sub("_", sanitize_name(str(name)))


def class_token(*parts: str, prefix: str = DEFAULT_CLASS_PREFIX) -> str:
    """Compose a class token such as ``appearance-scores-table``."""

    return "-".join((prefix, *parts))


__all__ = ["DEFAULT_CLASS_PREFIX", "attribute_name", "class_token", "sanitize_name"]
