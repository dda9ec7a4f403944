"""Builders for simple grouping and list elements."""
from __future__ import annotations

import logging
from typing import Iterable, Mapping

from ..config import DEFAULT_CONFIG, Config
from ..dom import Element
from ..naming import class_token, sanitize_name
from ..values import display_text

logger = logging.getLogger(__name__)


def create_div(
    element_id: str,
    name: str,
    attributes: Mapping[str, object] | None = None,
    *,
    config: Config | None = None,
) -> Element:
    """Create a container ``div`` tagged for generic and name-scoped styling."""

    prefix = (config or DEFAULT_CONFIG).naming.class_prefix
    clean_name = sanitize_name(name)

    div = Element("div", id=sanitize_name(element_id))
    div.classes = [
        class_token("container", prefix=prefix),
        class_token(clean_name, "container", prefix=prefix),
    ]
    for key, value in (attributes or {}).items():
        div.attributes[key] = value
    return div


def create_fieldset(
    element_id: str,
    name: str,
    title: str,
    *,
    config: Config | None = None,
) -> Element:
    """Create a ``fieldset`` with a ``legend`` caption reading ``title``."""

    prefix = (config or DEFAULT_CONFIG).naming.class_prefix
    clean_id = sanitize_name(element_id)
    clean_name = sanitize_name(name)

    fieldset = Element("fieldset", id=clean_id)
    fieldset.dataset["name"] = name
    fieldset.classes = [
        class_token("fields", prefix=prefix),
        class_token(clean_name, "fields", prefix=prefix),
    ]

    legend = Element("legend", id=f"{clean_id}-legend", text=title)
    legend.classes = [
        class_token("legend", prefix=prefix),
        class_token(clean_name, "legend", prefix=prefix),
    ]
    fieldset.append(legend)
    return fieldset


def create_simple_list(
    element_id: str,
    name: str,
    entries: Iterable[object],
    ordered: bool | None = None,
    *,
    config: Config | None = None,
) -> Element:
    """Create a ``ul`` (or ``ol`` when ``ordered``) with one item per entry.

    Item ids are ``<list id>-<index>`` with a 0-based index. Entries are
    rendered as plain text.
    """

    if ordered is None:
        ordered = False
    prefix = (config or DEFAULT_CONFIG).naming.class_prefix
    clean_name = sanitize_name(name)

    listing = Element("ol" if ordered else "ul", id=sanitize_name(element_id))
    listing.classes = [
        class_token("list", prefix=prefix),
        class_token(clean_name, "list", prefix=prefix),
        class_token("ordered" if ordered else "unordered", "list", prefix=prefix),
    ]

    item_classes = [
        class_token("list", "item", prefix=prefix),
        class_token(clean_name, "list", "item", prefix=prefix),
    ]
    for index, entry in enumerate(entries):
        item = Element("li", id=f"{listing.id}-{index}", text=display_text(entry))
        item.classes = list(item_classes)
        item.dataset["value"] = entry
        item.dataset["index"] = index
        listing.append(item)

    logger.debug("Built %s list %s with %d item(s)", listing.tag, listing.id, len(listing.children))
    return listing


__all__ = ["create_div", "create_fieldset", "create_simple_list"]
