"""In-memory element tree returned by the builders."""
from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import Iterator

from .naming import attribute_name
from .values import display_text


@dataclass
class Element:
    """A single node of a rendered tree.

    ``attributes`` map straight onto HTML attributes. ``dataset`` holds node
    metadata and serializes as ``data-<key>`` attributes.

    Names pass through :func:`~appearance_ui.naming.attribute_name` when
    serialized. ``id`` and ``classes`` take precedence over ``id``/``class``
    entries in ``attributes``; any other name produced twice raises
    :class:`ValueError`.
    """

    tag: str
    id: str | None = None
    classes: list[str] = field(default_factory=list)
    attributes: dict[str, object] = field(default_factory=dict)
    dataset: dict[str, object] = field(default_factory=dict)
    text: str | None = None
    children: list["Element"] = field(default_factory=list)

    @property
    def class_name(self) -> str:
        return " ".join(self.classes)

    @property
    def title(self) -> str | None:
        value = self.attributes.get("title")
        return None if value is None else str(value)

    def append(self, child: "Element") -> "Element":
        self.children.append(child)
        return child

    def iter(self) -> Iterator["Element"]:
        """Yield this element and all descendants depth first."""

        yield self
        for child in self.children:
            yield from child.iter()

    def find_all(self, tag: str) -> list["Element"]:
        return [node for node in self.iter() if node.tag == tag]

    def to_html(self) -> str:
        return "".join(_serialize(self))


def _serialize(node: Element) -> Iterator[str]:
    yield "<" + node.tag + _render_attrs(node) + ">"
    if node.text is not None:
        yield html.escape(node.text, quote=False)
    for child in node.children:
        yield from _serialize(child)
    yield "</" + node.tag + ">"


def _render_attrs(node: Element) -> str:
    attrs: dict[str, object] = {}
    if node.id is not None:
        attrs["id"] = node.id
    if node.classes:
        attrs["class"] = node.class_name
    reserved = set(attrs)
    for key, value in node.attributes.items():
        name = attribute_name(key)
        if name in reserved:
            continue
        _set_attr(attrs, node, name, value)
    for key, value in node.dataset.items():
        _set_attr(attrs, node, "data-" + attribute_name(key), value)
    parts = [
        f'{name}="{html.escape(display_text(value), quote=True)}"'
        for name, value in attrs.items()
        if value is not None
    ]
    return "".join(" " + part for part in parts)


def _set_attr(attrs: dict[str, object], node: Element, name: str, value: object) -> None:
    if name in attrs:
        raise ValueError(f"attribute {name!r} is set twice on <{node.tag}>")
    attrs[name] = value


__all__ = ["Element"]
