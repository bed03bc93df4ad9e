"""Scene graph used by chart renderers and its SVG serialization.

Renderers build a tree of Node objects (one per SVG element) instead of
concatenating markup. Interaction and motion are declarative:

- `tooltip(html)` stores the tooltip body in `data-tooltip`,
- `hover(**attrs)` stores attribute overrides applied while hovered,
- `animate(kind, ...)` adds an enter-transition CSS class with timing.

`core/static/core/gallery.js` and `gallery.css` bring those attributes to life.
"""

from __future__ import annotations

import json
import math
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Final

SVG_NAMESPACE: Final[str] = "http://www.w3.org/2000/svg"

ANIMATION_KINDS: Final[frozenset[str]] = frozenset(
    {"grow-y", "grow-x", "fade", "pop", "draw", "wipe", "radial"}
)


def fmt(value: float) -> str:
    """Format a coordinate with at most two decimals."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        return "0"
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def translate(x: float, y: float) -> str:
    """Return an SVG `translate(x,y)` transform."""

    return f"translate({fmt(x)},{fmt(y)})"


def _attr_name(key: str) -> str:
    if key == "class_":
        return "class"
    return key.rstrip("_").replace("_", "-")


def _attr_value(value: object) -> str:
    if isinstance(value, (int, float)):
        return fmt(value)
    return str(value)


@dataclass(slots=True)
class Node:
    """A single SVG element in a scene graph.

    Attributes:
        tag: Element name (`rect`, `g`, `path`, ...).
        attrs: Serialized attribute values.
        children: Child nodes in paint order.
        text: Optional text content.
        meta: Renderer side-channel data that is not serialized.
    """

    tag: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: list["Node"] = field(default_factory=list)
    text: str | None = None
    meta: dict[str, object] = field(default_factory=dict)

    def set(self, **attrs: object) -> "Node":
        """Set attributes (`stroke_width` -> `stroke-width`); None removes."""

        for key, value in attrs.items():
            name = _attr_name(key)
            if value is None:
                self.attrs.pop(name, None)
            else:
                self.attrs[name] = _attr_value(value)
        return self

    def add(self, tag: str, text: str | None = None, **attrs: object) -> "Node":
        """Append and return a new child element."""

        child = Node(tag=tag, text=text)
        child.set(**attrs)
        self.children.append(child)
        return child

    def append(self, node: "Node") -> "Node":
        """Append an existing node and return it."""

        self.children.append(node)
        return node

    @property
    def classes(self) -> tuple[str, ...]:
        """Return the element's CSS classes."""

        return tuple(self.attrs.get("class", "").split())

    def add_class(self, name: str) -> "Node":
        """Add a CSS class."""

        if name not in self.classes:
            self.attrs["class"] = " ".join((*self.classes, name))
        return self

    def add_style(self, declaration: str) -> "Node":
        """Append an inline style declaration."""

        existing = self.attrs.get("style")
        self.attrs["style"] = f"{existing}; {declaration}" if existing else declaration
        return self

    def tooltip(self, html: str) -> "Node":
        """Attach tooltip HTML shown while the element is hovered."""

        self.attrs["data-tooltip"] = html
        return self

    def hover(self, **attrs: object) -> "Node":
        """Attach attribute overrides applied while the element is hovered."""

        overrides = {_attr_name(key): _attr_value(value) for key, value in attrs.items()}
        self.attrs["data-hover"] = json.dumps(overrides, sort_keys=True)
        return self

    def animate(self, kind: str, *, delay: float = 0, duration: float = 800) -> "Node":
        """Attach an enter transition.

        Args:
            kind: One of ANIMATION_KINDS.
            delay: Delay before the transition starts (milliseconds).
            duration: Transition length (milliseconds).

        Raises:
            ValueError: For an unknown transition kind.
        """

        if kind not in ANIMATION_KINDS:
            raise ValueError(f"Unknown animation kind: {kind!r}")
        self.add_class(f"anim-{kind}")
        if kind == "draw":
            self.attrs["pathLength"] = "1"
        self.add_style(f"animation-delay: {fmt(delay)}ms; animation-duration: {fmt(duration)}ms")
        return self

    def iter(self) -> Iterator["Node"]:
        """Iterate over this node and all descendants (pre-order)."""

        yield self
        for child in self.children:
            yield from child.iter()

    def find_all(self, tag: str | None = None, class_: str | None = None) -> list["Node"]:
        """Return descendants (including self) matching a tag and/or class."""

        return [
            node
            for node in self.iter()
            if (tag is None or node.tag == tag) and (class_ is None or class_ in node.classes)
        ]


def svg_root(width: float, height: float, *, class_: str = "chart") -> Node:
    """Create the `<svg>` root for a chart of the given size."""

    root = Node(tag="svg")
    root.set(
        xmlns=SVG_NAMESPACE,
        width=width,
        height=height,
        viewBox=f"0 0 {fmt(width)} {fmt(height)}",
        class_=class_,
    )
    return root


def to_element(node: Node) -> ET.Element:
    """Convert a Node tree into an ElementTree element."""

    element = ET.Element(node.tag, dict(node.attrs))
    if node.text is not None:
        element.text = node.text
    for child in node.children:
        element.append(to_element(child))
    return element


def to_svg(node: Node) -> str:
    """Serialize a Node tree to SVG markup."""

    return ET.tostring(to_element(node), encoding="unicode", short_empty_elements=True)


def shape_count(node: Node) -> int:
    """Count elements that carry a tooltip (the interactive data shapes)."""

    return sum(1 for item in node.iter() if "data-tooltip" in item.attrs)
