from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator

from .component_schema import ComponentBase, ComponentStyle, RawComponentStyle, RenderParams


@dataclass(frozen=True)
class LayoutNode:
    """A component paired with its resolved box for one render pass."""

    component: ComponentBase
    raw_style: RawComponentStyle
    style: ComponentStyle
    params: RenderParams
    children: tuple["LayoutNode", ...] = ()

    @property
    def outer_width(self) -> float:
        return self.style.width + self.raw_style.margin.horizontal

    @property
    def outer_height(self) -> float:
        return self.style.height + self.raw_style.margin.vertical

    def walk(self) -> Iterator["LayoutNode"]:
        """Depth-first, parent before children."""

        yield self
        for child in self.children:
            yield from child.walk()


def layout_tree(root: ComponentBase, origin: tuple[float, float] = (0.0, 0.0)) -> LayoutNode:
    """Resolve sizes bottom-up, then assign positions top-down."""

    measured = _measure(root)
    x, y = origin
    margin = measured.raw_style.margin
    return _place(measured, x + margin.left, y + margin.top)


def _measure(component: ComponentBase) -> LayoutNode:
    raw = component.style()
    kids = tuple(_measure(child) for child in component.children())

    if raw.align == "row":
        content_w = sum(k.outer_width for k in kids)
        content_h = max((k.outer_height for k in kids), default=0.0)
    else:
        content_w = max((k.outer_width for k in kids), default=0.0)
        content_h = sum(k.outer_height for k in kids)

    width = raw.width if raw.width is not None else content_w + raw.padding.horizontal
    height = raw.height if raw.height is not None else content_h + raw.padding.vertical
    width = max(width, raw.min_width)
    if raw.max_width is not None:
        width = min(width, raw.max_width)

    return LayoutNode(
        component=component,
        raw_style=raw,
        style=ComponentStyle(width=float(width), height=float(height)),
        params=RenderParams(),
        children=kids,
    )


def _place(node: LayoutNode, x: float, y: float) -> LayoutNode:
    padding = node.raw_style.padding
    cursor_x = x + padding.left
    cursor_y = y + padding.top
    placed: list[LayoutNode] = []
    for child in node.children:
        margin = child.raw_style.margin
        placed.append(_place(child, cursor_x + margin.left, cursor_y + margin.top))
        if node.raw_style.align == "row":
            cursor_x += child.outer_width
        else:
            cursor_y += child.outer_height
    return replace(node, params=RenderParams(x=x, y=y), children=tuple(placed))
