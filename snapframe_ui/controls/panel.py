from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from snapframe_core.render.color import DEFAULT_PANEL_COLOR, RgbaColor, is_valid_hex_color
from snapframe_core.render.path import Transform
from snapframe_core.render.pixmap import Paint
from snapframe_core.render.shapes import rounded_panel_path
from snapframe_ui.component_schema import (
    ComponentBase,
    ComponentContext,
    ComponentStyle,
    Padding,
    RawComponentStyle,
    RenderParams,
)
from snapframe_ui.render_error import InvalidHexColor

if TYPE_CHECKING:
    from snapframe_core.render.pixmap import Pixmap


EDITOR_PADDING = 20.0


class Panel(ComponentBase):
    """Rounded, optionally translucent background that stacks its children vertically."""

    def __init__(
        self,
        radius: float,
        bg_color: str | None = None,
        min_width: float | None = None,
        children: Sequence[ComponentBase] = (),
    ) -> None:
        if radius < 0:
            raise ValueError("Panel radius must be >= 0")
        if min_width is not None and min_width < 0:
            raise ValueError("Panel min_width must be >= 0")
        self.radius = float(radius)
        self.bg_color = bg_color
        self.min_width = float(min_width) if min_width is not None else 0.0
        self._children = tuple(children)

    def children(self) -> tuple[ComponentBase, ...]:
        return self._children

    def style(self) -> RawComponentStyle:
        return RawComponentStyle(
            min_width=self.min_width,
            align="column",
            padding=Padding.from_value(EDITOR_PADDING),
        )

    def resolve_color(self) -> RgbaColor:
        if self.bg_color is None:
            return DEFAULT_PANEL_COLOR
        if not is_valid_hex_color(self.bg_color):
            raise InvalidHexColor(self.bg_color)
        return RgbaColor.from_hex(self.bg_color)

    def draw_self(
        self,
        pixmap: "Pixmap",
        context: ComponentContext,
        render_params: RenderParams,
        style: ComponentStyle,
        parent_style: ComponentStyle,
    ) -> None:
        _ = parent_style
        # Color is resolved before any geometry; an invalid one leaves the pixmap untouched.
        color = self.resolve_color()
        path = rounded_panel_path(render_params.x, render_params.y, style.width, style.height, self.radius)
        paint = Paint(color=color.to_rgba8())
        pixmap.fill_path(
            path,
            paint,
            "winding",
            Transform.from_scale(context.scale_factor, context.scale_factor),
        )
