from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from snapframe_core.render.pixmap import Pixmap


ComponentAlign = Literal["row", "column"]


@dataclass(frozen=True)
class Padding:
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    def __post_init__(self) -> None:
        if min(self.top, self.right, self.bottom, self.left) < 0:
            raise ValueError("Padding edges must be >= 0")

    @classmethod
    def from_value(cls, value: float) -> "Padding":
        return cls(top=value, right=value, bottom=value, left=value)

    @property
    def horizontal(self) -> float:
        return self.left + self.right

    @property
    def vertical(self) -> float:
        return self.top + self.bottom


@dataclass(frozen=True)
class RawComponentStyle:
    """Declared style handed to the layout engine.

    `width`/`height` of None mean "size to content".
    """

    width: float | None = None
    height: float | None = None
    min_width: float = 0.0
    max_width: float | None = None
    align: ComponentAlign = "row"
    padding: Padding = field(default_factory=Padding)
    margin: Padding = field(default_factory=Padding)

    def __post_init__(self) -> None:
        if self.width is not None and self.width < 0:
            raise ValueError("RawComponentStyle width must be >= 0")
        if self.height is not None and self.height < 0:
            raise ValueError("RawComponentStyle height must be >= 0")
        if self.min_width < 0:
            raise ValueError("RawComponentStyle min_width must be >= 0")
        if self.max_width is not None and self.max_width < self.min_width:
            raise ValueError("RawComponentStyle max_width must be >= min_width")
        if self.align not in ("row", "column"):
            raise ValueError(f"unknown alignment `{self.align}`")


@dataclass(frozen=True)
class ComponentStyle:
    """Resolved box size for one render pass, in logical units."""

    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("ComponentStyle width/height must be >= 0")


@dataclass(frozen=True)
class RenderParams:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class ComponentContext:
    scale_factor: float = 1.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.scale_factor) or self.scale_factor <= 0:
            raise ValueError("ComponentContext scale_factor must be finite and > 0")


class ComponentBase:
    """Contract every drawable node exposes to the tree renderer.

    `draw_self` paints only the node's own contribution; children are drawn
    by the renderer afterwards.
    """

    def children(self) -> tuple["ComponentBase", ...]:
        return ()

    def style(self) -> RawComponentStyle:
        raise NotImplementedError

    def draw_self(
        self,
        pixmap: "Pixmap",
        context: ComponentContext,
        render_params: RenderParams,
        style: ComponentStyle,
        parent_style: ComponentStyle,
    ) -> None:
        _ = (pixmap, context, render_params, style, parent_style)
