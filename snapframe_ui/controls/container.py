from __future__ import annotations

from typing import Sequence

from snapframe_ui.component_schema import ComponentAlign, ComponentBase, RawComponentStyle


class Container(ComponentBase):
    """Paint-free grouping node that lines its children up in a row or column."""

    def __init__(self, children: Sequence[ComponentBase] = (), align: ComponentAlign = "row") -> None:
        self._children = tuple(children)
        self.align = align

    def children(self) -> tuple[ComponentBase, ...]:
        return self._children

    def style(self) -> RawComponentStyle:
        return RawComponentStyle(align=self.align)


class Spacer(ComponentBase):
    """Fixed-size leaf that reserves room without painting."""

    def __init__(self, width: float, height: float) -> None:
        if width < 0 or height < 0:
            raise ValueError("Spacer width/height must be >= 0")
        self.width = float(width)
        self.height = float(height)

    def style(self) -> RawComponentStyle:
        return RawComponentStyle(width=self.width, height=self.height)
