from __future__ import annotations


class RenderError(Exception):
    """Reported (non-fatal) failure while a component paints itself."""


class InvalidHexColor(RenderError, ValueError):
    def __init__(self, color: str) -> None:
        super().__init__(f"invalid hex color: {color!r}")
        self.color = color
