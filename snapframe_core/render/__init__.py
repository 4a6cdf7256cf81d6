from .color import DEFAULT_PANEL_COLOR, RGBA8, RgbaColor, is_valid_hex_color
from .path import EllipseContour, FillRule, Path, PathBuilder, PolyContour, Transform
from .pixmap import Paint, Pixmap
from .shapes import clamp_radius, rounded_panel_path

__all__ = [
    "DEFAULT_PANEL_COLOR",
    "EllipseContour",
    "FillRule",
    "Paint",
    "Path",
    "PathBuilder",
    "Pixmap",
    "PolyContour",
    "RGBA8",
    "RgbaColor",
    "Transform",
    "clamp_radius",
    "is_valid_hex_color",
    "rounded_panel_path",
]
