"""Component contracts, layout and first-party components for Snapframe."""

from .component_schema import (
    ComponentAlign,
    ComponentBase,
    ComponentContext,
    ComponentStyle,
    Padding,
    RawComponentStyle,
    RenderParams,
)
from .controls.container import Container, Spacer
from .controls.panel import EDITOR_PADDING, Panel
from .layout import LayoutNode, layout_tree
from .render_error import InvalidHexColor, RenderError
from .style.theme import DEFAULT_THEME, PanelTheme, load_panel_theme, validate_panel_theme

__all__ = [
    "ComponentAlign",
    "ComponentBase",
    "ComponentContext",
    "ComponentStyle",
    "Container",
    "DEFAULT_THEME",
    "EDITOR_PADDING",
    "InvalidHexColor",
    "LayoutNode",
    "Padding",
    "Panel",
    "PanelTheme",
    "RawComponentStyle",
    "RenderError",
    "RenderParams",
    "Spacer",
    "layout_tree",
    "load_panel_theme",
    "validate_panel_theme",
]
