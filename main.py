from __future__ import annotations

import argparse
from dataclasses import asdict
import logging
from pathlib import Path
import sys

from snapframe_core.core.tree_renderer import TreeRenderer
from snapframe_ui.component_schema import ComponentContext
from snapframe_ui.controls.container import Spacer
from snapframe_ui.controls.panel import Panel
from snapframe_ui.render_error import RenderError
from snapframe_ui.style.theme import DEFAULT_THEME, PanelTheme, load_panel_theme, validate_panel_theme


LOGGER = logging.getLogger("snapframe")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="snapframe")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    panel = sub.add_parser("render-panel", help="Render a rounded panel around an empty content box to PNG.")
    panel.add_argument("--width", type=float, default=320.0, help="Content width in logical units.")
    panel.add_argument("--height", type=float, default=180.0, help="Content height in logical units.")
    panel.add_argument("--radius", type=float, default=None, help="Corner radius. Default: theme value.")
    panel.add_argument("--color", default=None, help="Background hex color, e.g. #282C34ED.")
    panel.add_argument("--scale", type=float, default=None, help="Scale factor. Default: theme value.")
    panel.add_argument("--config", type=Path, default=None, help="TOML file with a [panel] table.")
    panel.add_argument("--out", type=Path, required=True)
    return parser


def resolve_theme(args: argparse.Namespace) -> PanelTheme:
    theme = load_panel_theme(args.config) if args.config is not None else DEFAULT_THEME
    overrides: dict[str, object] = {}
    if args.radius is not None:
        overrides["panel_radius_px"] = args.radius
    if args.color is not None:
        overrides["panel_bg"] = args.color
    if args.scale is not None:
        overrides["scale_factor"] = args.scale
    if not overrides:
        return theme
    merged = asdict(theme)
    merged.update(overrides)
    return validate_panel_theme(merged)


def render_panel(args: argparse.Namespace) -> int:
    theme = resolve_theme(args)
    root = Panel(
        radius=theme.panel_radius_px,
        bg_color=theme.panel_bg,
        min_width=theme.panel_min_width_px,
        children=[Spacer(args.width, args.height)],
    )
    pixmap = TreeRenderer().render(root, ComponentContext(scale_factor=theme.scale_factor))
    args.out.parent.mkdir(parents=True, exist_ok=True)
    pixmap.save_png(args.out)
    LOGGER.info("wrote %dx%d panel to %s", pixmap.width, pixmap.height, args.out)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    try:
        if args.command == "render-panel":
            return render_panel(args)
    except (RenderError, ValueError) as exc:
        print(f"snapframe: {exc}", file=sys.stderr)
        return 2
    raise SystemExit(f"unknown command {args.command}")


if __name__ == "__main__":
    raise SystemExit(main())
