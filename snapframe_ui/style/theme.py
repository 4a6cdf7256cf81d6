from __future__ import annotations

from dataclasses import asdict, dataclass
import math
from pathlib import Path
import tomllib
from typing import Any, Mapping

from snapframe_core.render.color import is_valid_hex_color


@dataclass(frozen=True)
class PanelTheme:
    """Token set for panel rendering. `panel_bg=None` selects the built-in default."""

    panel_bg: str | None = None
    panel_radius_px: float = 12.0
    panel_min_width_px: float = 0.0
    scale_factor: float = 3.0


DEFAULT_THEME = PanelTheme()


def validate_panel_theme(overrides: Mapping[str, Any] | None = None) -> PanelTheme:
    """Validate and merge user token overrides against defaults."""

    raw: dict[str, Any] = asdict(DEFAULT_THEME)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown theme token: {key}")
            raw[key] = value

    if raw["panel_bg"] is not None and not is_valid_hex_color(raw["panel_bg"]):
        raise ValueError("Token `panel_bg` must be a hex color (#RGB, #RRGGBB or #RRGGBBAA)")

    for key in ("panel_radius_px", "panel_min_width_px"):
        if not _is_finite_number(raw[key]) or float(raw[key]) < 0:
            raise ValueError(f"Token `{key}` must be a non-negative number")

    if not _is_finite_number(raw["scale_factor"]) or float(raw["scale_factor"]) <= 0:
        raise ValueError("Token `scale_factor` must be a positive number")

    return PanelTheme(
        panel_bg=raw["panel_bg"],
        panel_radius_px=float(raw["panel_radius_px"]),
        panel_min_width_px=float(raw["panel_min_width_px"]),
        scale_factor=float(raw["scale_factor"]),
    )


def _is_finite_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def load_panel_theme(path: Path) -> PanelTheme:
    """Read the `[panel]` table of a TOML file; a missing table means defaults."""

    with path.open("rb") as f:
        raw = tomllib.load(f)
    table = raw.get("panel", {})
    if not isinstance(table, dict):
        raise ValueError("`[panel]` must be a table")
    return validate_panel_theme(table)
