from __future__ import annotations

import logging

from .path import Path, PathBuilder


LOGGER = logging.getLogger(__name__)


def clamp_radius(width: float, height: float, radius: float) -> float:
    limit = max(0.0, min(width, height) / 2.0)
    if radius > limit:
        LOGGER.debug("clamping corner radius %.3f to %.3f for %.3fx%.3f box", radius, limit, width, height)
        return limit
    return max(0.0, radius)


def rounded_panel_path(x: float, y: float, width: float, height: float, radius: float) -> Path:
    """Build a rounded rectangle from straight segments and full circles.

    The outline is the box with each corner notched in by `radius` on both
    axes, plus one circle of `radius` centred on every notch corner. Filled
    with the winding rule, the circles round off the notches. With a zero
    radius the circles are empty and the outline is the plain box.
    """

    r = clamp_radius(width, height, radius)
    rw = width - 2.0 * r
    rh = height - 2.0 * r

    pb = PathBuilder()
    pb.move_to(x + r, y)
    pb.line_to(x + r + rw, y)
    pb.line_to(x + r + rw, y + r)
    pb.line_to(x + rw + r * 2.0, y + r)
    pb.line_to(x + rw + r * 2.0, y + rh + r)
    pb.line_to(x + rw + r, y + rh + r)
    pb.line_to(x + rw + r, y + rh + r * 2.0)
    pb.line_to(x + r, y + rh + r * 2.0)
    pb.line_to(x + r, y + rh + r)
    pb.line_to(x, y + rh + r)
    pb.line_to(x, y + r)
    pb.line_to(x + r, y + r)
    pb.line_to(x + r, y)
    pb.line_to(x + r + rw, y)

    pb.push_circle(x + rw + r, y + rh + r, r)
    pb.push_circle(x + r + rw, y + r, r)
    pb.push_circle(x + r, y + r, r)
    pb.push_circle(x + r, y + rh + r, r)

    pb.close()
    path = pb.finish()
    if path is None:
        raise RuntimeError("rounded panel path produced no contours")
    return path
