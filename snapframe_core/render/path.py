from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Literal, Union


FillRule = Literal["winding", "even_odd"]
Point = tuple[float, float]
Edge = tuple[float, float, float, float]

# Largest gap, in device pixels, between a flattened ellipse and the true curve.
FLATTEN_TOLERANCE_PX = 0.05
_MIN_ELLIPSE_SEGMENTS = 8


@dataclass(frozen=True)
class Transform:
    """Axis-aligned scale followed by translation; no rotation or skew."""

    sx: float = 1.0
    sy: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    @classmethod
    def identity(cls) -> "Transform":
        return cls()

    @classmethod
    def from_scale(cls, sx: float, sy: float) -> "Transform":
        return cls(sx=sx, sy=sy)

    @classmethod
    def from_translate(cls, tx: float, ty: float) -> "Transform":
        return cls(tx=tx, ty=ty)

    def is_identity(self) -> bool:
        return self == Transform()

    def map_point(self, x: float, y: float) -> Point:
        return (x * self.sx + self.tx, y * self.sy + self.ty)


@dataclass(frozen=True)
class PolyContour:
    points: tuple[Point, ...]
    closed: bool = False

    def transform(self, ts: Transform) -> "PolyContour":
        return PolyContour(points=tuple(ts.map_point(x, y) for x, y in self.points), closed=self.closed)

    def edges(self) -> list[Edge]:
        pts = list(self.points)
        if len(pts) < 2:
            return []
        # Filling treats every contour as closed.
        pairs = zip(pts, pts[1:] + pts[:1])
        return [(x0, y0, x1, y1) for (x0, y0), (x1, y1) in pairs]


@dataclass(frozen=True)
class EllipseContour:
    """Closed ellipse traced clockwise on a y-down surface."""

    cx: float
    cy: float
    rx: float
    ry: float

    def transform(self, ts: Transform) -> "EllipseContour":
        cx, cy = ts.map_point(self.cx, self.cy)
        return EllipseContour(cx=cx, cy=cy, rx=abs(self.rx * ts.sx), ry=abs(self.ry * ts.sy))

    def edges(self) -> list[Edge]:
        radius = max(self.rx, self.ry)
        segments = ellipse_segments(radius)
        pts = [
            (
                self.cx + self.rx * math.cos(2.0 * math.pi * i / segments),
                self.cy + self.ry * math.sin(2.0 * math.pi * i / segments),
            )
            for i in range(segments)
        ]
        pairs = zip(pts, pts[1:] + pts[:1])
        return [(x0, y0, x1, y1) for (x0, y0), (x1, y1) in pairs]


def ellipse_segments(radius: float) -> int:
    """Segment count keeping every chord within `FLATTEN_TOLERANCE_PX` of the arc."""

    if radius <= FLATTEN_TOLERANCE_PX:
        return _MIN_ELLIPSE_SEGMENTS
    step = math.acos(1.0 - FLATTEN_TOLERANCE_PX / radius)
    return max(_MIN_ELLIPSE_SEGMENTS, math.ceil(math.pi / step))


Contour = Union[PolyContour, EllipseContour]


@dataclass(frozen=True)
class Path:
    contours: tuple[Contour, ...]

    def transform(self, ts: Transform) -> "Path":
        if ts.is_identity():
            return self
        return Path(contours=tuple(c.transform(ts) for c in self.contours))

    def edges(self) -> list[Edge]:
        out: list[Edge] = []
        for contour in self.contours:
            out.extend(contour.edges())
        return out

    def bounds(self) -> tuple[float, float, float, float]:
        """Return `(left, top, right, bottom)` over every contour."""

        xs: list[float] = []
        ys: list[float] = []
        for contour in self.contours:
            if isinstance(contour, EllipseContour):
                xs.extend((contour.cx - contour.rx, contour.cx + contour.rx))
                ys.extend((contour.cy - contour.ry, contour.cy + contour.ry))
            else:
                xs.extend(x for x, _ in contour.points)
                ys.extend(y for _, y in contour.points)
        return (min(xs), min(ys), max(xs), max(ys))


@dataclass
class PathBuilder:
    """Incremental builder for fillable paths.

    `move_to` starts a contour, `line_to` extends it and `push_circle` appends a
    standalone closed circle. `finish` returns None when nothing was drawn.
    """

    _contours: list[Contour] = field(default_factory=list)
    _current: list[Point] = field(default_factory=list)
    _current_closed: bool = False

    def move_to(self, x: float, y: float) -> None:
        self._flush()
        self._current = [(float(x), float(y))]

    def line_to(self, x: float, y: float) -> None:
        if not self._current:
            self._current = [(0.0, 0.0)]
        self._current.append((float(x), float(y)))

    def push_circle(self, cx: float, cy: float, radius: float) -> None:
        if radius < 0:
            raise ValueError("circle radius must be >= 0")
        self._flush()
        r = float(radius)
        self._contours.append(EllipseContour(cx=float(cx), cy=float(cy), rx=r, ry=r))

    def close(self) -> None:
        if self._current:
            self._current_closed = True

    def finish(self) -> Path | None:
        self._flush()
        if not self._contours:
            return None
        path = Path(contours=tuple(self._contours))
        self._contours = []
        return path

    def _flush(self) -> None:
        if len(self._current) >= 2:
            self._contours.append(PolyContour(points=tuple(self._current), closed=self._current_closed))
        self._current = []
        self._current_closed = False
