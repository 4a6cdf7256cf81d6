from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from pathlib import Path as FilePath

import numpy as np
import torch
from PIL import Image

from .color import RGBA8
from .path import Edge, FillRule, Path, Transform


LOGGER = logging.getLogger(__name__)

AA_SUBSAMPLES = 4
# Upper bound on elements in each per-chunk scanline intermediate.
_CHUNK_ELEMENT_BUDGET = 1 << 21


@dataclass(frozen=True)
class Paint:
    color: RGBA8 = (0, 0, 0, 255)
    anti_alias: bool = True

    def __post_init__(self) -> None:
        if len(self.color) != 4 or any(not 0 <= int(c) <= 255 for c in self.color):
            raise ValueError("Paint color must be four 8-bit channels")


@dataclass
class Pixmap:
    """Straight-alpha RGBA8 raster backed by a `(height, width, 4)` uint8 tensor.

    New pixmaps are fully transparent.
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Pixmap width/height must be > 0")
        self.data = torch.zeros((self.height, self.width, 4), dtype=torch.uint8)

    @classmethod
    def new(cls, width: int, height: int) -> "Pixmap":
        return cls(width=width, height=height)

    def fill(self, color: RGBA8) -> None:
        self.data[:, :] = torch.tensor(color, dtype=torch.uint8)

    def pixel(self, x: int, y: int) -> RGBA8:
        r, g, b, a = (int(v) for v in self.data[y, x].tolist())
        return (r, g, b, a)

    def to_numpy(self) -> np.ndarray:
        return self.data.cpu().numpy().copy()

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.to_numpy())

    def save_png(self, out_path: FilePath | str) -> None:
        self.to_image().save(out_path, format="PNG")

    def fill_path(
        self,
        path: Path,
        paint: Paint,
        fill_rule: FillRule = "winding",
        transform: Transform | None = None,
    ) -> None:
        device_path = path.transform(transform or Transform.identity())
        left, top, right, bottom = device_path.bounds()
        x0 = max(0, int(math.floor(left)))
        y0 = max(0, int(math.floor(top)))
        x1 = min(self.width, int(math.ceil(right)))
        y1 = min(self.height, int(math.ceil(bottom)))
        if x1 <= x0 or y1 <= y0:
            LOGGER.debug("fill_path skipped: bounds %s outside %dx%d pixmap", (left, top, right, bottom), self.width, self.height)
            return
        edges = [e for e in device_path.edges() if e[1] != e[3]]
        if not edges:
            return
        samples = AA_SUBSAMPLES if paint.anti_alias else 1
        coverage = _coverage(edges, x0, y0, x1, y1, samples=samples, fill_rule=fill_rule)
        LOGGER.debug(
            "fill_path %d edges over [%d:%d, %d:%d] rule=%s color=%s",
            len(edges),
            x0,
            x1,
            y0,
            y1,
            fill_rule,
            paint.color,
        )
        self._blend_coverage(coverage, x=x0, y=y0, color=paint.color)

    def _blend_coverage(self, coverage: torch.Tensor, *, x: int, y: int, color: RGBA8) -> None:
        h, w = coverage.shape
        src_alpha = coverage * (color[3] / 255.0)
        touched = src_alpha > 0
        if not bool(touched.any()):
            return

        patch = self.data[y : y + h, x : x + w]
        dst_rgb = patch[:, :, :3].to(torch.float32)
        dst_alpha = patch[:, :, 3].to(torch.float32) / 255.0
        src_rgb = torch.tensor(color[:3], dtype=torch.float32).view(1, 1, 3)

        out_alpha = src_alpha + dst_alpha * (1.0 - src_alpha)
        out_rgb_num = src_rgb * src_alpha.unsqueeze(-1) + dst_rgb * (dst_alpha * (1.0 - src_alpha)).unsqueeze(-1)
        safe = torch.where(out_alpha > 1e-6, out_alpha, torch.ones_like(out_alpha))
        out_rgb = out_rgb_num / safe.unsqueeze(-1)

        out = torch.cat([out_rgb, (out_alpha * 255.0).unsqueeze(-1)], dim=-1)
        out = torch.clamp(torch.round(out), 0, 255).to(torch.uint8)
        patch[:, :, :] = torch.where(touched.unsqueeze(-1), out, patch)


def _coverage(
    edges: list[Edge],
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    *,
    samples: int,
    fill_rule: FillRule,
) -> torch.Tensor:
    """Fraction of sample points inside the path for each pixel in the window.

    Winding numbers come from a horizontal ray cast to the right of every
    sample: each edge crossing the ray adds +1 when it runs downward and -1
    when it runs upward.
    """

    offsets = (torch.arange(samples, dtype=torch.float64) + 0.5) / samples
    ys = (torch.arange(y0, y1, dtype=torch.float64).unsqueeze(1) + offsets.unsqueeze(0)).reshape(-1)
    xs = (torch.arange(x0, x1, dtype=torch.float64).unsqueeze(1) + offsets.unsqueeze(0)).reshape(-1)

    e = torch.tensor(edges, dtype=torch.float64)
    ex0, ey0, ex1, ey1 = e.unbind(dim=1)
    direction = (ey1 > ey0).to(torch.int64) * 2 - 1
    ylo = torch.minimum(ey0, ey1)
    yhi = torch.maximum(ey0, ey1)

    row_chunk = rows_per_chunk(len(edges), xs.numel(), samples)
    rows: list[torch.Tensor] = []
    for start in range(0, ys.numel(), row_chunk):
        chunk = ys[start : start + row_chunk]
        relevant = (yhi > chunk[0]) & (ylo <= chunk[-1])
        if not bool(relevant.any()):
            rows.append(torch.zeros((chunk.numel(), xs.numel()), dtype=torch.bool))
            continue
        rows.append(
            _inside_mask(
                chunk,
                xs,
                ex0[relevant],
                ey0[relevant],
                ex1[relevant],
                ey1[relevant],
                direction[relevant],
                ylo[relevant],
                yhi[relevant],
                fill_rule,
            )
        )
    inside = torch.cat(rows, dim=0).to(torch.float32)
    h = y1 - y0
    w = x1 - x0
    return inside.reshape(h, samples, w, samples).mean(dim=(1, 3))


def rows_per_chunk(n_edges: int, n_columns: int, samples: int) -> int:
    """Sample rows per scanline chunk so `rows * (edges + columns)` stays within budget."""

    rows = _CHUNK_ELEMENT_BUDGET // max(1, n_edges + n_columns)
    return max(samples, rows - rows % samples)


def _inside_mask(
    ys: torch.Tensor,
    xs: torch.Tensor,
    ex0: torch.Tensor,
    ey0: torch.Tensor,
    ex1: torch.Tensor,
    ey1: torch.Tensor,
    direction: torch.Tensor,
    ylo: torch.Tensor,
    yhi: torch.Tensor,
    fill_rule: FillRule,
) -> torch.Tensor:
    yy = ys.unsqueeze(1)
    crosses = (yy >= ylo) & (yy < yhi)
    t = (yy - ey0) / (ey1 - ey0)
    xc = ex0 + t * (ex1 - ex0)
    xc = torch.where(crosses, xc, torch.full_like(xc, math.inf))
    d = crosses.to(torch.int64) * direction

    xc_sorted, order = torch.sort(xc, dim=1)
    d_sorted = torch.gather(d, 1, order)
    suffix = torch.flip(torch.cumsum(torch.flip(d_sorted, dims=[1]), dim=1), dims=[1])
    suffix = torch.cat([suffix, torch.zeros((suffix.shape[0], 1), dtype=torch.int64)], dim=1)

    query = xs.unsqueeze(0).expand(ys.numel(), xs.numel()).contiguous()
    first_right = torch.searchsorted(xc_sorted.contiguous(), query, right=True)
    winding = torch.gather(suffix, 1, first_right)
    if fill_rule == "even_odd":
        return torch.remainder(winding, 2) != 0
    return winding != 0
