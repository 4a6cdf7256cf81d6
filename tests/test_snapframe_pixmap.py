from __future__ import annotations

from pathlib import Path as FilePath
import tempfile
import unittest

from PIL import Image
import torch

from snapframe_core.render.path import PathBuilder, Transform
from snapframe_core.render.pixmap import AA_SUBSAMPLES, Paint, Pixmap, rows_per_chunk
from snapframe_core.render.shapes import rounded_panel_path


def _square(pb: PathBuilder, x: float, y: float, size: float) -> None:
    pb.move_to(x, y)
    pb.line_to(x + size, y)
    pb.line_to(x + size, y + size)
    pb.line_to(x, y + size)
    pb.close()


def _filled_extent(pixmap: Pixmap) -> tuple[int, int]:
    ys, xs = torch.nonzero(pixmap.data[:, :, 3] > 0, as_tuple=True)
    return (int(xs.max()) - int(xs.min()) + 1, int(ys.max()) - int(ys.min()) + 1)


class PixmapTests(unittest.TestCase):
    def test_new_pixmap_is_transparent(self) -> None:
        pixmap = Pixmap.new(8, 6)
        self.assertEqual(tuple(pixmap.data.shape), (6, 8, 4))
        self.assertEqual(int(pixmap.data.sum()), 0)

    def test_rejects_empty_size(self) -> None:
        with self.assertRaisesRegex(ValueError, "> 0"):
            Pixmap.new(0, 4)

    def test_paint_rejects_bad_channels(self) -> None:
        with self.assertRaises(ValueError):
            Paint(color=(0, 0, 300, 255))

    def test_zero_radius_fill_covers_exact_rectangle(self) -> None:
        pixmap = Pixmap.new(50, 40)
        path = rounded_panel_path(5.0, 7.0, 30.0, 20.0, 0.0)
        pixmap.fill_path(path, Paint(color=(40, 44, 52, 237)), "winding", Transform.identity())
        inside = pixmap.data[7:27, 5:35]
        self.assertTrue(torch.equal(inside, torch.tensor([40, 44, 52, 237], dtype=torch.uint8).expand(20, 30, 4)))
        self.assertEqual(int((pixmap.data[:, :, 3] > 0).sum()), 600)

    def test_winding_fills_overlap_and_even_odd_leaves_hole(self) -> None:
        pb = PathBuilder()
        _square(pb, 0, 0, 20)
        _square(pb, 10, 10, 20)
        path = pb.finish()
        assert path is not None

        winding = Pixmap.new(32, 32)
        winding.fill_path(path, Paint(color=(255, 255, 255, 255)), "winding")
        even_odd = Pixmap.new(32, 32)
        even_odd.fill_path(path, Paint(color=(255, 255, 255, 255)), "even_odd")

        self.assertEqual(winding.pixel(15, 15), (255, 255, 255, 255))
        self.assertEqual(even_odd.pixel(15, 15), (0, 0, 0, 0))
        self.assertEqual(even_odd.pixel(5, 5), (255, 255, 255, 255))
        self.assertEqual(even_odd.pixel(25, 25), (255, 255, 255, 255))

    def test_scale_transform_multiplies_extent(self) -> None:
        pb = PathBuilder()
        _square(pb, 0, 0, 10)
        path = pb.finish()
        assert path is not None
        pixmap = Pixmap.new(30, 30)
        pixmap.fill_path(path, Paint(color=(0, 0, 255, 255)), "winding", Transform.from_scale(2.0, 2.0))
        self.assertEqual(_filled_extent(pixmap), (20, 20))
        self.assertEqual(pixmap.pixel(19, 19), (0, 0, 255, 255))
        self.assertEqual(pixmap.pixel(20, 20), (0, 0, 0, 0))

    def test_off_surface_path_is_noop(self) -> None:
        pb = PathBuilder()
        _square(pb, 100, 100, 10)
        path = pb.finish()
        assert path is not None
        pixmap = Pixmap.new(50, 50)
        before = pixmap.data.clone()
        pixmap.fill_path(path, Paint(color=(255, 0, 0, 255)))
        self.assertTrue(torch.equal(pixmap.data, before))

    def test_path_is_clipped_to_surface(self) -> None:
        pb = PathBuilder()
        _square(pb, -5, -5, 10)
        path = pb.finish()
        assert path is not None
        pixmap = Pixmap.new(8, 8)
        pixmap.fill_path(path, Paint(color=(255, 0, 0, 255)))
        self.assertEqual(int((pixmap.data[:, :, 3] > 0).sum()), 25)

    def test_translucent_paint_blends_over_opaque_pixels(self) -> None:
        pb = PathBuilder()
        _square(pb, 0, 0, 4)
        path = pb.finish()
        assert path is not None
        pixmap = Pixmap.new(4, 4)
        pixmap.fill((0, 0, 0, 255))
        pixmap.fill_path(path, Paint(color=(255, 0, 0, 128)))
        self.assertEqual(pixmap.pixel(1, 1), (128, 0, 0, 255))

    def test_fully_transparent_paint_changes_nothing(self) -> None:
        pb = PathBuilder()
        _square(pb, 0, 0, 4)
        path = pb.finish()
        assert path is not None
        pixmap = Pixmap.new(4, 4)
        pixmap.fill((1, 2, 3, 4))
        before = pixmap.data.clone()
        pixmap.fill_path(path, Paint(color=(255, 0, 0, 0)))
        self.assertTrue(torch.equal(pixmap.data, before))

    def test_anti_aliasing_produces_partial_edge_coverage(self) -> None:
        pb = PathBuilder()
        pb.move_to(0, 0)
        pb.line_to(10, 0)
        pb.line_to(0, 10)
        pb.close()
        path = pb.finish()
        assert path is not None

        smooth = Pixmap.new(12, 12)
        smooth.fill_path(path, Paint(color=(255, 255, 255, 255), anti_alias=True))
        alpha = smooth.pixel(4, 5)[3]
        self.assertGreater(alpha, 0)
        self.assertLess(alpha, 255)

        hard = Pixmap.new(12, 12)
        hard.fill_path(path, Paint(color=(255, 255, 255, 255), anti_alias=False))
        values = set(int(v) for v in torch.unique(hard.data[:, :, 3]).tolist())
        self.assertEqual(values, {0, 255})

    def test_row_chunks_respect_element_budget(self) -> None:
        for n_edges, n_columns in ((14, 200), (700, 2400), (5000, 8000)):
            rows = rows_per_chunk(n_edges, n_columns, AA_SUBSAMPLES)
            self.assertEqual(rows % AA_SUBSAMPLES, 0)
            self.assertLessEqual(rows * (n_edges + n_columns), 1 << 21)
        self.assertEqual(rows_per_chunk(1 << 22, 1 << 22, AA_SUBSAMPLES), AA_SUBSAMPLES)

    def test_save_png_round_trips_through_pillow(self) -> None:
        pixmap = Pixmap.new(6, 3)
        pixmap.fill((10, 20, 30, 255))
        with tempfile.TemporaryDirectory() as tmp:
            out = FilePath(tmp) / "frame.png"
            pixmap.save_png(out)
            with Image.open(out) as image:
                self.assertEqual(image.size, (6, 3))
                self.assertEqual(image.mode, "RGBA")
                self.assertEqual(image.getpixel((2, 1)), (10, 20, 30, 255))


if __name__ == "__main__":
    unittest.main()
