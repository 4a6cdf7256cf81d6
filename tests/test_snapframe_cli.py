from __future__ import annotations

import contextlib
import io
import tempfile
import unittest
from pathlib import Path

from PIL import Image

import main


class RenderPanelCommandTests(unittest.TestCase):
    def test_render_panel_writes_scaled_png(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            out = Path(tmp) / "out" / "panel.png"
            code = main.main(
                ["render-panel", "--width", "40", "--height", "20", "--radius", "4", "--color", "#ff0000", "--scale", "2", "--out", str(out)]
            )
            self.assertEqual(code, 0)
            with Image.open(out) as image:
                self.assertEqual(image.size, (160, 120))
                self.assertEqual(image.getpixel((80, 60)), (255, 0, 0, 255))
                self.assertEqual(image.getpixel((0, 0)), (0, 0, 0, 0))

    def test_config_file_supplies_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config = Path(tmp) / "snapframe.toml"
            config.write_text("[panel]\nscale_factor = 1\npanel_radius_px = 0\n", encoding="utf-8")
            out = Path(tmp) / "panel.png"
            code = main.main(["render-panel", "--width", "10", "--height", "10", "--config", str(config), "--out", str(out)])
            self.assertEqual(code, 0)
            with Image.open(out) as image:
                self.assertEqual(image.size, (50, 50))
                self.assertEqual(image.getpixel((0, 0)), (40, 44, 52, 237))

    def test_invalid_color_exits_with_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            out = Path(tmp) / "panel.png"
            stderr = io.StringIO()
            with contextlib.redirect_stderr(stderr):
                code = main.main(["render-panel", "--color", "notacolor", "--out", str(out)])
            self.assertEqual(code, 2)
            self.assertIn("hex color", stderr.getvalue())
            self.assertFalse(out.exists())


    def test_non_finite_scale_exits_with_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            out = Path(tmp) / "panel.png"
            stderr = io.StringIO()
            with contextlib.redirect_stderr(stderr):
                code = main.main(["render-panel", "--scale", "inf", "--out", str(out)])
            self.assertEqual(code, 2)
            self.assertIn("scale_factor", stderr.getvalue())
            self.assertFalse(out.exists())

if __name__ == "__main__":
    unittest.main()
