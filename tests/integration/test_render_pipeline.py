import sys
import unittest
from dataclasses import replace
from io import BytesIO
from pathlib import Path
from unittest.mock import patch

from PIL import Image, ImageFont

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "telemetry"))

from botstatus_renderer import DashboardRenderer, MetricKind, RenderResources, decode_image_ref, load_resources
from botstatus_renderer.composer import Composer
from botstatus_renderer.encoding import RenderEncodingError
from botstatus_telemetry.models import DiskEntry, SystemSnapshot, Uptime


def _snapshot(**overrides) -> SystemSnapshot:
    base = SystemSnapshot(
        cpu_used_percent=55.0,
        cpu_cores=8,
        cpu_info="Example CPU 8-Core",
        cpu_load1=1.25,
        cpu_load5=0.75,
        cpu_load15=0.5,
        mem_all_mb=16384,
        mem_used_mb=3276,
        mem_used_percent=20.0,
        disks=(DiskEntry(name="/", total_mb=102400, used_mb=51200, used_percent=50.0),),
        uptime=Uptime(days=3, hours=4, minutes=5, seconds=6),
        bot_uptime=Uptime(hours=2, minutes=30),
        os="linux",
        arch="amd64",
        backend="online",
        sent_total=184,
        received_total=467,
    )
    return replace(base, **overrides)


def _black_resources() -> RenderResources:
    return RenderResources(
        title_font=ImageFont.load_default(size=48),
        content_font=ImageFont.load_default(size=36),
        background=Image.new("RGBA", (1280, 1280), (0, 0, 0, 255)),
    )


class RenderPipelineTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.renderer = DashboardRenderer(load_resources(), bot_name="Gonebot")

    def test_output_round_trips_to_png_of_computed_size(self):
        snapshot = _snapshot()
        ref = self.renderer.render(snapshot)
        self.assertTrue(ref.startswith("base64://"))

        image = Image.open(BytesIO(decode_image_ref(ref)))
        geometry = self.renderer.geometry(snapshot)
        self.assertEqual(image.format, "PNG")
        self.assertEqual(image.size, (1280, geometry.total_height))

    def test_render_is_idempotent(self):
        snapshot = _snapshot()
        self.assertEqual(self.renderer.render(snapshot), self.renderer.render(snapshot))

    def test_tall_canvas_scales_background(self):
        disks = tuple(DiskEntry(f"/mnt/{i}", 1024, 512, 50.0) for i in range(8))
        snapshot = _snapshot(disks=disks)
        geometry = self.renderer.geometry(snapshot)
        self.assertGreater(geometry.total_height, 1280)

        image = self.renderer.render_image(snapshot)
        self.assertEqual(image.size, (1280, geometry.total_height))
        self.assertEqual(len(geometry.disks), 8)

    def test_large_background_is_cropped_without_scaling(self):
        background = Image.new("RGBA", (2000, 2000), (0, 0, 0, 255))
        background.putpixel((1000, 1000), (255, 255, 255, 255))
        resources = RenderResources(
            title_font=ImageFont.load_default(size=48),
            content_font=ImageFont.load_default(size=36),
            background=background,
        )
        renderer = DashboardRenderer(resources)

        surface = renderer._background(1000)
        self.assertEqual(surface.size, (1280, 1000))
        # Centre crop: left = (2000 - 1280) // 2, top = (2000 - 1000) // 2.
        self.assertEqual(surface.getpixel((640, 500)), (255, 255, 255, 255))
        self.assertEqual(surface.getpixel((641, 500)), (0, 0, 0, 255))
        self.assertEqual(surface.getpixel((640, 501)), (0, 0, 0, 255))

    def test_no_disks_renders_fixed_sections_only(self):
        snapshot = _snapshot(disks=())
        geometry = self.renderer.geometry(snapshot)
        image = self.renderer.render_image(snapshot)
        self.assertEqual(image.size, (1280, geometry.fixed_height))

    def test_scenario_bar_colors(self):
        renderer = DashboardRenderer(_black_resources(), bot_name="Gonebot")
        snapshot = _snapshot()
        geometry = renderer.geometry(snapshot)
        image = renderer.render_image(snapshot)

        def fill_pixel(meter):
            x = meter.bar.x + int(meter.bar.w * meter.percent / 200)
            return image.getpixel((x, meter.bar.y + meter.bar.h // 2))

        r, g, b = fill_pixel(geometry.cpu)
        self.assertTrue(r > g > b, "cpu bar should be warning orange")

        r, g, b = fill_pixel(geometry.memory)
        self.assertTrue(g > r > b, "memory bar should be success green")

        # 50% sits in the [40, 80) disk band.
        self.assertEqual(len(geometry.disks), 1)
        r, g, b = fill_pixel(geometry.disks[0])
        self.assertTrue(r > g > b, "disk bar should be warning orange")

    def test_scenario_progress_bar_calls(self):
        colors = []
        original = Composer.draw_progress_bar

        def spy(composer, rect, percent, kind):
            color = original(composer, rect, percent, kind)
            colors.append((kind, color))
            return color

        with patch.object(Composer, "draw_progress_bar", spy):
            self.renderer.render(_snapshot())

        palette = self.renderer.palette
        self.assertEqual(
            colors,
            [
                (MetricKind.CPU, palette.warning),
                (MetricKind.MEMORY, palette.success),
                (MetricKind.DISK, palette.warning),
            ],
        )

    def test_encoding_failure_is_reported(self):
        with patch.object(Image.Image, "save", side_effect=OSError("disk full")):
            with self.assertRaises(RenderEncodingError):
                self.renderer.render(_snapshot())

    def test_preview_data_url(self):
        self.assertTrue(self.renderer.preview_data_url(_snapshot()).startswith("data:image/png;base64,"))


if __name__ == "__main__":
    unittest.main()
