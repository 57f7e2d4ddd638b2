import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))

from botstatus_core.config import AppConfig, load_config, save_config


class ConfigTests(unittest.TestCase):
    def test_load_default_when_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "missing.json"
            cfg = load_config(path)
            self.assertIsInstance(cfg, AppConfig)
            self.assertEqual(cfg.render.width, 1280)
            self.assertEqual(cfg.render.image_scheme, "base64")
            self.assertIsNone(cfg.render.font_path)
            self.assertIn("status", cfg.bot.command_keywords)

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            cfg = load_config(path)
            cfg.bot.name = "Gonebot"
            cfg.render.content_font_size = 30
            save_config(cfg, path)
            reloaded = load_config(path)
            self.assertEqual(reloaded.bot.name, "Gonebot")
            self.assertEqual(reloaded.render.content_font_size, 30)

    def test_normalizes_out_of_range_values(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "render": {"width": 10, "title_font_size": 9999, "image_scheme": ""},
                "telemetry": {"cpu_sample_ms": -1},
                "logging": {"level": "chatty"},
                "bot": {"command_keywords": ["  STATUS ", ""], "unknown": True},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.render.width, 640)
            self.assertEqual(cfg.render.title_font_size, 256)
            self.assertEqual(cfg.render.image_scheme, "base64")
            self.assertEqual(cfg.telemetry.cpu_sample_ms, 0)
            self.assertEqual(cfg.logging.level, "INFO")
            self.assertEqual(cfg.bot.command_keywords, ["status"])
            self.assertFalse(hasattr(cfg.bot, "unknown"))

    def test_unreadable_file_falls_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            self.assertEqual(load_config(path), AppConfig())


if __name__ == "__main__":
    unittest.main()
