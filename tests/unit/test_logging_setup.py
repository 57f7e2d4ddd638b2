import faulthandler
import json
import logging
import sys
import tempfile
import threading
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))

from botstatus_core.logging_setup import JsonFormatter, get_logger, install_crash_hooks


class JsonFormatterTests(unittest.TestCase):
    def test_event_and_crash_id_are_carried(self):
        record = logging.LogRecord("botstatus.test", logging.CRITICAL, __file__, 1, "boom", None, None)
        record.event = "uncaught_exception"
        record.crash_id = "abc"
        payload = json.loads(JsonFormatter().format(record))
        self.assertEqual(payload["msg"], "boom")
        self.assertEqual(payload["event"], "uncaught_exception")
        self.assertEqual(payload["crash_id"], "abc")

    def test_child_logger_names(self):
        self.assertEqual(get_logger().name, "botstatus")
        self.assertEqual(get_logger("command").name, "botstatus.command")


class CrashHookTests(unittest.TestCase):
    def setUp(self):
        self.saved = (sys.excepthook, threading.excepthook)

    def tearDown(self):
        faulthandler.disable()
        sys.excepthook, threading.excepthook = self.saved

    def test_uncaught_exception_is_logged_with_crash_id(self):
        with tempfile.TemporaryDirectory() as tmp:
            install_crash_hooks(directory=Path(tmp))
            self.assertTrue((Path(tmp) / "fault.log").exists())
            self.assertIsNot(sys.excepthook, self.saved[0])

            try:
                raise RuntimeError("render loop died")
            except RuntimeError:
                exc_info = sys.exc_info()
            with self.assertLogs("botstatus", level="CRITICAL") as logs:
                sys.excepthook(*exc_info)
            faulthandler.disable()

        record = logs.records[0]
        self.assertEqual(record.event, "uncaught_exception")
        self.assertIn(record.crash_id, record.getMessage())

    def test_thread_exception_is_logged(self):
        with tempfile.TemporaryDirectory() as tmp:
            install_crash_hooks(directory=Path(tmp))
            with self.assertLogs("botstatus", level="CRITICAL") as logs:
                worker = threading.Thread(target=lambda: 1 / 0)
                worker.start()
                worker.join()
            faulthandler.disable()

        self.assertEqual(logs.records[0].event, "thread_exception")


if __name__ == "__main__":
    unittest.main()
