import logging
import sys
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

project_root = Path(__file__).parent.parent.absolute()
sys.path.insert(0, str(project_root))

from webdriver_bridge.exceptions import BridgeArgumentError
from webdriver_bridge.remote.atoms import Atoms
from webdriver_bridge.utils import (add_debug_log, log_operation_error,
                                    setup_logging)


class TestAtoms(unittest.TestCase):
    """Bundled script atoms"""

    def test_read_bundled_atom(self):
        source = Atoms().read("getAttribute")
        self.assertTrue(source.startswith("function(element, attribute)"))

    def test_unknown_atom(self):
        with self.assertRaises(BridgeArgumentError):
            Atoms().read("doesNotExist")

    def test_execute_uses_execute_script(self):
        bridge = MagicMock()
        bridge.execute_script.return_value = "v"
        atoms = Atoms()

        self.assertEqual(atoms.execute(bridge, "getAttribute", "el", "id"), "v")
        script, *args = bridge.execute_script.call_args[0]
        self.assertTrue(script.startswith("return (function"))
        self.assertTrue(script.endswith(").apply(null, arguments)"))
        self.assertEqual(args, ["el", "id"])


class TestLogging(unittest.TestCase):
    """Logging helpers"""

    def test_operation_error_logged_at_info(self):
        with self.assertLogs("webdriver_bridge.utils", level="INFO") as logs:
            log_operation_error("element_click", "stale", {"path": "/session/s/element/E/click"})
        self.assertIn(
            "Operation error - element_click: stale (path=/session/s/element/E/click)",
            logs.output[0],
        )

    def test_debug_log_group_defaults_to_caller(self):
        with self.assertLogs("webdriver_bridge.utils", level="DEBUG") as logs:
            add_debug_log("hello")
        self.assertIn("[test_debug_log_group_defaults_to_caller] hello", logs.output[0])

    def test_setup_logging_scoped_to_package(self):
        root = logging.getLogger()
        package_logger = logging.getLogger("webdriver_bridge")
        saved_root = (root.level, root.handlers[:])
        saved_pkg = (package_logger.level, package_logger.handlers[:])
        try:
            with patch.dict("os.environ", {"CI": "false"}):
                self.assertIs(setup_logging("WARNING"), package_logger)
                setup_logging("WARNING")
            self.assertEqual(package_logger.level, logging.WARNING)
            self.assertEqual(len(package_logger.handlers), len(saved_pkg[1]) + 1)
            self.assertEqual((root.level, root.handlers), saved_root)
        finally:
            for handler in package_logger.handlers[:]:
                package_logger.removeHandler(handler)
            for handler in saved_pkg[1]:
                package_logger.addHandler(handler)
            package_logger.setLevel(saved_pkg[0])

    def test_setup_logging_clamped_on_ci(self):
        package_logger = logging.getLogger("webdriver_bridge")
        saved = (package_logger.level, package_logger.handlers[:])
        try:
            with patch.dict("os.environ", {"CI": "true"}):
                setup_logging("ERROR")
            self.assertEqual(package_logger.level, logging.INFO)
        finally:
            for handler in package_logger.handlers[:]:
                package_logger.removeHandler(handler)
            for handler in saved[1]:
                package_logger.addHandler(handler)
            package_logger.setLevel(saved[0])


if __name__ == "__main__":
    unittest.main()
