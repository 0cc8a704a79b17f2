import sys
import unittest
from pathlib import Path

project_root = Path(__file__).parent.parent.absolute()
sys.path.insert(0, str(project_root))

from webdriver_bridge.exceptions import BridgeArgumentError, UnknownCommandError
from webdriver_bridge.remote.commands import (LEGACY_COMMANDS, W3C_COMMANDS,
                                              Command, lookup)


class TestCommandTables(unittest.TestCase):
    """Command registry lookups"""

    def test_wire_examples(self):
        expected = {
            "new_session": ("post", "/session"),
            "get": ("post", "/session/:session_id/url"),
            "find_element": ("post", "/session/:session_id/element"),
            "find_child_element": ("post", "/session/:session_id/element/:id/element"),
            "get_element_text": ("get", "/session/:session_id/element/:id/text"),
            "delete_session": ("delete", "/session/:session_id"),
            "set_timeout": ("post", "/session/:session_id/timeouts"),
        }
        for name, (verb, path) in expected.items():
            with self.subTest(command=name):
                self.assertEqual(lookup(name), Command(name, verb, path))

    def test_shared_commands_come_from_legacy_table(self):
        self.assertIs(lookup("status"), LEGACY_COMMANDS["status"])
        self.assertIs(lookup("is_element_displayed"), LEGACY_COMMANDS["is_element_displayed"])
        self.assertNotIn("status", W3C_COMMANDS)
        self.assertNotIn("is_element_displayed", W3C_COMMANDS)
        self.assertEqual(lookup("status").path, "/status")

    def test_other_commands_come_from_w3c_table(self):
        for name in W3C_COMMANDS:
            with self.subTest(command=name):
                self.assertIs(lookup(name), W3C_COMMANDS[name])

    def test_unknown_command(self):
        with self.assertRaises(UnknownCommandError) as ctx:
            lookup("launch_rocket")
        self.assertIn("launch_rocket", str(ctx.exception))
        self.assertIsInstance(ctx.exception, BridgeArgumentError)
        self.assertIsInstance(ctx.exception, ValueError)

    def test_tables_are_read_only(self):
        with self.assertRaises(TypeError):
            W3C_COMMANDS["get"] = Command("get", "get", "/nowhere")  # type: ignore[index]
        with self.assertRaises(TypeError):
            LEGACY_COMMANDS["status"] = Command("status", "post", "/x")  # type: ignore[index]

    def test_verbs_and_paths_are_well_formed(self):
        for table in (W3C_COMMANDS, LEGACY_COMMANDS):
            for name, command in table.items():
                with self.subTest(command=name):
                    self.assertIn(command.verb, ("get", "post", "delete"))
                    self.assertTrue(command.path.startswith("/"))
                    self.assertEqual(command.name, name)


if __name__ == "__main__":
    unittest.main()
