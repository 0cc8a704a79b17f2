import sys
import unittest
from pathlib import Path

project_root = Path(__file__).parent.parent.absolute()
sys.path.insert(0, str(project_root))

from webdriver_bridge.exceptions import BridgeArgumentError
from webdriver_bridge.remote.capabilities import (Capabilities,
                                                  coerce_capabilities)


class TestCapabilities(unittest.TestCase):
    """Capability sets and presets"""

    def test_firefox_preset(self):
        caps = Capabilities.firefox()
        self.assertEqual(caps.browser_name, "firefox")
        self.assertEqual(caps.as_json(), {"browserName": "firefox", "marionette": True})

    def test_presets_are_independent(self):
        caps = Capabilities.from_preset("chrome")
        caps["browser_version"] = "120"
        self.assertIsNone(Capabilities.chrome()["browser_version"])

    def test_unknown_preset(self):
        with self.assertRaises(BridgeArgumentError):
            Capabilities.from_preset("netscape")

    def test_json_create(self):
        caps = Capabilities.json_create(
            {
                "browserName": "firefox",
                "browserVersion": "128.0",
                "acceptInsecureCerts": False,
                "moz:profile": "/tmp/p",
            }
        )
        self.assertEqual(caps.browser_version, "128.0")
        self.assertFalse(caps["accept_insecure_certs"])
        self.assertEqual(caps["moz:profile"], "/tmp/p")
        self.assertEqual(caps.as_json()["moz:profile"], "/tmp/p")

    def test_json_create_empty(self):
        self.assertIsNone(Capabilities.json_create(None).browser_name)

    def test_none_values_are_not_sent(self):
        caps = Capabilities(browser_name="chrome", proxy=None)
        self.assertEqual(caps.as_json(), {"browserName": "chrome"})

    def test_copy_is_independent(self):
        caps = Capabilities(browser_name="firefox", **{"moz:profile": "/tmp/p"})
        clone = caps.copy()
        clone["marionette"] = True
        self.assertEqual(clone["moz:profile"], "/tmp/p")
        self.assertNotIn("marionette", caps)


def test_coerce_capabilities():
    caps = Capabilities.chrome()
    assert coerce_capabilities(caps) is caps
    assert coerce_capabilities("edge").browser_name == "MicrosoftEdge"
    assert coerce_capabilities({"browserName": "safari"}).browser_name == "safari"
    try:
        coerce_capabilities(42)
    except BridgeArgumentError:
        pass
    else:
        raise AssertionError("42 accepted as capabilities")


if __name__ == "__main__":
    unittest.main()
