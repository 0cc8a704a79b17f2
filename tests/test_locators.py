import sys
import unittest
from pathlib import Path

project_root = Path(__file__).parent.parent.absolute()
sys.path.insert(0, str(project_root))

from webdriver_bridge.exceptions import BridgeArgumentError
from webdriver_bridge.remote.locators import (Locator, convert_locator,
                                              escape_css, extract_locator)


class TestConvertLocator(unittest.TestCase):
    """Locator strategy translation"""

    def test_translations(self):
        self.assertEqual(convert_locator("class name", "foo"), ("css selector", ".foo"))
        self.assertEqual(convert_locator("id", "my-id"), ("css selector", "#my\\-id"))
        self.assertEqual(convert_locator("name", "q"), ("css selector", "*[name='q']"))
        self.assertEqual(convert_locator("tag name", "DIV"), ("css selector", "DIV"))

    def test_plain_id(self):
        self.assertEqual(convert_locator("id", "main"), ("css selector", "#main"))

    def test_legal_strategies_pass_through(self):
        for how, what in [
            ("css selector", "a.b"),
            ("xpath", "//a[@id='x']"),
            ("link text", "Home"),
            ("partial link text", "Ho"),
        ]:
            with self.subTest(how=how):
                self.assertEqual(convert_locator(how, what), Locator(how, what))

    def test_name_with_quote(self):
        self.assertEqual(
            convert_locator("name", "a'b"), ("css selector", "*[name='a\\'b']")
        )


class TestEscapeCss(unittest.TestCase):
    """CSS identifier escaping"""

    def test_punctuation(self):
        self.assertEqual(escape_css("a.b"), "a\\.b")

    def test_every_reserved_character(self):
        reserved = "'\"\\#.:;,!?+<>=~*^$|%&@`{}-[]()"
        escaped = escape_css(reserved)
        self.assertEqual(escaped, "".join("\\" + c for c in reserved))

    def test_plain_value_unchanged(self):
        self.assertEqual(escape_css("foo_bar"), "foo_bar")
        self.assertEqual(escape_css(""), "")

    def test_leading_digit_numeric_escape(self):
        # Decimal 30 + digit, not the hexadecimal \3X escape of the CSS
        # syntax. Kept literally; possibly unintentional upstream behavior.
        self.assertEqual(escape_css("1foo"), "\\31 foo")
        self.assertEqual(escape_css("9"), "\\39 ")
        self.assertEqual(escape_css("0a"), "\\30 a")

    def test_leading_digit_after_punctuation_pass(self):
        self.assertEqual(escape_css("5.x"), "\\35 \\.x")

    def test_digit_not_first(self):
        self.assertEqual(escape_css("a1"), "a1")


def test_extract_locator_forms():
    assert extract_locator("css selector", "a") == Locator("css selector", "a")
    assert extract_locator(css="a") == Locator("css selector", "a")
    assert extract_locator(class_name="btn") == Locator("class name", "btn")
    assert extract_locator(xpath="//a") == Locator("xpath", "//a")


def test_extract_locator_rejects_bad_input():
    for args, kwargs in [((), {"colour": "red"}), (("css selector",), {}), ((), {})]:
        try:
            extract_locator(*args, **kwargs)
        except BridgeArgumentError:
            continue
        raise AssertionError(f"no error for {args!r} {kwargs!r}")


if __name__ == "__main__":
    unittest.main()
