import unittest
import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from streamlit.testing.v1 import AppTest

APP_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'main.py'))


def _page_text(at):
    return "\n".join(m.value for m in at.markdown)


class TestTimeLabPage(unittest.TestCase):

    def setUp(self):
        self.at = AppTest.from_file(APP_PATH, default_timeout=30)
        self.at.run()

    def test_renders_defaults(self):
        at = self.at
        self.assertFalse(at.exception)
        self.assertEqual(len(at.number_input), 6)
        self.assertEqual([n.label for n in at.number_input][:2], ["Seconds Per Minute", "Minutes Per Hour"])
        self.assertEqual(at.number_input[2].value, 24.0)
        self.assertEqual([s.value for s in at.selectbox], ["day", "hour"])
        self.assertIn('<p class="convert-value">24</p>', _page_text(at))

    def test_editing_hours_per_day(self):
        at = self.at
        at.number_input[2].set_value(30.0).run()
        self.assertFalse(at.exception)
        self.assertEqual(at.session_state["time_units"].hours_per_day, 30)
        text = _page_text(at)
        self.assertIn("Your day is 6 hours longer than Earth's day", text)
        self.assertIn('<p class="convert-value">30</p>', text)

    def test_changing_converter_units(self):
        at = self.at
        at.selectbox[0].set_value("week").run()
        self.assertFalse(at.exception)
        self.assertIn('<p class="convert-value">168</p>', _page_text(at))

    def test_compare_and_guide_modes(self):
        at = self.at
        at.sidebar.radio[0].set_value("📊  Compare").run()
        self.assertFalse(at.exception)
        self.assertEqual(len(at.metric), 6)
        at.sidebar.radio[0].set_value("📖  Guide").run()
        self.assertFalse(at.exception)


if __name__ == '__main__':
    unittest.main()
