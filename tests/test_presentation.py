import unittest

from emotion_client.models import (
    Failed,
    Idle,
    PredictionResult,
    ReachabilityStatus,
    Submitting,
    Succeeded,
    ViewState,
)
from emotion_client.presentation import ENDPOINT_HINT, bar, render, render_result


class TestBar(unittest.TestCase):
    def test_width_follows_probability(self):
        self.assertEqual(bar(0.8, True, width=10), "████████░░")
        self.assertEqual(bar(0.5, False, width=10), "▒▒▒▒▒░░░░░")

    def test_zero_probability_keeps_a_sliver(self):
        self.assertEqual(bar(0.0, False, width=50), "▒" + "░" * 49)
        self.assertEqual(bar(0.0, False, width=10), "▒" + "░" * 9)

    def test_full_bar(self):
        self.assertEqual(bar(1.0, True, width=4), "████")


class TestRender(unittest.TestCase):
    def _view(self, submission=None, endpoint="https://api.example.com",
              reachability=ReachabilityStatus.CLEAR, warning=""):
        return ViewState(
            endpoint=endpoint,
            submission=submission or Idle(),
            reachability=reachability,
            warning=warning,
        )

    def test_result_block(self):
        result = PredictionResult("happy", {"happy": 0.8, "sad": 0.2}, tf_available=True)
        lines = render_result(result, width=10)

        self.assertEqual(lines[0], "Detected emotion: happy")
        self.assertEqual(lines[1], "  Happy   80.0%  ████████░░")
        self.assertEqual(lines[2], "  Sad     20.0%  ▒▒░░░░░░░░")
        self.assertEqual(lines[3], "TF available: true")

    def test_tf_flag_missing(self):
        lines = render_result(PredictionResult("calm", {}), width=10)
        self.assertEqual(lines, ["Detected emotion: calm", "TF available: undefined"])

    def test_loading(self):
        text = render(self._view(Submitting("abc", "https://api.example.com")))
        self.assertIn("Analyzing…", text)
        self.assertNotIn("Error:", text)

    def test_error(self):
        text = render(self._view(Failed("Internal error")))
        self.assertIn("Error: Internal error", text)
        self.assertNotIn("Detected emotion", text)

    def test_success(self):
        result = PredictionResult("happy", {"happy": 0.8, "sad": 0.2})
        text = render(self._view(Succeeded(result)))
        self.assertIn("Detected emotion: happy", text)
        self.assertIn("80.0%", text)

    def test_warning_shown_next_to_result(self):
        result = PredictionResult("happy", {"happy": 1.0})
        text = render(self._view(
            Succeeded(result),
            reachability=ReachabilityStatus.WARNING,
            warning="Backend not reachable. Please verify the Backend URL.",
        ))
        self.assertIn("Warning: Backend not reachable.", text)
        self.assertIn("Detected emotion: happy", text)

    def test_empty_endpoint_hint(self):
        text = render(self._view(endpoint="", reachability=ReachabilityStatus.UNKNOWN))
        self.assertIn("Backend URL: (not set)", text)
        self.assertIn(ENDPOINT_HINT, text)


if __name__ == "__main__":
    unittest.main()
