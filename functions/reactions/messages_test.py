# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from reactions import messages


class HandleMessageUpdatedTest(unittest.TestCase):

    @patch("reactions.messages.logger")
    def test_crossing_ten_is_a_milestone(self, mock_logger):
        change = messages.handle_message_updated("m1", {"likes": 9}, {"likes": 10})

        self.assertTrue(change.changed)
        self.assertTrue(change.milestone_reached)
        logged = " ".join(str(c.args[0]) for c in mock_logger.info.call_args_list)
        self.assertIn("9 → 10", logged)
        self.assertIn("milestone", logged)

    @patch("reactions.messages.logger")
    def test_already_past_milestone(self, mock_logger):
        change = messages.handle_message_updated("m1", {"likes": 10}, {"likes": 11})

        self.assertTrue(change.changed)
        self.assertFalse(change.milestone_reached)
        mock_logger.info.assert_called_once()

    @patch("reactions.messages.logger")
    def test_unchanged_likes_do_nothing(self, mock_logger):
        change = messages.handle_message_updated(
            "m1", {"likes": 5, "text": "hi"}, {"likes": 5, "text": "edited"}
        )

        self.assertFalse(change.changed)
        self.assertFalse(change.milestone_reached)
        mock_logger.info.assert_not_called()

    def test_first_likes_from_missing_field(self):
        change = messages.handle_message_updated("m1", {}, {"likes": 12})

        self.assertTrue(change.changed)
        self.assertTrue(change.milestone_reached)

    def test_dropping_below_milestone_is_not_a_milestone(self):
        change = messages.handle_message_updated("m1", {"likes": 10}, {"likes": 9})

        self.assertTrue(change.changed)
        self.assertFalse(change.milestone_reached)

    def test_milestone_is_written_to_the_log_stream(self):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            messages.handle_message_updated("m1", {"likes": 9}, {"likes": 10})

        output = stdout.getvalue() + stderr.getvalue()
        self.assertIn("Message m1 likes: 9", output)
        self.assertIn("reached 10 likes milestone", output)

    def test_numeric_string_likes_are_counted(self):
        change = messages.handle_message_updated("m1", {"likes": "9"}, {"likes": "10"})

        self.assertTrue(change.changed)
        self.assertTrue(change.milestone_reached)

    @patch("reactions.messages.logger")
    def test_non_numeric_likes_skip_the_milestone_check(self, mock_logger):
        change = messages.handle_message_updated("m1", {"likes": 9}, {"likes": "lots"})

        self.assertTrue(change.changed)
        self.assertFalse(change.milestone_reached)
        mock_logger.warn.assert_called_once()
        self.assertIn("lots", mock_logger.warn.call_args.args[0])


if __name__ == "__main__":
    unittest.main()
