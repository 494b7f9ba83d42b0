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
from datetime import datetime, timezone

from greetings import greetings
from shared.api import SayHelloRequest

FIXED_NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


class SayHelloTest(unittest.TestCase):

    def test_greets_by_name(self):
        result = greetings.say_hello(SayHelloRequest(name="Fern"), clock=lambda: FIXED_NOW)

        self.assertEqual(result.message, "Hello, Fern! Welcome to LeafLine 🌿")
        self.assertEqual(result.timestamp, "2026-01-15T12:00:00+00:00")
        self.assertTrue(result.success)

    def test_defaults_to_user_when_name_missing(self):
        result = greetings.say_hello(SayHelloRequest())

        self.assertIn("User", result.message)
        self.assertTrue(result.success)

    def test_empty_name_counts_as_missing(self):
        result = greetings.say_hello(SayHelloRequest(name=""))

        self.assertEqual(result.message, "Hello, User! Welcome to LeafLine 🌿")

    def test_logs_name_and_timestamp(self):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            greetings.say_hello(SayHelloRequest(name="Fern"), clock=lambda: FIXED_NOW)

        output = stdout.getvalue() + stderr.getvalue()
        self.assertIn("sayHello called for: Fern", output)
        self.assertIn("2026-01-15T12:00:00+00:00", output)


if __name__ == "__main__":
    unittest.main()
