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

import unittest
from datetime import datetime, timezone
from unittest.mock import MagicMock

from backend.store import InMemoryDocumentStore
from reactions import users

FIXED_NOW = datetime(2026, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


class HandleUserCreatedTest(unittest.TestCase):

    def setUp(self):
        self.store = InMemoryDocumentStore(clock=lambda: FIXED_NOW)
        self.store.seed("users", "u1", {"email": "fern@example.com"})

    def test_enriches_profile_with_defaults(self):
        outcome = users.handle_user_created(
            self.store, "u1", {"email": "fern@example.com"}
        )

        self.assertTrue(outcome.ok)
        self.assertEqual(
            self.store.get("users", "u1"),
            {
                "email": "fern@example.com",
                "createdAt": FIXED_NOW,
                "accountStatus": "active",
                "membershipLevel": "basic",
                "plantsAdded": 0,
                "notificationsEnabled": True,
                "profileComplete": False,
            },
        )

    def test_records_analytics_event(self):
        users.handle_user_created(
            self.store, "u1", {"email": "fern@example.com"}, event_id="evt-1"
        )

        self.assertEqual(
            self.store.documents("analytics"),
            {
                "evt-1": {
                    "eventType": "user_created",
                    "userId": "u1",
                    "timestamp": FIXED_NOW,
                    "userEmail": "fern@example.com",
                }
            },
        )

    def test_missing_email_is_recorded_as_not_available(self):
        self.store.seed("users", "u2", {})

        users.handle_user_created(self.store, "u2", {})

        (event,) = self.store.documents("analytics").values()
        self.assertEqual(event["userEmail"], "N/A")

    def test_redelivery_resets_counter_instead_of_accumulating(self):
        users.handle_user_created(self.store, "u1", {}, event_id="evt-1")
        self.store.update("users", "u1", {"plantsAdded": 3})

        outcome = users.handle_user_created(self.store, "u1", {}, event_id="evt-1")

        # The enrichment is an overwrite, so a redelivered event resets the count.
        self.assertEqual(self.store.get("users", "u1")["plantsAdded"], 0)
        self.assertTrue(outcome.ok)

    def test_redelivery_does_not_duplicate_analytics(self):
        users.handle_user_created(self.store, "u1", {}, event_id="evt-1")
        outcome = users.handle_user_created(self.store, "u1", {}, event_id="evt-1")

        self.assertEqual(len(self.store.documents("analytics")), 1)
        analytics_step = outcome.steps[1]
        self.assertEqual(analytics_step.step, "record_analytics")
        self.assertTrue(analytics_step.ok)
        self.assertTrue(analytics_step.skipped)

    def test_analytics_still_recorded_when_enrichment_fails(self):
        # No users/u9 document, so the update fails.
        outcome = users.handle_user_created(self.store, "u9", {"email": "x@example.com"})

        self.assertFalse(outcome.ok)
        self.assertEqual([s.step for s in outcome.failed_steps], ["enrich_profile"])
        self.assertEqual(len(self.store.documents("analytics")), 1)

    def test_store_errors_are_reported_not_raised(self):
        store = MagicMock()
        store.update.side_effect = RuntimeError("deadline exceeded")
        store.append.side_effect = RuntimeError("unavailable")

        outcome = users.handle_user_created(store, "u1", {})

        self.assertFalse(outcome.ok)
        self.assertEqual(
            [(s.step, s.error) for s in outcome.failed_steps],
            [("enrich_profile", "deadline exceeded"), ("record_analytics", "unavailable")],
        )


if __name__ == "__main__":
    unittest.main()
