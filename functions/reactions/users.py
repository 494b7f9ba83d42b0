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
"""Enriches newly created user profiles and records the signup event."""

from typing import Optional

from dacite import Config, from_dict
from firebase_functions import logger

from backend.store import DocumentStore
from reactions.steps import run_step
from shared.constants import UNKNOWN_EMAIL
from shared.firebase_constants import ANALYTICS_COLLECTION, USERS_COLLECTION
from shared.json_utils import convert_keys, to_document
from shared.types import (
    AnalyticsEvent,
    AnalyticsEventType,
    ReactionOutcome,
    UserDocument,
    UserProfileDefaults,
)


def handle_user_created(
    store: DocumentStore,
    user_id: str,
    user_data: Optional[dict],
    event_id: Optional[str] = None,
) -> ReactionOutcome:
    """
    Writes the default profile fields onto a new user document and appends a
    `user_created` analytics event.

    The defaults overwrite whatever is on the document, so a redelivered event
    resets `plantsAdded` to 0. The analytics event is keyed by `event_id` when
    one is given, which keeps redeliveries from appending duplicates.

    Args:
        store: The document store.
        user_id: The id of the created user document.
        user_data: The created document's fields, camelCase.
        event_id: The dispatcher's id for this event, if known.

    Returns:
        The outcome of both write steps. The analytics step runs even if the
        profile update failed.
    """
    user = from_dict(
        data_class=UserDocument,
        data=convert_keys(user_data or {}, "camel_to_snake"),
        config=Config(check_types=False),
    )
    email = user.email or UNKNOWN_EMAIL

    logger.info("=== New User Created ===")
    logger.info(f"User ID: {user_id}")
    logger.info(f"User Email: {email}")

    outcome = ReactionOutcome(document_id=user_id)

    defaults = UserProfileDefaults(created_at=store.now())
    outcome.steps.append(
        run_step(
            "enrich_profile",
            user_id,
            lambda: store.update(USERS_COLLECTION, user_id, to_document(defaults)),
        )
    )

    event = AnalyticsEvent(
        event_type=AnalyticsEventType.USER_CREATED,
        user_id=user_id,
        timestamp=store.now(),
        user_email=email,
    )
    outcome.steps.append(
        run_step(
            "record_analytics",
            user_id,
            lambda: store.append(
                ANALYTICS_COLLECTION, to_document(event), doc_id=event_id
            ),
        )
    )

    if outcome.ok:
        logger.info(f"✅ Successfully enriched user profile: {user_id}")
    return outcome
