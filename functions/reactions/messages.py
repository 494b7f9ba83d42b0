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
"""Tracks message engagement as likes change."""

from typing import Optional

from dacite import Config, from_dict
from firebase_functions import logger

from shared.constants import LIKES_MILESTONE
from shared.json_utils import convert_keys
from shared.types import LikesChange, MessageDocument


def _to_message(data: Optional[dict]) -> MessageDocument:
    return from_dict(
        data_class=MessageDocument,
        data=convert_keys(data or {}, "camel_to_snake"),
        config=Config(check_types=False),
    )


def _as_count(message_id: str, value) -> Optional[int]:
    """Reads a likes value as an int, or None when it is absent or not numeric."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warn(f"Message {message_id} has non-numeric likes: {value!r}")
        return None


def handle_message_updated(
    message_id: str, before_data: Optional[dict], after_data: Optional[dict]
) -> LikesChange:
    """
    Compares likes before and after an update and detects the message
    crossing the likes milestone. Performs no writes.
    """
    before = _to_message(before_data).likes
    after = _to_message(after_data).likes
    change = LikesChange(message_id=message_id, before=before, after=after)

    if before == after:
        return change

    change.changed = True
    logger.info(f"💖 Message {message_id} likes: {before} → {after}")

    after_count = _as_count(message_id, after)
    if after_count is None:
        return change

    before_count = _as_count(message_id, before) or 0
    if after_count >= LIKES_MILESTONE and before_count < LIKES_MILESTONE:
        change.milestone_reached = True
        # Detection only, nothing is sent yet.
        logger.info(
            f"🎉 Message {message_id} reached {LIKES_MILESTONE} likes milestone!"
        )

    return change
