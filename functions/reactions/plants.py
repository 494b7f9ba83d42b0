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
"""Updates owner statistics and plant metadata when a plant is added."""

from typing import Optional

from dacite import Config, from_dict
from firebase_functions import logger

from backend.store import DocumentStore
from reactions.steps import run_step
from shared.constants import UNKNOWN_PLANT_NAME
from shared.firebase_constants import (
    LAST_PLANT_ADDED_AT_FIELD,
    PLANTS_ADDED_FIELD,
    PLANTS_COLLECTION,
    USERS_COLLECTION,
)
from shared.json_utils import convert_keys, to_document
from shared.types import PlantDocument, PlantMetadataBackfill, ReactionOutcome


def handle_plant_added(
    store: DocumentStore, plant_id: str, plant_data: Optional[dict]
) -> ReactionOutcome:
    """
    Counts the new plant against its owner and backfills `createdAt` and
    `status` when the client did not set them.

    Both steps are safe to redeliver except the owner count, which is an
    atomic increment and counts each delivery.
    """
    plant = from_dict(
        data_class=PlantDocument,
        data=convert_keys(plant_data or {}, "camel_to_snake"),
        config=Config(check_types=False),
    )

    logger.info("=== New Plant Added ===")
    logger.info(f"Plant ID: {plant_id}")
    logger.info(f"Plant Name: {plant.name or UNKNOWN_PLANT_NAME}")

    outcome = ReactionOutcome(document_id=plant_id)

    if plant.user_id:
        owner_id = plant.user_id
        result = run_step(
            "increment_owner_count",
            plant_id,
            lambda: store.increment(
                USERS_COLLECTION,
                owner_id,
                PLANTS_ADDED_FIELD,
                1,
                extra_fields={LAST_PLANT_ADDED_AT_FIELD: store.now()},
            ),
        )
        outcome.steps.append(result)
        if result.ok:
            logger.info(f"📊 Updated plant count for user: {owner_id}")

    if not plant.created_at:
        backfill = PlantMetadataBackfill(created_at=store.now())
        outcome.steps.append(
            run_step(
                "backfill_metadata",
                plant_id,
                lambda: store.update(PLANTS_COLLECTION, plant_id, to_document(backfill)),
            )
        )

    if outcome.ok:
        logger.info(f"✅ Successfully processed plant: {plant_id}")
    return outcome
