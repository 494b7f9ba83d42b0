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

# Cloud functions for the LeafLine backend - callables + Firestore reactions.
#
# This file containing Python cloud functions must be named main.py.
# See https://cloud.google.com/run/docs/write-functions#python for more info.

# Standard library imports
from dataclasses import asdict
from typing import Optional

# Third-party library imports
from dacite import from_dict, Config
from firebase_admin import initialize_app, firestore
from firebase_functions import https_fn, logger, options
from firebase_functions.firestore_fn import (
    on_document_created,
    on_document_updated,
    Event,
    Change,
    DocumentSnapshot,
)

# Local application imports
from backend.config import get_settings
from backend.store import DocumentStore, create_document_store
from greetings import greetings
from plant_data import plant_data
from reactions import messages, plants, users
from shared.api import PlantDataRequest, SayHelloRequest
from shared.errors import (
    InvalidArgumentError,
    ReactionFailedError,
    UnauthenticatedError,
)
from shared.firebase_constants import (
    MESSAGES_COLLECTION,
    PLANTS_COLLECTION,
    USERS_COLLECTION,
)
from shared.json_utils import convert_keys
from shared.types import ReactionOutcome

settings = get_settings()

initialize_app()

_store: Optional[DocumentStore] = None


def _get_store() -> DocumentStore:
    """Returns the store for this process, creating it on first use."""
    global _store
    if _store is None:
        _store = create_document_store(settings, firestore.client)
    return _store


def _request_data(req: https_fn.CallableRequest) -> dict:
    data = req.data if isinstance(req.data, dict) else {}
    return convert_keys(data, "camel_to_snake")


@https_fn.on_call(memory=options.MemoryOption(settings.memory_mb))
def say_hello(req: https_fn.CallableRequest) -> dict:
    """
    Returns a personalized greeting.

    Args:
        req (https_fn.CallableRequest): The request, optionally containing a name.

    Returns:
        A dictionary representation of the SayHelloResult object.
    """
    request = from_dict(
        data_class=SayHelloRequest,
        data=_request_data(req),
        config=Config(check_types=False),
    )
    result = greetings.say_hello(request)
    return convert_keys(asdict(result), "snake_to_camel")


@https_fn.on_call(memory=options.MemoryOption(settings.memory_mb))
def process_plant_data(req: https_fn.CallableRequest) -> dict:
    """
    Processes plant information for an authenticated user and returns care
    recommendations.

    Args:
        req (https_fn.CallableRequest): The request, containing plantName,
            wateringFrequency and an optional sunlightLevel.

    Returns:
        A dictionary representation of the ProcessPlantDataResult object.
    """
    request = from_dict(
        data_class=PlantDataRequest,
        data=_request_data(req),
        config=Config(check_types=False),
    )
    caller_uid = req.auth.uid if req.auth else None

    try:
        result = plant_data.process_plant_data(request, caller_uid)
    except UnauthenticatedError as e:
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.UNAUTHENTICATED, str(e)
        )
    except InvalidArgumentError as e:
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.INVALID_ARGUMENT, str(e)
        )

    return convert_keys(asdict(result), "snake_to_camel")


def _report_outcome(reaction: str, outcome: ReactionOutcome) -> None:
    """
    Logs failed write steps. Raises only when failed reactions are configured
    to be retried, so the dispatcher redelivers the event.
    """
    if outcome.ok:
        return

    failed_steps = [step.step for step in outcome.failed_steps]
    logger.error(
        f"❌ Error processing {reaction} for {outcome.document_id}",
        marker="reaction_failed",
        reaction=reaction,
        document_id=outcome.document_id,
        failed_steps=failed_steps,
    )
    if settings.retry_failed_reactions:
        raise ReactionFailedError(reaction, outcome.document_id, failed_steps)


def _react_to_new_user(event: Event[DocumentSnapshot | None]) -> None:
    if event.data is None:
        return
    outcome = users.handle_user_created(
        _get_store(),
        event.params["userId"],
        event.data.to_dict(),
        event_id=event.id,
    )
    _report_outcome("new_user_created", outcome)


def _react_to_new_plant(event: Event[DocumentSnapshot | None]) -> None:
    if event.data is None:
        return
    outcome = plants.handle_plant_added(
        _get_store(), event.params["plantId"], event.data.to_dict()
    )
    _report_outcome("plant_added", outcome)


def _react_to_message_update(event: Event[Change[DocumentSnapshot | None]]) -> None:
    if event.data is None:
        return
    before = event.data.before.to_dict() if event.data.before else None
    after = event.data.after.to_dict() if event.data.after else None
    messages.handle_message_updated(event.params["messageId"], before, after)


@on_document_created(
    document=USERS_COLLECTION + "/{userId}",
    retry=settings.retry_failed_reactions,
)
def new_user_created(event: Event[DocumentSnapshot | None]) -> None:
    """Enriches a newly created user profile and logs a signup analytics event."""
    _react_to_new_user(event)


@on_document_created(
    document=PLANTS_COLLECTION + "/{plantId}",
    retry=settings.retry_failed_reactions,
)
def plant_added(event: Event[DocumentSnapshot | None]) -> None:
    """Updates the owner's plant count and backfills plant metadata."""
    _react_to_new_plant(event)


@on_document_updated(document=MESSAGES_COLLECTION + "/{messageId}")
def message_updated(event: Event[Change[DocumentSnapshot | None]]) -> None:
    """Tracks engagement when a message's likes change."""
    _react_to_message_update(event)
