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
"""Validates plant data from the app and derives care recommendations."""

import random
from datetime import datetime, timezone
from typing import Callable, List, Optional

from firebase_functions import logger

from shared.api import (
    PlantCareInput,
    PlantDataRequest,
    ProcessedPlantData,
    ProcessPlantDataResult,
)
from shared.constants import (
    HEALTH_SCORE_MAX,
    HEALTH_SCORE_MIN,
    MAX_WATERING_FREQUENCY,
    MIN_WATERING_FREQUENCY,
    PLANT_DATA_PROCESSED_MESSAGE,
    RECOMMEND_LESS_SUNLIGHT,
    RECOMMEND_MORE_SUNLIGHT,
    RECOMMEND_WATER_LESS,
    RECOMMEND_WATER_MORE,
)
from shared.errors import InvalidArgumentError, UnauthenticatedError
from shared.types import SunlightLevel


def _parse_watering_frequency(value) -> float | int:
    if isinstance(value, bool):
        raise InvalidArgumentError("Watering frequency must be a number.")
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            parsed = float(value)
        except ValueError:
            pass
        else:
            # "3" echoes back as 3.
            return int(parsed) if parsed.is_integer() else parsed
    raise InvalidArgumentError("Watering frequency must be a number.")


def validate_plant_data(request: PlantDataRequest) -> PlantCareInput:
    """
    Checks the required fields of a plant data request.

    Raises:
        InvalidArgumentError: If the plant name or watering frequency is
            missing, empty, zero, or the frequency is not numeric.
    """
    if not request.plant_name or not request.watering_frequency:
        raise InvalidArgumentError("Plant name and watering frequency are required.")

    watering_frequency = _parse_watering_frequency(request.watering_frequency)
    if not watering_frequency:
        raise InvalidArgumentError("Plant name and watering frequency are required.")

    return PlantCareInput(
        plant_name=str(request.plant_name),
        watering_frequency=watering_frequency,
        sunlight_level=request.sunlight_level or SunlightLevel.MEDIUM,
    )


def build_recommendations(plant: PlantCareInput) -> List[str]:
    recommendations = []

    if plant.watering_frequency < MIN_WATERING_FREQUENCY:
        recommendations.append(RECOMMEND_WATER_MORE)
    elif plant.watering_frequency > MAX_WATERING_FREQUENCY:
        recommendations.append(RECOMMEND_WATER_LESS)

    if plant.sunlight_level == SunlightLevel.LOW:
        recommendations.append(RECOMMEND_MORE_SUNLIGHT)
    elif plant.sunlight_level == SunlightLevel.HIGH:
        recommendations.append(RECOMMEND_LESS_SUNLIGHT)

    return recommendations


def health_score(rng: Optional[random.Random] = None) -> int:
    # Placeholder score, not derived from the plant data.
    return (rng or random).randint(HEALTH_SCORE_MIN, HEALTH_SCORE_MAX)


def process_plant_data(
    request: PlantDataRequest,
    caller_uid: Optional[str],
    rng: Optional[random.Random] = None,
    clock: Optional[Callable[[], datetime]] = None,
) -> ProcessPlantDataResult:
    """
    Processes plant information for an authenticated user and returns care
    recommendations with a health score. Nothing is persisted.

    Args:
        request (PlantDataRequest): The plant data sent by the app.
        caller_uid (str | None): The uid of the authenticated caller, if any.

    Returns:
        A ProcessPlantDataResult wrapping the processed plant data.

    Raises:
        UnauthenticatedError: If there is no caller.
        InvalidArgumentError: If the request fails validation.
    """
    if not caller_uid:
        raise UnauthenticatedError("User must be authenticated to process plant data.")

    plant = validate_plant_data(request)

    logger.info(
        f"Processing plant: {plant.plant_name}, "
        f"watering: {plant.watering_frequency}x/week, "
        f"sunlight: {plant.sunlight_level}"
    )

    processed_at = clock() if clock else datetime.now(timezone.utc)
    data = ProcessedPlantData(
        plant_name=plant.plant_name,
        watering_frequency=plant.watering_frequency,
        sunlight_level=plant.sunlight_level,
        health_score=health_score(rng),
        recommendations=build_recommendations(plant),
        processed_at=processed_at.isoformat(),
        processed_by=caller_uid,
    )
    return ProcessPlantDataResult(data=data, message=PLANT_DATA_PROCESSED_MESSAGE)
