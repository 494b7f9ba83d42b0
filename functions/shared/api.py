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

from dataclasses import dataclass
from typing import Any, List, Optional

from shared.types import SunlightLevel


@dataclass
class SayHelloRequest:
    """Request object for the greeting callable."""

    name: Optional[Any] = None


@dataclass
class SayHelloResult:
    message: str
    timestamp: str  # ISO-8601, UTC
    success: bool = True


@dataclass
class PlantDataRequest:
    """Request object for processing plant data, as sent by the client."""

    plant_name: Optional[Any] = None
    watering_frequency: Optional[Any] = None
    sunlight_level: Optional[str] = None


@dataclass
class PlantCareInput:
    """A validated plant data request."""

    plant_name: str
    watering_frequency: float | int
    sunlight_level: str = SunlightLevel.MEDIUM


@dataclass
class ProcessedPlantData:
    plant_name: str
    watering_frequency: float | int
    sunlight_level: str
    health_score: int
    recommendations: List[str]
    processed_at: str  # ISO-8601, UTC
    processed_by: str


@dataclass
class ProcessPlantDataResult:
    data: ProcessedPlantData
    message: str
    success: bool = True
