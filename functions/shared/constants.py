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

APP_NAME = "LeafLine"
DEFAULT_GREETING_NAME = "User"

# Watering frequency is expressed in waterings per week.
MIN_WATERING_FREQUENCY = 2
MAX_WATERING_FREQUENCY = 7

HEALTH_SCORE_MIN = 70
HEALTH_SCORE_MAX = 100

LIKES_MILESTONE = 10

UNKNOWN_EMAIL = "N/A"
UNKNOWN_PLANT_NAME = "Unknown"

PLANT_DATA_PROCESSED_MESSAGE = "Plant data processed successfully!"

RECOMMEND_WATER_MORE = "Consider watering more frequently for optimal growth"
RECOMMEND_WATER_LESS = "Be careful not to overwater - this could cause root rot"
RECOMMEND_MORE_SUNLIGHT = "This plant may need more sunlight exposure"
RECOMMEND_LESS_SUNLIGHT = "Ensure the plant doesn't get scorched by direct sun"
