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
"""Builds the personalized greeting returned to the mobile app."""

from datetime import datetime, timezone
from typing import Callable, Optional

from firebase_functions import logger

from shared.api import SayHelloRequest, SayHelloResult
from shared.constants import APP_NAME, DEFAULT_GREETING_NAME


def say_hello(
    request: SayHelloRequest,
    clock: Optional[Callable[[], datetime]] = None,
) -> SayHelloResult:
    name = str(request.name) if request.name else DEFAULT_GREETING_NAME
    now = clock() if clock else datetime.now(timezone.utc)
    timestamp = now.isoformat()

    logger.info(f"sayHello called for: {name} at {timestamp}")

    return SayHelloResult(
        message=f"Hello, {name}! Welcome to {APP_NAME} 🌿",
        timestamp=timestamp,
    )
