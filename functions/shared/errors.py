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


class PlantCareError(Exception):
    """Base class for errors raised by the LeafLine handlers."""


class UnauthenticatedError(PlantCareError):
    """The callable was invoked without a caller identity."""


class InvalidArgumentError(PlantCareError):
    """A required request field is missing or malformed."""


class ReactionFailedError(PlantCareError):
    """Raised by a trigger so the dispatcher redelivers the event."""

    def __init__(self, reaction: str, document_id: str, failed_steps: list[str]):
        self.reaction = reaction
        self.document_id = document_id
        self.failed_steps = failed_steps
        super().__init__(
            f"{reaction} failed for {document_id}: {', '.join(failed_steps)}"
        )
