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

from typing import Any, Callable

from firebase_functions import logger

from backend.store import DocumentExistsError
from shared.types import WriteResult


def run_step(step: str, document_id: str, write: Callable[[], Any]) -> WriteResult:
    """
    Runs one reactor write and reports how it went instead of raising.

    A keyed create that finds its document already present was applied by an
    earlier delivery of the same event, so it counts as a skipped success.
    """
    try:
        write()
    except DocumentExistsError:
        logger.info(f"Step {step} already applied for {document_id}, skipping")
        return WriteResult(step=step, skipped=True)
    except Exception as e:
        logger.error(f"❌ Step {step} failed for {document_id}: {e}")
        return WriteResult(step=step, ok=False, error=str(e))
    return WriteResult(step=step)
