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

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, List, Optional


class AccountStatus(StrEnum):
    ACTIVE = "active"
    SUSPENDED = "suspended"
    DELETED = "deleted"


class MembershipLevel(StrEnum):
    BASIC = "basic"
    PREMIUM = "premium"


class PlantStatus(StrEnum):
    ACTIVE = "active"
    ARCHIVED = "archived"


class SunlightLevel(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class AnalyticsEventType(StrEnum):
    USER_CREATED = "user_created"


@dataclass
class UserDocument:
    """The fields of a `users/{userId}` document read by the reactors."""

    email: Optional[str] = None


@dataclass
class UserProfileDefaults:
    """Fields written onto every newly created user document."""

    created_at: Any  # Server timestamp from DocumentStore.now()
    account_status: AccountStatus = AccountStatus.ACTIVE
    membership_level: MembershipLevel = MembershipLevel.BASIC
    plants_added: int = 0
    notifications_enabled: bool = True
    profile_complete: bool = False


@dataclass
class AnalyticsEvent:
    """Schema for analytics events appended to Firestore."""

    event_type: AnalyticsEventType
    user_id: str
    timestamp: Any  # Server timestamp from DocumentStore.now()
    user_email: str


@dataclass
class PlantDocument:
    """The fields of a `plants/{plantId}` document read by the reactors."""

    name: Optional[str] = None
    user_id: Optional[str] = None
    created_at: Optional[Any] = None
    status: Optional[str] = None


@dataclass
class PlantMetadataBackfill:
    created_at: Any
    status: PlantStatus = PlantStatus.ACTIVE


@dataclass
class MessageDocument:
    likes: Optional[int] = None


@dataclass
class WriteResult:
    """The result of a single reactor write step."""

    step: str
    ok: bool = True
    skipped: bool = False
    error: Optional[str] = None


@dataclass
class ReactionOutcome:
    """All write steps performed by one reactor invocation."""

    document_id: str
    steps: List[WriteResult] = field(default_factory=list)

    @property
    def failed_steps(self) -> List[WriteResult]:
        return [step for step in self.steps if not step.ok]

    @property
    def ok(self) -> bool:
        return not self.failed_steps


@dataclass
class LikesChange:
    """How the likes of a message moved in one update."""

    message_id: str
    before: Optional[int]
    after: Optional[int]
    changed: bool = False
    milestone_reached: bool = False
