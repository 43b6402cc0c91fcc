# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
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

"""Scheduler job registration and plan linkage entities."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..value_objects import (
    ContentAddress,
    ExecutionMode,
    ExecutionSchedule,
    PlanId,
    WalletAddress,
)


@dataclass(frozen=True)
class JobRegistration:
    """Registration submitted to the job scheduler.

    Attributes:
        plan_id: Plan the job automates.
        content_address: Address of the published script.
        schedule: Execution schedule of the job.
        owner_address: Account that owns the job.
    """

    plan_id: PlanId
    content_address: ContentAddress
    schedule: ExecutionSchedule
    owner_address: WalletAddress

    @property
    def execution_count(self) -> int:
        return self.schedule.execution_count

    @property
    def interval_minutes(self) -> int:
        return self.schedule.interval_minutes


@dataclass(frozen=True)
class JobRecord:
    """Scheduler-owned record of a registered job.

    Immutable from this service's perspective.

    Attributes:
        job_id: Identifier assigned by the scheduler (or synthesised).
        content_address: Script the job executes.
        schedule: Execution schedule the job was registered with.
        mode: Execution mode the job was registered in.
        service_metadata: Additional data returned by the scheduler.
    """

    job_id: str
    content_address: ContentAddress
    schedule: ExecutionSchedule
    mode: ExecutionMode
    service_metadata: Dict[str, Any] = field(default_factory=dict, hash=False)


@dataclass(frozen=True)
class LinkageOutcome:
    """Result of recording a job on its plan.

    A failed update is not an error: the job already exists, so the outcome
    carries a warning for the caller instead.

    Attributes:
        updated: True if the plan store acknowledged the update.
        warning: Description of the failure when not updated.
    """

    updated: bool
    warning: Optional[str] = None

    @classmethod
    def success(cls) -> "LinkageOutcome":
        return cls(updated=True)

    @classmethod
    def pending(cls, warning: str) -> "LinkageOutcome":
        return cls(updated=False, warning=warning)
