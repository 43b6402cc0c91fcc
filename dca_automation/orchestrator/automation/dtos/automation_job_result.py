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

"""Automation job result DTO."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from dca_automation.core.automation.entities import (
    JobRecord,
    LinkageOutcome,
    PublishedArtifact,
)
from dca_automation.core.automation.value_objects import ExecutionMode

SIMULATION_WARNING = (
    "Simulated execution: no signing capability was supplied, so the job ID "
    "and IPFS addresses are synthetic and will not resolve"
)


@dataclass(frozen=True)
class AutomationJobResult:
    """Result DTO for automation job creation.

    Immutable data transfer object returned to the API layer.

    Attributes:
        plan_id: Plan that was automated.
        job_id: Scheduler job identifier.
        ipfs_link: Link recorded on the plan (the script URL).
        script_ipfs_url: Gateway URL of the published script.
        metadata_ipfs_url: Gateway URL of the published metadata.
        mode: Execution mode the request ran in.
        linkage_updated: True if the plan store acknowledged the update.
        job_data: Scheduler data about the job.
        warnings: Conditions the caller should know about.
    """

    plan_id: str
    job_id: str
    ipfs_link: str
    script_ipfs_url: str
    metadata_ipfs_url: str
    mode: ExecutionMode
    linkage_updated: bool
    job_data: Dict[str, Any] = field(default_factory=dict, hash=False)
    warnings: Tuple[str, ...] = ()

    @property
    def warning(self) -> Optional[str]:
        """All warnings joined into one message, or None."""
        if not self.warnings:
            return None
        return "; ".join(self.warnings)

    @staticmethod
    def from_outcome(
        job: JobRecord,
        published: PublishedArtifact,
        linkage: LinkageOutcome,
        plan_id: str,
    ) -> "AutomationJobResult":
        """Create result DTO from the workflow outcome.

        Args:
            job: Registered job.
            published: Addresses of the published artifact.
            linkage: Outcome of the plan store update.
            plan_id: Plan that was automated.

        Returns:
            AutomationJobResult with serialized values.
        """
        warnings = []
        if not job.mode.is_live():
            warnings.append(SIMULATION_WARNING)
        if linkage.warning:
            warnings.append(linkage.warning)

        return AutomationJobResult(
            plan_id=plan_id,
            job_id=job.job_id,
            ipfs_link=published.script.url,
            script_ipfs_url=published.script.url,
            metadata_ipfs_url=published.metadata.url,
            mode=job.mode,
            linkage_updated=linkage.updated,
            job_data=dict(job.service_metadata),
            warnings=tuple(warnings),
        )
