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

"""Best-effort linkage of a registered job back onto its plan."""

import logging
from typing import Optional

from dca_automation.core.automation.entities import LinkageOutcome
from dca_automation.core.automation.exceptions import UpstreamServiceError
from dca_automation.core.automation.ports import PlanStore
from dca_automation.core.automation.value_objects import (
    ContentAddress,
    CorrelationId,
    PlanId,
)

logger = logging.getLogger(__name__)


class PlanLinkageUpdater:  # pylint: disable=too-few-public-methods
    """Records job ID and script link on the plan store.

    The job already exists when this runs, so a failed update degrades to a
    warning that may need out-of-band reconciliation.
    """

    def __init__(self, plan_store: PlanStore) -> None:
        """Initialize updater.

        Args:
            plan_store: Plan store port.
        """
        self._plan_store = plan_store

    def update(
        self,
        plan_id: PlanId,
        job_id: str,
        script_address: ContentAddress,
        correlation_id: Optional[CorrelationId] = None,
    ) -> LinkageOutcome:
        """Link a job to its plan.

        Args:
            plan_id: Plan to update.
            job_id: Registered job identifier.
            script_address: Address of the published script.
            correlation_id: Request correlation ID for logging.

        Returns:
            LinkageOutcome, with a warning when the plan store failed.
        """
        try:
            self._plan_store.update_details(plan_id, job_id, script_address.url)
        except UpstreamServiceError as exc:
            logger.warning(
                "Job %s created but plan %s was not updated [correlation_id=%s]: %s",
                job_id,
                plan_id,
                correlation_id,
                exc.message,
            )
            return LinkageOutcome.pending(
                f"Job created but plan details update failed: {exc.detail}"
            )
        return LinkageOutcome.success()
