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

"""HTTP client for the DCA plan store."""

import logging
from typing import Optional
from urllib.parse import quote

import httpx

from dca_automation.core.automation.exceptions import UpstreamServiceError
from dca_automation.core.automation.ports import PlanStore
from dca_automation.core.automation.value_objects import PlanId

logger = logging.getLogger(__name__)


class HttpPlanStore(PlanStore):
    """Updates plan records through the DCA backend API."""

    OPERATION = "update-plan"

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize the plan store client.

        Args:
            base_url: DCA backend base URL.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport, used by tests.
        """
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport

    def update_details(self, plan_id: PlanId, job_id: str, ipfs_link: str) -> None:
        """Record the job ID and script link on a plan.

        Args:
            plan_id: Plan to update.
            job_id: Registered job identifier.
            ipfs_link: Link to the published script.

        Raises:
            UpstreamServiceError: If the request fails or is rejected.
        """
        path = f"/api/dca/plans/{quote(str(plan_id), safe='')}/details"
        try:
            with httpx.Client(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = client.put(path, json={"jobId": job_id, "ipfsLink": ipfs_link})
        except httpx.TimeoutException:
            raise UpstreamServiceError(
                self.OPERATION,
                f"Timeout after {self._timeout}s while updating plan {plan_id}"
            ) from None
        except httpx.HTTPError as exc:
            raise UpstreamServiceError(
                self.OPERATION,
                f"Error updating plan {plan_id}: {exc}"
            ) from exc

        if not response.is_success:
            raise UpstreamServiceError(
                self.OPERATION,
                f"Failed to update plan details: {_error_message(response)}"
            )
        logger.info("Plan %s updated with job %s", plan_id, job_id)


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return f"status {response.status_code}"
