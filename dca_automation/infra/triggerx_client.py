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

"""TriggerX time-based job scheduler client."""

import json
import logging
from typing import Any, Dict, Optional

import httpx

from dca_automation.core.automation.entities import JobRecord, JobRegistration
from dca_automation.core.automation.exceptions import UpstreamServiceError
from dca_automation.core.automation.ports import JobScheduler, Signer
from dca_automation.core.automation.services import FingerprintService
from dca_automation.core.automation.tokens import (
    DCA_JOB_TITLE,
    DCA_SCHEDULE_TYPE,
    SWAP_EXECUTOR_ABI,
    TARGET_FUNCTION_NAME,
)
from dca_automation.core.automation.value_objects import ExecutionMode

logger = logging.getLogger(__name__)

CREATE_JOB_PATH = "/api/jobs"


class TriggerXJobScheduler(JobScheduler):
    """Registers dynamic-argument time jobs with TriggerX.

    The job calls ``executeSwap`` on the SwapExecutor contract; its arguments
    are produced at execution time by the published script.
    """

    OPERATION = "triggerx-register"

    def __init__(  # pylint: disable=too-many-arguments
        self,
        api_url: str,
        api_key: str,
        executor_contract_address: str,
        chain_id: str,
        timezone: str,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize the scheduler client.

        Args:
            api_url: TriggerX API base URL.
            api_key: TriggerX API key.
            executor_contract_address: SwapExecutor contract address.
            chain_id: Chain the job executes on.
            timezone: Timezone the schedule is evaluated in.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport, used by tests.
        """
        self._api_url = api_url
        self._api_key = api_key
        self._executor_contract_address = executor_contract_address
        self._chain_id = chain_id
        self._timezone = timezone
        self._timeout = timeout
        self._transport = transport

    def build_job_input(self, registration: JobRegistration) -> Dict[str, Any]:
        """Build the TriggerX job input for a registration.

        Args:
            registration: Script address, schedule and owner of the job.

        Returns:
            JSON-compatible job input.
        """
        schedule = registration.schedule
        return {
            "job_title": DCA_JOB_TITLE,
            "job_type": "time",
            "arg_type": "dynamic",
            "schedule_type": DCA_SCHEDULE_TYPE,
            "time_frame": schedule.time_frame_seconds,
            "time_interval": schedule.time_interval_seconds,
            "timezone": self._timezone,
            "chain_id": self._chain_id,
            "target_contract_address": self._executor_contract_address,
            "target_function": TARGET_FUNCTION_NAME,
            "abi": json.dumps(SWAP_EXECUTOR_ABI),
            "arguments": [],
            "dynamic_arguments_script_url": registration.content_address.url,
            "auto_topup": True,
            "plan_id": str(registration.plan_id),
            "owner_address": str(registration.owner_address),
            "content_address": registration.content_address.cid,
            "execution_count": registration.execution_count,
            "interval_minutes": registration.interval_minutes,
        }

    def register(
        self,
        registration: JobRegistration,
        signer: Optional[Signer] = None,
    ) -> JobRecord:
        """Register a job signed by the request's signer.

        Args:
            registration: Script address, schedule and owner of the job.
            signer: Signing capability authorising the registration.

        Returns:
            JobRecord carrying the TriggerX job ID and response body.

        Raises:
            UpstreamServiceError: If no signer is bound or TriggerX rejects the job.
        """
        if signer is None:
            raise UpstreamServiceError(
                self.OPERATION,
                "A signer is required to register a live job"
            )

        body = FingerprintService.canonicalize(self.build_job_input(registration))
        headers = {
            "Content-Type": "application/json",
            "X-Api-Key": self._api_key,
            "X-Signer-Address": signer.address,
            "X-Signature": signer.sign_message(body),
        }

        logger.info(
            "Registering TriggerX job for plan %s (%d executions every %d minutes)",
            registration.plan_id,
            registration.execution_count,
            registration.interval_minutes,
        )
        try:
            with httpx.Client(
                base_url=self._api_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = client.post(CREATE_JOB_PATH, content=body, headers=headers)
        except httpx.TimeoutException:
            raise UpstreamServiceError(
                self.OPERATION,
                f"Timeout after {self._timeout}s while registering job"
            ) from None
        except httpx.HTTPError as exc:
            raise UpstreamServiceError(
                self.OPERATION,
                f"Error registering job: {exc}"
            ) from exc

        payload = _json_body(response)
        if response.status_code not in (200, 201):
            message = payload.get("error") or payload.get("message") or response.text
            raise UpstreamServiceError(
                self.OPERATION,
                f"TriggerX returned {response.status_code}: {message}"
            )

        data = payload.get("data") if isinstance(payload.get("data"), dict) else payload
        job_id = data.get("job_id") or data.get("id")
        if not job_id:
            raise UpstreamServiceError(
                self.OPERATION,
                str(payload.get("error") or "TriggerX response is missing job_id")
            )

        logger.info("TriggerX job %s registered for plan %s", job_id, registration.plan_id)
        return JobRecord(
            job_id=str(job_id),
            content_address=registration.content_address,
            schedule=registration.schedule,
            mode=ExecutionMode.LIVE,
            service_metadata=data,
        )


def _json_body(response: httpx.Response) -> Dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}
