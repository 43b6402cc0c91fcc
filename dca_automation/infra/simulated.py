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

"""Simulated content store and scheduler used when no signer is available.

Neither adapter performs network I/O. Returned addresses and job IDs are
well formed but do not resolve.
"""

import logging
from typing import Dict, Optional

from dca_automation.core.automation.entities import JobRecord, JobRegistration
from dca_automation.core.automation.ports import ContentStore, JobScheduler, Signer
from dca_automation.core.automation.value_objects import ContentAddress, ExecutionMode

from .id_generator import SimulatedIdentityGenerator

logger = logging.getLogger(__name__)


class SimulatedContentStore(ContentStore):
    """Synthesises content addresses from document bytes."""

    def __init__(
        self,
        gateway_url: str,
        identity_generator: Optional[SimulatedIdentityGenerator] = None,
    ) -> None:
        """Initialize the simulated store.

        Args:
            gateway_url: Gateway prefix used to build addresses.
            identity_generator: Source of synthetic content IDs.
        """
        self._gateway_url = gateway_url
        self._identity_generator = identity_generator or SimulatedIdentityGenerator()

    def publish(
        self,
        name: str,
        content: bytes,
        keyvalues: Optional[Dict[str, str]] = None,
    ) -> ContentAddress:
        """Return a synthetic address for a document without uploading it."""
        cid = self._identity_generator.content_id(content)
        logger.info("Simulated upload of %s as %s", name, cid)
        return ContentAddress.on_gateway(self._gateway_url, cid, name)


class SimulatedJobScheduler(JobScheduler):
    """Synthesises job IDs without contacting the scheduler."""

    def __init__(self, identity_generator: Optional[SimulatedIdentityGenerator] = None) -> None:
        """Initialize the simulated scheduler.

        Args:
            identity_generator: Source of synthetic job IDs.
        """
        self._identity_generator = identity_generator or SimulatedIdentityGenerator()

    def register(
        self,
        registration: JobRegistration,
        signer: Optional[Signer] = None,
    ) -> JobRecord:
        """Return a job record with a synthetic job ID."""
        job_id = self._identity_generator.job_id(registration.plan_id)
        logger.info("Simulated job %s created for plan %s", job_id, registration.plan_id)
        return JobRecord(
            job_id=job_id,
            content_address=registration.content_address,
            schedule=registration.schedule,
            mode=ExecutionMode.SIMULATED,
            service_metadata={
                "simulated": True,
                "contentAddress": registration.content_address.cid,
                "executionCount": registration.execution_count,
                "intervalMinutes": registration.interval_minutes,
                "ownerAddress": str(registration.owner_address),
            },
        )
