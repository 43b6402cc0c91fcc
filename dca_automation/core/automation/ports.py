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

"""Port interfaces (Protocols) for the automation domain.

These define the contracts that infrastructure implementations must satisfy.
Using Protocol instead of ABC allows for structural subtyping (duck typing).
"""

from typing import Dict, Optional, Protocol

from .entities import JobRecord, JobRegistration
from .value_objects import ContentAddress, CorrelationId, PlanId


class Signer(Protocol):
    """Signing capability bound to a single request."""

    @property
    def address(self) -> str:
        """Account address of the signing key."""
        ...

    def sign_message(self, message: bytes) -> str:
        """Sign a message.

        Args:
            message: Raw bytes to sign.

        Returns:
            Hex encoded signature.
        """
        ...


class ContentStore(Protocol):
    """Content-addressed storage port."""

    def publish(
        self,
        name: str,
        content: bytes,
        keyvalues: Optional[Dict[str, str]] = None,
    ) -> ContentAddress:
        """Publish a document.

        Args:
            name: File name of the document.
            content: Document bytes; the address is derived from them.
            keyvalues: Optional descriptive tags stored alongside the pin.

        Returns:
            Address the document resolves at.

        Raises:
            UpstreamServiceError: If the upload fails.
        """
        ...


class JobScheduler(Protocol):
    """Time-based job scheduler port."""

    def register(
        self,
        registration: JobRegistration,
        signer: Optional[Signer] = None,
    ) -> JobRecord:
        """Register a recurring job.

        Args:
            registration: Script address, schedule and owner of the job.
            signer: Signing capability authorising the registration.

        Returns:
            JobRecord with the scheduler-assigned job ID.

        Raises:
            UpstreamServiceError: If the scheduler rejects the job.
        """
        ...


class PlanStore(Protocol):
    """External plan store port."""

    def update_details(self, plan_id: PlanId, job_id: str, ipfs_link: str) -> None:
        """Blindly upsert the job ID and script link of a plan.

        Args:
            plan_id: Plan to update.
            job_id: Registered job identifier.
            ipfs_link: Resolvable link to the published script.

        Raises:
            UpstreamServiceError: If the plan store rejects the update.
        """
        ...


class CorrelationIdGenerator(Protocol):
    """Generator port for request correlation identifiers."""

    def generate(self) -> CorrelationId:
        """Generate a new correlation identifier.

        Returns:
            A new, unique CorrelationId.
        """
        ...
