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

"""Infrastructure layer for identifier generation.

Provides UUID v7 correlation IDs and the synthetic identifiers used when a
request runs in simulated mode.
"""

import time
import uuid
from typing import Callable

from dca_automation.core.automation.ports import CorrelationIdGenerator
from dca_automation.core.automation.services import FingerprintService
from dca_automation.core.automation.value_objects import CorrelationId, PlanId

SIMULATED_CID_PREFIX = "bafysim"


class UUIDv7Generator(CorrelationIdGenerator):
    """UUID v7 generator for correlation IDs.

    Generates time-ordered UUIDs compatible with the UUID v7 specification.
    """

    def generate(self) -> CorrelationId:
        """Generate a new UUID v7 CorrelationId.

        Returns:
            CorrelationId: A new UUID v7 identifier.
        """
        return CorrelationId(str(self._uuid7()))

    def _uuid7(self) -> uuid.UUID:
        """Generate a UUID v7 using timestamp and random bytes.

        Returns:
            uuid.UUID: A UUID v7 object.
        """
        timestamp_ms = int(time.time() * 1000)
        timestamp_bytes = timestamp_ms.to_bytes(6, byteorder='big')

        random_bytes = uuid.uuid4().bytes

        uuid7_bytes = bytearray(16)
        uuid7_bytes[:6] = timestamp_bytes
        uuid7_bytes[6:] = random_bytes[6:]

        uuid7_bytes[6] = (0x07 << 4) | (uuid7_bytes[6] & 0x0f)
        uuid7_bytes[8] = 0x80 | (uuid7_bytes[8] & 0x3f)

        return uuid.UUID(bytes=bytes(uuid7_bytes))


class SimulatedIdentityGenerator:
    """Synthesises job IDs and content IDs without calling upstream services.

    Content IDs are derived from the document bytes, so they are stable for
    identical content. Job IDs embed the current time and the plan ID suffix.
    """

    JOB_ID_PREFIX = "sim-job"
    PLAN_SUFFIX_LENGTH = 8

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        """Initialize generator.

        Args:
            clock: Returns the current time in seconds since the epoch.
        """
        self._clock = clock

    def job_id(self, plan_id: PlanId) -> str:
        """Synthesise a job ID for a plan.

        Args:
            plan_id: Plan the job belongs to.

        Returns:
            ``sim-job-<epoch ms>-<plan id suffix>``.
        """
        timestamp_ms = int(self._clock() * 1000)
        return f"{self.JOB_ID_PREFIX}-{timestamp_ms}-{plan_id.suffix(self.PLAN_SUFFIX_LENGTH)}"

    @staticmethod
    def content_id(content: bytes) -> str:
        """Synthesise a content ID from document bytes.

        Args:
            content: Document bytes.

        Returns:
            Deterministic identifier that does not resolve on any gateway.
        """
        return f"{SIMULATED_CID_PREFIX}{FingerprintService.digest(content)[:52]}"
