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

"""Shared pytest fixtures for DCA automation tests."""

from typing import Any, Dict, List, Optional, Tuple

import pytest

from dca_automation.core.automation.entities import (
    JobCreationRequest,
    JobRecord,
    JobRegistration,
)
from dca_automation.core.automation.exceptions import UpstreamServiceError
from dca_automation.core.automation.script_generator import DcaScriptGenerator
from dca_automation.core.automation.value_objects import (
    ContentAddress,
    CorrelationId,
    DecimalString,
    ExecutionMode,
    ExecutionSchedule,
    PlanId,
    TokenSymbol,
    WalletAddress,
)
from dca_automation.orchestrator.automation.linkage import PlanLinkageUpdater
from dca_automation.orchestrator.automation.use_cases import CreateAutomationJobUseCase

TEST_GATEWAY_URL = "https://gateway.test/ipfs"
TEST_PREPARE_SWAP_URL = "https://dca.test/api/dca/prepare-swap"
TEST_USER_ADDRESS = "0x" + "1" * 40
TEST_PRIVATE_KEY = "0x" + "11" * 32


class FakeContentStore:
    """In-memory fake implementation of ContentStore."""

    def __init__(self, fail_on: Optional[str] = None) -> None:
        """Initialize the fake store.

        Args:
            fail_on: File name suffix whose upload should fail.
        """
        self.fail_on = fail_on
        self.published: List[Tuple[str, bytes, Dict[str, str]]] = []

    def publish(
        self,
        name: str,
        content: bytes,
        keyvalues: Optional[Dict[str, str]] = None,
    ) -> ContentAddress:
        """Record the upload and return a predictable address."""
        if self.fail_on and name.endswith(self.fail_on):
            raise UpstreamServiceError("fake-upload", f"upload of {name} rejected")
        self.published.append((name, content, dict(keyvalues or {})))
        cid = f"bafyfake{len(self.published)}"
        return ContentAddress.on_gateway(TEST_GATEWAY_URL, cid, name)


class FakeJobScheduler:
    """In-memory fake implementation of JobScheduler."""

    def __init__(self, mode: ExecutionMode, fail: bool = False) -> None:
        """Initialize the fake scheduler.

        Args:
            mode: Mode stamped on returned records.
            fail: Whether registration should fail.
        """
        self.mode = mode
        self.fail = fail
        self.registrations: List[Tuple[JobRegistration, Any]] = []

    def register(self, registration: JobRegistration, signer=None) -> JobRecord:
        """Record the registration and return a predictable job."""
        if self.fail:
            raise UpstreamServiceError("fake-register", "scheduler unavailable")
        self.registrations.append((registration, signer))
        return JobRecord(
            job_id=f"{self.mode.value}-job-{len(self.registrations)}",
            content_address=registration.content_address,
            schedule=registration.schedule,
            mode=self.mode,
            service_metadata={"executionCount": registration.execution_count},
        )


class FakePlanStore:
    """In-memory fake implementation of PlanStore."""

    def __init__(self, fail: bool = False) -> None:
        """Initialize the fake plan store.

        Args:
            fail: Whether updates should fail.
        """
        self.fail = fail
        self.updates: List[Tuple[str, str, str]] = []

    def update_details(self, plan_id: PlanId, job_id: str, ipfs_link: str) -> None:
        """Record the update."""
        if self.fail:
            raise UpstreamServiceError("update-plan", "plan store returned 503")
        self.updates.append((str(plan_id), job_id, ipfs_link))


class FakeSigner:
    """Signer that returns a fixed signature."""

    address = "0x" + "2" * 40

    def sign_message(self, message: bytes) -> str:
        """Return a fixed signature."""
        return "0x" + "ab" * 65


@pytest.fixture
def valid_payload() -> Dict[str, Any]:
    """Provide a valid raw job creation payload."""
    return {
        "planId": "p1",
        "userAddress": TEST_USER_ADDRESS,
        "fromToken": "USDC",
        "toToken": "ETH",
        "amount": "100.50",
        "intervalMinutes": 1440,
        "durationWeeks": 4,
        "slippage": "2.0",
        "createdAt": "2024-01-01T00:00:00Z",
    }


@pytest.fixture
def job_request() -> JobCreationRequest:
    """Provide a validated job creation request."""
    return JobCreationRequest(
        plan_id=PlanId("p1"),
        user_address=WalletAddress(TEST_USER_ADDRESS),
        from_token=TokenSymbol("USDC"),
        to_token=TokenSymbol("ETH"),
        amount=DecimalString("100.50"),
        schedule=ExecutionSchedule(interval_minutes=1440, duration_weeks=4),
        slippage=DecimalString("2.0"),
        created_at="2024-01-01T00:00:00Z",
    )


@pytest.fixture
def correlation_id() -> CorrelationId:
    """Provide a fixed correlation ID."""
    return CorrelationId("018f3c4c-6a2e-7b2a-9c2a-3d8d2c4b9a12")


@pytest.fixture
def script_generator() -> DcaScriptGenerator:
    """Provide a script generator with a test prepare-swap URL."""
    return DcaScriptGenerator(TEST_PREPARE_SWAP_URL)


@pytest.fixture
def live_store() -> FakeContentStore:
    """Provide fake live content store."""
    return FakeContentStore()


@pytest.fixture
def simulated_store() -> FakeContentStore:
    """Provide fake simulated content store."""
    return FakeContentStore()


@pytest.fixture
def live_scheduler() -> FakeJobScheduler:
    """Provide fake live scheduler."""
    return FakeJobScheduler(ExecutionMode.LIVE)


@pytest.fixture
def simulated_scheduler() -> FakeJobScheduler:
    """Provide fake simulated scheduler."""
    return FakeJobScheduler(ExecutionMode.SIMULATED)


@pytest.fixture
def plan_store() -> FakePlanStore:
    """Provide fake plan store."""
    return FakePlanStore()


@pytest.fixture
def signer() -> FakeSigner:
    """Provide fake signer."""
    return FakeSigner()


@pytest.fixture
def use_case(
    script_generator,
    live_store,
    simulated_store,
    live_scheduler,
    simulated_scheduler,
    plan_store,
) -> CreateAutomationJobUseCase:
    """Provide a use case wired to fakes."""
    return CreateAutomationJobUseCase(
        generator=script_generator,
        content_stores={
            ExecutionMode.LIVE: live_store,
            ExecutionMode.SIMULATED: simulated_store,
        },
        schedulers={
            ExecutionMode.LIVE: live_scheduler,
            ExecutionMode.SIMULATED: simulated_scheduler,
        },
        linkage_updater=PlanLinkageUpdater(plan_store),
    )
