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

"""Unit tests for simulated adapters."""

from dca_automation.core.automation.entities import JobRegistration
from dca_automation.core.automation.value_objects import (
    ContentAddress,
    ExecutionMode,
    ExecutionSchedule,
    PlanId,
    WalletAddress,
)
from dca_automation.infra.id_generator import SimulatedIdentityGenerator
from dca_automation.infra.simulated import SimulatedContentStore, SimulatedJobScheduler


class TestSimulatedContentStore:
    """Tests for SimulatedContentStore."""

    def test_publish_returns_synthetic_gateway_address(self):
        """Address should be well formed and derived from the content."""
        store = SimulatedContentStore("https://gw.test/ipfs")

        address = store.publish("dca-script-p1.go", b"package main\n")

        assert address.cid == SimulatedIdentityGenerator.content_id(b"package main\n")
        assert address.url == f"https://gw.test/ipfs/{address.cid}?filename=dca-script-p1.go"


class TestSimulatedJobScheduler:
    """Tests for SimulatedJobScheduler."""

    def test_register_synthesises_job(self):
        """Registration should return a simulated record without a signer."""
        scheduler = SimulatedJobScheduler(SimulatedIdentityGenerator(clock=lambda: 1.5))
        registration = JobRegistration(
            plan_id=PlanId("p1"),
            content_address=ContentAddress.on_gateway("https://gw/ipfs", "bafy1", "s.go"),
            schedule=ExecutionSchedule(interval_minutes=1440, duration_weeks=4),
            owner_address=WalletAddress("0x" + "1" * 40),
        )

        record = scheduler.register(registration)

        assert record.job_id == "sim-job-1500-p1"
        assert record.mode is ExecutionMode.SIMULATED
        assert record.service_metadata["simulated"] is True
        assert record.service_metadata["executionCount"] == 28
        assert record.service_metadata["contentAddress"] == "bafy1"
