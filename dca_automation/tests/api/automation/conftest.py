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

"""Fixtures for DCA automation API tests."""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from dca_automation.api.automation.dependencies import get_signer, get_use_case
from dca_automation.core.automation.value_objects import ExecutionMode
from dca_automation.infra.simulated import SimulatedContentStore, SimulatedJobScheduler
from dca_automation.main import app
from dca_automation.orchestrator.automation.linkage import PlanLinkageUpdater
from dca_automation.orchestrator.automation.use_cases import CreateAutomationJobUseCase


@pytest.fixture
def simulated_use_case(script_generator, live_store, live_scheduler, plan_store):
    """Provide a use case with the real simulated adapters."""
    return CreateAutomationJobUseCase(
        generator=script_generator,
        content_stores={
            ExecutionMode.LIVE: live_store,
            ExecutionMode.SIMULATED: SimulatedContentStore("https://gateway.test/ipfs"),
        },
        schedulers={
            ExecutionMode.LIVE: live_scheduler,
            ExecutionMode.SIMULATED: SimulatedJobScheduler(),
        },
        linkage_updater=PlanLinkageUpdater(plan_store),
    )


@pytest.fixture
def test_client(simulated_use_case) -> Generator:
    """Create a TestClient running requests without a signer.

    Yields:
        TestClient with the use case and signer dependencies overridden.
    """
    app.dependency_overrides[get_use_case] = lambda: simulated_use_case
    app.dependency_overrides[get_signer] = lambda: None

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def live_test_client(use_case, signer) -> Generator:
    """Create a TestClient running requests with a signer and fake adapters.

    Yields:
        TestClient with the use case and signer dependencies overridden.
    """
    app.dependency_overrides[get_use_case] = lambda: use_case
    app.dependency_overrides[get_signer] = lambda: signer

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
