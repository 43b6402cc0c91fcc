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

"""Unit tests for PlanLinkageUpdater."""

from dca_automation.core.automation.value_objects import ContentAddress, PlanId
from dca_automation.orchestrator.automation.linkage import PlanLinkageUpdater

SCRIPT_ADDRESS = ContentAddress.on_gateway("https://gw/ipfs", "bafy1", "dca-script-p1.go")


class TestPlanLinkageUpdater:
    """Tests for PlanLinkageUpdater."""

    def test_successful_update(self, plan_store):
        """Acknowledged update should report success."""
        outcome = PlanLinkageUpdater(plan_store).update(PlanId("p1"), "job-1", SCRIPT_ADDRESS)

        assert outcome.updated is True
        assert outcome.warning is None
        assert plan_store.updates == [("p1", "job-1", SCRIPT_ADDRESS.url)]

    def test_failed_update_returns_warning(self, plan_store, caplog):
        """Plan store failure should degrade to a warning."""
        plan_store.fail = True

        outcome = PlanLinkageUpdater(plan_store).update(PlanId("p1"), "job-1", SCRIPT_ADDRESS)

        assert outcome.updated is False
        assert "plan store returned 503" in outcome.warning
        assert "job-1" in caplog.text
