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

"""Unit tests for automation domain exceptions."""

from dca_automation.core.automation.exceptions import (
    ArtifactGenerationError,
    AutomationDomainError,
    FieldViolation,
    PlanValidationError,
    ScheduleRejectedError,
    SignerConfigurationError,
    UpstreamServiceError,
)


class TestPlanValidationError:
    """Tests for PlanValidationError."""

    def test_message_lists_every_violation(self):
        """Message should join every violation."""
        error = PlanValidationError([
            FieldViolation("amount", "must be a decimal"),
            FieldViolation("planId", "is required"),
        ])
        assert error.message == "amount: must be a decimal, planId: is required"
        assert error.fields == ["amount", "planId"]

    def test_is_domain_error(self):
        """Validation errors should share the domain base class."""
        error = PlanValidationError([FieldViolation("body", "must be a JSON object")])
        assert isinstance(error, AutomationDomainError)
        assert error.correlation_id is None


class TestUpstreamServiceError:
    """Tests for UpstreamServiceError."""

    def test_message_names_operation(self):
        """Message should name the failing operation."""
        error = UpstreamServiceError("publish-script", "status 401", correlation_id="c1")
        assert error.message == "publish-script failed: status 401"
        assert error.operation == "publish-script"
        assert error.detail == "status 401"
        assert error.correlation_id == "c1"
        assert str(error) == error.message

    def test_schedule_rejected_is_register_failure(self):
        """Rejected schedules should surface as register-job failures."""
        error = ScheduleRejectedError(20000, 1)
        assert isinstance(error, UpstreamServiceError)
        assert error.operation == "register-job"
        assert "20000" in error.message


class TestOtherErrors:
    """Tests for remaining domain errors."""

    def test_artifact_generation_error(self):
        """Generation error should carry plan and reason."""
        error = ArtifactGenerationError("p1", "missing required field amount")
        assert error.plan_id == "p1"
        assert "missing required field amount" in error.message

    def test_signer_configuration_error(self):
        """Signer configuration error should be a domain error."""
        error = SignerConfigurationError("bad key")
        assert isinstance(error, AutomationDomainError)
        assert error.message == "bad key"
