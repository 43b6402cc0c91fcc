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

"""Domain exceptions for DCA automation job creation."""

from dataclasses import dataclass
from typing import List, Optional, Sequence


class AutomationDomainError(Exception):
    """Base exception for all automation domain errors."""

    def __init__(self, message: str, correlation_id: Optional[str] = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error description.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(message)
        self.message = message
        self.correlation_id = correlation_id


@dataclass(frozen=True)
class FieldViolation:
    """A single request field that failed validation.

    Attributes:
        field: Field path in the request payload (camelCase wire name).
        reason: Human-readable description of the violated constraint.
    """

    field: str
    reason: str

    def __str__(self) -> str:
        """Return ``field: reason``."""
        return f"{self.field}: {self.reason}"


class PlanValidationError(AutomationDomainError):
    """Job creation request is malformed."""

    def __init__(
        self,
        violations: Sequence[FieldViolation],
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize validation error.

        Args:
            violations: Every field that violated its constraint.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            ", ".join(str(violation) for violation in violations),
            correlation_id=correlation_id
        )
        self.violations: List[FieldViolation] = list(violations)

    @property
    def fields(self) -> List[str]:
        """Return the names of the offending fields."""
        return [violation.field for violation in self.violations]


class ArtifactGenerationError(AutomationDomainError):
    """Automation script or metadata could not be generated."""

    def __init__(
        self,
        plan_id: str,
        reason: str,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize artifact generation error.

        Args:
            plan_id: Plan the artifact was generated for.
            reason: What was missing or inconsistent.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"Failed to generate automation artifact for plan {plan_id}: {reason}",
            correlation_id=correlation_id
        )
        self.plan_id = plan_id
        self.reason = reason


class UpstreamServiceError(AutomationDomainError):
    """An external collaborator call failed."""

    def __init__(
        self,
        operation: str,
        detail: str,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize upstream service error.

        Args:
            operation: Name of the failing sub-operation (e.g. publish-script).
            detail: Upstream error message text.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            f"{operation} failed: {detail}",
            correlation_id=correlation_id
        )
        self.operation = operation
        self.detail = detail


class ScheduleRejectedError(UpstreamServiceError):
    """Job schedule would not execute at least once."""

    def __init__(
        self,
        interval_minutes: int,
        duration_weeks: int,
        correlation_id: Optional[str] = None
    ) -> None:
        """Initialize schedule rejected error.

        Args:
            interval_minutes: Requested interval between executions.
            duration_weeks: Requested job lifetime.
            correlation_id: Optional correlation ID for tracing.
        """
        super().__init__(
            "register-job",
            f"schedule of every {interval_minutes} minutes for {duration_weeks} "
            f"week(s) yields no executions",
            correlation_id=correlation_id
        )
        self.interval_minutes = interval_minutes
        self.duration_weeks = duration_weeks


class SignerConfigurationError(AutomationDomainError):
    """Configured signing key cannot be loaded."""
