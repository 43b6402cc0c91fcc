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

"""Validation of raw job creation payloads."""

from typing import Any, Callable, List, Mapping, Optional, TypeVar

from dca_automation.core.automation.entities import JobCreationRequest
from dca_automation.core.automation.exceptions import FieldViolation, PlanValidationError
from dca_automation.core.automation.value_objects import (
    DecimalString,
    ExecutionSchedule,
    PlanId,
    TokenSymbol,
    WalletAddress,
)

T = TypeVar("T")


class JobCreationRequestValidator:
    """Turns an untyped payload into a JobCreationRequest.

    Every field is checked before failing so the caller sees all violations
    at once. Numeric-looking strings are matched against a pattern and never
    parsed.
    """

    def validate(self, payload: Any) -> JobCreationRequest:
        """Validate a raw request payload.

        Args:
            payload: Decoded JSON body.

        Returns:
            Fully typed JobCreationRequest.

        Raises:
            PlanValidationError: Listing every field that violated a constraint.
        """
        if not isinstance(payload, Mapping):
            raise PlanValidationError([FieldViolation("body", "must be a JSON object")])

        violations: List[FieldViolation] = []

        plan_id = self._string_field(payload, "planId", PlanId, violations)
        user_address = self._string_field(payload, "userAddress", WalletAddress, violations)
        from_token = self._string_field(payload, "fromToken", TokenSymbol, violations)
        to_token = self._string_field(payload, "toToken", TokenSymbol, violations)
        amount = self._string_field(payload, "amount", DecimalString, violations)
        slippage = self._string_field(payload, "slippage", DecimalString, violations)
        created_at = self._string_field(payload, "createdAt", str, violations)
        interval_minutes = self._positive_int(payload, "intervalMinutes", violations)
        duration_weeks = self._positive_int(payload, "durationWeeks", violations)

        if violations:
            raise PlanValidationError(violations)

        return JobCreationRequest(
            plan_id=plan_id,
            user_address=user_address,
            from_token=from_token,
            to_token=to_token,
            amount=amount,
            schedule=ExecutionSchedule(
                interval_minutes=interval_minutes,
                duration_weeks=duration_weeks,
            ),
            slippage=slippage,
            created_at=created_at,
        )

    @staticmethod
    def _string_field(
        payload: Mapping[str, Any],
        name: str,
        factory: Callable[[str], T],
        violations: List[FieldViolation],
    ) -> Optional[T]:
        """Read a required non-empty string and build its value object."""
        value = payload.get(name)
        if value is None:
            violations.append(FieldViolation(name, "is required"))
            return None
        if not isinstance(value, str):
            violations.append(FieldViolation(name, "must be a string"))
            return None
        if not value.strip():
            violations.append(FieldViolation(name, "must not be empty"))
            return None
        try:
            return factory(value)
        except ValueError as exc:
            violations.append(FieldViolation(name, str(exc)))
            return None

    @staticmethod
    def _positive_int(
        payload: Mapping[str, Any],
        name: str,
        violations: List[FieldViolation],
    ) -> Optional[int]:
        """Read a required integer of at least 1."""
        value = payload.get(name)
        if value is None:
            violations.append(FieldViolation(name, "is required"))
            return None
        if isinstance(value, bool) or not isinstance(value, int):
            violations.append(FieldViolation(name, "must be an integer"))
            return None
        if value < 1:
            violations.append(FieldViolation(name, f"must be at least 1, got {value}"))
            return None
        return value
