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

"""Job creation request entity."""

from dataclasses import dataclass

from ..value_objects import (
    DecimalString,
    ExecutionSchedule,
    PlanId,
    TokenSymbol,
    WalletAddress,
)


@dataclass(frozen=True)
class JobCreationRequest:
    """Validated request to automate a DCA plan.

    Exists only for the duration of one workflow invocation.

    Attributes:
        plan_id: Plan to automate.
        user_address: Account that owns the plan and its job.
        from_token: Asset spent on every execution.
        to_token: Asset bought on every execution.
        amount: Source-asset units spent per execution.
        schedule: Interval and lifetime of the job.
        slippage: Percentage tolerance for each swap.
        created_at: Original plan creation timestamp, used verbatim.
    """

    plan_id: PlanId
    user_address: WalletAddress
    from_token: TokenSymbol
    to_token: TokenSymbol
    amount: DecimalString
    schedule: ExecutionSchedule
    slippage: DecimalString
    created_at: str
