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

"""CreateAutomationJob command DTO."""

from dataclasses import dataclass
from typing import Optional

from dca_automation.core.automation.entities import JobCreationRequest
from dca_automation.core.automation.ports import Signer
from dca_automation.core.automation.value_objects import CorrelationId


@dataclass(frozen=True)
class CreateAutomationJobCommand:
    """Command to automate a DCA plan.

    Immutable command object carrying an already validated request.

    Attributes:
        request: Validated job creation request.
        correlation_id: Request correlation identifier for tracing.
        signer: Signing capability bound to the request, if any.
    """

    request: JobCreationRequest
    correlation_id: CorrelationId
    signer: Optional[Signer] = None
