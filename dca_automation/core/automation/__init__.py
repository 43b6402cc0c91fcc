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

"""DCA automation domain module."""

from .entities import (
    Artifact,
    JobCreationRequest,
    JobRecord,
    JobRegistration,
    LinkageOutcome,
    PublishedArtifact,
)
from .exceptions import (
    AutomationDomainError,
    FieldViolation,
    PlanValidationError,
    ArtifactGenerationError,
    UpstreamServiceError,
    ScheduleRejectedError,
    SignerConfigurationError,
)
from .ports import (
    ContentStore,
    CorrelationIdGenerator,
    JobScheduler,
    PlanStore,
    Signer,
)
from .script_generator import DcaScriptGenerator
from .services import ExecutionModeSelector, FingerprintService
from .value_objects import (
    ContentAddress,
    CorrelationId,
    DecimalString,
    ExecutionMode,
    ExecutionSchedule,
    PlanId,
    TokenSymbol,
    WalletAddress,
)

__all__ = [
    "Artifact",
    "JobCreationRequest",
    "JobRecord",
    "JobRegistration",
    "LinkageOutcome",
    "PublishedArtifact",
    "AutomationDomainError",
    "FieldViolation",
    "PlanValidationError",
    "ArtifactGenerationError",
    "UpstreamServiceError",
    "ScheduleRejectedError",
    "SignerConfigurationError",
    "ContentStore",
    "CorrelationIdGenerator",
    "JobScheduler",
    "PlanStore",
    "Signer",
    "DcaScriptGenerator",
    "ExecutionModeSelector",
    "FingerprintService",
    "ContentAddress",
    "CorrelationId",
    "DecimalString",
    "ExecutionMode",
    "ExecutionSchedule",
    "PlanId",
    "TokenSymbol",
    "WalletAddress",
]
