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

"""FastAPI dependency providers for the automation API."""

from functools import lru_cache
from typing import Optional

from fastapi import Depends

from dca_automation.config import Settings, get_settings
from dca_automation.core.automation.ports import CorrelationIdGenerator, Signer
from dca_automation.core.automation.script_generator import DcaScriptGenerator
from dca_automation.core.automation.value_objects import ExecutionMode
from dca_automation.infra.id_generator import SimulatedIdentityGenerator, UUIDv7Generator
from dca_automation.infra.pinata_client import PinataContentStore
from dca_automation.infra.plan_store_client import HttpPlanStore
from dca_automation.infra.signer import load_signer
from dca_automation.infra.simulated import SimulatedContentStore, SimulatedJobScheduler
from dca_automation.infra.triggerx_client import TriggerXJobScheduler
from dca_automation.orchestrator.automation.linkage import PlanLinkageUpdater
from dca_automation.orchestrator.automation.use_cases import CreateAutomationJobUseCase
from dca_automation.orchestrator.automation.validation import JobCreationRequestValidator


@lru_cache
def _signer_for_key(private_key: str) -> Optional[Signer]:
    return load_signer(private_key)


def get_signer(settings: Settings = Depends(get_settings)) -> Optional[Signer]:
    """Provide the signing capability for a request.

    Returns None when no key is configured, which runs the request in
    simulated mode.

    Raises:
        SignerConfigurationError: If the configured key is invalid.
    """
    return _signer_for_key(settings.signer_private_key)


def get_validator() -> JobCreationRequestValidator:
    """Provide the request validator."""
    return JobCreationRequestValidator()


def get_correlation_id_generator() -> CorrelationIdGenerator:
    """Provide the correlation ID generator."""
    return UUIDv7Generator()


def get_use_case(settings: Settings = Depends(get_settings)) -> CreateAutomationJobUseCase:
    """Wire the job creation use case from settings.

    Args:
        settings: Service settings.

    Returns:
        CreateAutomationJobUseCase with live and simulated adapters.
    """
    timeout = settings.upstream_timeout_seconds
    identity_generator = SimulatedIdentityGenerator()

    content_stores = {
        ExecutionMode.LIVE: PinataContentStore(
            api_url=settings.pinata_api_url,
            api_key=settings.pinata_api_key,
            secret_api_key=settings.pinata_secret_api_key,
            gateway_url=settings.ipfs_gateway_url,
            timeout=timeout,
        ),
        ExecutionMode.SIMULATED: SimulatedContentStore(
            gateway_url=settings.ipfs_gateway_url,
            identity_generator=identity_generator,
        ),
    }
    schedulers = {
        ExecutionMode.LIVE: TriggerXJobScheduler(
            api_url=settings.triggerx_api_url,
            api_key=settings.triggerx_api_key,
            executor_contract_address=settings.executor_contract_address,
            chain_id=settings.chain_id,
            timezone=settings.job_timezone,
            timeout=timeout,
        ),
        ExecutionMode.SIMULATED: SimulatedJobScheduler(identity_generator=identity_generator),
    }

    return CreateAutomationJobUseCase(
        generator=DcaScriptGenerator(settings.prepare_swap_url),
        content_stores=content_stores,
        schedulers=schedulers,
        linkage_updater=PlanLinkageUpdater(
            HttpPlanStore(base_url=settings.plan_store_url, timeout=timeout)
        ),
    )
