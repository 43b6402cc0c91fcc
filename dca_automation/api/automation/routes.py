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

"""DCA automation job routes."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from dca_automation.core.automation.exceptions import (
    FieldViolation,
    PlanValidationError,
)
from dca_automation.core.automation.ports import CorrelationIdGenerator, Signer
from dca_automation.orchestrator.automation.commands import CreateAutomationJobCommand
from dca_automation.orchestrator.automation.use_cases import CreateAutomationJobUseCase
from dca_automation.orchestrator.automation.validation import JobCreationRequestValidator

from .dependencies import (
    get_correlation_id_generator,
    get_signer,
    get_use_case,
    get_validator,
)
from .responses import failure_response, success_response
from .schemas import FailureEnvelope, SuccessEnvelope

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/dca", tags=["dca"])


@router.post(
    "/jobs",
    response_model=SuccessEnvelope,
    responses={400: {"model": FailureEnvelope}, 500: {"model": FailureEnvelope}},
)
async def create_automation_job(
    request: Request,
    validator: JobCreationRequestValidator = Depends(get_validator),
    use_case: CreateAutomationJobUseCase = Depends(get_use_case),
    signer: Optional[Signer] = Depends(get_signer),
    id_generator: CorrelationIdGenerator = Depends(get_correlation_id_generator),
) -> JSONResponse:
    """Create a scheduled automation job for a DCA plan."""
    correlation_id = id_generator.generate()
    logger.info("Received automation job request [correlation_id=%s]", correlation_id)

    try:
        payload = await request.json()
    except ValueError:
        return failure_response(
            PlanValidationError([FieldViolation("body", "must be valid JSON")]),
            str(correlation_id),
        )

    try:
        command = CreateAutomationJobCommand(
            request=validator.validate(payload),
            correlation_id=correlation_id,
            signer=signer,
        )
        result = await run_in_threadpool(use_case.execute, command)
    except Exception as exc:  # pylint: disable=broad-exception-caught
        return failure_response(exc, str(correlation_id))

    return success_response(result)
