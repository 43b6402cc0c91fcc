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

"""Maps workflow outcomes to HTTP responses."""

import logging
from typing import Optional

from fastapi import status
from fastapi.responses import JSONResponse

from dca_automation.core.automation.exceptions import (
    AutomationDomainError,
    PlanValidationError,
)
from dca_automation.orchestrator.automation.dtos import AutomationJobResult

from .schemas import AutomationJobData, FailureEnvelope, SuccessEnvelope

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "Validation Error"
INTERNAL_SERVER_ERROR = "Internal Server Error"
SUCCESS_MESSAGE = "DCA automation job created successfully"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred while creating the automation job"


def success_response(result: AutomationJobResult) -> JSONResponse:
    """Build the 200 envelope for a created job."""
    envelope = SuccessEnvelope(
        data=AutomationJobData(
            plan_id=result.plan_id,
            job_id=result.job_id,
            ipfs_link=result.ipfs_link,
            script_ipfs_url=result.script_ipfs_url,
            metadata_ipfs_url=result.metadata_ipfs_url,
            job_data=result.job_data or None,
        ),
        message=SUCCESS_MESSAGE,
        warning=result.warning,
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=envelope.model_dump(by_alias=True, exclude_none=True),
    )


def failure_response(
    exc: Exception,
    correlation_id: Optional[str] = None,
) -> JSONResponse:
    """Build the failure envelope for an exception.

    Validation failures map to 400. Any other domain error maps to 500 with
    its message text. Anything else is logged with its traceback and
    answered with a generic message.

    Args:
        exc: Exception that ended the workflow.
        correlation_id: Request correlation ID for logging.

    Returns:
        JSONResponse carrying a FailureEnvelope.
    """
    if isinstance(exc, PlanValidationError):
        logger.info(
            "Rejected invalid request [correlation_id=%s]: %s",
            correlation_id,
            exc.message,
        )
        return _failure(status.HTTP_400_BAD_REQUEST, VALIDATION_ERROR, exc.message)

    if isinstance(exc, AutomationDomainError):
        logger.error(
            "Automation job creation failed [correlation_id=%s]: %s",
            correlation_id,
            exc.message,
        )
        return _failure(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            INTERNAL_SERVER_ERROR,
            exc.message,
        )

    logger.exception(
        "Unexpected error during automation job creation [correlation_id=%s]",
        correlation_id,
    )
    return _failure(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        INTERNAL_SERVER_ERROR,
        UNEXPECTED_ERROR_MESSAGE,
    )


def _failure(status_code: int, error: str, message: str) -> JSONResponse:
    envelope = FailureEnvelope(error=error, message=message)
    return JSONResponse(status_code=status_code, content=envelope.model_dump(by_alias=True))
