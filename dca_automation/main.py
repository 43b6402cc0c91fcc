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

"""DCA automation service application."""

import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from dca_automation import __version__
from dca_automation.api.automation import router as automation_router
from dca_automation.api.automation.responses import failure_response
from dca_automation.config import get_settings
from dca_automation.core.automation.exceptions import AutomationDomainError

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="DCA Automation API",
    description="Turns DCA plans into scheduled on-chain automation jobs",
    version=__version__,
)

app.include_router(automation_router)


@app.exception_handler(AutomationDomainError)
async def automation_error_handler(_request: Request, exc: AutomationDomainError) -> JSONResponse:
    """Render domain errors raised outside the route body as envelopes."""
    return failure_response(exc, exc.correlation_id)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    logger.info("Starting DCA automation API")
    uvicorn.run(app, host="0.0.0.0", port=8000)
