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

"""CreateAutomationJob use case implementation."""

import logging
from typing import Mapping, Optional

from dca_automation.core.automation.entities import (
    Artifact,
    JobCreationRequest,
    JobRecord,
    JobRegistration,
    PublishedArtifact,
)
from dca_automation.core.automation.exceptions import (
    ScheduleRejectedError,
    UpstreamServiceError,
)
from dca_automation.core.automation.ports import ContentStore, JobScheduler, Signer
from dca_automation.core.automation.script_generator import DcaScriptGenerator
from dca_automation.core.automation.services import ExecutionModeSelector
from dca_automation.core.automation.value_objects import (
    ContentAddress,
    CorrelationId,
    ExecutionMode,
)

from ..commands import CreateAutomationJobCommand
from ..dtos import AutomationJobResult
from ..linkage import PlanLinkageUpdater

logger = logging.getLogger(__name__)


class CreateAutomationJobUseCase:
    """Use case for turning a DCA plan into a scheduled automation job.

    The workflow runs strictly in order:
    - Select the execution mode from the signing capability
    - Generate the script and its metadata
    - Publish the script, then the metadata
    - Register the job against the script address
    - Record the job on the plan (best effort)

    Any failure before registration aborts the request with nothing
    registered. A failed plan update after registration is reported as a
    warning on an otherwise successful result.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        generator: DcaScriptGenerator,
        content_stores: Mapping[ExecutionMode, ContentStore],
        schedulers: Mapping[ExecutionMode, JobScheduler],
        linkage_updater: PlanLinkageUpdater,
        mode_selector: Optional[ExecutionModeSelector] = None,
    ) -> None:
        """Initialize use case with its collaborators.

        Args:
            generator: Script and metadata generator.
            content_stores: Content store for each execution mode.
            schedulers: Job scheduler for each execution mode.
            linkage_updater: Plan store linkage updater.
            mode_selector: Execution mode selector.
        """
        self._generator = generator
        self._content_stores = dict(content_stores)
        self._schedulers = dict(schedulers)
        self._linkage_updater = linkage_updater
        self._mode_selector = mode_selector or ExecutionModeSelector()

    def execute(self, command: CreateAutomationJobCommand) -> AutomationJobResult:
        """Execute automation job creation.

        Args:
            command: Command with the validated request.

        Returns:
            AutomationJobResult describing the job and published documents.

        Raises:
            ArtifactGenerationError: If the script cannot be generated.
            UpstreamServiceError: If publishing or registration fails.
        """
        request = command.request
        correlation_id = command.correlation_id
        mode = self._mode_selector.select(command.signer)
        logger.info(
            "Creating automation job for plan %s in %s mode [correlation_id=%s]",
            request.plan_id,
            mode.value,
            correlation_id,
        )

        artifact = self._generator.generate(request)
        published = self._publish(artifact, request, mode, correlation_id)
        job = self._register(request, published.script, mode, command.signer, correlation_id)
        linkage = self._linkage_updater.update(
            request.plan_id,
            job.job_id,
            published.script,
            correlation_id=correlation_id,
        )

        logger.info(
            "Automation job %s created for plan %s (linked=%s) [correlation_id=%s]",
            job.job_id,
            request.plan_id,
            linkage.updated,
            correlation_id,
        )
        return AutomationJobResult.from_outcome(
            job=job,
            published=published,
            linkage=linkage,
            plan_id=str(request.plan_id),
        )

    def _publish(
        self,
        artifact: Artifact,
        request: JobCreationRequest,
        mode: ExecutionMode,
        correlation_id: CorrelationId,
    ) -> PublishedArtifact:
        """Publish the script, then its metadata."""
        store = self._content_stores[mode]
        plan_id = str(request.plan_id)

        script_address = self._publish_document(
            store,
            "publish-script",
            artifact.script_name,
            artifact.script_bytes,
            {"planId": plan_id, "kind": "dca-script"},
            correlation_id,
        )
        metadata_address = self._publish_document(
            store,
            "publish-metadata",
            artifact.metadata_name,
            artifact.metadata_bytes,
            {"planId": plan_id, "kind": "dca-metadata", "scriptCid": script_address.cid},
            correlation_id,
        )
        return PublishedArtifact(script=script_address, metadata=metadata_address)

    @staticmethod
    def _publish_document(  # pylint: disable=too-many-arguments
        store: ContentStore,
        operation: str,
        name: str,
        content: bytes,
        keyvalues: dict,
        correlation_id: CorrelationId,
    ) -> ContentAddress:
        """Publish one document, naming the failing step on error."""
        try:
            return store.publish(name, content, keyvalues=keyvalues)
        except UpstreamServiceError as exc:
            logger.error(
                "%s failed for %s [correlation_id=%s]: %s",
                operation,
                name,
                correlation_id,
                exc.detail,
            )
            raise UpstreamServiceError(
                operation,
                exc.detail,
                correlation_id=str(correlation_id),
            ) from exc

    def _register(  # pylint: disable=too-many-arguments
        self,
        request: JobCreationRequest,
        script_address: ContentAddress,
        mode: ExecutionMode,
        signer: Optional[Signer],
        correlation_id: CorrelationId,
    ) -> JobRecord:
        """Register the job against the published script."""
        schedule = request.schedule
        if schedule.execution_count < 1:
            raise ScheduleRejectedError(
                schedule.interval_minutes,
                schedule.duration_weeks,
                correlation_id=str(correlation_id),
            )

        registration = JobRegistration(
            plan_id=request.plan_id,
            content_address=script_address,
            schedule=schedule,
            owner_address=request.user_address,
        )
        try:
            return self._schedulers[mode].register(registration, signer=signer)
        except UpstreamServiceError as exc:
            logger.error(
                "register-job failed for plan %s [correlation_id=%s]: %s",
                request.plan_id,
                correlation_id,
                exc.detail,
            )
            raise UpstreamServiceError(
                "register-job",
                exc.detail,
                correlation_id=str(correlation_id),
            ) from exc
