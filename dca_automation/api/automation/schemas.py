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

"""Response envelope models for the DCA automation API."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    """Base model serialised with camelCase wire names."""

    model_config = ConfigDict(populate_by_name=True)


class AutomationJobData(_CamelModel):
    """Identifiers of the created job and its published documents."""

    plan_id: str = Field(alias="planId")
    job_id: str = Field(alias="jobId")
    ipfs_link: str = Field(alias="ipfsLink")
    script_ipfs_url: str = Field(alias="scriptIpfsUrl")
    metadata_ipfs_url: str = Field(alias="metadataIpfsUrl")
    job_data: Optional[Dict[str, Any]] = Field(default=None, alias="jobData")


class SuccessEnvelope(_CamelModel):
    """Envelope returned when the job was created."""

    success: bool = True
    data: AutomationJobData
    message: str
    warning: Optional[str] = None


class FailureEnvelope(_CamelModel):
    """Envelope returned when the request failed."""

    success: bool = False
    error: str
    message: str
