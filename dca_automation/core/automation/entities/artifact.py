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

"""Automation artifact entities."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict

from ..value_objects import ContentAddress


@dataclass(frozen=True)
class Artifact:
    """Generated automation script and its metadata document.

    Attributes:
        script: Script source text.
        script_name: File name the script is published under.
        metadata: Structured description of the script.
        metadata_name: File name the metadata is published under.
    """

    script: str
    script_name: str
    metadata: Dict[str, Any] = field(hash=False)
    metadata_name: str

    @property
    def script_bytes(self) -> bytes:
        """Return the UTF-8 encoded script."""
        return self.script.encode("utf-8")

    @property
    def metadata_bytes(self) -> bytes:
        """Return the canonical JSON encoding of the metadata."""
        return (json.dumps(self.metadata, sort_keys=True, indent=2) + "\n").encode("utf-8")


@dataclass(frozen=True)
class PublishedArtifact:
    """Content addresses of a published artifact.

    Attributes:
        script: Address of the published script.
        metadata: Address of the published metadata document.
    """

    script: ContentAddress
    metadata: ContentAddress
