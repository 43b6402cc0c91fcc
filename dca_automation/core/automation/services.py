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

"""Domain services for the automation domain."""

import hashlib
import json
from typing import Any, Dict, Optional

from .ports import Signer
from .value_objects import ExecutionMode


class FingerprintService:
    """Domain service for computing deterministic content fingerprints."""

    @staticmethod
    def canonicalize(body: Dict[str, Any]) -> bytes:
        """Serialize a JSON document deterministically.

        Keys are sorted and no insignificant whitespace is emitted, so equal
        documents always produce equal bytes.

        Args:
            body: JSON-compatible dictionary.

        Returns:
            UTF-8 encoded canonical JSON.
        """
        return json.dumps(body, sort_keys=True, separators=(',', ':')).encode('utf-8')

    @staticmethod
    def digest(content: bytes) -> str:
        """Return the SHA-256 hex digest of raw bytes."""
        return hashlib.sha256(content).hexdigest()


class ExecutionModeSelector:  # pylint: disable=too-few-public-methods
    """Classifies a request as live or simulated.

    A missing signer is a normal input, not an error: the request still runs
    end-to-end on synthetic identifiers.
    """

    @staticmethod
    def select(signer: Optional[Signer]) -> ExecutionMode:
        """Select the execution mode for a request.

        Args:
            signer: Signing capability bound to the request, if any.

        Returns:
            LIVE when a signer is available, SIMULATED otherwise.
        """
        if signer is None:
            return ExecutionMode.SIMULATED
        return ExecutionMode.LIVE
