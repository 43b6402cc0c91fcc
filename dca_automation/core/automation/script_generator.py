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

"""Deterministic DCA automation script and metadata generation.

The scheduler runs the generated Go program before every execution to obtain
the dynamic arguments of ``executeSwap``. The program only carries the plan
parameters; fresh swap calldata is fetched from the prepare-swap API at
execution time.
"""

import json
from string import Template
from typing import Any, Dict

from .entities import Artifact, JobCreationRequest
from .exceptions import ArtifactGenerationError
from .services import FingerprintService
from .tokens import resolve_token

METADATA_VERSION = 1

_SCRIPT_TEMPLATE = Template('''package main

// DCA automation script for plan ${plan_id_comment}
// Plan created at ${created_at_comment}

import (
    "bytes"
    "encoding/json"
    "fmt"
    "io"
    "net/http"
    "time"
)

var DCA_CONFIG = map[string]interface{}{
    "planId": ${plan_id},
    "userAddress": ${user_address},
    "fromToken": ${from_token},
    "toToken": ${to_token},
    "amount": ${amount},
    "slippage": ${slippage},
    "createdAt": ${created_at},
}

const PREPARE_SWAP_URL = ${prepare_swap_url}

type PrepareSwapResponse struct {
    Success bool `json:"success"`
    Data struct {
        Transactions []struct {
            Data string `json:"data"`
        } `json:"transactions"`
    } `json:"data"`
}

func getTransactionData() (string, error) {
    requestPayload := map[string]interface{}{
        "fromToken": DCA_CONFIG["fromToken"],
        "toToken": DCA_CONFIG["toToken"],
        "amount": DCA_CONFIG["amount"],
        "userAddress": DCA_CONFIG["userAddress"],
        "slippage": DCA_CONFIG["slippage"],
    }

    jsonPayload, err := json.Marshal(requestPayload)
    if err != nil {
        return "0x", err
    }

    client := &http.Client{Timeout: 30 * time.Second}
    req, err := http.NewRequest("POST", PREPARE_SWAP_URL, bytes.NewBuffer(jsonPayload))
    if err != nil {
        return "0x", err
    }
    req.Header.Set("Content-Type", "application/json")

    resp, err := client.Do(req)
    if err != nil {
        return "0x", err
    }
    defer resp.Body.Close()

    body, err := io.ReadAll(resp.Body)
    if err != nil {
        return "0x", err
    }

    var apiResp PrepareSwapResponse
    if err := json.Unmarshal(body, &apiResp); err != nil {
        return "0x", err
    }

    if !apiResp.Success || len(apiResp.Data.Transactions) == 0 {
        return "0x", fmt.Errorf("API response error or no transactions")
    }

    // Last transaction carries the swap itself
    lastTx := apiResp.Data.Transactions[len(apiResp.Data.Transactions)-1]
    return lastTx.Data, nil
}

func main() {
    transactionData, err := getTransactionData()
    if err != nil {
        fmt.Printf("Error getting transaction data: %v\\n", err)
        transactionData = "0x"
    }

    resultPayload := map[string]interface{}{
        "user": DCA_CONFIG["userAddress"],
        "token": DCA_CONFIG["fromToken"],
        "amount": DCA_CONFIG["amount"],
        "data": transactionData,
    }

    jsonValue, _ := json.Marshal(resultPayload)
    fmt.Println("Payload received:", string(jsonValue))
}
''')


def _go_string(value: str) -> str:
    """Quote a value as a Go string literal."""
    return json.dumps(value)


def _comment_safe(value: str) -> str:
    """Collapse a value onto one line for use inside a // comment."""
    return " ".join(value.split())


class DcaScriptGenerator:
    """Generates the automation script and metadata for a DCA plan.

    Output depends only on the request and the configured prepare-swap URL:
    identical requests always yield byte-identical artifacts.
    """

    def __init__(self, prepare_swap_url: str) -> None:
        """Initialize generator.

        Args:
            prepare_swap_url: Endpoint the script calls for swap calldata.
        """
        self._prepare_swap_url = prepare_swap_url

    def generate(self, request: JobCreationRequest) -> Artifact:
        """Generate the script and metadata for a request.

        Args:
            request: Validated job creation request.

        Returns:
            Artifact holding both documents.

        Raises:
            ArtifactGenerationError: If a required field is missing.
        """
        self._check_required_fields(request)

        plan_id = str(request.plan_id)
        script = self._render_script(request)
        script_name = f"dca-script-{plan_id}.go"
        metadata = self._build_metadata(request, script, script_name)

        return Artifact(
            script=script,
            script_name=script_name,
            metadata=metadata,
            metadata_name=f"dca-metadata-{plan_id}.json",
        )

    def _check_required_fields(self, request: JobCreationRequest) -> None:
        """Reject requests that lost a field after validation."""
        plan_id = str(getattr(request, "plan_id", None) or "<unknown>")
        for name in (
            "plan_id",
            "user_address",
            "from_token",
            "to_token",
            "amount",
            "schedule",
            "slippage",
            "created_at",
        ):
            value = getattr(request, name, None)
            if value is None or (isinstance(value, str) and not value):
                raise ArtifactGenerationError(plan_id, f"missing required field {name}")

    def _render_script(self, request: JobCreationRequest) -> str:
        """Render the Go program for a request."""
        return _SCRIPT_TEMPLATE.substitute(
            plan_id_comment=_comment_safe(str(request.plan_id)),
            created_at_comment=_comment_safe(request.created_at),
            plan_id=_go_string(str(request.plan_id)),
            user_address=_go_string(str(request.user_address)),
            from_token=_go_string(str(request.from_token)),
            to_token=_go_string(str(request.to_token)),
            amount=_go_string(str(request.amount)),
            slippage=_go_string(str(request.slippage)),
            created_at=_go_string(request.created_at),
            prepare_swap_url=_go_string(self._prepare_swap_url),
        )

    def _build_metadata(
        self,
        request: JobCreationRequest,
        script: str,
        script_name: str,
    ) -> Dict[str, Any]:
        """Describe the script so it can be audited without parsing it."""
        schedule = request.schedule
        return {
            "name": f"dca-automation-{request.plan_id}",
            "version": METADATA_VERSION,
            "planId": str(request.plan_id),
            "author": str(request.user_address),
            "createdAt": request.created_at,
            "tokenPair": {
                "from": self._token_entry(request.from_token),
                "to": self._token_entry(request.to_token),
            },
            "amount": str(request.amount),
            "slippage": str(request.slippage),
            "schedule": {
                "intervalMinutes": schedule.interval_minutes,
                "durationWeeks": schedule.duration_weeks,
                "executionCount": schedule.execution_count,
                "timeIntervalSeconds": schedule.time_interval_seconds,
                "timeFrameSeconds": schedule.time_frame_seconds,
            },
            "script": {
                "fileName": script_name,
                "language": "go",
                "sha256": FingerprintService.digest(script.encode("utf-8")),
            },
        }

    @staticmethod
    def _token_entry(symbol) -> Dict[str, Any]:
        token = resolve_token(symbol)
        return {
            "symbol": str(symbol),
            "address": token.address if token else None,
        }
