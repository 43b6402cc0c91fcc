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

"""Unit tests for DcaScriptGenerator."""

import dataclasses
import json

import pytest

from dca_automation.core.automation.exceptions import ArtifactGenerationError
from dca_automation.core.automation.script_generator import DcaScriptGenerator
from dca_automation.core.automation.services import FingerprintService
from dca_automation.core.automation.value_objects import PlanId

PREPARE_SWAP_URL = "https://dca.test/api/dca/prepare-swap"


class TestDcaScriptGenerator:
    """Tests for DcaScriptGenerator."""

    def test_generation_is_deterministic(self, script_generator, job_request):
        """Identical requests should produce byte-identical artifacts."""
        first = script_generator.generate(job_request)
        second = DcaScriptGenerator(PREPARE_SWAP_URL).generate(job_request)

        assert first.script_bytes == second.script_bytes
        assert first.metadata_bytes == second.metadata_bytes

    def test_file_names_derive_from_plan_id(self, script_generator, job_request):
        """Script and metadata names should embed the plan ID."""
        artifact = script_generator.generate(job_request)
        assert artifact.script_name == "dca-script-p1.go"
        assert artifact.metadata_name == "dca-metadata-p1.json"

    def test_script_embeds_request_values(self, script_generator, job_request):
        """Script should embed every request value verbatim."""
        script = script_generator.generate(job_request).script

        assert script.startswith("package main\n")
        assert '"planId": "p1"' in script
        assert f'"userAddress": "{job_request.user_address}"' in script
        assert '"fromToken": "USDC"' in script
        assert '"toToken": "ETH"' in script
        assert '"amount": "100.50"' in script
        assert '"slippage": "2.0"' in script
        assert '"createdAt": "2024-01-01T00:00:00Z"' in script
        assert f'const PREPARE_SWAP_URL = "{PREPARE_SWAP_URL}"' in script

    def test_script_quotes_hostile_values(self, script_generator, job_request):
        """Quotes and newlines in values should not break the Go source."""
        hostile = dataclasses.replace(
            job_request,
            plan_id=PlanId('p"1\n// injected'),
        )
        script = script_generator.generate(hostile).script

        assert '"planId": "p\\"1\\n// injected"' in script
        assert "\n// injected\n" not in script

    def test_metadata_describes_schedule(self, script_generator, job_request):
        """Metadata should describe the plan and its schedule."""
        metadata = script_generator.generate(job_request).metadata

        assert metadata["planId"] == "p1"
        assert metadata["author"] == str(job_request.user_address)
        assert metadata["amount"] == "100.50"
        assert metadata["schedule"]["intervalMinutes"] == 1440
        assert metadata["schedule"]["durationWeeks"] == 4
        assert metadata["schedule"]["executionCount"] == 28
        assert metadata["schedule"]["timeIntervalSeconds"] == 86400

    def test_metadata_resolves_token_addresses(self, script_generator, job_request):
        """Known symbols and aliases should resolve to contract addresses."""
        pair = script_generator.generate(job_request).metadata["tokenPair"]

        assert pair["from"]["symbol"] == "USDC"
        assert pair["from"]["address"].startswith("0x")
        assert pair["to"]["symbol"] == "ETH"
        assert pair["to"]["address"].startswith("0x")

    def test_metadata_fingerprints_script(self, script_generator, job_request):
        """Metadata should carry the SHA-256 of the script bytes."""
        artifact = script_generator.generate(job_request)
        assert artifact.metadata["script"]["sha256"] == (
            FingerprintService.digest(artifact.script_bytes)
        )

    def test_metadata_bytes_are_canonical_json(self, script_generator, job_request):
        """Metadata bytes should be sorted, indented JSON."""
        artifact = script_generator.generate(job_request)
        decoded = json.loads(artifact.metadata_bytes)

        assert decoded == artifact.metadata
        assert artifact.metadata_bytes.endswith(b"\n")

    def test_missing_field_raises(self, script_generator, job_request):
        """A request missing a required field should fail generation."""
        broken = dataclasses.replace(job_request, created_at="")
        with pytest.raises(ArtifactGenerationError, match="created_at"):
            script_generator.generate(broken)
