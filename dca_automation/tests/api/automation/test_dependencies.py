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

"""Unit tests for automation API dependency providers."""

import pytest

from dca_automation.api.automation.dependencies import (
    get_correlation_id_generator,
    get_signer,
    get_use_case,
)
from dca_automation.config import Settings
from dca_automation.core.automation.exceptions import SignerConfigurationError
from dca_automation.infra.signer import LocalAccountSigner
from dca_automation.orchestrator.automation.use_cases import CreateAutomationJobUseCase


class TestDependencies:
    """Tests for dependency providers."""

    def test_no_key_provides_no_signer(self):
        """Unset key should run requests in simulated mode."""
        assert get_signer(Settings()) is None

    def test_configured_key_provides_signer(self):
        """Configured key should provide a local account signer."""
        signer = get_signer(Settings(signer_private_key="0x" + "11" * 32))
        assert isinstance(signer, LocalAccountSigner)

    def test_signer_is_shared_across_requests(self):
        """Same deployment key should resolve to one signer instance."""
        key = "0x" + "22" * 32
        first = get_signer(Settings(signer_private_key=key))
        second = get_signer(Settings(signer_private_key=key))
        assert first is second

    def test_invalid_key_raises(self):
        """Invalid key should raise a configuration error."""
        with pytest.raises(SignerConfigurationError):
            get_signer(Settings(signer_private_key="0xnothex"))

    def test_use_case_is_wired_from_settings(self):
        """Use case should be built from settings without network access."""
        assert isinstance(get_use_case(Settings()), CreateAutomationJobUseCase)

    def test_correlation_ids_are_generated(self):
        """Generator should produce distinct correlation IDs."""
        generator = get_correlation_id_generator()
        assert generator.generate() != generator.generate()
