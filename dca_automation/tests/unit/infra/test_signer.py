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

"""Unit tests for the local account signer."""

import pytest
from eth_account import Account
from eth_account.messages import encode_defunct

from dca_automation.core.automation.exceptions import SignerConfigurationError
from dca_automation.infra.signer import LocalAccountSigner, load_signer

PRIVATE_KEY = "0x" + "11" * 32


class TestLocalAccountSigner:
    """Tests for LocalAccountSigner."""

    def test_address_matches_key(self):
        """Signer address should be the key's account address."""
        signer = LocalAccountSigner.from_key(PRIVATE_KEY)
        assert signer.address == Account.from_key(PRIVATE_KEY).address

    def test_key_without_prefix_is_accepted(self):
        """Keys without the 0x prefix should load the same account."""
        with_prefix = LocalAccountSigner.from_key(PRIVATE_KEY)
        without_prefix = LocalAccountSigner.from_key(PRIVATE_KEY[2:])
        assert with_prefix.address == without_prefix.address

    def test_signature_is_recoverable(self):
        """Signature should recover to the signer address."""
        signer = LocalAccountSigner.from_key(PRIVATE_KEY)
        signature = signer.sign_message(b'{"planId":"p1"}')

        assert signature.startswith("0x")
        recovered = Account.recover_message(
            encode_defunct(primitive=b'{"planId":"p1"}'), signature=signature
        )
        assert recovered == signer.address

    def test_invalid_key_raises(self):
        """Malformed key should raise SignerConfigurationError."""
        with pytest.raises(SignerConfigurationError):
            LocalAccountSigner.from_key("not-a-key")


class TestLoadSigner:
    """Tests for load_signer."""

    @pytest.mark.parametrize("value", ["", "   "])
    def test_empty_key_returns_none(self, value):
        """No configured key should mean no signer."""
        assert load_signer(value) is None

    def test_configured_key_returns_signer(self):
        """Configured key should return a signer."""
        assert isinstance(load_signer(PRIVATE_KEY), LocalAccountSigner)
