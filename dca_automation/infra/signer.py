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

"""Local-key signing capability backed by eth_account."""

from typing import Optional

from eth_account import Account
from eth_account.messages import encode_defunct
from eth_account.signers.local import LocalAccount

from dca_automation.core.automation.exceptions import SignerConfigurationError
from dca_automation.core.automation.ports import Signer


class LocalAccountSigner(Signer):
    """Signs EIP-191 messages with a local private key.

    The key is never logged or exposed; only the account address is.
    """

    def __init__(self, account: LocalAccount) -> None:
        """Initialize signer.

        Args:
            account: eth_account local account holding the key.
        """
        self._account = account

    @property
    def address(self) -> str:
        """Checksummed account address."""
        return self._account.address

    def sign_message(self, message: bytes) -> str:
        """Sign a message (EIP-191 personal_sign).

        Args:
            message: Raw bytes to sign.

        Returns:
            0x-prefixed hex signature.
        """
        signed = self._account.sign_message(encode_defunct(primitive=message))
        return "0x" + bytes(signed.signature).hex()

    @classmethod
    def from_key(cls, private_key: str) -> "LocalAccountSigner":
        """Create a signer from a raw hex private key.

        Args:
            private_key: Hex private key, with or without 0x prefix.

        Returns:
            LocalAccountSigner for the key.

        Raises:
            SignerConfigurationError: If the key is not a valid private key.
        """
        key = private_key.strip()
        if key.startswith("0x"):
            key = key[2:]
        try:
            account = Account.from_key(key)
        except Exception as exc:  # pylint: disable=broad-except
            raise SignerConfigurationError(
                "Configured signer private key is invalid"
            ) from exc
        return cls(account)


def load_signer(private_key: str) -> Optional[LocalAccountSigner]:
    """Return a signer for a configured key, or None when no key is set.

    Args:
        private_key: Hex private key from configuration; may be empty.

    Returns:
        LocalAccountSigner, or None for simulated-only deployments.

    Raises:
        SignerConfigurationError: If a key is set but invalid.
    """
    if not private_key or not private_key.strip():
        return None
    return LocalAccountSigner.from_key(private_key)
