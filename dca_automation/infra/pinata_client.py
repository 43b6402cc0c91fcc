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

"""Pinata IPFS content store."""

import json
import logging
from typing import Dict, Optional

import httpx

from dca_automation.core.automation.exceptions import UpstreamServiceError
from dca_automation.core.automation.ports import ContentStore
from dca_automation.core.automation.value_objects import ContentAddress

logger = logging.getLogger(__name__)

PIN_FILE_PATH = "/pinning/pinFileToIPFS"


class PinataContentStore(ContentStore):
    """Publishes documents to IPFS through the Pinata pinning API."""

    OPERATION = "pinata-upload"

    def __init__(
        self,
        api_url: str,
        api_key: str,
        secret_api_key: str,
        gateway_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """Initialize the content store.

        Args:
            api_url: Pinata API base URL.
            api_key: Pinata API key.
            secret_api_key: Pinata secret API key.
            gateway_url: Gateway prefix returned addresses resolve under.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport, used by tests.
        """
        self._api_url = api_url
        self._api_key = api_key
        self._secret_api_key = secret_api_key
        self._gateway_url = gateway_url
        self._timeout = timeout
        self._transport = transport

    def is_configured(self) -> bool:
        """Check whether both Pinata credentials are set."""
        return bool(self._api_key and self._secret_api_key)

    def publish(
        self,
        name: str,
        content: bytes,
        keyvalues: Optional[Dict[str, str]] = None,
    ) -> ContentAddress:
        """Pin a document to IPFS.

        Args:
            name: File name of the document.
            content: Document bytes.
            keyvalues: Optional tags stored in the pin metadata.

        Returns:
            Gateway address of the pinned document.

        Raises:
            UpstreamServiceError: If credentials are missing or the upload fails.
        """
        if not self.is_configured():
            raise UpstreamServiceError(
                self.OPERATION,
                "Pinata API credentials are not configured"
            )

        logger.info("Uploading %s (%d bytes) to Pinata", name, len(content))
        files = {"file": (name, content, "application/octet-stream")}
        data = {
            "pinataMetadata": json.dumps({"name": name, "keyvalues": keyvalues or {}}),
            "pinataOptions": json.dumps({"cidVersion": 1, "wrapWithDirectory": False}),
        }
        headers = {
            "pinata_api_key": self._api_key,
            "pinata_secret_api_key": self._secret_api_key,
        }

        try:
            with httpx.Client(
                base_url=self._api_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = client.post(PIN_FILE_PATH, files=files, data=data, headers=headers)
        except httpx.TimeoutException:
            raise UpstreamServiceError(
                self.OPERATION,
                f"Timeout after {self._timeout}s while uploading {name}"
            ) from None
        except httpx.HTTPError as exc:
            raise UpstreamServiceError(
                self.OPERATION,
                f"Error uploading {name}: {exc}"
            ) from exc

        if response.status_code != 200:
            raise UpstreamServiceError(
                self.OPERATION,
                f"Pinata upload failed with status {response.status_code}: "
                f"{_error_text(response)}"
            )

        cid = _json_body(response).get("IpfsHash")
        if not cid:
            raise UpstreamServiceError(self.OPERATION, "Pinata response is missing IpfsHash")

        logger.info("Uploaded %s to IPFS as %s", name, cid)
        return ContentAddress.on_gateway(self._gateway_url, cid, name)


def _json_body(response: httpx.Response) -> dict:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _error_text(response: httpx.Response) -> str:
    body = _json_body(response)
    error = body.get("error")
    if isinstance(error, dict):
        error = error.get("details") or error.get("reason")
    return str(error or body.get("message") or response.reason_phrase or response.text)
