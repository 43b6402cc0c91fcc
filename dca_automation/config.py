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

"""Service configuration loaded from environment variables."""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

from dca_automation.core.automation.value_objects import WalletAddress

DEFAULT_PREPARE_SWAP_URL = "https://dca-backend.udonswap.org/api/dca/prepare-swap"


@dataclass(frozen=True)
class Settings:  # pylint: disable=too-many-instance-attributes
    """Typed settings for the DCA automation service.

    Attributes:
        plan_store_url: Base URL of the DCA plan store API.
        pinata_api_url: Base URL of the Pinata pinning API.
        pinata_api_key: Pinata API key.
        pinata_secret_api_key: Pinata secret API key.
        ipfs_gateway_url: Gateway prefix published documents resolve under.
        triggerx_api_url: Base URL of the TriggerX job API.
        triggerx_api_key: TriggerX API key.
        signer_private_key: Hex private key of the job signer; empty means
            every request runs in simulated mode.
        executor_contract_address: SwapExecutor contract the job calls;
            required when a signing key is configured.
        chain_id: Chain the job executes on.
        job_timezone: Timezone registered with the scheduler.
        prepare_swap_url: Endpoint the generated script calls.
        upstream_timeout_seconds: Timeout applied to every outbound call.
        log_level: Root log level.
    """

    plan_store_url: str = "http://localhost:3002"
    pinata_api_url: str = "https://api.pinata.cloud"
    pinata_api_key: str = ""
    pinata_secret_api_key: str = ""
    ipfs_gateway_url: str = "https://gateway.pinata.cloud/ipfs"
    triggerx_api_url: str = "https://data.triggerx.network"
    triggerx_api_key: str = ""
    signer_private_key: str = ""
    executor_contract_address: str = ""
    chain_id: str = "42161"
    job_timezone: str = "Asia/Calcutta"
    prepare_swap_url: str = DEFAULT_PREPARE_SWAP_URL
    upstream_timeout_seconds: float = 30.0
    log_level: str = "INFO"


def _get(env: Mapping[str, str], name: str, default: str) -> str:
    value = env.get(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ValueError(
            f"DCA_UPSTREAM_TIMEOUT_SECONDS must be a number, got {raw!r}"
        ) from exc
    if timeout <= 0:
        raise ValueError(
            f"DCA_UPSTREAM_TIMEOUT_SECONDS must be positive, got {raw!r}"
        )
    return timeout


def _parse_executor_address(raw: str, signer_private_key: str) -> str:
    if not raw:
        if signer_private_key:
            raise ValueError(
                "DCA_EXECUTOR_ADDRESS must be set when DCA_SIGNER_PRIVATE_KEY is configured"
            )
        return ""
    try:
        return str(WalletAddress(raw))
    except ValueError as exc:
        raise ValueError(f"DCA_EXECUTOR_ADDRESS is not a valid address: {raw!r}") from exc


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from environment variables.

    Args:
        env: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        Settings populated from the environment, with defaults applied.

    Raises:
        ValueError: If a numeric setting cannot be parsed, or the executor
            address is malformed or missing while a signing key is set.
    """
    env = os.environ if env is None else env
    defaults = Settings()
    signer_private_key = _get(env, "DCA_SIGNER_PRIVATE_KEY", "")
    executor_contract_address = _parse_executor_address(
        _get(env, "DCA_EXECUTOR_ADDRESS", ""), signer_private_key
    )
    return Settings(
        plan_store_url=_get(env, "DCA_PLAN_STORE_URL", defaults.plan_store_url).rstrip("/"),
        pinata_api_url=_get(env, "PINATA_API_URL", defaults.pinata_api_url).rstrip("/"),
        pinata_api_key=_get(env, "PINATA_API_KEY", ""),
        pinata_secret_api_key=_get(env, "PINATA_SECRET_API_KEY", ""),
        ipfs_gateway_url=_get(env, "IPFS_GATEWAY_URL", defaults.ipfs_gateway_url).rstrip("/"),
        triggerx_api_url=_get(env, "TRIGGERX_API_URL", defaults.triggerx_api_url).rstrip("/"),
        triggerx_api_key=_get(env, "TRIGGERX_API_KEY", ""),
        signer_private_key=signer_private_key,
        executor_contract_address=executor_contract_address,
        chain_id=_get(env, "DCA_CHAIN_ID", defaults.chain_id),
        job_timezone=_get(env, "DCA_JOB_TIMEZONE", defaults.job_timezone),
        prepare_swap_url=_get(env, "DCA_PREPARE_SWAP_URL", defaults.prepare_swap_url),
        upstream_timeout_seconds=_parse_timeout(
            _get(env, "DCA_UPSTREAM_TIMEOUT_SECONDS", str(defaults.upstream_timeout_seconds))
        ),
        log_level=_get(env, "DCA_LOG_LEVEL", defaults.log_level).upper(),
    )


@lru_cache
def get_settings() -> Settings:
    """Return process-wide settings, loaded once."""
    return load_settings()
