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

"""Value objects for the DCA automation domain.

All value objects are immutable and defined by their values, not identity.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar
from urllib.parse import quote

MINUTES_PER_WEEK = 7 * 24 * 60


@dataclass(frozen=True)
class PlanId:
    """Opaque DCA plan identifier assigned by the plan store.

    Attributes:
        value: Plan identifier string.

    Raises:
        ValueError: If value is blank or exceeds length.
    """

    value: str

    MAX_LENGTH: ClassVar[int] = 128

    def __post_init__(self) -> None:
        """Validate plan ID is not blank and within length limit."""
        if not self.value or not self.value.strip():
            raise ValueError("Plan ID cannot be empty")
        if len(self.value) > self.MAX_LENGTH:
            raise ValueError(
                f"Plan ID length cannot exceed {self.MAX_LENGTH} characters, "
                f"got {len(self.value)}"
            )

    def suffix(self, length: int) -> str:
        """Return the trailing characters of the plan ID."""
        return self.value[-length:]

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


@dataclass(frozen=True)
class WalletAddress:
    """EVM account address (0x + 40 hex characters, case-insensitive).

    Attributes:
        value: Address as supplied by the caller.

    Raises:
        ValueError: If value does not match the address pattern.
    """

    value: str

    ADDRESS_PATTERN: ClassVar[str] = r'^0x[a-fA-F0-9]{40}$'

    def __post_init__(self) -> None:
        """Validate address format."""
        if not re.fullmatch(self.ADDRESS_PATTERN, self.value):
            raise ValueError(
                f"Invalid wallet address: {self.value}. "
                f"Expected 0x followed by 40 hexadecimal characters."
            )

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


@dataclass(frozen=True)
class TokenSymbol:
    """Symbolic asset identifier such as USDC or ETH.

    Symbols are normalised to upper case so that lookups and generated
    artifacts do not depend on the caller's casing.

    Attributes:
        value: Upper-case token symbol.

    Raises:
        ValueError: If value is blank or exceeds length.
    """

    value: str

    MAX_LENGTH: ClassVar[int] = 32

    def __post_init__(self) -> None:
        """Validate and normalise the symbol."""
        symbol = (self.value or "").strip()
        if not symbol:
            raise ValueError("Token symbol cannot be empty")
        if len(symbol) > self.MAX_LENGTH:
            raise ValueError(
                f"Token symbol length cannot exceed {self.MAX_LENGTH} characters, "
                f"got {len(symbol)}"
            )
        object.__setattr__(self, "value", symbol.upper())

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


@dataclass(frozen=True)
class DecimalString:
    """Non-negative decimal number carried as a string.

    The value is never converted to a float so that no precision is lost
    between the caller, the generated script and the scheduler.

    Attributes:
        value: Decimal string in the form ``digits[.digits]``.

    Raises:
        ValueError: If value does not match the decimal pattern.
    """

    value: str

    DECIMAL_PATTERN: ClassVar[str] = r'^[0-9]+(\.[0-9]+)?$'

    def __post_init__(self) -> None:
        """Validate decimal format."""
        if not re.fullmatch(self.DECIMAL_PATTERN, self.value):
            raise ValueError(
                f"Invalid decimal string: {self.value}. "
                f"Expected digits with an optional fractional part, e.g. 100 or 100.50."
            )

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


@dataclass(frozen=True)
class CorrelationId:
    """UUID v7 identifier for request tracing.

    Attributes:
        value: String representation of UUID v7.

    Raises:
        ValueError: If value does not match UUID v7 pattern or exceeds length.
    """

    value: str

    UUID_V7_PATTERN: ClassVar[str] = (
        r'^[0-9a-f]{8}-[0-9a-f]{4}-7[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$'
    )
    MAX_LENGTH: ClassVar[int] = 36  # UUID v7 standard length

    def __post_init__(self) -> None:
        """Validate UUID v7 format and length."""
        if len(self.value) > self.MAX_LENGTH:
            raise ValueError(
                f"CorrelationId length cannot exceed {self.MAX_LENGTH} characters, "
                f"got {len(self.value)}"
            )
        if not re.fullmatch(self.UUID_V7_PATTERN, self.value.lower()):
            raise ValueError(f"Invalid UUID v7 format: {self.value}")

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


@dataclass(frozen=True)
class ContentAddress:
    """Reference to a document published to content-addressed storage.

    Attributes:
        cid: Content identifier derived from the document bytes.
        url: Gateway URL the document resolves at.
    """

    cid: str
    url: str

    def __post_init__(self) -> None:
        """Validate that both parts are present."""
        if not self.cid:
            raise ValueError("Content identifier cannot be empty")
        if not self.url:
            raise ValueError("Content URL cannot be empty")

    @classmethod
    def on_gateway(cls, gateway_url: str, cid: str, file_name: str) -> "ContentAddress":
        """Build the address of a document served by an IPFS gateway.

        Args:
            gateway_url: Gateway prefix, e.g. https://gateway.pinata.cloud/ipfs.
            cid: Content identifier.
            file_name: Name the gateway serves the document under.

        Returns:
            ContentAddress with a ``?filename=`` gateway URL.
        """
        return cls(
            cid=cid,
            url=f"{gateway_url.rstrip('/')}/{cid}?filename={quote(file_name)}",
        )

    def __str__(self) -> str:
        """Return string representation."""
        return self.url


@dataclass(frozen=True)
class ExecutionSchedule:
    """Recurring execution schedule of a DCA job.

    Attributes:
        interval_minutes: Minutes between two executions.
        duration_weeks: Total lifetime of the job in weeks.

    Raises:
        ValueError: If either value is not a positive integer.
    """

    interval_minutes: int
    duration_weeks: int

    def __post_init__(self) -> None:
        """Validate both values are positive integers."""
        for name in ("interval_minutes", "duration_weeks"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be an integer of at least 1, got {value!r}")

    @property
    def execution_count(self) -> int:
        """Number of executions over the job lifetime, rounded down."""
        return (self.duration_weeks * MINUTES_PER_WEEK) // self.interval_minutes

    @property
    def time_interval_seconds(self) -> int:
        """Interval between executions in seconds."""
        return self.interval_minutes * 60

    @property
    def time_frame_seconds(self) -> int:
        """Total job lifetime in seconds."""
        return self.duration_weeks * MINUTES_PER_WEEK * 60


class ExecutionMode(str, Enum):
    """Whether a request runs against real upstream services.

    LIVE requires a signing capability bound to the request. SIMULATED is
    chosen when none is available and synthesises identifiers locally.
    """

    LIVE = "live"
    SIMULATED = "simulated"

    def is_live(self) -> bool:
        """Check if the mode performs real publication and registration.

        Returns:
            True if mode is LIVE.
        """
        return self is ExecutionMode.LIVE
