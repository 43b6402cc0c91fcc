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

"""Arbitrum token registry and scheduler job template constants."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .value_objects import TokenSymbol


@dataclass(frozen=True)
class TokenInfo:
    """ERC-20 token deployed on Arbitrum."""

    symbol: str
    name: str
    address: str
    decimals: int


ARBITRUM_TOKENS: Dict[str, TokenInfo] = {
    "USDC": TokenInfo("USDC", "USD Coin", "0xaf88d065e77c8cC2239327C5EDb3A432268e5831", 6),
    "USDT": TokenInfo("USDT", "Tether USD", "0xFd086bC7CD5C481DCC9C85ebE478A1C0b69FCbb9", 6),
    "DAI": TokenInfo("DAI", "Dai Stablecoin", "0xDA10009cBd5D07dd0CeCc66161FC93D7c9000da1", 18),
    "WETH": TokenInfo("WETH", "Wrapped Ether", "0x82aF49447D8a07e3bd95BD0d56f35241523fBab1", 18),
    "WBTC": TokenInfo("WBTC", "Wrapped Bitcoin", "0x2f2a2543B76A4166549F7aaB2e75Bef0aefC5B0f", 8),
    "ARB": TokenInfo("ARB", "Arbitrum", "0x912CE59144191C1204E64559FE8253a0e49E6548", 18),
    "LINK": TokenInfo("LINK", "Chainlink", "0xf97f4df75117a78c1A5a0DBb814Af92458539FB4", 18),
    "UNI": TokenInfo("UNI", "Uniswap", "0xFa7F8980b0f1E64A2062791cc3b0871572f1F7f0", 18),
}

# ETH trades through its wrapped form
TOKEN_ALIASES: Dict[str, str] = {"ETH": "WETH", "BTC": "WBTC"}


def resolve_token(symbol: TokenSymbol) -> Optional[TokenInfo]:
    """Look up a token by symbol.

    Args:
        symbol: Token symbol (already upper case).

    Returns:
        TokenInfo if the symbol is known, None otherwise.
    """
    key = TOKEN_ALIASES.get(symbol.value, symbol.value)
    return ARBITRUM_TOKENS.get(key)


DCA_JOB_TITLE = "dca-automate"
DCA_SCHEDULE_TYPE = "interval"
TARGET_FUNCTION_NAME = "executeSwap"

SWAP_EXECUTOR_ABI: List[Dict[str, Any]] = [
    {
        "type": "function",
        "name": TARGET_FUNCTION_NAME,
        "inputs": [
            {"name": "user", "type": "address", "internalType": "address"},
            {"name": "token", "type": "address", "internalType": "address"},
            {"name": "amount", "type": "uint256", "internalType": "uint256"},
            {"name": "data", "type": "bytes", "internalType": "bytes"},
        ],
        "outputs": [],
        "stateMutability": "nonpayable",
    },
]
