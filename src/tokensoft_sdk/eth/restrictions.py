"""On-chain transfer restriction checks.

The Ethereum capability is any object exposing the web3.py contract API::

    web3.eth.contract(address=..., abi=...).functions.<name>(*args).call()

``web3.Web3`` satisfies it for the sync client and ``web3.AsyncWeb3`` (whose
``call()`` returns an awaitable) for the async client.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol

from ..core.errors import TokensoftConfigurationError
from .erc1404 import ERC1404_ABI, SUCCESS_CODE

logger = logging.getLogger("tokensoft_sdk")

MISSING_ETHEREUM_CLIENT_MESSAGE = (
    "Programmer: No Ethereum client provided, so can't access Ethereum. Fix this by "
    "providing an Ethereum provider (e.g., web3 instance) on instantiation."
)


class Contract(Protocol):
    functions: Any


class EthModule(Protocol):
    def contract(self, *, address: str, abi: list[dict[str, object]]) -> Contract: ...


class EthereumClient(Protocol):
    eth: EthModule


@dataclass(slots=True, frozen=True)
class Transaction:
    token_address: str
    from_wallet: str
    to_wallet: str
    qty_base_units: int


@dataclass(slots=True, frozen=True)
class TransferRestriction:
    code: str
    text: str


def _require_client(web3: EthereumClient | None) -> EthereumClient:
    if web3 is None:
        raise TokensoftConfigurationError(MISSING_ETHEREUM_CLIENT_MESSAGE)
    return web3


def _token_contract(web3: EthereumClient, tx: Transaction) -> Contract:
    return web3.eth.contract(address=tx.token_address, abi=ERC1404_ABI)


def _restriction(code: object, message: object) -> list[TransferRestriction]:
    return [
        TransferRestriction(
            code=str(code),
            text=(
                f"Got error code {code} ('{message}') from on-chain "
                "detectTransferRestriction method"
            ),
        )
    ]


def check_transfer_restriction(
    web3: EthereumClient | None,
    tx: Transaction,
) -> list[TransferRestriction]:
    """Reasons ``tx`` would be rejected on-chain; empty when it is expected to clear."""

    client = _require_client(web3)
    token = _token_contract(client, tx)
    code = token.functions.detectTransferRestriction(
        tx.from_wallet,
        tx.to_wallet,
        tx.qty_base_units,
    ).call()
    logger.debug("detectTransferRestriction token=%s code=%s", tx.token_address, code)
    if int(code) == SUCCESS_CODE:
        return []

    message = token.functions.messageForTransferRestriction(code).call()
    return _restriction(code, message)


async def async_check_transfer_restriction(
    web3: EthereumClient | None,
    tx: Transaction,
) -> list[TransferRestriction]:
    client = _require_client(web3)
    token = _token_contract(client, tx)
    code = await token.functions.detectTransferRestriction(
        tx.from_wallet,
        tx.to_wallet,
        tx.qty_base_units,
    ).call()
    logger.debug("detectTransferRestriction token=%s code=%s", tx.token_address, code)
    if int(code) == SUCCESS_CODE:
        return []

    message = await token.functions.messageForTransferRestriction(code).call()
    return _restriction(code, message)


__all__ = [
    "MISSING_ETHEREUM_CLIENT_MESSAGE",
    "EthereumClient",
    "Transaction",
    "TransferRestriction",
    "check_transfer_restriction",
    "async_check_transfer_restriction",
]
