"""On-chain (ERC-1404) helpers."""

from .erc1404 import ERC1404_ABI
from .restrictions import (
    EthereumClient,
    Transaction,
    TransferRestriction,
    async_check_transfer_restriction,
    check_transfer_restriction,
)

__all__ = [
    "ERC1404_ABI",
    "EthereumClient",
    "Transaction",
    "TransferRestriction",
    "check_transfer_restriction",
    "async_check_transfer_restriction",
]
