"""ERC-1404 (simple restricted token) contract interface."""

from __future__ import annotations

SUCCESS_CODE = 0

ERC1404_ABI: list[dict[str, object]] = [
    {
        "constant": True,
        "inputs": [
            {"name": "from", "type": "address"},
            {"name": "to", "type": "address"},
            {"name": "value", "type": "uint256"},
        ],
        "name": "detectTransferRestriction",
        "outputs": [{"name": "", "type": "uint8"}],
        "payable": False,
        "stateMutability": "view",
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [{"name": "restrictionCode", "type": "uint8"}],
        "name": "messageForTransferRestriction",
        "outputs": [{"name": "", "type": "string"}],
        "payable": False,
        "stateMutability": "view",
        "type": "function",
    },
]


__all__ = [
    "SUCCESS_CODE",
    "ERC1404_ABI",
]
