"""Public package exports for Tokensoft API client."""

from .async_client import AsyncTokensoftClient
from .client import TokensoftClient
from .config import TokensoftClientConfig, TransportConfig

__all__ = [
    "TokensoftClient",
    "AsyncTokensoftClient",
    "TokensoftClientConfig",
    "TransportConfig",
]
