from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tokensoft_sdk.config import TokensoftClientConfig  # noqa: E402


@pytest.fixture
def config() -> TokensoftClientConfig:
    cfg = TokensoftClientConfig(
        api_url="https://api.tokensoft.test/graphql",
        key_id="key-1",
        secret_key="secret-1",
    )
    cfg.validate()
    return cfg
