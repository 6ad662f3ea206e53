"""Public client entrypoint."""

from __future__ import annotations

from collections.abc import Mapping
from types import TracebackType
from typing import Any

from . import operations
from .client_shared import resolve_time_cache, validate_client_config
from .config import TokensoftClientConfig
from .core.errors import TokensoftClientClosedError, TokensoftConfigurationError
from .core.models import ResponseEnvelope
from .core.projection import Projection
from .core.response_parsing import unwrap_envelope
from .core.time_sync import ServerTimeCache
from .core.transport import SyncTransport
from .eth.restrictions import (
    EthereumClient,
    Transaction,
    TransferRestriction,
    check_transfer_restriction,
)
from .models import AccountInput, Address, ExternalWhitelistUserInput


class TokensoftClient:
    """Public Tokensoft API client.

    Methods taking a ``projection`` return the projected result as a plain
    dict keyed by wire field names (see ``tokensoft_sdk.core.projection``).
    """

    def __init__(
        self,
        *,
        config: TokensoftClientConfig,
        transport: SyncTransport | None = None,
        web3: EthereumClient | None = None,
        time_cache: ServerTimeCache | None = None,
    ) -> None:
        self._config = config
        validate_client_config(self._config)
        if transport is not None and time_cache is not None:
            raise TokensoftConfigurationError(
                "time_cache cannot be combined with an injected transport; "
                "pass the cache to the transport instead"
            )

        self._transport = transport or SyncTransport(
            self._config,
            time_cache=resolve_time_cache(config=self._config, time_cache=time_cache),
        )
        self._web3 = web3
        self._closed = False

    def _ensure_open(self) -> None:
        if self._closed:
            raise TokensoftClientClosedError("TokensoftClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "TokensoftClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False

    def send_request(self, body: str) -> ResponseEnvelope:
        """Send a pre-serialized body as a signed call and return the raw envelope."""

        self._ensure_open()
        return self._transport.send_signed(body)

    def get_server_time(self) -> str:
        self._ensure_open()
        return self._transport.server_time()

    def _execute(self, op: operations.Operation) -> Any:
        envelope = self.send_request(op.to_body())
        return unwrap_envelope(envelope, expected=(op.field,)).get(op.field)

    def current_user(self) -> Mapping[str, Any]:
        """Currently authenticated user, as ``{"currentUser": {"id", "email"}}``."""

        op = operations.current_user()
        return unwrap_envelope(self.send_request(op.to_body()))

    def admin_participant_users(
        self,
        search_value: str,
        page: int,
        page_size: int,
        sort_dir: str,
        sort_by_column: str,
    ) -> Mapping[str, Any]:
        return self._execute(
            operations.admin_participant_users(
                search_value=search_value,
                page=page,
                page_size=page_size,
                sort_dir=sort_dir,
                sort_by_column=sort_by_column,
            )
        )

    def get_user_by_id(self, user_id: str, projection: Projection) -> dict[str, Any] | None:
        return self._execute(operations.get_user_by_id(user_id, projection))

    def get_user_by_email(self, email: str, projection: Projection) -> dict[str, Any] | None:
        return self._execute(operations.get_user_by_email(email, projection))

    def create_unregistered_user(self, email: str, projection: Projection) -> dict[str, Any]:
        """Register ``email``; the API reports an error if it is already registered."""

        return self._execute(operations.create_unregistered_user(email, projection))

    def update_user_details(
        self,
        user_id: str,
        address: Address,
        projection: Projection,
    ) -> dict[str, Any]:
        return self._execute(operations.update_user_details(user_id, address, projection))

    def get_rounds(self, projection: Projection) -> list[dict[str, Any]]:
        return self._execute(operations.get_rounds(projection))

    def find_sale_status_from_user_email(
        self,
        email: str,
        round_id: str,
        projection: Projection,
    ) -> dict[str, Any] | None:
        return self._execute(
            operations.find_sale_status_from_user_email(email, round_id, projection)
        )

    def find_user_by_eth_address(
        self,
        address: str,
        projection: Projection,
    ) -> dict[str, Any] | None:
        return self._execute(operations.find_user_by_eth_address(address, projection))

    def get_accounts(
        self,
        sale_status_id: str,
        token_contract_id: str,
        projection: Projection,
    ) -> list[dict[str, Any]]:
        return self._execute(
            operations.get_accounts(sale_status_id, token_contract_id, projection)
        )

    def get_user_accounts(self, user_id: str, projection: Projection) -> list[dict[str, Any]]:
        """All of a user's accounts, without needing a token contract id."""

        return self._execute(operations.get_user_accounts(user_id, projection))

    def add_account(self, account: AccountInput, projection: Projection) -> dict[str, Any]:
        return self._execute(operations.add_account(account, projection))

    def whitelist_account(
        self,
        account_id: str,
        token_contract_id: str,
        webhook_url: str | None = None,
    ) -> str:
        """Whitelist one account for one token.

        Returns the hash of the first blockchain transaction submitted for the
        whitelisting. That transaction may be dropped or replaced; only the
        webhook sent to ``webhook_url`` confirms the outcome.
        """

        return self._execute(
            operations.whitelist_account(account_id, token_contract_id, webhook_url)
        )

    def external_whitelist_user(
        self,
        user_input: ExternalWhitelistUserInput,
        projection: Projection,
    ) -> dict[str, Any]:
        return self._execute(operations.external_whitelist_user(user_input, projection))

    def detect_transfer_restriction(self, tx: Transaction) -> list[TransferRestriction]:
        self._ensure_open()
        return check_transfer_restriction(self._web3, tx)


__all__ = [
    "TokensoftClient",
]
