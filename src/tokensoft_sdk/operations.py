"""GraphQL operations shared by the sync/async clients.

Each builder validates the caller's projection against the record type it
projects, renders it into the query and returns an ``Operation`` naming the
``data`` key the result is read from.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .core.projection import Projection, render_projection, to_wire, validate_projection
from .core.signing import serialize_request
from .models import (
    Account,
    AccountInput,
    Address,
    ExternalUserLookupResponse,
    ExternalWhitelistUserInput,
    Round,
    SaleStatus,
    User,
)


@dataclass(slots=True, frozen=True)
class Operation:
    query: str
    field: str
    variables: Mapping[str, object] | None = None

    def to_body(self) -> str:
        return serialize_request(self.query, self.variables)


def _selection(record_type: type, projection: Projection) -> str:
    validate_projection(record_type, projection)
    return render_projection(projection)


ADMIN_PARTICIPANT_USERS_SELECTION = """{
        totalUsers
        users {
            id
            acceptedTerms
            paymentCompleted
            selectedPaymentMethod
            kycStatus
            kycExpirationDate
            paymentAmount
            paymentExpiration
            usdTrackingNumber
            ethPaymentCode
            ethPaymentPayload
            paymentDetailsConfirmed
            updatedAt
            userId { id email }
            participatingRoundIds
        }
    }"""


def current_user() -> Operation:
    return Operation(query="{ currentUser {id email } }", field="currentUser")


def admin_participant_users(
    *,
    search_value: str,
    page: int,
    page_size: int,
    sort_dir: str,
    sort_by_column: str,
) -> Operation:
    query = (
        "query ($searchValue: String, $page: String, $pageSize: String, "
        "$sortDir: String, $sortByColumn: String) {\n"
        "    adminParticipantUsers(searchValue: $searchValue, page: $page, "
        "pageSize: $pageSize, sortDir: $sortDir, sortByColumn: $sortByColumn) "
        f"{ADMIN_PARTICIPANT_USERS_SELECTION}\n"
        "}"
    )
    return Operation(
        query=query,
        field="adminParticipantUsers",
        variables={
            "searchValue": search_value,
            "page": str(page),
            "pageSize": str(page_size),
            "sortDir": sort_dir,
            "sortByColumn": sort_by_column,
        },
    )


def get_user_by_id(user_id: str, projection: Projection) -> Operation:
    return Operation(
        query=f"query ($id: String!) {{ user (id: $id) {_selection(User, projection)} }}",
        field="user",
        variables={"id": user_id},
    )


def get_user_by_email(email: str, projection: Projection) -> Operation:
    return Operation(
        query=(
            "query ($email: String!) { userEmailLookup(email: $email) "
            f"{_selection(User, projection)} }}"
        ),
        field="userEmailLookup",
        variables={"email": email},
    )


def create_unregistered_user(email: str, projection: Projection) -> Operation:
    return Operation(
        query=(
            "mutation createUnregisteredUser($email: String!) { "
            f"createUnregisteredUser(email: $email) {_selection(User, projection)} }}"
        ),
        field="createUnregisteredUser",
        variables={"email": email},
    )


def update_user_details(user_id: str, address: Address, projection: Projection) -> Operation:
    return Operation(
        query=(
            "mutation updateUserDetails($id: String!, $address: Address!) { "
            "updateUserDetails(id: $id, address: $address) "
            f"{_selection(User, projection)} }}"
        ),
        field="updateUserDetails",
        variables={"id": user_id, "address": to_wire(address)},
    )


def get_rounds(projection: Projection) -> Operation:
    return Operation(
        query=f"query {{ getRounds {_selection(Round, projection)} }}",
        field="getRounds",
    )


def find_sale_status_from_user_email(
    email: str,
    round_id: str,
    projection: Projection,
) -> Operation:
    return Operation(
        query=(
            "query ($email: String!, $roundId: String!) { "
            "findSaleStatusFromUserEmail(email: $email, roundId: $roundId) "
            f"{_selection(SaleStatus, projection)} }}"
        ),
        field="findSaleStatusFromUserEmail",
        variables={"email": email, "roundId": round_id},
    )


def find_user_by_eth_address(address: str, projection: Projection) -> Operation:
    return Operation(
        query=(
            "query ($addr: String!) { findUserByEthAddress(address: $addr) "
            f"{_selection(User, projection)} }}"
        ),
        field="findUserByEthAddress",
        variables={"addr": address},
    )


def get_accounts(
    sale_status_id: str,
    token_contract_id: str,
    projection: Projection,
) -> Operation:
    return Operation(
        query=(
            "query ($saleStatusId: String!, $tokenContractId: String!) { "
            "getAccounts(saleStatusId: $saleStatusId, tokenContractId: $tokenContractId) "
            f"{_selection(Account, projection)} }}"
        ),
        field="getAccounts",
        variables={"saleStatusId": sale_status_id, "tokenContractId": token_contract_id},
    )


def get_user_accounts(user_id: str, projection: Projection) -> Operation:
    return Operation(
        query=(
            "query ($userId: String!) { getUserAccounts(id: $userId) "
            f"{_selection(Account, projection)} }}"
        ),
        field="getUserAccounts",
        variables={"userId": user_id},
    )


def add_account(account: AccountInput, projection: Projection) -> Operation:
    return Operation(
        query=(
            "mutation ($account: AccountInputType!) { addAccount(account: $account) "
            f"{_selection(Account, projection)} }}"
        ),
        field="addAccount",
        variables={"account": to_wire(account)},
    )


def whitelist_account(
    account_id: str,
    token_contract_id: str,
    webhook_url: str | None = None,
) -> Operation:
    return Operation(
        query=(
            "mutation ($accountId: String!, $tokenContractId: String!, $webhookUrl: String) { "
            "whitelistUser(accountId: $accountId, tokenContractId: $tokenContractId, "
            "callback: $webhookUrl) }"
        ),
        field="whitelistUser",
        variables={
            "accountId": account_id,
            "tokenContractId": token_contract_id,
            "webhookUrl": webhook_url,
        },
    )


def external_whitelist_user(
    user_input: ExternalWhitelistUserInput,
    projection: Projection,
) -> Operation:
    return Operation(
        query=(
            "mutation ($input: ExternalWhitelistUserInput!) { "
            "externalWhitelistUser(input: $input) "
            f"{_selection(ExternalUserLookupResponse, projection)} }}"
        ),
        field="externalWhitelistUser",
        variables={"input": to_wire(user_input)},
    )


__all__ = [
    "Operation",
    "ADMIN_PARTICIPANT_USERS_SELECTION",
    "current_user",
    "admin_participant_users",
    "get_user_by_id",
    "get_user_by_email",
    "create_unregistered_user",
    "update_user_details",
    "get_rounds",
    "find_sale_status_from_user_email",
    "find_user_by_eth_address",
    "get_accounts",
    "get_user_accounts",
    "add_account",
    "whitelist_account",
    "external_whitelist_user",
]
