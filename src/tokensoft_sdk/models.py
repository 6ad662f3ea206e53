"""Tokensoft data model.

These records describe the remote schema. They are what projections are
validated against, and input records are serialized with their wire
(camelCase) names. Every output field defaults to ``None`` because the
server only returns what a projection asks for.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .core.projection import wire_field


class UserAccreditationStatus(enum.IntEnum):
    NONE = 0
    PENDING = 1
    EXPIRED = 2
    DOCUMENTATION_EXPIRED = 3
    FINISHED = 4
    FAILED = 5


class UserAccreditationMode(enum.IntEnum):
    SELF = 0
    TOKENSOFT = 1
    VI = 2
    BYPASS = 3


class InvestorType(str, enum.Enum):
    MYSELF = "MYSELF"
    ENTITY = "ENTITY"


class Chain(str, enum.Enum):
    BITCOIN = "BITCOIN"
    ETHEREUM = "ETHEREUM"


class ReceiveAddressType(str, enum.Enum):
    UNKNOWN = "UNKNOWN"
    CUSTODIAN = "CUSTODIAN"


@dataclass(slots=True, frozen=True)
class KycFile:
    upload_id: str | None = None
    title: str | None = None
    link: str | None = None
    value: str | None = None
    created_at: str | None = None


@dataclass(slots=True, frozen=True)
class AdditionalKycField:
    key: str | None = None
    value: str | None = None
    description: str | None = None


@dataclass(slots=True, frozen=True)
class Address:
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    dob: str | None = None
    flat_number: str | None = None
    building_number: str | None = None
    building_name: str | None = None
    street_line_one: str | None = None
    street_line_two: str | None = None
    country: str | None = None
    state: str | None = None
    city: str | None = None
    zip_code: str | None = None
    phone_number: str | None = None
    investor_type: str | None = None
    entity_title: str | None = None
    entity_name: str | None = None
    entity_country: str | None = None
    entity_flat_number: str | None = None
    entity_building_number: str | None = None
    entity_building_name: str | None = None
    entity_street_line_one: str | None = None
    entity_street_line_two: str | None = None
    entity_city: str | None = None
    entity_state: str | None = None
    entity_zip_code: str | None = None
    entity_dba: str | None = None
    entity_phone_number: str | None = None
    additional_kyc_fields: tuple[AdditionalKycField, ...] | None = None


@dataclass(slots=True, frozen=True)
class TwoFactor:
    enabled: bool | None = None


@dataclass(slots=True, frozen=True)
class SaleRoundDocument:
    title: str | None = None
    created_at: str | None = None
    link: str | None = None


@dataclass(slots=True, frozen=True)
class SaleRound:
    name: str | None = None
    accepted_terms: bool | None = None
    payment_amount: str | None = None
    tokens: str | None = None
    committed_amount: str | None = None
    documents: SaleRoundDocument | None = None


@dataclass(slots=True, frozen=True)
class User:
    id: str | None = None
    email: str | None = None
    email_verified: bool | None = None
    has_tia: bool | None = None
    registered: bool | None = None
    role: str | None = None
    accepted_ts_terms: bool | None = wire_field("acceptedTSTerms", default=None)
    accreditation_status: UserAccreditationStatus | None = None
    accreditation_mode: UserAccreditationMode | None = None
    accreditation_expiration: str | None = None
    kyc_status: str | None = None
    kyc_only: bool | None = None
    kyc_upload_files: tuple[KycFile, ...] | None = None
    address: Address | None = None
    two_factor: TwoFactor | None = None
    token: str | None = None
    token_expiry: str | None = None
    okta_id_token: str | None = None
    token_refresh: str | None = None
    permissions: tuple[str, ...] | None = None
    rounds: tuple[SaleRound, ...] | None = None
    requires_pw_upgrade: bool | None = None
    last_login: str | None = None


@dataclass(slots=True, frozen=True)
class AdminParticipantUserWithSaleStatus:
    id: str | None = None
    accepted_terms: bool | None = None
    payment_completed: bool | None = None
    selected_payment_method: str | None = None
    kyc_status: str | None = None
    kyc_expiration_date: str | None = None
    payment_amount: float | None = None
    payment_expiration: str | None = None
    usd_tracking_number: str | None = None
    eth_payment_code: str | None = None
    eth_payment_payload: str | None = None
    payment_details_confirmed: bool | None = None
    updated_at: str | None = None
    user_id: User | None = None
    participating_round_ids: tuple[str, ...] | None = None


@dataclass(slots=True, frozen=True)
class Round:
    extra_kyc_countries_for_entity_investor: tuple[str, ...] | None = None
    id: str | None = None
    name: str | None = None
    round_description: str | None = None
    cleared_users: tuple[str, ...] | None = None
    clearance_required: bool | None = None
    sale_cap: float | None = None
    sale_cap_hit: bool | None = None
    sale_terms_uri: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    created_at: str | None = None
    tenant: str | None = None
    token_contract: str | None = None


@dataclass(slots=True, frozen=True)
class EntityRoles:
    entity_sale_status_id: str | None = None
    name: str | None = None
    percent_ownership: str | None = None
    accepted: str | None = None
    roles: tuple[str, ...] | None = None
    entity_name: str | None = None
    entity_email: str | None = None
    invite_date: str | None = None


@dataclass(slots=True, frozen=True)
class SaleStatus:
    id: str | None = None
    user_id: str | None = None
    user_obj: User | None = None
    tenant_id: str | None = None
    accepted_terms: bool | None = None
    entity_roles: tuple[EntityRoles, ...] | None = None
    min_purchase_amount: float | None = None
    max_purchase_amount: float | None = None
    payment_completed: bool | None = None
    kyc_status: str | None = None
    kyc_expiration_date: str | None = None
    kyc_only: bool | None = None
    external_identifier: str | None = None
    title: str | None = None


@dataclass(slots=True, frozen=True)
class AccountInput:
    address: str
    name: str
    chain: Chain
    type: ReceiveAddressType
    whitelist: str
    primary: bool | None = None


@dataclass(slots=True, frozen=True)
class Account:
    id: str | None = None
    address: str | None = None
    name: str | None = None
    chain: Chain | None = None
    type: ReceiveAddressType | None = None
    whitelist: str | None = None
    created_at: str | None = None
    primary: bool | None = None
    enabled: bool | None = None
    balance: str | None = None
    whitelist_request: str | None = None


@dataclass(slots=True, frozen=True)
class AddressInput:
    first_name: str
    last_name: str
    building_number: str
    street_line_one: str
    country: str
    state: str
    city: str
    zip_code: str
    investor_type: InvestorType
    dob: str | None = None
    flat_number: str | None = None
    building_name: str | None = None
    street_line_two: str | None = None
    phone_number: str | None = None
    entity_name: str | None = None
    entity_building_number: str | None = None
    entity_street_line_one: str | None = None
    entity_city: str | None = None
    entity_zip_code: str | None = None
    entity_state: str | None = None
    entity_country: str | None = None
    entity_phone_number: str | None = None


@dataclass(slots=True, frozen=True)
class ExternalWhitelistUserInput:
    token_contract_address: str
    email: str
    address: AddressInput
    account: AccountInput


@dataclass(slots=True, frozen=True)
class ExternalUserLookupData:
    id: str | None = None
    email: str | None = None
    address: Address | None = None
    accounts: tuple[Account, ...] | None = None


@dataclass(slots=True, frozen=True)
class ExternalUserLookupResponse:
    status: str | None = None
    message: str | None = None
    data: ExternalUserLookupData | None = None


__all__ = [
    "UserAccreditationStatus",
    "UserAccreditationMode",
    "InvestorType",
    "Chain",
    "ReceiveAddressType",
    "KycFile",
    "AdditionalKycField",
    "Address",
    "TwoFactor",
    "SaleRoundDocument",
    "SaleRound",
    "User",
    "AdminParticipantUserWithSaleStatus",
    "Round",
    "EntityRoles",
    "SaleStatus",
    "AccountInput",
    "Account",
    "AddressInput",
    "ExternalWhitelistUserInput",
    "ExternalUserLookupData",
    "ExternalUserLookupResponse",
]
