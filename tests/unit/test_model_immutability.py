from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from tokensoft_sdk.core.models import ResponseEnvelope
from tokensoft_sdk.eth.restrictions import Transaction
from tokensoft_sdk.models import Address, User, UserAccreditationStatus


def test_envelope_errors_are_tuple_and_immutable():
    envelope = ResponseEnvelope(data={"a": 1}, errors=[])
    assert envelope.errors == ()
    assert isinstance(envelope.errors, tuple)
    with pytest.raises(FrozenInstanceError):
        envelope.data = None


def test_records_are_immutable():
    user = User(id="u1", address=Address(city="Austin"))
    with pytest.raises(FrozenInstanceError):
        user.email = "x"
    with pytest.raises(FrozenInstanceError):
        Transaction("0x1", "0xa", "0xb", 1).qty_base_units = 2


def test_accreditation_status_values_follow_wire_ordinals():
    assert UserAccreditationStatus.NONE == 0
    assert UserAccreditationStatus.FAILED == 5
