from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from sample_bank.clients.schemas import AccountResponse, ClientPayload, ClientResponse
from sample_bank.shared.schemas import format_timestamp
from sample_bank.transactions.schemas import AccountTransactionSchema


def make_response() -> ClientResponse:
    stamp = datetime(2024, 3, 1, 9, 30, 15)
    return ClientResponse(
        id=7,
        first_name="Efua",
        last_name="Boateng",
        date_of_birth=date(1992, 11, 23),
        phone_number="0244000000",
        account_number=1234567890123,
        branch="Adabraka",
        occupation="Nurse",
        snnit_number=5550001,
        created_at=stamp,
        updated_at=stamp,
        accounts=[AccountResponse(id=3, account_type="savings", client_id=7, created_at=stamp, updated_at=stamp)],
    )


def test_client_wire_names():
    data = make_response().model_dump(mode="json", by_alias=True)
    assert set(data) == {
        "id", "firstName", "lastName", "dateOfBirth", "phoneNumber", "accountNumber",
        "branch", "occupation", "snnitNumber", "accounts", "createdAt", "updatedAt", "deletedAt",
    }
    assert set(data["accounts"][0]) == {
        "id", "accountType", "clientId", "createdAt", "updatedAt", "deletedAt",
    }
    assert data["dateOfBirth"] == "1992-11-23"
    assert data["createdAt"] == "2024-03-01T09:30:15Z"
    assert data["deletedAt"] is None


def test_serialized_client_decodes_back():
    original = make_response()
    decoded = ClientPayload.model_validate_json(original.model_dump_json(by_alias=True))

    assert decoded.model_dump(exclude={"accounts"}) == original.model_dump(
        include=set(ClientPayload.model_fields) - {"accounts"}
    )
    assert [(a.id, a.account_type, a.client_id) for a in decoded.accounts] == [(3, "savings", 7)]


def test_payload_accepts_snake_case_names():
    decoded = ClientPayload.model_validate({"first_name": "Akosua", "snnit_number": 9})
    assert decoded.first_name == "Akosua"
    assert decoded.snnit_number == 9


def test_format_timestamp_converts_to_utc():
    aware = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    assert format_timestamp(aware) == "2024-01-01T10:00:00Z"
    assert format_timestamp(datetime(2024, 1, 1, 12, 0, 0, 999)) == "2024-01-01T12:00:00Z"


def test_account_transaction_wire_names():
    tx = AccountTransactionSchema.model_validate(
        {
            "amount": -2500,
            "transactionDate": "2024-05-05T08:00:00Z",
            "accountId": 4,
            "transactionType": "withdrawal",
            "transactionBy": "teller-12",
            "transactionFrom": "atm",
        }
    )
    assert tx.amount == -2500
    assert tx.transaction_from == "atm"

    data = tx.model_dump(mode="json", by_alias=True)
    assert data["transactionDate"] == "2024-05-05T08:00:00Z"
    assert data["transactionType"] == "withdrawal"
    assert data["accountId"] == 4


def test_integers_outside_64_bits_are_rejected():
    assert ClientPayload.model_validate({"accountNumber": 2**63 - 1}).account_number == 2**63 - 1
    with pytest.raises(ValidationError):
        ClientPayload.model_validate({"accountNumber": 2**63})
    with pytest.raises(ValidationError):
        ClientPayload.model_validate({"snnitNumber": -(2**63) - 1})
    with pytest.raises(ValidationError):
        AccountTransactionSchema.model_validate({"amount": 10**20})


def test_null_fields_decode_to_zero_values():
    decoded = ClientPayload.model_validate(
        {"firstName": None, "snnitNumber": None, "accounts": [{"id": None, "accountType": None}]}
    )
    assert decoded.first_name == ""
    assert decoded.snnit_number == 0
    assert decoded.accounts[0].id == 0
    assert decoded.accounts[0].account_type == ""
