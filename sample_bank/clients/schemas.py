from datetime import date
from typing import List, Optional
from sample_bank.shared.schemas import Int64, TimeStampSchema, WireModel

class AccountBase(WireModel):
    id: Int64 = 0
    account_type: str = ""

class AccountPayload(AccountBase):
    # Ignored on write; accounts always belong to the enclosing client
    client_id: Int64 = 0

class AccountResponse(AccountBase, TimeStampSchema):
    id: int
    client_id: int


class ClientBase(WireModel):
    id: Int64 = 0
    first_name: str = ""
    last_name: str = ""
    date_of_birth: Optional[date] = None
    phone_number: str = ""
    account_number: Int64 = 0
    branch: str = ""
    occupation: str = ""
    snnit_number: Int64 = 0

class ClientPayload(ClientBase):
    """Body of POST/PUT /accounts. Server-assigned timestamps are not accepted."""
    accounts: List[AccountPayload] = []

class ClientResponse(ClientBase, TimeStampSchema):
    id: int
    accounts: List[AccountResponse] = []
