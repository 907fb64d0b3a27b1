from typing import Optional
from sample_bank.shared.schemas import Int64, Timestamp, TimeStampSchema


class AccountTransactionSchema(TimeStampSchema):
    amount: Int64 = 0
    transaction_date: Optional[Timestamp] = None
    account_id: Int64 = 0
    transaction_type: str = ""
    transaction_by: str = ""
    transaction_from: str = ""
