from sqlalchemy import BigInteger, Column, DateTime, String
from sample_bank.database import Base
from sample_bank.shared.models import AuditMixin


class AccountTransaction(Base, AuditMixin):
    """Ledger entry against an account. Not exposed by any endpoint."""
    __tablename__ = "account_transactions"

    amount = Column(BigInteger, nullable=False, default=0)
    transaction_date = Column(DateTime, nullable=True)
    account_id = Column(BigInteger, nullable=True, index=True)
    transaction_type = Column(String, nullable=False, default="")  # deposit, withdrawal, transfer
    transaction_by = Column(String, nullable=False, default="")
    transaction_from = Column(String, nullable=False, default="")  # atm, bank, online
