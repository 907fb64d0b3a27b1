from sqlalchemy import BigInteger, Column, Date, ForeignKey, String
from sqlalchemy.orm import relationship
from sample_bank.database import Base
from sample_bank.shared.models import AuditMixin


class Client(Base, AuditMixin):
    """Bank customer; owns its accounts."""
    __tablename__ = "clients"

    first_name = Column(String, nullable=False, default="")
    last_name = Column(String, nullable=False, default="")
    date_of_birth = Column(Date, nullable=True)
    phone_number = Column(String, nullable=False, default="")
    account_number = Column(BigInteger, nullable=False, default=0)
    branch = Column(String, nullable=False, default="")
    occupation = Column(String, nullable=False, default="")
    snnit_number = Column(BigInteger, nullable=False, default=0)

    accounts = relationship(
        "Account",
        back_populates="client",
        cascade="all, delete-orphan",
        order_by="Account.id",
    )


class Account(Base, AuditMixin):
    __tablename__ = "accounts"

    account_type = Column(String, nullable=False, default="")  # "checking" | "savings" | "current"
    client_id = Column(ForeignKey("clients.id"), nullable=False, index=True)

    client = relationship("Client", back_populates="accounts")
