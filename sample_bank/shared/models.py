from datetime import datetime, timezone
from sqlalchemy import BigInteger, Column, DateTime, Integer


def utcnow() -> datetime:
    # Columns store naive UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)


# 64-bit identities; SQLite only autoincrements a plain INTEGER primary key
IdType = BigInteger().with_variant(Integer, "sqlite")


class IntegerIdMixin:
    id = Column(IdType, primary_key=True, autoincrement=True)

class TimestampMixin:
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
    deleted_at = Column(DateTime, nullable=True)

class AuditMixin(IntegerIdMixin, TimestampMixin):
    """Combines the integer identity and timestamps for standard entities."""
    pass
