import logging
from typing import List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from sample_bank.clients.models import Account, Client
from sample_bank.clients.schemas import ClientPayload
from sample_bank.exceptions import ClientNotFoundError
from sample_bank.shared.models import utcnow

logger = logging.getLogger(__name__)

CLIENT_FIELDS = (
    "first_name",
    "last_name",
    "date_of_birth",
    "phone_number",
    "account_number",
    "branch",
    "occupation",
    "snnit_number",
)


class ClientService:
    """Storage access for clients and the accounts they own."""

    def __init__(self, db: AsyncSession):
        self.db = db

    def _query(self, include_deleted: bool = False):
        query = select(Client).options(selectinload(Client.accounts)).execution_options(populate_existing=True)
        if not include_deleted:
            query = query.where(Client.deleted_at.is_(None))
        return query

    async def _get(self, client_id: int, include_deleted: bool = False):
        result = await self.db.execute(self._query(include_deleted).where(Client.id == client_id))
        return result.scalars().first()

    async def find_all(self) -> List[Client]:
        result = await self.db.execute(self._query())
        return list(result.scalars().all())

    async def find_by_id(self, client_id: int) -> Client:
        client = await self._get(client_id)
        if not client:
            raise ClientNotFoundError(client_id)
        return client

    async def exists(self, client_id: int) -> bool:
        result = await self.db.execute(
            select(Client.id).where(Client.id == client_id, Client.deleted_at.is_(None))
        )
        return result.scalar_one_or_none() is not None

    async def save(self, client_in: ClientPayload) -> Client:
        """
        Insert when ``client_in.id`` is 0, otherwise update the row with that id
        (inserting it under that id if it does not exist).

        The account collection is replaced by the payload's: accounts matched by
        id are updated, unmatched ones are created and the rest are deleted.
        Everything is committed in a single transaction.

        A soft-deleted row with the given id is updated and restored. An
        explicit-id insert does not advance the Postgres id sequence, so only
        ids that the sequence has already handed out should be passed here.
        """
        client = await self._get(client_in.id, include_deleted=True) if client_in.id else None
        existing = {}
        if client is None:
            client = Client(id=client_in.id or None)
            self.db.add(client)
        else:
            existing = {account.id: account for account in client.accounts}

        for field in CLIENT_FIELDS:
            setattr(client, field, getattr(client_in, field))
        client.updated_at = utcnow()
        client.deleted_at = None

        accounts = []
        for account_in in client_in.accounts:
            account = existing.get(account_in.id) if account_in.id else None
            if account is None:
                account = Account()
            account.account_type = account_in.account_type
            accounts.append(account)
        client.accounts = accounts

        await self.db.commit()
        logger.info("Saved client %s with %d account(s)", client.id, len(accounts))
        return await self.find_by_id(client.id)

    async def delete_by_id(self, client_id: int) -> None:
        client = await self.find_by_id(client_id)
        # Accounts are loaded, so the ORM cascade removes them too
        await self.db.delete(client)
        await self.db.commit()
        logger.info("Deleted client %s", client_id)
