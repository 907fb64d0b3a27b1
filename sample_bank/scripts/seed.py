import asyncio
from datetime import date

from sample_bank.clients.schemas import AccountPayload, ClientPayload
from sample_bank.clients.service import ClientService
from sample_bank.config import settings
from sample_bank.database import Database
from sample_bank.logging_config import setup_logging

DEMO_CLIENT = ClientPayload(
    first_name="Kofi",
    last_name="Mensah",
    date_of_birth=date.today(),
    account_number=111222333345,
    branch="Dansoman",
    accounts=[
        AccountPayload(account_type="checking"),
        AccountPayload(account_type="savings"),
        AccountPayload(account_type="current"),
    ],
)


async def seed_data(database: Database):
    async with database.session_factory() as session:
        client = await ClientService(session).save(DEMO_CLIENT)
        print(f"Created client {client.id} with {len(client.accounts)} accounts")
        return client


async def main():
    database = Database(settings.SQLALCHEMY_DATABASE_URI)
    try:
        await database.create_all()
        await seed_data(database)
    finally:
        await database.dispose()

if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL, sql_echo=settings.SQL_ECHO)
    asyncio.run(main())
