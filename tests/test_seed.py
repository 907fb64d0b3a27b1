import pytest

from sample_bank.clients.service import ClientService
from sample_bank.database import Database
from sample_bank.scripts.seed import seed_data


@pytest.mark.asyncio
async def test_seed_creates_demo_client(database: Database):
    client = await seed_data(database)

    async with database.session_factory() as session:
        stored = await ClientService(session).find_by_id(client.id)
    assert (stored.first_name, stored.last_name, stored.branch) == ("Kofi", "Mensah", "Dansoman")
    assert stored.account_number == 111222333345
    assert [a.account_type for a in stored.accounts] == ["checking", "savings", "current"]
