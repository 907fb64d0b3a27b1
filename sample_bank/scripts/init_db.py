import asyncio
from sample_bank.config import settings
from sample_bank.database import Database
from sample_bank.logging_config import setup_logging

async def init_models():
    database = Database(settings.SQLALCHEMY_DATABASE_URI)
    try:
        # await conn.run_sync(Base.metadata.drop_all) # Optional: Reset DB
        await database.create_all()
    finally:
        await database.dispose()
    print("Database tables created.")

if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL, sql_echo=settings.SQL_ECHO)
    asyncio.run(init_models())
