"""Create the tables and load the bundled demo teams.

    python seed_db.py
"""

import asyncio

from hackjudge.database import Base, async_session, engine
from hackjudge.logging_config import setup_logging
from hackjudge.seed_data import default_seed
from hackjudge.services.teams import seed_teams


async def async_main():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        count = await seed_teams(session, default_seed())

    await engine.dispose()
    print(f"Database seeded with {count} teams successfully.")


if __name__ == "__main__":
    setup_logging()
    asyncio.run(async_main())
