import asyncio
import sys
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root))

from sqlalchemy import func, select  # noqa: E402

from app.api.deps import AsyncSessionLocal, engine  # noqa: E402
from app.infrastructure.db.repositories.contact_repo_sql import ContactRepoSQL  # noqa: E402
from app.infrastructure.db.tables import contacts, metadata  # noqa: E402
from app.infrastructure.seed_data import demo_contacts  # noqa: E402


async def seed():
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
        print("Created missing tables.")

    async with AsyncSessionLocal() as session:
        async with session.begin():
            existing = (await session.execute(select(func.count()).select_from(contacts))).scalar_one()
            if existing:
                print(f"Store already holds {existing} contacts; nothing to seed.")
                return

            repo = ContactRepoSQL(session)
            for contact in demo_contacts():
                created = await repo.create(contact)
                print(f"Seeded contact {created.id}: {created.full_name}")

    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(seed())
