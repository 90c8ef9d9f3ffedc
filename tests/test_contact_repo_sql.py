import pytest

from app.domain.entities.contact import Contact, Phone
from app.infrastructure.db.repositories.contact_repo_sql import ContactRepoSQL
from app.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from app.infrastructure.seed_data import demo_contacts


@pytest.fixture
def repo(db_session) -> ContactRepoSQL:
    return ContactRepoSQL(db_session)


@pytest.fixture
def tx(db_session) -> SQLAlchemyTransactionManager:
    return SQLAlchemyTransactionManager(db_session)


async def _seed(repo, tx):
    async with tx.start():
        for contact in demo_contacts():
            await repo.create(contact)


async def test_create_assigns_ids_to_contact_and_phones(repo, tx):
    contact = Contact(
        first_name="Jan",
        last_name="Kowalski",
        phones=[Phone(number="111-111-1111", description="Domowy")],
    )
    async with tx.start():
        await repo.create(contact)

    assert contact.id is not None
    assert contact.phones[0].id is not None
    assert contact.phones[0].contact_id == contact.id

    stored = await repo.get(contact.id)
    assert stored.full_name == "Jan Kowalski"
    assert stored.email is None
    assert [p.number for p in stored.phones] == ["111-111-1111"]


async def test_list_orders_by_id_and_filters_last_name(repo, tx):
    await _seed(repo, tx)

    everyone = await repo.list()
    assert [c.last_name for c in everyone] == ["Kowalski", "Nowak"]

    assert [c.last_name for c in await repo.list("NOW")] == ["Nowak"]
    assert await repo.list("zzz") == []


async def test_search_treats_wildcards_literally(repo, tx):
    await _seed(repo, tx)
    assert await repo.list("%") == []


async def test_get_unknown_returns_none(repo):
    assert await repo.get(123) is None


async def test_update_keeps_phones(repo, tx):
    await _seed(repo, tx)

    async with tx.start():
        updated = await repo.update(
            Contact(id=1, first_name="Janusz", last_name="Kowalski", email="janusz@u.pl")
        )
    assert updated is True

    stored = await repo.get(1)
    assert stored.first_name == "Janusz"
    assert stored.email == "janusz@u.pl"
    assert len(stored.phones) == 2


async def test_update_unknown_returns_false(repo, tx):
    async with tx.start():
        assert await repo.update(Contact(id=99, first_name="A", last_name="B")) is False


async def test_delete_removes_contact_and_phones(repo, tx):
    await _seed(repo, tx)

    async with tx.start():
        assert await repo.delete(1) is True
    assert await repo.get(1) is None

    async with tx.start():
        assert await repo.delete(1) is False


async def test_failed_transaction_rolls_back(repo, tx):
    with pytest.raises(RuntimeError):
        async with tx.start():
            await repo.create(Contact(first_name="Anna", last_name="Zielinska"))
            raise RuntimeError("boom")

    assert await repo.list() == []
