"""Tests for NoteRepositorySQLAlchemy against a temporary SQLite file."""

from uuid import uuid4

import pytest
import pytest_asyncio

from cortex.domain.notes.entities import Note
from cortex.domain.notes.value_objects import NoteType
from cortex.infrastructure.persistence.sqlalchemy import (
    NoteRepositorySQLAlchemy,
    create_engine,
    create_session_maker,
    create_tables,
)
from tests.shared.builders import BASE_TIME, make_note


@pytest_asyncio.fixture(scope="function")
async def async_engine(tmp_path):
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'notes.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def async_session(async_engine):
    session_maker = create_session_maker(async_engine)
    async with session_maker() as session:
        yield session
        await session.rollback()


@pytest.fixture
def repo(async_session) -> NoteRepositorySQLAlchemy:
    return NoteRepositorySQLAlchemy(async_session)


class TestSaveAndFind:
    @pytest.mark.asyncio
    async def test_round_trips_all_fields(self, repo):
        note = Note(
            title="Paper",
            content="https://example.com/paper.pdf",
            type=NoteType.LINK,
            tags=["ml", "reading"],
            summary="A paper",
            is_public=True,
            priority=70,
            source_url="https://example.com/paper.pdf",
            created_at=BASE_TIME,
        )
        await repo.save(note)

        found = await repo.find_by_id(note.id)

        assert found is not None
        assert found.title == "Paper"
        assert found.type == NoteType.LINK
        assert found.tags == ["ml", "reading"]
        assert found.priority == 70
        assert found.is_public is True
        assert found.source_url == "https://example.com/paper.pdf"
        assert found.created_at == BASE_TIME
        assert found.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_save_updates_existing_row(self, repo):
        note = make_note()
        await repo.save(note)

        note.toggle_public()
        await repo.save(note)

        found = await repo.find_by_id(note.id)
        assert found.is_public is True
        assert len(await repo.list_all()) == 1

    @pytest.mark.asyncio
    async def test_missing_note(self, repo):
        assert await repo.find_by_id(uuid4()) is None

    @pytest.mark.asyncio
    async def test_user_scope(self, repo):
        owner = uuid4()
        note = Note(title="mine", content="c", user_id=owner)
        await repo.save(note)

        assert await repo.find_by_id(note.id, user_id=owner) is not None
        assert await repo.find_by_id(note.id, user_id=uuid4()) is None
        assert await repo.list_all(user_id=uuid4()) == []


class TestListing:
    @pytest.mark.asyncio
    async def test_list_all_newest_first(self, repo):
        for i, title in enumerate(["first", "second", "third"]):
            await repo.save(make_note(title=title, minutes=i))

        notes = await repo.list_all()

        assert [n.title for n in notes] == ["third", "second", "first"]

    @pytest.mark.asyncio
    async def test_list_public_filters_and_limits(self, repo):
        for i in range(5):
            await repo.save(make_note(title=f"public {i}", is_public=True, minutes=i))
        await repo.save(make_note(title="private", minutes=10))

        notes = await repo.list_public(limit=3)

        assert [n.title for n in notes] == ["public 4", "public 3", "public 2"]

    @pytest.mark.asyncio
    async def test_search_matches_text_and_exact_tag(self, repo):
        await repo.save(make_note(title="Deploy checklist", tags=["ops"], minutes=0))
        await repo.save(make_note(title="Groceries", tags=["home"], minutes=1))

        assert [n.title for n in await repo.search("CHECKLIST")] == ["Deploy checklist"]
        assert [n.title for n in await repo.search("home")] == ["Groceries"]
        assert await repo.search("hom") == []


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete_existing(self, repo):
        note = make_note()
        await repo.save(note)

        assert await repo.delete(note.id) is True
        assert await repo.find_by_id(note.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing(self, repo):
        assert await repo.delete(uuid4()) is False
