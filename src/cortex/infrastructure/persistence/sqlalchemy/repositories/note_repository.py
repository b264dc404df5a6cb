"""SQLAlchemy implementation of NoteRepository."""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from cortex.domain.notes.entities import Note
from cortex.domain.notes.repositories import NoteRepository
from cortex.domain.shared.time import ensure_tz_aware
from cortex.infrastructure.persistence.sqlalchemy.models import NoteModel


class NoteRepositorySQLAlchemy(NoteRepository):
    """SQLAlchemy implementation of NoteRepository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, note: Note) -> None:
        existing = await self._session.get(NoteModel, note.id)

        if existing:
            existing.title = note.title
            existing.content = note.content
            existing.summary = note.summary
            existing.type = note.type
            existing.tags = note.tags
            existing.priority = note.priority
            existing.is_public = note.is_public
            existing.source_url = note.source_url
            existing.file_name = note.file_name
            existing.file_type = note.file_type
            existing.user_id = note.user_id
            existing.updated_at = note.updated_at
        else:
            model = NoteModel(
                id=note.id,
                user_id=note.user_id,
                title=note.title,
                content=note.content,
                summary=note.summary,
                type=note.type,
                tags=note.tags,
                priority=note.priority,
                is_public=note.is_public,
                source_url=note.source_url,
                file_name=note.file_name,
                file_type=note.file_type,
                created_at=note.created_at,
                updated_at=note.updated_at,
            )
            self._session.add(model)

        await self._session.flush()

    async def find_by_id(
        self,
        note_id: UUID,
        user_id: Optional[UUID] = None,
    ) -> Optional[Note]:
        stmt = select(NoteModel).where(NoteModel.id == note_id)
        if user_id is not None:
            stmt = stmt.where(NoteModel.user_id == user_id)

        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            return None

        return self._model_to_domain(model)

    async def list_all(self, user_id: Optional[UUID] = None) -> List[Note]:
        stmt = select(NoteModel).order_by(NoteModel.created_at.desc())
        if user_id is not None:
            stmt = stmt.where(NoteModel.user_id == user_id)

        result = await self._session.execute(stmt)
        return [self._model_to_domain(model) for model in result.scalars().all()]

    async def list_public(self, limit: int = 10) -> List[Note]:
        stmt = (
            select(NoteModel)
            .where(NoteModel.is_public == True)  # NOQA: E712
            .order_by(NoteModel.created_at.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._model_to_domain(model) for model in result.scalars().all()]

    async def search(self, text: str, user_id: Optional[UUID] = None) -> List[Note]:
        # Tags live in a JSON column, so exact tag matching is done in Python
        notes = await self.list_all(user_id=user_id)
        return [note for note in notes if note.matches(text)]

    async def delete(self, note_id: UUID) -> bool:
        stmt = delete(NoteModel).where(NoteModel.id == note_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount > 0

    def _model_to_domain(self, model: NoteModel) -> Note:
        return Note(
            id=model.id,
            title=model.title,
            content=model.content,
            type=model.type,
            tags=list(model.tags or []),
            summary=model.summary,
            is_public=model.is_public,
            priority=model.priority,
            source_url=model.source_url,
            file_name=model.file_name,
            file_type=model.file_type,
            user_id=model.user_id,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
