import asyncio
import dataclasses
import uuid
from typing import Any, Iterable, Mapping

import structlog

from ..domain.errors import NotFound
from .models import RECORD_TYPES, EntityKind

logger = structlog.get_logger(__name__)

ID_LENGTH = 9


class EntityStore:
    """In-memory collections for every entity kind.

    Records are frozen dataclasses, so a list returned by ``list`` is a
    snapshot: later creates, updates and deletes never show up in it.
    Each async operation first waits ``latency_ms`` to imitate a network
    round trip.
    """

    def __init__(self, latency_ms: int = 0):
        self.latency_ms = latency_ms
        self._collections: dict[EntityKind, list[Any]] = {kind: [] for kind in EntityKind}

    async def _delay(self) -> None:
        # даже при нулевой задержке операция остаётся точкой переключения
        await asyncio.sleep(self.latency_ms / 1000)

    def _new_id(self, kind: EntityKind) -> str:
        taken = {r.id for r in self._collections[kind]}
        while True:
            candidate = uuid.uuid4().hex[:ID_LENGTH]
            if candidate not in taken:
                return candidate

    def _index(self, kind: EntityKind, entity_id: str) -> int | None:
        for idx, record in enumerate(self._collections[kind]):
            if record.id == entity_id:
                return idx
        return None

    def load(self, kind: EntityKind, records: Iterable[Any]) -> None:
        rows = self._collections[kind]
        for record in records:
            if self._index(kind, record.id) is not None:
                raise ValueError(f"duplicate {kind.value} id {record.id!r}")
            rows.append(record)

    async def list(self, kind: EntityKind) -> list[Any]:
        await self._delay()
        return list(self._collections[kind])

    async def get(self, kind: EntityKind, entity_id: str) -> Any:
        await self._delay()
        idx = self._index(kind, entity_id)
        if idx is None:
            raise NotFound(kind.value, entity_id)
        return self._collections[kind][idx]

    async def create(self, kind: EntityKind, fields: Mapping[str, Any]) -> Any:
        await self._delay()
        data = {k: v for k, v in fields.items() if k != "id"}
        record = RECORD_TYPES[kind](id=self._new_id(kind), **data)
        self._collections[kind].append(record)
        logger.debug("record_created", kind=kind.value, id=record.id)
        return record

    async def update(self, kind: EntityKind, entity_id: str, fields: Mapping[str, Any]) -> Any:
        await self._delay()
        idx = self._index(kind, entity_id)
        if idx is None:
            raise NotFound(kind.value, entity_id)
        # id неизменяем после создания
        data = {k: v for k, v in fields.items() if k != "id"}
        record = dataclasses.replace(self._collections[kind][idx], **data)
        self._collections[kind][idx] = record
        logger.debug("record_updated", kind=kind.value, id=entity_id, fields=sorted(data))
        return record

    async def delete(self, kind: EntityKind, entity_id: str) -> bool:
        await self._delay()
        # удаление идемпотентно: отсутствующий id тоже успех
        self._collections[kind] = [r for r in self._collections[kind] if r.id != entity_id]
        logger.debug("record_deleted", kind=kind.value, id=entity_id)
        return True
