import time
from typing import Any, Mapping

import structlog
from pydantic import BaseModel

from ..application.use_cases.login_user import LoginUser
from ..application.use_cases.register_user import RegisterUser
from ..domain.entities import User
from ..domain.errors import ConsoleError
from ..infrastructure.metrics import facade_request_duration_seconds, facade_requests_total
from ..infrastructure.models import EntityKind
from ..infrastructure.repositories import UserRepository
from ..infrastructure.security import PasswordHasher
from ..infrastructure.store import EntityStore

logger = structlog.get_logger(__name__)


def _fields(payload: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(payload, BaseModel):
        return payload.model_dump(exclude_none=True)
    return {k: v for k, v in payload.items() if v is not None}


class _InstrumentedApi:
    entity = ""

    async def _observe(self, operation: str, awaitable):
        start_time = time.perf_counter()
        status = "ok"
        try:
            return await awaitable
        except ConsoleError as e:
            status = type(e).__name__
            raise
        except Exception:
            status = "error"
            raise
        finally:
            # Метрики и логирование каждого вызова
            duration = time.perf_counter() - start_time
            facade_requests_total.labels(entity=self.entity, operation=operation, status=status).inc()
            facade_request_duration_seconds.labels(entity=self.entity, operation=operation).observe(duration)
            logger.info(
                "facade_call",
                entity=self.entity,
                operation=operation,
                status=status,
                duration_ms=round(duration * 1000, 2),
            )


class AuthApi(_InstrumentedApi):
    entity = "auth"

    def __init__(self, store: EntityStore, hasher: PasswordHasher):
        self.repo = UserRepository(store)
        self.hasher = hasher

    async def login(self, email: str, credential: str) -> User:
        uc = LoginUser(repo=self.repo, hasher=self.hasher)
        return await self._observe("login", uc.execute(email, credential))

    async def register(self, name: str, email: str, credential: str) -> User:
        uc = RegisterUser(repo=self.repo, hasher=self.hasher)
        return await self._observe("register", uc.execute(name, email, credential))


class EntityApi(_InstrumentedApi):
    def __init__(self, store: EntityStore, kind: EntityKind):
        self.store = store
        self.kind = kind
        self.entity = kind.value

    async def list(self) -> list:
        return await self._observe("list", self.store.list(self.kind))

    async def get(self, entity_id: str):
        return await self._observe("get", self.store.get(self.kind, entity_id))

    async def create(self, payload: BaseModel | Mapping[str, Any]):
        return await self._observe("create", self.store.create(self.kind, _fields(payload)))

    async def update(self, entity_id: str, payload: BaseModel | Mapping[str, Any]):
        return await self._observe("update", self.store.update(self.kind, entity_id, _fields(payload)))

    async def delete(self, entity_id: str) -> bool:
        return await self._observe("delete", self.store.delete(self.kind, entity_id))


class PersonApi(EntityApi):
    async def list(self, department_id: str | None = None) -> list:
        rows = await super().list()
        # пустой id означает "все кафедры"
        if department_id:
            return [r for r in rows if r.department_id == department_id]
        return rows


class DataAccessFacade:
    """Единственная точка доступа к хранилищу для контроллеров."""

    def __init__(self, store: EntityStore, hasher: PasswordHasher | None = None):
        self.store = store
        self.auth = AuthApi(store, hasher or PasswordHasher())
        self.departments = EntityApi(store, EntityKind.DEPARTMENT)
        self.students = PersonApi(store, EntityKind.STUDENT)
        self.teachers = PersonApi(store, EntityKind.TEACHER)


__all__ = [
    "DataAccessFacade",
    "AuthApi",
    "EntityApi",
    "PersonApi",
]
