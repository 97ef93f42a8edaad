from ..application.use_cases.register_user import IUserRepository
from ..domain.entities import User, UserRole
from .models import EntityKind, UserRecord
from .store import EntityStore


def to_domain(u: UserRecord) -> User:
    return User(id=u.id, name=u.name, email=u.email, role=u.role)


class UserRepository(IUserRepository):
    def __init__(self, store: EntityStore): self.store = store

    async def get_record_by_email(self, email: str) -> UserRecord | None:
        # сравнение email чувствительно к регистру
        rows = await self.store.list(EntityKind.USER)
        return next((r for r in rows if r.email == email), None)

    async def get_by_email(self, email: str) -> User | None:
        row = await self.get_record_by_email(email)
        return to_domain(row) if row else None

    async def create(self, name: str, email: str, credential_hash: str, role: UserRole = UserRole.USER) -> User:
        row = await self.store.create(
            EntityKind.USER,
            {"name": name, "email": email, "credential_hash": credential_hash, "role": role},
        )
        return to_domain(row)
