from ...domain.entities import User, UserRole
from ...domain.errors import DuplicateUser


class IUserRepository:
    async def get_by_email(self, email: str) -> User | None: ...
    async def create(self, name: str, email: str, credential_hash: str, role: UserRole = UserRole.USER) -> User: ...


class IPasswordHasher:
    def hash(self, plain: str) -> str: ...


class RegisterUser:
    def __init__(self, repo: IUserRepository, hasher: IPasswordHasher):
        self.repo = repo
        self.hasher = hasher

    async def execute(self, name: str, email: str, credential: str) -> User:
        if await self.repo.get_by_email(email):
            raise DuplicateUser()
        credential_hash = self.hasher.hash(credential)
        return await self.repo.create(name, email, credential_hash)
