from ...domain.entities import User
from ...domain.errors import InvalidCredentials


class LoginUser:
    def __init__(self, repo, hasher):
        self.repo = repo
        self.hasher = hasher

    async def execute(self, email: str, credential: str) -> User:
        row = await self.repo.get_record_by_email(email)
        if not row or not self.hasher.verify(credential, row.credential_hash):
            raise InvalidCredentials()
        return User(id=row.id, name=row.name, email=row.email, role=row.role)
