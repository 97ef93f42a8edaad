from passlib.context import CryptContext

from ..config import settings


def make_context(rounds: int | None = None) -> CryptContext:
    return CryptContext(
        schemes=["pbkdf2_sha256"],
        deprecated="auto",
        pbkdf2_sha256__default_rounds=rounds or settings.PASSWORD_HASH_ROUNDS,
    )


class PasswordHasher:
    def __init__(self, rounds: int | None = None): self.pwd = make_context(rounds)
    def hash(self, plain: str) -> str: return self.pwd.hash(plain)
    def verify(self, plain: str, hashed: str) -> bool: return self.pwd.verify(plain, hashed)
