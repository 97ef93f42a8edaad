# school_console/infrastructure/models.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..domain.entities import Department, Student, Teacher, UserRole


class EntityKind(str, Enum):
    DEPARTMENT = "departments"
    STUDENT = "students"
    TEACHER = "teachers"
    USER = "users"


@dataclass(frozen=True)
class UserRecord:
    id: str
    name: str
    email: str
    credential_hash: str
    role: UserRole = UserRole.USER

    def __repr__(self) -> str:
        return f"UserRecord(id={self.id!r}, email={self.email!r}, role={self.role.value!r})"


RECORD_TYPES: dict[EntityKind, type] = {
    EntityKind.DEPARTMENT: Department,
    EntityKind.STUDENT: Student,
    EntityKind.TEACHER: Teacher,
    EntityKind.USER: UserRecord,
}

__all__ = [
    "EntityKind",
    "UserRecord",
    "RECORD_TYPES",
]
