from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str
    role: UserRole = UserRole.USER


@dataclass(frozen=True)
class Department:
    id: str
    name: str
    code: str
    description: str = ""


@dataclass(frozen=True)
class Student:
    id: str
    first_name: str
    last_name: str
    email: str
    department_id: str
    enrollment_date: str


@dataclass(frozen=True)
class Teacher:
    id: str
    first_name: str
    last_name: str
    email: str
    department_id: str
    specialization: str


class Severity(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    id: int
    message: str
    severity: Severity
    created_at: datetime
