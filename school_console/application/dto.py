from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ViewRow:
    """Запись сущности плюс имя кафедры, вычисленное при чтении."""
    record: Any
    department_name: str | None = None

    @property
    def id(self) -> str:
        return self.record.id

    def value(self, field: str) -> Any:
        if field == "department_name":
            return self.department_name
        return getattr(self.record, field)


@dataclass(frozen=True)
class DashboardStats:
    departments: int = 0
    students: int = 0
    teachers: int = 0
