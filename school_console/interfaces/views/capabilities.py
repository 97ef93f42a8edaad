"""Per-entity capabilities consumed by the shared list controller.

The controller in :mod:`.base` never branches on the entity type. Everything
that differs between departments, students and teachers is described here:
how to reach the façade, which columns are shown and searched, and how a form
maps to a record and back.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from ...domain.entities import Department
from ...domain.errors import ValidationFailed
from ..facade import DataAccessFacade, EntityApi
from ..schemas import DepartmentCreate, StudentCreate, TeacherCreate


@dataclass(frozen=True)
class Column:
    key: str
    label: str


def validation_message(exc: ValidationError) -> str:
    fields = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "form"
        if loc not in fields:
            fields.append(loc)
    return "Please check the following fields: " + ", ".join(fields)


class EntityCapability(ABC):
    title: str = ""
    plural: str = ""
    display_columns: tuple[Column, ...] = ()
    searchable_fields: tuple[str, ...] = ()
    extra_field_name: str | None = None
    references_department = False
    create_schema: type[BaseModel]

    def __init__(self, facade: DataAccessFacade):
        self.facade = facade

    @property
    @abstractmethod
    def api(self) -> EntityApi: ...

    async def list(self, department_id: str | None = None) -> list:
        return await self.api.list()

    async def get(self, entity_id: str):
        return await self.api.get(entity_id)

    async def create(self, payload: BaseModel):
        return await self.api.create(payload)

    async def update(self, entity_id: str, payload: BaseModel):
        return await self.api.update(entity_id, payload)

    async def delete(self, entity_id: str) -> bool:
        return await self.api.delete(entity_id)

    @abstractmethod
    def blank_form(self) -> dict[str, str]: ...

    @abstractmethod
    def to_form(self, record: Any) -> dict[str, str]: ...

    @abstractmethod
    def describe(self, record: Any) -> str: ...

    def build_payload(self, form: dict[str, str], stored: dict[str, str] | None = None) -> BaseModel:
        """Validate the form before any façade call is made.

        ``stored`` is the form of the record being edited; values left as they
        were skip the format checks so an untouched edit saves what is stored.
        """
        try:
            return self.create_schema.model_validate(form, context={"stored": stored})
        except ValidationError as e:
            raise ValidationFailed(validation_message(e)) from e


class DepartmentCapability(EntityCapability):
    title = "Department"
    plural = "departments"
    display_columns = (
        Column("name", "Name"),
        Column("code", "Code"),
        Column("description", "Description"),
    )
    searchable_fields = ("id", "name", "code", "description")
    create_schema = DepartmentCreate

    @property
    def api(self) -> EntityApi:
        return self.facade.departments

    def blank_form(self) -> dict[str, str]:
        return {"name": "", "code": "", "description": ""}

    def to_form(self, record: Department) -> dict[str, str]:
        return {"name": record.name, "code": record.code, "description": record.description}

    def describe(self, record: Department) -> str:
        return record.name


class PersonCapability(EntityCapability):
    references_department = True

    async def list(self, department_id: str | None = None) -> list:
        return await self.api.list(department_id or None)

    def blank_form(self) -> dict[str, str]:
        return {
            "first_name": "",
            "last_name": "",
            "email": "",
            "department_id": "",
            self.extra_field_name: "",
        }

    def to_form(self, record) -> dict[str, str]:
        return {
            "first_name": record.first_name,
            "last_name": record.last_name,
            "email": record.email,
            "department_id": record.department_id,
            self.extra_field_name: getattr(record, self.extra_field_name),
        }

    def describe(self, record) -> str:
        return record.first_name


class StudentCapability(PersonCapability):
    title = "Student"
    plural = "students"
    extra_field_name = "enrollment_date"
    display_columns = (
        Column("first_name", "First Name"),
        Column("last_name", "Last Name"),
        Column("email", "Email"),
        Column("department_name", "Department"),
        Column("enrollment_date", "Enrolled"),
    )
    searchable_fields = ("id", "first_name", "last_name", "email", "department_name", "enrollment_date")
    create_schema = StudentCreate

    @property
    def api(self) -> EntityApi:
        return self.facade.students


class TeacherCapability(PersonCapability):
    title = "Teacher"
    plural = "teachers"
    extra_field_name = "specialization"
    display_columns = (
        Column("first_name", "First Name"),
        Column("last_name", "Last Name"),
        Column("email", "Email"),
        Column("department_name", "Department"),
        Column("specialization", "Specialization"),
    )
    searchable_fields = ("id", "first_name", "last_name", "email", "department_name", "specialization")
    create_schema = TeacherCreate

    @property
    def api(self) -> EntityApi:
        return self.facade.teachers
