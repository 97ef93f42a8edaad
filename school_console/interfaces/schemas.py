from datetime import date

from email_validator import validate_email
from pydantic import BaseModel, EmailStr, Field, ValidationInfo, field_validator


def _stored_value(info: ValidationInfo):
    # значения, с которыми форма редактирования была открыта
    stored = (info.context or {}).get("stored") or {}
    return stored.get(info.field_name)

class LoginReq(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)

class RegisterReq(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=6)

class DepartmentCreate(BaseModel):
    name: str = Field(min_length=1)
    code: str = Field(min_length=1)
    description: str = ""

class PersonCreate(BaseModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    department_id: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def email_format(cls, v: str, info: ValidationInfo) -> str:
        """Check the address but keep it exactly as typed."""
        if v != _stored_value(info):
            validate_email(v, check_deliverability=False, test_environment=True)
        return v

class StudentCreate(PersonCreate):
    enrollment_date: str = Field(min_length=1)

    @field_validator("enrollment_date")
    @classmethod
    def iso_date(cls, v: str, info: ValidationInfo) -> str:
        if v != _stored_value(info):
            date.fromisoformat(v)
        return v

class TeacherCreate(PersonCreate):
    specialization: str = Field(min_length=1)

class DepartmentUpdate(BaseModel):
    name: str | None = None
    code: str | None = None
    description: str | None = None

class PersonUpdate(BaseModel):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    department_id: str | None = None

class StudentUpdate(PersonUpdate):
    enrollment_date: str | None = None

class TeacherUpdate(PersonUpdate):
    specialization: str | None = None
