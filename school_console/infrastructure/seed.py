from ..domain.entities import Department, Student, Teacher, UserRole
from .models import EntityKind, UserRecord
from .security import PasswordHasher
from .store import EntityStore

DEPARTMENTS = [
    Department(id="1", name="Computer Science", code="CS", description="Software and Hardware engineering"),
    Department(id="2", name="Mathematics", code="MATH", description="Pure and Applied Mathematics"),
    Department(id="3", name="Physics", code="PHY", description="Study of matter and energy"),
]

STUDENTS = [
    Student(id="1", first_name="Alice", last_name="Smith", email="alice@school.edu",
            department_id="1", enrollment_date="2023-09-01"),
    Student(id="2", first_name="Bob", last_name="Johnson", email="bob@school.edu",
            department_id="2", enrollment_date="2023-09-01"),
]

TEACHERS = [
    Teacher(id="1", first_name="Dr. Emily", last_name="Brown", email="emily@school.edu",
            department_id="1", specialization="AI"),
    Teacher(id="2", first_name="Prof. Alan", last_name="Davis", email="alan@school.edu",
            department_id="2", specialization="Calculus"),
]

ADMIN_EMAIL = "admin@school.edu"
ADMIN_PASSWORD = "password"


def seed_store(store: EntityStore, hasher: PasswordHasher) -> None:
    store.load(EntityKind.DEPARTMENT, DEPARTMENTS)
    store.load(EntityKind.STUDENT, STUDENTS)
    store.load(EntityKind.TEACHER, TEACHERS)
    store.load(EntityKind.USER, [
        UserRecord(id="u1", name="Admin User", email=ADMIN_EMAIL,
                   credential_hash=hasher.hash(ADMIN_PASSWORD), role=UserRole.ADMIN),
    ])
