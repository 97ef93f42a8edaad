import asyncio

import structlog

from ...application.dto import ViewRow
from ...application.join import UNKNOWN_DEPARTMENT, department_lookup, join_department_names
from ...domain.entities import Teacher
from ...domain.errors import ConsoleError, NotFound
from ..facade import DataAccessFacade
from ..notifications import NotificationChannel

logger = structlog.get_logger(__name__)


class TeacherDetailsView:
    """Drill-down for a single teacher: the record, its department and the
    students enrolled in that department.

    When the teacher cannot be loaded ``teacher`` stays ``None`` and the
    navigator falls back to the teacher list.
    """

    title = "Teacher Details"

    def __init__(self, teacher_id: str, facade: DataAccessFacade, notifications: NotificationChannel,
                 unknown_label: str = UNKNOWN_DEPARTMENT):
        if not teacher_id:
            raise ValueError("teacher id is required")
        self.teacher_id = teacher_id
        self.facade = facade
        self.notifications = notifications
        self.unknown_label = unknown_label
        self.teacher: Teacher | None = None
        self.department_name = unknown_label
        self.students: list[ViewRow] = []
        self.loading = False
        self._generation = 0

    async def mount(self) -> bool:
        return await self.reload()

    def unmount(self) -> None:
        self._generation += 1
        self.loading = False

    async def _fetch(self):
        teacher = await self.facade.teachers.get(self.teacher_id)
        if not teacher.department_id:
            departments = await self.facade.departments.list()
            return teacher, departments, []
        departments, students = await asyncio.gather(
            self.facade.departments.list(),
            self.facade.students.list(teacher.department_id),
        )
        return teacher, departments, students

    async def reload(self) -> bool:
        self._generation += 1
        generation = self._generation
        self.loading = True
        try:
            teacher, departments, students = await self._fetch()
        except NotFound:
            if generation == self._generation:
                self.teacher = None
                self.notifications.error("Teacher not found")
            return False
        except ConsoleError as e:
            if generation == self._generation:
                self.teacher = None
                self.notifications.error(f"Failed to load teacher: {e}")
            return False
        finally:
            if generation == self._generation:
                self.loading = False
        if generation != self._generation:
            return False
        self.teacher = teacher
        self.department_name = department_lookup(departments).get(teacher.department_id, self.unknown_label)
        self.students = join_department_names(departments, students, self.unknown_label)
        logger.info("view_loaded", view="teacher_details", teacher_id=self.teacher_id, students=len(self.students))
        return True
