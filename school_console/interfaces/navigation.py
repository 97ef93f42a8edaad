from dataclasses import dataclass
from enum import Enum

import structlog

from .context import AppContext
from .views import (
    DashboardView,
    DepartmentCapability,
    EntityView,
    StudentCapability,
    TeacherCapability,
    TeacherDetailsView,
)

logger = structlog.get_logger(__name__)


class ViewName(str, Enum):
    DASHBOARD = "dashboard"
    DEPARTMENTS = "departments"
    STUDENTS = "students"
    TEACHERS = "teachers"
    TEACHER_DETAILS = "teacher_details"


MENU = (ViewName.DASHBOARD, ViewName.DEPARTMENTS, ViewName.STUDENTS, ViewName.TEACHERS)

_CAPABILITIES = {
    ViewName.DEPARTMENTS: DepartmentCapability,
    ViewName.STUDENTS: StudentCapability,
    ViewName.TEACHERS: TeacherCapability,
}


@dataclass(frozen=True)
class Route:
    name: ViewName
    teacher_id: str | None = None


class Navigator:
    def __init__(self, context: AppContext):
        self.context = context
        self.route: Route | None = None
        self.view = None

    def _build(self, route: Route):
        ctx = self.context
        unknown = ctx.settings.UNKNOWN_DEPARTMENT_LABEL
        if route.name is ViewName.DASHBOARD:
            return DashboardView(ctx.facade, ctx.notifications)
        if route.name is ViewName.TEACHER_DETAILS:
            return TeacherDetailsView(route.teacher_id, ctx.facade, ctx.notifications, unknown)
        capability = _CAPABILITIES[route.name](ctx.facade)
        return EntityView(capability, ctx.notifications, unknown)

    async def _enter(self, route: Route):
        self.close()
        self.route = route
        view = self.view = self._build(route)
        logger.info("navigated", view=route.name.value, teacher_id=route.teacher_id)
        await view.mount()
        return view

    async def navigate(self, name: ViewName | str) -> None:
        name = ViewName(name)
        if name is ViewName.TEACHER_DETAILS:
            raise ValueError("use open_teacher_details() with a teacher id")
        await self._enter(Route(name))

    async def open_teacher_details(self, teacher_id: str) -> None:
        if not teacher_id:
            raise ValueError("teacher id is required")
        view = await self._enter(Route(ViewName.TEACHER_DETAILS, teacher_id))
        # учитель не найден, а карточка всё ещё на экране: возвращаемся к списку
        if self.view is view and view.teacher is None:
            await self._enter(Route(ViewName.TEACHERS))

    async def back(self) -> None:
        if self.route is not None and self.route.name is ViewName.TEACHER_DETAILS:
            await self._enter(Route(ViewName.TEACHERS))
        else:
            await self._enter(Route(ViewName.DASHBOARD))

    def close(self) -> None:
        if self.view is not None:
            self.view.unmount()
        self.view = None
        self.route = None
