import asyncio

import structlog

from ...application.dto import DashboardStats
from ...domain.errors import ConsoleError
from ..facade import DataAccessFacade
from ..notifications import NotificationChannel

logger = structlog.get_logger(__name__)


class DashboardView:
    title = "Dashboard"

    def __init__(self, facade: DataAccessFacade, notifications: NotificationChannel):
        self.facade = facade
        self.notifications = notifications
        self.stats = DashboardStats()
        self.loading = False
        self._generation = 0

    async def mount(self) -> bool:
        return await self.reload()

    def unmount(self) -> None:
        self._generation += 1
        self.loading = False

    async def reload(self) -> bool:
        self._generation += 1
        generation = self._generation
        self.loading = True
        try:
            departments, students, teachers = await asyncio.gather(
                self.facade.departments.list(),
                self.facade.students.list(),
                self.facade.teachers.list(),
            )
        except ConsoleError as e:
            if generation == self._generation:
                self.notifications.error(f"Failed to load dashboard: {e}")
            return False
        finally:
            if generation == self._generation:
                self.loading = False
        if generation != self._generation:
            return False
        self.stats = DashboardStats(
            departments=len(departments),
            students=len(students),
            teachers=len(teachers),
        )
        logger.info("view_loaded", view="dashboard", **vars(self.stats))
        return True
