import asyncio
from dataclasses import dataclass, field
from enum import Enum

import structlog

from ...application.dto import ViewRow
from ...application.filtering import filter_rows
from ...application.join import UNKNOWN_DEPARTMENT, join_department_names
from ...domain.entities import Department
from ...domain.errors import ConsoleError, ValidationFailed
from ..notifications import NotificationChannel
from .capabilities import EntityCapability

logger = structlog.get_logger(__name__)


class ViewState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    MODAL_OPEN = "modal_open"
    CONFIRMING_DELETE = "confirming_delete"


class ModalMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


@dataclass
class Modal:
    mode: ModalMode
    form: dict[str, str] = field(default_factory=dict)
    target: ViewRow | None = None


class EntityView:
    """List controller shared by the department, student and teacher screens.

    Every reload bumps a generation counter; a response that comes back after
    a newer reload was started is dropped, so the rows always reflect the
    latest trigger. Façade failures become error notifications and never leave
    the controller stuck in ``LOADING``.
    """

    def __init__(self, capability: EntityCapability, notifications: NotificationChannel,
                 unknown_label: str = UNKNOWN_DEPARTMENT):
        self.capability = capability
        self.notifications = notifications
        self.unknown_label = unknown_label
        self.rows: list[ViewRow] = []
        self.departments: list[Department] = []
        self.query = ""
        self.department_filter = ""
        self.loading = False
        self.loaded = False
        self.modal: Modal | None = None
        self.pending_delete: ViewRow | None = None
        self._generation = 0
        self._tasks: set[asyncio.Task] = set()

    @property
    def state(self) -> ViewState:
        if self.loading:
            return ViewState.LOADING
        if self.pending_delete is not None:
            return ViewState.CONFIRMING_DELETE
        if self.modal is not None:
            return ViewState.MODAL_OPEN
        if self.loaded:
            return ViewState.READY
        return ViewState.IDLE

    @property
    def title(self) -> str:
        return self.capability.plural.capitalize()

    # --- загрузка

    async def mount(self) -> bool:
        return await self.reload()

    def unmount(self) -> None:
        self._generation += 1
        for task in self._tasks:
            task.cancel()
        self._tasks.clear()
        self.loading = False
        self.modal = None
        self.pending_delete = None

    async def _fetch(self) -> tuple[list[ViewRow], list[Department]]:
        cap = self.capability
        if not cap.references_department:
            records = await cap.list()
            return [ViewRow(record=r) for r in records], []
        records, departments = await asyncio.gather(
            cap.list(self.department_filter or None),
            cap.facade.departments.list(),
        )
        return join_department_names(departments, records, self.unknown_label), departments

    def _begin(self) -> int:
        self._generation += 1
        self.loading = True
        return self._generation

    def _end(self, generation: int) -> None:
        # loading принадлежит только последней операции
        if generation == self._generation:
            self.loading = False

    async def reload(self) -> bool:
        generation = self._begin()
        try:
            rows, departments = await self._fetch()
        except ConsoleError as e:
            if generation == self._generation:
                self.notifications.error(f"Failed to load {self.capability.plural}: {e}")
            return False
        finally:
            self._end(generation)
        if generation != self._generation:
            logger.debug("stale_load_discarded", view=self.capability.plural, generation=generation)
            return False
        self.departments = departments
        self.rows = filter_rows(rows, self.query, self.capability.searchable_fields)
        self.loaded = True
        logger.info("view_loaded", view=self.capability.plural, rows=len(self.rows), query=self.query)
        return True

    def schedule_reload(self) -> asyncio.Task:
        task = asyncio.ensure_future(self.reload())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def set_query(self, text: str) -> bool:
        self.query = text
        return await self.reload()

    async def set_department_filter(self, department_id: str) -> bool:
        self.department_filter = department_id
        return await self.reload()

    # --- форма создания/редактирования

    def open_create(self) -> Modal:
        self.modal = Modal(mode=ModalMode.CREATE, form=self.capability.blank_form())
        return self.modal

    def open_edit(self, row: ViewRow) -> Modal:
        self.modal = Modal(mode=ModalMode.EDIT, form=self.capability.to_form(row.record), target=row)
        return self.modal

    def set_field(self, name: str, value: str) -> None:
        if self.modal is None:
            raise RuntimeError("no form is open")
        if name not in self.modal.form:
            raise KeyError(name)
        self.modal.form[name] = value

    def close_modal(self) -> None:
        self.modal = None

    async def submit(self) -> bool:
        modal = self.modal
        if modal is None:
            raise RuntimeError("no form is open")
        title = self.capability.title
        try:
            stored = self.capability.to_form(modal.target.record) if modal.mode is ModalMode.EDIT else None
            payload = self.capability.build_payload(modal.form, stored)
        except ValidationFailed as e:
            self.notifications.error(str(e))
            return False
        interrupted = self.loading
        generation = self._begin()
        try:
            if modal.mode is ModalMode.EDIT:
                await self.capability.update(modal.target.id, payload)
                message = f"{title} updated"
            else:
                await self.capability.create(payload)
                message = f"{title} created"
        except ConsoleError as e:
            self.notifications.error(f"Operation failed: {e}")
            failed = True
        else:
            failed = False
        finally:
            self._end(generation)
        if failed:
            # перебитая загрузка отброшена, её нужно повторить
            if interrupted:
                await self.reload()
            return False
        self.modal = None
        self.notifications.success(message)
        await self.reload()
        return True

    # --- удаление с подтверждением

    def request_delete(self, row: ViewRow) -> str:
        self.pending_delete = row
        return f"Are you sure you want to delete {self.capability.describe(row.record)}?"

    def cancel_delete(self) -> None:
        self.pending_delete = None

    async def confirm_delete(self) -> bool:
        target = self.pending_delete
        if target is None:
            raise RuntimeError("nothing to delete")
        self.pending_delete = None
        interrupted = self.loading
        generation = self._begin()
        try:
            await self.capability.delete(target.id)
        except ConsoleError as e:
            self.notifications.error(f"Delete failed: {e}")
            failed = True
        else:
            failed = False
        finally:
            self._end(generation)
        if failed:
            if interrupted:
                await self.reload()
            return False
        self.notifications.success("Deleted successfully")
        await self.reload()
        return True
