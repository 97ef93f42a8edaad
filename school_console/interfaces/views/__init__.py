from .base import EntityView, Modal, ModalMode, ViewState
from .capabilities import (
    Column,
    DepartmentCapability,
    EntityCapability,
    StudentCapability,
    TeacherCapability,
)
from .dashboard import DashboardView
from .teacher_details import TeacherDetailsView

__all__ = [
    "Column",
    "DashboardView",
    "DepartmentCapability",
    "EntityCapability",
    "EntityView",
    "Modal",
    "ModalMode",
    "StudentCapability",
    "TeacherCapability",
    "TeacherDetailsView",
    "ViewState",
]
