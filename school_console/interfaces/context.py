from dataclasses import dataclass

from ..config import Settings
from .facade import DataAccessFacade
from .notifications import NotificationChannel


@dataclass
class AppContext:
    """Зависимости, которые явно передаются сверху вниз всем контроллерам."""
    settings: Settings
    facade: DataAccessFacade
    notifications: NotificationChannel
