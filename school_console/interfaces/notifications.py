import asyncio
import itertools
from datetime import datetime, timezone

import structlog

from ..domain.entities import Notification, Severity

logger = structlog.get_logger(__name__)


class NotificationChannel:
    """Queue of transient messages, each removed after ``ttl`` seconds.

    Pushing never blocks: expiry is scheduled with ``loop.call_later`` on the
    running loop. Outside a running loop the notification stays until it is
    dismissed or the channel is closed.
    """

    def __init__(self, ttl: float = 5.0):
        self.ttl = ttl
        self._ids = itertools.count(1)
        self._items: list[Notification] = []
        self._timers: dict[int, asyncio.TimerHandle] = {}

    @property
    def active(self) -> list[Notification]:
        return list(self._items)

    def push(self, message: str, severity: Severity = Severity.SUCCESS) -> Notification:
        item = Notification(
            id=next(self._ids),
            message=message,
            severity=severity,
            created_at=datetime.now(timezone.utc),
        )
        self._items.append(item)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None
        if loop is not None:
            self._timers[item.id] = loop.call_later(self.ttl, self._expire, item.id)
        logger.info("notification_pushed", id=item.id, severity=severity.value, message=message)
        return item

    def success(self, message: str) -> Notification:
        return self.push(message, Severity.SUCCESS)

    def error(self, message: str) -> Notification:
        return self.push(message, Severity.ERROR)

    def _expire(self, notification_id: int) -> None:
        self._timers.pop(notification_id, None)
        self._items = [n for n in self._items if n.id != notification_id]

    def dismiss(self, notification_id: int) -> bool:
        timer = self._timers.pop(notification_id, None)
        if timer is not None:
            timer.cancel()
        before = len(self._items)
        self._items = [n for n in self._items if n.id != notification_id]
        return len(self._items) != before

    def close(self) -> None:
        for timer in self._timers.values():
            timer.cancel()
        self._timers.clear()
        self._items.clear()
