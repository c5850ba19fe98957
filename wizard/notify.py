"""Ready-made notification and navigation collaborators."""

from __future__ import annotations

import logging
from typing import List, Optional

from .base import Navigator, Notification, NotificationKind, Notifier

logger = logging.getLogger(__name__)

_LEVELS = {
    "success": logging.INFO,
    "failure": logging.WARNING,
    "error": logging.ERROR,
}


class LoggingNotifier(Notifier):
    """Writes notifications to the log."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self._log = log or logger

    def notify(self, kind: NotificationKind, title: str, detail: str = "") -> None:
        self._log.log(_LEVELS.get(kind, logging.INFO), "[%s] %s: %s", kind, title, detail)


class CollectingNotifier(Notifier):
    """Keeps notifications in memory so a caller can return them later.

    Usage::

        notifier = CollectingNotifier()
        # ... run a submission ...
        for n in notifier.drain():
            print(n.title)
    """

    def __init__(self, forward: Optional[Notifier] = None):
        self.notifications: List[Notification] = []
        self._forward = forward

    def notify(self, kind: NotificationKind, title: str, detail: str = "") -> None:
        self.notifications.append(Notification(kind=kind, title=title, detail=detail))
        if self._forward is not None:
            self._forward.notify(kind, title, detail)

    def drain(self) -> List[Notification]:
        drained, self.notifications = self.notifications, []
        return drained


class RecordingNavigator(Navigator):
    """Remembers where the wizard asked to go."""

    def __init__(self) -> None:
        self.destinations: List[str] = []

    def navigate(self, destination: str) -> None:
        logger.info("Navigating to %s", destination)
        self.destinations.append(destination)

    @property
    def last(self) -> Optional[str]:
        return self.destinations[-1] if self.destinations else None
