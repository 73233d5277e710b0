import logging
from typing import Callable, List, Optional

from pydantic import BaseModel


logger = logging.getLogger(__name__)


class Notification(BaseModel):
    title: str
    description: str
    variant: str = "destructive"


class Notifier:
    """Collects toast notifications and forwards them to an optional sink."""
    def __init__(self, sink: Optional[Callable[[Notification], None]] = None) -> None:
        self.sink = sink
        self.history: List[Notification] = []

    def __call__(self, title: str, description: str, variant: str = "destructive") -> Notification:
        notification = Notification(title=title, description=description, variant=variant)
        self.history.append(notification)
        logger.debug(f"notify: {title} - {description}")
        if self.sink is not None:
            self.sink(notification)
        return notification

    @property
    def last(self) -> Optional[Notification]:
        return self.history[-1] if self.history else None
