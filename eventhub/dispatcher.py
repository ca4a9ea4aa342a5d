"""Register handlers by event name and dispatch events to them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


class DispatcherError(Exception):
    """Base class for dispatcher errors."""


class HandlerAlreadyRegisteredError(DispatcherError):
    """The handler is already registered for the event."""


class EventNotFoundError(DispatcherError, LookupError):
    """The event, or the handler under it, is not registered."""


class HandlerNotFoundError(DispatcherError, LookupError):
    """No handler is registered for the event."""


@dataclass
class Event:
    """A named event with a payload and its creation time."""

    name: str
    payload: Any = None
    date_time: datetime = field(default_factory=datetime.now)


class EventHandler(ABC):
    """Reacts to dispatched events."""

    @abstractmethod
    def handle(self, event: Event) -> None:
        """React to *event*."""


class EventDispatcher:
    """Keeps handlers, compared by identity, per event name."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}

    def register(self, event_name: str, handler: EventHandler) -> None:
        handlers = self._handlers.setdefault(event_name, [])
        if any(h is handler for h in handlers):
            raise HandlerAlreadyRegisteredError("handler already registered for this event")
        handlers.append(handler)

    def dispatch(self, event: Event) -> None:
        for handler in list(self._handlers.get(event.name, ())):
            handler.handle(event)

    def remove(self, event_name: str, handler: EventHandler) -> None:
        handlers = self._handlers.get(event_name, [])
        for index, registered in enumerate(handlers):
            if registered is handler:
                del handlers[index]
                return
        raise EventNotFoundError("event not found")

    def has(self, event_name: str, handler: EventHandler) -> bool:
        return any(h is handler for h in self._handlers.get(event_name, ()))

    def clear(self) -> None:
        self._handlers = {}

    def handlers(self, event_name: str) -> tuple[EventHandler, ...]:
        return tuple(self._handlers.get(event_name, ()))

    def event_names(self) -> list[str]:
        return list(self._handlers)