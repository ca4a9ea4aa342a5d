# eventhub

A small in-process event dispatcher. Handlers are registered under an event
name. Dispatching an event calls every handler registered for that event's
name, one after another, in the order they were registered.

## Installation

```
pip install eventhub
```

## Usage

```python
from eventhub.dispatcher import Event, EventDispatcher, EventHandler


class PrintHandler(EventHandler):
    def handle(self, event):
        print("got", event.name, event.payload)


dispatcher = EventDispatcher()
handler = PrintHandler()

dispatcher.register("order.created", handler)
dispatcher.dispatch(Event("order.created", {"id": 1}))  # prints: got order.created {'id': 1}

dispatcher.has("order.created", handler)       # True
dispatcher.handlers("order.created")           # (handler,)
dispatcher.event_names()                       # ['order.created']

dispatcher.remove("order.created", handler)
dispatcher.clear()
```

## API

All names live in `eventhub.dispatcher`.

- `Event(name, payload=None, date_time=...)`: a dataclass. `date_time`
  defaults to `datetime.now()` at creation.
- `EventHandler`: abstract base class; subclasses implement
  `handle(self, event)`.
- `EventDispatcher`:
  - `register(event_name, handler)` adds a handler under an event name. It
    raises `HandlerAlreadyRegisteredError` if that same handler object is
    already registered under that name. One handler may be registered under
    several event names.
  - `dispatch(event)` calls `handle(event)` on each handler registered under
    `event.name`, in registration order. With no handlers it does nothing.
    An exception raised by a handler propagates to the caller and the
    remaining handlers are not called.
  - `remove(event_name, handler)` removes the handler from that event name.
    It raises `EventNotFoundError` when the handler is not registered under
    that name.
  - `has(event_name, handler)` tells whether the handler is registered under
    that name.
  - `handlers(event_name)` returns the registered handlers as a tuple (empty
    if there are none).
  - `event_names()` returns a list of the event names that have been
    registered since the last `clear()`, including names whose handlers have
    all been removed.
  - `clear()` removes every handler for every event.

Handlers are compared by identity, not equality.

## Errors

All errors derive from `DispatcherError`. `EventNotFoundError` and
`HandlerNotFoundError` are also `LookupError`s. `HandlerNotFoundError` is
defined for callers to use; the dispatcher itself does not raise it.

## What it does not do

Everything happens in the calling thread and process. The package does not
talk to a message broker, queue events, run handlers concurrently or ship
any command-line producer or consumer.