# pyLegoHub/events.py

from collections import defaultdict
from typing import Callable, Dict, List


class EventEmitter:
    """
    A per-event-name registry of callbacks.
    Hubs, devices and transports use it to publish notifications to the application.
    """
    def __init__(self):
        self._listeners: Dict[str, List[Callable]] = defaultdict(list)

    def on(self, event: str, listener: Callable) -> Callable:
        """
        Registers a listener for an event. Returns the listener so it can be used as a decorator.
        """
        self._listeners[event].append(listener)
        self._on_new_listener(event)
        return listener

    def once(self, event: str, listener: Callable) -> Callable:
        """
        Registers a listener that is removed after its first call.
        """
        def wrapper(*args):
            self.remove_listener(event, wrapper)
            return listener(*args)
        return self.on(event, wrapper)

    def remove_listener(self, event: str, listener: Callable):
        listeners = self._listeners.get(event)
        if listeners and listener in listeners:
            listeners.remove(listener)

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, ()))

    def emit(self, event: str, *args) -> bool:
        """
        Calls every listener of the event in registration order.
        Returns True if the event had listeners.
        """
        listeners = list(self._listeners.get(event, ()))
        for listener in listeners:
            listener(*args)
        return bool(listeners)

    def _on_new_listener(self, event: str):
        """
        Hook for subclasses that react to listener registration.
        """
