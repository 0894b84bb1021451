"""
Observer used to report scan progress.
Listeners are registered per event name (scan_started, document_failed,
analysis_completed, scan_completed) and called with keyword arguments.
"""
import logging
from threading import Lock
from typing import Callable, Dict, List

logger = logging.getLogger(__name__)


class EventDispatcher:
    def __init__(self):
        self._listeners: Dict[str, List[Callable[..., None]]] = {}
        self._lock = Lock()

    def subscribe(self, event_name: str, callback: Callable[..., None]) -> None:
        with self._lock:
            self._listeners.setdefault(event_name, []).append(callback)

    def unsubscribe(self, event_name: str, callback: Callable[..., None]) -> None:
        with self._lock:
            callbacks = self._listeners.get(event_name, [])
            if callback in callbacks:
                callbacks.remove(callback)

    def dispatch(self, event_name: str, **payload) -> None:
        with self._lock:
            listeners = list(self._listeners.get(event_name, []))
        for listener in listeners:
            # A failing listener must not abort the scan that emitted the event
            try:
                listener(**payload)
            except Exception:
                logger.exception("Listener for '%s' failed", event_name)
