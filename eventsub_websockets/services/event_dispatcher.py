import asyncio
import inspect
import logging
from collections import defaultdict
from threading import Lock
from typing import Any, Callable, Dict, List, Protocol, Set

import sentry_sdk

from eventsub_websockets.services.helper import get_error_details, log_error

logger = logging.getLogger(__name__)

EventCallback = Callable[[Any], Any]


class EventNotifier(Protocol):
    """What a notification handler needs from the client's event registry."""

    def register(self, event_name: str, callback: EventCallback) -> None: ...

    def notify(self, event_name: str, args: Any) -> int: ...


class EventDispatcher:
    """Named-event registry shared by every handler of one client."""

    def __init__(self) -> None:
        self._callbacks: Dict[str, List[EventCallback]] = defaultdict(list)
        self._pending: Set[asyncio.Task] = set()
        self._lock = Lock()

    def register(self, event_name: str, callback: EventCallback) -> None:
        if not isinstance(event_name, str) or not event_name.strip():
            raise ValueError("event_name must be a non-empty string.")
        with self._lock:
            self._callbacks[event_name].append(callback)

    def unregister(self, event_name: str, callback: EventCallback) -> bool:
        with self._lock:
            callbacks = self._callbacks.get(event_name, [])
            if callback not in callbacks:
                return False
            callbacks.remove(callback)
            return True

    def has_subscribers(self, event_name: str) -> bool:
        with self._lock:
            return bool(self._callbacks.get(event_name))

    def notify(self, event_name: str, args: Any) -> int:
        """
        Call every callback registered for ``event_name`` with ``args``.

        Coroutine callbacks are scheduled on the running loop, or run to
        completion when there is none. Callback failures are logged and
        reported, never raised. Returns the number of callbacks invoked.
        """
        with self._lock:
            callbacks = list(self._callbacks.get(event_name, []))

        if not callbacks:
            logger.debug(f"No subscribers for {event_name}")
            return 0

        for callback in callbacks:
            try:
                result = callback(args)
                if inspect.isawaitable(result):
                    self._run_awaitable(event_name, result)
            except Exception as e:
                self._report_callback_error(event_name, e)
        return len(callbacks)

    def _run_awaitable(self, event_name: str, awaitable) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(_await(awaitable))
            return

        task = loop.create_task(_await(awaitable))
        self._pending.add(task)
        task.add_done_callback(lambda t: self._on_task_done(event_name, t))

    def _on_task_done(self, event_name: str, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if isinstance(exc, Exception):
            self._report_callback_error(event_name, exc)

    def _report_callback_error(self, event_name: str, e: Exception) -> None:
        error_details = get_error_details(e)
        log_error(
            f"Subscriber for {event_name} failed - Type: {error_details['type']}, Message: {error_details['message']}, Args: {error_details['args']}",
            error_details,
        )
        sentry_sdk.capture_exception(e)

    async def drain(self) -> None:
        """Wait for coroutine callbacks scheduled by notify to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)


async def _await(awaitable):
    return await awaitable
