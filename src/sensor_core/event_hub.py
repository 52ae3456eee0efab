import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

# Topics
SENSOR_EVENT = "sensor_event"              # SensorSample from any feed
SENSOR_UPDATE = "sensor_update"            # SensorSample accepted into the store
ORIENTATION_UPDATE = "orientation_update"  # OrientationResult or None

Handler = Callable[[str, Any], Any]


class EventHub:
    """
    Topic based publish/subscribe.
    Once bound to a loop, every handler runs on that loop's thread, whichever
    thread published the message.
    """
    def __init__(self):
        self._subscribers: Dict[str, List[Handler]] = {}
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    def init(self, loop: Optional[asyncio.AbstractEventLoop]):
        """Bind to a dispatch loop, or unbind with None."""
        self._loop = loop

    def subscribe(self, topic: str, handler: Handler):
        handlers = self._subscribers.setdefault(topic, [])
        if handler not in handlers:
            handlers.append(handler)
        logger.debug(f"Subscribed to {topic}")

    def unsubscribe(self, topic: str, handler: Handler):
        handlers = self._subscribers.get(topic)
        if handlers and handler in handlers:
            handlers.remove(handler)
            logger.debug(f"Unsubscribed from {topic}")

    def unsubscribe_all(self):
        self._subscribers.clear()

    def has_subscribers(self, topic: str) -> bool:
        return bool(self._subscribers.get(topic))

    def send_all_on_topic(self, topic: str, message: Any):
        # Copy so handlers may (un)subscribe while we iterate
        for handler in self._subscribers.get(topic, [])[:]:
            try:
                self._dispatch(handler, topic, message)
            except Exception as e:
                logger.error(f"Error handling message on topic {topic}: {e}")

    def _dispatch(self, handler: Handler, topic: str, message: Any):
        is_coroutine = asyncio.iscoroutinefunction(handler)

        if self._loop is None:
            if is_coroutine:
                logger.warning(f"EventHub loop not initialized. Cannot dispatch async handler for {topic}")
            else:
                handler(topic, message)
            return

        try:
            current_loop = asyncio.get_running_loop()
        except RuntimeError:
            current_loop = None

        if current_loop is self._loop:
            if is_coroutine:
                self._loop.create_task(handler(topic, message))
            else:
                handler(topic, message)
        elif is_coroutine:
            asyncio.run_coroutine_threadsafe(handler(topic, message), self._loop)
        else:
            self._loop.call_soon_threadsafe(handler, topic, message)


# Global instance
event_hub = EventHub()

def init_event_hub(loop: Optional[asyncio.AbstractEventLoop]):
    """Bind the global event hub to the given loop (None unbinds it)."""
    event_hub.init(loop)
