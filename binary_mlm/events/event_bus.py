# binary_mlm/events/event_bus.py
"""
Event bus for decoupled communication between components.
"""
from typing import Dict, List, Callable, Any
import logging
import asyncio

logger = logging.getLogger(__name__)


def handlerName(handler: Callable) -> str:
    # partials and callable objects have no __name__
    return getattr(handler, "__name__", repr(handler))


class EventBus:
    """
    In-process publish/subscribe.
    A failing handler is logged and never breaks the publisher.
    """

    _instance = None
    _handlers: Dict[str, List[Callable]] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._handlers = {}
        return cls._instance

    def subscribe(self, eventName: str, handler: Callable):
        """Subscribe handler to event."""
        self._handlers.setdefault(eventName, []).append(handler)
        logger.debug(f"Handler {handlerName(handler)} subscribed to {eventName}")

    def unsubscribe(self, eventName: str, handler: Callable):
        """Unsubscribe handler from event."""
        handlers = self._handlers.get(eventName, [])
        if handler in handlers:
            handlers.remove(handler)
            logger.debug(f"Handler {handlerName(handler)} unsubscribed from {eventName}")

    async def emit(self, eventName: str, data: Dict[str, Any]) -> int:
        """Emit event to all subscribers. Returns how many handlers succeeded."""
        handlers = list(self._handlers.get(eventName, []))
        if not handlers:
            return 0

        logger.debug(f"Emitting event {eventName} with data: {data}")

        delivered = 0
        for handler in handlers:
            try:
                if asyncio.iscoroutinefunction(handler):
                    await handler(data)
                else:
                    handler(data)
                delivered += 1
            except Exception as e:
                logger.error(f"Error in handler {handlerName(handler)} for event {eventName}: {e}")

        return delivered

    def clear(self):
        """Clear all event handlers."""
        self._handlers.clear()


# Global event bus instance
eventBus = EventBus()


class PlanEvents:
    """Compensation plan events."""

    PURCHASE_RECORDED = "purchase.recorded"
    COMMISSIONS_DISTRIBUTED = "commissions.distributed"

    LEVEL_COMMISSION_PAID = "level_commission.paid"
    MATCHING_BONUS_CREDITED = "matching_bonus.credited"
    ROYALTY_BONUS_CREDITED = "royalty_bonus.credited"
    REPURCHASE_DETECTED = "repurchase.detected"
